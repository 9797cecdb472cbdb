"""Static specialist profiles served by the capabilities endpoint."""

from dataclasses import dataclass

from taskgenie.domain.value_objects.enums import AgentRole


@dataclass(frozen=True)
class AgentProfile:
    role: AgentRole
    name: str
    description: str
    specialties: tuple[str, ...]
    confidence_threshold: float
    max_processing_time_ms: int
    priority: int  # lower number = higher priority


AGENT_PROFILES: dict[AgentRole, AgentProfile] = {
    AgentRole.SOFTWARE_ENGINEER: AgentProfile(
        role=AgentRole.SOFTWARE_ENGINEER,
        name="Software Engineer",
        description="Handles technical issues, bugs, feature requests, and development tasks",
        specialties=(
            "Bug fixes and troubleshooting",
            "Feature development and enhancement",
            "Code review and optimization",
            "API integration and development",
            "Database design and queries",
            "Performance optimization",
            "Security implementation",
        ),
        confidence_threshold=0.8,
        max_processing_time_ms=45000,
        priority=1,
    ),
    AgentRole.DEVOPS: AgentProfile(
        role=AgentRole.DEVOPS,
        name="DevOps Engineer",
        description="Manages infrastructure, deployment, monitoring, and operational issues",
        specialties=(
            "Infrastructure management and scaling",
            "CI/CD pipeline setup and optimization",
            "Monitoring and alerting systems",
            "Cloud platform management",
            "Container orchestration",
            "Security and compliance",
            "Backup and disaster recovery",
        ),
        confidence_threshold=0.75,
        max_processing_time_ms=40000,
        priority=2,
    ),
    AgentRole.QA_TESTER: AgentProfile(
        role=AgentRole.QA_TESTER,
        name="QA Tester",
        description="Handles testing, quality assurance, and validation issues",
        specialties=(
            "Test case design and execution",
            "Automated testing frameworks",
            "Regression testing strategies",
            "Performance and load testing",
            "Cross-browser compatibility testing",
            "Mobile and responsive testing",
            "Accessibility compliance testing",
        ),
        confidence_threshold=0.7,
        max_processing_time_ms=35000,
        priority=3,
    ),
    AgentRole.PROJECT_MANAGER: AgentProfile(
        role=AgentRole.PROJECT_MANAGER,
        name="Project Manager",
        description="Manages project coordination, timelines, and stakeholder communication",
        specialties=(
            "Project planning and scheduling",
            "Resource allocation and management",
            "Stakeholder communication",
            "Risk assessment and mitigation",
            "Progress tracking and reporting",
            "Team coordination and leadership",
            "Scope and requirement management",
        ),
        confidence_threshold=0.65,
        max_processing_time_ms=30000,
        priority=4,
    ),
    AgentRole.BUSINESS_ANALYST: AgentProfile(
        role=AgentRole.BUSINESS_ANALYST,
        name="Business Analyst",
        description="Analyzes business requirements, processes, and strategic decisions",
        specialties=(
            "Business requirement analysis",
            "Process optimization and design",
            "Data analysis and reporting",
            "KPI and metrics definition",
            "Stakeholder requirement gathering",
            "Cost-benefit analysis",
            "Strategic planning support",
        ),
        confidence_threshold=0.6,
        max_processing_time_ms=35000,
        priority=5,
    ),
    AgentRole.WORDPRESS_DEVELOPER: AgentProfile(
        role=AgentRole.WORDPRESS_DEVELOPER,
        name="WordPress Developer",
        description="Specializes in WordPress development, themes, plugins, and customization",
        specialties=(
            "WordPress theme development and customization",
            "Plugin development and integration",
            "Custom post types and fields",
            "WordPress security and optimization",
            "Gutenberg block development",
            "WooCommerce customization",
            "WordPress multisite management",
        ),
        confidence_threshold=0.75,
        max_processing_time_ms=40000,
        priority=6,
    ),
}
