"""DevOps — servers, deployments, cloud, monitoring, backups and networking."""

from taskgenie.domain.agents.base import (
    HandoffRule,
    KeywordGroup,
    SpecialistAgent,
    ToolSpec,
    join_values,
)
from taskgenie.domain.value_objects.enums import AgentRole, Complexity, Priority, ToolKind


class DevOpsAgent(SpecialistAgent):
    role = AgentRole.DEVOPS
    title = "DevOps"
    task_label = "DevOps infrastructure"

    capabilities = {
        "infrastructure_management": ("server", "infrastructure", "hosting", "cloud"),
        "deployment_automation": ("deployment", "deploy", "ci/cd", "pipeline"),
        "monitoring_alerting": ("monitoring", "alerts", "metrics", "observability"),
        "security_compliance": ("security", "compliance", "vulnerability", "ssl"),
        "backup_recovery": ("backup", "recovery", "disaster", "restore"),
        "network_administration": ("network", "dns", "firewall", "load balancer"),
        "cloud_services": ("aws", "azure", "gcp", "cloud", "kubernetes"),
        "containerization": ("docker", "container", "kubernetes", "orchestration"),
        "ci_cd_pipeline": ("pipeline", "build", "release", "automation"),
    }

    groups = (
        KeywordGroup(
            keywords=("server", "infrastructure", "hosting", "downtime", "outage"),
            sentence="Infrastructure Issue: Server health or availability problem",
            actions=(
                "Infrastructure impact: Server health check and resource monitoring needed",
                "Deployment considerations: Immediate system logs review and failover prep",
                "Monitoring: Set up alerts, est. time 1-6 hours (URGENT)",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="1-6 hours",
            priority=Priority.URGENT,
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("deployment", "deploy", "ci/cd", "pipeline", "build", "release"),
            sentence="Deployment Issue: CI/CD pipeline disruption possible",
            actions=(
                "Infrastructure impact: CI/CD pipeline disruption possible",
                "Deployment considerations: Review logs, test staging, prepare rollback",
                "Monitoring: Pipeline status tracking, est. time 2-4 hours",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("performance", "slow", "latency", "response time", "optimization"),
            sentence="Performance Issue: Bottleneck affecting system resources",
            actions=(
                "Infrastructure impact: Performance bottleneck affecting system resources",
                "Deployment considerations: Scaling policies and load balancing review",
                "Monitoring: Performance metrics analysis, est. time 4-8 hours",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="4-8 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("security", "vulnerability", "breach", "compliance", "ssl", "certificate"),
            sentence="Security Issue: Vulnerability requires immediate assessment",
            actions=(
                "Infrastructure impact: Security vulnerability requires immediate assessment",
                "Deployment considerations: Patch deployment and access control review",
                "Monitoring: Security audit and compliance check, est. time 3-8 hours (URGENT)",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-8 hours",
            priority=Priority.URGENT,
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("backup", "recovery", "disaster", "restore", "data loss"),
            sentence="Backup Issue: Data integrity and backup verification needed",
            actions=(
                "Infrastructure impact: Data integrity and backup system verification needed",
                "Deployment considerations: Recovery procedures and RTO/RPO testing",
                "Monitoring: Backup monitoring setup, est. time 3-6 hours",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-6 hours",
            priority=Priority.HIGH,
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("network", "connectivity", "dns", "firewall", "load balancer"),
            sentence="Network Issue: Network connectivity or configuration problem",
            actions=(
                "Diagnose network connectivity and routing",
                "Check firewall rules and security groups",
                "Verify DNS configuration and resolution",
                "Test load balancer health and distribution",
                "Monitor network performance and latency",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
        ),
        KeywordGroup(
            keywords=("aws", "azure", "gcp", "cloud", "kubernetes", "docker"),
            sentence="Cloud Services Issue: Cloud platform or containerization problem",
            actions=(
                "Review cloud service status and configurations",
                "Check container orchestration and scaling",
                "Verify cloud resource allocation and limits",
                "Monitor cloud costs and optimization opportunities",
                "Update cloud security and access policies",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-6 hours",
        ),
        KeywordGroup(
            keywords=("monitoring", "alerts", "metrics", "logging", "observability"),
            sentence="Monitoring Issue: System monitoring or alerting problem",
            actions=(
                "Review monitoring system configuration",
                "Set up comprehensive alerting rules",
                "Implement centralized logging and analysis",
                "Create monitoring dashboards and reports",
                "Test alert notification systems",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
        ),
        KeywordGroup(
            keywords=("application", "code", "api", "custom development"),
            sentence="Development Integration: May require software development expertise",
            actions=("Collaborate with software engineer for application-level issues",),
            next_role=AgentRole.SOFTWARE_ENGINEER,
        ),
        KeywordGroup(
            keywords=("database", "sql", "query optimization", "data migration"),
            sentence="Database Integration: Data-layer expertise needed",
            actions=("Coordinate with database specialist for data-related issues",),
            next_role=AgentRole.SOFTWARE_ENGINEER,
        ),
    )

    fallback_sentence = "General infrastructure review needed"
    fallback_actions = ("Review infrastructure health dashboards and recent changes",)

    handoff_rules = (
        HandoffRule(
            AgentRole.SOFTWARE_ENGINEER,
            ("application bug", "code issue", "api problem", "database optimization"),
        ),
        HandoffRule(
            AgentRole.WORDPRESS_DEVELOPER,
            ("wordpress hosting", "wp-cli", "wordpress performance"),
        ),
        HandoffRule(
            AgentRole.QA_TESTER,
            ("testing environment", "qa infrastructure", "test automation"),
        ),
        HandoffRule(
            AgentRole.BUSINESS_ANALYST,
            ("infrastructure reporting", "cost analysis", "capacity planning"),
        ),
    )

    handle_keywords = (
        "server", "infrastructure", "deployment", "ci/cd", "pipeline", "hosting", "cloud",
        "aws", "azure", "gcp", "kubernetes", "docker", "monitoring", "alerts", "backup",
        "recovery", "security", "network", "firewall", "load balancer", "ssl", "certificate",
        "performance", "scaling", "devops", "sysadmin",
    )

    tools = (
        ToolSpec(
            ToolKind.SERVER_HEALTH,
            (("server", "health"),),
            lambda ctx: (
                f"Server health check for {ctx.get('server', 'unknown')}: "
                f"{join_values(ctx.get('metrics', ['cpu', 'memory', 'disk']))}"
            ),
        ),
        ToolSpec(
            ToolKind.DEPLOYMENT_ANALYSIS,
            (("deployment",),),
            lambda ctx: (
                f"Deployment analysis: {ctx.get('environment', 'production')} - "
                f"{ctx.get('deployment_type', 'standard')} - {ctx.get('error', 'No error details')}"
            ),
        ),
        ToolSpec(
            ToolKind.INFRASTRUCTURE_MONITORING,
            (("monitoring", "infrastructure"),),
            lambda ctx: (
                f"Infrastructure monitoring: {ctx.get('service', 'unknown')} status: "
                f"{ctx.get('status', 'unknown')}, alerts: {join_values(ctx.get('alerts', []))}"
            ),
        ),
        ToolSpec(
            ToolKind.SECURITY_COMPLIANCE,
            (("security", "compliance"),),
            lambda ctx: (
                f"Security compliance check: {ctx.get('system', 'unknown')} - "
                f"{ctx.get('compliance_type', 'general')} - "
                f"findings: {join_values(ctx.get('findings', []))}"
            ),
        ),
        ToolSpec(
            ToolKind.BACKUP_RECOVERY,
            (("backup", "recovery"),),
            lambda ctx: (
                f"Backup/Recovery analysis: {ctx.get('backup_type', 'full')} - "
                f"RTO: {ctx.get('recovery_time', 'unknown')} - Status: {ctx.get('status', 'unknown')}"
            ),
        ),
        ToolSpec(
            ToolKind.NETWORK_DIAGNOSTICS,
            (("network",),),
            lambda ctx: (
                f"Network diagnostics: {ctx.get('network_component', 'unknown')} - "
                f"{ctx.get('issue_type', 'connectivity')} - Latency: {ctx.get('latency', 0)}ms"
            ),
        ),
    )

    default_recommendations = (
        "Infrastructure optimized and secured",
        "Monitoring and alerting configured",
        "Deployment pipeline stabilized",
        "Performance metrics improved",
    )
