"""Business analyst — requirements, data, process, cost and stakeholder analysis."""

from taskgenie.domain.agents.base import (
    HandoffRule,
    KeywordGroup,
    SpecialistAgent,
    ToolSpec,
    join_values,
)
from taskgenie.domain.value_objects.enums import AgentRole, Complexity, Priority, ToolKind


class BusinessAnalystAgent(SpecialistAgent):
    role = AgentRole.BUSINESS_ANALYST
    title = "Business Analyst"
    task_label = "Business analysis"

    capabilities = {
        "requirements_gathering": ("requirements", "specification", "user story", "acceptance criteria"),
        "data_analysis": ("data", "analytics", "insights", "metrics"),
        "process_optimization": ("process", "workflow", "optimization", "efficiency"),
        "business_intelligence": ("report", "dashboard", "kpi", "intelligence"),
        "stakeholder_management": ("stakeholder", "communication", "management", "user"),
        "project_planning": ("project", "planning", "timeline", "milestone"),
        "risk_assessment": ("risk", "compliance", "audit", "governance"),
        "cost_benefit_analysis": ("cost", "benefit", "roi", "investment"),
        "reporting_analytics": ("reporting", "analytics", "visualization", "insights"),
    }

    groups = (
        KeywordGroup(
            keywords=("requirements", "specification", "acceptance criteria", "user story", "feature request"),
            sentence="Requirements Analysis: Business requirements need analysis and documentation",
            actions=(
                "Gather and document detailed business requirements",
                "Define clear acceptance criteria and success metrics",
                "Identify stakeholders and their needs",
                "Create user stories and use cases",
                "Validate requirements with stakeholders",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="4-8 hours",
        ),
        KeywordGroup(
            keywords=("data", "analytics", "report", "dashboard", "metrics", "kpi", "insights"),
            sentence="Data Analysis: Data analysis and business intelligence needed",
            actions=(
                "Identify relevant data sources and metrics",
                "Perform comprehensive data analysis",
                "Create visualizations and dashboards",
                "Generate actionable business insights",
                "Present findings to stakeholders",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-6 hours",
        ),
        KeywordGroup(
            keywords=("process", "workflow", "optimization", "efficiency", "improvement", "automation"),
            sentence="Process Optimization: Business process analysis and improvement",
            actions=(
                "Map current business processes and workflows",
                "Identify bottlenecks and inefficiencies",
                "Design optimized process flows",
                "Calculate potential time and cost savings",
                "Create implementation roadmap",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="4-8 hours",
        ),
        KeywordGroup(
            keywords=("cost", "budget", "roi", "investment", "benefit", "financial", "revenue"),
            sentence="Financial Analysis: Cost-benefit and ROI analysis required",
            actions=(
                "Calculate total cost of ownership (TCO)",
                "Identify and quantify expected benefits",
                "Perform ROI and payback period analysis",
                "Assess financial risks and mitigation strategies",
                "Create financial justification report",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
        ),
        KeywordGroup(
            keywords=("stakeholder", "user", "customer", "client", "team", "communication"),
            sentence="Stakeholder Analysis: Stakeholder impact and communication planning",
            actions=(
                "Identify all affected stakeholders",
                "Assess impact levels for each stakeholder group",
                "Develop stakeholder communication plan",
                "Create change management strategy",
                "Schedule stakeholder review sessions",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-3 hours",
        ),
        KeywordGroup(
            keywords=("project", "timeline", "milestone", "deliverable", "scope", "planning"),
            sentence="Project Analysis: Project planning and scope analysis needed",
            actions=(
                "Define project scope and objectives",
                "Create detailed project timeline and milestones",
                "Identify project dependencies and risks",
                "Allocate resources and assign responsibilities",
                "Establish project monitoring and control mechanisms",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-6 hours",
        ),
        KeywordGroup(
            keywords=("risk", "compliance", "audit", "governance", "security", "regulation"),
            sentence="Risk Assessment: Business risk analysis and compliance review",
            actions=(
                "Identify potential business and technical risks",
                "Assess risk probability and impact levels",
                "Develop risk mitigation strategies",
                "Review compliance and regulatory requirements",
                "Create risk monitoring and reporting framework",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-5 hours",
            priority=Priority.HIGH,
        ),
        KeywordGroup(
            keywords=("integration", "system", "api", "workflow", "automation", "zendesk", "clickup"),
            sentence="System Integration Analysis: Integration requirements and workflow analysis",
            actions=(
                "Analyze current system integrations and workflows",
                "Identify integration gaps and opportunities",
                "Design optimal integration architecture",
                "Define data flow and transformation requirements",
                "Create integration testing and validation plan",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="4-6 hours",
        ),
        KeywordGroup(
            keywords=("performance", "quality", "sla", "benchmark", "measurement", "monitoring"),
            sentence="Performance Analysis: Performance metrics and quality assessment",
            actions=(
                "Define key performance indicators (KPIs)",
                "Establish baseline measurements and benchmarks",
                "Create performance monitoring framework",
                "Analyze current performance against targets",
                "Recommend performance improvement strategies",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
        ),
        KeywordGroup(
            keywords=("development", "coding", "technical implementation", "api development"),
            sentence="Technical Implementation: May require software development expertise",
            actions=("Collaborate with software engineer for technical implementation",),
            next_role=AgentRole.SOFTWARE_ENGINEER,
        ),
        KeywordGroup(
            keywords=("testing", "validation", "qa", "user acceptance testing"),
            sentence="Validation Needed: Outcome requires QA validation",
            actions=("Coordinate with QA team for comprehensive testing and validation",),
            next_role=AgentRole.QA_TESTER,
        ),
    )

    fallback_sentence = "General business review needed"
    fallback_actions = ("Clarify business objectives with the requester",)

    handoff_rules = (
        HandoffRule(
            AgentRole.SOFTWARE_ENGINEER,
            ("technical implementation", "api development", "system integration", "database design"),
        ),
        HandoffRule(
            AgentRole.QA_TESTER,
            ("user acceptance testing", "validation testing", "quality assurance"),
        ),
        HandoffRule(
            AgentRole.DEVOPS,
            ("infrastructure planning", "deployment strategy", "scalability analysis"),
        ),
        HandoffRule(
            AgentRole.WORDPRESS_DEVELOPER,
            ("wordpress business requirements", "ecommerce analysis", "content management"),
        ),
    )

    handle_keywords = (
        "requirements", "specification", "analysis", "data", "analytics", "report", "dashboard",
        "metrics", "kpi", "process", "workflow", "optimization", "efficiency", "cost", "budget",
        "roi", "investment", "stakeholder", "business", "strategy", "planning", "project",
    )

    tools = (
        ToolSpec(
            ToolKind.REQUIREMENTS_ANALYSIS,
            (("requirements", "specification"),),
            lambda ctx: (
                f"Requirements analysis: {ctx.get('requirement', 'General requirement')} for "
                f"stakeholders: {join_values(ctx.get('stakeholders', ['business users']))} "
                f"(Priority: {ctx.get('priority', 'medium')})"
            ),
        ),
        ToolSpec(
            ToolKind.DATA_ANALYSIS,
            (("data", "analytics"),),
            lambda ctx: (
                f"Data analysis from {ctx.get('data_source', 'system_data')}: "
                f"{join_values(ctx.get('metrics', ['performance', 'usage']))} "
                f"over {ctx.get('time_period', 'last_month')}"
            ),
        ),
        ToolSpec(
            ToolKind.PROCESS_OPTIMIZATION,
            (("process", "optimization"),),
            lambda ctx: (
                f"Process optimization for {ctx.get('process', 'business_process')}: "
                f"Current state - {ctx.get('current_state', 'baseline')}. "
                f"Improvements: {join_values(ctx.get('improvement_areas', ['efficiency']))}"
            ),
        ),
        ToolSpec(
            ToolKind.ROI_ANALYSIS,
            (("roi", "cost"),),
            lambda ctx: (
                f"ROI analysis: Investment ${ctx.get('investment', 0)}, "
                f"Benefits: {join_values(ctx.get('expected_benefits', ['cost_savings']))} "
                f"over {ctx.get('timeframe', '12_months')}"
            ),
        ),
        ToolSpec(
            ToolKind.STAKEHOLDER_IMPACT,
            (("stakeholder", "impact"),),
            lambda ctx: (
                f"Stakeholder impact assessment: {ctx.get('change', 'system_change')} affects "
                f"{join_values(ctx.get('stakeholders', ['end_users']))} "
                f"with {ctx.get('impact_level', 'medium')} impact"
            ),
        ),
        ToolSpec(
            ToolKind.REPORTING_DASHBOARD,
            (("report", "dashboard"),),
            lambda ctx: (
                f"BI Report: {ctx.get('report_type', 'performance_report')} tracking "
                f"{join_values(ctx.get('kpis', ['efficiency', 'quality']))} "
                f"for {ctx.get('audience', 'management')}"
            ),
        ),
    )

    default_recommendations = (
        "Business requirements analyzed and documented",
        "Stakeholder needs identified and prioritized",
        "Process improvements recommended",
        "ROI and cost-benefit analysis completed",
    )
