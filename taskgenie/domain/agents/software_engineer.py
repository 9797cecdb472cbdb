"""Software engineer — application errors, APIs, databases, performance, security."""

from taskgenie.domain.agents.base import HandoffRule, KeywordGroup, SpecialistAgent, ToolSpec
from taskgenie.domain.value_objects.enums import AgentRole, Complexity, Priority, ToolKind

SERVER_ERROR_KEYWORDS = ("500", "internal server error", "server error")
FAILURE_KEYWORDS = ("error", "fail")


def _static(details: str):
    return lambda ctx: details


class SoftwareEngineerAgent(SpecialistAgent):
    role = AgentRole.SOFTWARE_ENGINEER
    title = "Software Engineer"
    task_label = "Technical analysis"

    capabilities = {
        "technical_analysis": ("bug", "error", "technical", "code", "system"),
        "code_review": ("code", "review", "programming", "development"),
        "api_integration": ("api", "integration", "webhook", "endpoint", "rest"),
        "backend_development": ("backend", "server", "database", "sql"),
        "database_optimization": ("database", "sql", "query", "performance"),
        "security_analysis": ("security", "vulnerability", "breach", "unauthorized"),
        "performance_tuning": ("performance", "slow", "optimization", "speed"),
        "debugging": ("debug", "error", "exception", "crash", "broken"),
        "architecture_design": ("architecture", "design", "scalability", "structure"),
    }

    groups = (
        KeywordGroup(
            keywords=("500", "internal server error", "server error", "http 500"),
            sentence="Server Error: 500 Internal Server Error reported",
            actions=(
                "Check server logs for specific error messages and stack traces",
                "Verify database connections and query performance",
                "Review recent code deployments that may have caused the issue",
                "Implement immediate rollback if recent deployment is the cause",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="1-3 hours",
            priority=Priority.URGENT,
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("404", "not found", "page not found", "missing"),
            sentence="Not Found: Requested resource or route is missing",
            actions=(
                "Check routing configuration and URL patterns",
                "Verify file paths and ensure resources exist",
                "Update redirects or restore missing content",
            ),
            complexity=Complexity.SIMPLE,
            estimated_time="1-2 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("timeout", "gateway timeout", "504", "connection timeout"),
            sentence="Timeout: Requests exceed response time limits",
            actions=(
                "Analyze slow queries and server response times",
                "Optimize database queries and increase timeout limits",
                "Monitor server performance and scale if needed",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("bug", "error", "exception", "crash", "broken"),
            sentence="Application Error: Defect in application behaviour",
            actions=(
                "Review error logs and stack traces",
                "Reproduce issue in development environment",
                "Implement fix with comprehensive testing",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="3-6 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("api",),
            requires=("error", "fail", "timeout"),
            sentence="API Failure: Endpoint calls failing",
            actions=(
                "Check API endpoint availability and response codes",
                "Verify API authentication tokens and credentials",
                "Review API rate limiting and timeout configurations",
                "Test API calls with debugging tools",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-3 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("performance", "slow", "optimization", "speed"),
            sentence="Performance Issue: Application bottleneck suspected",
            actions=(
                "Profile application and identify bottlenecks",
                "Optimize database queries and implement caching strategies",
                "Monitor improvements and scale resources",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="4-8 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("security", "vulnerability", "breach", "unauthorized"),
            sentence="Security Alert: Possible vulnerability or unauthorized access",
            actions=(
                "Conduct immediate security audit",
                "Patch vulnerabilities and review access controls",
                "Document incident and implement monitoring",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="6-12 hours",
            priority=Priority.URGENT,
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("database", "connection"),
            requires=("error", "fail", "timeout"),
            sentence="Database Connectivity: Connections failing",
            actions=(
                "Check database server status and connection pool",
                "Review database connection string configuration",
                "Analyze database performance and resource usage",
                "Test database connectivity from application server",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("wordpress", "plugin", "theme"),
            sentence="WordPress-specific issue detected, requires specialist review",
            next_role=AgentRole.WORDPRESS_DEVELOPER,
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("deploy", "deployment", "server", "infrastructure"),
            sentence="Infrastructure issue detected, requires DevOps analysis",
            next_role=AgentRole.DEVOPS,
            exclusive=True,
        ),
    )

    fallback_sentence = "General technical issue, investigation needed"
    fallback_actions = (
        "Investigate reported technical symptoms",
        "Review system logs for error patterns",
        "Test functionality in staging environment",
    )

    handoff_rules = (
        HandoffRule(AgentRole.WORDPRESS_DEVELOPER, ("wordpress", "wp-", "plugin", "theme", "woocommerce")),
        HandoffRule(AgentRole.DEVOPS, ("deploy", "server", "infrastructure", "docker", "kubernetes", "aws", "cloud")),
        HandoffRule(AgentRole.QA_TESTER, ("test", "testing", "qa", "quality", "automation test")),
    )

    handle_keywords = (
        "bug", "error", "api", "code", "database", "sql", "integration", "backend", "server",
        "performance", "security", "authentication", "authorization", "webhook", "endpoint",
        "json", "xml", "rest",
    )

    # Order matters: the analytics and WordPress variants narrow the generic 500 tool.
    tools = (
        ToolSpec(
            ToolKind.ANALYTICS_SERVER_ERROR,
            (SERVER_ERROR_KEYWORDS, ("analytics", "dashboard", "reports")),
            _static("CRITICAL: 500 Internal Server Error in Analytics Module - immediate investigation required"),
            recommendations=(
                "Check server logs for specific error messages and stack traces",
                "Verify database connections and query performance for analytics queries",
                "Review recent code deployments that may have affected analytics module",
                "Test analytics API endpoints manually to isolate the failing component",
                "Implement immediate rollback if recent deployment is the cause",
            ),
        ),
        ToolSpec(
            ToolKind.WORDPRESS_SERVER_ERROR,
            (SERVER_ERROR_KEYWORDS, ("wordpress", "wp-", "plugin")),
            _static("WordPress 500 Error Detected - plugin or theme conflict likely"),
            recommendations=(
                "Disable recently activated plugins one by one to identify the culprit",
                "Check WordPress error logs for fatal PHP errors",
                "Verify PHP memory limits and execution time settings",
                "Test in WordPress safe mode (all plugins disabled)",
                "Review .htaccess file for configuration issues",
            ),
        ),
        ToolSpec(
            ToolKind.SERVER_ERROR,
            (SERVER_ERROR_KEYWORDS,),
            _static("500 Internal Server Error Analysis - server-side investigation needed"),
            recommendations=(
                "Check server error logs for specific error messages and stack traces",
                "Verify database connectivity and query performance",
                "Review recent deployments and configuration changes",
                "Test API endpoints manually to isolate failing components",
                "Monitor server resources (CPU, memory, disk space)",
            ),
        ),
        ToolSpec(
            ToolKind.API_INTEGRATION,
            (("api", "integration"), FAILURE_KEYWORDS),
            _static("API Integration Issue - endpoint connectivity and data flow analysis needed"),
            recommendations=(
                "Test API endpoints manually with tools like Postman or curl",
                "Verify API authentication tokens and permissions",
                "Check API rate limits and quota usage",
                "Review request/response logs for malformed data",
                "Validate API endpoint URLs and network connectivity",
            ),
        ),
        ToolSpec(
            ToolKind.DATABASE_CONNECTIVITY,
            (("database", "connection"), FAILURE_KEYWORDS),
            _static("Database Connectivity Issue - connection pool and query optimization needed"),
            recommendations=(
                "Check database connection pool configuration and limits",
                "Verify database server status and resource usage",
                "Review slow query logs for performance bottlenecks",
                "Test database connectivity from application server",
                "Validate database credentials and network security groups",
            ),
        ),
        ToolSpec(
            ToolKind.FRONTEND_LOADING,
            (("blank", "white page", "empty"), ("dashboard", "page")),
            _static("Frontend Loading Issue - JavaScript errors or API connectivity problems"),
            recommendations=(
                "Check browser console for JavaScript errors and network failures",
                "Verify frontend API calls are receiving valid responses",
                "Test browser caching by hard refresh (Ctrl+F5)",
                "Review frontend build process and asset loading",
                "Validate CORS configuration for cross-origin requests",
            ),
        ),
    )

    default_recommendations = (
        "Review system logs for error patterns and anomalies",
        "Verify component functionality and integration points",
        "Test system performance under current load conditions",
        "Check recent changes and deployments for potential issues",
    )
