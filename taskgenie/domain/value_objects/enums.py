"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class AgentRole(str, Enum):
    PROJECT_MANAGER = "PROJECT_MANAGER"
    SOFTWARE_ENGINEER = "SOFTWARE_ENGINEER"
    WORDPRESS_DEVELOPER = "WORDPRESS_DEVELOPER"
    BUSINESS_ANALYST = "BUSINESS_ANALYST"
    QA_TESTER = "QA_TESTER"
    DEVOPS = "DEVOPS"


class Priority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class TicketStatus(str, Enum):
    NEW = "new"
    OPEN = "open"
    PENDING = "pending"
    HOLD = "hold"
    SOLVED = "solved"
    CLOSED = "closed"


class Complexity(str, Enum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class ExecutionStatus(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"


class ToolKind(str, Enum):
    """Canned tools the specialists can run. Each kind has exactly one handler."""

    # Project manager
    PROJECT_PLANNING = "project_planning"
    RESOURCE_ALLOCATION = "resource_allocation"
    RISK_MANAGEMENT = "risk_management"
    PROGRESS_TRACKING = "progress_tracking"
    STAKEHOLDER_COMMUNICATION = "stakeholder_communication"
    QUALITY_REVIEW = "quality_review"

    # Software engineer
    ANALYTICS_SERVER_ERROR = "analytics_server_error"
    WORDPRESS_SERVER_ERROR = "wordpress_server_error"
    SERVER_ERROR = "server_error"
    API_INTEGRATION = "api_integration"
    DATABASE_CONNECTIVITY = "database_connectivity"
    FRONTEND_LOADING = "frontend_loading"

    # WordPress developer
    PLUGIN_CONFLICT = "plugin_conflict"
    THEME_COMPATIBILITY = "theme_compatibility"
    WP_PERFORMANCE = "wp_performance"
    WP_SECURITY_SCAN = "wp_security_scan"
    WOOCOMMERCE = "woocommerce"

    # DevOps
    SERVER_HEALTH = "server_health"
    DEPLOYMENT_ANALYSIS = "deployment_analysis"
    INFRASTRUCTURE_MONITORING = "infrastructure_monitoring"
    SECURITY_COMPLIANCE = "security_compliance"
    BACKUP_RECOVERY = "backup_recovery"
    NETWORK_DIAGNOSTICS = "network_diagnostics"

    # QA tester
    TEST_CASE_ANALYSIS = "test_case_analysis"
    BUG_REPRODUCTION = "bug_reproduction"
    REGRESSION_TESTING = "regression_testing"
    PERFORMANCE_TESTING = "performance_testing"
    USABILITY_TESTING = "usability_testing"
    COMPATIBILITY_TESTING = "compatibility_testing"

    # Business analyst
    REQUIREMENTS_ANALYSIS = "requirements_analysis"
    DATA_ANALYSIS = "data_analysis"
    PROCESS_OPTIMIZATION = "process_optimization"
    ROI_ANALYSIS = "roi_analysis"
    STAKEHOLDER_IMPACT = "stakeholder_impact"
    REPORTING_DASHBOARD = "reporting_dashboard"
