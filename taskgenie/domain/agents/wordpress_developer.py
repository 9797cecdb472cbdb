"""WordPress developer — plugins, themes, WooCommerce and site maintenance."""

from taskgenie.domain.agents.base import (
    HandoffRule,
    KeywordGroup,
    SpecialistAgent,
    ToolSpec,
    join_values,
)
from taskgenie.domain.value_objects.enums import AgentRole, Complexity, Priority, ToolKind


class WordPressDeveloperAgent(SpecialistAgent):
    role = AgentRole.WORDPRESS_DEVELOPER
    title = "WordPress Developer"
    task_label = "WordPress development"
    default_estimated_time = "1-3 hours"

    capabilities = {
        "wordpress_development": ("wordpress", "wp", "wp-admin", "wp-content"),
        "plugin_analysis": ("plugin", "wp-", "activate", "deactivate"),
        "theme_debugging": ("theme", "styling", "css", "appearance"),
        "wp_performance": ("performance", "speed", "optimization", "caching"),
        "wp_security": ("security", "vulnerability", "hack", "malware"),
        "woocommerce_support": ("woocommerce", "shop", "cart", "checkout"),
        "wp_customization": ("custom", "customization", "modification"),
        "wp_migration": ("migration", "import", "export", "backup"),
        "wp_maintenance": ("update", "maintenance", "upgrade", "version"),
    }

    groups = (
        KeywordGroup(
            keywords=("plugin", "wp-", "activate", "deactivate", "conflict"),
            sentence="Plugin Conflict: Plugin conflict detected, systematic deactivation needed",
            actions=(
                "Plugin/theme issues: Plugin conflict detected, systematic deactivation needed",
                "Performance impact: Site functionality disrupted, staging test required",
                "Solutions: Check compatibility, review logs, est. time 2-4 hours",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("theme", "styling", "css", "layout", "design", "appearance"),
            sentence="Theme Issue: Theme styling/layout problem affecting appearance",
            actions=(
                "Plugin/theme issues: Theme styling/layout problem affecting appearance",
                "Performance impact: Visual display issues, user experience degraded",
                "Solutions: Test default theme, review CSS, est. time 1-2 hours",
            ),
            complexity=Complexity.SIMPLE,
            estimated_time="1-2 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("slow", "performance", "loading", "speed", "optimization"),
            sentence="Performance Issue: Bottleneck from plugin or theme overhead",
            actions=(
                "Plugin/theme issues: Performance bottleneck from plugins/theme overhead",
                "Performance impact: Slow loading affecting user engagement and SEO",
                "Solutions: Optimize plugins, implement caching, est. time 3-6 hours",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-6 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("security", "hack", "malware", "vulnerability", "breach", "unauthorized"),
            sentence="Security Issue: Vulnerability in WordPress components",
            actions=(
                "Plugin/theme issues: Security vulnerability in WordPress components",
                "Performance impact: Site compromised, immediate action required (URGENT)",
                "Solutions: Security scan, updates, hardening, est. time 4-8 hours",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="4-8 hours",
            priority=Priority.URGENT,
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("woocommerce", "woo", "shop", "cart", "checkout", "payment", "order"),
            sentence="WooCommerce Issue: Store functionality disrupted",
            actions=(
                "Plugin/theme issues: WooCommerce functionality disrupted by conflicts",
                "Performance impact: E-commerce operations affected, revenue at risk",
                "Solutions: Test checkout, verify gateways, est. time 2-4 hours",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("migration", "database", "import", "export", "backup", "restore"),
            sentence="Migration Issue: Database and file references affected",
            actions=(
                "Plugin/theme issues: Migration affecting database and file references",
                "Performance impact: Site functionality broken, data integrity at risk",
                "Solutions: Verify database, check URLs, test functions, est. time 3-6 hours",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-6 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("update", "upgrade", "maintenance", "version", "compatibility"),
            sentence="Update Issue: WordPress update causing compatibility problems",
            actions=(
                "Plugin/theme issues: WordPress update causing compatibility problems",
                "Performance impact: Site functionality at risk during updates",
                "Solutions: Backup, staging test, compatibility check, est. time 2-3 hours",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-3 hours",
            exclusive=True,
        ),
        KeywordGroup(
            keywords=("api", "custom development", "advanced functionality"),
            sentence="Custom Development: Functionality beyond WordPress scope",
            actions=("Solutions: Collaborate with software engineer for development",),
            next_role=AgentRole.SOFTWARE_ENGINEER,
        ),
        KeywordGroup(
            keywords=("testing", "qa", "quality assurance"),
            sentence="Testing Required: Changes need QA validation",
            next_role=AgentRole.QA_TESTER,
        ),
    )

    fallback_sentence = "General WordPress review needed"
    fallback_actions = ("Review WordPress error logs and site health report",)

    handoff_rules = (
        HandoffRule(
            AgentRole.SOFTWARE_ENGINEER,
            ("custom api", "backend development", "database design", "complex integration"),
        ),
        HandoffRule(AgentRole.DEVOPS, ("server", "hosting", "deployment", "ssl", "domain", "dns")),
        HandoffRule(
            AgentRole.QA_TESTER,
            ("comprehensive testing", "qa testing", "user acceptance testing"),
        ),
        HandoffRule(
            AgentRole.BUSINESS_ANALYST,
            ("analytics", "reporting", "data analysis", "metrics"),
        ),
    )

    handle_keywords = (
        "wordpress", "wp-", "plugin", "theme", "woocommerce", "wp", "gutenberg", "elementor",
        "divi", "wp-admin", "wp-content", "shortcode", "widget", "customizer", "wp-config",
    )

    tools = (
        ToolSpec(
            ToolKind.PLUGIN_CONFLICT,
            (("plugin",),),
            lambda ctx: (
                f"Plugin conflict analysis: {join_values(ctx.get('plugins', ['unknown']))} - "
                f"{ctx.get('error', 'No error details')}"
            ),
        ),
        ToolSpec(
            ToolKind.THEME_COMPATIBILITY,
            (("theme",),),
            lambda ctx: (
                f"Theme compatibility check: {ctx.get('theme', 'unknown')} on WP "
                f"{ctx.get('wp_version', 'unknown')} - {ctx.get('issue', 'No issue details')}"
            ),
        ),
        ToolSpec(
            ToolKind.WP_PERFORMANCE,
            (("performance",),),
            lambda ctx: (
                f"WP Performance analysis: {ctx.get('load_time', 0)}s load time, "
                f"{ctx.get('plugins_count', 0)} plugins, theme: {ctx.get('theme', 'unknown')}"
            ),
        ),
        ToolSpec(
            ToolKind.WP_SECURITY_SCAN,
            (("security",),),
            lambda ctx: (
                f"WP Security scan: {ctx.get('wp_version', 'unknown')}, "
                f"plugins: {join_values(ctx.get('plugins', []))}, "
                f"issue: {ctx.get('security_issue', 'General security concern')}"
            ),
        ),
        ToolSpec(
            ToolKind.WOOCOMMERCE,
            (("woocommerce",),),
            lambda ctx: (
                f"WooCommerce analysis: {ctx.get('wc_version', 'unknown')} - "
                f"{ctx.get('issue_type', 'general')}: {ctx.get('error', 'No error details')}"
            ),
        ),
    )

    default_recommendations = (
        "WordPress issue resolved",
        "Site functionality tested",
        "Performance optimized",
        "Security measures implemented",
    )
