"""QA tester — bug validation and the testing disciplines a ticket calls for."""

from taskgenie.domain.agents.base import (
    HandoffRule,
    KeywordGroup,
    SpecialistAgent,
    ToolSpec,
    join_values,
)
from taskgenie.domain.value_objects.enums import AgentRole, Complexity, Priority, ToolKind


class QATesterAgent(SpecialistAgent):
    role = AgentRole.QA_TESTER
    title = "QA Tester"
    task_label = "QA testing"

    capabilities = {
        "manual_testing": ("manual", "test", "testing", "validation"),
        "automated_testing": ("automation", "automated", "script", "framework"),
        "bug_validation": ("bug", "error", "issue", "reproduce"),
        "test_planning": ("test plan", "test case", "strategy", "planning"),
        "regression_testing": ("regression", "retest", "validation", "deployment"),
        "performance_testing": ("performance", "load", "stress", "speed"),
        "usability_testing": ("usability", "ux", "user experience", "interface"),
        "compatibility_testing": ("compatibility", "browser", "mobile", "responsive"),
        "test_documentation": ("documentation", "report", "results", "findings"),
    }

    groups = (
        KeywordGroup(
            keywords=("bug", "error", "issue", "problem", "not working", "broken"),
            sentence="Bug Validation: Reported bug requires validation and reproduction",
            actions=(
                "Reproduce the bug following provided steps",
                "Document exact reproduction steps and environment",
                "Verify bug across different browsers/devices",
                "Assess impact and severity of the bug",
                "Create detailed bug report with screenshots/videos",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="1-3 hours",
        ),
        KeywordGroup(
            keywords=("test", "testing", "qa", "quality", "validation", "verify"),
            sentence="Feature Testing: New feature or functionality requires testing",
            actions=(
                "Create comprehensive test plan and test cases",
                "Perform functional testing of all features",
                "Conduct edge case and boundary testing",
                "Validate user workflows and scenarios",
                "Document test results and findings",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="4-8 hours",
        ),
        KeywordGroup(
            keywords=("slow", "performance", "speed", "loading", "timeout", "lag"),
            sentence="Performance Testing: Performance issues require load and stress testing",
            actions=(
                "Conduct performance baseline measurements",
                "Perform load testing with realistic user scenarios",
                "Test under various network conditions",
                "Identify performance bottlenecks and limitations",
                "Validate performance improvements after fixes",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-6 hours",
        ),
        KeywordGroup(
            keywords=("usability", "user experience", "ux", "ui", "confusing", "difficult"),
            sentence="Usability Testing: User experience issues require usability evaluation",
            actions=(
                "Conduct user journey and workflow testing",
                "Evaluate interface design and accessibility",
                "Test with different user personas and scenarios",
                "Identify usability pain points and improvements",
                "Provide UX recommendations and best practices",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
        ),
        KeywordGroup(
            keywords=("browser", "compatibility", "mobile", "device", "responsive", "cross-platform"),
            sentence="Compatibility Testing: Cross-browser/device compatibility issues",
            actions=(
                "Test across major browsers (Chrome, Firefox, Safari, Edge)",
                "Validate responsive design on different screen sizes",
                "Test on various mobile devices and operating systems",
                "Check for browser-specific bugs and inconsistencies",
                "Ensure consistent functionality across platforms",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-5 hours",
        ),
        KeywordGroup(
            keywords=("update", "deployment", "release", "regression", "after update"),
            sentence="Regression Testing: Updates require regression testing validation",
            actions=(
                "Execute full regression test suite",
                "Focus on areas affected by recent changes",
                "Validate that existing functionality still works",
                "Test integration points and dependencies",
                "Verify no new bugs were introduced",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="4-8 hours",
        ),
        KeywordGroup(
            keywords=("security", "vulnerability", "authentication", "authorization", "data protection"),
            sentence="Security Testing: Security vulnerabilities require security testing",
            actions=(
                "Test authentication and authorization mechanisms",
                "Validate input sanitization and data validation",
                "Check for common security vulnerabilities (OWASP)",
                "Test data encryption and secure transmission",
                "Verify access controls and permission systems",
            ),
            complexity=Complexity.COMPLEX,
            estimated_time="3-6 hours",
            priority=Priority.HIGH,
        ),
        KeywordGroup(
            keywords=("api", "endpoint", "integration", "webhook", "rest", "graphql"),
            sentence="API Testing: API endpoints require functional and integration testing",
            actions=(
                "Test API endpoints with various input parameters",
                "Validate response formats and status codes",
                "Test error handling and edge cases",
                "Verify API documentation accuracy",
                "Conduct integration testing with dependent systems",
            ),
            complexity=Complexity.MEDIUM,
            estimated_time="2-4 hours",
        ),
        KeywordGroup(
            keywords=("code review", "unit tests", "test automation", "framework"),
            sentence="Development Integration: May require development expertise for test automation",
            actions=("Collaborate with software engineer for test automation setup",),
            next_role=AgentRole.SOFTWARE_ENGINEER,
        ),
        KeywordGroup(
            keywords=("requirements", "acceptance criteria", "business logic"),
            sentence="Requirements Validation: Acceptance criteria need business review",
            actions=("Coordinate with business analyst for requirements validation",),
            next_role=AgentRole.BUSINESS_ANALYST,
        ),
    )

    fallback_sentence = "General quality review needed"
    fallback_actions = ("Perform exploratory testing of the reported area",)

    handoff_rules = (
        HandoffRule(
            AgentRole.SOFTWARE_ENGINEER,
            ("test automation", "unit tests", "technical bug", "code issue"),
        ),
        HandoffRule(
            AgentRole.DEVOPS,
            ("deployment testing", "infrastructure testing", "environment issues"),
        ),
        HandoffRule(
            AgentRole.WORDPRESS_DEVELOPER,
            ("wordpress testing", "plugin testing", "theme testing"),
        ),
        HandoffRule(
            AgentRole.BUSINESS_ANALYST,
            ("requirements testing", "acceptance criteria", "business logic validation"),
        ),
    )

    handle_keywords = (
        "test", "testing", "qa", "quality", "bug", "error", "issue", "validation", "verify",
        "reproduce", "regression", "performance", "usability", "compatibility", "browser",
        "mobile", "responsive", "functionality", "feature", "broken", "not working",
    )

    tools = (
        ToolSpec(
            ToolKind.TEST_CASE_ANALYSIS,
            (("test case", "test plan"),),
            lambda ctx: (
                f"Test case analysis for {ctx.get('feature', 'unknown')}: "
                f"{ctx.get('issue_type', 'functional')} (Priority: {ctx.get('priority', 'medium')})"
            ),
        ),
        ToolSpec(
            ToolKind.BUG_REPRODUCTION,
            (("bug", "reproduce"),),
            lambda ctx: (
                f"Bug reproduction: {' -> '.join(ctx.get('steps', ['No steps provided']))} "
                f"in {ctx.get('environment', 'production')}. "
                f"Expected: {ctx.get('expected_result', 'No expected result specified')}"
            ),
        ),
        ToolSpec(
            ToolKind.REGRESSION_TESTING,
            (("regression",),),
            lambda ctx: (
                f"Regression testing: {ctx.get('test_suite', 'full_regression')} covering "
                f"{join_values(ctx.get('affected_areas', ['general']))}. "
                f"Results: {ctx.get('test_results', 'pending')}"
            ),
        ),
        ToolSpec(
            ToolKind.PERFORMANCE_TESTING,
            (("performance",),),
            lambda ctx: (
                f"Performance testing: {ctx.get('test_type', 'load_test')} measuring "
                f"{join_values(ctx.get('metrics', ['response_time', 'throughput']))} "
                f"against {ctx.get('benchmark', 'baseline')}"
            ),
        ),
        ToolSpec(
            ToolKind.USABILITY_TESTING,
            (("usability", "ux"),),
            lambda ctx: (
                f"Usability testing: {ctx.get('user_flow', 'general_navigation')}. "
                f"Issues: {join_values(ctx.get('usability_issues', []))}. "
                f"Recommendations: {join_values(ctx.get('recommendations', []))}"
            ),
        ),
        ToolSpec(
            ToolKind.COMPATIBILITY_TESTING,
            (("compatibility", "browser"),),
            lambda ctx: (
                f"Compatibility testing across {join_values(ctx.get('platforms', ['web', 'mobile']))} "
                f"and {join_values(ctx.get('browsers', ['chrome', 'firefox', 'safari']))}. "
                f"Issues: {join_values(ctx.get('compatibility_issues', []))}"
            ),
        ),
    )

    default_recommendations = (
        "Comprehensive testing completed",
        "Bug validation and reproduction performed",
        "Test cases documented and executed",
        "Quality assurance standards maintained",
    )
