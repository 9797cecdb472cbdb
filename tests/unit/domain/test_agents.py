"""Tests for the keyword-driven specialists."""

import pytest

from taskgenie.domain.agents.devops import DevOpsAgent
from taskgenie.domain.agents.memory import InteractionLog
from taskgenie.domain.agents.project_manager import ProjectManagerAgent
from taskgenie.domain.agents.qa_tester import QATesterAgent
from taskgenie.domain.agents.registry import AgentRegistry
from taskgenie.domain.agents.software_engineer import SoftwareEngineerAgent
from taskgenie.domain.agents.wordpress_developer import WordPressDeveloperAgent
from taskgenie.domain.value_objects.enums import (
    AgentRole,
    Complexity,
    ExecutionStatus,
    Priority,
    ToolKind,
)

# ─── Confidence ─────────────────────────────────────────────────────


def test_confidence_is_clamped_to_one(deployment_ticket):
    analysis = DevOpsAgent().analyze(deployment_ticket)
    assert analysis.confidence == 1.0


@pytest.mark.parametrize("role", list(AgentRole))
def test_confidence_zero_when_no_keywords(role, vague_ticket):
    assert AgentRegistry().get(role).analyze(vague_ticket).confidence == 0.0


@pytest.mark.parametrize("role", list(AgentRole))
def test_confidence_stays_within_unit_interval(role, deployment_ticket, plugin_ticket, make_ticket):
    # enough keywords to push every role past 1.0 before clamping
    crowded = make_ticket(
        "Urgent project deadline: server database error after plugin update",
        "Security vulnerability in the cloud deployment pipeline; regression test "
        "report, performance metrics and analytics data for the stakeholder workflow",
    )
    agent = AgentRegistry().get(role)
    for ticket in (deployment_ticket, plugin_ticket, crowded):
        assert 0.0 <= agent.analyze(ticket).confidence <= 1.0
    assert agent.analyze(crowded).confidence == 1.0


def test_confidence_adds_step_per_keyword():
    # "plugin" and "update" are capability keywords for the WordPress developer
    assert WordPressDeveloperAgent().confidence_for("plugin update") == pytest.approx(0.4)


# ─── Project manager ────────────────────────────────────────────────


def test_pm_routes_infrastructure_ticket_to_devops(deployment_ticket):
    analysis = ProjectManagerAgent().analyze(deployment_ticket)

    assert analysis.role == AgentRole.PROJECT_MANAGER
    assert analysis.next_role == AgentRole.DEVOPS
    assert "Routing Decision:" in analysis.analysis
    assert "Assigning to DEVOPS" in analysis.analysis


def test_pm_without_handoff_has_no_routing_section(vague_ticket):
    analysis = ProjectManagerAgent().analyze(vague_ticket)

    assert analysis.next_role is None
    assert "Routing Decision:" not in analysis.analysis
    assert "Business Impact Assessment:" in analysis.analysis
    assert analysis.priority == Priority.NORMAL
    assert len(analysis.recommended_actions) == 3


def test_pm_first_matching_rule_wins(make_ticket):
    ticket = make_ticket("WordPress site down", "The server returns a blank page")
    assert ProjectManagerAgent().route(ticket.content()) == AgentRole.WORDPRESS_DEVELOPER


def test_pm_many_users_and_deadline(make_ticket):
    ticket = make_ticket("Reports down", "50 users affected before the friday deadline")
    analysis = ProjectManagerAgent().analyze(ticket)

    assert "50 users currently affected" in analysis.analysis
    assert "Critical business system affected" in analysis.analysis
    assert analysis.priority == Priority.URGENT
    assert analysis.complexity == Complexity.COMPLEX
    assert analysis.estimated_time == "1-2 hours"


def test_pm_few_users_keeps_normal_priority(make_ticket):
    ticket = make_ticket("Login trouble", "3 users affected this morning")
    analysis = ProjectManagerAgent().analyze(ticket)

    assert "3 users currently affected" in analysis.analysis
    assert analysis.priority == Priority.NORMAL
    assert analysis.complexity == Complexity.MEDIUM


def test_pm_progress_tool_reports_percentage():
    result = ProjectManagerAgent().execute(
        "Weekly progress tracking", {"completed_tasks": 5, "total_tasks": 10}
    )
    assert result.status == ExecutionStatus.COMPLETED
    assert result.tool == ToolKind.PROGRESS_TRACKING
    assert "50% complete (5/10 tasks)" in result.details


def test_execute_failure_is_returned_not_raised():
    result = ProjectManagerAgent().execute("Weekly progress tracking", {"total_tasks": 0})

    assert result.status == ExecutionStatus.FAILED
    assert result.details == "Project Manager execution failed"
    assert "division" in result.error
    assert result.succeeded is False


def test_execute_without_matching_tool_uses_defaults(vague_ticket):
    agent = ProjectManagerAgent()
    result = agent.execute(vague_ticket)

    assert result.status == ExecutionStatus.COMPLETED
    assert result.tool is None
    assert result.details == "Project management task executed: Hello there"
    assert result.recommendations == agent.default_recommendations


# ─── WordPress developer ────────────────────────────────────────────


def test_wp_plugin_conflict_analysis(plugin_ticket):
    analysis = WordPressDeveloperAgent().analyze(plugin_ticket)

    assert analysis.analysis.startswith("WordPress Developer Analysis:")
    assert "Plugin Conflict" in analysis.analysis
    assert analysis.complexity == Complexity.MEDIUM
    assert analysis.estimated_time == "2-4 hours"
    assert analysis.next_role is None


def test_analysis_inherits_ticket_priority(make_ticket):
    ticket = make_ticket("Plugin broken", "Plugin stopped working", priority=Priority.LOW)
    assert WordPressDeveloperAgent().analyze(ticket).priority == Priority.LOW


def test_wp_plugin_tool(plugin_ticket):
    result = WordPressDeveloperAgent().execute(plugin_ticket)

    assert result.tool == ToolKind.PLUGIN_CONFLICT
    assert result.details == "Plugin conflict analysis: unknown - No error details"
    assert result.recommendations is None


def test_wp_can_handle(plugin_ticket, vague_ticket):
    agent = WordPressDeveloperAgent()
    assert agent.can_handle(plugin_ticket) is True
    assert agent.can_handle(vague_ticket) is False


# ─── Software engineer ──────────────────────────────────────────────


@pytest.mark.parametrize(
    "text, expected",
    [
        ("500 error on the analytics dashboard", ToolKind.ANALYTICS_SERVER_ERROR),
        ("500 error after plugin update", ToolKind.WORDPRESS_SERVER_ERROR),
        ("Internal server error on checkout", ToolKind.SERVER_ERROR),
        ("Payment api integration fails", ToolKind.API_INTEGRATION),
        ("Database connection timeout error", ToolKind.DATABASE_CONNECTIVITY),
        ("Blank dashboard page", ToolKind.FRONTEND_LOADING),
    ],
)
def test_se_tool_selection(text, expected):
    result = SoftwareEngineerAgent().execute(text)
    assert result.tool == expected
    assert result.recommendations


def test_se_without_tool_falls_back():
    agent = SoftwareEngineerAgent()
    result = agent.execute("Question about our roadmap")
    assert result.details == "Technical analysis task executed: Question about our roadmap"
    assert result.recommendations == agent.default_recommendations


def test_se_reports_only_first_exclusive_finding(make_ticket):
    ticket = make_ticket("500 error", "The app crashes with an exception")
    analysis = SoftwareEngineerAgent().analyze(ticket)

    assert "Server Error" in analysis.analysis
    assert "Application Error" not in analysis.analysis
    assert analysis.priority == Priority.URGENT


def test_se_api_failure_needs_failure_keyword(make_ticket):
    agent = SoftwareEngineerAgent()
    failing = agent.analyze(make_ticket("Webhook api calls fail", "Started this morning"))
    healthy = agent.analyze(make_ticket("New api key", "Please rotate it"))

    assert "API Failure" in failing.analysis
    assert "API Failure" not in healthy.analysis


def test_se_names_wordpress_developer_for_plugin_text(make_ticket):
    analysis = SoftwareEngineerAgent().analyze(make_ticket("Plugin settings", "Cannot save"))
    assert analysis.next_role == AgentRole.WORDPRESS_DEVELOPER


# ─── DevOps ─────────────────────────────────────────────────────────


def test_devops_infrastructure_analysis(deployment_ticket):
    analysis = DevOpsAgent().analyze(deployment_ticket)

    assert "Infrastructure Issue" in analysis.analysis
    assert "Deployment Issue" not in analysis.analysis
    assert "Cloud Services Issue" in analysis.analysis
    assert analysis.priority == Priority.URGENT
    assert analysis.complexity == Complexity.COMPLEX


def test_devops_fallback(vague_ticket):
    analysis = DevOpsAgent().analyze(vague_ticket)
    assert "General infrastructure review needed" in analysis.analysis


def test_devops_server_health_tool(deployment_ticket):
    result = DevOpsAgent().execute(deployment_ticket)
    assert result.tool == ToolKind.SERVER_HEALTH
    assert result.details == "Server health check for unknown: cpu, memory, disk"


# ─── QA tester ──────────────────────────────────────────────────────


def test_qa_hands_off_test_automation(make_ticket):
    ticket = make_ticket("Flaky suite", "Our test automation keeps failing")
    assert QATesterAgent().route(ticket.content()) == AgentRole.SOFTWARE_ENGINEER


# ─── Interaction log ────────────────────────────────────────────────


def test_agents_record_interactions(deployment_ticket):
    memory = InteractionLog()
    agent = ProjectManagerAgent(memory)

    agent.analyze(deployment_ticket)
    agent.execute(deployment_ticket)
    target = agent.should_handoff(deployment_ticket)

    entries = memory.recall(deployment_ticket.id)
    assert target == AgentRole.DEVOPS
    assert [e.action for e in entries] == ["analyze", "execute", "handoff"]
    assert entries[-1].result == "DEVOPS"


def test_route_has_no_side_effects(deployment_ticket):
    memory = InteractionLog()
    ProjectManagerAgent(memory).route(deployment_ticket.content())
    assert deployment_ticket.id not in memory


def test_route_to_wordpress_developer_mentions_plugin_conflict(make_ticket):
    ticket = make_ticket(
        "WordPress plugin conflict",
        "Our wp-admin is down after activating a plugin",
    )
    agent = WordPressDeveloperAgent()

    assert agent.can_handle(ticket) is True
    analysis = agent.analyze(ticket)
    assert "plugin conflict" in analysis.analysis.lower()
    assert analysis.confidence > 0
