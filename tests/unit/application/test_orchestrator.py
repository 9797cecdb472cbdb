"""Tests for the multi-agent Orchestrator."""

import pytest

from taskgenie.application.metrics_store import MetricsStore
from taskgenie.application.use_cases.orchestrator import Orchestrator
from taskgenie.domain.agents.memory import InteractionLog
from taskgenie.domain.agents.project_manager import ProjectManagerAgent
from taskgenie.domain.agents.registry import AgentRegistry
from taskgenie.domain.entities.ticket import Ticket
from taskgenie.domain.errors import (
    AgentCannotHandleError,
    OrchestrationError,
    UnknownAgentRoleError,
)
from taskgenie.domain.value_objects.enums import AgentRole


@pytest.fixture
def cycling_ticket():
    # PM -> WordPress (plugin), WordPress -> SE (custom api), SE -> WordPress (plugin)
    return Ticket(id=200, subject="plugin issue", description="needs custom api")


# ─── Workflow ───────────────────────────────────────────────────────


def test_infrastructure_ticket_goes_pm_then_devops(deployment_ticket):
    orchestrator = Orchestrator()
    response = orchestrator.process_ticket(deployment_ticket)

    assert response.ticket_id == 101
    assert response.agents_involved == [AgentRole.DEVOPS, AgentRole.PROJECT_MANAGER]
    assert response.handoff_count == 1
    assert response.workflow.is_complete is True
    assert response.workflow.current_role == AgentRole.DEVOPS
    assert [a.role for a in response.agent_analyses] == [
        AgentRole.PROJECT_MANAGER,
        AgentRole.DEVOPS,
    ]
    # mean of PM (0.0) and DevOps (clamped 1.0)
    assert response.confidence == pytest.approx(0.5)


def test_recommendations_accumulate_in_order(deployment_ticket):
    response = Orchestrator().process_ticket(deployment_ticket)

    pm_defaults = list(ProjectManagerAgent.default_recommendations)
    assert response.final_recommendations[: len(pm_defaults)] == pm_defaults
    assert response.final_recommendations[-1] == (
        "Server health check for unknown: cpu, memory, disk"
    )


def test_ticket_without_handoff_stays_with_pm(vague_ticket):
    response = Orchestrator().process_ticket(vague_ticket)

    assert response.agents_involved == [AgentRole.PROJECT_MANAGER]
    assert response.handoff_count == 0
    assert response.confidence == 0.0
    assert response.workflow.iterations == 1


def test_handoff_count_matches_agents_involved(plugin_ticket, deployment_ticket, cycling_ticket):
    orchestrator = Orchestrator(max_role_visits=None)
    for ticket in (plugin_ticket, deployment_ticket, cycling_ticket):
        response = orchestrator.process_ticket(ticket)
        assert len(response.agents_involved) == response.handoff_count + 1
        assert response.workflow.iterations <= orchestrator.max_iterations


def test_cycle_without_revisit_guard_hits_iteration_cap(cycling_ticket):
    response = Orchestrator(max_role_visits=None).process_ticket(cycling_ticket)

    assert response.workflow.iterations == 10
    assert response.handoff_count == 10
    assert len(response.agents_involved) == 11
    assert response.workflow.is_complete is True


def test_custom_iteration_cap(cycling_ticket):
    response = Orchestrator(max_iterations=3, max_role_visits=None).process_ticket(cycling_ticket)
    assert response.workflow.iterations == 3
    assert len(response.agent_analyses) == 3


def test_revisit_guard_stops_cycle(cycling_ticket):
    response = Orchestrator().process_ticket(cycling_ticket)

    assert response.workflow.iterations == 3
    assert response.handoff_count == 2
    assert response.agents_involved == [
        AgentRole.SOFTWARE_ENGINEER,
        AgentRole.PROJECT_MANAGER,
        AgentRole.WORDPRESS_DEVELOPER,
    ]
    assert response.workflow.handoff_reason == (
        "Handoff from SOFTWARE_ENGINEER to WORDPRESS_DEVELOPER skipped: role already visited"
    )


def test_invalid_bounds_rejected():
    with pytest.raises(ValueError):
        Orchestrator(max_iterations=0)
    with pytest.raises(ValueError):
        Orchestrator(max_role_visits=0)


def test_interaction_log_with_explicit_registry_rejected():
    with pytest.raises(ValueError, match="interaction_log"):
        Orchestrator(registry=AgentRegistry(), interaction_log=InteractionLog())


# ─── Failure ────────────────────────────────────────────────────────


def test_failure_is_wrapped_and_recorded():
    orchestrator = Orchestrator()
    ticket = Ticket(id=300, subject=None, description="no subject")

    with pytest.raises(OrchestrationError, match="Multi-agent processing failed") as exc_info:
        orchestrator.process_ticket(ticket)

    assert isinstance(exc_info.value.__cause__, TypeError)
    metrics = orchestrator.get_workflow_metrics()
    assert metrics.total_workflows == 1
    assert metrics.successful_workflows == 0
    assert metrics.agent_utilization[AgentRole.PROJECT_MANAGER].success_rate == 0.0


# ─── Metrics ────────────────────────────────────────────────────────


def test_metrics_after_runs(deployment_ticket, vague_ticket):
    metrics = MetricsStore()
    orchestrator = Orchestrator(metrics=metrics)
    orchestrator.process_ticket(deployment_ticket)
    orchestrator.process_ticket(vague_ticket)

    m = orchestrator.get_workflow_metrics()
    assert m.total_workflows == 2
    assert m.successful_workflows == 2
    assert m.handoff_count == 1
    assert m.agent_utilization[AgentRole.PROJECT_MANAGER].tasks_handled == 2
    assert m.agent_utilization[AgentRole.DEVOPS].tasks_handled == 1
    assert m.agent_utilization[AgentRole.DEVOPS].average_confidence == pytest.approx(1.0)


def test_reset_metrics(deployment_ticket):
    orchestrator = Orchestrator()
    orchestrator.process_ticket(deployment_ticket)
    orchestrator.reset_metrics()

    orchestrator.process_ticket(deployment_ticket)
    m = orchestrator.get_workflow_metrics()
    assert m.total_workflows == 1
    assert m.successful_workflows == 1


def test_agent_statuses(deployment_ticket):
    orchestrator = Orchestrator()
    orchestrator.process_ticket(deployment_ticket)

    statuses = {s.role: s for s in orchestrator.agent_statuses()}
    assert set(statuses) == set(AgentRole)
    assert statuses[AgentRole.DEVOPS].tasks_handled == 1
    assert statuses[AgentRole.DEVOPS].status == "active"
    assert "containerization" in statuses[AgentRole.DEVOPS].capabilities
    assert orchestrator.agent_status("QA_TESTER").tasks_handled == 0


# ─── Direct routing ─────────────────────────────────────────────────


def test_route_to_agent(deployment_ticket):
    analysis = Orchestrator().route_to_agent(deployment_ticket, AgentRole.DEVOPS)
    assert analysis.role == AgentRole.DEVOPS
    assert "Infrastructure Issue" in analysis.analysis


def test_route_to_agent_that_cannot_handle(vague_ticket):
    with pytest.raises(AgentCannotHandleError, match="Agent DEVOPS cannot handle this ticket type"):
        Orchestrator().route_to_agent(vague_ticket, AgentRole.DEVOPS)


def test_route_to_unknown_agent(deployment_ticket):
    with pytest.raises(UnknownAgentRoleError):
        Orchestrator().route_to_agent(deployment_ticket, "NOPE")
