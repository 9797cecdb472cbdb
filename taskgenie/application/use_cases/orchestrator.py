"""Orchestrator — drives a ticket through the specialists.

Every workflow starts at the project manager. Each iteration the current
specialist analyzes the ticket, runs its tool, and either names the next
role or ends the run. Runs end when no handoff is requested, when the
handoff target has already held the ticket ``max_role_visits`` times, or
when ``max_iterations`` is reached.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from taskgenie.application.metrics_store import MetricsStore
from taskgenie.domain.agents.memory import InteractionLog
from taskgenie.domain.agents.registry import AgentRegistry
from taskgenie.domain.entities.agent_analysis import AgentAnalysis
from taskgenie.domain.entities.metrics import WorkflowMetrics
from taskgenie.domain.entities.ticket import Ticket
from taskgenie.domain.entities.workflow import MultiAgentResponse, WorkflowState
from taskgenie.domain.errors import AgentCannotHandleError, OrchestrationError
from taskgenie.domain.value_objects.enums import AgentRole

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 10


@dataclass
class AgentStatus:
    role: AgentRole
    status: str
    tasks_handled: int
    success_rate: float
    average_processing_time: float
    average_confidence: float
    capabilities: list[str] = field(default_factory=list)


class Orchestrator:
    def __init__(
        self,
        registry: AgentRegistry | None = None,
        metrics: MetricsStore | None = None,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        max_role_visits: int | None = 1,
        interaction_log: InteractionLog | None = None,
    ):
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if max_role_visits is not None and max_role_visits < 1:
            raise ValueError("max_role_visits must be at least 1 or None")

        if registry is not None and interaction_log is not None:
            raise ValueError("interaction_log cannot be combined with an explicit registry")

        self.registry = registry if registry is not None else AgentRegistry(memory=interaction_log)
        self.metrics = metrics if metrics is not None else MetricsStore(self.registry.roles())
        self.max_iterations = max_iterations
        self.max_role_visits = max_role_visits

    # ── Entry points ────────────────────────────────────────────────

    def process_ticket(self, ticket: Ticket) -> MultiAgentResponse:
        """Run the full multi-agent workflow for *ticket*.

        Raises OrchestrationError if anything inside the loop fails; the
        run is then recorded as a failure and no partial result is returned.
        """
        started = time.perf_counter()
        self.metrics.begin_workflow()
        state = WorkflowState(ticket_id=ticket.id)
        logger.info("Starting multi-agent workflow for ticket %s", ticket.id)

        try:
            self._run(ticket, state)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            self.metrics.record_failure(state, elapsed_ms)
            logger.exception("Multi-agent processing failed for ticket %s", ticket.id)
            raise OrchestrationError(f"Multi-agent processing failed: {e}") from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        self.metrics.record_success(state, elapsed_ms)

        logger.info(
            "Ticket %s processed by %s in %.1f ms (confidence %.2f)",
            ticket.id,
            " -> ".join(r.value for r in reversed(state.agents_involved)),
            elapsed_ms,
            state.context.confidence,
        )

        return MultiAgentResponse(
            ticket_id=ticket.id,
            workflow=state,
            final_recommendations=state.context.recommendations,
            confidence=state.context.confidence,
            processing_time_ms=elapsed_ms,
            agents_involved=state.agents_involved,
            handoff_count=len(state.previous_roles),
            agent_analyses=state.context.insights,
        )

    def route_to_agent(self, ticket: Ticket, target_role: AgentRole | str) -> AgentAnalysis:
        """Analyze *ticket* with a single specialist, bypassing the workflow loop."""
        agent = self.registry.get(target_role)
        if not agent.can_handle(ticket):
            raise AgentCannotHandleError(agent.role.value)
        return agent.analyze(ticket)

    # ── Loop ────────────────────────────────────────────────────────

    def _run(self, ticket: Ticket, state: WorkflowState) -> None:
        ctx = state.context

        while not state.is_complete and state.iterations < self.max_iterations:
            state.iterations += 1
            agent = self.registry.get(state.current_role)

            analysis = agent.analyze(ticket)
            ctx.insights.append(analysis)

            result = agent.execute(ticket, {"ticket_id": ticket.id})
            if result.recommendations is not None:
                ctx.recommendations.extend(result.recommendations)
            elif result.succeeded and result.details:
                ctx.recommendations.append(result.details)

            ctx.confidence = sum(i.confidence for i in ctx.insights) / len(ctx.insights)

            target = agent.should_handoff(ticket)
            if target is None:
                state.is_complete = True
                break

            if self.max_role_visits is not None and state.visits(target) >= self.max_role_visits:
                state.is_complete = True
                state.handoff_reason = (
                    f"Handoff from {state.current_role.value} to {target.value} "
                    f"skipped: role already visited"
                )
                logger.info("Ticket %s: %s", ticket.id, state.handoff_reason)
                break

            state.handoff_reason = f"Handoff from {state.current_role.value} to {target.value}"
            state.previous_roles.append(state.current_role)
            state.current_role = target
            self.metrics.record_handoff()
            logger.info("Ticket %s: %s", ticket.id, state.handoff_reason)

        if not state.is_complete:
            logger.warning(
                "Ticket %s reached max iterations (%d), forcing completion",
                ticket.id,
                self.max_iterations,
            )
            state.is_complete = True

    # ── Metrics / status ────────────────────────────────────────────

    def get_workflow_metrics(self) -> WorkflowMetrics:
        return self.metrics.snapshot()

    def reset_metrics(self) -> None:
        self.metrics.reset()

    def agent_statuses(self) -> list[AgentStatus]:
        snapshot = self.metrics.snapshot()
        statuses = []
        for role, agent in self.registry:
            stats = snapshot.agent_utilization.get(role)
            statuses.append(AgentStatus(
                role=role,
                status="active",
                tasks_handled=stats.tasks_handled if stats else 0,
                success_rate=stats.success_rate if stats else 0.0,
                average_processing_time=stats.average_processing_time if stats else 0.0,
                average_confidence=stats.average_confidence if stats else 0.0,
                capabilities=list(agent.capabilities),
            ))
        return statuses

    def agent_status(self, role: AgentRole | str) -> AgentStatus:
        agent = self.registry.get(role)
        return next(s for s in self.agent_statuses() if s.role == agent.role)
