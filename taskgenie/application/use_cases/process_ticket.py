"""ProcessTicketUseCase — run the multi-agent workflow and store the outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from taskgenie.application.ports.routing_result_repo import RoutingResultRepository
from taskgenie.application.use_cases.orchestrator import Orchestrator
from taskgenie.domain.entities.routing_result import RoutingResult
from taskgenie.domain.entities.ticket import Ticket
from taskgenie.domain.entities.workflow import MultiAgentResponse

logger = logging.getLogger(__name__)


@dataclass
class ProcessedTicket:
    """Workflow outcome plus the id it was stored under.

    ``result_id`` is None when storing failed; ``storage_error`` then
    carries the reason. The routing response itself is always complete.
    """

    response: MultiAgentResponse
    result_id: int | None = None
    storage_error: str | None = None

    @property
    def stored(self) -> bool:
        return self.result_id is not None


def to_routing_result(response: MultiAgentResponse, summary: str | None = None) -> RoutingResult:
    """Flatten an orchestrator response into its persisted form.

    The primary role is the specialist that held the ticket last.
    """
    return RoutingResult(
        id=None,
        ticket_id=response.ticket_id,
        primary_role=response.workflow.current_role,
        agents_involved=list(response.agents_involved),
        handoff_count=response.handoff_count,
        confidence=response.confidence,
        recommendations=list(response.final_recommendations),
        processing_time_ms=response.processing_time_ms,
        summary=summary,
    )


async def save_routing_result(
    repo: RoutingResultRepository, result: RoutingResult
) -> tuple[int | None, str | None]:
    """Store *result*; returns ``(id, None)`` or ``(None, error)``."""
    try:
        stored = await repo.save(result)
    except Exception as e:
        logger.exception("Ticket %s: failed to store routing result", result.ticket_id)
        return None, str(e)
    return stored.id, None


class ProcessTicketUseCase:
    def __init__(self, orchestrator: Orchestrator, results_repo: RoutingResultRepository):
        self._orchestrator = orchestrator
        self._results = results_repo

    async def execute(self, ticket: Ticket) -> ProcessedTicket:
        """Route *ticket* through the specialists and store the outcome.

        OrchestrationError from the workflow propagates unchanged; nothing
        is stored for a failed run. A storage failure does not discard the
        routing response.
        """
        response = self._orchestrator.process_ticket(ticket)
        result = to_routing_result(response)
        result_id, error = await save_routing_result(self._results, result)
        logger.info(
            "Ticket %s: routed to %s (result id=%s, handoffs=%d)",
            ticket.id, result.primary_role.value, result_id, result.handoff_count,
        )
        return ProcessedTicket(response=response, result_id=result_id, storage_error=error)
