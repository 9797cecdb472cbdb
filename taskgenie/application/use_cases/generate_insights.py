"""GenerateInsightsUseCase — workflow run plus a natural-language summary."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from taskgenie.application.ports.insights_port import InsightsPort
from taskgenie.application.ports.routing_result_repo import RoutingResultRepository
from taskgenie.application.use_cases.orchestrator import Orchestrator
from taskgenie.application.use_cases.process_ticket import (
    save_routing_result,
    to_routing_result,
)
from taskgenie.domain.entities.ticket import Ticket
from taskgenie.domain.entities.workflow import MultiAgentResponse

logger = logging.getLogger(__name__)


@dataclass
class InsightsReport:
    response: MultiAgentResponse
    summary: str
    result_id: int | None = None
    storage_error: str | None = None


class GenerateInsightsUseCase:
    def __init__(
        self,
        orchestrator: Orchestrator,
        insights: InsightsPort,
        results_repo: RoutingResultRepository,
    ):
        self._orchestrator = orchestrator
        self._insights = insights
        self._results = results_repo

    async def execute(self, ticket: Ticket) -> InsightsReport:
        response = self._orchestrator.process_ticket(ticket)
        summary = await self._insights.summarize(ticket, response)
        result_id, error = await save_routing_result(
            self._results, to_routing_result(response, summary=summary)
        )
        logger.info("Ticket %s: comprehensive insights generated", ticket.id)
        return InsightsReport(
            response=response, summary=summary, result_id=result_id, storage_error=error,
        )
