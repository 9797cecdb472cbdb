"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskgenie.adapters.llm.openai_adapter import OpenAIInsightsAdapter
from taskgenie.adapters.persistence.database import get_session
from taskgenie.adapters.persistence.repositories import SqlRoutingResultRepository
from taskgenie.application.metrics_store import MetricsStore
from taskgenie.application.use_cases.generate_insights import GenerateInsightsUseCase
from taskgenie.application.use_cases.orchestrator import Orchestrator
from taskgenie.application.use_cases.process_ticket import ProcessTicketUseCase
from taskgenie.config import settings
from taskgenie.domain.agents.memory import InteractionLog

# Process-wide singletons: metrics and the interaction log live as long as the app.
_metrics_store = MetricsStore()
_orchestrator = Orchestrator(
    metrics=_metrics_store,
    max_iterations=settings.max_workflow_iterations,
    max_role_visits=settings.max_role_visits or None,
    interaction_log=InteractionLog(settings.interaction_log_capacity),
)
_insights_adapter = OpenAIInsightsAdapter()


def get_orchestrator() -> Orchestrator:
    return _orchestrator


def get_results_repo(session: AsyncSession = Depends(get_session)) -> SqlRoutingResultRepository:
    return SqlRoutingResultRepository(session)


def get_process_ticket_uc(
    orchestrator: Orchestrator = Depends(get_orchestrator),
    session: AsyncSession = Depends(get_session),
) -> ProcessTicketUseCase:
    return ProcessTicketUseCase(
        orchestrator=orchestrator,
        results_repo=SqlRoutingResultRepository(session),
    )


def get_generate_insights_uc(
    orchestrator: Orchestrator = Depends(get_orchestrator),
    session: AsyncSession = Depends(get_session),
) -> GenerateInsightsUseCase:
    return GenerateInsightsUseCase(
        orchestrator=orchestrator,
        insights=_insights_adapter,
        results_repo=SqlRoutingResultRepository(session),
    )
