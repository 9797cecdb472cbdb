"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskgenie.adapters.persistence.models import RoutingResultModel
from taskgenie.application.ports.routing_result_repo import RoutingResultRepository
from taskgenie.domain.entities.routing_result import RoutingResult
from taskgenie.domain.value_objects.enums import AgentRole

# ─── Mappers ─────────────────────────────────────────────────────────


def _routing_result_to_domain(m: RoutingResultModel) -> RoutingResult:
    return RoutingResult(
        id=m.id,
        ticket_id=m.ticket_id,
        primary_role=AgentRole(m.primary_role),
        agents_involved=[AgentRole(r) for r in (m.agents_involved or [])],
        handoff_count=m.handoff_count,
        confidence=m.confidence,
        recommendations=list(m.recommendations or []),
        processing_time_ms=m.processing_time_ms,
        summary=m.summary,
        created_at=m.created_at,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlRoutingResultRepository(RoutingResultRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, result: RoutingResult) -> RoutingResult:
        m = RoutingResultModel(
            ticket_id=result.ticket_id,
            primary_role=result.primary_role.value,
            agents_involved=[r.value for r in result.agents_involved],
            handoff_count=result.handoff_count,
            confidence=result.confidence,
            recommendations=list(result.recommendations),
            processing_time_ms=result.processing_time_ms,
            summary=result.summary,
        )
        self._s.add(m)
        try:
            await self._s.flush()
        except SQLAlchemyError:
            # leave the session usable for the request-scoped commit
            await self._s.rollback()
            raise
        result.id = m.id
        return result

    async def get_latest_for_ticket(self, ticket_id: int) -> RoutingResult | None:
        result = await self._s.execute(
            select(RoutingResultModel)
            .where(RoutingResultModel.ticket_id == ticket_id)
            .order_by(RoutingResultModel.id.desc())
            .limit(1)
        )
        m = result.scalar_one_or_none()
        return _routing_result_to_domain(m) if m else None

    async def get_recent(self, limit: int = 50) -> list[RoutingResult]:
        result = await self._s.execute(
            select(RoutingResultModel).order_by(RoutingResultModel.id.desc()).limit(limit)
        )
        return [_routing_result_to_domain(m) for m in result.scalars()]
