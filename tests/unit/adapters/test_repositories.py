"""Tests for the ORM-to-domain mapper and save error handling (no database)."""

from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import OperationalError

from taskgenie.adapters.persistence.models import RoutingResultModel
from taskgenie.adapters.persistence.repositories import (
    SqlRoutingResultRepository,
    _routing_result_to_domain,
)
from taskgenie.domain.entities.routing_result import RoutingResult
from taskgenie.domain.value_objects.enums import AgentRole


def test_routing_result_mapper():
    created = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)
    m = RoutingResultModel(
        id=3,
        ticket_id=101,
        primary_role="DEVOPS",
        agents_involved=["DEVOPS", "PROJECT_MANAGER"],
        handoff_count=1,
        confidence=0.5,
        recommendations=["Restart the container"],
        processing_time_ms=4.2,
        summary=None,
        created_at=created,
    )

    r = _routing_result_to_domain(m)

    assert r.id == 3
    assert r.primary_role == AgentRole.DEVOPS
    assert r.agents_involved == [AgentRole.DEVOPS, AgentRole.PROJECT_MANAGER]
    assert r.recommendations == ["Restart the container"]
    assert r.created_at == created


# ─── In-memory fakes ────────────────────────────────────────────────


class FailingSession:
    def __init__(self):
        self.added = []
        self.rolled_back = False

    def add(self, m):
        self.added.append(m)

    async def flush(self):
        raise OperationalError("INSERT INTO routing_results", {}, ConnectionError("db down"))

    async def rollback(self):
        self.rolled_back = True


@pytest.mark.asyncio
async def test_failed_save_rolls_back_session():
    session = FailingSession()
    repo = SqlRoutingResultRepository(session)
    result = RoutingResult(
        id=None,
        ticket_id=101,
        primary_role=AgentRole.DEVOPS,
        agents_involved=[AgentRole.DEVOPS, AgentRole.PROJECT_MANAGER],
        handoff_count=1,
        confidence=0.5,
        recommendations=["Restart the container"],
        processing_time_ms=4.2,
    )

    with pytest.raises(OperationalError):
        await repo.save(result)

    assert session.rolled_back is True
    assert result.id is None
