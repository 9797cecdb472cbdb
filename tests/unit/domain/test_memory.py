"""Tests for the bounded interaction log."""

import pytest

from taskgenie.domain.agents.memory import InteractionLog
from taskgenie.domain.value_objects.enums import AgentRole


def test_record_and_recall_in_order():
    log = InteractionLog()
    log.record(1, AgentRole.PROJECT_MANAGER, "analyze", "a")
    log.record(1, AgentRole.PROJECT_MANAGER, "execute", "b")

    entries = log.recall(1)
    assert [e.action for e in entries] == ["analyze", "execute"]
    assert entries[0].role == AgentRole.PROJECT_MANAGER
    assert entries[1].result == "b"


def test_recall_unknown_ticket_is_empty():
    assert InteractionLog().recall(42) == []


def test_recall_returns_a_copy():
    log = InteractionLog()
    log.record(1, AgentRole.DEVOPS, "analyze", None)
    log.recall(1).clear()
    assert len(log.recall(1)) == 1


def test_least_recently_used_ticket_is_evicted():
    log = InteractionLog(capacity=2)
    log.record(1, AgentRole.DEVOPS, "analyze", None)
    log.record(2, AgentRole.DEVOPS, "analyze", None)
    log.recall(1)  # ticket 2 is now the oldest
    log.record(3, AgentRole.DEVOPS, "analyze", None)

    assert len(log) == 2
    assert 1 in log
    assert 2 not in log
    assert 3 in log


def test_clear():
    log = InteractionLog()
    log.record(1, AgentRole.QA_TESTER, "analyze", None)
    log.clear()
    assert len(log) == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        InteractionLog(capacity=0)
