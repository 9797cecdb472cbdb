"""Interaction log — bounded, per-ticket diagnostic trail of agent actions.

Every specialist records what it did with a ticket (analyze, execute,
handoff). Nothing in the routing loop reads the log back; it is exposed
for diagnostics only. Tickets are evicted least-recently-used once the
log holds ``capacity`` tickets.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from taskgenie.domain.value_objects.enums import AgentRole


@dataclass(frozen=True)
class Interaction:
    role: AgentRole
    action: str
    result: Any
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InteractionLog:
    def __init__(self, capacity: int = 500):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._entries: OrderedDict[int, list[Interaction]] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, ticket_id: int, role: AgentRole, action: str, result: Any) -> None:
        entries = self._entries.get(ticket_id)
        if entries is None:
            entries = self._entries[ticket_id] = []
        else:
            self._entries.move_to_end(ticket_id)
        entries.append(Interaction(role=role, action=action, result=result))

        while len(self._entries) > self._capacity:
            self._entries.popitem(last=False)

    def recall(self, ticket_id: int) -> list[Interaction]:
        entries = self._entries.get(ticket_id)
        if entries is None:
            return []
        self._entries.move_to_end(ticket_id)
        return list(entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, ticket_id: object) -> bool:
        return ticket_id in self._entries
