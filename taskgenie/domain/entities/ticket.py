"""Ticket entity — a Zendesk support request entering the routing pipeline."""

from dataclasses import dataclass, field
from datetime import datetime

from taskgenie.domain.value_objects.enums import Priority, TicketStatus


@dataclass
class Ticket:
    id: int
    subject: str | None
    description: str | None
    status: TicketStatus = TicketStatus.NEW
    priority: Priority | None = None
    tags: list[str] = field(default_factory=list)
    requester_id: int | None = None
    assignee_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def content(self) -> str:
        """Lower-cased ``subject + " " + description``.

        This is the only text the specialists match against. The fields are
        not validated: a missing subject or description raises TypeError.
        """
        return (self.subject + " " + self.description).lower()
