"""Request models for the agents API."""

from datetime import datetime

from pydantic import BaseModel, Field

from taskgenie.domain.entities.ticket import Ticket
from taskgenie.domain.value_objects.enums import AgentRole, Priority, TicketStatus


class TicketPayload(BaseModel):
    id: int
    subject: str
    description: str
    status: TicketStatus = TicketStatus.NEW
    priority: Priority | None = None
    tags: list[str] = Field(default_factory=list)
    requester_id: int | None = None
    assignee_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_domain(self) -> Ticket:
        return Ticket(
            id=self.id,
            subject=self.subject,
            description=self.description,
            status=self.status,
            priority=self.priority,
            tags=list(self.tags),
            requester_id=self.requester_id,
            assignee_id=self.assignee_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class TicketRequest(BaseModel):
    ticket: TicketPayload


class RouteTicketRequest(BaseModel):
    ticket: TicketPayload
    target_role: AgentRole
