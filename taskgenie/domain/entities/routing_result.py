"""RoutingResult entity — stored outcome of one multi-agent run."""

from dataclasses import dataclass, field
from datetime import datetime

from taskgenie.domain.value_objects.enums import AgentRole


@dataclass
class RoutingResult:
    id: int | None
    ticket_id: int
    primary_role: AgentRole
    agents_involved: list[AgentRole]
    handoff_count: int
    confidence: float
    recommendations: list[str] = field(default_factory=list)
    processing_time_ms: float = 0.0
    summary: str | None = None
    created_at: datetime | None = None
