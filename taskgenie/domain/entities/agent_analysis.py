"""Agent analysis — one specialist's reading of a ticket."""

from dataclasses import dataclass

from taskgenie.domain.value_objects.enums import AgentRole, Complexity, Priority


@dataclass(frozen=True)
class AgentAnalysis:
    role: AgentRole
    analysis: str
    confidence: float
    recommended_actions: tuple[str, ...] = ()
    next_role: AgentRole | None = None
    priority: Priority | None = None
    estimated_time: str | None = None
    complexity: Complexity | None = None
