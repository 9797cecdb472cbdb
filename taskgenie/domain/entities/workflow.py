"""Workflow state and the orchestrator's response for one ticket."""

from dataclasses import dataclass, field

from taskgenie.domain.entities.agent_analysis import AgentAnalysis
from taskgenie.domain.value_objects.enums import AgentRole


@dataclass
class WorkflowContext:
    insights: list[AgentAnalysis] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    confidence: float = 0.0


@dataclass
class WorkflowState:
    """Mutable state of a single orchestrator run."""

    ticket_id: int
    current_role: AgentRole = AgentRole.PROJECT_MANAGER
    previous_roles: list[AgentRole] = field(default_factory=list)
    context: WorkflowContext = field(default_factory=WorkflowContext)
    is_complete: bool = False
    handoff_reason: str = ""
    iterations: int = 0

    @property
    def agents_involved(self) -> list[AgentRole]:
        return [self.current_role, *self.previous_roles]

    def visits(self, role: AgentRole) -> int:
        """How many times *role* has held the ticket in this run, including now."""
        return self.agents_involved.count(role)


@dataclass
class MultiAgentResponse:
    ticket_id: int
    workflow: WorkflowState
    final_recommendations: list[str]
    confidence: float
    processing_time_ms: float
    agents_involved: list[AgentRole]
    handoff_count: int
    agent_analyses: list[AgentAnalysis] = field(default_factory=list)
