"""Workflow metrics — process-wide counters from orchestrator runs."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from taskgenie.domain.value_objects.enums import AgentRole


@dataclass
class RoleUtilization:
    tasks_handled: int = 0
    average_confidence: float = 0.0
    success_rate: float = 0.0
    average_processing_time: float = 0.0
    confidence_samples: int = 0


@dataclass
class WorkflowMetrics:
    total_workflows: int = 0
    successful_workflows: int = 0
    average_processing_time: float = 0.0
    handoff_count: int = 0
    agent_utilization: dict[AgentRole, RoleUtilization] = field(default_factory=dict)
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
