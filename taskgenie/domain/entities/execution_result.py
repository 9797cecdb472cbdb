"""Execution result — outcome of a specialist running one of its tools."""

from dataclasses import dataclass

from taskgenie.domain.value_objects.enums import ExecutionStatus, ToolKind


@dataclass(frozen=True)
class ExecutionResult:
    status: ExecutionStatus
    details: str
    recommendations: tuple[str, ...] | None = None
    error: str | None = None
    tool: ToolKind | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == ExecutionStatus.COMPLETED
