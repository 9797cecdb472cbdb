"""MetricsStore — process-wide workflow counters, injected into the orchestrator."""

from __future__ import annotations

import copy
import threading
from datetime import datetime, timezone
from typing import Iterable

from taskgenie.domain.entities.metrics import RoleUtilization, WorkflowMetrics
from taskgenie.domain.entities.workflow import WorkflowState
from taskgenie.domain.value_objects.enums import AgentRole


def _running_mean(previous: float, count: int, sample: float) -> float:
    """Fold *sample* into a mean that already covers ``count - 1`` samples."""
    return (previous * (count - 1) + sample) / count


class MetricsStore:
    """Thread-safe accumulator for orchestrator runs.

    Every read-modify-write happens under one lock so that concurrent
    requests sharing a store do not lose updates to the running means.
    """

    def __init__(self, roles: Iterable[AgentRole] = tuple(AgentRole)):
        self._roles = tuple(roles)
        self._lock = threading.Lock()
        self._metrics = self._fresh()

    def _fresh(self) -> WorkflowMetrics:
        return WorkflowMetrics(
            agent_utilization={role: RoleUtilization() for role in self._roles},
        )

    def _touch(self) -> None:
        self._metrics.last_updated = datetime.now(timezone.utc)

    # ── Recording ───────────────────────────────────────────────────

    def begin_workflow(self) -> None:
        with self._lock:
            self._metrics.total_workflows += 1
            self._touch()

    def record_handoff(self) -> None:
        with self._lock:
            self._metrics.handoff_count += 1

    def record_success(self, workflow: WorkflowState, processing_time_ms: float) -> None:
        with self._lock:
            self._metrics.successful_workflows += 1
            self._fold_processing_time(processing_time_ms)
            self._update_roles(workflow, processing_time_ms, succeeded=True)
            self._touch()

    def record_failure(self, workflow: WorkflowState | None, processing_time_ms: float) -> None:
        """Count a failed run; roles that took part get a 0 in their success rate."""
        with self._lock:
            self._fold_processing_time(processing_time_ms)
            if workflow is not None:
                self._update_roles(workflow, processing_time_ms, succeeded=False)
            self._touch()

    def _fold_processing_time(self, processing_time_ms: float) -> None:
        m = self._metrics
        # A run recorded without begin_workflow still counts as one sample.
        n = max(m.total_workflows, 1)
        m.average_processing_time = _running_mean(m.average_processing_time, n, processing_time_ms)

    def _update_roles(
        self, workflow: WorkflowState, processing_time_ms: float, succeeded: bool
    ) -> None:
        for role in dict.fromkeys(workflow.agents_involved):
            stats = self._metrics.agent_utilization.setdefault(role, RoleUtilization())
            stats.tasks_handled += 1
            n = stats.tasks_handled

            confidences = [i.confidence for i in workflow.context.insights if i.role == role]
            if confidences:
                stats.confidence_samples += 1
                stats.average_confidence = _running_mean(
                    stats.average_confidence,
                    stats.confidence_samples,
                    sum(confidences) / len(confidences),
                )

            stats.success_rate = _running_mean(stats.success_rate, n, 1.0 if succeeded else 0.0)
            stats.average_processing_time = _running_mean(
                stats.average_processing_time, n, processing_time_ms
            )

    # ── Reading / reset ─────────────────────────────────────────────

    def snapshot(self) -> WorkflowMetrics:
        with self._lock:
            return copy.deepcopy(self._metrics)

    def reset(self) -> None:
        with self._lock:
            self._metrics = self._fresh()
