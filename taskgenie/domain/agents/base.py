"""Specialist agent base — keyword-driven ticket classifier.

A specialist is declared as data: capability keyword lists (confidence),
keyword groups (analysis findings), handoff rules, can-handle keywords
and a set of tools. ``SpecialistAgent`` turns that data into the four
operations the orchestrator and the API use:

* ``analyze(ticket)``        → AgentAnalysis
* ``execute(task, context)`` → ExecutionResult (never raises)
* ``should_handoff(ticket)`` → AgentRole | None (first matching rule wins)
* ``can_handle(ticket)``     → bool
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from taskgenie.domain.agents.memory import InteractionLog
from taskgenie.domain.entities.agent_analysis import AgentAnalysis
from taskgenie.domain.entities.execution_result import ExecutionResult
from taskgenie.domain.entities.ticket import Ticket
from taskgenie.domain.value_objects.enums import (
    AgentRole,
    Complexity,
    ExecutionStatus,
    Priority,
    ToolKind,
)

logger = logging.getLogger(__name__)

CONFIDENCE_STEP = 0.2


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    """Return True if any keyword appears as a substring in *text*."""
    return any(k in text for k in keywords)


def join_values(values) -> str:
    return ", ".join(str(v) for v in values)


@dataclass(frozen=True)
class KeywordGroup:
    """One analysis finding, reported when any of ``keywords`` is in the text.

    Exclusive groups form an ordered chain where only the first match is
    reported; non-exclusive groups are reported whenever they match. When
    ``requires`` is set, one of those keywords must also be present.
    """

    keywords: tuple[str, ...]
    sentence: str
    actions: tuple[str, ...] = ()
    complexity: Complexity | None = None
    estimated_time: str | None = None
    priority: Priority | None = None
    next_role: AgentRole | None = None
    exclusive: bool = False
    requires: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        if self.requires and not contains_any(text, self.requires):
            return False
        return contains_any(text, self.keywords)


@dataclass(frozen=True)
class HandoffRule:
    target: AgentRole
    keywords: tuple[str, ...]


ToolHandler = Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True)
class ToolSpec:
    """A canned tool and the text that selects it.

    ``triggers`` is a conjunction of keyword sets: the tool applies when
    every set has at least one keyword in the task text.
    """

    kind: ToolKind
    triggers: tuple[tuple[str, ...], ...]
    handler: ToolHandler
    recommendations: tuple[str, ...] | None = None

    def applies(self, text: str) -> bool:
        return all(contains_any(text, keywords) for keywords in self.triggers)

    def run(self, context: Mapping[str, Any]) -> ExecutionResult:
        return ExecutionResult(
            status=ExecutionStatus.COMPLETED,
            details=self.handler(context),
            recommendations=self.recommendations,
            tool=self.kind,
        )


class SpecialistAgent:
    """Base class for the six specialists. Subclasses only declare data."""

    role: AgentRole
    title: str
    task_label: str
    capabilities: Mapping[str, tuple[str, ...]] = {}
    groups: tuple[KeywordGroup, ...] = ()
    fallback_sentence: str = "No specific issues identified, general review needed"
    fallback_actions: tuple[str, ...] = ()
    handoff_rules: tuple[HandoffRule, ...] = ()
    handle_keywords: tuple[str, ...] = ()
    tools: tuple[ToolSpec, ...] = ()
    default_recommendations: tuple[str, ...] = ()
    default_complexity: Complexity = Complexity.MEDIUM
    default_estimated_time: str = "2-4 hours"

    def __init__(self, memory: InteractionLog | None = None):
        self.memory = memory if memory is not None else InteractionLog()

    # ── Confidence ──────────────────────────────────────────────────

    def confidence_for(self, text: str) -> float:
        """+0.2 per capability keyword found in *text*, clamped to [0, 1]."""
        score = 0.0
        for keywords in self.capabilities.values():
            for keyword in keywords:
                if keyword in text:
                    score += CONFIDENCE_STEP
        return max(0.0, min(1.0, score))

    # ── Analysis ────────────────────────────────────────────────────

    def findings(self, text: str) -> list[KeywordGroup]:
        """Keyword groups that apply to *text*, in report order."""
        found: list[KeywordGroup] = []
        exclusive_matched = False
        for group in self.groups:
            if group.exclusive:
                if not exclusive_matched and group.matches(text):
                    found.append(group)
                    exclusive_matched = True
            elif group.matches(text):
                found.append(group)
        return found

    def analyze(self, ticket: Ticket) -> AgentAnalysis:
        text = ticket.content()
        found = self.findings(text)

        complexity = self.default_complexity
        estimated_time = self.default_estimated_time
        priority = ticket.priority
        next_role: AgentRole | None = None
        lines: list[str] = []
        actions: list[str] = []

        for group in found:
            lines.append(f"• {group.sentence}")
            actions.extend(group.actions)
            if group.complexity is not None:
                complexity = group.complexity
            if group.estimated_time is not None:
                estimated_time = group.estimated_time
            if group.priority is not None:
                priority = group.priority
            if group.next_role is not None:
                next_role = group.next_role

        if not lines:
            lines.append(f"• {self.fallback_sentence}")
            actions.extend(self.fallback_actions)

        analysis = AgentAnalysis(
            role=self.role,
            analysis=f"{self.title} Analysis:\n" + "\n".join(lines),
            confidence=self.confidence_for(text),
            recommended_actions=tuple(actions),
            next_role=next_role,
            priority=priority,
            estimated_time=estimated_time,
            complexity=complexity,
        )
        self.memory.record(ticket.id, self.role, "analyze", analysis)
        return analysis

    # ── Execution ───────────────────────────────────────────────────

    def select_tool(self, text: str) -> ToolSpec | None:
        for tool in self.tools:
            if tool.applies(text):
                return tool
        return None

    def execute(
        self, task: Ticket | str, context: Mapping[str, Any] | None = None
    ) -> ExecutionResult:
        """Run the tool that matches *task*; failures come back as FAILED results."""
        context = dict(context or {})
        if isinstance(task, Ticket):
            context.setdefault("ticket_id", task.id)
            if task.priority is not None:
                context.setdefault("priority", task.priority.value)
        ticket_id = context.get("ticket_id")

        try:
            text = task.content() if isinstance(task, Ticket) else task.lower()
            tool = self.select_tool(text)
            if tool is None:
                subject = task.subject if isinstance(task, Ticket) else task
                result = ExecutionResult(
                    status=ExecutionStatus.COMPLETED,
                    details=f"{self.task_label} task executed: {subject}",
                    recommendations=self.default_recommendations,
                )
            else:
                result = tool.run(context)
        except Exception as e:
            logger.exception("%s execution failed for ticket %s", self.role.value, ticket_id)
            result = ExecutionResult(
                status=ExecutionStatus.FAILED,
                details=f"{self.title} execution failed",
                error=str(e),
            )

        if ticket_id is not None:
            self.memory.record(ticket_id, self.role, "execute", result)
        return result

    # ── Routing ─────────────────────────────────────────────────────

    def route(self, text: str) -> AgentRole | None:
        for rule in self.handoff_rules:
            if contains_any(text, rule.keywords):
                return rule.target
        return None

    def should_handoff(self, ticket: Ticket) -> AgentRole | None:
        target = self.route(ticket.content())
        if target is not None:
            self.memory.record(ticket.id, self.role, "handoff", target.value)
        return target

    def can_handle(self, ticket: Ticket) -> bool:
        return contains_any(ticket.content(), self.handle_keywords)
