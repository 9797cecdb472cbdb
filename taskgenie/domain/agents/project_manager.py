"""Project manager — entry point of every workflow.

Assesses business impact (affected users, deadlines, reporting systems,
errors) and routes the ticket to the first specialist whose keywords it
contains.
"""

from __future__ import annotations

import re

from taskgenie.domain.agents.base import (
    HandoffRule,
    KeywordGroup,
    SpecialistAgent,
    ToolSpec,
    join_values,
)
from taskgenie.domain.entities.agent_analysis import AgentAnalysis
from taskgenie.domain.entities.ticket import Ticket
from taskgenie.domain.value_objects.enums import AgentRole, Complexity, Priority, ToolKind

USERS_AFFECTED_RE = re.compile(r"(\d+)\s+users?\s+(affected|impacted|blocked)")

# Above this many affected users the ticket becomes high priority / complex.
MANY_USERS = 10

ROUTING_REASONS = {
    AgentRole.WORDPRESS_DEVELOPER: "WordPress platform keywords detected",
    AgentRole.DEVOPS: "Infrastructure or deployment keywords detected",
    AgentRole.QA_TESTER: "Testing or quality keywords detected",
    AgentRole.BUSINESS_ANALYST: "Business process or requirements keywords detected",
    AgentRole.SOFTWARE_ENGINEER: "Application or code-level keywords detected",
}


def _progress(ctx) -> str:
    completed = ctx.get("completed_tasks", 0)
    total = ctx.get("total_tasks", 10)
    percent = round(completed / total * 100)
    milestones = join_values(ctx.get("milestones", ["Phase 1"]))
    return (
        f"Progress tracking for {ctx.get('project', 'Current Project')}: "
        f"{percent}% complete ({completed}/{total} tasks), Milestones: {milestones}"
    )


class ProjectManagerAgent(SpecialistAgent):
    role = AgentRole.PROJECT_MANAGER
    title = "Project Manager"
    task_label = "Project management"

    capabilities = {
        "project_planning": ("project", "planning", "scope", "timeline"),
        "resource_management": ("resource", "team", "allocation", "capacity"),
        "timeline_management": ("timeline", "schedule", "deadline", "milestone"),
        "risk_management": ("risk", "issue", "problem", "mitigation"),
        "stakeholder_communication": ("stakeholder", "communication", "reporting", "update"),
        "quality_assurance": ("quality", "standard", "review", "deliverable"),
        "budget_management": ("budget", "cost", "expense", "financial"),
        "team_coordination": ("team", "coordination", "collaboration", "workflow"),
        "progress_monitoring": ("progress", "tracking", "monitoring", "metrics"),
    }

    handoff_rules = (
        HandoffRule(
            AgentRole.WORDPRESS_DEVELOPER,
            ("wordpress", "wp-", "plugin", "theme", "woocommerce", "gutenberg"),
        ),
        HandoffRule(
            AgentRole.DEVOPS,
            ("server", "deployment", "infrastructure", "docker", "kubernetes", "aws", "cloud", "hosting"),
        ),
        HandoffRule(AgentRole.QA_TESTER, ("test", "testing", "qa", "quality", "regression")),
        HandoffRule(
            AgentRole.BUSINESS_ANALYST,
            ("requirements", "business", "process", "workflow", "specification"),
        ),
        HandoffRule(
            AgentRole.SOFTWARE_ENGINEER,
            (
                "api", "code", "bug", "error", "exception", "crash", "integration",
                "backend", "frontend", "500", "database", "feature",
            ),
        ),
    )

    handle_keywords = (
        "project", "planning", "coordination", "management", "timeline", "milestone",
        "resource", "team", "stakeholder", "communication", "deadline", "schedule",
        "priority", "scope", "deliverable", "quality", "budget", "risk", "issue", "escalation",
    )

    tools = (
        ToolSpec(
            ToolKind.PROJECT_PLANNING,
            (("planning", "project plan"),),
            lambda ctx: (
                f"Project plan created: {ctx.get('project_name', 'New Project')} - "
                f"Scope: {ctx.get('scope', 'To be defined')}, "
                f"Timeline: {ctx.get('timeline', '3 months')}, "
                f"Resources: {join_values(ctx.get('resources', ['team_lead', 'developers']))}"
            ),
        ),
        ToolSpec(
            ToolKind.RESOURCE_ALLOCATION,
            (("resource", "allocation"),),
            lambda ctx: (
                f"Resource allocation for {ctx.get('project', 'Current Project')}: "
                f"Team: {join_values(ctx.get('team_members', ['developer', 'designer']))}, "
                f"Roles: {join_values(ctx.get('roles', ['development', 'design']))}, "
                f"Workload: {ctx.get('workload', 'balanced')}"
            ),
        ),
        ToolSpec(
            ToolKind.RISK_MANAGEMENT,
            (("risk", "issue"),),
            lambda ctx: (
                f"Risk management: Risks identified: {join_values(ctx.get('risks', ['timeline risk']))}, "
                f"Impact: {ctx.get('impact_level', 'medium')}, "
                f"Mitigation: {join_values(ctx.get('mitigation_strategies', ['contingency planning']))}"
            ),
        ),
        ToolSpec(ToolKind.PROGRESS_TRACKING, (("progress", "tracking"),), _progress),
        ToolSpec(
            ToolKind.STAKEHOLDER_COMMUNICATION,
            (("stakeholder", "communication"),),
            lambda ctx: (
                f"Stakeholder communication: {ctx.get('communication_type', 'status_update')} to "
                f"{join_values(ctx.get('stakeholders', ['client', 'team']))} {ctx.get('frequency', 'weekly')}, "
                f"Updates: {join_values(ctx.get('updates', ['progress update']))}"
            ),
        ),
        ToolSpec(
            ToolKind.QUALITY_REVIEW,
            (("quality", "review"),),
            lambda ctx: (
                f"Quality assurance for {ctx.get('deliverable', 'project_deliverable')}: "
                f"Criteria: {join_values(ctx.get('quality_criteria', ['functionality', 'performance']))}, "
                f"Status: {ctx.get('review_status', 'pending')}"
            ),
        ),
    )

    default_recommendations = (
        "Project coordination and planning completed",
        "Team resources allocated and managed",
        "Stakeholder communication established",
        "Quality standards and timelines maintained",
    )

    recommended_actions = (
        "Assess stakeholder impact and communication needs",
        "Coordinate resource allocation for resolution",
        "Monitor progress and escalate if needed",
    )

    def findings(self, text: str) -> list[KeywordGroup]:
        """Business impact findings; the sentence doubles as the coordination note."""
        found: list[KeywordGroup] = []

        match = USERS_AFFECTED_RE.search(text)
        if match:
            many = int(match.group(1)) > MANY_USERS
            found.append(KeywordGroup(
                keywords=(match.group(0),),
                sentence=f"{match.group(1)} users currently affected",
                priority=Priority.HIGH if many else None,
                complexity=Complexity.COMPLEX if many else None,
            ))

        deadline = KeywordGroup(
            keywords=("deadline", "friday", "urgent"),
            sentence="Time-sensitive issue with approaching deadline",
            priority=Priority.URGENT,
            estimated_time="1-2 hours",
        )
        reporting = KeywordGroup(
            keywords=("dashboard", "analytics", "reports"),
            sentence="Critical business system affected (reporting/analytics)",
            actions=("Coordinate with business stakeholders on report delays",),
        )
        errors = KeywordGroup(
            keywords=("500", "error", "crash"),
            sentence="System error preventing normal operations",
            actions=("Escalate to technical team for immediate investigation",),
            complexity=Complexity.MEDIUM,
        )
        found.extend(g for g in (deadline, reporting, errors) if g.matches(text))
        return found

    def analyze(self, ticket: Ticket) -> AgentAnalysis:
        text = ticket.content()

        complexity = self.default_complexity
        estimated_time = self.default_estimated_time
        priority = ticket.priority or Priority.NORMAL
        impact: list[str] = []
        coordination: list[str] = []

        for finding in self.findings(text):
            impact.append(f"• {finding.sentence}")
            coordination.extend(f"• {a}" for a in finding.actions)
            if finding.priority is not None:
                priority = finding.priority
            if finding.complexity is not None:
                complexity = finding.complexity
            if finding.estimated_time is not None:
                estimated_time = finding.estimated_time

        if not impact:
            impact.append("• Analyzing ticket content for business impact assessment")
        if not coordination:
            coordination.append("• Coordinate with appropriate technical team for resolution")

        sections = [
            "Business Impact Assessment:\n" + "\n".join(impact),
            "Coordination Plan:\n" + "\n".join(coordination),
        ]
        target = self.route(text)
        if target is not None:
            sections.append(
                "Routing Decision:\n"
                f"• Assigning to {target.value} for technical analysis\n"
                f"• Reason: {ROUTING_REASONS[target]}"
            )

        analysis = AgentAnalysis(
            role=self.role,
            analysis="\n\n".join(sections),
            confidence=self.confidence_for(text),
            recommended_actions=self.recommended_actions,
            next_role=target,
            priority=priority,
            estimated_time=estimated_time,
            complexity=complexity,
        )
        self.memory.record(ticket.id, self.role, "analyze", analysis)
        return analysis
