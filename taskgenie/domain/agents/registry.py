"""Agent registry — one specialist per AgentRole, fixed at construction."""

from __future__ import annotations

from typing import Iterator, Mapping

from taskgenie.domain.agents.base import SpecialistAgent
from taskgenie.domain.agents.business_analyst import BusinessAnalystAgent
from taskgenie.domain.agents.devops import DevOpsAgent
from taskgenie.domain.agents.memory import InteractionLog
from taskgenie.domain.agents.project_manager import ProjectManagerAgent
from taskgenie.domain.agents.qa_tester import QATesterAgent
from taskgenie.domain.agents.software_engineer import SoftwareEngineerAgent
from taskgenie.domain.agents.wordpress_developer import WordPressDeveloperAgent
from taskgenie.domain.errors import UnknownAgentRoleError
from taskgenie.domain.value_objects.enums import AgentRole

DEFAULT_AGENTS: dict[AgentRole, type[SpecialistAgent]] = {
    AgentRole.PROJECT_MANAGER: ProjectManagerAgent,
    AgentRole.SOFTWARE_ENGINEER: SoftwareEngineerAgent,
    AgentRole.WORDPRESS_DEVELOPER: WordPressDeveloperAgent,
    AgentRole.BUSINESS_ANALYST: BusinessAnalystAgent,
    AgentRole.QA_TESTER: QATesterAgent,
    AgentRole.DEVOPS: DevOpsAgent,
}


class AgentRegistry:
    """Exhaustive role → specialist mapping.

    Construction fails if any AgentRole is left without a specialist, so
    every handoff target named by an agent is guaranteed to resolve.
    """

    def __init__(
        self,
        agents: Mapping[AgentRole, SpecialistAgent] | None = None,
        memory: InteractionLog | None = None,
    ):
        self.memory = memory if memory is not None else InteractionLog()
        if agents is None:
            agents = {role: cls(self.memory) for role, cls in DEFAULT_AGENTS.items()}

        missing = [role.value for role in AgentRole if role not in agents]
        if missing:
            raise ValueError(f"No specialist registered for: {', '.join(missing)}")
        self._agents = dict(agents)

    def get(self, role: AgentRole | str) -> SpecialistAgent:
        try:
            return self._agents[AgentRole(role)]
        except ValueError:
            raise UnknownAgentRoleError(role) from None

    def roles(self) -> list[AgentRole]:
        return list(self._agents)

    def __iter__(self) -> Iterator[tuple[AgentRole, SpecialistAgent]]:
        return iter(self._agents.items())

    def __len__(self) -> int:
        return len(self._agents)
