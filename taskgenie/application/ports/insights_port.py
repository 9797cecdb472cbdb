"""Port interface for natural-language insight summaries."""

from abc import ABC, abstractmethod

from taskgenie.domain.entities.ticket import Ticket
from taskgenie.domain.entities.workflow import MultiAgentResponse


class InsightsPort(ABC):
    @abstractmethod
    async def summarize(self, ticket: Ticket, response: MultiAgentResponse) -> str:
        """Condense the specialists' findings for *ticket* into a short summary.

        Implementations must always return text; when no model is available
        they fall back to a deterministic summary.
        """
        ...
