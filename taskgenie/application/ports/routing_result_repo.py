"""Port interface for routing result persistence."""

from abc import ABC, abstractmethod

from taskgenie.domain.entities.routing_result import RoutingResult


class RoutingResultRepository(ABC):
    @abstractmethod
    async def save(self, result: RoutingResult) -> RoutingResult:
        ...

    @abstractmethod
    async def get_latest_for_ticket(self, ticket_id: int) -> RoutingResult | None:
        ...

    @abstractmethod
    async def get_recent(self, limit: int = 50) -> list[RoutingResult]:
        ...
