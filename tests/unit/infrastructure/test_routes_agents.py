"""Tests for the agents API with dependency overrides (no database)."""

from __future__ import annotations

import inspect

import pytest
from fastapi.testclient import TestClient

from taskgenie.adapters.persistence.database import get_session
from taskgenie.application.ports.insights_port import InsightsPort
from taskgenie.application.ports.routing_result_repo import RoutingResultRepository
from taskgenie.application.use_cases.generate_insights import GenerateInsightsUseCase
from taskgenie.application.use_cases.orchestrator import Orchestrator
from taskgenie.application.use_cases.process_ticket import ProcessTicketUseCase
from taskgenie.infrastructure.api.dependencies import (
    get_generate_insights_uc,
    get_orchestrator,
    get_process_ticket_uc,
    get_results_repo,
)
from taskgenie.main import app

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeResultsRepo(RoutingResultRepository):
    def __init__(self):
        self.results = []

    async def save(self, result):
        result.id = len(self.results) + 1
        self.results.append(result)
        return result

    async def get_latest_for_ticket(self, ticket_id):
        matching = [r for r in self.results if r.ticket_id == ticket_id]
        return matching[-1] if matching else None

    async def get_recent(self, limit=50):
        return list(reversed(self.results))[:limit]


class FailingResultsRepo(FakeResultsRepo):
    async def save(self, result):
        raise ConnectionError("db down")


class FakeInsights(InsightsPort):
    async def summarize(self, ticket, response):
        return "Short summary."


DEPLOYMENT_TICKET = {
    "id": 101,
    "subject": "Server deployment failed",
    "description": "Docker container won't start on AWS",
}


@pytest.fixture
def client():
    orchestrator = Orchestrator()
    repo = FakeResultsRepo()

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_results_repo] = lambda: repo
    app.dependency_overrides[get_process_ticket_uc] = lambda: ProcessTicketUseCase(
        orchestrator=orchestrator, results_repo=repo,
    )
    app.dependency_overrides[get_generate_insights_uc] = lambda: GenerateInsightsUseCase(
        orchestrator=orchestrator, insights=FakeInsights(), results_repo=repo,
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_process_ticket(client):
    resp = client.post("/api/agents/process-ticket", json={"ticket": DEPLOYMENT_TICKET})

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["ticket_id"] == 101
    assert body["result_id"] == 1
    assert body["storage_error"] is None
    assert body["agents_involved"] == ["DEVOPS", "PROJECT_MANAGER"]
    assert body["handoff_count"] == 1
    assert body["confidence"] == 0.5
    assert [a["role"] for a in body["agent_analyses"]] == ["PROJECT_MANAGER", "DEVOPS"]


def test_process_ticket_requires_subject(client):
    resp = client.post(
        "/api/agents/process-ticket",
        json={"ticket": {"id": 1, "description": "no subject"}},
    )
    assert resp.status_code == 422


def test_route_ticket(client):
    resp = client.post(
        "/api/agents/route-ticket",
        json={"ticket": DEPLOYMENT_TICKET, "target_role": "DEVOPS"},
    )

    assert resp.status_code == 200
    analysis = resp.json()["analysis"]
    assert analysis["role"] == "DEVOPS"
    assert analysis["priority"] == "urgent"


def test_route_ticket_agent_cannot_handle(client):
    resp = client.post(
        "/api/agents/route-ticket",
        json={
            "ticket": {"id": 2, "subject": "Hello there", "description": "Please call me back"},
            "target_role": "DEVOPS",
        },
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Agent DEVOPS cannot handle this ticket type"


def test_route_ticket_unknown_role(client):
    resp = client.post(
        "/api/agents/route-ticket",
        json={"ticket": DEPLOYMENT_TICKET, "target_role": "JANITOR"},
    )
    assert resp.status_code == 422


def test_comprehensive_insights(client):
    resp = client.post("/api/agents/comprehensive-insights", json={"ticket": DEPLOYMENT_TICKET})

    assert resp.status_code == 200
    body = resp.json()
    assert body["summary"] == "Short summary."
    assert body["handoff_count"] == 1


def test_metrics_and_reset(client):
    client.post("/api/agents/process-ticket", json={"ticket": DEPLOYMENT_TICKET})

    metrics = client.get("/api/agents/metrics").json()
    assert metrics["total_workflows"] == 1
    assert metrics["successful_workflows"] == 1
    assert metrics["handoff_count"] == 1
    assert metrics["agent_utilization"]["DEVOPS"]["tasks_handled"] == 1

    assert client.post("/api/agents/reset-metrics").json()["status"] == "ok"
    assert client.get("/api/agents/metrics").json()["total_workflows"] == 0


def test_status(client):
    agents = client.get("/api/agents/status").json()["agents"]
    assert len(agents) == 6

    one = client.get("/api/agents/status/devops")
    assert one.status_code == 200
    assert one.json()["role"] == "DEVOPS"

    assert client.get("/api/agents/status/janitor").status_code == 404


def test_capabilities(client):
    body = client.get("/api/agents/capabilities").json()
    assert set(body) == {
        "PROJECT_MANAGER",
        "SOFTWARE_ENGINEER",
        "WORDPRESS_DEVELOPER",
        "BUSINESS_ANALYST",
        "QA_TESTER",
        "DEVOPS",
    }
    assert body["DEVOPS"]["specialties"]
    assert "server_health" in body["DEVOPS"]["tools"]


def test_latest_result(client):
    assert client.get("/api/agents/results/101").status_code == 404

    client.post("/api/agents/process-ticket", json={"ticket": DEPLOYMENT_TICKET})
    resp = client.get("/api/agents/results/101")

    assert resp.status_code == 200
    assert resp.json()["primary_role"] == "DEVOPS"


def test_process_ticket_when_storage_fails(client):
    orchestrator = Orchestrator()
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_process_ticket_uc] = lambda: ProcessTicketUseCase(
        orchestrator=orchestrator, results_repo=FailingResultsRepo(),
    )

    resp = client.post("/api/agents/process-ticket", json={"ticket": DEPLOYMENT_TICKET})

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "degraded"
    assert body["result_id"] is None
    assert body["storage_error"] == "db down"
    assert body["agents_involved"] == ["DEVOPS", "PROJECT_MANAGER"]
    assert body["final_recommendations"]


def test_providers_share_one_session_dependency():
    for provider in (get_results_repo, get_process_ticket_uc, get_generate_insights_uc):
        session = inspect.signature(provider).parameters["session"].default
        assert session.dependency is get_session
