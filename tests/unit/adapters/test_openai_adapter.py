"""Tests for OpenAIInsightsAdapter (no network: fallback path and a stub client)."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from taskgenie.adapters.llm.openai_adapter import OpenAIInsightsAdapter
from taskgenie.application.use_cases.orchestrator import Orchestrator


class StubCompletions:
    def __init__(self, contents: list[str]):
        self._contents = list(contents)
        self.calls = 0

    async def create(self, **kwargs):
        self.calls += 1
        content = self._contents.pop(0)
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _with_stub(adapter: OpenAIInsightsAdapter, contents: list[str]) -> StubCompletions:
    completions = StubCompletions(contents)
    adapter._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return completions


@pytest.fixture
def deployment_response(deployment_ticket):
    return Orchestrator().process_ticket(deployment_ticket)


@pytest.mark.asyncio
async def test_heuristic_summary_without_key(deployment_ticket, deployment_response):
    adapter = OpenAIInsightsAdapter(api_key="")

    summary = await adapter.summarize(deployment_ticket, deployment_response)

    assert summary.startswith(
        "Ticket #101 (Server deployment failed) was routed PROJECT_MANAGER -> DEVOPS; "
        "DEVOPS owns the resolution."
    )
    assert "Combined confidence is 50% after 1 handoff(s)." in summary
    assert "Next steps: Project coordination and planning completed;" in summary


@pytest.mark.asyncio
async def test_placeholder_key_uses_heuristic(deployment_ticket, deployment_response):
    adapter = OpenAIInsightsAdapter(api_key="sk-your-openai-api-key-here")
    summary = await adapter.summarize(deployment_ticket, deployment_response)
    assert summary.startswith("Ticket #101")


@pytest.mark.asyncio
async def test_llm_summary_is_returned(deployment_ticket, deployment_response):
    adapter = OpenAIInsightsAdapter(api_key="")
    completions = _with_stub(adapter, ['{"summary": "DevOps should restart the container."}'])

    summary = await adapter.summarize(deployment_ticket, deployment_response)

    assert summary == "DevOps should restart the container."
    assert completions.calls == 1


@pytest.mark.asyncio
async def test_retries_then_falls_back(deployment_ticket, deployment_response):
    adapter = OpenAIInsightsAdapter(api_key="", max_retries=3)
    completions = _with_stub(adapter, ["not json", '{"other": 1}', '{"summary": ""}'])

    summary = await adapter.summarize(deployment_ticket, deployment_response)

    assert completions.calls == 3
    assert summary.startswith("Ticket #101")


def test_user_prompt_lists_each_analysis(deployment_ticket, deployment_response):
    prompt = OpenAIInsightsAdapter._build_user_prompt(deployment_ticket, deployment_response)

    assert "Subject: Server deployment failed" in prompt
    assert "Routing: PROJECT_MANAGER -> DEVOPS" in prompt
    assert "[PROJECT_MANAGER] confidence=0.00" in prompt
    assert "[DEVOPS] confidence=1.00" in prompt
