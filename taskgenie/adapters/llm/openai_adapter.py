"""OpenAI adapter — implements InsightsPort using the OpenAI API."""

from __future__ import annotations

import json
import logging

from openai import AsyncOpenAI

from taskgenie.application.ports.insights_port import InsightsPort
from taskgenie.config import settings
from taskgenie.domain.entities.ticket import Ticket
from taskgenie.domain.entities.workflow import MultiAgentResponse

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a support operations lead reviewing how a Zendesk ticket was routed
through a team of specialists (project manager, software engineer, WordPress
developer, DevOps, QA tester, business analyst).

You receive the ticket and each specialist's analysis and recommendations.
Return a JSON object with exactly one field:

{
  "summary": "3-5 sentences in English: what the problem is, which specialist should own it and why, and the two or three most important next steps."
}

Rules:
- Do not invent facts that are not in the ticket or the analyses.
- Name the owning specialist exactly as given in the input.
- Return ONLY valid JSON, no markdown or extra text."""

# Recommendations quoted in the heuristic summary.
TOP_RECOMMENDATIONS = 3


def _is_placeholder_key(key: str | None) -> bool:
    key = (key or "").strip()
    return not key or "your-openai-api-key" in key


class OpenAIInsightsAdapter(InsightsPort):
    """OpenAI implementation of InsightsPort with a deterministic fallback."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_retries: int = 3,
    ):
        key = api_key if api_key is not None else settings.openai_api_key
        self._client = None if _is_placeholder_key(key) else AsyncOpenAI(api_key=key)
        self._model = model or settings.openai_model
        self._max_retries = max_retries

    async def summarize(self, ticket: Ticket, response: MultiAgentResponse) -> str:
        if self._client is None:
            logger.warning("OPENAI_API_KEY is not set (or placeholder). Using heuristic summary.")
            return self._heuristic_summary(ticket, response)

        user_content = self._build_user_prompt(ticket, response)

        for attempt in range(1, self._max_retries + 1):
            try:
                completion = await self._client.chat.completions.create(
                    model=self._model,
                    messages=[
                        {"role": "system", "content": SYSTEM_PROMPT},
                        {"role": "user", "content": user_content},
                    ],
                    temperature=0.2,
                    response_format={"type": "json_object"},
                )
                raw_text = completion.choices[0].message.content or ""
                summary = str(json.loads(raw_text)["summary"]).strip()
                if summary:
                    return summary
                logger.warning("Attempt %d/%d: empty summary from LLM", attempt, self._max_retries)

            except json.JSONDecodeError:
                logger.warning(
                    "Attempt %d/%d: failed to parse JSON from LLM response",
                    attempt, self._max_retries,
                )
            except KeyError as e:
                logger.warning(
                    "Attempt %d/%d: missing key in LLM response: %s",
                    attempt, self._max_retries, e,
                )
            except Exception:
                logger.exception(
                    "Attempt %d/%d: unexpected error during LLM call",
                    attempt, self._max_retries,
                )

        logger.warning("All LLM attempts failed, using heuristic summary")
        return self._heuristic_summary(ticket, response)

    @staticmethod
    def _build_user_prompt(ticket: Ticket, response: MultiAgentResponse) -> str:
        lines = [
            f"Ticket #{ticket.id}",
            f"Subject: {ticket.subject}",
            f"Description: {ticket.description}",
            "",
            "Routing: " + " -> ".join(r.value for r in reversed(response.agents_involved)),
            f"Combined confidence: {response.confidence:.2f}",
        ]
        for analysis in response.agent_analyses:
            lines.append("")
            lines.append(f"[{analysis.role.value}] confidence={analysis.confidence:.2f}")
            lines.append(analysis.analysis)
            lines.extend(f"- {a}" for a in analysis.recommended_actions)
        if response.final_recommendations:
            lines.append("")
            lines.append("Recommendations:")
            lines.extend(f"- {r}" for r in response.final_recommendations)
        return "\n".join(lines)

    @staticmethod
    def _heuristic_summary(ticket: Ticket, response: MultiAgentResponse) -> str:
        """Template summary used when the API is unavailable or keeps failing."""
        owner = response.workflow.current_role.value
        path = " -> ".join(r.value for r in reversed(response.agents_involved))
        parts = [
            f"Ticket #{ticket.id} ({ticket.subject}) was routed {path}; "
            f"{owner} owns the resolution.",
            f"Combined confidence is {response.confidence:.0%} "
            f"after {response.handoff_count} handoff(s).",
        ]
        top = response.final_recommendations[:TOP_RECOMMENDATIONS]
        if top:
            parts.append("Next steps: " + "; ".join(top) + ".")
        return " ".join(parts)
