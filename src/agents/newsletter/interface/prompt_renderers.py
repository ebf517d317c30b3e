from __future__ import annotations

import json

from langchain_core.prompts import ChatPromptTemplate

from src.agents.newsletter.domain.entities import CompanyMetrics, Story
from src.agents.newsletter.domain.services import format_metric
from src.agents.newsletter.interface.mappers import profile_to_payload


def _dumps(value: object) -> str:
    return json.dumps(value, ensure_ascii=False)


def format_metrics_section(metrics: CompanyMetrics, currency: str | None) -> str:
    if currency is None:
        return ""
    lines: list[str] = []
    if metrics.revenue is not None:
        lines.append(f"- Revenue: {format_metric(metrics.revenue, currency)}")
    if metrics.funding is not None:
        lines.append(f"- Funding: {format_metric(metrics.funding, currency)}")
    if not lines:
        return ""
    return "Formatted Metrics:\n" + "\n".join(lines) + "\n"


def build_story_prompt_inputs(story: Story, *, currency: str | None) -> dict[str, str]:
    payload = profile_to_payload(story.profile)
    return {
        "company_name": story.company_name,
        "headline": story.headline,
        "context": _dumps(payload["context"]),
        "metrics": _dumps(payload["metrics"]),
        "business_model": _dumps(payload["business_model"]),
        "analysis_points": _dumps(payload["analysis_points"]),
        "formatted_metrics": format_metrics_section(story.profile.metrics, currency),
    }


def build_headline_chat_prompt(*, user_prompt: str) -> ChatPromptTemplate:
    return ChatPromptTemplate.from_messages([("user", user_prompt)])


def build_story_chat_prompt(*, user_prompt: str) -> ChatPromptTemplate:
    return ChatPromptTemplate.from_messages([("user", user_prompt)])
