from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from src.agents.newsletter.data.clients import ResearchClient
from src.config.research_config import ResearchConfig


class RecordingLLMFactory:
    """Stands in for get_llm: hands out scripted replies and records every prompt."""

    def __init__(self, responses: list[str]) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, object]] = []
        self.prompts: list[str] = []

    def __call__(
        self, *, model: str, temperature: float, max_tokens: int | None
    ) -> RunnableLambda:
        self.calls.append(
            {"model": model, "temperature": temperature, "max_tokens": max_tokens}
        )
        reply = self._responses[len(self.calls) - 1]

        def _respond(prompt_value: object) -> AIMessage:
            self.prompts.append(prompt_value.to_string())
            return AIMessage(content=reply)

        return RunnableLambda(_respond)


@pytest.fixture
def research_config() -> ResearchConfig:
    return ResearchConfig(
        api_key="test-key",
        base_url="https://research.test",
        model="sonar-test",
        timeout_seconds=5.0,
    )


@pytest.fixture
def make_research_client(
    research_config: ResearchConfig,
) -> Callable[[Callable[[httpx.Request], httpx.Response]], ResearchClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ResearchClient:
        return ResearchClient(
            config=research_config, transport=httpx.MockTransport(handler)
        )

    return _make


def chat_completion(content: str) -> dict[str, object]:
    return {
        "id": "cmpl-1",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }
