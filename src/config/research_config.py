"""
Research API configuration.

The credential is read once into an immutable config object that is handed to
the research client, so the client never reads the environment itself.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from src.config.env_parsing import positive_seconds

load_dotenv(find_dotenv())

RESEARCH_API_KEY_ENV = "PERPLEXITY_API_KEY"

DEFAULT_RESEARCH_BASE_URL = "https://api.perplexity.ai"
DEFAULT_RESEARCH_MODEL = "llama-3.1-sonar-small-128k-online"
DEFAULT_RESEARCH_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class ResearchConfig:
    api_key: str | None
    base_url: str = DEFAULT_RESEARCH_BASE_URL
    model: str = DEFAULT_RESEARCH_MODEL
    timeout_seconds: float = DEFAULT_RESEARCH_TIMEOUT_SECONDS

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @property
    def chat_completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"


def load_research_config(environ: Mapping[str, str] | None = None) -> ResearchConfig:
    env = os.environ if environ is None else environ
    return ResearchConfig(
        api_key=env.get(RESEARCH_API_KEY_ENV) or None,
        base_url=env.get("PERPLEXITY_BASE_URL") or DEFAULT_RESEARCH_BASE_URL,
        model=env.get("PERPLEXITY_MODEL") or DEFAULT_RESEARCH_MODEL,
        timeout_seconds=positive_seconds(
            env.get("RESEARCH_TIMEOUT_SECONDS"), DEFAULT_RESEARCH_TIMEOUT_SECONDS
        ),
    )
