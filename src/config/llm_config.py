from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

from src.config.env_parsing import positive_seconds

load_dotenv(find_dotenv())

# Model Defaults
DEFAULT_MODEL = os.getenv("DEFAULT_LLM_MODEL", "gpt-4o-mini")

# Provider Configs
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"

# Connection Settings
DEFAULT_LLM_TIMEOUT = 60.0
LLM_TIMEOUT = positive_seconds(os.getenv("LLM_TIMEOUT"), DEFAULT_LLM_TIMEOUT)
# Every failed generation call is terminal for the request.
LLM_MAX_RETRIES = 0

# Headline: short and lively
HEADLINE_MAX_TOKENS = 20
HEADLINE_TEMPERATURE = 0.8

# Full story: long and steadier
STORY_MAX_TOKENS = 10000
STORY_TEMPERATURE = 0.7
