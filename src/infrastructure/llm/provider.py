import os

from langchain_openai import ChatOpenAI

from ...config.llm_config import (
    DEFAULT_MODEL,
    LLM_MAX_RETRIES,
    LLM_TIMEOUT,
    OPENROUTER_BASE_URL,
)


def get_llm(
    model: str = DEFAULT_MODEL,
    temperature: float = 0,
    max_tokens: int | None = None,
    timeout: float = LLM_TIMEOUT,
):
    """
    Build the chat model used for newsletter generation.
    Routes through OpenRouter when OPENROUTER_API_KEY is set, otherwise OpenAI.
    """
    or_key = os.getenv("OPENROUTER_API_KEY")

    if or_key:
        return ChatOpenAI(
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            base_url=OPENROUTER_BASE_URL,
            api_key=or_key,
            timeout=timeout,
            max_retries=LLM_MAX_RETRIES,
        )

    return ChatOpenAI(
        model=model,
        temperature=temperature,
        max_tokens=max_tokens,
        api_key=os.getenv("OPENAI_API_KEY"),
        timeout=timeout,
        max_retries=LLM_MAX_RETRIES,
    )
