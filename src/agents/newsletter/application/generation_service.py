from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.agents.newsletter.application.ports import ChatModelFactory
from src.agents.newsletter.domain.entities import CompanyProfile, Story
from src.agents.newsletter.domain.errors import GenerationError
from src.agents.newsletter.domain.prompt_builder import (
    HeadlinePromptSpec,
    StoryPromptSpec,
    build_headline_prompt_spec,
    build_story_prompt_spec,
)
from src.agents.newsletter.interface.prompt_renderers import (
    build_headline_chat_prompt,
    build_story_chat_prompt,
    build_story_prompt_inputs,
)
from src.config.llm_config import (
    DEFAULT_MODEL,
    HEADLINE_MAX_TOKENS,
    HEADLINE_TEMPERATURE,
    STORY_MAX_TOKENS,
    STORY_TEMPERATURE,
)
from src.shared.kernel.tools.logger import get_logger, log_event

logger = get_logger(__name__)


def message_text(message: object) -> str:
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return ""


@dataclass(frozen=True)
class NarrativeGenerator:
    get_llm_fn: ChatModelFactory
    model: str = DEFAULT_MODEL
    headline_prompt: HeadlinePromptSpec = field(
        default_factory=build_headline_prompt_spec
    )
    story_prompt: StoryPromptSpec = field(default_factory=build_story_prompt_spec)

    async def _complete(
        self,
        *,
        step: str,
        prompt: object,
        inputs: dict[str, str],
        temperature: float,
        max_tokens: int,
    ) -> str:
        try:
            llm = self.get_llm_fn(
                model=self.model, temperature=temperature, max_tokens=max_tokens
            )
            chain = prompt | llm
            message = await chain.ainvoke(inputs)
        except Exception as exc:
            log_event(
                logger,
                event="newsletter_generation_failed",
                message=f"{step} generation call failed",
                level=logging.ERROR,
                error_code="NEWSLETTER_GENERATION_FAILED",
                fields={"step": step, "exception": str(exc)},
            )
            raise GenerationError(f"{step} generation failed") from exc
        return message_text(message).strip()

    async def generate_headline(self, company_name: str) -> str:
        return await self._complete(
            step="headline",
            prompt=build_headline_chat_prompt(user_prompt=self.headline_prompt.user),
            inputs={"company_name": company_name},
            temperature=HEADLINE_TEMPERATURE,
            max_tokens=HEADLINE_MAX_TOKENS,
        )

    async def compose_story(self, company_name: str, profile: CompanyProfile) -> Story:
        headline = await self.generate_headline(company_name)
        if not headline:
            log_event(
                logger,
                event="newsletter_generation_failed",
                message="headline came back empty",
                level=logging.ERROR,
                error_code="NEWSLETTER_HEADLINE_EMPTY",
            )
            raise GenerationError("Generated headline is empty")
        log_event(
            logger,
            event="newsletter_headline_generated",
            message="newsletter headline generated",
            fields={"headline_chars": len(headline)},
        )
        return Story(company_name=company_name, headline=headline, profile=profile)

    async def write_story(self, story: Story, *, currency: str | None = None) -> str:
        text = await self._complete(
            step="story",
            prompt=build_story_chat_prompt(user_prompt=self.story_prompt.user),
            inputs=build_story_prompt_inputs(story, currency=currency),
            temperature=STORY_TEMPERATURE,
            max_tokens=STORY_MAX_TOKENS,
        )
        log_event(
            logger,
            event="newsletter_story_generated",
            message="newsletter story generated",
            fields={"story_chars": len(text)},
        )
        return text
