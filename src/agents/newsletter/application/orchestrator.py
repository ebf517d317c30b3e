from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from src.agents.newsletter.application.acquisition_service import (
    acquire_company_profile,
)
from src.agents.newsletter.application.generation_service import NarrativeGenerator
from src.agents.newsletter.application.ports import ResearchClientLike
from src.agents.newsletter.application.render_service import (
    RenderedStory,
    render_story,
)
from src.agents.newsletter.domain.entities import CompanyProfile, RenderedOutput
from src.agents.newsletter.domain.errors import (
    DataAcquisitionError,
    NewsletterPipelineError,
)
from src.shared.kernel.tools.logger import get_logger, log_context, log_event

logger = get_logger(__name__)


@dataclass(frozen=True)
class NewsletterOrchestrator:
    research_client: ResearchClientLike
    generator: NarrativeGenerator
    render_fn: Callable[[str], RenderedStory] = render_story

    async def run(
        self,
        *,
        company_name: str,
        supplied_profile: CompanyProfile | None = None,
        currency: str | None = None,
    ) -> RenderedOutput:
        """
        Acquire, generate, render.

        Acquisition failures become diagnostic text on an empty output.
        Generation and rendering failures propagate to the caller.
        """
        profile: CompanyProfile | None = None
        raw_error: str | None = None

        with log_context(stage="acquisition"):
            try:
                profile = await acquire_company_profile(
                    company_name=company_name,
                    supplied_profile=supplied_profile,
                    research_client=self.research_client,
                )
            except DataAcquisitionError as exc:
                raw_error = str(exc) or exc.__class__.__name__
                log_event(
                    logger,
                    event="newsletter_acquisition_failed",
                    message="company data acquisition failed; continuing without a story",
                    level=logging.WARNING,
                    error_code="NEWSLETTER_ACQUISITION_FAILED",
                    fields={"error_type": exc.__class__.__name__, "exception": raw_error},
                )

        if profile is None and raw_error is None:
            raise NewsletterPipelineError("Failed to fetch company data")
        if profile is None:
            return RenderedOutput.from_acquisition_failure(raw_error)

        with log_context(stage="generation"):
            story = await self.generator.compose_story(company_name, profile)
            text = await self.generator.write_story(story, currency=currency)

        with log_context(stage="rendering"):
            rendered = self.render_fn(text)
            log_event(
                logger,
                event="newsletter_render_completed",
                message="newsletter rendering completed",
                fields={
                    "is_markdown": rendered.is_markdown,
                    "html_chars": len(rendered.html),
                },
            )

        return RenderedOutput(
            story=text,
            html_content=rendered.html,
            is_markdown=rendered.is_markdown,
            raw_api_response=None,
        )
