from __future__ import annotations

from src.agents.newsletter.application.generation_service import NarrativeGenerator
from src.agents.newsletter.application.orchestrator import NewsletterOrchestrator
from src.agents.newsletter.data.clients import ResearchClient
from src.config.research_config import ResearchConfig, load_research_config
from src.infrastructure.llm.provider import get_llm


def build_newsletter_orchestrator(
    research_config: ResearchConfig | None = None,
) -> NewsletterOrchestrator:
    config = research_config if research_config is not None else load_research_config()
    return NewsletterOrchestrator(
        research_client=ResearchClient(config=config),
        generator=NarrativeGenerator(get_llm_fn=get_llm),
    )
