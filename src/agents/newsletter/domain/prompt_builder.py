from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResearchPromptSpec:
    system: str
    user: str


@dataclass(frozen=True)
class HeadlinePromptSpec:
    user: str


@dataclass(frozen=True)
class StoryPromptSpec:
    user: str


def build_research_prompt_spec() -> ResearchPromptSpec:
    return ResearchPromptSpec(
        system="You are a helpful assistant that provides accurate information about companies.",
        user=(
            "Research the company {company_name} and provide information about its "
            "business model, metrics (if available), market context, and key analysis "
            "points. Format the response strictly as a JSON object with keys: "
            "business_model, metrics, context, and analysis_points. Do not include any "
            "explanations, code fences, or additional formatting. Provide only the JSON "
            "object."
        ),
    )


def build_headline_prompt_spec() -> HeadlinePromptSpec:
    return HeadlinePromptSpec(
        user=(
            "Create an engaging headline for a newsletter about {company_name}, "
            "highlighting its innovative business model and recent growth. "
            "Include a sense of excitement."
        ),
    )


def build_story_prompt_spec() -> StoryPromptSpec:
    return StoryPromptSpec(
        user="""Write a compelling newsletter research document about the company based on the following details:

Company: {company_name}
Headline: {headline}
Context: {context}
Metrics: {metrics}
Business Model: {business_model}
Analysis Points: {analysis_points}
{formatted_metrics}
Structure the story into sections like Context, Business Model, Metrics, and Insights.""",
    )
