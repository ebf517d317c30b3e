from __future__ import annotations

import html
from dataclasses import dataclass

import markdown

from src.agents.newsletter.domain.errors import RenderError
from src.agents.newsletter.domain.services import detect_markdown

_MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


@dataclass(frozen=True)
class RenderedStory:
    html: str
    is_markdown: bool


def markdown_to_html(text: str) -> str:
    try:
        return markdown.markdown(
            text,
            extensions=_MARKDOWN_EXTENSIONS,
            output_format="html",
        )
    except Exception as exc:
        raise RenderError("Failed to convert story markdown to HTML") from exc


def render_story(text: str) -> RenderedStory:
    if not detect_markdown(text):
        return RenderedStory(html="", is_markdown=False)
    converted = markdown_to_html(text)
    if not converted.strip():
        # Markup that renders to nothing (e.g. only reference definitions).
        converted = f"<p>{html.escape(text.strip())}</p>"
    return RenderedStory(html=converted, is_markdown=True)
