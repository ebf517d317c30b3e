from __future__ import annotations

from unittest.mock import patch

import pytest

from src.agents.newsletter.application.render_service import (
    markdown_to_html,
    render_story,
)
from src.agents.newsletter.domain.errors import RenderError


def test_render_story_converts_markdown() -> None:
    rendered = render_story("## Metrics\n\n* Revenue: ₹500 crores\n* Funding: $12M")

    assert rendered.is_markdown is True
    assert "<h2>Metrics</h2>" in rendered.html
    assert "<li>Revenue: ₹500 crores</li>" in rendered.html


def test_render_story_leaves_plain_text_alone() -> None:
    rendered = render_story("Acme grew quickly this year.")

    assert rendered.is_markdown is False
    assert rendered.html == ""


def test_render_story_single_asterisk_still_counts_as_markdown() -> None:
    rendered = render_story("Revenue grew 3*")

    assert rendered.is_markdown is True
    assert rendered.html != ""


def test_markdown_library_failure_becomes_render_error() -> None:
    with patch(
        "src.agents.newsletter.application.render_service.markdown.markdown",
        side_effect=ValueError("boom"),
    ):
        with pytest.raises(RenderError):
            markdown_to_html("## Title")


def test_markdown_that_renders_to_nothing_falls_back_to_escaped_paragraph() -> None:
    rendered = render_story("[*]: http://example.com/?a=1&b=2")

    assert rendered.is_markdown is True
    assert rendered.html == "<p>[*]: http://example.com/?a=1&amp;b=2</p>"
