from __future__ import annotations

from src.agents.newsletter.domain.entities import RenderedOutput
from src.agents.newsletter.interface.contracts import NewsletterResponseModel
from src.shared.kernel.types import JSONObject

GENERIC_FAILURE_MESSAGE = "Failed to generate newsletter"


def build_newsletter_response_payload(output: RenderedOutput) -> JSONObject:
    model = NewsletterResponseModel(
        story=output.story,
        html_content=output.html_content,
        is_markdown=output.is_markdown,
        raw_api_response=output.raw_api_response,
    )
    return model.model_dump(mode="json", by_alias=True)


def build_error_payload() -> JSONObject:
    return {"error": GENERIC_FAILURE_MESSAGE}
