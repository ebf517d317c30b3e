from __future__ import annotations

import json
import re
from collections.abc import Mapping

from pydantic import ValidationError

from src.agents.newsletter.domain.entities import CompanyProfile
from src.agents.newsletter.domain.errors import AcquisitionParseError
from src.agents.newsletter.interface.contracts import CompanyProfileModel
from src.agents.newsletter.interface.mappers import to_company_profile

_LEADING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```$")


def unwrap_fenced_json(text: str) -> object:
    """
    Decode JSON that may be wrapped in a markdown code fence.
    A leading fence may carry a ``json`` tag; unfenced text is decoded as-is.
    """
    stripped = text.strip()
    stripped = _LEADING_FENCE.sub("", stripped, count=1)
    stripped = _TRAILING_FENCE.sub("", stripped, count=1).strip()

    try:
        return json.loads(stripped)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise AcquisitionParseError(
            "Failed to parse JSON response from research service"
        ) from exc


def parse_research_message_content(payload: object) -> str:
    """Pull the assistant text out of a chat-completions response body."""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise AcquisitionParseError(
            "Research response did not contain an assistant message"
        ) from exc
    if not isinstance(content, str):
        raise AcquisitionParseError("Research response message content is not text")
    return content


def parse_company_profile(payload: object, *, context: str) -> CompanyProfile | None:
    if payload is None:
        return None
    if not isinstance(payload, Mapping):
        raise AcquisitionParseError(f"{context} must decode to a JSON object")
    try:
        model = CompanyProfileModel.model_validate(payload)
    except ValidationError as exc:
        raise AcquisitionParseError(f"{context} failed validation") from exc
    return to_company_profile(model)
