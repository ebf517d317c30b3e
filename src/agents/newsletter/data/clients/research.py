from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import httpx

from src.agents.newsletter.domain.errors import (
    AcquisitionParseError,
    AcquisitionTransportError,
    MissingCredentialError,
)
from src.agents.newsletter.domain.prompt_builder import (
    ResearchPromptSpec,
    build_research_prompt_spec,
)
from src.agents.newsletter.interface.parsers import (
    parse_research_message_content,
    unwrap_fenced_json,
)
from src.config.research_config import RESEARCH_API_KEY_ENV, ResearchConfig
from src.shared.kernel.tools.logger import get_logger, log_event

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResearchClient:
    """Chat-completions client that asks the research service for a company profile as JSON."""

    config: ResearchConfig
    prompt: ResearchPromptSpec = field(default_factory=build_research_prompt_spec)
    transport: httpx.AsyncBaseTransport | None = None

    def build_request_body(self, company_name: str) -> dict[str, object]:
        return {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": self.prompt.system},
                {
                    "role": "user",
                    "content": self.prompt.user.format(company_name=company_name),
                },
            ],
        }

    async def research_company(self, company_name: str) -> object:
        if not self.config.has_credential:
            raise MissingCredentialError(
                f"Research API key is not set ({RESEARCH_API_KEY_ENV})"
            )

        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        started = time.perf_counter()
        log_event(
            logger,
            event="research_request_started",
            message="research request started",
            fields={"model": self.config.model},
        )
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds, transport=self.transport
            ) as client:
                resp = await client.post(
                    self.config.chat_completions_url,
                    json=self.build_request_body(company_name),
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            log_event(
                logger,
                event="research_request_failed",
                message="research request failed due to network error",
                level=logging.ERROR,
                error_code="RESEARCH_NETWORK_FAILED",
                fields={"exception": str(exc)},
            )
            raise AcquisitionTransportError(
                f"Research request failed: {exc.__class__.__name__}"
            ) from exc

        if not resp.is_success:
            log_event(
                logger,
                event="research_request_failed",
                message="research request failed due to non-2xx response",
                level=logging.WARNING,
                error_code="RESEARCH_HTTP_STATUS",
                fields={"status_code": resp.status_code},
            )
            raise AcquisitionTransportError(
                f"Research request failed with status code {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            body = resp.json()
        except (ValueError, RecursionError) as exc:
            raise AcquisitionParseError("Research response body is not JSON") from exc

        payload = unwrap_fenced_json(parse_research_message_content(body))
        log_event(
            logger,
            event="research_request_completed",
            message="research request completed",
            fields={
                "status_code": resp.status_code,
                "seconds": round(time.perf_counter() - started, 3),
                "payload_type": type(payload).__name__,
            },
        )
        return payload
