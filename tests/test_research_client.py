from __future__ import annotations

import json

import httpx
import pytest
from conftest import chat_completion

from src.agents.newsletter.data.clients import ResearchClient
from src.agents.newsletter.domain.errors import (
    AcquisitionParseError,
    AcquisitionTransportError,
    DataAcquisitionError,
    MissingCredentialError,
)
from src.config.research_config import ResearchConfig


@pytest.mark.asyncio
async def test_research_company_posts_prompt_and_decodes_fenced_json(
    make_research_client,
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=chat_completion(
                '```json\n{"metrics": {"revenue": 5000000000}, "analysis_points": []}\n```'
            ),
        )

    payload = await make_research_client(handler).research_company("Zomato")

    assert payload == {"metrics": {"revenue": 5000000000}, "analysis_points": []}
    assert len(seen) == 1
    request = seen[0]
    assert str(request.url) == "https://research.test/chat/completions"
    assert request.headers["authorization"] == "Bearer test-key"
    body = json.loads(request.content)
    assert body["model"] == "sonar-test"
    assert [message["role"] for message in body["messages"]] == ["system", "user"]
    assert "Research the company Zomato" in body["messages"][1]["content"]
    assert "business_model, metrics, context, and analysis_points" in (
        body["messages"][1]["content"]
    )


@pytest.mark.asyncio
async def test_research_company_without_credential_fails_before_any_request() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=chat_completion("{}"))

    client = ResearchClient(
        config=ResearchConfig(api_key=None),
        transport=httpx.MockTransport(handler),
    )

    with pytest.raises(MissingCredentialError, match="PERPLEXITY_API_KEY"):
        await client.research_company("Acme")
    assert calls == []


@pytest.mark.asyncio
async def test_research_company_non_2xx_is_transport_error(make_research_client) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": "invalid key"})

    with pytest.raises(AcquisitionTransportError) as exc_info:
        await make_research_client(handler).research_company("Acme")

    assert exc_info.value.status_code == 401
    assert "401" in str(exc_info.value)


@pytest.mark.asyncio
async def test_research_company_network_failure_is_transport_error(
    make_research_client,
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AcquisitionTransportError):
        await make_research_client(handler).research_company("Acme")


@pytest.mark.asyncio
async def test_research_company_malformed_json_is_parse_error(
    make_research_client,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json=chat_completion("Sorry, I could not find that company.")
        )

    with pytest.raises(AcquisitionParseError):
        await make_research_client(handler).research_company("Acme")


@pytest.mark.parametrize(
    "text",
    ["<html>gateway</html>", "[" * 100_000],
    ids=["html", "deeply-nested"],
)
@pytest.mark.asyncio
async def test_research_company_non_json_body_is_parse_error(
    make_research_client, text: str
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=text)

    with pytest.raises(AcquisitionParseError):
        await make_research_client(handler).research_company("Acme")


def test_acquisition_errors_share_one_kind() -> None:
    for error_type in (
        MissingCredentialError,
        AcquisitionParseError,
        AcquisitionTransportError,
    ):
        assert issubclass(error_type, DataAcquisitionError)
