from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CurrencyTag = Literal["inr", "usd"]


def _to_optional_number(value: object) -> int | float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _to_text(value: object) -> str:
    if isinstance(value, str):
        return value.strip()
    return json.dumps(value, ensure_ascii=False, default=str)


def _to_optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = _to_text(value)
    return text or None


def _to_text_list(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = [_to_text(item) for item in value if item is not None]
        return [item for item in items if item]
    text = _to_text(value)
    return [text] if text else []


def _to_section(value: object, *, text_key: str) -> object:
    if value is None:
        return {}
    if isinstance(value, str):
        return {text_key: value}
    if isinstance(value, Mapping):
        return value
    return {}


class MarketContextModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    market_size: str | None = None
    key_players: list[str] = Field(default_factory=list)
    recent_developments: list[str] = Field(default_factory=list)

    @field_validator("market_size", mode="before")
    @classmethod
    def _market_size(cls, value: object) -> str | None:
        return _to_optional_text(value)

    @field_validator("key_players", "recent_developments", mode="before")
    @classmethod
    def _lists(cls, value: object) -> list[str]:
        return _to_text_list(value)


class CompanyMetricsModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    revenue: int | float | None = None
    funding: int | float | None = None
    market_share: int | float | None = None
    growth_rate: int | float | None = None

    @field_validator(
        "revenue", "funding", "market_share", "growth_rate", mode="before"
    )
    @classmethod
    def _number(cls, value: object) -> int | float | None:
        return _to_optional_number(value)


class BusinessModelModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    core_offering: str | None = None
    unit_economics: str | None = None
    channels: list[str] = Field(default_factory=list)
    partnerships: list[str] = Field(default_factory=list)

    @field_validator("core_offering", "unit_economics", mode="before")
    @classmethod
    def _text(cls, value: object) -> str | None:
        return _to_optional_text(value)

    @field_validator("channels", "partnerships", mode="before")
    @classmethod
    def _lists(cls, value: object) -> list[str]:
        return _to_text_list(value)


class CompanyProfileModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    context: MarketContextModel = Field(default_factory=MarketContextModel)
    metrics: CompanyMetricsModel = Field(default_factory=CompanyMetricsModel)
    business_model: BusinessModelModel = Field(default_factory=BusinessModelModel)
    analysis_points: list[str] = Field(default_factory=list)

    @field_validator("context", mode="before")
    @classmethod
    def _context(cls, value: object) -> object:
        return _to_section(value, text_key="market_size")

    @field_validator("metrics", mode="before")
    @classmethod
    def _metrics(cls, value: object) -> object:
        return value if isinstance(value, Mapping) else {}

    @field_validator("business_model", mode="before")
    @classmethod
    def _business_model(cls, value: object) -> object:
        return _to_section(value, text_key="core_offering")

    @field_validator("analysis_points", mode="before")
    @classmethod
    def _analysis_points(cls, value: object) -> list[str]:
        return _to_text_list(value)


class NewsletterRequestModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    company_name: str = Field(min_length=1)
    company_data: CompanyProfileModel | None = None
    currency: CurrencyTag | None = None

    @field_validator("company_name", mode="before")
    @classmethod
    def _company_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("currency", mode="before")
    @classmethod
    def _currency(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower() or None
        return value


class NewsletterResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    story: str
    html_content: str
    is_markdown: bool
    raw_api_response: str | None = None


class ErrorResponseModel(BaseModel):
    error: str
