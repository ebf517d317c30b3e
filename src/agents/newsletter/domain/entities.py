from __future__ import annotations

from dataclasses import dataclass, field

from src.agents.newsletter.domain.errors import GenerationError


@dataclass(frozen=True)
class MarketContext:
    market_size: str | None = None
    key_players: tuple[str, ...] = ()
    recent_developments: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompanyMetrics:
    revenue: float | None = None
    funding: float | None = None
    market_share: float | None = None
    growth_rate: float | None = None


@dataclass(frozen=True)
class BusinessModel:
    core_offering: str | None = None
    unit_economics: str | None = None
    channels: tuple[str, ...] = ()
    partnerships: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompanyProfile:
    context: MarketContext = field(default_factory=MarketContext)
    metrics: CompanyMetrics = field(default_factory=CompanyMetrics)
    business_model: BusinessModel = field(default_factory=BusinessModel)
    analysis_points: tuple[str, ...] = ()


@dataclass(frozen=True)
class Story:
    company_name: str
    headline: str
    profile: CompanyProfile

    def __post_init__(self) -> None:
        if not self.headline.strip():
            raise GenerationError("Generated headline is empty")


@dataclass(frozen=True)
class RenderedOutput:
    story: str
    html_content: str
    is_markdown: bool
    raw_api_response: str | None = None

    @classmethod
    def from_acquisition_failure(cls, message: str) -> RenderedOutput:
        return cls(
            story="",
            html_content="",
            is_markdown=False,
            raw_api_response=message,
        )
