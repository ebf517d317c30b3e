from __future__ import annotations

from dataclasses import asdict

from src.agents.newsletter.domain.entities import (
    BusinessModel,
    CompanyMetrics,
    CompanyProfile,
    MarketContext,
)
from src.agents.newsletter.interface.contracts import CompanyProfileModel
from src.shared.kernel.types import JSONObject


def to_company_profile(model: CompanyProfileModel) -> CompanyProfile:
    return CompanyProfile(
        context=MarketContext(
            market_size=model.context.market_size,
            key_players=tuple(model.context.key_players),
            recent_developments=tuple(model.context.recent_developments),
        ),
        metrics=CompanyMetrics(
            revenue=model.metrics.revenue,
            funding=model.metrics.funding,
            market_share=model.metrics.market_share,
            growth_rate=model.metrics.growth_rate,
        ),
        business_model=BusinessModel(
            core_offering=model.business_model.core_offering,
            unit_economics=model.business_model.unit_economics,
            channels=tuple(model.business_model.channels),
            partnerships=tuple(model.business_model.partnerships),
        ),
        analysis_points=tuple(model.analysis_points),
    )


def profile_to_payload(profile: CompanyProfile) -> JSONObject:
    payload = asdict(profile)
    payload["context"]["key_players"] = list(profile.context.key_players)
    payload["context"]["recent_developments"] = list(
        profile.context.recent_developments
    )
    payload["business_model"]["channels"] = list(profile.business_model.channels)
    payload["business_model"]["partnerships"] = list(
        profile.business_model.partnerships
    )
    payload["analysis_points"] = list(profile.analysis_points)
    return payload
