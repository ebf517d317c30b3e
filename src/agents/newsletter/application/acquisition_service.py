from __future__ import annotations

from src.agents.newsletter.application.ports import ResearchClientLike
from src.agents.newsletter.domain.entities import CompanyProfile
from src.agents.newsletter.interface.parsers import parse_company_profile
from src.shared.kernel.tools.logger import get_logger, log_event

logger = get_logger(__name__)


async def acquire_company_profile(
    *,
    company_name: str,
    supplied_profile: CompanyProfile | None,
    research_client: ResearchClientLike,
) -> CompanyProfile | None:
    """
    Return the caller's profile untouched, or research one.

    Raises DataAcquisitionError subclasses when research fails. Returns None
    only when the research service answers with a JSON null.
    """
    if supplied_profile is not None:
        log_event(
            logger,
            event="newsletter_acquisition_supplied",
            message="using caller-supplied company data",
        )
        return supplied_profile

    payload = await research_client.research_company(company_name)
    return parse_company_profile(payload, context="research response")
