from .contracts import (
    CompanyProfileModel,
    ErrorResponseModel,
    NewsletterRequestModel,
    NewsletterResponseModel,
)
from .mappers import profile_to_payload, to_company_profile
from .parsers import (
    parse_company_profile,
    parse_research_message_content,
    unwrap_fenced_json,
)
from .serializers import build_error_payload, build_newsletter_response_payload

__all__ = [
    "CompanyProfileModel",
    "ErrorResponseModel",
    "NewsletterRequestModel",
    "NewsletterResponseModel",
    "profile_to_payload",
    "to_company_profile",
    "parse_company_profile",
    "parse_research_message_content",
    "unwrap_fenced_json",
    "build_error_payload",
    "build_newsletter_response_payload",
]
