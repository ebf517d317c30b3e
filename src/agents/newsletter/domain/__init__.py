from .entities import (
    BusinessModel,
    CompanyMetrics,
    CompanyProfile,
    MarketContext,
    RenderedOutput,
    Story,
)
from .errors import (
    AcquisitionParseError,
    AcquisitionTransportError,
    DataAcquisitionError,
    GenerationError,
    MissingCredentialError,
    NewsletterError,
    NewsletterPipelineError,
    RenderError,
)
from .services import detect_markdown, format_metric

__all__ = [
    "BusinessModel",
    "CompanyMetrics",
    "CompanyProfile",
    "MarketContext",
    "RenderedOutput",
    "Story",
    "AcquisitionParseError",
    "AcquisitionTransportError",
    "DataAcquisitionError",
    "GenerationError",
    "MissingCredentialError",
    "NewsletterError",
    "NewsletterPipelineError",
    "RenderError",
    "detect_markdown",
    "format_metric",
]
