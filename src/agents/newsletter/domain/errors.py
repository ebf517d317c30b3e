from __future__ import annotations


class NewsletterError(Exception):
    """Base class for every failure raised while assembling a newsletter."""


class DataAcquisitionError(NewsletterError):
    """Company data could not be obtained from the research service."""


class MissingCredentialError(DataAcquisitionError):
    pass


class AcquisitionParseError(DataAcquisitionError):
    pass


class AcquisitionTransportError(DataAcquisitionError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GenerationError(NewsletterError):
    """Headline or story generation failed; the newsletter cannot be produced."""


class RenderError(NewsletterError):
    pass


class NewsletterPipelineError(NewsletterError):
    """Acquisition finished with neither a profile nor a recorded failure."""
