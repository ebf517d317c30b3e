from .factory import build_newsletter_orchestrator
from .orchestrator import NewsletterOrchestrator

__all__ = ["NewsletterOrchestrator", "build_newsletter_orchestrator"]
