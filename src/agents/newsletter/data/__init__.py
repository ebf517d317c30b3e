from .clients import ResearchClient

__all__ = ["ResearchClient"]
