from .research import ResearchClient

__all__ = ["ResearchClient"]
