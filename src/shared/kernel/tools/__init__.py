from .logger import (
    get_log_context,
    get_logger,
    log_context,
    log_event,
    sanitize_for_logging,
)

__all__ = [
    "get_logger",
    "get_log_context",
    "log_context",
    "log_event",
    "sanitize_for_logging",
]
