from __future__ import annotations


def positive_seconds(raw: str | None, default: float) -> float:
    """Blank, malformed or non-positive values fall back to ``default``."""
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default
