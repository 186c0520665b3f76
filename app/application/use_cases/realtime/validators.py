"""Input checks shared by the realtime use cases."""

from __future__ import annotations


def missing_fields(**fields: str | None) -> list[str]:
    """Return the names of ``fields`` that are empty or only whitespace."""

    return [name for name, value in fields.items() if not (value or "").strip()]


__all__ = ["missing_fields"]
