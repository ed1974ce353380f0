"""Small helpers for working with text."""

from __future__ import annotations

__all__ = ["substr"]


def substr(text: str, start: str, end: str) -> str | None:
    """Return the part of ``text`` that begins with ``start`` and stops just before ``end``.

    The search for ``end`` begins at the position where ``start`` was found, so
    ``start`` itself may hold the match. ``None`` is returned when either
    marker is missing.
    """
    begin = text.find(start)
    if begin < 0:
        return None
    stop = text.find(end, begin)
    if stop < 0:
        return None
    return text[begin:stop]