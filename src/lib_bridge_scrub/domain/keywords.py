"""Cheap substring prefilter run before any JSON parsing.

The keywords are case sensitive: ``env`` matches the abbreviated OCI field name
without matching ``Environment``, which is listed separately for the process
parameters shape.
"""

from __future__ import annotations

SCRUB_KEYWORDS: tuple[bytes, ...] = (b"env", b"Environment")
_TEXT_KEYWORDS: tuple[str, ...] = tuple(keyword.decode("ascii") for keyword in SCRUB_KEYWORDS)


def has_keywords(payload: bytes | bytearray | str) -> bool:
    """Return ``True`` when any keyword occurs in ``payload``.

    A match is necessary but not sufficient for scrubbing work; false positives
    are resolved later by the shape procedures.

    Examples
    --------
    >>> has_keywords(b'{"process": {"env": []}}')
    True
    >>> has_keywords('{"ENV": 1, "Env": 2}')
    False
    """

    if isinstance(payload, str):
        return any(keyword in payload for keyword in _TEXT_KEYWORDS)
    return any(keyword in payload for keyword in SCRUB_KEYWORDS)


__all__ = ["SCRUB_KEYWORDS", "has_keywords"]
