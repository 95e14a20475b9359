"""Exception hierarchy raised by the scrubbing pipeline.

Purpose
-------
Give callers a single base class to catch when a payload could not be
confirmed as scrubbed, while still distinguishing why.

Contents
--------
* :class:`ScrubError` – base class, a :class:`ValueError`.
* :class:`UnknownShapeError` – payload does not match a known message shape.
* :class:`DecodeError` – structured decode of a presumed-valid payload failed.
* :class:`TypeMismatchError` – a field holds the wrong JSON type.
* :class:`EncodeError` – a scrubbed value could not be serialised.

System Role
-----------
Every error is terminal for the call. A caller receiving one must not log the
original payload.
"""

from __future__ import annotations


class ScrubError(ValueError):
    """Base class for payloads that could not be scrubbed."""


class UnknownShapeError(ScrubError):
    """Raised when a payload lacks the structure a shape procedure expects."""


class DecodeError(ScrubError):
    """Raised when a JSON document cannot be decoded into the expected shape."""


class TypeMismatchError(ScrubError):
    """Raised when a field is present but holds an unexpected JSON type."""


class EncodeError(ScrubError):
    """Raised when a value cannot be serialised back to JSON."""


__all__ = ["DecodeError", "EncodeError", "ScrubError", "TypeMismatchError", "UnknownShapeError"]
