"""Domain entities and value objects used by the scrubbing engine."""

from __future__ import annotations

from .errors import DecodeError, EncodeError, ScrubError, TypeMismatchError, UnknownShapeError
from .flag import ScrubbingFlag
from .keywords import SCRUB_KEYWORDS, has_keywords
from .lookup import Absent, Envelope, Found, Lookup, WrongType, lookup_object, lookup_path
from .process_parameters import ProcessParameters

SCRUBBED_REPLACEMENT = "<scrubbed>"
"""Sentinel written in place of scrubbed values (as key and value for maps)."""

__all__ = [
    "Absent",
    "DecodeError",
    "EncodeError",
    "Envelope",
    "Found",
    "Lookup",
    "ProcessParameters",
    "SCRUBBED_REPLACEMENT",
    "SCRUB_KEYWORDS",
    "ScrubError",
    "ScrubbingFlag",
    "TypeMismatchError",
    "UnknownShapeError",
    "WrongType",
    "has_keywords",
    "lookup_object",
    "lookup_path",
]
