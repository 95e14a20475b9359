"""Protocols the scrubbing use cases depend on."""

from __future__ import annotations

from .codec import CodecPort, InvalidJson
from .flag import FlagPort
from .shape import ShapeScrubber

__all__ = ["CodecPort", "FlagPort", "InvalidJson", "ShapeScrubber"]
