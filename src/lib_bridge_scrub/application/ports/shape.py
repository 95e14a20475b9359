"""Port for shape-specific scrubbing procedures over generic envelopes."""

from __future__ import annotations

from typing import Protocol

from lib_bridge_scrub.domain.lookup import Envelope


class ShapeScrubber(Protocol):
    """Mutate ``envelope`` in place or raise a ``ScrubError``."""

    def __call__(self, envelope: Envelope) -> None: ...


__all__ = ["ShapeScrubber"]
