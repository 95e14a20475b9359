"""Port for reading the scrubbing toggle."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FlagPort(Protocol):
    """Report whether scrubbing is currently enabled."""

    def is_enabled(self) -> bool:
        """Return the current toggle state."""


__all__ = ["FlagPort"]
