"""Process-wide toggle gating whether scrubbing runs at all.

Purpose
-------
Hold the single piece of shared mutable state in the scrubbing subsystem.

System Role
-----------
The façade owns one :class:`ScrubbingFlag` instance for the process; the use
cases only see it through :class:`lib_bridge_scrub.application.ports.FlagPort`.
Loads and stores of the slot are single reference operations, so concurrent
readers observe either the old or the new value and no lock is taken.
"""

from __future__ import annotations


class ScrubbingFlag:
    """Boolean cell read and written from many threads without locking.

    Examples
    --------
    >>> flag = ScrubbingFlag()
    >>> flag.is_enabled()
    False
    >>> flag.set_enabled(True)
    >>> flag.is_enabled()
    True
    """

    __slots__ = ("_enabled",)

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = bool(enabled)

    def set_enabled(self, enabled: bool) -> None:
        """Store ``enabled`` as the new state."""
        self._enabled = bool(enabled)

    def is_enabled(self) -> bool:
        """Return the current state."""
        return self._enabled

    def __repr__(self) -> str:
        return f"ScrubbingFlag(enabled={self._enabled})"


__all__ = ["ScrubbingFlag"]
