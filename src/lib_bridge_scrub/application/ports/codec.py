"""Port describing the JSON codec used by the scrubbing use cases."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lib_bridge_scrub.domain.lookup import Envelope


class InvalidJson(Exception):
    """Signal raised by :meth:`CodecPort.load` for input that is not valid JSON.

    The use cases treat it as the pass-through branch, not as a failure.
    """


@runtime_checkable
class CodecPort(Protocol):
    """Parse, shape-check, and serialise JSON payloads."""

    def load(self, payload: bytes | str) -> Any:
        """Parse ``payload``; raise :class:`InvalidJson` for malformed input.

        Documents that parse but cannot be represented raise ``DecodeError``.
        """

    def decode_envelope(self, document: Any) -> Envelope:
        """Return ``document`` as a generic object or raise ``DecodeError``."""

    def encode(self, value: Any) -> bytes:
        """Serialise ``value`` without escaping markup characters."""


__all__ = ["CodecPort", "InvalidJson"]
