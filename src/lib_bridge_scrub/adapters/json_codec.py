"""JSON codec adapter backed by the standard library :mod:`json` module.

Purpose
-------
Implement :class:`CodecPort` with the encoding rules bridge payloads expect:
compact output, non-ASCII and markup characters (``<``, ``>``, ``&``) written
literally, and key order of decoded objects preserved.

Contents
--------
* :class:`JsonCodec` – concrete codec.

System Role
-----------
Injected into the use cases by the façade. The validity check and the parse
share a single :func:`json.loads` call.
"""

from __future__ import annotations

import json
from collections.abc import MutableMapping
from typing import Any

from lib_bridge_scrub.application.ports import CodecPort, InvalidJson
from lib_bridge_scrub.domain import DecodeError, EncodeError, Envelope


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


class JsonCodec(CodecPort):
    """Strict JSON codec for bridge messages.

    ``NaN`` and ``Infinity`` literals are rejected so that only standard JSON
    counts as valid.

    Examples
    --------
    >>> codec = JsonCodec()
    >>> codec.encode({"cmd": "a<b && c>d", "name": "café"})
    b'{"cmd":"a<b && c>d","name":"caf\\xc3\\xa9"}'
    """

    def load(self, payload: bytes | bytearray | str) -> Any:
        """Parse ``payload``; raise :class:`InvalidJson` when it is not valid JSON.

        Bytes that are not UTF-8 are decoded with U+FFFD replacements, so an
        encoding problem never turns a message into a pass-through.

        Raises
        ------
        InvalidJson
            For syntactically invalid JSON.
        DecodeError
            When the document nests deeper than the parser can follow.
        """

        text = payload if isinstance(payload, str) else bytes(payload).decode("utf-8", errors="replace")
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except RecursionError as exc:
            raise DecodeError("JSON document nested too deeply") from exc
        except ValueError as exc:
            raise InvalidJson(str(exc)) from exc

    def decode_envelope(self, document: Any) -> Envelope:
        """Return ``document`` when it is a JSON object."""

        if not isinstance(document, MutableMapping):
            raise DecodeError(f"expected JSON object, got {type(document).__name__}")
        return document

    def encode(self, value: Any) -> bytes:
        """Serialise ``value`` to compact UTF-8 JSON.

        Lone surrogates decoded from ``\\ud800``-style escapes are written as
        U+FFFD.
        """

        try:
            text = json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
            return _replace_lone_surrogates(text).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"cannot encode {type(value).__name__}: {exc}") from exc


def _replace_lone_surrogates(text: str) -> str:
    if text.isascii():
        return text
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


__all__ = ["JsonCodec"]
