"""Use case orchestrating the scrubbing of one bridge message.

Purpose
-------
Run the fixed pipeline flag check → keyword prefilter → JSON validity →
envelope decode → shape procedure → encode, skipping all parsing work when an
earlier, cheaper check shows it is unnecessary.

Contents
--------
* :func:`create_scrub_message` – factory returning the per-shape callable.

System Role
-----------
Application-layer orchestrator composed by the façade once per message shape.
The returned bytes are meant for logging only; callers keep using the
original payload for the real request.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lib_bridge_scrub.application.ports import CodecPort, FlagPort, InvalidJson, ShapeScrubber
from lib_bridge_scrub.domain import ScrubError, has_keywords

logger = logging.getLogger(__name__)

ScrubBytes = Callable[[bytes], bytes]


def create_scrub_message(*, flag: FlagPort, codec: CodecPort, shape: ShapeScrubber) -> ScrubBytes:
    """Build the scrubber for one message shape.

    Why
    ---
    Most messages carry nothing to scrub. Freezing the collaborators into a
    closure keeps the per-call path down to the three pass-through checks in
    that common case.

    Parameters
    ----------
    flag:
        Toggle consulted first on every call.
    codec:
        JSON codec; parsing happens at most once per call.
    shape:
        Procedure mutating the decoded envelope in place.

    Returns
    -------
    Callable[[bytes], bytes]
        Function returning ``payload`` itself on every pass-through branch and
        freshly encoded bytes otherwise.

    Raises
    ------
    ScrubError
        Propagated from the envelope decode or the shape procedure. Nothing is
        encoded and no partial result is returned.
    """

    shape_name = getattr(shape, "__name__", type(shape).__name__)

    def scrub_message(payload: bytes) -> bytes:
        if not flag.is_enabled():
            logger.debug("%s passed through: scrubbing disabled", shape_name)
            return payload
        if not has_keywords(payload):
            logger.debug("%s passed through: no keyword", shape_name)
            return payload
        try:
            try:
                document = codec.load(payload)
            except InvalidJson:
                # Malformed input is returned as-is, unscrubbed.
                logger.debug("%s passed through: invalid JSON", shape_name)
                return payload
            envelope = codec.decode_envelope(document)
            shape(envelope)
        except ScrubError as exc:
            logger.debug("%s failed: %s", shape_name, type(exc).__name__)
            raise
        return codec.encode(envelope)

    scrub_message.__name__ = f"scrub_message[{shape_name}]"
    return scrub_message


__all__ = ["ScrubBytes", "create_scrub_message"]
