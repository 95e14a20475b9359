"""Use case scrubbing a standalone process parameters document.

Purpose
-------
Replace the environment of a JSON-encoded :class:`ProcessParameters` with the
sentinel mapping before the document reaches a log.

Contents
--------
* :func:`create_scrub_process_parameters` – factory returning the callable.

System Role
-----------
Used directly by the façade and, through the execute-process shape, for the
JSON string nested inside bridge messages.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lib_bridge_scrub.application.ports import CodecPort, FlagPort, InvalidJson
from lib_bridge_scrub.domain import SCRUBBED_REPLACEMENT, ProcessParameters, has_keywords

logger = logging.getLogger(__name__)

ScrubText = Callable[[str], str]


def create_scrub_process_parameters(*, flag: FlagPort, codec: CodecPort) -> ScrubText:
    """Build the process parameters scrubber bound to ``flag`` and ``codec``.

    Parameters
    ----------
    flag:
        Toggle consulted on every call.
    codec:
        JSON codec used to parse and re-encode the document.

    Returns
    -------
    Callable[[str], str]
        Function returning ``text`` unchanged when scrubbing is disabled, no
        keyword is present, or ``text`` is not valid JSON; otherwise the
        re-encoded document with ``Environment`` replaced.
    """

    def scrub_process_parameters(text: str) -> str:
        if not flag.is_enabled():
            logger.debug("process parameters passed through: scrubbing disabled")
            return text
        if not has_keywords(text):
            logger.debug("process parameters passed through: no keyword")
            return text
        try:
            document = codec.load(text)
        except InvalidJson:
            # Malformed input is returned as-is, unscrubbed.
            logger.debug("process parameters passed through: invalid JSON")
            return text

        parameters = ProcessParameters.from_mapping(document).replace(
            Environment={SCRUBBED_REPLACEMENT: SCRUBBED_REPLACEMENT},
        )
        return codec.encode(parameters.to_dict()).decode("utf-8")

    return scrub_process_parameters


__all__ = ["ScrubText", "create_scrub_process_parameters"]
