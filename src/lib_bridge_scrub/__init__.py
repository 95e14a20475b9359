"""Scrub process environment values from bridge messages before they are logged.

The public surface mirrors :mod:`lib_bridge_scrub.lib_bridge_scrub`: toggle
scrubbing with :func:`set_scrubbing`, then pass payloads through
:func:`scrub_process_parameters`, :func:`scrub_bridge_create`, or
:func:`scrub_bridge_exec_process` before writing them to a log. The unscrubbed
payload stays the one used for the real request.
"""

from __future__ import annotations

from .domain import DecodeError, EncodeError, ScrubError, TypeMismatchError, UnknownShapeError
from .lib_bridge_scrub import (
    SCRUBBED_REPLACEMENT,
    MessageKind,
    is_scrubbing_enabled,
    scrub,
    scrub_bridge_create,
    scrub_bridge_exec_process,
    scrub_process_parameters,
    set_scrubbing,
    summary_info,
)

__all__ = [
    "DecodeError",
    "EncodeError",
    "MessageKind",
    "SCRUBBED_REPLACEMENT",
    "ScrubError",
    "TypeMismatchError",
    "UnknownShapeError",
    "is_scrubbing_enabled",
    "scrub",
    "scrub_bridge_create",
    "scrub_bridge_exec_process",
    "scrub_process_parameters",
    "set_scrubbing",
    "summary_info",
]
