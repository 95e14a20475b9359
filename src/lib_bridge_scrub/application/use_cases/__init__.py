"""Use cases composing the scrubbing pipeline."""

from __future__ import annotations

from .scrub_message import ScrubBytes, create_scrub_message
from .scrub_process_parameters import ScrubText, create_scrub_process_parameters
from .shapes import build_scrub_execute_process, scrub_container_create

__all__ = [
    "ScrubBytes",
    "ScrubText",
    "build_scrub_execute_process",
    "create_scrub_message",
    "create_scrub_process_parameters",
    "scrub_container_create",
]
