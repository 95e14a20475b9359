"""Scrubbing façade that wires domain, application, and adapter layers together.

Purpose
-------
Expose the public entry points host code calls before persisting bridge
messages or process launch payloads to logs, backed by one process-wide
toggle and a shared :class:`JsonCodec`.

Contents
--------
* Toggle: :func:`set_scrubbing`, :func:`is_scrubbing_enabled`.
* Entry points: :func:`scrub_process_parameters`, :func:`scrub_bridge_create`,
  :func:`scrub_bridge_exec_process`, and :func:`scrub` selecting by
  :class:`MessageKind`.
* :func:`summary_info` – metadata banner for the CLI.

System Role
-----------
Composition root of the package. The toggle instance created here is the only
shared mutable state; everything else is call-local.
"""

from __future__ import annotations

from enum import Enum
from typing import overload

from .adapters import JsonCodec
from .application.use_cases import (
    build_scrub_execute_process,
    create_scrub_message,
    create_scrub_process_parameters,
    scrub_container_create,
)
from .domain import SCRUBBED_REPLACEMENT, ScrubbingFlag

_FLAG = ScrubbingFlag()
_CODEC = JsonCodec()

_scrub_process_parameters = create_scrub_process_parameters(flag=_FLAG, codec=_CODEC)
_scrub_bridge_create = create_scrub_message(flag=_FLAG, codec=_CODEC, shape=scrub_container_create)
_scrub_bridge_exec_process = create_scrub_message(
    flag=_FLAG,
    codec=_CODEC,
    shape=build_scrub_execute_process(_scrub_process_parameters),
)


class MessageKind(Enum):
    """Payload shapes the engine knows how to scrub."""

    PROCESS_PARAMETERS = "process-params"
    BRIDGE_CREATE = "create"
    BRIDGE_EXEC_PROCESS = "exec-process"

    @classmethod
    def from_name(cls, name: str) -> "MessageKind":
        """Resolve ``name`` case-insensitively by member name or value.

        Examples
        --------
        >>> MessageKind.from_name("exec_process") is MessageKind.BRIDGE_EXEC_PROCESS
        True
        >>> MessageKind.from_name("PROCESS_PARAMETERS") is MessageKind.PROCESS_PARAMETERS
        True
        """

        normalized = name.strip().lower().replace("_", "-")
        for member in cls:
            if normalized in (member.value, member.name.lower().replace("_", "-")):
                return member
        raise ValueError(f"Unknown message kind: {name!r}")


def set_scrubbing(enable: bool) -> None:
    """Enable or disable scrubbing for the whole process."""
    _FLAG.set_enabled(enable)


def is_scrubbing_enabled() -> bool:
    """Return ``True`` when scrubbing is enabled."""
    return _FLAG.is_enabled()


def scrub_process_parameters(text: str) -> str:
    """Scrub a JSON-encoded process parameters document.

    Returns ``text`` unchanged when scrubbing is disabled, neither keyword is
    present, or ``text`` is not valid JSON. Otherwise returns the re-encoded
    document whose ``Environment`` is ``{"<scrubbed>": "<scrubbed>"}``.

    Raises
    ------
    DecodeError
        When a known field holds the wrong JSON type.
    """
    return _scrub_process_parameters(text)


def scrub_bridge_create(payload: bytes) -> bytes:
    """Scrub a container create bridge request.

    The OCI process ``env`` list is replaced by ``["<scrubbed>"]``.

    Raises
    ------
    UnknownShapeError
        When the request base keys or the path to ``env`` are missing.
    """
    return _scrub_bridge_create(payload)


def scrub_bridge_exec_process(payload: bytes) -> bytes:
    """Scrub an execute process bridge request.

    The JSON string in ``Settings.ProcessParameters`` is scrubbed with
    :func:`scrub_process_parameters` and written back as a string.

    Raises
    ------
    UnknownShapeError
        When the request base keys, ``Settings`` or ``ProcessParameters`` are missing.
    TypeMismatchError
        When ``ProcessParameters`` is not a string.
    """
    return _scrub_bridge_exec_process(payload)


@overload
def scrub(kind: MessageKind | str, payload: str) -> str: ...


@overload
def scrub(kind: MessageKind | str, payload: bytes) -> bytes: ...


def scrub(kind: MessageKind | str, payload: bytes | str) -> bytes | str:
    """Scrub ``payload`` with the entry point registered for ``kind``.

    The result has the same type as ``payload``. Pass-through branches return
    the very object that was passed in.
    """

    if not isinstance(kind, MessageKind):
        kind = MessageKind.from_name(kind)

    if kind is MessageKind.PROCESS_PARAMETERS:
        if isinstance(payload, str):
            return scrub_process_parameters(payload)
        text = payload.decode("utf-8", errors="surrogateescape")
        result = scrub_process_parameters(text)
        return payload if result is text else result.encode("utf-8", errors="surrogateescape")

    scrubber = scrub_bridge_create if kind is MessageKind.BRIDGE_CREATE else scrub_bridge_exec_process
    if isinstance(payload, str):
        raw = payload.encode("utf-8", errors="surrogateescape")
        scrubbed = scrubber(raw)
        return payload if scrubbed is raw else scrubbed.decode("utf-8")
    return scrubber(payload)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "MessageKind",
    "SCRUBBED_REPLACEMENT",
    "is_scrubbing_enabled",
    "scrub",
    "scrub_bridge_create",
    "scrub_bridge_exec_process",
    "scrub_process_parameters",
    "set_scrubbing",
    "summary_info",
]
