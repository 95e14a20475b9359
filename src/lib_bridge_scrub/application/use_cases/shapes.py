"""Shape procedures for bridge messages whose full schema is not modelled.

Purpose
-------
Reach the environment fields of two bridge requests by literal key names on a
generic JSON tree: container create and execute process.

Contents
--------
* :func:`scrub_container_create` – replace ``ContainerConfig.OciSpecification.process.env``.
* :func:`build_scrub_execute_process` – scrub ``Settings.ProcessParameters``
  through the structured process parameters scrubber.

System Role
-----------
Handed to :func:`create_scrub_message` by the façade. Every procedure first
checks the request base signature (``ActivityId`` and ``ContainerId``) and
raises rather than guess when the expected path is missing.
"""

from __future__ import annotations

from collections.abc import Callable

from lib_bridge_scrub.application.ports import ShapeScrubber
from lib_bridge_scrub.domain import (
    SCRUBBED_REPLACEMENT,
    Envelope,
    Found,
    Lookup,
    TypeMismatchError,
    UnknownShapeError,
    WrongType,
    lookup_object,
    lookup_path,
)

REQUEST_BASE_KEYS: tuple[str, ...] = ("ActivityId", "ContainerId")
CREATE_PROCESS_PATH: tuple[str, ...] = ("ContainerConfig", "OciSpecification", "process")


def require_request_base(envelope: Envelope, shape: str) -> None:
    """Raise :class:`UnknownShapeError` unless every request base key is present."""

    missing = [key for key in REQUEST_BASE_KEYS if key not in envelope]
    if missing:
        raise UnknownShapeError(f"{shape}: missing request base key(s) {', '.join(missing)}")


def _require_found(result: Lookup, shape: str) -> Envelope:
    if isinstance(result, Found):
        return result.value
    if isinstance(result, WrongType):
        raise UnknownShapeError(f"{shape}: {result.key!r} is {type(result.value).__name__}, expected object")
    raise UnknownShapeError(f"{shape}: missing key {result.key!r}")


def scrub_container_create(envelope: Envelope) -> None:
    """Replace the OCI process environment of a container create request.

    Raises
    ------
    UnknownShapeError
        When the request base keys are missing, a step of
        ``ContainerConfig.OciSpecification.process`` is absent or not an
        object, or the process object has no ``env`` key.

    Examples
    --------
    >>> message = {"ActivityId": "a", "ContainerId": "c",
    ...            "ContainerConfig": {"OciSpecification": {"process": {"env": ["A=1"]}}}}
    >>> scrub_container_create(message)
    >>> message["ContainerConfig"]["OciSpecification"]["process"]["env"]
    ['<scrubbed>']
    """

    shape = "container create"
    require_request_base(envelope, shape)
    process = _require_found(lookup_path(envelope, CREATE_PROCESS_PATH), shape)
    if "env" not in process:
        raise UnknownShapeError(f"{shape}: missing key 'env'")
    process["env"] = [SCRUBBED_REPLACEMENT]


def build_scrub_execute_process(scrub_parameters: Callable[[str], str]) -> ShapeScrubber:
    """Return the execute-process procedure delegating to ``scrub_parameters``.

    ``Settings.ProcessParameters`` carries a JSON document encoded as a string,
    so it is scrubbed by the structured scrubber and written back as a string.
    Errors from ``scrub_parameters`` propagate unchanged.
    """

    def scrub_execute_process(envelope: Envelope) -> None:
        shape = "execute process"
        require_request_base(envelope, shape)
        settings = _require_found(lookup_object(envelope, "Settings"), shape)
        if "ProcessParameters" not in settings:
            raise UnknownShapeError(f"{shape}: missing key 'ProcessParameters'")
        encoded = settings["ProcessParameters"]
        if not isinstance(encoded, str):
            raise TypeMismatchError(f"{shape}: 'ProcessParameters' is {type(encoded).__name__}, expected string")
        settings["ProcessParameters"] = scrub_parameters(encoded)

    return scrub_execute_process


__all__ = [
    "CREATE_PROCESS_PATH",
    "REQUEST_BASE_KEYS",
    "build_scrub_execute_process",
    "require_request_base",
    "scrub_container_create",
]
