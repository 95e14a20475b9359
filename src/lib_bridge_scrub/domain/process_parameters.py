"""Structured shape of the process parameters document.

Purpose
-------
Model the process launch parameters whose schema this system owns, so the
environment can be replaced through a typed field instead of key lookups.

Contents
--------
* :class:`ProcessParameters` – dataclass with JSON field names as attributes.
* :meth:`ProcessParameters.from_mapping` – type-checked decode from a JSON object.
* :meth:`ProcessParameters.to_dict` – encode with empty fields omitted.

System Role
-----------
Consumed by the structured scrubbing use case. Keys outside the schema are
dropped on decode, the same way a struct decode would ignore them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable

from .errors import DecodeError


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _is_int_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, int) and not isinstance(item, bool) for item in value)


def _is_str_map(value: Any) -> bool:
    return isinstance(value, Mapping) and all(item is None or isinstance(item, str) for item in value.values())


_VALIDATORS: dict[str, tuple[Callable[[Any], bool], str]] = {
    "ApplicationName": (_is_str, "string"),
    "CommandLine": (_is_str, "string"),
    "CommandArgs": (_is_str_list, "array of strings"),
    "User": (_is_str, "string"),
    "WorkingDirectory": (_is_str, "string"),
    "Environment": (_is_str_map, "object of strings"),
    "RestrictedToken": (_is_bool, "boolean"),
    "EmulateConsole": (_is_bool, "boolean"),
    "CreateStdInPipe": (_is_bool, "boolean"),
    "CreateStdOutPipe": (_is_bool, "boolean"),
    "CreateStdErrPipe": (_is_bool, "boolean"),
    "ConsoleSize": (_is_int_list, "array of integers"),
    "UseExistingLogin": (_is_bool, "boolean"),
    "UseLegacyConsole": (_is_bool, "boolean"),
}


@dataclass(slots=True)
class ProcessParameters:
    """Parameters describing a process to launch inside a container.

    Attribute names follow the JSON field names so that :meth:`to_dict` and
    :meth:`from_mapping` stay a direct mapping.
    """

    ApplicationName: str = ""
    CommandLine: str = ""
    CommandArgs: list[str] = field(default_factory=list)
    User: str = ""
    WorkingDirectory: str = ""
    Environment: dict[str, str] = field(default_factory=dict)
    RestrictedToken: bool = False
    EmulateConsole: bool = False
    CreateStdInPipe: bool = False
    CreateStdOutPipe: bool = False
    CreateStdErrPipe: bool = False
    ConsoleSize: list[int] = field(default_factory=list)
    UseExistingLogin: bool = False
    UseLegacyConsole: bool = False

    @classmethod
    def from_mapping(cls, payload: Any) -> "ProcessParameters":
        """Decode a parsed JSON object into :class:`ProcessParameters`.

        Parameters
        ----------
        payload:
            Result of parsing the JSON document.

        Raises
        ------
        DecodeError
            When ``payload`` is not an object or a known field has the wrong
            JSON type. ``null`` values leave the field at its default;
            ``null`` entries of ``Environment`` decode as empty strings.

        Examples
        --------
        >>> ProcessParameters.from_mapping({"CommandLine": "sh", "Extra": 1}).CommandLine
        'sh'
        >>> ProcessParameters.from_mapping({"EmulateConsole": "yes"})
        Traceback (most recent call last):
        ...
        lib_bridge_scrub.domain.errors.DecodeError: ProcessParameters.EmulateConsole: expected boolean, got str
        """

        if not isinstance(payload, Mapping):
            raise DecodeError(f"ProcessParameters: expected object, got {type(payload).__name__}")
        values: dict[str, Any] = {}
        for name, (check, expected) in _VALIDATORS.items():
            value = payload.get(name)
            if value is None:
                continue
            if not check(value):
                raise DecodeError(f"ProcessParameters.{name}: expected {expected}, got {type(value).__name__}")
            if isinstance(value, Mapping):
                value = {key: "" if item is None else item for key, item in value.items()}
            values[name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, omitting empty and false fields."""

        data: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value:
                data[item.name] = value
        return data

    def replace(self, **changes: Any) -> "ProcessParameters":
        """Return a copy with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["ProcessParameters"]
