"""Typed navigation through generic JSON trees.

Purpose
-------
Replace duck-typed nested dictionary access with an explicit tagged result so
every navigation step states whether the key was missing or held something
other than an object.

Contents
--------
* :class:`Found`, :class:`WrongType`, :class:`Absent` – lookup outcomes.
* :func:`lookup_object` – single step into a nested object.
* :func:`lookup_path` – repeated :func:`lookup_object` along a key path.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass
from typing import Any, Union

Envelope = MutableMapping[str, Any]


@dataclass(slots=True, frozen=True)
class Found:
    """The key exists and maps to a JSON object."""

    key: str
    value: Envelope


@dataclass(slots=True, frozen=True)
class WrongType:
    """The key exists but its value is not a JSON object."""

    key: str
    value: Any


@dataclass(slots=True, frozen=True)
class Absent:
    """The key does not exist."""

    key: str


Lookup = Union[Found, WrongType, Absent]


def lookup_object(mapping: Envelope, key: str) -> Lookup:
    """Return the outcome of reading ``mapping[key]`` as a nested object.

    Examples
    --------
    >>> lookup_object({"a": {"b": 1}}, "a")
    Found(key='a', value={'b': 1})
    >>> lookup_object({"a": [1]}, "a")
    WrongType(key='a', value=[1])
    >>> lookup_object({}, "a")
    Absent(key='a')
    """

    if key not in mapping:
        return Absent(key)
    value = mapping[key]
    if isinstance(value, MutableMapping):
        return Found(key, value)
    return WrongType(key, value)


def lookup_path(mapping: Envelope, keys: Iterable[str]) -> Lookup:
    """Walk ``keys`` from ``mapping``, stopping at the first step that is not :class:`Found`.

    Examples
    --------
    >>> lookup_path({"a": {"b": {"c": 1}}}, ("a", "b"))
    Found(key='b', value={'c': 1})
    >>> lookup_path({"a": {"b": 2}}, ("a", "b", "c"))
    WrongType(key='b', value=2)
    """

    result: Lookup = Found("", mapping)
    for key in keys:
        if not isinstance(result, Found):
            break
        result = lookup_object(result.value, key)
    return result


__all__ = ["Absent", "Envelope", "Found", "Lookup", "WrongType", "lookup_object", "lookup_path"]
