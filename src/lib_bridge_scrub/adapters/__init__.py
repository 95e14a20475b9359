"""Concrete adapters implementing the application ports."""

from __future__ import annotations

from .json_codec import JsonCodec

__all__ = ["JsonCodec"]
