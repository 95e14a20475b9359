"""Static package metadata surfaced by the CLI banner.

Kept in a plain module so the banner works without importing package
metadata at runtime; keep the values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_bridge_scrub"
title = "Scrub process environment values from bridge messages before logging"
version = "0.1.0"
author = "bitranox"
shell_command = "bridge-scrub"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (defaults to ``print``).

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0].splitlines()[0]
    'Info for lib_bridge_scrub:'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    text = "".join(lines)
    if writer is None:
        print(text, end="")
        return
    writer(text)
