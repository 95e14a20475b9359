"""Smoke tests for the package surface and metadata banner."""

from __future__ import annotations

import lib_bridge_scrub
from lib_bridge_scrub import __init__conf__, summary_info


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for lib_bridge_scrub" in summary
    assert "version" in summary
    assert __init__conf__.version in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_print_info_defaults_to_stdout(capsys) -> None:
    __init__conf__.print_info()
    assert capsys.readouterr().out == summary_info()


def test_public_surface_exports_entry_points() -> None:
    for name in ("scrub_process_parameters", "scrub_bridge_create", "scrub_bridge_exec_process", "set_scrubbing"):
        assert name in lib_bridge_scrub.__all__
    assert lib_bridge_scrub.SCRUBBED_REPLACEMENT == "<scrubbed>"
