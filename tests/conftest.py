from __future__ import annotations

from typing import Iterator

import pytest

import lib_bridge_scrub


@pytest.fixture(autouse=True)
def _reset_scrubbing() -> Iterator[None]:
    """Start every test with scrubbing disabled and leave it that way."""

    lib_bridge_scrub.set_scrubbing(False)
    yield
    lib_bridge_scrub.set_scrubbing(False)


@pytest.fixture
def scrubbing() -> None:
    lib_bridge_scrub.set_scrubbing(True)
