"""Environment-driven configuration for the scrubbing toggle.

Purpose
-------
Let deployments switch scrubbing on through environment variables, optionally
sourced from the nearest ``.env`` file via :mod:`dotenv`.

Contents
--------
* :data:`SCRUB_ENV_VAR`, :func:`scrubbing_from_env`, :func:`apply_environment`.
* :data:`DOTENV_ENV_VAR`, :func:`should_use_dotenv`, :func:`enable_dotenv`,
  :func:`dotenv_path`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .lib_bridge_scrub import set_scrubbing

logger = logging.getLogger(__name__)

SCRUB_ENV_VAR = "BRIDGE_SCRUB_ENABLED"
DOTENV_ENV_VAR = "BRIDGE_SCRUB_USE_DOTENV"
_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None


def _is_truthy(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def scrubbing_from_env(default: bool = False) -> bool:
    """Return the toggle requested by :data:`SCRUB_ENV_VAR`.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop(SCRUB_ENV_VAR, None)
    >>> scrubbing_from_env(default=True)
    True
    >>> os.environ[SCRUB_ENV_VAR] = "off"
    >>> scrubbing_from_env(default=True)
    False
    >>> _ = os.environ.pop(SCRUB_ENV_VAR)
    """

    value = os.getenv(SCRUB_ENV_VAR)
    if value is None or not value.strip():
        return default
    return _is_truthy(value)


def apply_environment(default: bool = False) -> bool:
    """Set the process-wide toggle from the environment and return the new state."""

    enabled = scrubbing_from_env(default=default)
    set_scrubbing(enabled)
    logger.debug("scrubbing %s from environment", "enabled" if enabled else "disabled")
    return enabled


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI choice wins over the environment.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    """

    if explicit is not None:
        return explicit
    return _is_truthy(env_value)


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding variables already set.

    Parameters
    ----------
    search_from:
        Directory to start searching upwards from; defaults to the current
        working directory.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED
    if search_from is None:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    else:
        start = search_from.resolve()
        candidate = next((directory / ".env" for directory in (start, *start.parents) if (directory / ".env").is_file()), None)
    if candidate is None:
        logger.debug("no .env file found")
        return None

    load_dotenv(candidate, override=False)
    _DOTENV_LOADED = candidate.resolve()
    logger.debug("loaded environment from %s", _DOTENV_LOADED)
    return _DOTENV_LOADED


def dotenv_path() -> Path | None:
    """Return the ``.env`` file loaded by :func:`enable_dotenv`, if any."""

    return _DOTENV_LOADED


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "DOTENV_ENV_VAR",
    "SCRUB_ENV_VAR",
    "apply_environment",
    "dotenv_path",
    "enable_dotenv",
    "scrubbing_from_env",
    "should_use_dotenv",
]
