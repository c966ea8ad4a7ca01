"""
Runtime configuration and logging setup for ndarr.

Settings are read from environment variables once and cached:

- ``NDARR_DTYPE``     : element dtype of newly created arrays
                        (``"float32"`` or ``"float64"``; default ``"float32"``).
- ``NDARR_LOG_LEVEL`` : level applied to the ``ndarr`` logger by
                        :func:`configure_logging` (e.g. ``"DEBUG"``).

The library never configures the root logger on import. The package
``__init__`` installs a ``NullHandler``; applications opt into output by
calling :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

import numpy as np

from ..domain._errors import InvalidArgumentError

PACKAGE_LOGGER_NAME = __name__.rsplit(".infrastructure", 1)[0]
"""Name of the package logger (``"ndarr"`` when installed)."""

_SUPPORTED_DTYPES = {
    "float32": np.float32,
    "float64": np.float64,
}

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """
    Immutable engine settings.

    Attributes
    ----------
    dtype : np.dtype
        Element dtype used for every buffer the engine allocates.
    log_level : Optional[str]
        Level name for the package logger, or None to leave it untouched.
    """

    dtype: np.dtype
    log_level: Optional[str] = None


def _parse_dtype(raw: str) -> np.dtype:
    key = raw.strip().lower()
    if key not in _SUPPORTED_DTYPES:
        raise InvalidArgumentError(
            f"Unsupported NDARR_DTYPE {raw!r}; expected one of "
            f"{sorted(_SUPPORTED_DTYPES)}"
        )
    return np.dtype(_SUPPORTED_DTYPES[key])


def _parse_log_level(raw: Optional[str]) -> Optional[str]:
    if raw is None or not raw.strip():
        return None
    name = raw.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise InvalidArgumentError(f"Unknown NDARR_LOG_LEVEL {raw!r}")
    return name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the process-wide settings, reading the environment on first use.

    Raises
    ------
    InvalidArgumentError
        If an environment variable holds an unsupported value.
    """
    return Settings(
        dtype=_parse_dtype(os.environ.get("NDARR_DTYPE", "float32")),
        log_level=_parse_log_level(os.environ.get("NDARR_LOG_LEVEL")),
    )


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    get_settings.cache_clear()


def default_dtype() -> np.dtype:
    """Shorthand for ``get_settings().dtype``."""
    return get_settings().dtype


def configure_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """
    Attach a stdout stream handler to the ``ndarr`` logger.

    Parameters
    ----------
    level : int or str, optional
        Explicit level. Defaults to ``NDARR_LOG_LEVEL`` and then ``INFO``.

    Returns
    -------
    logging.Logger
        The configured package logger.

    Notes
    -----
    Calling this repeatedly does not stack handlers.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if level is None:
        level = get_settings().log_level or "INFO"
    logger.setLevel(level)

    if not any(getattr(h, "_ndarr_stream", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._ndarr_stream = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
