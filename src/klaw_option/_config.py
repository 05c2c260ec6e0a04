"""Library configuration: OptionConfig, environment detection and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_option._logging import configure_logging

__all__ = [
    'OptionConfig',
    'get_config',
    'init',
    'reset_config',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for klaw-option.

    Attributes:
        exhaustive: Default mode for match() calls that don't pass ``exhaustive``.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render logs as JSON (True) or as console output (False).
    """

    exhaustive: bool = True
    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init() or lazily by get_config())
_config: OptionConfig | None = None


def _detect_exhaustive() -> bool:
    """Read the default match mode from KLAW_OPTION_EXHAUSTIVE.

    Unset means exhaustive. Unknown values are reported and ignored.
    """
    raw = os.environ.get('KLAW_OPTION_EXHAUSTIVE', '').strip().lower()
    if not raw or raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.getLogger(__name__).warning(
        "Unknown KLAW_OPTION_EXHAUSTIVE value '%s', defaulting to exhaustive", raw
    )
    return True


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_OPTION_LOG_LEVEL."""
    raw = os.environ.get('KLAW_OPTION_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    *,
    exhaustive: bool | None = None,
    log_level: str | None = None,
    json_logs: bool = True,
) -> OptionConfig:
    """Initialize klaw-option with the given configuration.

    Args:
        exhaustive: Default match mode. Read from the environment if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from the
            environment if None; still None there means silent.
        json_logs: Emit JSON logs instead of console output.

    Returns:
        The OptionConfig that was set.

    Example:
        ```python
        from klaw_option import init

        # Everything from the environment
        init()

        # Loose matching by default, with debug logs of every dispatch
        init(exhaustive=False, log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_log_level = log_level if log_level is not None else _detect_log_level()

    _config = OptionConfig(
        exhaustive=_detect_exhaustive() if exhaustive is None else exhaustive,
        log_level=resolved_log_level,
        json_logs=json_logs,
    )

    if resolved_log_level is not None:
        configure_logging(resolved_log_level, json_output=json_logs)

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    If init() has not been called, a configuration is built from the
    environment without touching logging.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = OptionConfig(
            exhaustive=_detect_exhaustive(),
            log_level=_detect_log_level(),
        )
    return _config


def reset_config() -> None:
    """Forget the current configuration; the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603

    _config = None
