"""Package configuration: Stringifier enum, EauxConfig, and initialization."""

from __future__ import annotations

import os
import pprint
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import partial

from eaux._logging import configure_logging, get_logger

__all__ = [
    "EauxConfig",
    "Stringifier",
    "get_config",
    "init",
    "reset_config",
]

logger = get_logger(__name__)


class Stringifier(Enum):
    """Default strategy used to turn a contained value into text when rendering."""

    PFORMAT = "pformat"
    REPR = "repr"
    STR = "str"


@dataclass(frozen=True)
class EauxConfig:
    """Configuration for eaux diagnostics.

    Attributes:
        stringifier: Default stringifier for render().
        width: Line width handed to pprint.pformat.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    stringifier: Stringifier = Stringifier.PFORMAT
    width: int = 80
    log_level: str | None = None

    def make_stringifier(self) -> Callable[[object], str]:
        """Build the callable for the configured stringifier."""
        match self.stringifier:
            case Stringifier.PFORMAT:
                return partial(pprint.pformat, width=self.width)
            case Stringifier.REPR:
                return repr
            case Stringifier.STR:
                return str


# Global configuration (set by init())
_config: EauxConfig | None = None


def _detect_stringifier() -> Stringifier:
    """Read the default stringifier from EAUX_STRINGIFIER, defaulting to pformat."""
    env_value = os.environ.get("EAUX_STRINGIFIER", "").lower()
    if not env_value:
        return Stringifier.PFORMAT
    try:
        return Stringifier(env_value)
    except ValueError:
        logger.warning("unknown_stringifier", value=env_value, fallback="pformat")
        return Stringifier.PFORMAT


def init(
    stringifier: Stringifier | str | None = None,
    width: int = 80,
    log_level: str | None = None,
) -> EauxConfig:
    """Initialize eaux with the given configuration.

    Args:
        stringifier: Default render stringifier. Read from the environment if None.
            Can be a Stringifier or its string value ("pformat", "repr", "str").
        width: Line width for pformat output, at least 1.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The EauxConfig that was set.

    Example:
        ```python
        import eaux

        eaux.init(stringifier="repr", log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    if stringifier is None:
        resolved = _detect_stringifier()
    elif isinstance(stringifier, str):
        resolved = Stringifier(stringifier.lower())
    else:
        resolved = stringifier

    _config = EauxConfig(
        stringifier=resolved,
        width=max(1, width),
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    logger.info("eaux_configured", stringifier=resolved.value, width=_config.width)
    return _config


def get_config() -> EauxConfig:
    """Get the current configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next get_config() re-initializes."""
    global _config  # noqa: PLW0603
    _config = None
