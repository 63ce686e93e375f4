"""Config loading and the active library configuration."""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from numkit.core.logging import LOG_LEVELS, configure_logging, get_logger
from numkit.core.types import SMALL_NUMBER

__all__ = [
    "LibraryConfig",
    "load_config",
    "get_config",
    "set_config",
]

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LibraryConfig:
    """Process-wide settings.

    Attributes:
        tolerance: Default tolerance for ``near_tolerance`` when the caller
            passes none. The range mapper's guard does not read it.
        log_level: Level applied to the ``numkit`` logger on activation.
    """

    tolerance: float = SMALL_NUMBER
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate tolerance and log level."""
        if not math.isfinite(self.tolerance) or self.tolerance < 0:
            raise ValueError(f"tolerance must be finite and non-negative, got {self.tolerance}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


_active = LibraryConfig()


def _parse_override(item: str) -> tuple[str, Any]:
    """Split ``key=value``; the value is read as JSON, else kept as text."""
    key, sep, raw = item.partition("=")
    if not sep or not key:
        raise ValueError(f"Override must be key=value, got: {item}")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key.strip(), value


def load_config(path: Path | None = None, overrides: list[str] | None = None) -> LibraryConfig:
    """Build a ``LibraryConfig`` from an optional JSON file and overrides.

    Args:
        path: JSON object file. Missing keys keep their defaults.
        overrides: ``key=value`` strings applied after the file.

    Returns:
        The validated configuration (not activated; see ``set_config``).

    Raises:
        ValueError: On unknown keys or invalid values.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        raw.update(json.loads(path.read_text(encoding="utf-8")))
    raw.update(_parse_override(item) for item in overrides or ())

    known = {f.name for f in fields(LibraryConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    if "tolerance" in raw:
        raw["tolerance"] = float(raw["tolerance"])
    config = LibraryConfig(**raw)
    logger.info("Loaded config from %s: %s", path or "<defaults>", config.to_dict())
    return config


def get_config() -> LibraryConfig:
    """Return the active configuration."""
    return _active


def set_config(config: LibraryConfig) -> LibraryConfig:
    """Activate ``config`` and apply its log level. Returns the previous one."""
    global _active
    previous = _active
    _active = config
    configure_logging(config.log_level)
    logger.info("Activated config: %s", config.to_dict())
    return previous
