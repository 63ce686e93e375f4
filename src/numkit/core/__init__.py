"""Core types, protocols, logging and configuration.

This package contains:
- Numeric constants and value containers (ranges, 2D/3D vectors)
- Protocols describing interpolable and orderable values
- Logging and configuration helpers
"""

from __future__ import annotations

from numkit.core.config import LibraryConfig, get_config, load_config, set_config
from numkit.core.logging import configure_logging, get_logger
from numkit.core.protocols import Interpolable, Orderable
from numkit.core.types import (
    MASK32,
    MASK64,
    NOT_FOUND,
    PI,
    SMALL_NUMBER,
    UINT64_MAX,
    Number,
    Range,
    Vec2f32,
    Vec2f64,
    Vec3f32,
    Vec3f64,
    Vector2D,
    Vector3D,
)

__all__ = [
    # Types and constants
    "Number",
    "PI",
    "SMALL_NUMBER",
    "UINT64_MAX",
    "MASK64",
    "MASK32",
    "NOT_FOUND",
    "Range",
    "Vector2D",
    "Vector3D",
    "Vec2f32",
    "Vec2f64",
    "Vec3f32",
    "Vec3f64",
    # Protocols
    "Interpolable",
    "Orderable",
    # Logging
    "get_logger",
    "configure_logging",
    # Config
    "LibraryConfig",
    "load_config",
    "get_config",
    "set_config",
]
