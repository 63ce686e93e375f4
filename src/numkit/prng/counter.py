"""Thread-safe seed counters for the stateful random entry points.

This module contains:
- ``SeedCounter``: a lock-protected, monotonically increasing 64-bit counter
- ``CounterSet``: one independent counter per entry-point family
- ``process_counters``: the single access point to the process-wide set

Concurrent callers of ``SeedCounter.next`` each receive a distinct value;
which caller gets which value is unspecified.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from numkit.core.logging import get_logger
from numkit.core.types import MASK64

__all__ = ["SeedCounter", "CounterSet", "process_counters"]

logger = get_logger(__name__)


class SeedCounter:
    """Monotonic 64-bit counter whose increments are never lost.

    Example:
        >>> counter = SeedCounter()
        >>> counter.next(), counter.next()
        (1, 2)
    """

    __slots__ = ("_lock", "_value", "name")

    def __init__(self, start: int = 0, name: str = "default") -> None:
        """Create a counter.

        Args:
            start: Initial value. The first ``next()`` returns ``start + 1``.
            name: Label used in log messages and ``repr``.

        Raises:
            ValueError: If ``start`` is outside ``[0, 2**64)``.
        """
        if not 0 <= start <= MASK64:
            raise ValueError(f"start must be in [0, 2**64), got {start}")
        self._lock = threading.Lock()
        self._value = start
        self.name = name

    @property
    def value(self) -> int:
        """Most recently issued value (``start`` before the first call)."""
        with self._lock:
            return self._value

    def next(self) -> int:
        """Increment and return the new value, wrapping after ``2**64 - 1``."""
        with self._lock:
            self._value = (self._value + 1) & MASK64
            value = self._value
        if value == 0:
            logger.warning("Seed counter %r wrapped around 2**64", self.name)
        return value

    def __repr__(self) -> str:
        return f"SeedCounter(name={self.name!r}, value={self.value})"


@dataclass(frozen=True)
class CounterSet:
    """Independent counters for the integer, float and bool entry points."""

    int_seeds: SeedCounter = field(default_factory=lambda: SeedCounter(name="int"))
    float_seeds: SeedCounter = field(default_factory=lambda: SeedCounter(name="float"))
    bool_seeds: SeedCounter = field(default_factory=lambda: SeedCounter(name="bool"))


_process_counters: CounterSet | None = None
_process_lock = threading.Lock()


def process_counters() -> CounterSet:
    """Return the process-wide counters, creating them on first use.

    The counters start at 0, live for the rest of the process and are never
    reset.
    """
    global _process_counters
    if _process_counters is None:
        with _process_lock:
            if _process_counters is None:
                _process_counters = CounterSet()
                logger.debug("Created process-wide seed counters")
    return _process_counters
