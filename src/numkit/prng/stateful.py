"""Convenience random values without an explicit seed.

Each call advances a counter and feeds the new value to the pure mixer, so
successive calls look random but are only as varied as the counter. Callers
that need reproducible results should use ``mix``/``mix_float``/``mix_bool``
with their own seeds, a ``LehmerStream``, or pass their own ``counter``.
"""

from __future__ import annotations

from numkit.prng.counter import SeedCounter, process_counters
from numkit.prng.lehmer import mix, mix_bool, mix_float

__all__ = ["rand_int", "rand_float", "rand_bool"]


def rand_int(*, counter: SeedCounter | None = None) -> int:
    """Next 64-bit value from the integer counter (or ``counter``)."""
    if counter is None:
        counter = process_counters().int_seeds
    return mix(counter.next())


def rand_float(*, counter: SeedCounter | None = None) -> float:
    """Next float in ``[0.0, 1.0]`` from the float counter (or ``counter``)."""
    if counter is None:
        counter = process_counters().float_seeds
    return mix_float(counter.next())


def rand_bool(*, counter: SeedCounter | None = None) -> bool:
    """Next bool from the bool counter (or ``counter``)."""
    if counter is None:
        counter = process_counters().bool_seeds
    return mix_bool(counter.next())
