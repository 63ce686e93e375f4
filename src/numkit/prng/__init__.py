"""Deterministic pseudo-random numbers.

This package contains:
- The pure Lehmer-style mixer (explicit seed)
- Thread-safe seed counters and the no-seed convenience functions
- ``LehmerStream``, a reproducible seeded stream
- numpy batch versions of the mixer
"""

from __future__ import annotations

from numkit.prng.batch import mix_array, mix_bool_array, mix_float_array, seed_range
from numkit.prng.counter import CounterSet, SeedCounter, process_counters
from numkit.prng.lehmer import mix, mix_bool, mix_float
from numkit.prng.stateful import rand_bool, rand_float, rand_int
from numkit.prng.stream import LehmerStream

__all__ = [
    # Pure mixer
    "mix",
    "mix_float",
    "mix_bool",
    # Counters
    "SeedCounter",
    "CounterSet",
    "process_counters",
    # Stateful
    "rand_int",
    "rand_float",
    "rand_bool",
    "LehmerStream",
    # Batch
    "mix_array",
    "mix_float_array",
    "mix_bool_array",
    "seed_range",
]
