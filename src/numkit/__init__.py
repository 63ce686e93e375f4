"""numkit: interpolation, range mapping, a deterministic mixer and bit helpers.

Subpackages:
- ``numkit.core``: types, constants, protocols, logging, configuration
- ``numkit.interp``: lerp, easing, clamping, range mapping
- ``numkit.prng``: Lehmer-style mixer, seed counters, streams, batch hashing
- ``numkit.bitops``: masking, byte reversal, binary strings
- ``numkit.search``: first/nth occurrence lookup
"""

from __future__ import annotations

from numkit.bitops import dec_to_bin, dec_to_bin16, dec_to_bin32, mask_bits, reverse_bits
from numkit.core import (
    NOT_FOUND,
    PI,
    SMALL_NUMBER,
    UINT64_MAX,
    LibraryConfig,
    Range,
    Vec2f32,
    Vec2f64,
    Vec3f32,
    Vec3f64,
    Vector2D,
    Vector3D,
    configure_logging,
    get_config,
    load_config,
    set_config,
)
from numkit.interp import (
    clamp,
    clamp_array,
    ease_in,
    ease_in_out,
    ease_out,
    lerp,
    mapped_value_array,
    mapped_value_clamped,
    mapped_value_unclamped,
    near_tolerance,
    range_alpha,
    range_alpha_array,
    remap,
)
from numkit.prng import (
    CounterSet,
    LehmerStream,
    SeedCounter,
    mix,
    mix_array,
    mix_bool,
    mix_bool_array,
    mix_float,
    mix_float_array,
    process_counters,
    rand_bool,
    rand_float,
    rand_int,
)
from numkit.search import find_first, find_nth

__version__ = "0.1.0"

__all__ = [
    # Constants and types
    "PI",
    "SMALL_NUMBER",
    "UINT64_MAX",
    "NOT_FOUND",
    "Range",
    "Vector2D",
    "Vector3D",
    "Vec2f32",
    "Vec2f64",
    "Vec3f32",
    "Vec3f64",
    # Config and logging
    "LibraryConfig",
    "load_config",
    "get_config",
    "set_config",
    "configure_logging",
    # Interpolation
    "lerp",
    "clamp",
    "ease_in",
    "ease_out",
    "ease_in_out",
    "near_tolerance",
    "range_alpha",
    "mapped_value_unclamped",
    "mapped_value_clamped",
    "remap",
    "clamp_array",
    "range_alpha_array",
    "mapped_value_array",
    # PRNG
    "mix",
    "mix_float",
    "mix_bool",
    "rand_int",
    "rand_float",
    "rand_bool",
    "SeedCounter",
    "CounterSet",
    "process_counters",
    "LehmerStream",
    "mix_array",
    "mix_float_array",
    "mix_bool_array",
    # Bits
    "mask_bits",
    "reverse_bits",
    "dec_to_bin",
    "dec_to_bin32",
    "dec_to_bin16",
    # Search
    "find_first",
    "find_nth",
]
