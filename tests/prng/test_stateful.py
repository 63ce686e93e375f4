from __future__ import annotations

from numkit.prng.counter import SeedCounter, process_counters
from numkit.prng.lehmer import mix, mix_bool, mix_float
from numkit.prng.stateful import rand_bool, rand_float, rand_int


def test_rand_float_advances_process_counter() -> None:
    counter = process_counters().float_seeds
    before = counter.value
    first = rand_float()
    second = rand_float()
    assert counter.value == before + 2
    assert first == mix_float(before + 1)
    assert second == mix_float(before + 2)
    assert first != second


def test_families_use_separate_counters() -> None:
    counters = process_counters()
    int_before = counters.int_seeds.value
    bool_before = counters.bool_seeds.value
    float_before = counters.float_seeds.value

    assert rand_int() == mix(int_before + 1)
    assert rand_bool() == mix_bool(bool_before + 1)
    assert counters.float_seeds.value == float_before


def test_injected_counter_is_reproducible() -> None:
    a = SeedCounter(start=10)
    b = SeedCounter(start=10)
    assert [rand_int(counter=a) for _ in range(5)] == [rand_int(counter=b) for _ in range(5)]
    assert rand_float(counter=SeedCounter()) == mix_float(1)
    assert rand_bool(counter=SeedCounter()) == mix_bool(1)


def test_injected_counter_leaves_process_counters_alone() -> None:
    counters = process_counters()
    before = counters.int_seeds.value
    rand_int(counter=SeedCounter())
    assert counters.int_seeds.value == before
