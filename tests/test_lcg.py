"""Tests for the Taillard uniform random stream and its generator cursor."""

import pytest

from taillard.errors import InvalidSeedError
from taillard.lcg import MODULUS, UnifGenerator, next_seed, unif
from taillard.seeds import TIME_SEEDS


def test_first_draws_of_ta001_seed() -> None:
    v1, s1 = unif(873654221, 1, 99)
    v2, s2 = unif(s1, 1, 99)
    v3, _ = unif(s2, 1, 99)
    assert (v1, v2, v3) == (54, 83, 15)
    assert s1 == 1160797808
    assert s2 == 1787309708


def test_next_seed_matches_direct_modular_product() -> None:
    seed = 873654221
    for _ in range(1000):
        expected = (16807 * seed) % MODULUS
        seed = next_seed(seed)
        assert seed == expected


def test_generator_cursor_advances(ta001_first_row: list[int]) -> None:
    gen = UnifGenerator(873654221)
    assert gen.seed == 873654221
    assert [gen.unif(1, 99) for _ in range(20)] == ta001_first_row
    assert gen.seed != 873654221


@pytest.mark.parametrize("seed", [TIME_SEEDS[0], TIME_SEEDS[57], TIME_SEEDS[-1]])
def test_vectorised_draws_match_scalar_draws(seed: int) -> None:
    scalar = UnifGenerator(seed)
    expected = [scalar.unif(1, 99) for _ in range(2000)]
    vector = UnifGenerator(seed)
    assert vector.draws(2000, 1, 99) == expected
    assert vector.seed == scalar.seed


def test_draws_split_equals_single_batch() -> None:
    whole = UnifGenerator(379008056).draws(100, 1, 99)
    gen = UnifGenerator(379008056)
    assert gen.draws(40, 1, 99) + gen.draws(60, 1, 99) == whole
    assert gen.draws(0, 1, 99) == []


def test_single_value_range() -> None:
    gen = UnifGenerator(1)
    assert gen.draws(50, 7, 7) == [7] * 50


def test_stream_never_degenerates_for_table_seeds() -> None:
    for seed in set(TIME_SEEDS):
        seen = set()
        state = seed
        for _ in range(10_000):
            state = next_seed(state)
            assert state != 0
            seen.add(state)
        assert len(seen) == 10_000


@pytest.mark.parametrize("seed", [0, MODULUS, -5, MODULUS + 1])
def test_invalid_seed_rejected(seed: int) -> None:
    with pytest.raises(InvalidSeedError):
        UnifGenerator(seed)


def test_non_int_seed_rejected() -> None:
    with pytest.raises(InvalidSeedError):
        UnifGenerator(1.5)  # type: ignore[arg-type]
    with pytest.raises(InvalidSeedError):
        UnifGenerator(True)


def test_negative_count_rejected() -> None:
    with pytest.raises(ValueError):
        UnifGenerator(1).draws(-1, 1, 99)
