import pytest

from cringe_horoscope.prng import MASK_32, PRNG, compare_seed_sequences, mulberry32


def test_class_and_closure_agree():
    rng = PRNG(12345)
    fn = mulberry32(12345)
    assert [rng.next() for _ in range(10)] == [fn() for _ in range(10)]


def test_known_draws():
    assert PRNG(12345).generate_sequence(3) == [0.9797282677609473, 0.3067522644996643, 0.484205421525985]
    assert PRNG(0).generate_sequence(2) == [0.26642920868471265, 0.0003297457005828619]

    rng = PRNG(42)
    assert rng.next() == 0.6011037519201636
    assert rng.next_int(1, 10) == 5


def test_next_stays_in_unit_interval():
    rng = PRNG(987654321)
    for _ in range(10_000):
        value = rng.next()
        assert 0.0 <= value < 1.0


def test_next_int_is_inclusive_range():
    rng = PRNG(7)
    seen = {rng.next_int(3, 6) for _ in range(1000)}
    assert seen <= {3, 4, 5, 6}
    assert PRNG(1).next_int(4, 4) == 4


def test_seed_is_masked_to_32_bits():
    assert PRNG(-1).state == MASK_32
    assert PRNG(2**32 + 5).generate_sequence(4) == PRNG(5).generate_sequence(4)


def test_reset_replays_sequence():
    rng = PRNG(99)
    first = rng.generate_sequence(5)
    rng.reset(99)
    assert rng.generate_sequence(5) == first


def test_bad_arguments_raise():
    rng = PRNG(1)
    with pytest.raises(ValueError):
        rng.next_int(5, 1)
    with pytest.raises(ValueError):
        rng.choose([])
    with pytest.raises(ValueError):
        rng.probability(1.5)
    with pytest.raises(ValueError):
        rng.probability(-0.1)


def test_probability_edges():
    rng = PRNG(3)
    assert not any(rng.probability(0) for _ in range(100))
    assert all(rng.probability(1) for _ in range(100))


def test_shuffle_is_seeded_permutation():
    a = PRNG(2024).shuffle(list(range(20)))
    b = PRNG(2024).shuffle(list(range(20)))
    assert a == b
    assert sorted(a) == list(range(20))


def test_compare_seed_sequences():
    same = compare_seed_sequences(7, 7, 12)
    assert same["identical"] is True
    assert len(same["sequence1"]) == 12
    assert same["correlation"] == pytest.approx(1.0)

    diff = compare_seed_sequences(1, 2)
    assert diff["identical"] is False
    assert diff["sequence1"] == PRNG(1).generate_sequence(10)
    assert -1.0 <= diff["correlation"] <= 1.0
