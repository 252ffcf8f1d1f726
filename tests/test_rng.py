from encore.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(101, 150) for _ in range(5)]
    ints_b = [rng_b.randint(101, 150) for _ in range(5)]

    assert ints_a == ints_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_rng_from_entropy_records_its_seed() -> None:
    rng = RNG.from_entropy()
    replay = RNG(rng.seed)

    assert 0 <= rng.seed < 2**31 - 1
    assert [rng.randint(20, 40) for _ in range(3)] == [replay.randint(20, 40) for _ in range(3)]
