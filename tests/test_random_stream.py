import pytest

from echoalchemist.random_stream import RandomStream


def test_same_seed_same_sequence():
    a = RandomStream(12345)
    b = RandomStream(12345)
    assert [a.frand() for _ in range(50)] == [b.frand() for _ in range(50)]


def test_frand_in_unit_interval():
    stream = RandomStream(7)
    values = [stream.frand() for _ in range(1000)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_frand_has_23_bit_precision():
    stream = RandomStream(99)
    for _ in range(100):
        scaled = stream.frand() * (1 << 23)
        assert scaled == int(scaled)


@pytest.mark.parametrize("low,high", [(-10.0, 10.0), (0.0, 3.5), (100.0, 200.0)])
def test_frand_range_bounds(low, high):
    stream = RandomStream(42)
    values = [stream.frand_range(low, high) for _ in range(500)]
    assert all(low <= v <= high for v in values)


def test_rand_range_inclusive_and_covers_ends():
    stream = RandomStream(3)
    values = {stream.rand_range(0, 4) for _ in range(2000)}
    assert values == {0, 1, 2, 3, 4}


def test_rand_range_single_value():
    stream = RandomStream(1)
    assert [stream.rand_range(5, 5) for _ in range(10)] == [5] * 10


def test_rand_range_empty_range_returns_low():
    stream = RandomStream(1)
    assert stream.rand_range(5, 3) == 5


def test_empty_range_does_not_advance_stream():
    a = RandomStream(11)
    b = RandomStream(11)
    a.rand_range(5, 3)
    assert a.frand() == b.frand()


def test_negative_seed_is_deterministic():
    a = RandomStream(-1000)
    b = RandomStream(-1000)
    seq_a = [a.rand_range(-3, 3) for _ in range(100)]
    seq_b = [b.rand_range(-3, 3) for _ in range(100)]
    assert seq_a == seq_b
    assert all(-3 <= v <= 3 for v in seq_a)
    assert a.initial_seed == -1000