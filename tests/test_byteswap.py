import math

import pytest

from astrosubs.byteswap import byte_swap, is_big_endian, is_little_endian, reverse_bytes


def test_reverse_two_bytes():
    assert reverse_bytes(b"\x01\x02") == b"\x02\x01"


def test_reverse_eight_bytes_is_involution():
    data = bytes(range(8))
    assert reverse_bytes(reverse_bytes(data)) == data
    assert reverse_bytes(data)[0] == data[-1]


@pytest.mark.parametrize("size", [0, 1, 3, 5, 16])
def test_reverse_rejects_other_sizes(size):
    with pytest.raises(ValueError):
        reverse_bytes(bytes(size))


def test_swap_int_one():
    assert byte_swap(1, "i") == 1 << 24


@pytest.mark.parametrize(
    "value, fmt",
    [(12345, "i"), (-7, "i"), (4000000000, "I"), (2**40 + 3, "q"), (513, "h"), (1.5, "f"), (math.pi, "d")],
)
def test_swap_round_trip(value, fmt):
    assert byte_swap(byte_swap(value, fmt), fmt) == value


def test_swap_rejects_single_byte():
    with pytest.raises(ValueError):
        byte_swap(5, "b")


def test_endianness_exclusive():
    assert {is_little_endian(), is_big_endian()} == {True, False}