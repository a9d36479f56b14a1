from __future__ import annotations

import random

import pytest

from parametric_crc.bits import reflect_if, reverse_bits, reversed_int8_bits


def test_reversed_int8_bits_table():
    assert len(reversed_int8_bits) == 256
    assert reversed_int8_bits[0x01] == 0x80
    assert reversed_int8_bits[0x0f] == 0xf0
    assert reversed_int8_bits[0xa5] == 0xa5
    assert reversed_int8_bits[0x31] == 0x8c


@pytest.mark.parametrize(
    "value,width,expected",
    [
        (0x2f, 8, 0xf4),
        (0x1021, 16, 0x8408),
        (0x8005, 16, 0xa001),
        (0x04C11DB7, 32, 0xEDB88320),
        (0x1EDC6F41, 32, 0x82F63B78),
        (0x42F0E1EBA9EA3693, 64, 0xC96C5795D7870F42),
        (1, 64, 1 << 63),
    ],
)
def test_reverse_bits_known_values(value, width, expected):
    assert reverse_bits(value, width) == expected
    assert reverse_bits(expected, width) == value


@pytest.mark.parametrize("width", [8, 16])
def test_reverse_bits_involution_exhaustive(width):
    for x in range(1 << width):
        assert reverse_bits(reverse_bits(x, width), width) == x


@pytest.mark.parametrize("width", [32, 64])
def test_reverse_bits_involution_sampled(width):
    rng = random.Random(width)
    values = [0, (1 << width) - 1] + [rng.getrandbits(width) for _ in range(2000)]
    for x in values:
        assert reverse_bits(reverse_bits(x, width), width) == x


def test_reverse_bits_matches_string_reversal():
    rng = random.Random(1)
    for width in (8, 16, 32, 64):
        for _ in range(200):
            x = rng.getrandbits(width)
            expected = int("{:0{w}b}".format(x, w=width)[::-1], 2)
            assert reverse_bits(x, width) == expected


def test_reflect_if():
    assert reflect_if(False, 0x1021, 16) == 0x1021
    assert reflect_if(True, 0x1021, 16) == 0x8408


@pytest.mark.parametrize("value,width", [(0, 12), (0, 0), (0x100, 8), (-1, 16), (1 << 64, 64)])
def test_reverse_bits_rejects_invalid_input(value, width):
    with pytest.raises(ValueError):
        reverse_bits(value, width)
