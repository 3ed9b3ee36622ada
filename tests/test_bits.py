import pytest

from algodrills.bits import count_bits, is_power_of_four, is_power_of_three, is_power_of_two

_POWERS_OF_TWO = {2**k for k in range(40)}
_POWERS_OF_THREE = {3**k for k in range(20)}
_POWERS_OF_FOUR = {4**k for k in range(20)}


def test_power_of_two_over_range():
    for n in range(-20, 5000):
        assert is_power_of_two(n) == (n in _POWERS_OF_TWO)


@pytest.mark.parametrize("k", range(31))
def test_power_of_two_large(k):
    assert is_power_of_two(2**k)
    if k > 1:
        assert not is_power_of_two(2**k + 1)


def test_power_of_three_over_range():
    for n in range(-20, 5000):
        assert is_power_of_three(n) == (n in _POWERS_OF_THREE)


def test_power_of_three_limit():
    assert is_power_of_three(1162261467)
    assert not is_power_of_three(1162261466)


def test_power_of_four_over_range():
    for n in range(-20, 5000):
        assert is_power_of_four(n) == (n in _POWERS_OF_FOUR)


def test_power_of_four_excludes_odd_powers_of_two():
    for k in range(1, 31, 2):
        assert not is_power_of_four(2**k)


def test_count_bits_example():
    assert count_bits(5) == [0, 1, 1, 2, 1, 2]


def test_count_bits_matches_binary_digits():
    counts = count_bits(1024)
    assert len(counts) == 1025
    for i, count in enumerate(counts):
        assert count == bin(i).count("1")


def test_count_bits_rejects_negative():
    with pytest.raises(ValueError):
        count_bits(-1)