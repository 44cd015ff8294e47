import pytest
from hypothesis import given
from hypothesis import strategies as st

from plutusflat.zigzag import unzigzag, zigzag


@given(st.integers())
def test_round_trip(value):
    assert unzigzag(zigzag(value)) == value


@given(st.integers(min_value=0))
def test_inverse_round_trip(value):
    assert zigzag(unzigzag(value)) == value


@given(st.integers())
def test_result_is_non_negative(value):
    assert zigzag(value) >= 0


@given(st.integers())
def test_parity_encodes_sign(value):
    assert (zigzag(value) % 2 == 0) == (value >= 0)


def test_small_values_fill_the_naturals():
    encoded = sorted(zigzag(n) for n in range(-50, 50))
    assert encoded == list(range(100))


def test_minus_one_maps_to_one():
    assert zigzag(-1) == 1


@pytest.mark.parametrize("value", [2**127, -(2**127), 2**300 + 17, -(2**300) - 5])
def test_big_integers_round_trip(value):
    assert unzigzag(zigzag(value)) == value


@given(st.integers(min_value=0, max_value=10**6))
def test_non_negative_doubles(value):
    assert zigzag(value) == value * 2