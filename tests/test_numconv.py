import pytest

from fractol.numconv import atoi, itoa


def test_atoi_skips_whitespace_and_reads_int_max():
    assert atoi(" \f\f\v \n\v +2147483647 So, can you  atoi") == 2147483647


def test_atoi_reads_int_min():
    assert atoi(" \f\f\v \n\v -2147483648 So, can you  atoi") == -2147483648


def test_atoi_wraps_past_int_max():
    assert atoi(" \f\f\v \n+2147483648 So, can you  atoi") == -2147483648


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_accepts_only_one_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("12x34") == 12


def test_atoi_does_not_skip_other_characters():
    assert atoi("\b7") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [0, 7, -7, 1000, -2147483648])
def test_itoa_matches_int_parsing(n):
    text = itoa(n)
    assert int(text) == n
    assert text.startswith("-") == (n < 0)


def test_itoa_zero():
    assert itoa(0) == "0"