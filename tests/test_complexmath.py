import pytest

from fractol.complexmath import iterate, magnitude, step


@pytest.mark.parametrize("c", [0j, 1 + 2j, -0.5 + 0.25j, 3.0])
def test_step_from_zero_gives_c(c):
    assert step(0j, c) == complex(c)


def test_step_squares_imaginary_unit():
    assert step(1j, 0j) == complex(-1, 0)


def test_step_of_one_plus_i():
    assert step(1 + 1j, 0j) == 2j


def test_magnitude_pythagorean():
    assert magnitude(3 + 4j) == 5.0


@pytest.mark.parametrize("z", [0j, 1.5 - 2j, -7 + 0.1j])
def test_magnitude_symmetric(z):
    assert magnitude(z) == magnitude(-z) == magnitude(z.conjugate())


def test_origin_never_escapes():
    assert iterate(0j, 0j, 50, 3) == 50


def test_immediate_escape_counts_zero():
    assert iterate(2 + 0j, 2 + 0j, 50, 3) == 0


@pytest.mark.parametrize("max_iter", [0, -5])
def test_non_positive_limit(max_iter):
    assert iterate(0j, 0j, max_iter, 3) == 0


@pytest.mark.parametrize("z", [0.3 + 0.4j, -1 + 0.2j, 0.5 + 0.5j, -0.75 + 0.1j, 1 + 1j])
def test_count_within_limits_and_monotonic(z):
    short = iterate(z, z, 10, 3)
    long = iterate(z, z, 50, 3)
    assert 0 <= short <= 10
    assert 0 <= long <= 50
    assert short <= long
    if short < 10:
        assert long == short


def test_larger_bound_never_escapes_earlier():
    for z in (0.4 + 0.6j, -1.2 + 0.3j, 0.26 + 0j):
        assert iterate(z, z, 50, 2) <= iterate(z, z, 50, 3)