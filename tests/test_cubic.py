import math

import pytest

from minirt.cubic import solve_cubic


def _poly(a0, a1, a2, x):
    return x ** 3 + a2 * x ** 2 + a1 * x + a0


@pytest.mark.parametrize(
    "coeffs",
    [
        (-6.0, 11.0, -6.0),
        (0.0, -1.0, 0.0),
        (1.5, -4.0, 0.5),
    ],
)
def test_three_distinct_roots_are_sorted_solutions(coeffs):
    roots = solve_cubic(*coeffs)
    assert len(roots) == 3
    assert list(roots) == sorted(roots)
    assert len(set(roots)) == 3
    for x in roots:
        assert math.isclose(_poly(*coeffs, x), 0.0, abs_tol=1e-9)


@pytest.mark.parametrize(
    "coeffs",
    [
        (-1.0, 0.0, 0.0),
        (5.0, 1.0, 1.0),
        (-2.0, 3.0, -1.0),
    ],
)
def test_single_real_root(coeffs):
    roots = solve_cubic(*coeffs)
    assert len(roots) == 1
    assert math.isclose(_poly(*coeffs, roots[0]), 0.0, abs_tol=1e-9)


def test_triple_root():
    # (x - 2)^3
    roots = solve_cubic(-8.0, 12.0, -6.0)
    assert len(roots) == 3
    assert roots[0] == roots[1] == roots[2]
    assert math.isclose(_poly(-8.0, 12.0, -6.0, roots[0]), 0.0, abs_tol=1e-12)


def test_triple_root_at_origin():
    assert solve_cubic(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


def test_double_root_positive_r():
    # (x - 1)^2 (x + 2)
    roots = solve_cubic(2.0, -3.0, 0.0)
    assert len(roots) == 3
    assert roots[1] == roots[2]
    assert roots[0] < roots[1]
    for x in roots:
        assert math.isclose(_poly(2.0, -3.0, 0.0, x), 0.0, abs_tol=1e-12)


def test_double_root_negative_r():
    # (x + 1)^2 (x - 2)
    roots = solve_cubic(-2.0, -3.0, 0.0)
    assert len(roots) == 3
    assert roots[0] == roots[1]
    assert roots[2] > roots[1]
    for x in roots:
        assert math.isclose(_poly(-2.0, -3.0, 0.0, x), 0.0, abs_tol=1e-12)