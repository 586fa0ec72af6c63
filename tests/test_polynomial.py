import warnings

import pytest

from zephyrgebra.polynomial import Polynomial, fft, next_power_of_two


def test_empty_coefficients_rejected():
    with pytest.raises(ValueError):
        Polynomial([])


def test_trailing_zeros_trimmed():
    p = Polynomial([1.0, 2.0, 0.0, 1e-15])
    assert p.coefficients == (1.0, 2.0)
    assert len(p) == 2


def test_zero_polynomial_keeps_constant():
    assert Polynomial([0.0, 0.0]).coefficients == (0.0,)


def test_from_roots_has_roots():
    roots = [1.0, -2.0, 3.5]
    p = Polynomial.from_roots(roots)
    assert p.degree == len(roots)
    assert p.coefficients[-1] == 1.0
    for r in roots:
        assert abs(p(r)) < 1e-9


def test_from_roots_empty_rejected():
    with pytest.raises(ValueError):
        Polynomial.from_roots([])


def test_add_subtract_round_trip():
    p = Polynomial([1.0, 2.0, 3.0])
    q = Polynomial([4.0, 5.0])
    assert (p + q) - q == p


def test_subtract_self_is_zero():
    p = Polynomial([1.0, 2.0, 3.0])
    assert (p - p).coefficients == (0.0,)


def test_copy_is_equal():
    p = Polynomial([1.0, 2.0, 3.0])
    assert p.copy() == p


def test_multiplication_matches_roots():
    product = Polynomial.from_roots([1.0, 2.0]) * Polynomial.from_roots([3.0])
    assert product.degree == 3
    assert product.coefficients == pytest.approx((-6.0, 11.0, -6.0, 1.0), abs=1e-9)


def test_multiplication_evaluates_as_product():
    p = Polynomial([1.0, -2.0, 0.5])
    q = Polynomial([3.0, 1.0, 0.0, 2.0])
    product = p * q
    assert product.degree == p.degree + q.degree
    for x in (-1.5, 0.0, 0.7, 2.0):
        assert product(x) == pytest.approx(p(x) * q(x), abs=1e-9)


def test_evaluate_complex_root():
    p = Polynomial([1.0, 0.0, 1.0])
    assert abs(p.evaluate(1j)) < 1e-12


def test_derivative_product_rule():
    p = Polynomial([1.0, -2.0, 0.5])
    q = Polynomial([3.0, 1.0, 4.0])
    lhs = (p * q).derivative()
    rhs = p.derivative() * q + p * q.derivative()
    assert lhs.degree == rhs.degree == 3
    assert lhs.coefficients == pytest.approx(rhs.coefficients, abs=1e-9)


def test_derivative_zero_order_is_copy():
    p = Polynomial([1.0, 2.0])
    assert p.derivative(0) == p


def test_derivative_beyond_degree_is_zero():
    p = Polynomial([1.0, 2.0, 3.0])
    assert p.derivative(p.degree + 1).coefficients == (0.0,)


def test_derivative_negative_rejected():
    with pytest.raises(ValueError):
        Polynomial([1.0, 2.0]).derivative(-1)


def test_hybrid_solve_finds_root():
    p = Polynomial.from_roots([1.0, 2.0, 3.0])
    root = p.hybrid_solve(1.5, 2.5, 100, 1e-12)
    assert root == pytest.approx(2.0, abs=1e-9)


def test_hybrid_solve_unbracketed():
    p = Polynomial.from_roots([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        p.hybrid_solve(0.0, 0.5, 100, 1e-12)


def test_hybrid_newton_finds_root():
    p = Polynomial.from_roots([1.0, 2.0, 3.0])
    root = p.hybrid_newton_solve(1.5, 2.5, 2.2, 100, 1e-12)
    assert root == pytest.approx(2.0, abs=1e-9)


def test_hybrid_newton_errors():
    p = Polynomial.from_roots([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        p.hybrid_newton_solve(0.0, 0.5, 0.2, 100, 1e-12)
    with pytest.raises(ValueError):
        p.hybrid_newton_solve(1.5, 2.5, 2.0, 0, 1e-12)


def test_hybrid_secant_errors():
    constant = Polynomial([1.0])
    with pytest.raises(ValueError):
        constant.hybrid_secant_solve(0.0, 1.0, 10, 1e-12)
    with pytest.raises(ValueError):
        Polynomial([1.0, 1.0]).hybrid_secant_solve(0.0, 1.0, 0, 1e-12)


def test_durand_kerner_quadratic():
    p = Polynomial.from_roots([2.0, -2.0])
    roots = sorted(p.durand_kerner(1000, 1e-12), key=lambda z: z.real)
    assert roots[0] == pytest.approx(-2.0, abs=1e-8)
    assert roots[1] == pytest.approx(2.0, abs=1e-8)


def test_durand_kerner_roots_are_zeros():
    p = Polynomial.from_roots([1.0, 2.0, 3.0])
    roots = p.durand_kerner(1000, 1e-12)
    assert len(roots) == p.degree
    for r in roots:
        assert abs(p(r)) < 1e-6


def test_durand_kerner_constant_rejected():
    with pytest.raises(ValueError):
        Polynomial([5.0]).durand_kerner(100, 1e-12)


def test_deflate_removes_root():
    p = Polynomial.from_roots([1.0, 2.0, 3.0])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        quotient = p.deflate(1.0)
    assert quotient.degree == 2
    assert quotient.coefficients == pytest.approx((6.0, -5.0, 1.0), abs=1e-9)


def test_deflate_inaccurate_root_warns():
    p = Polynomial.from_roots([1.0, 2.0])
    with pytest.warns(RuntimeWarning):
        quotient = p.deflate(5.0)
    assert quotient.degree == p.degree - 1


def test_deflate_constant_rejected():
    with pytest.raises(ValueError):
        Polynomial([3.0]).deflate(1.0)


def test_format():
    assert Polynomial([1.0, 2.5]).format(2) == "xpow0=1.00, xpow1=2.50"


def test_next_power_of_two():
    assert next_power_of_two(1) == 1
    assert next_power_of_two(4) == 4
    assert next_power_of_two(5) == 8


def test_fft_impulse_is_flat():
    out = fft([1.0, 0.0, 0.0, 0.0])
    assert all(abs(z - 1.0) < 1e-12 for z in out)


def test_fft_round_trip():
    values = [1.0, -2.0, 3.5, 0.25, 0.0, 7.0, -1.0, 2.0]
    restored = fft(fft(values), invert=True)
    assert all(abs(a - b) < 1e-9 for a, b in zip(restored, values))


def test_fft_rejects_bad_length():
    with pytest.raises(ValueError):
        fft([1.0, 2.0, 3.0])