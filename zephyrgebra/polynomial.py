"""Real polynomials: arithmetic, calculus and root finding."""

from __future__ import annotations

import cmath
import math
import sys
import warnings
from collections.abc import Iterable, Sequence

__all__ = ["Polynomial", "fft", "next_power_of_two"]

_TRIM_EPSILON = 1e-12
_DENOM_EPSILON = 1e-12
_DEFLATE_WARN_EPSILON = 1e-6
_DBL_EPSILON = sys.float_info.epsilon


def next_power_of_two(n: int) -> int:
    """Return the smallest power of two that is at least ``n`` (1 for n <= 1)."""
    power = 1
    while power < n:
        power <<= 1
    return power


def _fft(values: list[complex], invert: bool) -> list[complex]:
    n = len(values)
    if n == 1:
        return values
    half = n // 2
    even = _fft(values[0::2], invert)
    odd = _fft(values[1::2], invert)
    sign = -2.0 if invert else 2.0
    out = [0j] * n
    for k, (e, o) in enumerate(zip(even, odd)):
        w = cmath.exp(sign * math.pi * 1j * k / n)
        low, high = e + w * o, e - w * o
        if invert:
            low /= 2
            high /= 2
        out[k] = low
        out[k + half] = high
    return out


def fft(values: Iterable[complex], invert: bool = False) -> list[complex]:
    """Return the discrete Fourier transform of ``values``.

    The length must be a power of two. With ``invert`` the inverse
    transform is computed, including the division by the length.
    """
    data = [complex(v) for v in values]
    n = len(data)
    if n == 0 or n & (n - 1):
        raise ValueError("FFT length must be a positive power of two")
    return _fft(data, invert)


class Polynomial:
    """An immutable polynomial with real coefficients, lowest degree first."""

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Iterable[float]) -> None:
        coeffs = [float(c) for c in coefficients]
        if not coeffs:
            raise ValueError("a polynomial needs at least one coefficient")
        while len(coeffs) > 1 and abs(coeffs[-1]) < _TRIM_EPSILON:
            coeffs.pop()
        self._coefficients = tuple(coeffs)

    @classmethod
    def from_roots(cls, roots: Sequence[float]) -> Polynomial:
        """Return the monic polynomial whose roots are ``roots``."""
        if not roots:
            raise ValueError("at least one root is required")
        coeffs = [1.0]
        for r in roots:
            shifted = [0.0] + coeffs
            scaled = [c * r for c in coeffs] + [0.0]
            coeffs = [s - t for s, t in zip(shifted, scaled)]
        return cls(coeffs)

    @property
    def coefficients(self) -> tuple[float, ...]:
        """The coefficients from the constant term upwards."""
        return self._coefficients

    @property
    def degree(self) -> int:
        """The highest power with a non-negligible coefficient."""
        return len(self._coefficients) - 1

    def __len__(self) -> int:
        return len(self._coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    __hash__ = None  # type: ignore[assignment]

    def _padded(self, size: int) -> list[float]:
        return list(self._coefficients) + [0.0] * (size - len(self._coefficients))

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        size = max(len(self), len(other))
        return Polynomial(
            a + b for a, b in zip(self._padded(size), other._padded(size))
        )

    def __sub__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        size = max(len(self), len(other))
        return Polynomial(
            a - b for a, b in zip(self._padded(size), other._padded(size))
        )

    def __mul__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result_degree = self.degree + other.degree
        n = next_power_of_two(result_degree + 1)
        fa = fft(self._padded(n))
        fb = fft(other._padded(n))
        product = fft((x * y for x, y in zip(fa, fb)), invert=True)
        return Polynomial(c.real for c in product[: result_degree + 1])

    def __call__(self, x):
        return self.evaluate(x)

    def copy(self) -> Polynomial:
        """Return an equal, independent polynomial."""
        return Polynomial(self._coefficients)

    def evaluate(self, x):
        """Evaluate at ``x`` (real or complex) by Horner's method."""
        result = 0.0
        for c in reversed(self._coefficients):
            result = result * x + c
        return result

    def derivative(self, nth: int = 1) -> Polynomial:
        """Return the ``nth`` derivative."""
        if nth < 0:
            raise ValueError("derivative order must be non-negative")
        poly = self.copy()
        for _ in range(nth):
            if poly.degree == 0:
                return Polynomial([0.0])
            poly = Polynomial(
                i * c for i, c in enumerate(poly._coefficients) if i > 0
            )
        return poly

    def _bracket(self, a: float, b: float) -> tuple[float, float]:
        fa = self.evaluate(a)
        fb = self.evaluate(b)
        if fa * fb > 0.0:
            raise ValueError(f"root is not bracketed by [{a}, {b}]")
        return fa, fb

    def hybrid_solve(
        self,
        a: float,
        b: float,
        max_iterations: int = 100,
        tolerance: float = 1e-12,
    ) -> float:
        """Find a root in ``[a, b]`` by secant steps with bisection fallback."""
        fa, fb = self._bracket(a, b)
        prev, curr = a, b
        fprev, fcurr = fa, fb
        for _ in range(max_iterations):
            denominator = fcurr - fprev
            if abs(denominator) > _DBL_EPSILON:
                nxt = curr - fcurr * (curr - prev) / denominator
                if nxt < a or nxt > b:
                    nxt = (a + b) / 2.0
            else:
                nxt = (a + b) / 2.0
            fnext = self.evaluate(nxt)
            if abs(fnext) < tolerance or abs(b - a) < tolerance:
                return nxt
            if fa * fnext < 0.0:
                b, fb = nxt, fnext
            else:
                a, fa = nxt, fnext
            prev, fprev = curr, fcurr
            curr, fcurr = nxt, fnext
        return curr

    def hybrid_newton_solve(
        self,
        a: float,
        b: float,
        initial_guess: float,
        max_iterations: int = 100,
        tolerance: float = 1e-12,
    ) -> float:
        """Find a root in ``[a, b]`` by Newton steps with bisection fallback."""
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        fa, _ = self._bracket(a, b)
        derivative = self.derivative(1)
        x = initial_guess
        for _ in range(max_iterations):
            fx = self.evaluate(x)
            dfx = derivative.evaluate(x)
            if abs(dfx) > _DBL_EPSILON:
                x_next = x - fx / dfx
                if x_next < a or x_next > b:
                    x_next = (a + b) / 2.0
            else:
                x_next = (a + b) / 2.0
            f_next = self.evaluate(x_next)
            if abs(f_next) < tolerance or abs(x_next - x) < tolerance:
                return x_next
            if fa * f_next < 0.0:
                b = x_next
            else:
                a, fa = x_next, f_next
            x = x_next
        return x

    def hybrid_secant_solve(
        self,
        x0: float,
        x1: float,
        max_iterations: int = 100,
        tolerance: float = 1e-12,
    ) -> float:
        """Find a root by the secant method from ``x0`` and ``x1``.

        If the starting points bracket a root, steps that leave the
        bracket fall back to the midpoint.
        """
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        f0 = self.evaluate(x0)
        f1 = self.evaluate(x1)
        has_bracket = f0 * f1 < 0
        for _ in range(max_iterations):
            denominator = f1 - f0
            if abs(denominator) > _DBL_EPSILON:
                x2 = x1 - f1 * (x1 - x0) / denominator
            elif has_bracket:
                x2 = (x0 + x1) / 2.0
            else:
                raise ValueError("secant step is unstable and no bracket is known")
            if has_bracket and not min(x0, x1) <= x2 <= max(x0, x1):
                x2 = (x0 + x1) / 2.0
            f2 = self.evaluate(x2)
            if abs(f2) < tolerance or abs(x2 - x1) < tolerance:
                return x2
            x0, f0 = x1, f1
            x1, f1 = x2, f2
        return x1

    def durand_kerner(
        self, max_iterations: int = 1000, tolerance: float = 1e-12
    ) -> list[complex]:
        """Return all complex roots by the Durand-Kerner iteration.

        Raises ArithmeticError if two estimates collide or the iteration
        does not converge.
        """
        n = self.degree
        if n == 0:
            raise ValueError("a constant polynomial has no roots to find")
        current = [cmath.exp(2j * math.pi * i / n) for i in range(n)]
        converged = False
        for _ in range(max_iterations):
            converged = True
            for i, xi in enumerate(current):
                fx = self.evaluate(xi)
                denom = 1.0 + 0j
                for j, xj in enumerate(current):
                    if j != i:
                        denom *= xi - xj
                if abs(denom) < _DENOM_EPSILON:
                    raise ArithmeticError("root estimates collided")
                nxt = xi - fx / denom
                if abs(nxt - xi) > tolerance:
                    converged = False
                current[i] = nxt
            if converged:
                break
        if not converged:
            raise ArithmeticError(
                f"Durand-Kerner did not converge in {max_iterations} iterations"
            )
        return current

    def deflate(self, root: float) -> Polynomial:
        """Divide by ``(x - root)`` synthetically and return the quotient.

        Warns if the remainder shows that ``root`` is not accurate.
        """
        if self.degree == 0:
            raise ValueError("cannot deflate a constant polynomial")
        coeffs = self._coefficients
        quotient = [coeffs[-1]]
        for c in reversed(coeffs[1:-1]):
            quotient.append(c + root * quotient[-1])
        quotient.reverse()
        remainder = coeffs[0] + root * quotient[0]
        if abs(remainder) > _DEFLATE_WARN_EPSILON:
            warnings.warn(
                f"root {root:.10f} is not accurate (remainder = {remainder:.10f})",
                RuntimeWarning,
                stacklevel=2,
            )
        return Polynomial(quotient)

    def format(self, decimal_places: int) -> str:
        """Return ``xpow0=c0, xpow1=c1, ...`` with fixed decimals."""
        return ", ".join(
            f"xpow{i}={c:.{decimal_places}f}"
            for i, c in enumerate(self._coefficients)
        )