"""Determinants, inverses, linear systems and eigen-decomposition."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .matrix import Matrix
from .vector import Vector

__all__ = [
    "EigenResult",
    "minor_matrix",
    "determinant",
    "cofactor_matrix",
    "adjoint_matrix",
    "inverse",
    "solve_linear_system",
    "power_iteration",
    "householder_qr",
    "qr_eigenvalues",
    "svd_null_space",
    "eigenvectors_from_eigenvalues",
    "eigen_solve",
]

MAX_ITER = 1000
TOL = 1e-9
SVD_EPSILON = 1e-9
_PIVOT_EPSILON = 1e-12
_SINGULAR_EPSILON = 1e-10


@dataclass(frozen=True)
class EigenResult:
    """Eigenvalues and the matching unit eigenvectors stored as columns."""

    values: Vector
    vectors: Matrix


def _require_square(matrix: Matrix, what: str) -> int:
    rows, cols = matrix.shape
    if rows != cols:
        raise ValueError(f"{what} requires a square matrix, got shape {matrix.shape}")
    return rows


def _normalize_if_possible(vector: Vector) -> None:
    try:
        vector.normalize()
    except ValueError:
        pass


def _from_columns(rows: int, columns: list[list[float]]) -> Matrix:
    flat = [x for column in columns for x in column]
    return Matrix(len(columns), rows, flat).transpose()


def minor_matrix(matrix: Matrix, skip_row: int, skip_col: int) -> Matrix:
    """Return ``matrix`` without row ``skip_row`` and column ``skip_col``."""
    n = _require_square(matrix, "minor")
    if not (0 <= skip_row < n and 0 <= skip_col < n):
        raise IndexError(f"skip index ({skip_row}, {skip_col}) out of range")
    values = [
        x
        for i, row in enumerate(matrix.rows())
        if i != skip_row
        for j, x in enumerate(row)
        if j != skip_col
    ]
    return Matrix(n - 1, n - 1, values)


def determinant(matrix: Matrix) -> float:
    """Return the determinant by cofactor expansion along the first row."""
    n = _require_square(matrix, "determinant")
    if n == 1:
        return matrix.get(0, 0)
    if n == 2:
        (a, b), (c, d) = matrix.rows()
        return a * d - b * c
    det = 0.0
    for col, value in enumerate(matrix.rows()[0] if n else []):
        sign = 1.0 if col % 2 == 0 else -1.0
        det += sign * value * determinant(minor_matrix(matrix, 0, col))
    return det


def cofactor_matrix(matrix: Matrix) -> Matrix:
    """Return the matrix of signed minors."""
    n = _require_square(matrix, "cofactor matrix")
    values = [
        (1.0 if (i + j) % 2 == 0 else -1.0) * determinant(minor_matrix(matrix, i, j))
        for i in range(n)
        for j in range(n)
    ]
    return Matrix(n, n, values)


def adjoint_matrix(matrix: Matrix) -> Matrix:
    """Return the transpose of the cofactor matrix."""
    _require_square(matrix, "adjoint matrix")
    return cofactor_matrix(matrix).transpose()


def inverse(matrix: Matrix) -> Matrix:
    """Return the inverse as adjoint / determinant.

    Raises ValueError if the matrix is not square or is singular.
    """
    _require_square(matrix, "inverse")
    det = determinant(matrix)
    if math.isnan(det) or abs(det) < _SINGULAR_EPSILON:
        raise ValueError("matrix is singular")
    return (1.0 / det) * adjoint_matrix(matrix)


def solve_linear_system(coefficients: Matrix, solution: Matrix) -> Vector:
    """Solve ``coefficients @ x = solution`` by Gaussian elimination.

    Uses partial pivoting; a variable whose pivot vanishes is taken as 1.
    """
    n, m = coefficients.shape
    if solution.shape != (n, 1):
        raise ValueError(
            f"right-hand side must have shape ({n}, 1), got {solution.shape}"
        )
    aug = [row + [b] for row, (b,) in zip(coefficients.rows(), solution.rows())]

    for k in range(min(n, m)):
        pivot_row = max(range(k, n), key=lambda i: abs(aug[i][k]))
        if abs(aug[pivot_row][k]) < _PIVOT_EPSILON:
            continue
        if pivot_row != k:
            aug[k], aug[pivot_row] = aug[pivot_row], aug[k]
        pivot = aug[k]
        for row in aug[k + 1:]:
            factor = row[k] / pivot[k]
            row[k:] = [a - factor * p for a, p in zip(row[k:], pivot[k:])]

    x = [0.0] * m
    for i in reversed(range(m)):
        if i >= n:
            x[i] = 1.0
            continue
        row = aug[i]
        total = row[m]
        for a, xj in zip(row[i + 1:m], x[i + 1:]):
            total -= a * xj
        coeff = row[i]
        x[i] = 1.0 if abs(coeff) < _PIVOT_EPSILON else total / coeff
    return Vector(x)


def power_iteration(
    matrix: Matrix, max_iter: int = MAX_ITER, tol: float = TOL
) -> tuple[float, Vector]:
    """Return the dominant eigenvalue and its unit eigenvector."""
    n = _require_square(matrix, "power iteration")
    b = Vector.filled(n, 1.0)
    b.normalize()
    for _ in range(max_iter):
        b_new = matrix.multiply_column_vector(b).to_vector()
        try:
            b_new.normalize()
        except ValueError as exc:
            raise ValueError("power iteration collapsed to the zero vector") from exc
        diff_norm = (b_new - b).magnitude()
        b = b_new
        if diff_norm < tol:
            break
    eigenvalue = b.dot(matrix.multiply_column_vector(b).to_vector())
    return eigenvalue, b


def householder_qr(matrix: Matrix) -> tuple[Matrix, Matrix]:
    """Return ``(Q, R)`` with ``Q @ R == matrix`` via Householder reflections."""
    n = _require_square(matrix, "QR decomposition")
    identity = Matrix.identity(n)
    q = Matrix.identity(n)
    r = matrix.copy()
    for k in range(n - 1):
        column = list(r.column(k).to_vector())
        norm_x = math.sqrt(sum(x * x for x in column[k:]))
        sign = 1.0 if column[k] >= 0 else -1.0
        v = Vector([0.0] * k + [column[k] + sign * norm_x] + column[k + 1:])
        _normalize_if_possible(v)
        v_mat = Matrix.from_vector(v)
        p = identity - 2.0 * (v_mat @ v_mat.transpose())
        r = p @ r
        q = q @ p.transpose()
    return q, r


def qr_eigenvalues(matrix: Matrix) -> Vector:
    """Return the eigenvalue estimates left on the diagonal by QR iteration."""
    n = _require_square(matrix, "QR algorithm")
    a = matrix.copy()
    for _ in range(MAX_ITER):
        q, r = householder_qr(a)
        a = r @ q
    return Vector(a.get(i, i) for i in range(n))


def svd_null_space(matrix: Matrix) -> Matrix:
    """Return a matrix whose columns span the null space of ``matrix``.

    Requires at least as many rows as columns.
    """
    rows, cols = matrix.shape
    if rows < cols:
        raise ValueError("null space requires rows >= columns")
    ata = matrix.transpose() @ matrix
    squared = list(qr_eigenvalues(ata))
    sigma = [math.sqrt(max(0.0, s)) for s in squared]
    order = sorted(range(cols), key=sigma.__getitem__)

    basis: list[list[float]] = []
    for index in order:
        if sigma[index] > SVD_EPSILON:
            continue
        shifted = ata - squared[index] * Matrix.identity(cols)
        v = solve_linear_system(shifted, Matrix(cols, 1))
        _normalize_if_possible(v)
        basis.append(list(v))
    return _from_columns(cols, basis)


def eigenvectors_from_eigenvalues(matrix: Matrix, eigenvalues: Vector) -> Matrix:
    """Return unit eigenvectors, one column per eigenvalue."""
    n = _require_square(matrix, "eigenvectors")
    if len(eigenvalues) != n:
        raise ValueError("need exactly one eigenvalue per row")
    columns: list[list[float]] = []
    for lam in eigenvalues:
        shifted = matrix - lam * Matrix.identity(n)
        try:
            x = solve_linear_system(shifted, Matrix(n, 1))
        except ValueError:
            null_space = svd_null_space(shifted)
            if null_space.shape[1] == 0:
                raise ValueError(f"no eigenvector found for eigenvalue {lam}") from None
            x = null_space.column(0).to_vector()
        _normalize_if_possible(x)
        columns.append(list(x))
    return _from_columns(n, columns)


def eigen_solve(matrix: Matrix) -> EigenResult:
    """Return the eigenvalues and eigenvectors of a square matrix."""
    _require_square(matrix, "eigen decomposition")
    values = qr_eigenvalues(matrix)
    vectors = eigenvectors_from_eigenvalues(matrix, values)
    return EigenResult(values, vectors)