# zephyrgebra

A small linear algebra toolkit in plain Python with no dependencies outside the
standard library. It is a library only: it has no command-line program.

## Modules

### `zephyrgebra.vector`

- `Vector(data)`: a mutable, fixed-length vector of floats. It supports `len()`,
  iteration, indexing (a slice gives a new `Vector`), `+` and `-` between vectors
  of the same size, and multiplication by a real scalar on either side.
- Constructors: `Vector.zeros(size)`, `Vector.filled(size, value)`.
- Methods: `copy`, `resized(size, fill_value=0.0, last_element_only=False)`,
  `fill` (in place), `normalize` (in place), `add_scalar` (`scalar + v`),
  `subtract_from_scalar` (`scalar - v`), `magnitude`, `unit`, `dot`, `angle`
  (radians), `angle_degrees`, `projection_onto`, `equals(other, epsilon)` and
  `format(decimal_places)`, which returns text such as `[3.00, 4.00]`.
- `is_right_angle_triangle(a, b, c)`: whether the triangle with those vertices
  has a right angle (a dot product of two sides below `1e-6`).

### `zephyrgebra.matrix`

- `Matrix(rows, cols, data=None)`: a dense, row-major matrix of floats, zero-filled
  when `data` is omitted.
- Constructors: `Matrix.identity(size)`, `Matrix.from_array(data, rows, cols)`,
  `Matrix.from_array_stride(data, rows, cols, stride)`, `Matrix.from_vector(vector)`
  (a column matrix).
- Element access with `get(row, col)`, `set(row, col, value)` or `m[row, col]`;
  out-of-range indices raise `IndexError`.
- Arithmetic: `+`, `-`, scaling by a real number, and matrix multiplication with `@`.
- `shape`, `copy`, `transpose`, `to_vector` (row or column matrices only),
  `multiply_column_vector(vector)` (`m @ v`), `multiply_row_vector(vector)` (`v @ m`),
  `row(i)`, `column(j)`, `slice(row_start, row_end, col_start, col_end)` with
  inclusive bounds, `rows()` as lists of floats, and `format(decimal_places)`,
  one `[ a, b ]` line per row.

### `zephyrgebra.linalg`

- `minor_matrix`, `determinant` (cofactor expansion), `cofactor_matrix`,
  `adjoint_matrix`, `inverse` (adjoint over determinant; raises `ValueError` when
  the determinant is below `1e-10`).
- `solve_linear_system(coefficients, solution)`: Gaussian elimination with partial
  pivoting; `solution` is a column matrix. A variable whose pivot vanishes is
  given the value 1.
- `power_iteration(matrix, max_iter=1000, tol=1e-9)`: returns
  `(eigenvalue, eigenvector)` for the dominant eigenvalue.
- `householder_qr(matrix)`: returns `(Q, R)`.
- `qr_eigenvalues(matrix)`: runs 1000 QR iterations and returns the diagonal.
- `svd_null_space(matrix)`: a matrix whose columns span the null space
  (requires at least as many rows as columns).
- `eigenvectors_from_eigenvalues(matrix, eigenvalues)` and `eigen_solve(matrix)`,
  which returns an `EigenResult` with `values` (a `Vector`) and `vectors`
  (a `Matrix` holding one unit eigenvector per column).

### `zephyrgebra.polynomial`

- `Polynomial(coefficients)`: an immutable polynomial, coefficients from the
  constant term upwards; trailing coefficients below `1e-12` are dropped.
  `Polynomial.from_roots(roots)` builds the monic polynomial with those roots.
- `coefficients`, `degree`, `len()`, `==`, `+`, `-`, and `*` (computed with an FFT).
- Calling a polynomial or `evaluate(x)` evaluates it by Horner's method, for real
  or complex `x`. `derivative(nth=1)` and `copy()`.
- Root finders:
  - `hybrid_solve(a, b, max_iterations=100, tolerance=1e-12)`: secant steps
    inside a bracket, falling back to bisection.
  - `hybrid_newton_solve(a, b, initial_guess, max_iterations=100, tolerance=1e-12)`:
    Newton steps inside a bracket, falling back to bisection.
  - `hybrid_secant_solve(x0, x1, max_iterations=100, tolerance=1e-12)`: the secant
    method, kept to the starting interval when it brackets a root.
  - `durand_kerner(max_iterations=1000, tolerance=1e-12)`: all complex roots;
    raises `ArithmeticError` when estimates collide or it does not converge.
  The bracketed solvers raise `ValueError` when `f(a)` and `f(b)` share a sign.
- `deflate(root)`: synthetic division by `(x - root)`; issues a `RuntimeWarning`
  when the remainder exceeds `1e-6`.
- `format(decimal_places)`: text such as `xpow0=2.00, xpow1=-3.00, xpow2=1.00`.
- `fft(values, invert=False)` for power-of-two lengths, and `next_power_of_two(n)`.

### `zephyrgebra.transforms`

- `RotationAxis` (`X`, `Y`, `Z`).
- `rotation_matrix_2d(vector, theta)`: the rotated 2D vector, as a 2×1 column matrix.
- `rotate_about_axis(vector, axis, theta)`: the rotated 3D vector, as a 3×1 column matrix.
- `translate_2d(point, translation)` and `translate_3d(point, translation)`: the
  translated point in homogeneous form (`[x, y, 1]` and `[x, y, z, 1]`).
- `rotation_matrix_3d_xyz(theta_x, theta_y, theta_z)`: `Rz @ Ry @ Rx`.
- `rotate_3d_per_axis(vector, theta, axis)`, `rotate_3d(vector, theta_x, theta_y, theta_z)`.
- `transform_3d(vector, theta_x, theta_y, theta_z, translation)` (rotate then
  translate) and `inverse_transformation_3d(...)` (its inverse).
- `transform_3d_with_matrix(vector, transform)` for any 4×4 homogeneous matrix.
- `compose_transformations(r_ab, p_ab, r_bc, p_bc)` and
  `rigid_transform_about_axis(axis_point, axis_dir, theta)`, both returning 4×4
  homogeneous matrices.

Inputs that do not fit (mismatched sizes, non-square or singular matrices, zero
vectors where a direction is needed) raise `ValueError`; bad indices raise
`IndexError`. Nothing is signalled by returning `None` or NaN.

## Installation

```
pip install .
```

## Example

```python
from zephyrgebra.vector import Vector
from zephyrgebra.matrix import Matrix
from zephyrgebra.linalg import determinant, inverse, solve_linear_system
from zephyrgebra.polynomial import Polynomial
from zephyrgebra.transforms import RotationAxis, rotate_3d_per_axis

v = Vector([3.0, 4.0])
print(v.magnitude())            # 5.0
print(v.format(2))              # [3.00, 4.00]

a = Matrix.from_array([2.0, 1.0, 1.0, 3.0], 2, 2)
print(determinant(a))           # 5.0
print(inverse(a).format(3))

b = Matrix.from_array([3.0, 5.0], 2, 1)
x = solve_linear_system(a, b)   # about [0.8, 1.4], solving a @ x = b

p = Polynomial.from_roots([1.0, 2.0])   # x^2 - 3x + 2
print(p(3.0))                   # 2.0
print(p.hybrid_solve(0.0, 1.5))         # close to 1.0

q = rotate_3d_per_axis(Vector([1.0, 0.0, 0.0]), 1.5707963267948966, RotationAxis.Z)
```

Results are returned rather than printed; use the `format` methods to get text.

## Running the tests

```
pip install ".[test]"
pytest
```