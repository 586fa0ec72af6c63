"""Vectors, matrices, linear algebra, polynomials and geometric transforms in plain Python."""

__version__ = "0.1.0"

__all__ = ["vector", "matrix", "linalg", "polynomial", "transforms"]