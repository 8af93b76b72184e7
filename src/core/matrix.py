# core/matrix.py
import math
from typing import Optional

import numpy as np

from core.utils import EPSILON
from core.vector import Point, Tuple, Vector


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


class Matrix:
    """
    A square 2x2, 3x3 or 4x4 matrix backed by a numpy array.

    Matrices are treated as values: no method mutates the receiver. The
    transform builders (translation, scaling, ...) return a new matrix with
    the elementary transform left-multiplied onto the receiver, so

        Matrix.identity().rotation_x(a).translation(x, y, z)

    first rotates and then translates whatever point it is applied to.
    """
    def __init__(self, rows):
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or data.shape[0] not in (2, 3, 4):
            raise ValueError(f"Matrix must be square with size 2, 3 or 4, got shape {data.shape}")
        self._data = data
        self._inverse: Optional["Matrix"] = None

    @classmethod
    def identity(cls, size: int = 4) -> "Matrix":
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, key) -> float:
        return float(self._data[key])

    def tolist(self) -> list:
        return self._data.tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.size != other.size:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self.size != other.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError("Only 4x4 matrices can transform tuples")
            x, y, z, w = self._data.dot((other.x, other.y, other.z, other.w)).tolist()
            # Affine transforms keep points as points and vectors as vectors.
            if isinstance(other, Point):
                return Point(x, y, z)
            if isinstance(other, Vector):
                return Vector(x, y, z)
            return Tuple(x, y, z, w)
        return NotImplemented

    def transpose(self) -> "Matrix":
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> "Matrix":
        """Returns a copy with the given row and column removed."""
        if self.size == 2:
            raise ValueError("A 2x2 matrix has no submatrix")
        return Matrix(np.delete(np.delete(self._data, row, axis=0), col, axis=1))

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        if self.size == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        # Laplace expansion along the first row
        return sum(float(self._data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> "Matrix":
        """
        Inverts the matrix with the cofactor (adjugate) method.

        Raises:
            SingularMatrixError: if the determinant is zero.
        """
        if self._inverse is None:
            det = self.determinant()
            if det == 0.0:
                raise SingularMatrixError(f"Matrix is not invertible:\n{self!r}")
            n = self.size
            cofactors = np.empty((n, n), dtype=np.float64)
            for row in range(n):
                for col in range(n):
                    cofactors[row, col] = self.cofactor(row, col)
            self._inverse = Matrix(cofactors.T / det)
        return self._inverse

    # ------------------------------------------------------------------
    # Transform builders

    def _then(self, elementary) -> "Matrix":
        if self.size != 4:
            raise ValueError("Transforms are only defined for 4x4 matrices")
        return Matrix(np.array(elementary, dtype=np.float64) @ self._data)

    def translation(self, x: float, y: float, z: float) -> "Matrix":
        return self._then([
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ])

    def scaling(self, x: float, y: float, z: float) -> "Matrix":
        return self._then([
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    def shearing(self, xy: float, xz: float, yx: float, yz: float,
                 zx: float, zy: float) -> "Matrix":
        return self._then([
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    def rotation_x(self, r: float) -> "Matrix":
        c, s = math.cos(r), math.sin(r)
        return self._then([
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    def rotation_y(self, r: float) -> "Matrix":
        c, s = math.cos(r), math.sin(r)
        return self._then([
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    def rotation_z(self, r: float) -> "Matrix":
        c, s = math.cos(r), math.sin(r)
        return self._then([
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    def __repr__(self) -> str:
        rows = ",\n        ".join(str(row) for row in self.tolist())
        return f"Matrix([{rows}])"


IDENTITY = Matrix.identity(4)
