"""Row-major 3x3 matrices used for rotations and inertia tensors."""

from __future__ import annotations

from typing import Iterable

from rigidsim.quaternion import Quaternion
from rigidsim.vector3d import Vector3d


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix with zero determinant is inverted."""


class Matrix33:
    """A 3x3 matrix stored row by row; the default is all zeros."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self._values = [0.0] * 9
            return
        vals = [float(v) for v in values]
        if len(vals) != 9:
            raise ValueError(f"Matrix33 needs 9 values, got {len(vals)}")
        self._values = vals

    @classmethod
    def from_orientation(cls, quaternion: Quaternion) -> Matrix33:
        """Rotation matrix of a quaternion."""
        matrix = cls()
        matrix.set_orientation(quaternion)
        return matrix

    def __mul__(self, other: Matrix33 | Vector3d) -> Matrix33 | Vector3d:
        m = self._values
        if isinstance(other, Matrix33):
            o = other._values
            return Matrix33(
                sum(m[3 * i + k] * o[3 * k + j] for k in range(3))
                for i in range(3)
                for j in range(3)
            )
        if isinstance(other, Vector3d):
            return Vector3d(
                m[0] * other.x + m[1] * other.y + m[2] * other.z,
                m[3] * other.x + m[4] * other.y + m[5] * other.z,
                m[6] * other.x + m[7] * other.y + m[8] * other.z,
            )
        return NotImplemented

    def __getitem__(self, index: int | tuple[int, int]) -> float:
        """Element at ``(row, column)`` or at a flat row-major position."""
        if isinstance(index, tuple):
            i, j = index
            if not (0 <= i < 3 and 0 <= j < 3):
                raise IndexError(f"Matrix33 index out of range: {index}")
            return self._values[3 * i + j]
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix33):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        rows = (
            "".join(f"{v:g} " for v in self._values[3 * i : 3 * i + 3]) + "\n"
            for i in range(3)
        )
        return "Matrix33: \n" + "".join(rows)

    def __repr__(self) -> str:
        return f"Matrix33({self._values!r})"

    def determinant(self) -> float:
        m = self._values
        return (
            m[0] * (m[4] * m[8] - m[7] * m[5])
            - m[1] * (m[3] * m[8] - m[6] * m[5])
            + m[2] * (m[3] * m[7] - m[6] * m[4])
        )

    def inverse(self) -> Matrix33:
        """Cofactor matrix divided by the determinant.

        This is the inverse for symmetric matrices; in general it is the
        transpose of the inverse. Raises SingularMatrixError when the
        determinant is zero.
        """
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError("not reversible")
        m = self._values
        return Matrix33(
            [
                (m[4] * m[8] - m[7] * m[5]) / det,
                -(m[3] * m[8] - m[6] * m[5]) / det,
                (m[3] * m[7] - m[6] * m[4]) / det,
                -(m[1] * m[8] - m[7] * m[2]) / det,
                (m[0] * m[8] - m[6] * m[2]) / det,
                -(m[0] * m[7] - m[6] * m[1]) / det,
                (m[1] * m[5] - m[4] * m[2]) / det,
                -(m[0] * m[5] - m[3] * m[2]) / det,
                (m[0] * m[4] - m[3] * m[1]) / det,
            ]
        )

    def transpose(self) -> Matrix33:
        m = self._values
        return Matrix33(m[3 * j + i] for i in range(3) for j in range(3))

    def invert_in_place(self) -> None:
        self._values = self.inverse()._values

    def transpose_in_place(self) -> None:
        self._values = self.transpose()._values

    def set_orientation(self, quaternion: Quaternion) -> None:
        """Overwrite with the rotation matrix of ``quaternion``."""
        w, x, y, z = quaternion[0], quaternion[1], quaternion[2], quaternion[3]
        self._values = [
            1 - (2 * y * y + 2 * z * z),
            2 * x * y - 2 * z * w,
            2 * x * z + 2 * y * w,
            2 * x * y + 2 * z * w,
            1 - (2 * x * x + 2 * z * z),
            2 * y * z - 2 * x * w,
            2 * x * z - 2 * y * w,
            2 * y * z + 2 * x * w,
            1 - (2 * x * x + 2 * y * y),
        ]