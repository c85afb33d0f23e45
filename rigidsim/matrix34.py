"""Row-major 3x4 affine transform matrices (rotation block plus translation)."""

from __future__ import annotations

from typing import Iterable

from rigidsim.matrix33 import Matrix33
from rigidsim.matrix44 import Matrix44
from rigidsim.quaternion import Quaternion
from rigidsim.vector3d import Vector3d


class Matrix34:
    """A 3x4 matrix stored row by row; the default is all zeros.

    The left 3x3 block is the rotation, the last column the translation.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self._values = [0.0] * 12
            return
        vals = [float(v) for v in values]
        if len(vals) != 12:
            raise ValueError(f"Matrix34 needs 12 values, got {len(vals)}")
        self._values = vals

    @classmethod
    def from_rotation_translation(cls, rotation: Matrix33, translation: Vector3d) -> Matrix34:
        """Build a transform from a rotation block and a translation vector."""
        matrix = cls()
        matrix.set_from_rotation_translation(rotation, translation)
        return matrix

    @classmethod
    def from_matrix44(cls, matrix: Matrix44) -> Matrix34:
        """Keep the top three rows of an affine 4x4 matrix."""
        return cls(matrix[k] for k in range(12))

    def extract_matrix33(self) -> Matrix33:
        """The upper-left 3x3 block, i.e. the rotation part."""
        return Matrix33(self._values[4 * i + j] for i in range(3) for j in range(3))

    def set_from_rotation_translation(self, rotation: Matrix33, translation: Vector3d) -> None:
        """Overwrite with the given rotation block and translation."""
        self._values = [
            value
            for i, t in enumerate(translation)
            for value in (rotation[i, 0], rotation[i, 1], rotation[i, 2], t)
        ]

    def __mul__(self, other: Matrix34) -> Matrix34:
        """Compose two transforms through their affine 4x4 forms."""
        if not isinstance(other, Matrix34):
            return NotImplemented
        return Matrix34.from_matrix44(self.to_matrix44() * other.to_matrix44())

    def __getitem__(self, index: int | tuple[int, int]) -> float:
        """Element at ``(row, column)`` or at a flat row-major position."""
        if isinstance(index, tuple):
            i, j = index
            if not (0 <= i < 3 and 0 <= j < 4):
                raise IndexError(f"Matrix34 index out of range: {index}")
            return self._values[4 * i + j]
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix34):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix34({self._values!r})"

    @property
    def translation(self) -> Vector3d:
        """The translation column."""
        return Vector3d(self._values[3], self._values[7], self._values[11])

    def inverse(self) -> Matrix34:
        """Inverse transform built from the inverted rotation block.

        Raises SingularMatrixError when the rotation block is singular.
        """
        rotation_inv = self.extract_matrix33().inverse()
        translation_inv = rotation_inv * (self.translation * -1)
        return Matrix34.from_rotation_translation(rotation_inv, translation_inv)

    def invert_in_place(self) -> None:
        self._values = self.inverse()._values

    def to_matrix44(self) -> Matrix44:
        """Affine 4x4 form with a final row of (0, 0, 0, 1)."""
        return Matrix44([*self._values, 0.0, 0.0, 0.0, 1.0])

    def set_orientation_and_position(self, quaternion: Quaternion, translation: Vector3d) -> None:
        """Overwrite with the rotation of ``quaternion`` and the given translation."""
        self.set_from_rotation_translation(Matrix33.from_orientation(quaternion), translation)

    def transform_position(self, vec: Vector3d) -> Vector3d:
        """Apply rotation and translation to a point."""
        return self.extract_matrix33() * vec + self.translation

    def transform_direction(self, vec: Vector3d) -> Vector3d:
        """Apply only the rotation to a direction."""
        return self.extract_matrix33() * vec

    def to_column_major(self) -> list[float]:
        """The affine 4x4 form flattened column by column, as renderers expect."""
        return [self.to_matrix44()[i, j] for j in range(4) for i in range(4)]