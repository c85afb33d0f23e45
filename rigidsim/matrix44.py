"""Row-major 4x4 matrices for affine transform composition."""

from __future__ import annotations

from typing import Iterable


class Matrix44:
    """A 4x4 matrix stored row by row; the default is all zeros."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self._values = [0.0] * 16
            return
        vals = [float(v) for v in values]
        if len(vals) != 16:
            raise ValueError(f"Matrix44 needs 16 values, got {len(vals)}")
        self._values = vals

    def __getitem__(self, index: int | tuple[int, int]) -> float:
        """Element at ``(row, column)`` or at a flat row-major position."""
        if isinstance(index, tuple):
            i, j = index
            if not (0 <= i < 4 and 0 <= j < 4):
                raise IndexError(f"Matrix44 index out of range: {index}")
            return self._values[4 * i + j]
        return self._values[index]

    def __mul__(self, other: Matrix44) -> Matrix44:
        if not isinstance(other, Matrix44):
            return NotImplemented
        m, o = self._values, other._values
        return Matrix44(
            sum(m[4 * i + k] * o[4 * k + j] for k in range(4))
            for i in range(4)
            for j in range(4)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix44):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix44({self._values!r})"