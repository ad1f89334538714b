"""Homogeneous 4x4 transformation matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


class HMatrix:
    """A 4x4 homogeneous matrix, zero until one of the ``set_*`` methods is used."""

    def __init__(self) -> None:
        self.matrix: list[list[float]] = [[0.0] * 4 for _ in range(4)]

    def set_position(self, x: float, y: float, z: float) -> None:
        """Make this a translation by ``(x, y, z)``."""
        self.matrix = [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]

    def set_rot_x(self, x: float) -> None:
        """Make this a rotation of ``x`` radians about the X axis."""
        c, s = math.cos(x), math.sin(x)
        self.matrix = [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]

    def set_rot_y(self, y: float) -> None:
        """Make this a rotation of ``y`` radians about the Y axis."""
        c, s = math.cos(y), math.sin(y)
        self.matrix = [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]

    def set_rot_z(self, z: float) -> None:
        """Make this a rotation of ``z`` radians about the Z axis."""
        c, s = math.cos(z), math.sin(z)
        self.matrix = [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]

    def __matmul__(self, other: HMatrix) -> HMatrix:
        result = HMatrix()
        columns = list(zip(*other.matrix))
        result.matrix = [
            [sum(a * b for a, b in zip(row, col)) for col in columns]
            for row in self.matrix
        ]
        return result

    def transform(self, point: tuple[float, float, float]) -> tuple[float, float, float]:
        """Apply this matrix to a point in homogeneous coordinates."""
        vec = (*point, 1.0)
        x, y, z, _ = (sum(a * b for a, b in zip(row, vec)) for row in self.matrix)
        return (x, y, z)

    def __repr__(self) -> str:
        return f"HMatrix({self.matrix!r})"


@dataclass
class Position:
    """A point in space together with its translation matrix."""

    x: float
    y: float
    z: float
    mat: HMatrix = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.mat = HMatrix()
        self.mat.set_position(self.x, self.y, self.z)


@dataclass
class Rotation:
    """Rotation angles about X, Y and Z; ``mat`` applies X, then Y, then Z."""

    rox: float
    roy: float
    roz: float
    mat: HMatrix = field(init=False, repr=False)

    def __post_init__(self) -> None:
        rx, ry, rz = HMatrix(), HMatrix(), HMatrix()
        rx.set_rot_x(self.rox)
        ry.set_rot_y(self.roy)
        rz.set_rot_z(self.roz)
        self.mat = rz @ ry @ rx