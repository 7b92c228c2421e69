# perspective3d/utils/vectors.py
"""
Álgebra vetorial mínima em 3D.

Usada para deslocamentos (ex.: direção da vista) e não para simulação física.
"""
import math
from typing import Iterable


class Vector3D:
    """Vetor 3D imutável (deslocamentos em x, y e z)."""

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x: float = float(x)
        self.y: float = float(y)
        self.z: float = float(z)

    @classmethod
    def between(cls, start, end) -> "Vector3D":
        """Deslocamento que leva 'start' até 'end' (objetos com x, y, z)."""
        return cls(end.x - start.x, end.y - start.y, end.z - start.z)

    @classmethod
    def sum(cls, vectors: Iterable["Vector3D"]) -> "Vector3D":
        """Soma qualquer número de vetores (vetor nulo se vazio)."""
        total = cls()
        for vector in vectors:
            total = total.add(vector)
        return total

    def add(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> "Vector3D":
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def __repr__(self) -> str:
        return f"Vector3D(x={self.x:.3f}, y={self.y:.3f}, z={self.z:.3f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        epsilon = 1e-9
        return (
            abs(self.x - other.x) < epsilon
            and abs(self.y - other.y) < epsilon
            and abs(self.z - other.z) < epsilon
        )
