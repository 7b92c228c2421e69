# perspective3d/models/point3d.py
from typing import Tuple

import numpy as np


class Point3D:
    """
    Representa um ponto geométrico 3D.

    Toda transformação devolve um novo ponto; o ponto original não muda.
    Coordenadas NaN/inf propagam sem erro.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        """
        Inicializa um Point3D com coordenadas.

        Args:
            x: Coordenada x do ponto.
            y: Coordenada y do ponto.
            z: Coordenada z do ponto.
        """
        self.x: float = float(x)
        self.y: float = float(y)
        self.z: float = float(z)

    def get_coords(self) -> Tuple[float, float, float]:
        """Retorna as coordenadas (x, y, z) do ponto."""
        return (self.x, self.y, self.z)

    def translate(self, dx: float, dy: float, dz: float) -> "Point3D":
        return Point3D(self.x + dx, self.y + dy, self.z + dz)

    def rot_about_x(self, angle: float) -> "Point3D":
        """Rotação em torno do eixo x (radianos)."""
        c, s = np.cos(angle), np.sin(angle)
        return Point3D(self.x, self.y * c - self.z * s, self.y * s + self.z * c)

    def rot_about_y(self, angle: float) -> "Point3D":
        """
        Transformação "em torno do eixo y" (radianos).

        x' = -x*sen + z*cos, z' = x*cos + z*sen; mesma convenção de
        transformations_3d.create_rotation_matrix_3d_y.
        """
        c, s = np.cos(angle), np.sin(angle)
        return Point3D(self.z * c - self.x * s, self.y, self.z * s + self.x * c)

    def rot_about_z(self, angle: float) -> "Point3D":
        """Rotação em torno do eixo z (radianos)."""
        c, s = np.cos(angle), np.sin(angle)
        return Point3D(self.x * c - self.y * s, self.x * s + self.y * c, self.z)

    def __repr__(self) -> str:
        return f"Point3D(x={self.x:.3f}, y={self.y:.3f}, z={self.z:.3f})"

    def __eq__(self, other: object) -> bool:
        """Verifica se dois Point3D são iguais (baseado nas coordenadas)."""
        if not isinstance(other, Point3D):
            return NotImplemented
        # Compara com uma pequena tolerância para pontos flutuantes
        epsilon = 1e-9
        return (
            abs(self.x - other.x) < epsilon
            and abs(self.y - other.y) < epsilon
            and abs(self.z - other.z) < epsilon
        )
