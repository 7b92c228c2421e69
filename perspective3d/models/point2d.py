# perspective3d/models/point2d.py
from typing import Tuple


class Point2D:
    """Ponto na tela (coordenadas x, y em pixels, podendo ser fracionárias)."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x: float = float(x)
        self.y: float = float(y)

    @classmethod
    def from_qpoint(cls, point) -> "Point2D":
        """Cria um Point2D a partir de um QPoint ou QPointF."""
        return cls(point.x(), point.y())

    def get_coords(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Point2D(x={self.x:.3f}, y={self.y:.3f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        epsilon = 1e-9
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon
