# perspective3d/models/polyhedron_projection.py
from typing import Iterable, List, Optional

from PyQt5.QtGui import QPainter

from .point2d import Point2D
from .polygon_projection import PolygonProjection


class PolyhedronProjection:
    """
    Conjunto ordenado de projeções de polígonos (uma por face do poliedro).

    A ordem armazenada é a das faces; a ordem de desenho é recalculada pela
    prioridade a cada 'draw' (algoritmo do pintor).
    """

    def __init__(self, projections: Iterable[PolygonProjection] = ()):
        """
        Args:
            projections: Projeções das faces, na ordem do poliedro de origem.

        Raises:
            TypeError: Se algum item não for PolygonProjection.
        """
        projections = list(projections)
        if not all(isinstance(p, PolygonProjection) for p in projections):
            raise TypeError(
                "Argumento 'projections' deve conter apenas instâncias de PolygonProjection."
            )
        self.projections: List[PolygonProjection] = projections

    @classmethod
    def merge(cls, *parts: "PolyhedronProjection") -> "PolyhedronProjection":
        """Junta várias projeções num único conjunto (para ordenar entre poliedros)."""
        return cls(p for part in parts for p in part.projections)

    def rotate(
        self, angle: float, center: Optional[Point2D] = None
    ) -> "PolyhedronProjection":
        return PolyhedronProjection(p.rotate(angle, center) for p in self.projections)

    def sorted(self) -> List[PolygonProjection]:
        """Projeções em ordem de desenho (prioridade crescente, estável)."""
        return PolygonProjection.sort(self.projections)

    def draw(self, painter: QPainter) -> None:
        """Desenha todas as projeções em ordem de prioridade."""
        for projection in self.sorted():
            projection.draw(painter)

    def highlight(self, point) -> List[PolygonProjection]:
        """
        Atualiza o destaque de todas as projeções para a posição do cursor.

        Returns:
            List[PolygonProjection]: Projeções que ficaram destacadas.
        """
        return [p for p in self.projections if p.highlight(point)]

    def __iter__(self):
        return iter(self.projections)

    def __len__(self) -> int:
        return len(self.projections)

    def __repr__(self) -> str:
        return f"PolyhedronProjection(projecoes={len(self.projections)})"
