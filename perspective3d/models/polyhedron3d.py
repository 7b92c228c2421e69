# perspective3d/models/polyhedron3d.py
from typing import Iterable, List, Tuple

from .polygon3d import Polygon3D
from .polyhedron_projection import PolyhedronProjection
from .view import View
from ..utils import transformations_3d as tf3d


class Polyhedron3D:
    """
    Poliedro como sequência ordenada de Polygon3D.

    Não há topologia de vértices compartilhados: cada face tem suas próprias
    cópias dos pontos. As transformações são repassadas a todas as faces.
    """

    def __init__(self, polygons: Iterable[Polygon3D] = ()):
        """
        Args:
            polygons: Faces do poliedro (pode ser vazio).

        Raises:
            TypeError: Se algum item não for Polygon3D.
        """
        polygons = list(polygons)
        if not all(isinstance(p, Polygon3D) for p in polygons):
            raise TypeError("Argumento 'polygons' deve conter apenas instâncias de Polygon3D.")
        self.polygons: List[Polygon3D] = polygons

    def get_center(self) -> Tuple[float, float, float]:
        """Média de todos os vértices de todas as faces."""
        return tf3d.centroid(c for polygon in self.polygons for c in polygon.get_coords())

    def translate(self, dx: float, dy: float, dz: float) -> "Polyhedron3D":
        return Polyhedron3D(p.translate(dx, dy, dz) for p in self.polygons)

    def rot_about_x(self, angle: float) -> "Polyhedron3D":
        return Polyhedron3D(p.rot_about_x(angle) for p in self.polygons)

    def rot_about_y(self, angle: float) -> "Polyhedron3D":
        return Polyhedron3D(p.rot_about_y(angle) for p in self.polygons)

    def rot_about_z(self, angle: float) -> "Polyhedron3D":
        return Polyhedron3D(p.rot_about_z(angle) for p in self.polygons)

    def get_projection(self, view: View) -> PolyhedronProjection:
        """Projeta cada face de forma independente, preservando a ordem das faces."""
        return PolyhedronProjection(p.get_projection(view) for p in self.polygons)

    def __len__(self) -> int:
        return len(self.polygons)

    def __repr__(self) -> str:
        return f"Polyhedron3D(faces={len(self.polygons)})"
