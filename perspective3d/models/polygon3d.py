# perspective3d/models/polygon3d.py
"""
Módulo que define a classe Polygon3D e a projeção em perspectiva de um
polígono 3D sobre o plano da vista.
"""
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np
from PyQt5.QtGui import QColor

from .point2d import Point2D
from .point3d import Point3D
from .polygon_projection import PolygonProjection
from .view import View
from .. import config
from ..utils import transformations_3d as tf3d
from ..utils.colors import from_rgb

logger = logging.getLogger(__name__)


class Polygon3D:
    """
    Polígono no espaço 3D: sequência ordenada de Point3D e uma cor.

    A ordem dos vértices define as arestas (com a aresta de fechamento do
    último ao primeiro) e é preservada por todas as transformações. Cada
    transformação devolve um novo polígono com a mesma cor.
    """

    def __init__(self, points: Sequence[Point3D], color: Optional[QColor] = None):
        """
        Inicializa um Polygon3D.

        Args:
            points: Vértices do polígono (Point3D), em ordem.
            color: Cor de preenchimento (opcional, padrão é cinza claro).

        Raises:
            TypeError: Se 'points' contiver algo que não seja Point3D.
        """
        points = list(points)
        if not all(isinstance(p, Point3D) for p in points):
            raise TypeError("Argumento 'points' deve conter apenas instâncias de Point3D.")
        self.points: List[Point3D] = points
        self.color: QColor = (
            color
            if isinstance(color, QColor) and color.isValid()
            else from_rgb(config.DEFAULT_FILL_RGB)
        )

    @classmethod
    def from_coords(
        cls,
        x_coords: Sequence[float],
        y_coords: Sequence[float],
        z_coords: Sequence[float],
        color: Optional[QColor] = None,
    ) -> "Polygon3D":
        """
        Cria um polígono a partir de sequências paralelas de coordenadas.

        Raises:
            ValueError: Se as sequências tiverem tamanhos diferentes.
        """
        if not len(x_coords) == len(y_coords) == len(z_coords):
            raise ValueError(
                f"Sequências de coordenadas com tamanhos diferentes "
                f"({len(x_coords)}, {len(y_coords)}, {len(z_coords)})."
            )
        points = [Point3D(x, y, z) for x, y, z in zip(x_coords, y_coords, z_coords)]
        return cls(points, color)

    def get_coords(self) -> List[Tuple[float, float, float]]:
        """Retorna as coordenadas (x, y, z) de todos os vértices."""
        return [p.get_coords() for p in self.points]

    def get_center(self) -> Tuple[float, float, float]:
        """Retorna o centro geométrico (média dos vértices)."""
        return tf3d.centroid(self.get_coords())

    def translate(self, dx: float, dy: float, dz: float) -> "Polygon3D":
        return Polygon3D([p.translate(dx, dy, dz) for p in self.points], self.color)

    def rot_about_x(self, angle: float) -> "Polygon3D":
        return Polygon3D([p.rot_about_x(angle) for p in self.points], self.color)

    def rot_about_y(self, angle: float) -> "Polygon3D":
        return Polygon3D([p.rot_about_y(angle) for p in self.points], self.color)

    def rot_about_z(self, angle: float) -> "Polygon3D":
        return Polygon3D([p.rot_about_z(angle) for p in self.points], self.color)

    def get_projection(self, view: View) -> PolygonProjection:
        """
        Projeta o polígono sobre o plano da vista.

        1. Alinha o espaço à vista (olho na origem, direção da vista em z).
        2. Descarta o polígono inteiro se algum vértice tiver z < NEAR_PLANE_LIMIT.
        3. Divisão de perspectiva: m = F / (z + F), tela = (m*x + W//2, m*y + H//2).
        4. Inclinação: |z_max - z_min| / distância no plano xy entre esses vértices.
        5. Prioridade: z médio dos vértices alinhados.
        6. Rotação do resultado 2D em torno do centro do viewport pelo roll da vista.

        Casos numéricos degenerados (eye == target, z + F == 0, distância nula
        na inclinação) não geram exceção: propagam como NaN/inf.

        Args:
            view: Câmera usada na projeção.

        Returns:
            PolygonProjection: Projeção com a cor deste polígono, ou projeção
            vazia se o polígono foi descartado.
        """
        if view.is_degenerate():
            logger.warning("Direção da vista indefinida (eye == target): %r", view)

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            matrix = tf3d.create_view_alignment_matrix(view.eye, view.target)
            aligned = tf3d.apply_transformation_3d(self.get_coords(), matrix)
            if aligned.shape[0] == 0:
                return PolygonProjection([])

            z = aligned[:, 2]
            if np.any(z < config.NEAR_PLANE_LIMIT):
                return PolygonProjection([])

            focal_length = np.float64(view.focal_length)
            center_x, center_y = view.center
            perspective_mod = focal_length / (z + focal_length)
            screen_x = perspective_mod * aligned[:, 0] + center_x
            screen_y = perspective_mod * aligned[:, 1] + center_y

            max_index, min_index = self._extreme_depth_indices(z)
            max_point, min_point = aligned[max_index], aligned[min_index]
            planar_distance = np.hypot(
                max_point[0] - min_point[0], max_point[1] - min_point[1]
            )
            incline = np.abs(max_point[2] - min_point[2]) / planar_distance
            priority = z.sum() / len(z)

            projection = PolygonProjection(
                [Point2D(x, y) for x, y in zip(screen_x, screen_y)],
                float(priority),
                float(incline),
                self.color,
            )
            return projection.rotate(view.turn_angle, Point2D(center_x, center_y))

    @staticmethod
    def _extreme_depth_indices(z: np.ndarray) -> Tuple[int, int]:
        # Máximo: primeiro vértice com z estritamente maior.
        # Mínimo: comparação <=, empates ficam com o vértice mais tardio.
        max_index = 0
        min_index = 0
        for i in range(len(z)):
            if z[i] > z[max_index]:
                max_index = i
            if z[i] <= z[min_index]:
                min_index = i
        return max_index, min_index

    def __repr__(self) -> str:
        points_str = ", ".join(repr(p) for p in self.points)
        return f"Polygon3D(pontos=[{points_str}], cor={self.color.name()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon3D):
            return NotImplemented
        return self.points == other.points and self.color == other.color
