# perspective3d/models/polygon_projection.py
"""
Módulo que define a classe PolygonProjection, o polígono 2D resultante da
projeção de um Polygon3D, com os atributos consumidos pelo desenho
(prioridade, inclinação, cores e destaque).
"""
import math
from typing import Iterable, List, Optional, Tuple

from PyQt5.QtCore import Qt, QPoint, QPointF
from PyQt5.QtGui import QBrush, QColor, QPainter, QPen, QPolygon, QPolygonF

from .point2d import Point2D
from .. import config
from ..utils import transformations as tf2d
from ..utils.colors import darken, from_rgb

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _truncate(value: float) -> int:
    """Trunca uma coordenada para int (NaN -> 0, infinitos saturam em 32 bits)."""
    if math.isnan(value):
        return 0
    if value >= _INT_MAX:
        return _INT_MAX
    if value <= _INT_MIN:
        return _INT_MIN
    return int(value)


class PolygonProjection:
    """
    Polígono projetado na tela.

    Responsável por:
    - Armazenar os vértices 2D (na mesma ordem do Polygon3D de origem).
    - Guardar a prioridade de desenho (profundidade média) e a inclinação.
    - Gerenciar a cor de preenchimento, a cor de destaque e o estado de destaque.
    - Desenhar-se num QPainter e responder a testes de posição do cursor.

    Uma projeção é criada a cada chamada de projeção; só 'highlight' a altera.
    """

    GRAPHICS_BORDER_WIDTH = 1  # Espessura do contorno

    def __init__(
        self,
        points: List[Point2D],
        priority: float = 0.0,
        incline: float = 0.0,
        color: Optional[QColor] = None,
        highlight_color: Optional[QColor] = None,
    ):
        """
        Inicializa uma projeção de polígono.

        Args:
            points: Vértices 2D (Point2D). Lista vazia indica polígono descartado.
            priority: Prioridade de desenho (menor é desenhado antes).
            incline: Medida de inclinação usada no sombreamento.
            color: Cor de preenchimento (opcional, padrão é cinza claro).
            highlight_color: Cor do contorno destacado (opcional, padrão azul claro).
        """
        self.points: List[Point2D] = list(points)
        self.priority: float = priority
        self.incline: float = incline
        self.color: QColor = (
            color
            if isinstance(color, QColor) and color.isValid()
            else from_rgb(config.DEFAULT_FILL_RGB)
        )
        self.highlight_color: QColor = (
            highlight_color
            if isinstance(highlight_color, QColor) and highlight_color.isValid()
            else from_rgb(config.DEFAULT_HIGHLIGHT_RGB)
        )
        self.highlighted: bool = False

    def is_empty(self) -> bool:
        return not self.points

    def get_coords(self) -> List[Tuple[float, float]]:
        """Retorna as coordenadas (x, y) de todos os vértices."""
        return [p.get_coords() for p in self.points]

    def to_qpolygon(self) -> QPolygon:
        """Polígono Qt com os vértices truncados para inteiros."""
        return QPolygon([QPoint(_truncate(p.x), _truncate(p.y)) for p in self.points])

    def _with_coords(self, coords: List[Tuple[float, float]]) -> "PolygonProjection":
        return PolygonProjection(
            [Point2D(x, y) for x, y in coords],
            self.priority,
            self.incline,
            self.color,
            self.highlight_color,
        )

    def rotate(
        self, angle: float, center: Optional[Point2D] = None
    ) -> "PolygonProjection":
        """
        Rotaciona a projeção em torno de 'center' (origem se None).

        Args:
            angle: Ângulo em radianos.
            center: Centro da rotação.

        Returns:
            PolygonProjection: Nova projeção com a mesma prioridade, inclinação e cores.
        """
        cx, cy = center.get_coords() if center is not None else (0.0, 0.0)
        matrix = tf2d.create_rotation_about_point_matrix(angle, cx, cy)
        return self._with_coords(tf2d.apply_transformation(self.get_coords(), matrix))

    def translate(self, dx: float, dy: float) -> "PolygonProjection":
        matrix = tf2d.create_translation_matrix(dx, dy)
        return self._with_coords(tf2d.apply_transformation(self.get_coords(), matrix))

    def contains(self, point) -> bool:
        """Teste par-ímpar do ponto contra os vértices truncados."""
        if self.is_empty():
            return False
        polygon = QPolygonF(self.to_qpolygon())
        return polygon.containsPoint(QPointF(point.x, point.y), Qt.OddEvenFill)

    def highlight(self, point) -> bool:
        """
        Atualiza o estado de destaque conforme a posição do cursor.

        Args:
            point: Posição do cursor (Point2D ou objeto com x, y).

        Returns:
            bool: O novo valor de 'highlighted'.
        """
        self.highlighted = self.contains(point)
        return self.highlighted

    def shaded_color(self) -> QColor:
        """Cor de preenchimento escurecida pela inclinação."""
        shade = min(config.INCLINE_SHADE_FACTOR * self.incline, config.MAX_INCLINE_SHADE)
        return darken(self.color, shade)

    def outline_color(self, fill_color: Optional[QColor] = None) -> QColor:
        if self.highlighted:
            return self.highlight_color
        if fill_color is None:
            fill_color = self.shaded_color()
        return darken(fill_color, config.OUTLINE_DARKEN)

    def draw(self, painter: QPainter) -> None:
        """
        Preenche o polígono e desenha o contorno no QPainter.

        Caneta e pincel do painter são restaurados ao final.
        """
        if self.is_empty():
            return
        polygon = self.to_qpolygon()
        fill_color = self.shaded_color()

        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(fill_color))
        painter.drawPolygon(polygon)

        painter.setBrush(Qt.NoBrush)
        painter.setPen(QPen(self.outline_color(fill_color), self.GRAPHICS_BORDER_WIDTH))
        painter.drawPolygon(polygon)
        painter.restore()

    @staticmethod
    def sort(projections: Iterable["PolygonProjection"]) -> List["PolygonProjection"]:
        """
        Ordenação por inserção estável, prioridade crescente.

        Cada projeção entra logo após a última já ordenada cuja prioridade
        seja <= à sua (varrendo do fim para o início), ou no índice 0.
        Entrada vazia resulta em lista vazia.
        """
        sorted_projections: List[PolygonProjection] = []
        for projection in projections:
            index = len(sorted_projections)
            while index > 0 and not (
                projection.priority >= sorted_projections[index - 1].priority
            ):
                index -= 1
            sorted_projections.insert(index, projection)
        return sorted_projections

    def __repr__(self) -> str:
        points_str = ", ".join(repr(p) for p in self.points)
        return (
            f"PolygonProjection(pontos=[{points_str}], prioridade={self.priority:.3f}, "
            f"inclinacao={self.incline:.3f}, cor={self.color.name()})"
        )
