# perspective3d/view/projection_widget.py
import logging
from typing import Iterable, List, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PyQt5.QtWidgets import QWidget

from .. import config
from ..models import Point2D, Polyhedron3D, PolyhedronProjection, View
from ..utils.colors import from_rgb
from ..utils.vectors import Vector3D

logger = logging.getLogger(__name__)


class ProjectionWidget(QWidget):
    """
    Widget que desenha poliedros projetados por uma View.

    É o "renderizador" externo da biblioteca: projeta todas as faces, ordena
    pelo algoritmo do pintor e pinta no QPainter do widget.
    Mouse: movimento destaca a face sob o cursor.
    Teclado: setas orbitam o olho em torno do alvo, W/S avançam/recuam,
             Q/E giram a vista no plano, +/- alteram o zoom.
    """

    # Emitido após recalcular a projeção (mudança de câmera ou de cena)
    projection_changed = pyqtSignal()
    # Emitido quando o número de faces destacadas muda
    highlight_changed = pyqtSignal(int)

    def __init__(
        self,
        view: View,
        solids: Iterable[Polyhedron3D] = (),
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._view: View = view
        self._solids: List[Polyhedron3D] = list(solids)
        self._projection: PolyhedronProjection = PolyhedronProjection()
        self._cursor: Optional[Point2D] = None
        self._highlighted_count: int = 0

        self.setMouseTracking(True)  # mouseMoveEvent sem botão pressionado
        self.setFocusPolicy(Qt.StrongFocus)
        self.resize(view.width, view.height)
        self.reproject()

    # --- Getters ---
    def view(self) -> View:
        return self._view

    def projection(self) -> PolyhedronProjection:
        return self._projection

    # --- Cena ---
    def set_solids(self, solids: Iterable[Polyhedron3D]) -> None:
        self._solids = list(solids)
        self.reproject()

    def reproject(self) -> None:
        """Recalcula a projeção de todos os sólidos e agenda repintura."""
        self._projection = PolyhedronProjection.merge(
            *(solid.get_projection(self._view) for solid in self._solids)
        )
        logger.debug("Projeção recalculada: %d faces (%r)", len(self._projection), self._view)
        if self._cursor is not None:
            self._update_highlight(self._cursor)
        self.projection_changed.emit()
        self.update()

    def _update_highlight(self, cursor: Point2D) -> bool:
        count = len(self._projection.highlight(cursor))
        changed = count != self._highlighted_count
        self._highlighted_count = count
        if changed:
            self.highlight_changed.emit(count)
        return changed

    # --- Navegação ---
    def orbit(self, horizontal: float, vertical: float) -> None:
        """Gira o olho em torno do alvo (eixo y para horizontal, x para vertical)."""
        target = self._view.target
        relative = self._view.eye.translate(-target.x, -target.y, -target.z)
        # rot_about_y é a sua própria inversa; duas aplicações formam uma rotação
        relative = relative.rot_about_y(0.0).rot_about_y(horizontal)
        relative = relative.rot_about_x(vertical)
        self._view.set_eye(relative.translate(target.x, target.y, target.z))
        self.reproject()

    def advance(self, distance: float) -> None:
        """Move olho e alvo juntos ao longo da direção da vista."""
        direction = Vector3D.between(self._view.eye, self._view.target)
        magnitude = direction.magnitude()
        if magnitude == 0:
            logger.warning("Avanço ignorado: direção da vista indefinida.")
            return
        step = direction.scale(distance / magnitude)
        self._view.translate_view(step.x, step.y, step.z)
        self._view.translate_viewed(step.x, step.y, step.z)
        self.reproject()

    def roll(self, angle: float) -> None:
        self._view.set_turn_angle(self._view.turn_angle + angle)
        self.reproject()

    def zoom(self, magnification: float) -> None:
        self._view.zoom(magnification)
        self.reproject()

    # --- Eventos Qt ---
    def resizeEvent(self, event: QResizeEvent):
        size = event.size()
        self._view.set_size(size.width(), size.height())
        self.reproject()
        super().resizeEvent(event)

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        painter.fillRect(self.rect(), from_rgb(config.BACKGROUND_RGB))
        # A prioridade (z médio) cresce com a distância ao olho: pinta do fim
        # da ordem crescente para o início, do mais distante ao mais próximo.
        for face in reversed(self._projection.sorted()):
            face.draw(painter)
        painter.end()

    def mouseMoveEvent(self, event: QMouseEvent):
        self._cursor = Point2D.from_qpoint(event.pos())
        self._update_highlight(self._cursor)
        # O destaque pode trocar de face sem mudar a contagem
        self.update()
        super().mouseMoveEvent(event)

    def keyPressEvent(self, event: QKeyEvent):
        key = event.key()
        if key == Qt.Key_Left:
            self.orbit(-config.ORBIT_STEP_RADIANS, 0.0)
        elif key == Qt.Key_Right:
            self.orbit(config.ORBIT_STEP_RADIANS, 0.0)
        elif key == Qt.Key_Up:
            self.orbit(0.0, -config.ORBIT_STEP_RADIANS)
        elif key == Qt.Key_Down:
            self.orbit(0.0, config.ORBIT_STEP_RADIANS)
        elif key == Qt.Key_W:
            self.advance(config.MOVE_STEP)
        elif key == Qt.Key_S:
            self.advance(-config.MOVE_STEP)
        elif key == Qt.Key_Q:
            self.roll(-config.ROLL_STEP_RADIANS)
        elif key == Qt.Key_E:
            self.roll(config.ROLL_STEP_RADIANS)
        elif key in (Qt.Key_Plus, Qt.Key_Equal):
            self.zoom(config.ZOOM_STEP)
        elif key == Qt.Key_Minus:
            self.zoom(1.0 / config.ZOOM_STEP)
        else:
            super().keyPressEvent(event)
            return
        event.accept()
