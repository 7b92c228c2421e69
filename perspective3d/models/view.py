# perspective3d/models/view.py
import logging

from .point3d import Point3D
from .. import config
from ..utils.vectors import Vector3D

logger = logging.getLogger(__name__)


class View:
    """
    Estado da câmera usada na projeção.

    Responsável por:
    - Posição do olho (eye) e do ponto observado (target).
    - Rotação no plano da vista (roll, em radianos).
    - Dimensões do viewport (pixels) e distância focal.

    Diferente dos modelos geométricos, a View é mutável: a mesma câmera
    acompanha a cena entre quadros.

    Pré-condição não verificada: eye != target. Caso contrário a direção da
    vista é indefinida e a geometria projetada resulta em NaN.
    """

    def __init__(
        self,
        eye: Point3D,
        target: Point3D,
        turn_angle: float = config.DEFAULT_ROLL_ANGLE,
        width: int = config.DEFAULT_VIEWPORT_WIDTH,
        height: int = config.DEFAULT_VIEWPORT_HEIGHT,
        focal_length: float = config.DEFAULT_FOCAL_LENGTH,
    ):
        """
        Inicializa a View.

        Args:
            eye: Posição do olho.
            target: Ponto para o qual a câmera olha.
            turn_angle: Rotação no plano da vista (radianos).
            width: Largura do viewport em pixels.
            height: Altura do viewport em pixels.
            focal_length: Distância focal (escala da perspectiva).
        """
        self.eye: Point3D = eye
        self.target: Point3D = target
        self.turn_angle: float = float(turn_angle)
        self.width: int = int(width)
        self.height: int = int(height)
        self.focal_length: float = float(focal_length)

    @property
    def center(self):
        """Centro do viewport em pixels inteiros (W//2, H//2)."""
        return (self.width // 2, self.height // 2)

    def is_degenerate(self) -> bool:
        """True se eye e target coincidem exatamente (direção da vista indefinida)."""
        return Vector3D.between(self.eye, self.target).magnitude() == 0

    def translate_view(self, dx: float, dy: float, dz: float) -> None:
        """Move apenas o olho."""
        self.eye = self.eye.translate(dx, dy, dz)

    def translate_viewed(self, dx: float, dy: float, dz: float) -> None:
        """Move apenas o ponto observado."""
        self.target = self.target.translate(dx, dy, dz)

    def zoom(self, magnification: float) -> None:
        """Multiplica a distância focal por 'magnification'."""
        self.focal_length *= magnification
        logger.debug("Zoom x%.3f -> distância focal %.3f", magnification, self.focal_length)

    def set_eye(self, eye: Point3D) -> None:
        self.eye = eye

    def set_target(self, target: Point3D) -> None:
        self.target = target

    def set_turn_angle(self, turn_angle: float) -> None:
        self.turn_angle = float(turn_angle)

    def set_size(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)

    def set_focal_length(self, focal_length: float) -> None:
        self.focal_length = float(focal_length)

    def __repr__(self) -> str:
        return (
            f"View(eye={self.eye!r}, target={self.target!r}, "
            f"turn_angle={self.turn_angle:.3f}, size={self.width}x{self.height}, "
            f"focal_length={self.focal_length:.3f})"
        )
