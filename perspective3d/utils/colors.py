# perspective3d/utils/colors.py
"""
Funções auxiliares para escurecer e clarear cores (QColor).

Cada canal é tratado separadamente e limitado ao intervalo [0, 255].
"""
import math

from PyQt5.QtGui import QColor


def _to_channel(value: float) -> int:
    # NaN (ex.: inclinação degenerada) vira 0, como num cast para int
    if math.isnan(value):
        return 0
    return int(value)


def darken(color: QColor, factor: float) -> QColor:
    """
    Escurece uma cor subtraindo 'factor' de cada canal.

    Canais menores que 'factor' vão para 0; os demais são truncados para int.

    Args:
        color: Cor inicial.
        factor: Quantidade subtraída de cada canal.

    Returns:
        QColor: Nova cor escurecida (a cor original não é alterada).
    """
    channels = (color.red(), color.green(), color.blue())
    red, green, blue = (0 if c < factor else _to_channel(c - factor) for c in channels)
    return QColor(red, green, blue)


def brighten(color: QColor, factor: float) -> QColor:
    """
    Clareia uma cor somando 'factor' a cada canal (saturando em 255).

    Args:
        color: Cor inicial.
        factor: Quantidade somada a cada canal.

    Returns:
        QColor: Nova cor clareada.
    """
    channels = (color.red(), color.green(), color.blue())
    red, green, blue = (
        255 if c + factor > 255 else _to_channel(c + factor) for c in channels
    )
    return QColor(red, green, blue)


def from_rgb(rgb) -> QColor:
    """Cria um QColor a partir de uma tupla (r, g, b)."""
    red, green, blue = rgb
    return QColor(red, green, blue)
