# perspective3d/models/solids.py
"""
Construtores de sólidos simples como Polyhedron3D.

Cada face recebe cópias próprias dos vértices (sem vértices compartilhados).
"""
from typing import List, Optional, Sequence, Tuple

from PyQt5.QtGui import QColor

from .point3d import Point3D
from .polygon3d import Polygon3D
from .polyhedron3d import Polyhedron3D

# Índices dos vértices do cubo unitário para cada face
_BOX_FACES = [
    (0, 1, 2, 3),  # z-
    (4, 7, 6, 5),  # z+
    (0, 4, 5, 1),  # y-
    (3, 2, 6, 7),  # y+
    (0, 3, 7, 4),  # x-
    (1, 5, 6, 2),  # x+
]


def _faces_from_indices(
    pts_data: Sequence[Tuple[float, float, float]],
    faces: Sequence[Sequence[int]],
    color: Optional[QColor],
) -> List[Polygon3D]:
    return [
        Polygon3D([Point3D(*pts_data[i]) for i in face], color) for face in faces
    ]


def make_box(
    center: Point3D, size: float, color: Optional[QColor] = None
) -> Polyhedron3D:
    """
    Cubo alinhado aos eixos.

    Args:
        center: Centro do cubo.
        size: Comprimento da aresta.
        color: Cor das faces (opcional).
    """
    s = size / 2.0
    cx, cy, cz = center.get_coords()
    pts_data = [
        (cx - s, cy - s, cz - s),
        (cx + s, cy - s, cz - s),
        (cx + s, cy + s, cz - s),
        (cx - s, cy + s, cz - s),
        (cx - s, cy - s, cz + s),
        (cx + s, cy - s, cz + s),
        (cx + s, cy + s, cz + s),
        (cx - s, cy + s, cz + s),
    ]
    return Polyhedron3D(_faces_from_indices(pts_data, _BOX_FACES, color))


def make_pyramid(
    base_center: Point3D,
    base_size: float,
    height: float,
    color: Optional[QColor] = None,
) -> Polyhedron3D:
    """Pirâmide de base quadrada no plano z = base_center.z, ápice em +z."""
    s = base_size / 2.0
    cx, cy, cz = base_center.get_coords()
    pts_data = [
        (cx - s, cy - s, cz),
        (cx + s, cy - s, cz),
        (cx + s, cy + s, cz),
        (cx - s, cy + s, cz),
        (cx, cy, cz + height),
    ]
    faces = [(0, 3, 2, 1), (0, 1, 4), (1, 2, 4), (2, 3, 4), (3, 0, 4)]
    return Polyhedron3D(_faces_from_indices(pts_data, faces, color))
