# perspective3d/__init__.py
"""
Biblioteca de geometria 3D e projeção em perspectiva.

Modela pontos, polígonos e poliedros no espaço, aplica transformações
rígidas, projeta a geometria sobre o plano de uma câmera (View) e desenha os
polígonos 2D resultantes num QPainter, ordenados pelo algoritmo do pintor e
sombreados pela inclinação.
"""

from .models import (
    Point2D,
    Point3D,
    Polygon3D,
    PolygonProjection,
    Polyhedron3D,
    PolyhedronProjection,
    View,
    make_box,
    make_pyramid,
)

__version__ = "0.1.0"

__all__ = [
    "Point2D",
    "Point3D",
    "Polygon3D",
    "PolygonProjection",
    "Polyhedron3D",
    "PolyhedronProjection",
    "View",
    "make_box",
    "make_pyramid",
]
