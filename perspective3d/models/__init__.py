# perspective3d/models/__init__.py
"""
Pacote que contém os modelos de dados da biblioteca.

Este pacote fornece os seguintes modelos:
- Point3D: Representa um ponto 3D.
- Polygon3D: Polígono 3D com cor; calcula sua projeção sobre uma View.
- Polyhedron3D: Conjunto ordenado de Polygon3D.
- View: Estado da câmera (olho, alvo, roll, viewport, distância focal).
- Point2D: Ponto na tela.
- PolygonProjection: Polígono 2D com prioridade, inclinação e cores.
- PolyhedronProjection: Conjunto de projeções ordenado para desenho.

E os construtores de sólidos make_box e make_pyramid.
"""

from .point3d import Point3D
from .point2d import Point2D
from .view import View
from .polygon_projection import PolygonProjection
from .polyhedron_projection import PolyhedronProjection
from .polygon3d import Polygon3D
from .polyhedron3d import Polyhedron3D
from .solids import make_box, make_pyramid

__all__ = [
    "Point3D",
    "Point2D",
    "View",
    "PolygonProjection",
    "PolyhedronProjection",
    "Polygon3D",
    "Polyhedron3D",
    "make_box",
    "make_pyramid",
]
