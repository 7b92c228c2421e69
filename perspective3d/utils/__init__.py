# perspective3d/utils/__init__.py
"""
Pacote de utilitários da biblioteca.

Contém módulos para:
- colors: Escurecimento e clareamento de cores por canal.
- transformations: Transformações geométricas 2D com matrizes homogêneas.
- transformations_3d: Transformações 3D, alinhamento à vista.
- vectors: Álgebra vetorial mínima em 3D.
"""

from . import colors
from . import transformations
from . import transformations_3d
from . import vectors

__all__ = [
    "colors",
    "transformations",
    "transformations_3d",
    "vectors",
]
