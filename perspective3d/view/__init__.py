# perspective3d/view/__init__.py
"""
Pacote com o widget Qt que desenha as projeções (renderizador de exemplo).
"""

from .projection_widget import ProjectionWidget

__all__ = ["ProjectionWidget"]
