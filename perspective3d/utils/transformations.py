# perspective3d/utils/transformations.py
import numpy as np
from typing import List, Sequence, Tuple

# Alias para clareza
VertexList2D = List[Tuple[float, float]]

# --- Funções para criar matrizes de transformação 2D 3x3 (homogêneas) ---


def create_translation_matrix(dx: float, dy: float) -> np.ndarray:
    """
    Cria matriz de translação 2D (homogênea 3x3).

    Args:
        dx: Deslocamento no eixo x.
        dy: Deslocamento no eixo y.

    Returns:
        np.ndarray: Matriz de translação 3x3.
    """
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]], dtype=float)


def create_rotation_matrix(angle: float) -> np.ndarray:
    """
    Cria matriz de rotação 2D (homogênea 3x3) em torno da origem.

    Args:
        angle: Ângulo de rotação em radianos.

    Returns:
        np.ndarray: Matriz de rotação 3x3.
    """
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    return np.array(
        [[cos_a, -sin_a, 0.0], [sin_a, cos_a, 0.0], [0.0, 0.0, 1.0]], dtype=float
    )


def create_rotation_about_point_matrix(
    angle: float, center_x: float, center_y: float
) -> np.ndarray:
    """
    Cria matriz de rotação 2D em torno de um ponto arbitrário.

    Ordem: transladar o centro para a origem, rotacionar, transladar de volta.
    """
    t_to_origin = create_translation_matrix(-center_x, -center_y)
    r_matrix = create_rotation_matrix(angle)
    t_back = create_translation_matrix(center_x, center_y)
    return t_back @ r_matrix @ t_to_origin


# --- Função para aplicar a transformação 2D ---


def apply_transformation(
    vertices: Sequence[Tuple[float, float]], matrix: np.ndarray
) -> VertexList2D:
    """
    Aplica uma matriz de transformação 2D 3x3 a uma lista de vértices 2D.

    Args:
        vertices: Lista de tuplas (x, y) representando os vértices.
        matrix: Matriz NumPy 3x3 de transformação.

    Returns:
        VertexList2D: Nova lista de tuplas (x, y) transformadas.
        Retorna lista vazia se a entrada for vazia.
    """
    if len(vertices) == 0:
        return []

    vertex_array = np.array(vertices, dtype=float)  # Formato (N, 2)
    # Adiciona coordenada homogênea w=1 para cada vértice -> (N, 3)
    homogeneous_coords = np.hstack(
        [vertex_array, np.ones((vertex_array.shape[0], 1), dtype=float)]
    )

    # matrix (3x3) @ coords.T (3xN) -> (3xN), transposto de volta para (N, 3)
    transformed_homogeneous = (matrix.astype(float) @ homogeneous_coords.T).T

    # Matrizes afins: w permanece 1
    return [(float(x), float(y)) for x, y in transformed_homogeneous[:, :2]]
