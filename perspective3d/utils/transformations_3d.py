# perspective3d/utils/transformations_3d.py
import numpy as np
from typing import Iterable, Sequence, Tuple, Union

from .vectors import Vector3D

VertexArray3D = Union[np.ndarray, Sequence[Tuple[float, float, float]]]


def create_identity_matrix_3d() -> np.ndarray:
    return np.identity(4, dtype=float)


def create_translation_matrix_3d(dx: float, dy: float, dz: float) -> np.ndarray:
    return np.array(
        [
            [1.0, 0.0, 0.0, dx],
            [0.0, 1.0, 0.0, dy],
            [0.0, 0.0, 1.0, dz],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )


def create_rotation_matrix_3d_x(angle: float) -> np.ndarray:
    """Rotação em torno do eixo x (ângulo em radianos)."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )


def create_rotation_matrix_3d_y(angle: float) -> np.ndarray:
    """
    "Rotação" em torno do eixo y (ângulo em radianos).

    x' = -x*sen + z*cos, z' = x*cos + z*sen. A convenção de sinais é mantida
    como está: a matriz é a sua própria inversa para um mesmo ângulo.
    """
    c, s = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [-s, 0.0, c, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [c, 0.0, s, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )


def create_rotation_matrix_3d_z(angle: float) -> np.ndarray:
    """Rotação em torno do eixo z (ângulo em radianos)."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )


def apply_transformation_3d(vertices: VertexArray3D, matrix: np.ndarray) -> np.ndarray:
    """
    Aplica uma matriz 4x4 a uma lista de vértices 3D.

    Args:
        vertices: Vértices (x, y, z), como lista de tuplas ou array (N, 3).
        matrix: Matriz de transformação NumPy 4x4.

    Returns:
        np.ndarray: Array (N, 3) com os vértices transformados, na mesma ordem.
    """
    vertex_array = np.asarray(vertices, dtype=float).reshape(-1, 3)
    if vertex_array.shape[0] == 0:
        return np.empty((0, 3), dtype=float)
    homogeneous_coords = np.hstack(
        [vertex_array, np.ones((vertex_array.shape[0], 1), dtype=float)]
    )
    transformed_h = (matrix @ homogeneous_coords.T).T
    # Matrizes afins: w permanece 1
    return transformed_h[:, :3]


def compose(*matrices: np.ndarray) -> np.ndarray:
    """
    Compõe matrizes na ordem de aplicação: compose(A, B) aplica A e depois B.
    """
    result = create_identity_matrix_3d()
    for matrix in matrices:
        result = matrix @ result
    return result


def view_alignment_angles(eye, target) -> Tuple[float, float]:
    """
    Calcula os ângulos que alinham a direção da vista ao eixo z.

    O eixo de giro é (D.y, -D.x) no plano xy, onde D = target - eye.

    Args:
        eye: Ponto do olho (qualquer objeto com x, y, z).
        target: Ponto observado (qualquer objeto com x, y, z).

    Returns:
        Tuple[float, float]: (z_turn_angle, turn_angle). NaN se eye == target.
    """
    disp = Vector3D.between(eye, target)
    x_turn_axis = disp.y
    y_turn_axis = -disp.x
    with np.errstate(divide="ignore", invalid="ignore"):
        z_turn_angle = np.arctan2(y_turn_axis, x_turn_axis)
        turn_angle = np.arccos(np.float64(disp.z) / np.float64(disp.magnitude()))
    return float(z_turn_angle), float(turn_angle)


def create_view_alignment_matrix(eye, target) -> np.ndarray:
    """
    Matriz que leva o espaço do mundo ao espaço alinhado à vista.

    Sequência: translada o olho para a origem, gira em z por -z_turn_angle,
    gira em x por turn_angle e desfaz o giro em z.
    """
    z_turn_angle, turn_angle = view_alignment_angles(eye, target)
    return compose(
        create_translation_matrix_3d(-eye.x, -eye.y, -eye.z),
        create_rotation_matrix_3d_z(-z_turn_angle),
        create_rotation_matrix_3d_x(turn_angle),
        create_rotation_matrix_3d_z(z_turn_angle),
    )


def centroid(vertices: Iterable[Tuple[float, float, float]]) -> Tuple[float, float, float]:
    """Média das coordenadas dos vértices ((0, 0, 0) se vazio)."""
    vertex_array = np.asarray(list(vertices), dtype=float).reshape(-1, 3)
    if vertex_array.shape[0] == 0:
        return (0.0, 0.0, 0.0)
    cx, cy, cz = vertex_array.mean(axis=0)
    return (float(cx), float(cy), float(cz))
