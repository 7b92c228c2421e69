# perspective3d/config.py
"""
Constantes e valores padrão da biblioteca.

Centraliza os números "mágicos" do pipeline de projeção e do visualizador,
para que não fiquem espalhados pelo código.
"""

# --- Câmera / Viewport ---
DEFAULT_FOCAL_LENGTH = 700.0  # Escala da perspectiva (distância focal)
DEFAULT_VIEWPORT_WIDTH = 500  # Largura do viewport em pixels
DEFAULT_VIEWPORT_HEIGHT = 500  # Altura do viewport em pixels
DEFAULT_ROLL_ANGLE = 0.0  # Rotação no plano da vista (radianos)

# Polígonos com algum vértice abaixo deste z (já alinhado à vista) são descartados
NEAR_PLANE_LIMIT = -5.0

# --- Cores (RGB) ---
DEFAULT_FILL_RGB = (192, 192, 192)  # Cinza claro
DEFAULT_HIGHLIGHT_RGB = (200, 232, 255)  # Azul claro
BACKGROUND_RGB = (255, 255, 255)

# --- Sombreamento ---
INCLINE_SHADE_FACTOR = 30.0  # Escurecimento por unidade de inclinação
MAX_INCLINE_SHADE = 50.0  # Escurecimento máximo devido à inclinação
OUTLINE_DARKEN = 15.0  # Escurecimento do contorno em relação ao preenchimento

# --- Navegação no visualizador ---
ORBIT_STEP_RADIANS = 0.05  # Passo de órbita do olho (setas)
MOVE_STEP = 0.5  # Passo de avanço/recuo da câmera (W/S)
ROLL_STEP_RADIANS = 0.05  # Passo de rotação no plano da vista (Q/E)
ZOOM_STEP = 1.1  # Fator multiplicativo do zoom (+/-)

LOGGER_NAME = "perspective3d"
