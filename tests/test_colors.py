from PyQt5.QtGui import QColor

from perspective3d.utils.colors import brighten, darken, from_rgb
## unit tests for perspective3d colors.py


def rgb(color):
    return (color.red(), color.green(), color.blue())


class TestColors:
    """per-channel darken/brighten with clamping"""

    def test_darken(self):
        assert rgb(darken(QColor(100, 50, 10), 20)) == (80, 30, 0)
        assert rgb(darken(QColor(100, 50, 10), 0)) == (100, 50, 10)

    def test_darken_truncates_fractions(self):
        assert rgb(darken(QColor(100, 100, 100), 15.5)) == (84, 84, 84)

    def test_darken_clamps_at_zero(self):
        assert rgb(darken(QColor(10, 20, 30), 50)) == (0, 0, 0)

    def test_darken_nan_factor(self):
        assert rgb(darken(QColor(10, 20, 30), float("nan"))) == (0, 0, 0)

    def test_brighten(self):
        assert rgb(brighten(QColor(100, 250, 255), 10)) == (110, 255, 255)

    def test_original_untouched(self):
        color = QColor(100, 100, 100)
        darken(color, 30)
        brighten(color, 30)
        assert rgb(color) == (100, 100, 100)

    def test_from_rgb(self):
        assert rgb(from_rgb((1, 2, 3))) == (1, 2, 3)
