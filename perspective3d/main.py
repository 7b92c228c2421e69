# perspective3d/main.py
import argparse
import logging
import sys
from typing import List, Optional

from PyQt5.QtWidgets import QApplication, QMainWindow, QMessageBox

from . import config
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"valor deve ser positivo (recebeu {number})")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="perspective3d",
        description="Visualizador de poliedros com projeção em perspectiva.",
    )
    parser.add_argument("--width", type=_positive_int, default=config.DEFAULT_VIEWPORT_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=config.DEFAULT_VIEWPORT_HEIGHT)
    parser.add_argument(
        "--focal-length", type=float, default=config.DEFAULT_FOCAL_LENGTH
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def build_demo_window(args: argparse.Namespace) -> QMainWindow:
    """Cria a janela principal com uma cena de exemplo (cubo e pirâmide)."""
    from PyQt5.QtGui import QColor

    from .models import Point3D, View, make_box, make_pyramid
    from .view import ProjectionWidget

    view = View(
        Point3D(200.0, -250.0, -300.0),
        Point3D(0.0, 0.0, 0.0),
        width=args.width,
        height=args.height,
        focal_length=args.focal_length,
    )
    solids = [
        make_box(Point3D(-100.0, 0.0, 0.0), 150.0, QColor(220, 120, 100)),
        make_pyramid(Point3D(120.0, 0.0, -60.0), 140.0, 160.0, QColor(120, 180, 230)),
    ]

    window = QMainWindow()
    window.setWindowTitle("perspective3d")
    widget = ProjectionWidget(view, solids, window)
    window.setCentralWidget(widget)
    widget.highlight_changed.connect(
        lambda count: window.statusBar().showMessage(f"Faces destacadas: {count}")
    )
    window.statusBar().showMessage(
        "Setas: orbitar | W/S: avançar/recuar | Q/E: girar | +/-: zoom"
    )
    window.resize(args.width, args.height)
    return window


def main(argv: Optional[List[str]] = None):
    """Configura e executa o visualizador."""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    logger.info("Iniciando visualizador %dx%d.", args.width, args.height)

    app = QApplication(sys.argv[:1])

    window = None
    try:
        window = build_demo_window(args)
    except ImportError as e:
        logger.exception("Falha ao importar componentes da aplicação.")
        QMessageBox.critical(
            None,
            "Erro de Importação",
            f"Falha ao importar componentes necessários da aplicação.\n\n"
            f"Erro: {e}\n\n"
            f"Consulte o console para detalhes técnicos.",
        )
        sys.exit(1)
    except Exception as e:
        logger.exception("Erro inesperado na inicialização.")
        QMessageBox.critical(
            None,
            "Erro Inesperado na Inicialização",
            f"Ocorreu um erro inesperado ao iniciar a aplicação:\n\n{e}",
        )
        sys.exit(1)

    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
