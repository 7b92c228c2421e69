"""
Configuração de logging do visualizador.

Os logs vão para stderr (e opcionalmente para um arquivo), deixando a saída
padrão livre. Apenas o namespace 'perspective3d' é configurado; quem usa a
biblioteca sem o CLI continua no controle do logging raiz.
"""
import logging
import sys
from typing import Optional, Union

from .config import LOGGER_NAME

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Nível de logging desconhecido: {level!r}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configura o logger do pacote para a execução pelo CLI.

    Pode ser chamada de novo: os handlers anteriores são fechados e trocados.

    Args:
        level: Nível como inteiro (logging.DEBUG) ou nome ("DEBUG"), como vem
            da opção --log-level.
        log_file: Caminho opcional de um arquivo que recebe os mesmos registros.

    Returns:
        logging.Logger: O logger 'perspective3d' configurado.

    Raises:
        ValueError: Se o nome do nível não existir.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug("Registrando logs também em %s", log_file)

    return logger
