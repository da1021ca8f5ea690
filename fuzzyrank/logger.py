'''
Module de configuration pour le logger centralisé de fuzzyrank.

Ce module utilise Loguru pour fournir un logger pré-configuré avec une sortie
console (avec couleurs) et, si LOG_TO_FILE est activé, des fichiers rotatifs.
'''

import os
import sys

from loguru import logger

from fuzzyrank.config import settings

LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level><b>{message}</b></level>"
)
LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)


def configure_logging(
        level: str = settings.LOG_LEVEL,
        to_file: bool = settings.LOG_TO_FILE,
        log_dir: str = settings.LOG_DIR) -> None:
    """(Re)configure les handlers Loguru."""
    # Supprimer les handlers existants pour éviter les doublons
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT_CONSOLE,
        colorize=True,
        backtrace=True,
        diagnose=True
    )

    if not to_file:
        return

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # Rotation journalière, conservation de 30 jours, compression.
    logger.add(
        os.path.join(log_dir, "debug.log"),
        level="DEBUG",
        format=LOG_FORMAT_FILE,
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
        filter=lambda record: record["level"].name == "DEBUG"
    )
    logger.add(
        os.path.join(log_dir, "info.log"),
        level="INFO",
        format=LOG_FORMAT_FILE,
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
        filter=lambda record: record["level"].name in ("INFO", "WARNING")
    )
    logger.add(
        os.path.join(log_dir, "error.log"),
        level="ERROR",
        format=LOG_FORMAT_FILE,
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=True
    )


configure_logging()

# Exemple d'utilisation :
# from fuzzyrank.logger import logger
# logger.debug("Classement de {n} candidats", n=12)
