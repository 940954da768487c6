import logging
import sys

LOGGER_NAME = "PatternGuideLogger"
LOG_FILE = "guide_debug.log"

# Ex : 14:02:11 [INFO] 📄 Guide écrit dans GUIDE.md
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class GuideLogger:
    """
    Journal unique du guide (chargement, rendu, validation, visualiseur).
    - console (stdout) : INFO, ou DEBUG quand debug_mode est actif ;
    - fichier guide_debug.log : tout, réécrit à chaque lancement.
    """
    _instance = None

    @staticmethod
    def get_logger() -> logging.Logger:
        if GuideLogger._instance is None:
            GuideLogger()
        return GuideLogger._instance

    def __init__(self):
        if GuideLogger._instance is not None:
            raise Exception("GuideLogger est un singleton : utiliser get_logger()")

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        # Les messages restent dans ce journal (pas de doublon via le logger racine)
        logger.propagate = False

        formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
        for handler, level in self._build_handlers():
            handler.setLevel(level)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        GuideLogger._instance = logger

    @staticmethod
    def _build_handlers():
        return [
            (logging.StreamHandler(sys.stdout), logging.INFO),
            (logging.FileHandler(LOG_FILE, mode="w", encoding="utf-8"), logging.DEBUG),
        ]


def set_debug(enabled: bool):
    """Mode debug : la console affiche aussi les messages DEBUG."""
    level = logging.DEBUG if enabled else logging.INFO
    for handler in GuideLogger.get_logger().handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


def log_info(msg):
    GuideLogger.get_logger().info(msg)


def log_debug(msg):
    GuideLogger.get_logger().debug(msg)


def log_error(msg):
    GuideLogger.get_logger().error(msg)
