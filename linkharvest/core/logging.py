import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Any
from pythonjsonlogger.json import JsonFormatter

from linkharvest.core.constants import MAX_LOG_SIZE_BYTES

LOGGER_NAME = "linkharvest"
TEXT_LOG_FILE = "harvest.log"
EVENTS_LOG_FILE = "events.json"

def _rotating(path: Path, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=MAX_LOG_SIZE_BYTES, backupCount=5, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler

class Logger:
    """
    Owns the `linkharvest` logger.

    The console only ever shows the message. Everything, including the
    structured fields passed to log(), goes to the files in log_dir.
    """

    _logger: Optional[logging.Logger] = None

    @classmethod
    def get_logger(cls) -> logging.Logger:
        if cls._logger is None:
            cls._logger = logging.getLogger(LOGGER_NAME)
            cls._logger.setLevel(logging.DEBUG)
        return cls._logger

    @classmethod
    def reset(cls) -> None:
        """Detach and close every handler installed by setup_logging."""
        logger = cls.get_logger()
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    @classmethod
    def setup_logging(cls, log_dir: Optional[Path] = None, verbose: bool = False) -> Optional[Path]:
        """Install console output and, when log_dir is set, the run log and JSON event log."""
        cls.reset()
        logger = cls.get_logger()

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(logging.DEBUG if verbose else logging.INFO)
        console.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console)

        if not log_dir:
            return None

        log_dir = Path(log_dir).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_rotating(
            log_dir / TEXT_LOG_FILE,
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        ))
        # Extra fields passed to log() end up as JSON keys
        logger.addHandler(_rotating(
            log_dir / EVENTS_LOG_FILE,
            JsonFormatter("%(asctime)s %(levelname)s %(message)s")
        ))
        return log_dir

def log(msg: str, level: str = "info", **extra: Any):
    """Log through the linkharvest logger; keyword arguments become structured fields."""
    logger = Logger.get_logger()
    log_func = getattr(logger, level.lower(), logger.info)
    log_func(msg, extra=extra)
