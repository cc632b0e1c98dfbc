"""Unified cdmiqos logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home_dir: Path | None = None, level: str = "INFO") -> None:
    """Attach a rotating file handler to the ``cdmiqos`` logger.

    Args:
        home_dir: cdmiqos home directory. If None, derived from ``CDMIQOS_HOME``.
        level: Logging level name ("DEBUG", "INFO", "WARN", "ERROR").
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home_dir is None:
        from ..config.get_home_dir import get_home_dir

        home_dir = get_home_dir()

    home_dir.mkdir(parents=True, exist_ok=True)
    log_file = home_dir / "cdmiqos.log"

    root_logger = logging.getLogger("cdmiqos")
    root_logger.setLevel(logging.WARNING if level == "WARN" else getattr(logging, level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    _CONFIGURED = True
