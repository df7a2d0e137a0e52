import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from app.config import Settings, settings as default_settings


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == 'json':
        return JsonFormatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s %(pathname)s %(lineno)d %(funcName)s',
            rename_fields={'levelname': 'level', 'asctime': 'timestamp'},
            datefmt='%Y-%m-%dT%H:%M:%S'
        )
    return logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure application logging with structured JSON or text format."""
    settings = settings or default_settings
    level = getattr(logging, settings.log_level)
    formatter = _build_formatter(settings.log_format)

    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.enable_log_rotation:
        log_path = Path(settings.log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # 10MB per file, keep 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('google_genai').setLevel(logging.WARNING)

    logger.info(
        f"Logging configured: level={settings.log_level}, "
        f"format={settings.log_format}, rotation={settings.enable_log_rotation}"
    )
