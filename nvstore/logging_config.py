from __future__ import annotations

"""Central logging configuration for applications embedding nvstore.

Import and call :func:`setup_logging` at application start-up. The library
itself only creates module loggers and never configures handlers on import.
"""

import logging
import logging.config
import os
from typing import Optional

from nvstore.config import ConfigManager

__all__ = ["setup_logging"]

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: Optional[str] = None) -> None:
    """Configure logging from the ``logging`` YAML section.

    Args:
        log_dir: Directory for the log file; defaults to ``$NVSTORE_LOG_DIR``
            or ``logs``.
    """
    log_dir = log_dir or os.environ.get("NVSTORE_LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "nvstore.log")

    try:
        logging_config = ConfigManager().get_logging_config()

        if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
            if "handlers" in logging_config and "file" in logging_config["handlers"]:
                logging_config["handlers"]["file"]["filename"] = log_file

            logging.config.dictConfig(logging_config)
            logging.getLogger("nvstore").debug("Logging initialised from config files")
        else:
            _setup_minimal_logging()
    except (ValueError, TypeError, AttributeError, ImportError, OSError) as exc:
        # dictConfig reports a bad schema as ValueError and friends
        print(f"Error loading logging config: {exc}")
        _setup_minimal_logging()

    _apply_debug_overrides()


def _setup_minimal_logging() -> None:
    """Set up console-only logging when config is unavailable."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': _FORMAT,
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'INFO',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }

    logging.config.dictConfig(minimal_config)
    logging.getLogger("nvstore").warning("Logging initialised with minimal fallback")


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    ``NVSTORE_DEBUG_MODULES=nvstore.core.codec,nvstore.core.store`` switches
    the listed loggers to DEBUG.
    """
    extra_modules = os.environ.get('NVSTORE_DEBUG_MODULES', '').strip()
    targets = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
