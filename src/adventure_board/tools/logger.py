# src/adventure_board/tools/logger.py

import logging
import logging.config
from typing import Optional, Tuple
from pathlib import Path

from adventure_board.config import settings


ROOT_LOGGER = "adventure_board"


class Logger:
    """Per-application rotating file + stdout logging.

    Every application gets ``<log_dir>/<application>.log`` and a logger named
    ``adventure_board.<application>``. The ``api`` application configures the
    package root and uvicorn instead, and its config dict is what ``run()``
    hands to uvicorn. Configuring an application twice returns the existing
    logger without reapplying its config.
    """

    MAX_BYTES = 1 * 1024 * 1024  # 1 MB
    BACKUP_COUNT = 16

    _configured: dict[str, dict] = {}

    def __init__(self, log_dir: Optional[str] = None):
        self._path = Path(log_dir or settings.LOG_DIR).resolve()
        self._path.mkdir(parents=True, exist_ok=True)

    def create(
            self,
            application: str,
            file_name: str = None,
            logger_name: str = None,
            logging_level: str = None,
            config_only: bool = False
    ) -> Tuple[Optional[logging.Logger], dict]:
        if application == "api":
            app_names = ["uvicorn", ROOT_LOGGER]
        else:
            app_names = [f"{ROOT_LOGGER}.{application}"]
        name = logger_name if logger_name else app_names[-1]

        config_dict = self._configured.get(application)
        if config_dict is None:
            config_dict = self._config(
                file_path=self._path / f"{file_name if file_name else application}.log",
                app_names=app_names,
                logging_level=(logging_level or settings.LOG_LEVEL).upper(),
            )
            if config_only:
                return None, config_dict
            logging.config.dictConfig(config_dict)
            self._configured[application] = config_dict
        elif config_only:
            return None, config_dict

        return logging.getLogger(name), config_dict

    def _config(self, file_path, app_names, logging_level):
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {
                "file": {
                    "class": "logging.handlers.RotatingFileHandler",
                    "level": logging_level,
                    "maxBytes": self.MAX_BYTES,
                    "backupCount": self.BACKUP_COUNT,
                    "filename": str(file_path),
                    "formatter": "default",
                },
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                app: {
                    "handlers": ["file", "console"],
                    "level": logging_level,
                    # each application writes to its own file only
                    "propagate": app == "uvicorn",
                } for app in app_names
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                }
            }
        }
