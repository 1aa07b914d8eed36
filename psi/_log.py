"""Konfiguracja loguru dla CLI: stderr + opcjonalny plik z rotacją."""

from __future__ import annotations

import sys

from loguru import logger

from psi import _config

_CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
_FILE_FORMAT    = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str | None = None, log_file: str | None = None) -> None:
    """Zastępuje domyślny handler loguru; poziom i plik domyślnie ze zmiennych PSI_*."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=_CONSOLE_FORMAT,
        level=level or _config.log_level(),
    )

    path = log_file or _config.log_file()
    if path:
        logger.add(
            path,
            rotation="10 MB",
            retention="1 week",
            format=_FILE_FORMAT,
            level="DEBUG",
            encoding="utf-8",
        )
