"""Konfiguracja CLI — zmienne środowiskowe z wartościami domyślnymi."""

from __future__ import annotations

import os


def default_tenant() -> str | None:
    return os.getenv("PSI_TENANT") or None


def log_level() -> str:
    return os.getenv("PSI_LOG_LEVEL", "WARNING").upper()


def log_file() -> str | None:
    return os.getenv("PSI_LOG_FILE") or None


def source_encoding() -> str:
    return os.getenv("PSI_ENCODING", "utf-8")


def http_timeout() -> float:
    return float(os.getenv("PSI_HTTP_TIMEOUT", "30"))
