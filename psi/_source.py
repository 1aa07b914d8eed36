"""Wczytywanie źródła C# z pliku lub URL."""

from __future__ import annotations

from pathlib import Path

import requests

from psi import _config


def fetch_url(url: str) -> str:
    """Pobiera dokument źródłowy spod URL (timeout z PSI_HTTP_TIMEOUT)."""
    resp = requests.get(url, timeout=_config.http_timeout())
    resp.raise_for_status()
    resp.encoding = resp.encoding or _config.source_encoding()
    return resp.text


def load_source(path: str | None, url: str | None) -> str:
    """
    Tekst źródła z pliku albo z URL (dokładnie jedno z dwóch).

    Raises:
        ValueError:                    brak źródła albo podano oba
        OSError:                       błąd odczytu pliku
        requests.RequestException:     błąd pobierania
    """
    if (path is None) == (url is None):
        raise ValueError("Podaj plik albo --url (dokładnie jedno).")
    if url is not None:
        return fetch_url(url)
    return Path(path).read_text(encoding=_config.source_encoding())  # type: ignore[arg-type]
