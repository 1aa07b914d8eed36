"""
scanner/normalizer.py — normalizacja tekstu ciała metody.

normalize_body():
  - Ciało w postaci bloku ("{ ... }") traci dokładnie jedną klamrę otwierającą
    z początku (wraz z następującymi po niej znakami '\\r', '\\n') oraz
    dokładnie jedną klamrę zamykającą z końca (wraz z białymi znakami wokół niej).
  - Klamry zagnieżdżonych bloków zostają, także gdy blok kończy metodę:
      "{\\n    if (a) {\\n        b();\\n    }\\n}" → "    if (a) {\\n        b();\\n    }"
  - Tekst, który nie zaczyna się od '{' (ciało już znormalizowane), traci
    tylko końcowe białe znaki.
  - Wcięcie pierwszej instrukcji zostaje bez zmian.
  - Operacja idempotentna: wynik nigdy nie zaczyna się od '{', o ile pierwszą
    instrukcją ciała nie jest goły blok "{ ... }".

Tekst musi być zgodny z treścią importowaną z JSON (porównywany i zapisywany dalej).
"""

from __future__ import annotations

_OPEN        = "{"
_CLOSE       = "}"
_LINE_BREAKS = "\r\n"


def normalize_body(body: str | None) -> str | None:
    """Instrukcje wewnątrz bloku metody; None dla pustego ciała."""
    if body is None or not body.strip():
        return None

    text = body.rstrip()
    if text.startswith(_OPEN):
        text = text[len(_OPEN):].lstrip(_LINE_BREAKS)
        if text.endswith(_CLOSE):
            text = text[:-len(_CLOSE)].rstrip()
    return text or None
