"""
script_model/source.py — model drzewa deklaracji dostarczanego przez parser źródła.

Kontrakt parsera (front endu):
  - lista deklaracji najwyższego poziomu w kolejności dokumentu,
  - dla deklaracji: tagi (nazwa + nazwane argumenty) i metody,
  - dla metody: tagi i surowy tekst ciała (blok z klamrami).

Rdzeń nie introspektuje typów, konsumuje wyłącznie te rekordy.
"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceTag:
    name:      str                          # np. "CaseBuildFunction" (bez sufiksu Attribute)
    arguments: tuple[tuple[str, str], ...]  # tylko argumenty nazwane, w kolejności źródła

    def argument_map(self) -> dict[str, str]:
        """Nazwane argumenty z niepustą wartością; przy powtórzeniu wygrywa ostatni."""
        return {name: value for name, value in self.arguments if name.strip() and value.strip()}


@dataclass(frozen=True)
class SourceCallable:
    name:   str
    tags:   tuple[SourceTag, ...]
    body:   str | None   # surowy blok "{ ... }"; None dla ciała wyrażeniowego
    line:   int          # 1-based
    offset: int          # offset bajtowy w dokumencie, rozróżnia metody o tej samej nazwie


@dataclass(frozen=True)
class SourceDeclaration:
    name:      str
    tags:      tuple[SourceTag, ...]
    callables: tuple[SourceCallable, ...]
    line:      int


# Deklaracje w kolejności dokumentu.
SourceTree: TypeAlias = list[SourceDeclaration]

# Front end: tekst źródła → drzewo deklaracji.
SourceFrontEnd: TypeAlias = Callable[[str], SourceTree]
