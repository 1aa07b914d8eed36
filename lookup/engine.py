"""
lookup/engine.py — silnik wyszukiwania ciała skryptu.

Dopasowanie dwupoziomowe:
  1. jednostka (klasa): tenant ==, typ tagu funkcji, predykat funkcji
  2. metoda:            typ tagu skryptu, predykat skryptu, niepuste ciało

Pierwsze trafienie w kolejności dokumentu wygrywa. Brak trafienia → None.
Każde wywołanie skanuje źródło od nowa (bez cache).
"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from script_model import FunctionTag, InvalidArgumentError, ScriptTag, SourceFrontEnd
from script_model.common import is_blank
from scanner import normalize_body, scan_source

FunctionPredicate: TypeAlias = Callable[[FunctionTag], bool]
ScriptPredicate: TypeAlias   = Callable[[ScriptTag], bool]


@dataclass(frozen=True)
class ScriptCodeQuery:
    """Wspólna część zapytania każdej kategorii: tenant + tekst źródła."""
    tenant_identifier: str
    source_code:       str


def require_argument(name: str, value: str | None) -> str:
    """Zwraca wartość albo rzuca InvalidArgumentError dla pustej."""
    if is_blank(value):
        raise InvalidArgumentError(name)
    return value  # type: ignore[return-value]


class ScriptLookup:
    """Wyszukiwanie skryptu po typie i predykatach; front_end domyślnie parsuje C#."""

    def __init__(self, front_end: SourceFrontEnd | None = None) -> None:
        self.front_end = front_end

    def get_script(
        self,
        tenant_identifier:  str,
        source_text:        str,
        function_type:      type[FunctionTag],
        script_type:        type[ScriptTag],
        function_predicate: FunctionPredicate,
        script_predicate:   ScriptPredicate,
    ) -> str | None:
        """
        Znormalizowane ciało pierwszej pasującej metody albo None.

        Raises:
            InvalidArgumentError: pusty tenant_identifier / source_text
            ScriptIndexError:     błędy skanera i fabryki tagów (bez zmian)
        """
        require_argument("tenant_identifier", tenant_identifier)
        require_argument("source_text", source_text)

        for unit in scan_source(source_text, self.front_end):
            if unit.tenant_identifier != tenant_identifier:
                continue
            if not isinstance(unit.function_tag, function_type):
                continue
            if not function_predicate(unit.function_tag):
                continue

            for method, script_tag in unit.scripts.items():
                if not isinstance(script_tag, script_type) or not script_predicate(script_tag):
                    continue
                body = normalize_body(method.body)
                if body is None:
                    logger.debug(f"Pominięto puste ciało {unit.name}.{method.name}")
                    continue
                logger.debug(
                    f"Dopasowano {unit.name}.{method.name} "
                    f"({script_type.tag_name()}, klucz={script_tag.script_key})"
                )
                return body

        return None

    def query(
        self,
        query:              ScriptCodeQuery,
        function_type:      type[FunctionTag],
        script_type:        type[ScriptTag],
        function_predicate: FunctionPredicate,
        script_predicate:   ScriptPredicate,
    ) -> str | None:
        return self.get_script(
            query.tenant_identifier, query.source_code,
            function_type, script_type,
            function_predicate, script_predicate,
        )
