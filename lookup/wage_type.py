"""
lookup/wage_type.py — skrypty rodzajów wynagrodzeń (value / result).

Numer rodzaju porównywany jako Decimal: tag "42.0" pasuje do zapytania 42.
Nieliczbowy numer w tagu zgłasza błąd dopiero wtedy, gdy tag jest porównywany
z zapytaniem (pozostałe wyszukiwania na tym samym źródle działają).
"""

from __future__ import annotations

from typing import TypeAlias

from decimal import Decimal

from script_model import (
    InvalidArgumentError,
    InvalidFieldValueError,
    SourceFrontEnd,
    WageTypeFunctionTag,
    WageTypeResultFunctionTag,
    WageTypeResultScriptTag,
    WageTypeScriptTag,
    WageTypeValueFunctionTag,
    WageTypeValueScriptTag,
    parse_decimal,
)

from .engine import ScriptCodeQuery, ScriptLookup, require_argument

WageTypeNumber: TypeAlias = Decimal | int | str


def parse_wage_type_number(value: WageTypeNumber) -> Decimal:
    """Decimal z numeru zapytania; InvalidArgumentError dla nieliczby / NaN / Inf."""
    if isinstance(value, bool):
        raise InvalidArgumentError("wage_type_number", "oczekiwano liczby")
    number = parse_decimal(str(value))
    if number is None:
        raise InvalidArgumentError("wage_type_number", f"'{value}' nie jest skończoną liczbą")
    return number


def tag_wage_type_number(tag: WageTypeScriptTag) -> Decimal:
    """Numer z tagu skryptu; InvalidFieldValueError, gdy tekst tagu nie jest liczbą."""
    number = tag.number
    if number is None:
        raise InvalidFieldValueError(
            "wage_type_number", tag.tag_name(), tag.wage_type_number,
            "oczekiwano liczby dziesiętnej",
        )
    return number


class WageTypeScriptParser:
    def __init__(self, front_end: SourceFrontEnd | None = None) -> None:
        self.lookup = ScriptLookup(front_end)

    def _get(
        self,
        query: ScriptCodeQuery,
        function_type: type[WageTypeFunctionTag],
        script_type: type[WageTypeScriptTag],
        regulation_name: str,
        number: WageTypeNumber,
    ) -> str | None:
        require_argument("regulation_name", regulation_name)
        wanted = parse_wage_type_number(number)
        return self.lookup.query(
            query, function_type, script_type,
            lambda tag: tag.regulation_name == regulation_name,
            lambda tag: tag_wage_type_number(tag) == wanted,
        )

    def get_wage_type_value_script(
        self, query: ScriptCodeQuery, regulation_name: str, wage_type_number: WageTypeNumber,
    ) -> str | None:
        return self._get(query, WageTypeValueFunctionTag, WageTypeValueScriptTag, regulation_name, wage_type_number)

    def get_wage_type_result_script(
        self, query: ScriptCodeQuery, regulation_name: str, wage_type_number: WageTypeNumber,
    ) -> str | None:
        return self._get(query, WageTypeResultFunctionTag, WageTypeResultScriptTag, regulation_name, wage_type_number)
