"""
Tagi skryptów — metadane metody (jednostki wywoływalnej) wewnątrz klasy.

Tag skryptu wskazuje konkretny cel w kategorii tagu funkcji klasy:
nazwę sprawy, parę spraw relacji, kolektor, numer rodzaju wynagrodzenia,
payrun albo raport. Każdy tag udostępnia klucz `script_key`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import ClassVar, TypeAlias

from .common import RELATION_KEY_SEPARATOR, FunctionCategory, FunctionType, require_fields
from .errors import InvalidFieldValueError


# ---------------------------------------------------------------------------
# Baza
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScriptTag:
    """Tag skryptu; pola kluczowe muszą być niepuste."""

    function_type:   ClassVar[FunctionType]
    category:        ClassVar[FunctionCategory]
    required_fields: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        require_fields(self, self.required_fields, self.tag_name())

    @classmethod
    def tag_name(cls) -> str:
        function_type = getattr(cls, "function_type", None)
        return function_type.script_tag_name if function_type else cls.__name__

    @property
    def script_key(self) -> str:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Case
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CaseScriptTag(ScriptTag):
    case_name: str

    category        = FunctionCategory.CASE
    required_fields = ("case_name",)

    @property
    def script_key(self) -> str:
        return self.case_name


@dataclass(frozen=True)
class CaseAvailableScriptTag(CaseScriptTag):
    function_type = FunctionType.CASE_AVAILABLE


@dataclass(frozen=True)
class CaseBuildScriptTag(CaseScriptTag):
    function_type = FunctionType.CASE_BUILD


@dataclass(frozen=True)
class CaseValidateScriptTag(CaseScriptTag):
    function_type = FunctionType.CASE_VALIDATE


# ---------------------------------------------------------------------------
# Case relation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CaseRelationScriptTag(ScriptTag):
    """
    Relacja spraw source → target.

    Sloty nie wchodzą do klucza (source:target), tylko do predykatu dopasowania.
    """
    source_case_name: str
    target_case_name: str
    source_case_slot: str | None = None
    target_case_slot: str | None = None

    category        = FunctionCategory.CASE_RELATION
    required_fields = ("source_case_name", "target_case_name")

    @property
    def script_key(self) -> str:
        return f"{self.source_case_name}{RELATION_KEY_SEPARATOR}{self.target_case_name}"


@dataclass(frozen=True)
class CaseRelationBuildScriptTag(CaseRelationScriptTag):
    function_type = FunctionType.CASE_RELATION_BUILD


@dataclass(frozen=True)
class CaseRelationValidateScriptTag(CaseRelationScriptTag):
    function_type = FunctionType.CASE_RELATION_VALIDATE


# ---------------------------------------------------------------------------
# Collector
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CollectorScriptTag(ScriptTag):
    collector_name: str

    category        = FunctionCategory.COLLECTOR
    required_fields = ("collector_name",)

    @property
    def script_key(self) -> str:
        return self.collector_name


@dataclass(frozen=True)
class CollectorStartScriptTag(CollectorScriptTag):
    function_type = FunctionType.COLLECTOR_START


@dataclass(frozen=True)
class CollectorApplyScriptTag(CollectorScriptTag):
    function_type = FunctionType.COLLECTOR_APPLY


@dataclass(frozen=True)
class CollectorEndScriptTag(CollectorScriptTag):
    function_type = FunctionType.COLLECTOR_END


# ---------------------------------------------------------------------------
# Wage type
# ---------------------------------------------------------------------------

def parse_decimal(text: str) -> Decimal | None:
    """Skończona liczba dziesiętna z napisu albo None (np. "42", "42.0", "4.2E1")."""
    try:
        text = text.strip()
    except AttributeError:
        return None
    # Decimal przyjmuje grupowanie cyfr ("4_2")
    if "_" in text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


@dataclass(frozen=True)
class WageTypeScriptTag(ScriptTag):
    """
    Numer rodzaju wynagrodzenia trzymany jako tekst, porównywany liczbowo.

    Tekst nie jest sprawdzany przy budowie tagu; błędny numer zgłasza dopiero
    wyszukiwanie skryptu rodzaju wynagrodzenia (lookup/wage_type.py).
    """
    wage_type_number: str

    category        = FunctionCategory.WAGE_TYPE
    required_fields = ("wage_type_number",)

    @property
    def number(self) -> Decimal | None:
        return parse_decimal(self.wage_type_number)

    @property
    def script_key(self) -> str:
        # 42.0 i 42 dają ten sam klucz
        number = self.number
        if number is None:
            return self.wage_type_number.strip()
        return format(number.normalize(), "f")


@dataclass(frozen=True)
class WageTypeValueScriptTag(WageTypeScriptTag):
    function_type = FunctionType.WAGE_TYPE_VALUE


@dataclass(frozen=True)
class WageTypeResultScriptTag(WageTypeScriptTag):
    function_type = FunctionType.WAGE_TYPE_RESULT


# ---------------------------------------------------------------------------
# Payrun
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PayrunScriptTag(ScriptTag):
    payrun_name: str

    category        = FunctionCategory.PAYRUN
    required_fields = ("payrun_name",)

    @property
    def script_key(self) -> str:
        return self.payrun_name


@dataclass(frozen=True)
class PayrunStartScriptTag(PayrunScriptTag):
    function_type = FunctionType.PAYRUN_START


@dataclass(frozen=True)
class PayrunEmployeeAvailableScriptTag(PayrunScriptTag):
    function_type = FunctionType.PAYRUN_EMPLOYEE_AVAILABLE


@dataclass(frozen=True)
class PayrunEmployeeStartScriptTag(PayrunScriptTag):
    function_type = FunctionType.PAYRUN_EMPLOYEE_START


@dataclass(frozen=True)
class PayrunWageTypeAvailableScriptTag(PayrunScriptTag):
    function_type = FunctionType.PAYRUN_WAGE_TYPE_AVAILABLE


@dataclass(frozen=True)
class PayrunEmployeeEndScriptTag(PayrunScriptTag):
    function_type = FunctionType.PAYRUN_EMPLOYEE_END


@dataclass(frozen=True)
class PayrunEndScriptTag(PayrunScriptTag):
    function_type = FunctionType.PAYRUN_END


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

# Pary (nazwa, wartość) w kolejności z JSON
ReportParameters: TypeAlias = tuple[tuple[str, str], ...]


def parse_report_parameters(text: str, declared_type: str = "ReportScript") -> dict[str, str]:
    """
    Parametry raportu z bloku JSON: płaski obiekt napis → napis.

    Przykład: '{"Year": "2024", "Month": "1"}' → {"Year": "2024", "Month": "1"}
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidFieldValueError("parameters", declared_type, text, f"błędny JSON: {e.msg}") from e
    if not isinstance(data, dict):
        raise InvalidFieldValueError("parameters", declared_type, text, "oczekiwano obiektu JSON")
    for key, value in data.items():
        if not isinstance(value, str):
            raise InvalidFieldValueError(
                "parameters", declared_type, text, f"wartość '{key}' nie jest napisem",
            )
    return data


@dataclass(frozen=True)
class ReportScriptTag(ScriptTag):
    report_name: str
    culture:     str | None = None
    parameters:  ReportParameters | None = None

    category        = FunctionCategory.REPORT
    required_fields = ("report_name",)

    def parameter_map(self) -> dict[str, str]:
        """Parametry jako słownik (kopia); pusty, gdy tag ich nie ma."""
        return dict(self.parameters or ())

    @property
    def script_key(self) -> str:
        return self.report_name


@dataclass(frozen=True)
class ReportBuildScriptTag(ReportScriptTag):
    function_type = FunctionType.REPORT_BUILD


@dataclass(frozen=True)
class ReportStartScriptTag(ReportScriptTag):
    function_type = FunctionType.REPORT_START


@dataclass(frozen=True)
class ReportEndScriptTag(ReportScriptTag):
    function_type = FunctionType.REPORT_END


# ---------------------------------------------------------------------------
# Konkretne typy w kolejności FunctionType
# ---------------------------------------------------------------------------

SCRIPT_TAG_TYPES: tuple[type[ScriptTag], ...] = (
    CaseAvailableScriptTag,
    CaseBuildScriptTag,
    CaseValidateScriptTag,
    CaseRelationBuildScriptTag,
    CaseRelationValidateScriptTag,
    CollectorStartScriptTag,
    CollectorApplyScriptTag,
    CollectorEndScriptTag,
    WageTypeValueScriptTag,
    WageTypeResultScriptTag,
    PayrunStartScriptTag,
    PayrunEmployeeAvailableScriptTag,
    PayrunEmployeeStartScriptTag,
    PayrunWageTypeAvailableScriptTag,
    PayrunEmployeeEndScriptTag,
    PayrunEndScriptTag,
    ReportBuildScriptTag,
    ReportStartScriptTag,
    ReportEndScriptTag,
)
