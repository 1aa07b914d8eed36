"""
Wspólne typy pierwotne używane przez function_tags i script_tags.

FunctionCategory — kategoria biznesowa (case, wage_type, ...)
FunctionType     — konkretna funkcja w kategorii (CaseBuild, WageTypeValue, ...);
                   wartość enuma jest rdzeniem nazwy tagu:
                   "<FunctionType>Function" dla klas, "<FunctionType>Script" dla metod.
"""

from __future__ import annotations

from typing import TypeAlias

from enum import StrEnum

from .errors import MissingRequiredFieldError

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Identyfikator tenanta / użytkownika / pracownika, porównywany ordynalnie
Identifier: TypeAlias = str

# Separator klucza relacji spraw: "<source>:<target>"
RELATION_KEY_SEPARATOR = ":"

FUNCTION_TAG_SUFFIX = "Function"
SCRIPT_TAG_SUFFIX   = "Script"


# ---------------------------------------------------------------------------
# Kategorie i typy funkcji
# ---------------------------------------------------------------------------

class FunctionCategory(StrEnum):
    """Kategoria biznesowa tagu funkcji."""
    CASE          = "case"
    CASE_RELATION = "case_relation"
    COLLECTOR     = "collector"
    WAGE_TYPE     = "wage_type"
    PAYRUN        = "payrun"
    REPORT        = "report"


class FunctionType(StrEnum):
    """Konkretna funkcja skryptowa."""
    # case
    CASE_AVAILABLE              = "CaseAvailable"
    CASE_BUILD                  = "CaseBuild"
    CASE_VALIDATE               = "CaseValidate"
    # case relation
    CASE_RELATION_BUILD         = "CaseRelationBuild"
    CASE_RELATION_VALIDATE      = "CaseRelationValidate"
    # collector
    COLLECTOR_START             = "CollectorStart"
    COLLECTOR_APPLY             = "CollectorApply"
    COLLECTOR_END               = "CollectorEnd"
    # wage type
    WAGE_TYPE_VALUE             = "WageTypeValue"
    WAGE_TYPE_RESULT            = "WageTypeResult"
    # payrun
    PAYRUN_START                = "PayrunStart"
    PAYRUN_EMPLOYEE_AVAILABLE   = "PayrunEmployeeAvailable"
    PAYRUN_EMPLOYEE_START       = "PayrunEmployeeStart"
    PAYRUN_WAGE_TYPE_AVAILABLE  = "PayrunWageTypeAvailable"
    PAYRUN_EMPLOYEE_END         = "PayrunEmployeeEnd"
    PAYRUN_END                  = "PayrunEnd"
    # report
    REPORT_BUILD                = "ReportBuild"
    REPORT_START                = "ReportStart"
    REPORT_END                  = "ReportEnd"

    @property
    def category(self) -> FunctionCategory:
        return FUNCTION_CATEGORIES[self]

    @property
    def function_tag_name(self) -> str:
        return f"{self.value}{FUNCTION_TAG_SUFFIX}"

    @property
    def script_tag_name(self) -> str:
        return f"{self.value}{SCRIPT_TAG_SUFFIX}"


FUNCTION_CATEGORIES: dict[FunctionType, FunctionCategory] = {
    FunctionType.CASE_AVAILABLE:             FunctionCategory.CASE,
    FunctionType.CASE_BUILD:                 FunctionCategory.CASE,
    FunctionType.CASE_VALIDATE:              FunctionCategory.CASE,
    FunctionType.CASE_RELATION_BUILD:        FunctionCategory.CASE_RELATION,
    FunctionType.CASE_RELATION_VALIDATE:     FunctionCategory.CASE_RELATION,
    FunctionType.COLLECTOR_START:            FunctionCategory.COLLECTOR,
    FunctionType.COLLECTOR_APPLY:            FunctionCategory.COLLECTOR,
    FunctionType.COLLECTOR_END:              FunctionCategory.COLLECTOR,
    FunctionType.WAGE_TYPE_VALUE:            FunctionCategory.WAGE_TYPE,
    FunctionType.WAGE_TYPE_RESULT:           FunctionCategory.WAGE_TYPE,
    FunctionType.PAYRUN_START:               FunctionCategory.PAYRUN,
    FunctionType.PAYRUN_EMPLOYEE_AVAILABLE:  FunctionCategory.PAYRUN,
    FunctionType.PAYRUN_EMPLOYEE_START:      FunctionCategory.PAYRUN,
    FunctionType.PAYRUN_WAGE_TYPE_AVAILABLE: FunctionCategory.PAYRUN,
    FunctionType.PAYRUN_EMPLOYEE_END:        FunctionCategory.PAYRUN,
    FunctionType.PAYRUN_END:                 FunctionCategory.PAYRUN,
    FunctionType.REPORT_BUILD:               FunctionCategory.REPORT,
    FunctionType.REPORT_START:               FunctionCategory.REPORT,
    FunctionType.REPORT_END:                 FunctionCategory.REPORT,
}


# ---------------------------------------------------------------------------
# Walidacja pól
# ---------------------------------------------------------------------------

def is_blank(value: object) -> bool:
    """True dla None, pustego napisu i napisu z samych białych znaków."""
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(tag: object, field_names: tuple[str, ...], declared_type: str) -> None:
    """Rzuca MissingRequiredFieldError dla pierwszego pustego pola z listy."""
    for name in field_names:
        if is_blank(getattr(tag, name)):
            raise MissingRequiredFieldError(name, declared_type)
