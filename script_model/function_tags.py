"""
Tagi funkcji — metadane klasy (deklaracji najwyższego poziomu).

Hierarchia:
  FunctionTag                  tenant_identifier, user_identifier
  ├─ PayrollFunctionTag        + employee_identifier, payroll_name
  │  ├─ RegulationFunctionTag  + regulation_name
  │  │  ├─ CaseFunctionTag          → CaseAvailable / CaseBuild / CaseValidate
  │  │  ├─ CaseRelationFunctionTag  → CaseRelationBuild / CaseRelationValidate
  │  │  ├─ CollectorFunctionTag     → CollectorStart / CollectorApply / CollectorEnd
  │  │  └─ WageTypeFunctionTag      → WageTypeValue / WageTypeResult
  │  └─ PayrunFunctionTag      + payrun_name  → PayrunStart ... PayrunEnd
  └─ ReportFunctionTag         + regulation_name → ReportBuild / ReportStart / ReportEnd

Walidacja wyłącznie w konstruktorze: każde pole z `required_fields`
musi być niepuste, inaczej MissingRequiredFieldError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .common import FunctionCategory, FunctionType, Identifier, require_fields


# ---------------------------------------------------------------------------
# Bazy abstrakcyjne
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FunctionTag:
    """Tag funkcji: kto (tenant, użytkownik) i jaka funkcja biznesowa."""
    tenant_identifier: Identifier
    user_identifier:   Identifier

    function_type:   ClassVar[FunctionType]
    category:        ClassVar[FunctionCategory]
    required_fields: ClassVar[tuple[str, ...]] = ("tenant_identifier", "user_identifier")

    def __post_init__(self) -> None:
        require_fields(self, self.required_fields, self.tag_name())

    @classmethod
    def tag_name(cls) -> str:
        function_type = getattr(cls, "function_type", None)
        return function_type.function_tag_name if function_type else cls.__name__


@dataclass(frozen=True)
class PayrollFunctionTag(FunctionTag):
    employee_identifier: Identifier
    payroll_name:        str

    required_fields = FunctionTag.required_fields + ("employee_identifier", "payroll_name")


@dataclass(frozen=True)
class RegulationFunctionTag(PayrollFunctionTag):
    regulation_name: str

    required_fields = PayrollFunctionTag.required_fields + ("regulation_name",)


# ---------------------------------------------------------------------------
# Case
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CaseFunctionTag(RegulationFunctionTag):
    category = FunctionCategory.CASE


@dataclass(frozen=True)
class CaseAvailableFunctionTag(CaseFunctionTag):
    function_type = FunctionType.CASE_AVAILABLE


@dataclass(frozen=True)
class CaseChangeFunctionTag(CaseFunctionTag):
    """Wspólna baza funkcji zmiany sprawy (build + validate)."""


@dataclass(frozen=True)
class CaseBuildFunctionTag(CaseChangeFunctionTag):
    function_type = FunctionType.CASE_BUILD


@dataclass(frozen=True)
class CaseValidateFunctionTag(CaseChangeFunctionTag):
    function_type = FunctionType.CASE_VALIDATE


# ---------------------------------------------------------------------------
# Case relation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CaseRelationFunctionTag(RegulationFunctionTag):
    category = FunctionCategory.CASE_RELATION


@dataclass(frozen=True)
class CaseRelationBuildFunctionTag(CaseRelationFunctionTag):
    function_type = FunctionType.CASE_RELATION_BUILD


@dataclass(frozen=True)
class CaseRelationValidateFunctionTag(CaseRelationFunctionTag):
    function_type = FunctionType.CASE_RELATION_VALIDATE


# ---------------------------------------------------------------------------
# Collector
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CollectorFunctionTag(RegulationFunctionTag):
    category = FunctionCategory.COLLECTOR


@dataclass(frozen=True)
class CollectorStartFunctionTag(CollectorFunctionTag):
    function_type = FunctionType.COLLECTOR_START


@dataclass(frozen=True)
class CollectorApplyFunctionTag(CollectorFunctionTag):
    function_type = FunctionType.COLLECTOR_APPLY


@dataclass(frozen=True)
class CollectorEndFunctionTag(CollectorFunctionTag):
    function_type = FunctionType.COLLECTOR_END


# ---------------------------------------------------------------------------
# Wage type
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WageTypeFunctionTag(RegulationFunctionTag):
    category = FunctionCategory.WAGE_TYPE


@dataclass(frozen=True)
class WageTypeValueFunctionTag(WageTypeFunctionTag):
    function_type = FunctionType.WAGE_TYPE_VALUE


@dataclass(frozen=True)
class WageTypeResultFunctionTag(WageTypeFunctionTag):
    function_type = FunctionType.WAGE_TYPE_RESULT


# ---------------------------------------------------------------------------
# Payrun (bez regulacji)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PayrunFunctionTag(PayrollFunctionTag):
    payrun_name: str

    category        = FunctionCategory.PAYRUN
    required_fields = PayrollFunctionTag.required_fields + ("payrun_name",)


@dataclass(frozen=True)
class PayrunStartFunctionTag(PayrunFunctionTag):
    function_type = FunctionType.PAYRUN_START


@dataclass(frozen=True)
class PayrunEmployeeAvailableFunctionTag(PayrunFunctionTag):
    function_type = FunctionType.PAYRUN_EMPLOYEE_AVAILABLE


@dataclass(frozen=True)
class PayrunEmployeeStartFunctionTag(PayrunFunctionTag):
    function_type = FunctionType.PAYRUN_EMPLOYEE_START


@dataclass(frozen=True)
class PayrunWageTypeAvailableFunctionTag(PayrunFunctionTag):
    function_type = FunctionType.PAYRUN_WAGE_TYPE_AVAILABLE


@dataclass(frozen=True)
class PayrunEmployeeEndFunctionTag(PayrunFunctionTag):
    function_type = FunctionType.PAYRUN_EMPLOYEE_END


@dataclass(frozen=True)
class PayrunEndFunctionTag(PayrunFunctionTag):
    function_type = FunctionType.PAYRUN_END


# ---------------------------------------------------------------------------
# Report (tylko regulacja, bez pracownika i payrolla)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReportFunctionTag(FunctionTag):
    regulation_name: str

    category        = FunctionCategory.REPORT
    required_fields = FunctionTag.required_fields + ("regulation_name",)


@dataclass(frozen=True)
class ReportBuildFunctionTag(ReportFunctionTag):
    function_type = FunctionType.REPORT_BUILD


@dataclass(frozen=True)
class ReportStartFunctionTag(ReportFunctionTag):
    function_type = FunctionType.REPORT_START


@dataclass(frozen=True)
class ReportEndFunctionTag(ReportFunctionTag):
    function_type = FunctionType.REPORT_END


# ---------------------------------------------------------------------------
# Konkretne typy w kolejności FunctionType
# ---------------------------------------------------------------------------

FUNCTION_TAG_TYPES: tuple[type[FunctionTag], ...] = (
    CaseAvailableFunctionTag,
    CaseBuildFunctionTag,
    CaseValidateFunctionTag,
    CaseRelationBuildFunctionTag,
    CaseRelationValidateFunctionTag,
    CollectorStartFunctionTag,
    CollectorApplyFunctionTag,
    CollectorEndFunctionTag,
    WageTypeValueFunctionTag,
    WageTypeResultFunctionTag,
    PayrunStartFunctionTag,
    PayrunEmployeeAvailableFunctionTag,
    PayrunEmployeeStartFunctionTag,
    PayrunWageTypeAvailableFunctionTag,
    PayrunEmployeeEndFunctionTag,
    PayrunEndFunctionTag,
    ReportBuildFunctionTag,
    ReportStartFunctionTag,
    ReportEndFunctionTag,
)
