"""
script_model — model metadanych funkcji i skryptów payrolla.

Użycie:
  from script_model import FunctionType, CaseBuildFunctionTag, CaseBuildScriptTag, ...

Moduły:
  errors        — ErrorCode, ScriptIndexError i wyjątki pochodne
  common        — FunctionCategory, FunctionType, Identifier, walidacja pól
  function_tags — FunctionTag i konkretne tagi funkcji (klasy)
  script_tags   — ScriptTag i konkretne tagi skryptów (metody)
  source        — SourceTag, SourceCallable, SourceDeclaration, SourceTree

Nazwy tagów w dokumencie:
  "<FunctionType>Function" → tag funkcji  (np. CaseBuildFunction)
  "<FunctionType>Script"   → tag skryptu  (np. CaseBuildScript)
"""

from .errors import (
    ErrorCode,
    ScriptIndexError,
    InvalidArgumentError,
    MissingRequiredFieldError,
    InvalidFieldValueError,
    MissingArgumentError,
    MissingParameterError,
    UnsupportedTagError,
    UnsupportedScriptTagError,
    AmbiguousTagError,
    NoTaggedDeclarationsError,
)
from .common import (
    Identifier,
    FunctionCategory,
    FunctionType,
    RELATION_KEY_SEPARATOR,
)
from .function_tags import (
    FunctionTag,
    PayrollFunctionTag,
    RegulationFunctionTag,
    CaseFunctionTag,
    CaseAvailableFunctionTag,
    CaseChangeFunctionTag,
    CaseBuildFunctionTag,
    CaseValidateFunctionTag,
    CaseRelationFunctionTag,
    CaseRelationBuildFunctionTag,
    CaseRelationValidateFunctionTag,
    CollectorFunctionTag,
    CollectorStartFunctionTag,
    CollectorApplyFunctionTag,
    CollectorEndFunctionTag,
    WageTypeFunctionTag,
    WageTypeValueFunctionTag,
    WageTypeResultFunctionTag,
    PayrunFunctionTag,
    PayrunStartFunctionTag,
    PayrunEmployeeAvailableFunctionTag,
    PayrunEmployeeStartFunctionTag,
    PayrunWageTypeAvailableFunctionTag,
    PayrunEmployeeEndFunctionTag,
    PayrunEndFunctionTag,
    ReportFunctionTag,
    ReportBuildFunctionTag,
    ReportStartFunctionTag,
    ReportEndFunctionTag,
    FUNCTION_TAG_TYPES,
)
from .script_tags import (
    ScriptTag,
    CaseScriptTag,
    CaseAvailableScriptTag,
    CaseBuildScriptTag,
    CaseValidateScriptTag,
    CaseRelationScriptTag,
    CaseRelationBuildScriptTag,
    CaseRelationValidateScriptTag,
    CollectorScriptTag,
    CollectorStartScriptTag,
    CollectorApplyScriptTag,
    CollectorEndScriptTag,
    WageTypeScriptTag,
    WageTypeValueScriptTag,
    WageTypeResultScriptTag,
    PayrunScriptTag,
    PayrunStartScriptTag,
    PayrunEmployeeAvailableScriptTag,
    PayrunEmployeeStartScriptTag,
    PayrunWageTypeAvailableScriptTag,
    PayrunEmployeeEndScriptTag,
    PayrunEndScriptTag,
    ReportScriptTag,
    ReportBuildScriptTag,
    ReportStartScriptTag,
    ReportEndScriptTag,
    ReportParameters,
    SCRIPT_TAG_TYPES,
    parse_decimal,
    parse_report_parameters,
)
from .source import (
    SourceTag,
    SourceCallable,
    SourceDeclaration,
    SourceTree,
    SourceFrontEnd,
)

__all__ = [
    # errors
    "ErrorCode",
    "ScriptIndexError",
    "InvalidArgumentError",
    "MissingRequiredFieldError",
    "InvalidFieldValueError",
    "MissingArgumentError",
    "MissingParameterError",
    "UnsupportedTagError",
    "UnsupportedScriptTagError",
    "AmbiguousTagError",
    "NoTaggedDeclarationsError",
    # common
    "Identifier",
    "FunctionCategory",
    "FunctionType",
    "RELATION_KEY_SEPARATOR",
    # function tags
    "FunctionTag",
    "PayrollFunctionTag",
    "RegulationFunctionTag",
    "CaseFunctionTag",
    "CaseAvailableFunctionTag",
    "CaseChangeFunctionTag",
    "CaseBuildFunctionTag",
    "CaseValidateFunctionTag",
    "CaseRelationFunctionTag",
    "CaseRelationBuildFunctionTag",
    "CaseRelationValidateFunctionTag",
    "CollectorFunctionTag",
    "CollectorStartFunctionTag",
    "CollectorApplyFunctionTag",
    "CollectorEndFunctionTag",
    "WageTypeFunctionTag",
    "WageTypeValueFunctionTag",
    "WageTypeResultFunctionTag",
    "PayrunFunctionTag",
    "PayrunStartFunctionTag",
    "PayrunEmployeeAvailableFunctionTag",
    "PayrunEmployeeStartFunctionTag",
    "PayrunWageTypeAvailableFunctionTag",
    "PayrunEmployeeEndFunctionTag",
    "PayrunEndFunctionTag",
    "ReportFunctionTag",
    "ReportBuildFunctionTag",
    "ReportStartFunctionTag",
    "ReportEndFunctionTag",
    "FUNCTION_TAG_TYPES",
    # script tags
    "ScriptTag",
    "CaseScriptTag",
    "CaseAvailableScriptTag",
    "CaseBuildScriptTag",
    "CaseValidateScriptTag",
    "CaseRelationScriptTag",
    "CaseRelationBuildScriptTag",
    "CaseRelationValidateScriptTag",
    "CollectorScriptTag",
    "CollectorStartScriptTag",
    "CollectorApplyScriptTag",
    "CollectorEndScriptTag",
    "WageTypeScriptTag",
    "WageTypeValueScriptTag",
    "WageTypeResultScriptTag",
    "PayrunScriptTag",
    "PayrunStartScriptTag",
    "PayrunEmployeeAvailableScriptTag",
    "PayrunEmployeeStartScriptTag",
    "PayrunWageTypeAvailableScriptTag",
    "PayrunEmployeeEndScriptTag",
    "PayrunEndScriptTag",
    "ReportScriptTag",
    "ReportBuildScriptTag",
    "ReportStartScriptTag",
    "ReportEndScriptTag",
    "ReportParameters",
    "SCRIPT_TAG_TYPES",
    "parse_decimal",
    "parse_report_parameters",
    # source
    "SourceTag",
    "SourceCallable",
    "SourceDeclaration",
    "SourceTree",
    "SourceFrontEnd",
]
