"""
lookup/payrun.py — skrypty przebiegu płacowego.

Tag funkcji nie jest zawężany (predykat zawsze prawdziwy); tenant sprawdza silnik.
Dopasowanie tylko po payrunName tagu skryptu.
"""

from __future__ import annotations

from script_model import (
    PayrunEmployeeAvailableFunctionTag,
    PayrunEmployeeAvailableScriptTag,
    PayrunEmployeeEndFunctionTag,
    PayrunEmployeeEndScriptTag,
    PayrunEmployeeStartFunctionTag,
    PayrunEmployeeStartScriptTag,
    PayrunEndFunctionTag,
    PayrunEndScriptTag,
    PayrunFunctionTag,
    PayrunScriptTag,
    PayrunStartFunctionTag,
    PayrunStartScriptTag,
    PayrunWageTypeAvailableFunctionTag,
    PayrunWageTypeAvailableScriptTag,
    SourceFrontEnd,
)

from .engine import ScriptCodeQuery, ScriptLookup, require_argument


class PayrunScriptParser:
    def __init__(self, front_end: SourceFrontEnd | None = None) -> None:
        self.lookup = ScriptLookup(front_end)

    def _get(
        self,
        query: ScriptCodeQuery,
        function_type: type[PayrunFunctionTag],
        script_type: type[PayrunScriptTag],
        payrun_name: str,
    ) -> str | None:
        require_argument("payrun_name", payrun_name)
        return self.lookup.query(
            query, function_type, script_type,
            lambda tag: True,
            lambda tag: tag.payrun_name == payrun_name,
        )

    def get_payrun_start_script(self, query: ScriptCodeQuery, payrun_name: str) -> str | None:
        return self._get(query, PayrunStartFunctionTag, PayrunStartScriptTag, payrun_name)

    def get_payrun_employee_available_script(self, query: ScriptCodeQuery, payrun_name: str) -> str | None:
        return self._get(query, PayrunEmployeeAvailableFunctionTag, PayrunEmployeeAvailableScriptTag, payrun_name)

    def get_payrun_wage_type_available_script(self, query: ScriptCodeQuery, payrun_name: str) -> str | None:
        return self._get(query, PayrunWageTypeAvailableFunctionTag, PayrunWageTypeAvailableScriptTag, payrun_name)

    def get_payrun_employee_start_script(self, query: ScriptCodeQuery, payrun_name: str) -> str | None:
        return self._get(query, PayrunEmployeeStartFunctionTag, PayrunEmployeeStartScriptTag, payrun_name)

    def get_payrun_employee_end_script(self, query: ScriptCodeQuery, payrun_name: str) -> str | None:
        return self._get(query, PayrunEmployeeEndFunctionTag, PayrunEmployeeEndScriptTag, payrun_name)

    def get_payrun_end_script(self, query: ScriptCodeQuery, payrun_name: str) -> str | None:
        return self._get(query, PayrunEndFunctionTag, PayrunEndScriptTag, payrun_name)
