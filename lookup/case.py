"""lookup/case.py — skrypty przypadków (available / build / validate)."""

from __future__ import annotations

from script_model import (
    CaseAvailableFunctionTag,
    CaseAvailableScriptTag,
    CaseBuildFunctionTag,
    CaseBuildScriptTag,
    CaseFunctionTag,
    CaseScriptTag,
    CaseValidateFunctionTag,
    CaseValidateScriptTag,
    SourceFrontEnd,
)

from .engine import ScriptCodeQuery, ScriptLookup, require_argument


class CaseScriptParser:
    def __init__(self, front_end: SourceFrontEnd | None = None) -> None:
        self.lookup = ScriptLookup(front_end)

    def _get(
        self,
        query: ScriptCodeQuery,
        function_type: type[CaseFunctionTag],
        script_type: type[CaseScriptTag],
        regulation_name: str,
        case_name: str,
    ) -> str | None:
        require_argument("regulation_name", regulation_name)
        require_argument("case_name", case_name)
        return self.lookup.query(
            query, function_type, script_type,
            lambda tag: tag.regulation_name == regulation_name,
            lambda tag: tag.case_name == case_name,
        )

    def get_case_available_script(self, query: ScriptCodeQuery, regulation_name: str, case_name: str) -> str | None:
        return self._get(query, CaseAvailableFunctionTag, CaseAvailableScriptTag, regulation_name, case_name)

    def get_case_build_script(self, query: ScriptCodeQuery, regulation_name: str, case_name: str) -> str | None:
        return self._get(query, CaseBuildFunctionTag, CaseBuildScriptTag, regulation_name, case_name)

    def get_case_validate_script(self, query: ScriptCodeQuery, regulation_name: str, case_name: str) -> str | None:
        return self._get(query, CaseValidateFunctionTag, CaseValidateScriptTag, regulation_name, case_name)
