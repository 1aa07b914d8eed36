"""
lookup/case_relation.py — skrypty relacji przypadków (build / validate).

Sloty porównywane dokładnie (==), również gdy są None:
  zapytanie bez slotu pasuje tylko do tagu bez slotu.
"""

from __future__ import annotations

from script_model import (
    CaseRelationBuildFunctionTag,
    CaseRelationBuildScriptTag,
    CaseRelationFunctionTag,
    CaseRelationScriptTag,
    CaseRelationValidateFunctionTag,
    CaseRelationValidateScriptTag,
    SourceFrontEnd,
)

from .engine import ScriptCodeQuery, ScriptLookup, require_argument


class CaseRelationScriptParser:
    def __init__(self, front_end: SourceFrontEnd | None = None) -> None:
        self.lookup = ScriptLookup(front_end)

    def _get(
        self,
        query: ScriptCodeQuery,
        function_type: type[CaseRelationFunctionTag],
        script_type: type[CaseRelationScriptTag],
        regulation_name: str,
        source_case_name: str,
        target_case_name: str,
        source_case_slot: str | None,
        target_case_slot: str | None,
    ) -> str | None:
        require_argument("regulation_name", regulation_name)
        require_argument("source_case_name", source_case_name)
        require_argument("target_case_name", target_case_name)

        def matches(tag: CaseRelationScriptTag) -> bool:
            return (
                tag.source_case_name == source_case_name
                and tag.target_case_name == target_case_name
                and tag.source_case_slot == source_case_slot
                and tag.target_case_slot == target_case_slot
            )

        return self.lookup.query(
            query, function_type, script_type,
            lambda tag: tag.regulation_name == regulation_name,
            matches,
        )

    def get_case_relation_build_script(
        self,
        query: ScriptCodeQuery,
        regulation_name: str,
        source_case_name: str,
        target_case_name: str,
        source_case_slot: str | None = None,
        target_case_slot: str | None = None,
    ) -> str | None:
        return self._get(
            query, CaseRelationBuildFunctionTag, CaseRelationBuildScriptTag,
            regulation_name, source_case_name, target_case_name,
            source_case_slot, target_case_slot,
        )

    def get_case_relation_validate_script(
        self,
        query: ScriptCodeQuery,
        regulation_name: str,
        source_case_name: str,
        target_case_name: str,
        source_case_slot: str | None = None,
        target_case_slot: str | None = None,
    ) -> str | None:
        return self._get(
            query, CaseRelationValidateFunctionTag, CaseRelationValidateScriptTag,
            regulation_name, source_case_name, target_case_name,
            source_case_slot, target_case_slot,
        )
