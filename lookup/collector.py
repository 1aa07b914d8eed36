"""lookup/collector.py — skrypty kolektorów (start / apply / end)."""

from __future__ import annotations

from script_model import (
    CollectorApplyFunctionTag,
    CollectorApplyScriptTag,
    CollectorEndFunctionTag,
    CollectorEndScriptTag,
    CollectorFunctionTag,
    CollectorScriptTag,
    CollectorStartFunctionTag,
    CollectorStartScriptTag,
    SourceFrontEnd,
)

from .engine import ScriptCodeQuery, ScriptLookup, require_argument


class CollectorScriptParser:
    def __init__(self, front_end: SourceFrontEnd | None = None) -> None:
        self.lookup = ScriptLookup(front_end)

    def _get(
        self,
        query: ScriptCodeQuery,
        function_type: type[CollectorFunctionTag],
        script_type: type[CollectorScriptTag],
        regulation_name: str,
        collector_name: str,
    ) -> str | None:
        require_argument("regulation_name", regulation_name)
        require_argument("collector_name", collector_name)
        return self.lookup.query(
            query, function_type, script_type,
            lambda tag: tag.regulation_name == regulation_name,
            lambda tag: tag.collector_name == collector_name,
        )

    def get_collector_start_script(self, query: ScriptCodeQuery, regulation_name: str, collector_name: str) -> str | None:
        return self._get(query, CollectorStartFunctionTag, CollectorStartScriptTag, regulation_name, collector_name)

    def get_collector_apply_script(self, query: ScriptCodeQuery, regulation_name: str, collector_name: str) -> str | None:
        return self._get(query, CollectorApplyFunctionTag, CollectorApplyScriptTag, regulation_name, collector_name)

    def get_collector_end_script(self, query: ScriptCodeQuery, regulation_name: str, collector_name: str) -> str | None:
        return self._get(query, CollectorEndFunctionTag, CollectorEndScriptTag, regulation_name, collector_name)
