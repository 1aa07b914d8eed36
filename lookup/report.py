"""lookup/report.py — skrypty raportów (build / start / end)."""

from __future__ import annotations

from script_model import (
    ReportBuildFunctionTag,
    ReportBuildScriptTag,
    ReportEndFunctionTag,
    ReportEndScriptTag,
    ReportFunctionTag,
    ReportScriptTag,
    ReportStartFunctionTag,
    ReportStartScriptTag,
    SourceFrontEnd,
)

from .engine import ScriptCodeQuery, ScriptLookup, require_argument


class ReportScriptParser:
    def __init__(self, front_end: SourceFrontEnd | None = None) -> None:
        self.lookup = ScriptLookup(front_end)

    def _get(
        self,
        query: ScriptCodeQuery,
        function_type: type[ReportFunctionTag],
        script_type: type[ReportScriptTag],
        regulation_name: str,
        report_name: str,
    ) -> str | None:
        require_argument("regulation_name", regulation_name)
        require_argument("report_name", report_name)
        return self.lookup.query(
            query, function_type, script_type,
            lambda tag: tag.regulation_name == regulation_name,
            lambda tag: tag.report_name == report_name,
        )

    def get_report_build_script(self, query: ScriptCodeQuery, regulation_name: str, report_name: str) -> str | None:
        return self._get(query, ReportBuildFunctionTag, ReportBuildScriptTag, regulation_name, report_name)

    def get_report_start_script(self, query: ScriptCodeQuery, regulation_name: str, report_name: str) -> str | None:
        return self._get(query, ReportStartFunctionTag, ReportStartScriptTag, regulation_name, report_name)

    def get_report_end_script(self, query: ScriptCodeQuery, regulation_name: str, report_name: str) -> str | None:
        return self._get(query, ReportEndFunctionTag, ReportEndScriptTag, regulation_name, report_name)
