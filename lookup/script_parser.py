"""lookup/script_parser.py — jeden punkt dostępu do wszystkich parserów kategorii."""

from __future__ import annotations

from script_model import SourceFrontEnd

from .case import CaseScriptParser
from .case_relation import CaseRelationScriptParser
from .collector import CollectorScriptParser
from .payrun import PayrunScriptParser
from .report import ReportScriptParser
from .wage_type import WageTypeScriptParser


class ScriptParser:
    """Sześć parserów kategorii na wspólnym front endzie źródła."""

    def __init__(self, front_end: SourceFrontEnd | None = None) -> None:
        self.front_end            = front_end
        self.case_parser          = CaseScriptParser(front_end)
        self.case_relation_parser = CaseRelationScriptParser(front_end)
        self.wage_type_parser     = WageTypeScriptParser(front_end)
        self.collector_parser     = CollectorScriptParser(front_end)
        self.payrun_parser        = PayrunScriptParser(front_end)
        self.report_parser        = ReportScriptParser(front_end)
