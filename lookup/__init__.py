"""
lookup — wyszukiwanie ciał skryptów po kluczu kategorii.

Interfejs publiczny:
    ScriptLookup.get_script  — silnik: tenant, typy tagów, predykaty
    ScriptCodeQuery          — tenant + tekst źródła
    ScriptParser             — sześć parserów kategorii

Typowe użycie:
    from lookup import ScriptCodeQuery, ScriptParser

    parser = ScriptParser()
    query  = ScriptCodeQuery("acme", source_text)
    body   = parser.case_parser.get_case_build_script(query, "Base", "Salary")
"""

from .engine import ScriptCodeQuery, ScriptLookup, require_argument
from .case import CaseScriptParser
from .case_relation import CaseRelationScriptParser
from .collector import CollectorScriptParser
from .wage_type import WageTypeScriptParser, parse_wage_type_number
from .payrun import PayrunScriptParser
from .report import ReportScriptParser
from .script_parser import ScriptParser

__all__ = [
    "ScriptCodeQuery",
    "ScriptLookup",
    "require_argument",
    "CaseScriptParser",
    "CaseRelationScriptParser",
    "CollectorScriptParser",
    "WageTypeScriptParser",
    "parse_wage_type_number",
    "PayrunScriptParser",
    "ReportScriptParser",
    "ScriptParser",
]
