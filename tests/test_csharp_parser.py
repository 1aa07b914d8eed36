"""Testy parsera C# (tree-sitter) i pełnej ścieżki: źródło → skaner → wyszukiwanie."""

from csharp_parser.parser import parse_csharp

from lookup import ScriptCodeQuery, ScriptParser
from scanner import scan_source
from script_model import CaseBuildFunctionTag

SOURCE = r'''
using System;
using PayrollEngine.Client.Scripting.Function;

namespace Acme.Scripts
{
    [CaseBuildFunction(
        tenantIdentifier: "acme",
        userIdentifier: "lucy@acme.com",
        employeeIdentifier: "visitor@acme.com",
        payrollName: "AcmePayroll",
        regulationName: "AcmeRegulation")]
    public class CaseBuildFunctionScripts : CaseBuildFunction
    {
        public CaseBuildFunctionScripts() : base(GetSourceFileName()) { }

        [CaseBuildScript(caseName: "Vacation")]
        public bool? VacationBuild()
        {
            x = 1;
        }

        public void Helper() => Log("x");
    }
}
'''


def _by_name(tree):
    return {d.name: d for d in tree}


class TestDeclarations:
    def test_classes_methods_and_tags(self):
        tree = parse_csharp(SOURCE)
        assert [d.name for d in tree] == ["CaseBuildFunctionScripts"]

        declaration = tree[0]
        assert [t.name for t in declaration.tags] == ["CaseBuildFunction"]
        assert declaration.tags[0].argument_map() == {
            "tenantIdentifier": "acme",
            "userIdentifier": "lucy@acme.com",
            "employeeIdentifier": "visitor@acme.com",
            "payrollName": "AcmePayroll",
            "regulationName": "AcmeRegulation",
        }
        assert [m.name for m in declaration.callables] == ["VacationBuild", "Helper"]

    def test_method_body_and_position(self):
        vacation, helper = parse_csharp(SOURCE)[0].callables
        assert vacation.body.startswith("{")
        assert vacation.body.rstrip().endswith("}")
        assert "x = 1;" in vacation.body
        assert vacation.line == 17  # linia atrybutu
        assert helper.body is None
        assert vacation.offset < helper.offset

    def test_nested_classes_in_document_order(self):
        tree = parse_csharp('''
            [Serializable]
            public class Outer
            {
                public class Inner
                {
                    public void Run() { }
                }

                public void Own() { }
            }

            public class Last { }
        ''')
        assert [d.name for d in tree] == ["Outer", "Inner", "Last"]
        declarations = _by_name(tree)
        assert [m.name for m in declarations["Outer"].callables] == ["Own"]
        assert [m.name for m in declarations["Inner"].callables] == ["Run"]
        assert declarations["Outer"].tags[0].name == "Serializable"

    def test_syntax_errors_are_tolerated(self):
        tree = parse_csharp("public class Broken { public void M( { }")
        assert isinstance(tree, list)


class TestTagArguments:
    def _tag(self, attribute):
        tree = parse_csharp(f"{attribute}\npublic class Scripts {{ }}")
        return tree[0].tags[0]

    def test_attribute_suffix_and_qualifier_removed(self):
        tag = self._tag('[PayrollEngine.Client.CaseBuildScriptAttribute(caseName: "Vacation")]')
        assert tag.name == "CaseBuildScript"
        assert tag.argument_map() == {"caseName": "Vacation"}

    def test_name_equals_form(self):
        tag = self._tag('[CaseBuildScript(caseName = "Vacation")]')
        assert tag.argument_map() == {"caseName": "Vacation"}

    def test_positional_arguments_ignored(self):
        tag = self._tag('[Obsolete("old")]')
        assert tag.name == "Obsolete"
        assert tag.arguments == ()

    def test_regular_string_is_unescaped(self):
        tag = self._tag(r'[CaseBuildScript(caseName: "Tab\tName \"q\"")]')
        assert tag.argument_map()["caseName"] == 'Tab\tName "q"'

    def test_verbatim_string(self):
        tag = self._tag(r'[CaseBuildScript(caseName: @"C:\dir ""q""")]')
        assert tag.argument_map()["caseName"] == r'C:\dir "q"'

    def test_null_means_absent(self):
        tag = self._tag('[ReportBuildScript(reportName: "Payslip", culture: null)]')
        assert tag.argument_map() == {"reportName": "Payslip"}

    def test_number_literal_text(self):
        tag = self._tag("[WageTypeValueScript(wageTypeNumber: 42)]")
        assert tag.argument_map() == {"wageTypeNumber": "42"}


class TestEndToEnd:
    def test_scan_source_defaults_to_csharp(self):
        units = scan_source(SOURCE)
        assert len(units) == 1
        assert isinstance(units[0].function_tag, CaseBuildFunctionTag)
        assert units[0].tenant_identifier == "acme"
        assert [m.name for m in units[0].scripts] == ["VacationBuild"]

    def test_case_build_script_from_source(self):
        parser = ScriptParser()
        query = ScriptCodeQuery("acme", SOURCE)
        body = parser.case_parser.get_case_build_script(query, "AcmeRegulation", "Vacation")
        assert body.strip() == "x = 1;"
        assert parser.case_parser.get_case_build_script(query, "AcmeRegulation", "Sickness") is None
        assert parser.case_parser.get_case_build_script(
            ScriptCodeQuery("other", SOURCE), "AcmeRegulation", "Vacation",
        ) is None

    def test_body_ending_with_nested_block(self):
        source = SOURCE.replace(
            "            x = 1;\n",
            '            if (HasCase("Vacation")) {\n                x = 1;\n            }\n',
        )
        body = ScriptParser().case_parser.get_case_build_script(
            ScriptCodeQuery("acme", source), "AcmeRegulation", "Vacation",
        )
        assert body == '            if (HasCase("Vacation")) {\n                x = 1;\n            }'
        assert body.count("{") == body.count("}")
