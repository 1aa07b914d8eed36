"""Testy silnika wyszukiwania i parserów kategorii (drzewa budowane ręcznie)."""

from decimal import Decimal

import pytest

from conftest import case_function, declaration, method, tag

from script_model import (
    CaseBuildFunctionTag,
    CaseBuildScriptTag,
    InvalidArgumentError,
    InvalidFieldValueError,
    NoTaggedDeclarationsError,
)
from lookup import ScriptCodeQuery, ScriptLookup, ScriptParser


def _parser(*declarations):
    tree = list(declarations)
    return ScriptParser(front_end=lambda text: tree)


def _query(tenant="t1"):
    return ScriptCodeQuery(tenant_identifier=tenant, source_code="source")


def _function(tag_name, tenant="t1", **arguments):
    return tag(tag_name, tenantIdentifier=tenant, userIdentifier="u1", **arguments)


def _regulation_function(tag_name, tenant="t1", regulation="r1"):
    return _function(
        tag_name, tenant,
        employeeIdentifier="e1", payrollName="p1", regulationName=regulation,
    )


# ---------------------------------------------------------------------------
# Scenariusze
# ---------------------------------------------------------------------------

class TestCaseScripts:
    def _parser(self):
        return _parser(declaration(
            "VacationBuild",
            _regulation_function("CaseBuildFunction"),
            methods=[method("Build", tag("CaseBuildScript", caseName="Vacation"), body="{\nx = 1;\n}")],
        ))

    def test_case_build_returns_body(self):
        body = self._parser().case_parser.get_case_build_script(_query(), "r1", "Vacation")
        assert body == "x = 1;"

    def test_unknown_case_is_absent(self):
        assert self._parser().case_parser.get_case_build_script(_query(), "r1", "Unknown") is None

    def test_other_regulation_is_absent(self):
        assert self._parser().case_parser.get_case_build_script(_query(), "r2", "Vacation") is None

    def test_function_type_must_match(self):
        parser = self._parser()
        assert parser.case_parser.get_case_validate_script(_query(), "r1", "Vacation") is None
        assert parser.case_parser.get_case_available_script(_query(), "r1", "Vacation") is None

    def test_lookup_is_idempotent(self):
        parser = self._parser()
        first = parser.case_parser.get_case_build_script(_query(), "r1", "Vacation")
        assert parser.case_parser.get_case_build_script(_query(), "r1", "Vacation") == first

    def test_blank_key_arguments(self):
        parser = self._parser()
        with pytest.raises(InvalidArgumentError) as exc:
            parser.case_parser.get_case_build_script(_query(), "r1", " ")
        assert exc.value.name == "case_name"
        with pytest.raises(InvalidArgumentError):
            parser.case_parser.get_case_build_script(_query(), "", "Vacation")


class TestWageTypeScripts:
    def _parser(self):
        return _parser(declaration(
            "WageTypes",
            _regulation_function("WageTypeValueFunction"),
            methods=[method("Value", tag("WageTypeValueScript", wageTypeNumber="42.0"), body="{\nreturn 42;\n}")],
        ))

    @pytest.mark.parametrize("number", [42, "42", "42.00", Decimal("42")])
    def test_number_matches_numerically(self, number):
        body = self._parser().wage_type_parser.get_wage_type_value_script(_query(), "r1", number)
        assert body == "return 42;"

    def test_other_number_is_absent(self):
        assert self._parser().wage_type_parser.get_wage_type_value_script(_query(), "r1", 43) is None

    @pytest.mark.parametrize("number", ["abc", "NaN", "Infinity", "4_2", None, True])
    def test_invalid_number(self, number):
        with pytest.raises(InvalidArgumentError):
            self._parser().wage_type_parser.get_wage_type_value_script(_query(), "r1", number)


class TestMalformedWageTypeTag:
    def _parser(self):
        return _parser(
            declaration(
                "WageTypes",
                _regulation_function("WageTypeValueFunction"),
                methods=[method("Broken", tag("WageTypeValueScript", wageTypeNumber="forty-two"), body="{\nbroken();\n}")],
            ),
            declaration(
                "Cases",
                _regulation_function("CaseBuildFunction"),
                methods=[method("Vacation", tag("CaseBuildScript", caseName="Vacation"), body="{\nx = 1;\n}")],
            ),
        )

    def test_other_lookups_on_document_still_work(self):
        body = self._parser().case_parser.get_case_build_script(_query(), "r1", "Vacation")
        assert body == "x = 1;"

    def test_wage_type_lookup_reports_tag(self):
        with pytest.raises(InvalidFieldValueError) as exc:
            self._parser().wage_type_parser.get_wage_type_value_script(_query(), "r1", 42)
        assert exc.value.field_name == "wage_type_number"
        assert exc.value.declared_type == "WageTypeValueScript"

    def test_other_regulation_never_compares_number(self):
        assert self._parser().wage_type_parser.get_wage_type_value_script(_query(), "r2", 42) is None


class TestCaseRelationScripts:
    def _parser(self):
        def relation(name, body, **slots):
            return method(name, tag(
                "CaseRelationBuildScript",
                sourceCaseName="Employee", targetCaseName="Contract", **slots,
            ), body=body)

        return _parser(declaration(
            "Relations",
            _regulation_function("CaseRelationBuildFunction"),
            methods=[
                relation("Plain", "{\nplain();\n}"),
                relation("Slotted", "{\nslotted();\n}", sourceCaseSlot="A", targetCaseSlot="B"),
                relation("TargetOnly", "{\ntarget_only();\n}", targetCaseSlot="X"),
            ],
        ))

    def test_without_slots(self):
        body = self._parser().case_relation_parser.get_case_relation_build_script(
            _query(), "r1", "Employee", "Contract",
        )
        assert body == "plain();"

    def test_with_slots(self):
        body = self._parser().case_relation_parser.get_case_relation_build_script(
            _query(), "r1", "Employee", "Contract", source_case_slot="A", target_case_slot="B",
        )
        assert body == "slotted();"

    def test_slot_none_only_matches_none(self):
        assert self._parser().case_relation_parser.get_case_relation_build_script(
            _query(), "r1", "Employee", "Contract", source_case_slot="A",
        ) is None

    def test_target_slot_only(self):
        parser = self._parser().case_relation_parser
        assert parser.get_case_relation_build_script(
            _query(), "r1", "Employee", "Contract", target_case_slot="X",
        ) == "target_only();"
        assert parser.get_case_relation_build_script(
            _query(), "r1", "Employee", "Contract", source_case_slot="X", target_case_slot="X",
        ) is None

    def test_target_slot_tag_needs_target_slot_in_query(self):
        parser = _parser(declaration(
            "Relations",
            _regulation_function("CaseRelationBuildFunction"),
            methods=[method("TargetOnly", tag(
                "CaseRelationBuildScript",
                sourceCaseName="Employee", targetCaseName="Contract", targetCaseSlot="X",
            ), body="{\ntarget_only();\n}")],
        )).case_relation_parser
        assert parser.get_case_relation_build_script(
            _query(), "r1", "Employee", "Contract", target_case_slot=None,
        ) is None

    def test_validate_is_separate(self):
        assert self._parser().case_relation_parser.get_case_relation_validate_script(
            _query(), "r1", "Employee", "Contract",
        ) is None


class TestTenantIsolation:
    def _parser(self):
        return _parser(
            declaration(
                "TenantOne",
                _regulation_function("CaseBuildFunction", tenant="t1"),
                methods=[method("Build", tag("CaseBuildScript", caseName="Vacation"), body="{\nt1();\n}")],
            ),
            declaration(
                "TenantTwo",
                _regulation_function("CaseBuildFunction", tenant="t2"),
                methods=[method("Build", tag("CaseBuildScript", caseName="Vacation"), body="{\nt2();\n}")],
            ),
        )

    def test_each_tenant_gets_own_body(self):
        parser = self._parser()
        assert parser.case_parser.get_case_build_script(_query("t1"), "r1", "Vacation") == "t1();"
        assert parser.case_parser.get_case_build_script(_query("t2"), "r1", "Vacation") == "t2();"

    def test_tenant_compared_exactly(self):
        parser = self._parser()
        assert parser.case_parser.get_case_build_script(_query("T2"), "r1", "Vacation") is None
        assert parser.case_parser.get_case_build_script(_query("t3"), "r1", "Vacation") is None


class TestOrdering:
    def test_first_unit_wins(self):
        parser = _parser(
            declaration("A", _regulation_function("CaseBuildFunction"),
                        methods=[method("Build", tag("CaseBuildScript", caseName="Vacation"), body="{\na();\n}")]),
            declaration("B", _regulation_function("CaseBuildFunction"),
                        methods=[method("Build", tag("CaseBuildScript", caseName="Vacation"), body="{\nb();\n}")]),
        )
        assert parser.case_parser.get_case_build_script(_query(), "r1", "Vacation") == "a();"

    def test_falls_through_to_next_unit(self):
        parser = _parser(
            declaration("A", _regulation_function("CaseBuildFunction"),
                        methods=[method("Build", tag("CaseBuildScript", caseName="Other"), body="{\na();\n}")]),
            declaration("B", _regulation_function("CaseBuildFunction"),
                        methods=[method("Build", tag("CaseBuildScript", caseName="Vacation"), body="{\nb();\n}")]),
        )
        assert parser.case_parser.get_case_build_script(_query(), "r1", "Vacation") == "b();"

    def test_blank_body_is_skipped(self):
        parser = _parser(
            declaration("A", _regulation_function("CaseBuildFunction"), methods=[
                method("Empty", tag("CaseBuildScript", caseName="Vacation"), body="{\n}"),
                method("Abstract", tag("CaseBuildScript", caseName="Vacation"), body=None),
                method("Real", tag("CaseBuildScript", caseName="Vacation"), body="{\nreal();\n}"),
            ]),
        )
        assert parser.case_parser.get_case_build_script(_query(), "r1", "Vacation") == "real();"


# ---------------------------------------------------------------------------
# Pozostałe kategorie
# ---------------------------------------------------------------------------

class TestOtherCategories:
    def test_collector(self):
        parser = _parser(declaration(
            "Collectors", _regulation_function("CollectorApplyFunction"),
            methods=[method("Apply", tag("CollectorApplyScript", collectorName="Gross"), body="{\napply();\n}")],
        ))
        query = _query()
        assert parser.collector_parser.get_collector_apply_script(query, "r1", "Gross") == "apply();"
        assert parser.collector_parser.get_collector_start_script(query, "r1", "Gross") is None
        assert parser.collector_parser.get_collector_end_script(query, "r1", "Gross") is None

    def test_payrun_ignores_function_scope(self):
        payrun = _function(
            "PayrunEmployeeStartFunction",
            employeeIdentifier="e9", payrollName="Any", payrunName="Declared",
        )
        parser = _parser(declaration(
            "Payrun", payrun,
            methods=[method("Start", tag("PayrunEmployeeStartScript", payrunName="Monthly"), body="{\nstart();\n}")],
        ))
        payrun_parser = parser.payrun_parser
        assert payrun_parser.get_payrun_employee_start_script(_query(), "Monthly") == "start();"
        assert payrun_parser.get_payrun_employee_start_script(_query("t2"), "Monthly") is None
        assert payrun_parser.get_payrun_employee_end_script(_query(), "Monthly") is None
        assert payrun_parser.get_payrun_start_script(_query(), "Monthly") is None
        assert payrun_parser.get_payrun_end_script(_query(), "Monthly") is None
        assert payrun_parser.get_payrun_employee_available_script(_query(), "Monthly") is None
        assert payrun_parser.get_payrun_wage_type_available_script(_query(), "Monthly") is None

    def test_report(self):
        parser = _parser(declaration(
            "Reports", _function("ReportBuildFunction", regulationName="r1"),
            methods=[method("Build", tag(
                "ReportBuildScript", reportName="Payslip", parameters='{"Year": "2024"}',
            ), body="{\nbuild();\n}")],
        ))
        report_parser = parser.report_parser
        assert report_parser.get_report_build_script(_query(), "r1", "Payslip") == "build();"
        assert report_parser.get_report_start_script(_query(), "r1", "Payslip") is None
        assert report_parser.get_report_end_script(_query(), "r1", "Payslip") is None
        assert report_parser.get_report_build_script(_query(), "r2", "Payslip") is None


# ---------------------------------------------------------------------------
# Silnik
# ---------------------------------------------------------------------------

class TestScriptLookup:
    def _lookup(self, calls=None):
        tree = [declaration(
            "Build", case_function(tenant="t1"),
            methods=[method("Build", tag("CaseBuildScript", caseName="Vacation"), body="{\nx = 1;\n}")],
        )]

        def front_end(text):
            if calls is not None:
                calls.append(text)
            return tree

        return ScriptLookup(front_end)

    @pytest.mark.parametrize("tenant, source", [("", "source"), ("  ", "source"), ("t1", ""), ("t1", "\n")])
    def test_blank_inputs(self, tenant, source):
        with pytest.raises(InvalidArgumentError):
            self._lookup().get_script(
                tenant, source, CaseBuildFunctionTag, CaseBuildScriptTag,
                lambda tag: True, lambda tag: True,
            )

    def test_predicates_receive_tags(self):
        seen = []
        body = self._lookup().get_script(
            "t1", "source", CaseBuildFunctionTag, CaseBuildScriptTag,
            lambda tag: seen.append(tag) or True,
            lambda tag: seen.append(tag) or True,
        )
        assert body == "x = 1;"
        assert isinstance(seen[0], CaseBuildFunctionTag)
        assert seen[1] == CaseBuildScriptTag("Vacation")

    def test_source_scanned_on_every_call(self):
        calls = []
        lookup = self._lookup(calls)
        for _ in range(2):
            lookup.get_script(
                "t1", "source", CaseBuildFunctionTag, CaseBuildScriptTag,
                lambda tag: True, lambda tag: True,
            )
        assert calls == ["source", "source"]

    def test_scanner_errors_propagate(self):
        lookup = ScriptLookup(lambda text: [])
        with pytest.raises(NoTaggedDeclarationsError):
            lookup.get_script(
                "t1", "source", CaseBuildFunctionTag, CaseBuildScriptTag,
                lambda tag: True, lambda tag: True,
            )
