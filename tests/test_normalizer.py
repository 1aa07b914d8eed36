import pytest

from scanner import normalize_body

NESTED_LAST = "{\n    if (a) {\n        b();\n    }\n}"


@pytest.mark.parametrize("body, expected", [
    ("{\nx = 1;\n}", "x = 1;"),
    ("{\r\nreturn true;\r\n}", "return true;"),
    ("{ return 1; }", " return 1;"),
    ("{\n    var a = 1;\n    return a;\n    }", "    var a = 1;\n    return a;"),
    (NESTED_LAST, "    if (a) {\n        b();\n    }"),
    ("{\n    try { a(); }\n    finally { b(); }\n}", "    try { a(); }\n    finally { b(); }"),
])
def test_strips_braces(body, expected):
    assert normalize_body(body) == expected


def test_final_nested_block_stays_balanced():
    body = normalize_body(NESTED_LAST)
    assert body.count("{") == body.count("}") == 1


def test_text_without_block_keeps_closing_braces():
    assert normalize_body("    if (a) {\n        b();\n    }\n\n") == "    if (a) {\n        b();\n    }"


@pytest.mark.parametrize("body", [None, "", "   ", "{\n}", "{ }", "{}"])
def test_blank_bodies(body):
    assert normalize_body(body) is None


@pytest.mark.parametrize("body", [
    "{\nx = 1;\n}",
    "{\n    if (a) { b(); }\n    return c;\n}",
    "{ return 1; }",
    NESTED_LAST,
    "{\n    foreach (var x in xs) {\n        if (x) {\n            y();\n        }\n    }\n}",
])
def test_idempotent(body):
    once = normalize_body(body)
    assert normalize_body(once) == once
