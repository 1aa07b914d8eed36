"""csharp_parser/parser.py — parsowanie źródła C# do drzewa deklaracji (SourceTree)."""

from __future__ import annotations

import re
from collections.abc import Iterator

from loguru import logger
from tree_sitter_language_pack import get_parser

from script_model import SourceCallable, SourceDeclaration, SourceTag, SourceTree

_LANGUAGE = "csharp"

# Węzły gramatyki tree-sitter-c-sharp
_CLASS_TYPES   = {"class_declaration"}
_METHOD_TYPE   = "method_declaration"
_NAME_TYPES    = {"name_colon", "name_equals"}
_SEPARATORS    = {":", "="}

_ATTRIBUTE_SUFFIX = "Attribute"

_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|x[0-9a-fA-F]{1,4}|.)", re.DOTALL)
_SIMPLE_ESCAPES: dict[str, str] = {
    "'": "'", '"': '"', "\\": "\\", "0": "\0",
    "a": "\a", "b": "\b", "e": "\x1b", "f": "\f",
    "n": "\n", "r": "\r", "t": "\t", "v": "\v",
}


def _text(node, data: bytes) -> str:
    return data[node.start_byte:node.end_byte].decode("utf-8")


def _walk(root) -> Iterator:
    """Przejście preorder (kolejność dokumentu), bez rekurencji."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _child_of_type(node, *types: str):
    return next((c for c in node.children if c.type in types), None)


# ---------------------------------------------------------------------------
# Literały
# ---------------------------------------------------------------------------

def _unescape(body: str) -> str:
    def replace(match: re.Match[str]) -> str:
        seq = match.group(1)
        if seq[0] in "uUx" and len(seq) > 1:
            return chr(int(seq[1:], 16))
        return _SIMPLE_ESCAPES.get(seq, seq)
    return _ESCAPE_RE.sub(replace, body)


def _raw_string(text: str) -> str:
    """Literał \"\"\"...\"\"\"; wersja wieloliniowa traci wcięcie linii zamykającej."""
    quotes = len(text) - len(text.lstrip('"'))
    inner = text[quotes:len(text) - quotes]
    if "\n" not in inner:
        return inner
    lines = inner.splitlines()
    indent = lines[-1]
    return "\n".join(
        line[len(indent):] if line.startswith(indent) else line.lstrip()
        for line in lines[1:-1]
    )


def _literal_value(node, data: bytes) -> str | None:
    """Wartość argumentu tagu; None dla literału null (argument pominięty)."""
    text = _text(node, data)
    match node.type:
        case "null_literal":
            return None
        case "string_literal":
            return _unescape(text[text.index('"') + 1:text.rindex('"')])
        case "verbatim_string_literal":
            return text[2:-1].replace('""', '"')
        case "raw_string_literal":
            return _raw_string(text)
        case _:
            return text.strip('"')


# ---------------------------------------------------------------------------
# Tagi (atrybuty)
# ---------------------------------------------------------------------------

def _tag_name(raw: str) -> str:
    """"PayrollEngine.CaseBuildFunctionAttribute" → "CaseBuildFunction"."""
    name = raw.strip().rsplit("::", 1)[-1].rsplit(".", 1)[-1]
    if name.endswith(_ATTRIBUTE_SUFFIX) and len(name) > len(_ATTRIBUTE_SUFFIX):
        name = name[:-len(_ATTRIBUTE_SUFFIX)]
    return name


def _named_argument(argument, data: bytes) -> tuple[str, str] | None:
    """
    (nazwa, wartość) dla argumentu "name: value" / "name = value".

    Argumenty pozycyjne i argumenty z wartością null → None.
    """
    assignment = _child_of_type(argument, "assignment_expression")
    if assignment is not None:
        left, right = assignment.child_by_field_name("left"), assignment.child_by_field_name("right")
        if left is None or right is None:
            return None
        value = _literal_value(right, data)
        return (_text(left, data).strip(), value) if value is not None else None

    name_node = _child_of_type(argument, *_NAME_TYPES)
    if name_node is None:
        separator = next(
            (c for c in argument.children if not c.is_named and c.type in _SEPARATORS),
            None,
        )
        if separator is None:
            return None
        name_node = argument.child_by_field_name("name")
        if name_node is None:
            before = [c for c in argument.named_children if c.end_byte <= separator.start_byte]
            if not before:
                return None
            name_node = before[-1]
    name = _text(name_node, data).rstrip(":=").strip()

    values = [
        c for c in argument.named_children
        if c.start_byte >= name_node.end_byte and c.type != "comment"
    ]
    if not values:
        return None
    value = _literal_value(values[-1], data)
    if value is None:
        return None
    return name, value


def _tags(node, data: bytes) -> tuple[SourceTag, ...]:
    tags: list[SourceTag] = []
    for attribute_list in node.children:
        if attribute_list.type != "attribute_list":
            continue
        for attribute in attribute_list.named_children:
            if attribute.type != "attribute":
                continue
            name_node = attribute.child_by_field_name("name")
            if name_node is None:
                name_node = attribute.named_children[0]

            arguments: list[tuple[str, str]] = []
            argument_list = _child_of_type(attribute, "attribute_argument_list")
            if argument_list is not None:
                for argument in argument_list.named_children:
                    if argument.type != "attribute_argument":
                        continue
                    pair = _named_argument(argument, data)
                    if pair is not None:
                        arguments.append(pair)

            tags.append(SourceTag(name=_tag_name(_text(name_node, data)), arguments=tuple(arguments)))
    return tuple(tags)


# ---------------------------------------------------------------------------
# Deklaracje
# ---------------------------------------------------------------------------

def _identifier(node, data: bytes, stop_type: str | None = None) -> str:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        # ostatni identyfikator przed listą parametrów / ciałem
        for child in node.children:
            if child.type == stop_type:
                break
            if child.type == "identifier":
                name_node = child
    return _text(name_node, data) if name_node is not None else ""


def _callable(node, data: bytes) -> SourceCallable:
    body_node = node.child_by_field_name("body")
    if body_node is None or body_node.type != "block":
        body_node = _child_of_type(node, "block")
    return SourceCallable(
        name=_identifier(node, data, stop_type="parameter_list"),
        tags=_tags(node, data),
        body=_text(body_node, data) if body_node is not None else None,
        line=node.start_point[0] + 1,
        offset=node.start_byte,
    )


def _declaration(node, data: bytes) -> SourceDeclaration:
    body = node.child_by_field_name("body")
    if body is None:
        body = _child_of_type(node, "declaration_list")
    callables = tuple(
        _callable(member, data)
        for member in (body.named_children if body is not None else [])
        if member.type == _METHOD_TYPE
    )
    return SourceDeclaration(
        name=_identifier(node, data, stop_type="declaration_list"),
        tags=_tags(node, data),
        callables=callables,
        line=node.start_point[0] + 1,
    )


def parse_csharp(source_text: str) -> SourceTree:
    """
    Parsuje źródło C# i zwraca klasy (także zagnieżdżone) w kolejności dokumentu.

    Metody klasy to wyłącznie jej bezpośredni członkowie. Błędy składni nie
    przerywają parsowania (tree-sitter odtwarza drzewo), są tylko logowane.
    """
    data = source_text.encode("utf-8")
    tree = get_parser(_LANGUAGE).parse(data)
    if tree.root_node.has_error:
        logger.warning("Źródło C# zawiera błędy składni; wynik może być niepełny.")

    return [
        _declaration(node, data)
        for node in _walk(tree.root_node)
        if node.type in _CLASS_TYPES
    ]
