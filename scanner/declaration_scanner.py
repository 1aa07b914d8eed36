"""
scanner/declaration_scanner.py — skaner deklaracji oznaczonych tagami.

scan_tree(tree)                  -> list[ScannedUnit]
scan_source(source_text, parse)  -> list[ScannedUnit]

Kroki:
  1 — deklaracje w kolejności drzewa
  2 — brak rozpoznanego tagu funkcji → deklaracja pomijana (to nie błąd)
  3 — tag funkcji: tenantIdentifier i userIdentifier obowiązkowe, reszta przez fabrykę
  4 — tagi metod: każdy musi być zarejestrowanym tagiem skryptu (inaczej błąd)
  5 — klasa bez metod z tagami zostaje (pusta mapa skryptów)
  6 — zero jednostek → NoTaggedDeclarationsError
"""

from __future__ import annotations

from loguru import logger

from script_model import (
    AmbiguousTagError,
    FunctionTag,
    MissingParameterError,
    NoTaggedDeclarationsError,
    ScriptTag,
    SourceCallable,
    SourceDeclaration,
    SourceFrontEnd,
    SourceTree,
    UnsupportedScriptTagError,
)

from .tag_factory import UNIVERSAL_ARGUMENTS, build_tag, is_function_tag, is_script_tag
from .types import ScannedUnit


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def _function_tag(declaration: SourceDeclaration) -> FunctionTag | None:
    recognized = [t for t in declaration.tags if is_function_tag(t.name)]
    if not recognized:
        return None
    if len(recognized) > 1:
        raise AmbiguousTagError(declaration.name, [t.name for t in recognized])

    tag = recognized[0]
    arguments = tag.argument_map()
    for name in UNIVERSAL_ARGUMENTS:
        if name not in arguments:
            raise MissingParameterError(name, declaration.name)

    return build_tag(tag.name, arguments)  # type: ignore[return-value]


def _script_tag(declaration: SourceDeclaration, method: SourceCallable) -> ScriptTag | None:
    owner = f"{declaration.name}.{method.name}"
    for tag in method.tags:
        if not is_script_tag(tag.name):
            raise UnsupportedScriptTagError(tag.name, owner)
    if not method.tags:
        return None
    if len(method.tags) > 1:
        raise AmbiguousTagError(owner, [t.name for t in method.tags])

    tag = method.tags[0]
    return build_tag(tag.name, tag.argument_map())  # type: ignore[return-value]


def _scan_declaration(declaration: SourceDeclaration) -> ScannedUnit | None:
    function_tag = _function_tag(declaration)
    if function_tag is None:
        logger.debug(f"Pominięto klasę bez tagu funkcji: {declaration.name}")
        return None

    unit = ScannedUnit(declaration=declaration, function_tag=function_tag)
    for method in declaration.callables:
        script_tag = _script_tag(declaration, method)
        if script_tag is not None:
            unit.scripts[method] = script_tag

    logger.debug(
        f"Klasa {declaration.name}: {function_tag.tag_name()} "
        f"tenant={function_tag.tenant_identifier}, skrypty={len(unit.scripts)}"
    )
    return unit


# ---------------------------------------------------------------------------
# Publiczny interfejs
# ---------------------------------------------------------------------------

def scan_tree(tree: SourceTree) -> list[ScannedUnit]:
    """
    Buduje listę jednostek z drzewa deklaracji (kolejność dokumentu).

    Raises:
        NoTaggedDeclarationsError: żadna deklaracja nie ma rozpoznanego tagu funkcji
        MissingParameterError:     tag funkcji bez tenantIdentifier / userIdentifier
        UnsupportedScriptTagError: metoda z tagiem spoza rejestru skryptów
        AmbiguousTagError:         więcej niż jeden tag funkcji / skryptu
    """
    units: list[ScannedUnit] = []
    for declaration in tree:
        unit = _scan_declaration(declaration)
        if unit is not None:
            units.append(unit)

    if not units:
        raise NoTaggedDeclarationsError()
    return units


def scan_source(source_text: str, front_end: SourceFrontEnd | None = None) -> list[ScannedUnit]:
    """Parsuje tekst źródła (domyślnie jako C#) i skanuje deklaracje."""
    if front_end is None:
        from csharp_parser.parser import parse_csharp
        front_end = parse_csharp
    return scan_tree(front_end(source_text))
