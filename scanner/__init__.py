"""
scanner — skaner deklaracji i fabryka tagów.

Interfejs publiczny:
    scan_tree, scan_source — drzewo / tekst źródła → list[ScannedUnit]
    build_tag              — nazwa tagu + argumenty → konkretny tag
    TAG_REGISTRY, TagSpec  — zamknięty rejestr tagów
    normalize_body         — tekst ciała metody bez klamer

Typowe użycie:
    from scanner import scan_source

    units = scan_source(source_text)
    for unit in units:
        print(unit.name, unit.function_tag.tag_name(), len(unit.scripts))
"""

from .types import ScannedUnit
from .tag_factory import (
    TAG_REGISTRY,
    UNIVERSAL_ARGUMENTS,
    TagKind,
    TagSpec,
    build_tag,
    field_name,
    is_function_tag,
    is_script_tag,
    registered_tags,
)
from .normalizer import normalize_body
from .declaration_scanner import scan_source, scan_tree

__all__ = [
    "ScannedUnit",
    "TAG_REGISTRY",
    "UNIVERSAL_ARGUMENTS",
    "TagKind",
    "TagSpec",
    "build_tag",
    "field_name",
    "is_function_tag",
    "is_script_tag",
    "registered_tags",
    "normalize_body",
    "scan_source",
    "scan_tree",
]
