"""
scanner/tag_factory.py — fabryka tagów z nazwy typu i mapy argumentów.

TAG_REGISTRY to zamknięty rejestr budowany raz przy imporcie:
  nazwa tagu → TagSpec(klasa, wymagane argumenty w kolejności konstruktora,
                       opcjonalne argumenty, konwertery wartości)

Argumenty w dokumencie mają nazwy camelCase ("tenantIdentifier"),
pola tagów — snake_case ("tenant_identifier").
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeAlias

from script_model import (
    FUNCTION_TAG_TYPES,
    SCRIPT_TAG_TYPES,
    FunctionCategory,
    FunctionTag,
    MissingArgumentError,
    ScriptTag,
    UnsupportedTagError,
    parse_report_parameters,
)

Tag: TypeAlias = FunctionTag | ScriptTag

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


class TagKind(StrEnum):
    FUNCTION = "function"
    SCRIPT   = "script"


# ---------------------------------------------------------------------------
# Argumenty per kategoria
# ---------------------------------------------------------------------------

# Argumenty wspólne dla wszystkich tagów funkcji (pierwsze w konstruktorze)
UNIVERSAL_ARGUMENTS: tuple[str, ...] = ("tenantIdentifier", "userIdentifier")

_REGULATION_ARGUMENTS = ("employeeIdentifier", "payrollName", "regulationName")

# Wymagane argumenty tagu funkcji poza tenantem i użytkownikiem
_FUNCTION_ARGUMENTS: dict[FunctionCategory, tuple[str, ...]] = {
    FunctionCategory.CASE:          _REGULATION_ARGUMENTS,
    FunctionCategory.CASE_RELATION: _REGULATION_ARGUMENTS,
    FunctionCategory.COLLECTOR:     _REGULATION_ARGUMENTS,
    FunctionCategory.WAGE_TYPE:     _REGULATION_ARGUMENTS,
    FunctionCategory.PAYRUN:        ("employeeIdentifier", "payrollName", "payrunName"),
    FunctionCategory.REPORT:        ("regulationName",),
}

# (wymagane, opcjonalne) argumenty tagu skryptu
_SCRIPT_ARGUMENTS: dict[FunctionCategory, tuple[tuple[str, ...], tuple[str, ...]]] = {
    FunctionCategory.CASE:          (("caseName",), ()),
    FunctionCategory.CASE_RELATION: (("sourceCaseName", "targetCaseName"),
                                     ("sourceCaseSlot", "targetCaseSlot")),
    FunctionCategory.COLLECTOR:     (("collectorName",), ()),
    FunctionCategory.WAGE_TYPE:     (("wageTypeNumber",), ()),
    FunctionCategory.PAYRUN:        (("payrunName",), ()),
    FunctionCategory.REPORT:        (("reportName",), ("culture", "parameters")),
}


def field_name(argument_name: str) -> str:
    """camelCase → snake_case, np. "wageTypeNumber" → "wage_type_number"."""
    return _CAMEL_RE.sub("_", argument_name).lower()


# ---------------------------------------------------------------------------
# TagSpec
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TagSpec:
    """Wpis rejestru: jak zbudować tag o danej nazwie."""
    tag_name:   str
    kind:       TagKind
    tag_class:  type[Tag]
    required:   tuple[str, ...]
    optional:   tuple[str, ...] = ()
    converters: Mapping[str, Callable[[str], Any]] = field(default_factory=dict)

    @property
    def category(self) -> FunctionCategory:
        return self.tag_class.category

    def build(self, arguments: Mapping[str, str]) -> Tag:
        values: dict[str, Any] = {}
        for name in self.required:
            if name not in arguments:
                raise MissingArgumentError(name, self.tag_name)
            values[field_name(name)] = arguments[name]
        for name in self.optional:
            if name in arguments:
                convert = self.converters.get(name)
                raw = arguments[name]
                values[field_name(name)] = convert(raw) if convert else raw
        return self.tag_class(**values)


def _build_registry() -> dict[str, TagSpec]:
    registry: dict[str, TagSpec] = {}

    for cls in FUNCTION_TAG_TYPES:
        name = cls.tag_name()
        registry[name] = TagSpec(
            tag_name=name,
            kind=TagKind.FUNCTION,
            tag_class=cls,
            required=UNIVERSAL_ARGUMENTS + _FUNCTION_ARGUMENTS[cls.category],
        )

    for cls in SCRIPT_TAG_TYPES:
        name = cls.tag_name()
        required, optional = _SCRIPT_ARGUMENTS[cls.category]
        converters: dict[str, Callable[[str], Any]] = {}
        if "parameters" in optional:
            converters["parameters"] = lambda text, n=name: tuple(parse_report_parameters(text, n).items())
        registry[name] = TagSpec(
            tag_name=name,
            kind=TagKind.SCRIPT,
            tag_class=cls,
            required=required,
            optional=optional,
            converters=converters,
        )

    return registry


TAG_REGISTRY: dict[str, TagSpec] = _build_registry()


# ---------------------------------------------------------------------------
# Publiczny interfejs
# ---------------------------------------------------------------------------

def build_tag(declared_type_name: str, arguments: Mapping[str, str]) -> Tag:
    """
    Buduje konkretny tag z nazwy typu i nazwanych argumentów.

    Raises:
        UnsupportedTagError:  nazwa spoza rejestru
        MissingArgumentError: brak wymaganego argumentu
        MissingRequiredFieldError / InvalidFieldValueError: z konstruktora tagu
    """
    spec = TAG_REGISTRY.get(declared_type_name)
    if spec is None:
        raise UnsupportedTagError(declared_type_name)
    return spec.build(arguments)


def is_function_tag(name: str) -> bool:
    spec = TAG_REGISTRY.get(name)
    return spec is not None and spec.kind is TagKind.FUNCTION


def is_script_tag(name: str) -> bool:
    spec = TAG_REGISTRY.get(name)
    return spec is not None and spec.kind is TagKind.SCRIPT


def registered_tags(kind: TagKind | None = None) -> list[TagSpec]:
    """Wpisy rejestru w kolejności rejestracji, opcjonalnie filtrowane po rodzaju."""
    return [s for s in TAG_REGISTRY.values() if kind is None or s.kind is kind]
