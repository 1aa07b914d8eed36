"""
script_model/errors.py — kody błędów i hierarchia wyjątków indeksu skryptów.

Każdy wyjątek niesie stały kod (ErrorCode) oraz pola opisujące miejsce błędu.
Wszystkie błędy są końcowe dla bieżącego wywołania; rdzeń ich nie łapie.
Brak dopasowania klucza NIE jest błędem (wynik None).
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody błędów indeksu skryptów."""

    # wywołanie
    INVALID_ARGUMENT         = "E_INVALID_ARGUMENT"

    # model tagów
    MISSING_REQUIRED_FIELD   = "E_MISSING_REQUIRED_FIELD"
    INVALID_FIELD_VALUE      = "E_INVALID_FIELD_VALUE"

    # fabryka tagów
    MISSING_ARGUMENT         = "E_MISSING_ARGUMENT"
    UNSUPPORTED_TAG          = "E_UNSUPPORTED_TAG"

    # skaner deklaracji
    MISSING_PARAMETER        = "E_MISSING_PARAMETER"
    UNSUPPORTED_SCRIPT_TAG   = "E_UNSUPPORTED_SCRIPT_TAG"
    AMBIGUOUS_TAG            = "E_AMBIGUOUS_TAG"
    NO_TAGGED_DECLARATIONS   = "E_NO_TAGGED_DECLARATIONS"


class ScriptIndexError(ValueError):
    """Bazowy wyjątek indeksu skryptów."""

    code: ErrorCode


class InvalidArgumentError(ScriptIndexError):
    code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, name: str, reason: str = "pusta wartość") -> None:
        self.name = name
        super().__init__(f"Nieprawidłowy argument '{name}': {reason}.")


class MissingRequiredFieldError(ScriptIndexError):
    code = ErrorCode.MISSING_REQUIRED_FIELD

    def __init__(self, field_name: str, declared_type: str) -> None:
        self.field_name    = field_name
        self.declared_type = declared_type
        super().__init__(f"Brak wymaganego pola '{field_name}' w tagu {declared_type}.")


class InvalidFieldValueError(ScriptIndexError):
    code = ErrorCode.INVALID_FIELD_VALUE

    def __init__(self, field_name: str, declared_type: str, value: object, reason: str) -> None:
        self.field_name    = field_name
        self.declared_type = declared_type
        self.value         = value
        super().__init__(
            f"Nieprawidłowa wartość pola '{field_name}' w tagu {declared_type}: "
            f"{value!r} ({reason})."
        )


class MissingArgumentError(ScriptIndexError):
    code = ErrorCode.MISSING_ARGUMENT

    def __init__(self, name: str, declared_type: str) -> None:
        self.name          = name
        self.declared_type = declared_type
        super().__init__(f"Brak argumentu '{name}' w tagu {declared_type}.")


class MissingParameterError(ScriptIndexError):
    code = ErrorCode.MISSING_PARAMETER

    def __init__(self, name: str, declaration_name: str) -> None:
        self.name             = name
        self.declaration_name = declaration_name
        super().__init__(f"Brak parametru '{name}' w funkcji skryptowej {declaration_name}.")


class UnsupportedTagError(ScriptIndexError):
    code = ErrorCode.UNSUPPORTED_TAG

    def __init__(self, declared_type: str) -> None:
        self.declared_type = declared_type
        super().__init__(f"Nieobsługiwany tag {declared_type}.")


class UnsupportedScriptTagError(ScriptIndexError):
    code = ErrorCode.UNSUPPORTED_SCRIPT_TAG

    def __init__(self, name: str, owner: str) -> None:
        self.name  = name
        self.owner = owner
        super().__init__(f"Nieobsługiwany tag skryptu {name} w {owner}.")


class AmbiguousTagError(ScriptIndexError):
    code = ErrorCode.AMBIGUOUS_TAG

    def __init__(self, owner: str, tag_names: list[str]) -> None:
        self.owner     = owner
        self.tag_names = tag_names
        super().__init__(
            f"Niejednoznaczne tagi w {owner}: {', '.join(tag_names)} (dozwolony jeden)."
        )


class NoTaggedDeclarationsError(ScriptIndexError):
    code = ErrorCode.NO_TAGGED_DECLARATIONS

    def __init__(self) -> None:
        super().__init__("Brak klas skryptowych w źródle (żadna deklaracja nie ma tagu funkcji).")
