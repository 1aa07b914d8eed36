"""
scanner/types.py — wynik skanowania deklaracji.

ScannedUnit — jedna klasa z rozpoznanym tagiem funkcji, jej surowa deklaracja
    oraz mapa metoda → tag skryptu (tylko metody z rozpoznanym tagiem).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from script_model import FunctionTag, ScriptTag, SourceCallable, SourceDeclaration


@dataclass(slots=True)
class ScannedUnit:
    """
    Jednostka skanowania, tworzona na nowo przy każdym skanie.

    - declaration:  surowa deklaracja z drzewa źródła
    - function_tag: zbudowany tag funkcji klasy
    - scripts:      metody z tagiem skryptu, w kolejności deklaracji
    """
    declaration:  SourceDeclaration
    function_tag: FunctionTag
    scripts:      dict[SourceCallable, ScriptTag] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.declaration.name

    @property
    def tenant_identifier(self) -> str:
        return self.function_tag.tenant_identifier
