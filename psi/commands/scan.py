"""Komenda: psi scan — skanuje źródło C# i listuje klasy z tagami funkcji."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, fields
from pathlib import Path

import requests
from rich.console import Console
from rich.table import Table
from rich import box

from script_model import FunctionTag, ReportScriptTag, ScriptIndexError, ScriptTag
from scanner import ScannedUnit, normalize_body, scan_source

from psi import _config
from psi._source import load_source

console = Console()

# Pola wspólne, pomijane w kolumnie KLUCZE
_IDENTITY_FIELDS = {"tenant_identifier", "user_identifier"}


def _scope_keys(tag: FunctionTag) -> str:
    return ", ".join(
        f"{f.name}={getattr(tag, f.name)}"
        for f in fields(tag)
        if f.name not in _IDENTITY_FIELDS
    )


# ---------------------------------------------------------------------------
# Zapis JSON
# ---------------------------------------------------------------------------

def _script_fields(tag: ScriptTag) -> dict:
    data = asdict(tag)
    if isinstance(tag, ReportScriptTag) and tag.parameters is not None:
        data["parameters"] = tag.parameter_map()
    return data


def _unit_to_dict(unit: ScannedUnit) -> dict:
    return {
        "name": unit.name,
        "line": unit.declaration.line,
        "function": {
            "tag":    unit.function_tag.tag_name(),
            "fields": asdict(unit.function_tag),
        },
        "scripts": [
            {
                "method": method.name,
                "line":   method.line,
                "tag":    script_tag.tag_name(),
                "key":    script_tag.script_key,
                "fields": _script_fields(script_tag),
                "body":   normalize_body(method.body),
            }
            for method, script_tag in unit.scripts.items()
        ],
    }


def _write_json(units: list[ScannedUnit], json_path: Path) -> None:
    data = [_unit_to_dict(u) for u in units]
    json_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(f"[green]JSON:[/green] {json_path}  ({len(units)} klas)")


# ---------------------------------------------------------------------------
# Wyświetlanie tabeli
# ---------------------------------------------------------------------------

def _show_table(units: list[ScannedUnit], with_scripts: bool) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("LINIA",   justify="right", no_wrap=True, style="dim")
    table.add_column("KLASA",   no_wrap=True, style="bold cyan")
    table.add_column("TAG",     no_wrap=True)
    table.add_column("TENANT",  no_wrap=True)
    table.add_column("KLUCZE",  no_wrap=False, max_width=60)
    table.add_column("SKRYPTY", justify="right", no_wrap=True)

    for unit in units:
        table.add_row(
            str(unit.declaration.line),
            unit.name,
            unit.function_tag.tag_name(),
            unit.tenant_identifier,
            _scope_keys(unit.function_tag),
            str(len(unit.scripts)),
        )
        if with_scripts:
            for method, script_tag in unit.scripts.items():
                table.add_row(
                    str(method.line),
                    f"  .{method.name}",
                    f"[green]{script_tag.tag_name()}[/green]",
                    "",
                    script_tag.script_key,
                    "",
                )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(units)} klas[/dim]\n")


def run(args: argparse.Namespace) -> None:
    try:
        source_text = load_source(args.file, args.url)
        units = scan_source(source_text)
    except (ValueError, OSError, requests.RequestException) as e:
        # ScriptIndexError dziedziczy po ValueError
        label = "Błąd skanowania:" if isinstance(e, ScriptIndexError) else "Błąd wczytywania:"
        console.print(f"[red]{label}[/red] {e}")
        raise SystemExit(1)

    tenant = args.tenant or _config.default_tenant()
    if tenant:
        units = [u for u in units if u.tenant_identifier == tenant]
    if not units:
        console.print(f"[yellow]Brak klas dla tenanta {tenant}.[/yellow]")
        return

    if args.json:
        _write_json(units, Path(args.json))

    _show_table(units, args.scripts)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "scan",
        help="Skanuje źródło C# i listuje klasy z tagami funkcji.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Skanuje źródło C# (plik lub URL) i listuje klasy oznaczone tagiem funkcji.

Kolumny:
  KLASA   – nazwa klasy (lub .Metoda przy --scripts)
  TAG     – tag funkcji / tag skryptu
  TENANT  – tenantIdentifier z tagu funkcji
  KLUCZE  – pola zawężające (regulacja, payroll, ...) / klucz skryptu
  SKRYPTY – liczba metod z tagiem skryptu

Przykłady:
  psi scan Scripts.cs --scripts
  psi scan --url https://example.com/Scripts.cs --tenant acme --json units.json
        """,
    )
    p.add_argument(
        "file",
        metavar="FILE",
        nargs="?",
        default=None,
        help="Plik źródłowy C#.",
    )
    p.add_argument(
        "--url",
        metavar="URL",
        default=None,
        help="Pobierz źródło spod URL zamiast z pliku.",
    )
    p.add_argument(
        "--tenant", "-t",
        metavar="TENANT",
        default=None,
        help="Pokaż tylko klasy danego tenanta.",
    )
    p.add_argument(
        "--scripts", "-s",
        action="store_true",
        help="Dodaj wiersz dla każdej metody z tagiem skryptu.",
    )
    p.add_argument(
        "--json",
        metavar="OUT",
        default=None,
        help="Zapisz jednostki do pliku JSON.",
    )
    p.set_defaults(func=run)
