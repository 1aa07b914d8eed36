"""Komenda: psi script — wypisuje ciało skryptu dla klucza kategorii."""

from __future__ import annotations

import argparse
import sys

import requests
from rich.console import Console

from script_model import FunctionCategory, FunctionType, ScriptIndexError
from scanner import field_name
from lookup import ScriptCodeQuery, ScriptParser

from psi import _config
from psi._source import load_source

console = Console()


def _lookup_script(
    parser: ScriptParser,
    function_type: FunctionType,
    query: ScriptCodeQuery,
    args: argparse.Namespace,
) -> str | None:
    """Wywołuje get_<typ>_script właściwego parsera kategorii."""
    operation = f"get_{field_name(function_type.value)}_script"
    match function_type.category:
        case FunctionCategory.CASE:
            method = getattr(parser.case_parser, operation)
            return method(query, args.regulation, args.name)
        case FunctionCategory.CASE_RELATION:
            method = getattr(parser.case_relation_parser, operation)
            return method(
                query, args.regulation, args.name, args.target,
                args.source_slot, args.target_slot,
            )
        case FunctionCategory.COLLECTOR:
            method = getattr(parser.collector_parser, operation)
            return method(query, args.regulation, args.name)
        case FunctionCategory.WAGE_TYPE:
            method = getattr(parser.wage_type_parser, operation)
            return method(query, args.regulation, args.name)
        case FunctionCategory.PAYRUN:
            method = getattr(parser.payrun_parser, operation)
            return method(query, args.name)
        case FunctionCategory.REPORT:
            method = getattr(parser.report_parser, operation)
            return method(query, args.regulation, args.name)
    raise ValueError(f"Nieobsługiwana kategoria: {function_type.category}")


def run(args: argparse.Namespace) -> None:
    function_type = FunctionType(args.type)
    tenant = args.tenant or _config.default_tenant()

    try:
        source_text = load_source(args.file, args.url)
    except (ValueError, OSError, requests.RequestException) as e:
        console.print(f"[red]Błąd wczytywania:[/red] {e}")
        raise SystemExit(1)

    try:
        query = ScriptCodeQuery(tenant_identifier=tenant, source_code=source_text)  # type: ignore[arg-type]
        body = _lookup_script(ScriptParser(), function_type, query, args)
    except ScriptIndexError as e:
        console.print(f"[red]Błąd wyszukiwania:[/red] {e}")
        raise SystemExit(1)

    if body is None:
        console.print(f"[yellow]Brak skryptu {function_type.script_tag_name} dla podanego klucza.[/yellow]")
        return

    # surowy tekst bez interpretacji znaczników rich
    sys.stdout.write(body + "\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "script",
        help="Wypisuje ciało skryptu pasującego do klucza.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyszukuje w źródle C# metodę z tagiem skryptu danego typu i wypisuje jej ciało
(bez klamer bloku). Tenant domyślnie ze zmiennej PSI_TENANT.

Klucze per kategoria:
  Case*           --regulation R --name CASE
  CaseRelation*   --regulation R --name SOURCE --target TARGET
                  [--source-slot S] [--target-slot S]
  Collector*      --regulation R --name COLLECTOR
  WageType*       --regulation R --name NUMER
  Payrun*         --name PAYRUN
  Report*         --regulation R --name REPORT

Przykłady:
  psi script CaseBuild Scripts.cs --tenant acme --regulation Base --name Salary
  psi script WageTypeValue Scripts.cs -t acme -r Base -n 42
  psi script PayrunStart --url https://example.com/Scripts.cs -t acme -n Monthly
        """,
    )
    p.add_argument(
        "type",
        metavar="TYPE",
        choices=[t.value for t in FunctionType],
        help="Typ funkcji, np. CaseBuild, WageTypeValue, PayrunStart.",
    )
    p.add_argument(
        "file",
        metavar="FILE",
        nargs="?",
        default=None,
        help="Plik źródłowy C#.",
    )
    p.add_argument("--url", metavar="URL", default=None, help="Pobierz źródło spod URL.")
    p.add_argument("--tenant", "-t", metavar="TENANT", default=None, help="Identyfikator tenanta.")
    p.add_argument("--regulation", "-r", metavar="R", default=None, help="Nazwa regulacji.")
    p.add_argument(
        "--name", "-n",
        metavar="N",
        default=None,
        help="Przypadek / przypadek źródłowy / kolektor / numer rodzaju / payrun / raport.",
    )
    p.add_argument("--target", metavar="N", default=None, help="Przypadek docelowy relacji.")
    p.add_argument("--source-slot", metavar="S", default=None, help="Slot przypadku źródłowego.")
    p.add_argument("--target-slot", metavar="S", default=None, help="Slot przypadku docelowego.")
    p.set_defaults(func=run)
