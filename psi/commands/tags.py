"""Komenda: psi tags — listowanie rejestru tagów."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from script_model import FunctionCategory
from scanner import TagKind, registered_tags

console = Console()

KIND_STYLE: dict[str, str] = {
    TagKind.FUNCTION: "cyan",
    TagKind.SCRIPT:   "green",
}


def run(args: argparse.Namespace) -> None:
    kind = TagKind(args.kind) if args.kind else None
    specs = registered_tags(kind)
    if args.category:
        specs = [s for s in specs if s.category == args.category]

    if not specs:
        console.print("[yellow]Brak tagów spełniających kryteria.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("TAG",        style="bold", no_wrap=True)
    table.add_column("RODZAJ",     no_wrap=True)
    table.add_column("KATEGORIA",  no_wrap=True)
    table.add_column("WYMAGANE",   no_wrap=False)
    table.add_column("OPCJONALNE", no_wrap=False)

    for spec in specs:
        table.add_row(
            spec.tag_name,
            Text(spec.kind, style=KIND_STYLE.get(spec.kind, "")),
            spec.category,
            ", ".join(spec.required),
            ", ".join(spec.optional) or "-",
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(specs)} tagów[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "tags",
        help="Listuje rejestr tagów funkcji i skryptów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje zamknięty rejestr tagów rozpoznawanych w źródle.

Kolumny:
  TAG        – nazwa atrybutu w źródle (bez sufiksu Attribute)
  RODZAJ     – function (klasa) / script (metoda)
  KATEGORIA  – case, case_relation, collector, wage_type, payrun, report
  WYMAGANE   – argumenty nazwane w kolejności konstruktora
  OPCJONALNE – argumenty, które można pominąć

Przykłady:
  psi tags
  psi tags --kind script --category wage_type
        """,
    )
    p.add_argument(
        "--kind", "-k",
        choices=[k.value for k in TagKind],
        help="Filtruj po rodzaju tagu.",
    )
    p.add_argument(
        "--category", "-c",
        choices=[c.value for c in FunctionCategory],
        help="Filtruj po kategorii funkcji.",
    )
    p.set_defaults(func=run)
