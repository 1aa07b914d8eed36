"""
psi — narzędzie CLI indeksu skryptów payrolla.

Użycie:
  psi <komenda> [opcje]

Komendy:
  tags     Listuje rejestr tagów funkcji i skryptów.
  scan     Skanuje źródło C# i listuje klasy z tagami funkcji.
  script   Wypisuje ciało skryptu pasującego do klucza kategorii.

Zmienne środowiskowe:
  PSI_TENANT, PSI_LOG_LEVEL, PSI_LOG_FILE, PSI_ENCODING, PSI_HTTP_TIMEOUT
"""

from __future__ import annotations

import argparse
import sys

from psi._log import setup_logger
from psi.commands import tags as cmd_tags
from psi.commands import scan as cmd_scan
from psi.commands import script as cmd_script


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psi",
        description="Payroll script index — narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="psi 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_tags.add_parser(subparsers)
    cmd_scan.add_parser(subparsers)
    cmd_script.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    # Windows: terminal może używać cp1252, polskie znaki w pomocy wymagają UTF-8
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")

    setup_logger()
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
