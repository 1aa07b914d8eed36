"""
Wspólne fixture'y testów indeksu skryptów.
Drzewa deklaracji budowane ręcznie (bez parsera C#) przez tree_of().
"""

import os
import sys

import pytest

# Katalog projektu na sys.path, żeby importy działały bez instalacji
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from script_model import SourceCallable, SourceDeclaration, SourceTag  # noqa: E402


def tag(name, **arguments):
    return SourceTag(name=name, arguments=tuple(arguments.items()))


def method(name, *tags, body="{\nreturn null;\n}", line=1):
    return SourceCallable(name=name, tags=tuple(tags), body=body, line=line, offset=0)


def declaration(name, *tags, methods=(), line=1):
    return SourceDeclaration(name=name, tags=tuple(tags), callables=tuple(methods), line=line)


def case_function(tenant="t1", tag_name="CaseBuildFunction", regulation="Base", **extra):
    return tag(
        tag_name,
        tenantIdentifier=tenant,
        userIdentifier="u1",
        employeeIdentifier="e1",
        payrollName="Payroll",
        regulationName=regulation,
        **extra,
    )


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Każdy test startuje bez zmiennych PSI_* z otoczenia."""
    for name in ("PSI_TENANT", "PSI_LOG_LEVEL", "PSI_LOG_FILE", "PSI_ENCODING", "PSI_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
