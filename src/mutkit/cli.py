from typing import List, Optional
import importlib
import os
import sys
import typer
from .config import load_config, configure, SuiteConfig
from .errors import FormatError
from .formatting.sprintf import sprintf
from .logging import setup_logging
from .runners.runner import TestRunner
from .reporters.junit import JUnitReporter
from .reporters.console import ConsoleReporter

app = typer.Typer(add_completion=False, help="mutkit - mini unit tests and printf-style formatting")

def load_suite(target: str, cfg: SuiteConfig) -> TestRunner:
    """Resolve ``package.module:attribute`` to a TestRunner (or a factory taking the config)."""
    module_name, _, attr = target.partition(":")
    if not attr:
        raise typer.BadParameter("expected package.module:attribute", param_hint="TARGET")
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    obj = getattr(importlib.import_module(module_name), attr)
    if callable(obj) and not isinstance(obj, TestRunner):
        obj = obj(cfg)
    if not isinstance(obj, TestRunner):
        raise typer.BadParameter(f"{target} is not a TestRunner", param_hint="TARGET")
    return obj

def _coerce(arg: str):
    for kind in (int, float):
        try:
            return kind(arg)
        except ValueError:
            pass
    return arg

@app.command()
def run(
    target: str = typer.Argument(..., help="Suite to run, e.g. mypkg.tests:suite"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to suite options YAML"),
    list_tests: bool = typer.Option(False, "--list", help="List tests without running"),
    junit: Optional[str] = typer.Option(None, "--junit", help="Write JUnit XML to this path"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
):
    setup_logging(log_level.upper())
    cfg = load_config(config) if config else configure()
    runner = load_suite(target, cfg)

    if list_tests:
        for t in runner.tests:
            typer.echo(t.name)
        raise typer.Exit(code=0)

    runner.run()
    result = runner.results
    ConsoleReporter().emit(result)
    if junit: JUnitReporter(path=junit).emit(result)
    typer.echo(f"Done. {result.passed} passed, {result.failed} failed.")
    raise typer.Exit(code=0 if result.failed == 0 else 1)

@app.command("format")
def format_(
    template: str = typer.Argument(..., help="printf-style template, e.g. '%05.1f'"),
    args: Optional[List[str]] = typer.Argument(None, help="Values; numeric ones are passed as numbers"),
):
    try:
        typer.echo(sprintf(template, *[_coerce(a) for a in args or []]))
    except FormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
