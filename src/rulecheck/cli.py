"""CLI interface for rulecheck using Typer framework."""

import dataclasses
import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rulecheck import __description__, __version__
from rulecheck.config import apply_config, load_config
from rulecheck.exceptions import RulecheckError
from rulecheck.results import ErrorList, ErrorMap
from rulecheck.rules import ACTIONS, OPTIONS, VALIDATORS, parse as parse_rules
from rulecheck.rules.resolver import find
from rulecheck.validation import get_default_tag, validate_record, validate_value
from rulecheck.validators import BUILTIN_VALIDATORS

app = typer.Typer(
    name="rulecheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

VALUE_TYPES = ["str", "int", "float", "json"]
OUTPUT_FORMATS = ["table", "json"]

EXIT_FAILED = 1
EXIT_USAGE = 2


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"rulecheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log rule resolution and execution details")
    ] = False,
) -> None:
    """rulecheck - Declarative validation of values and records."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _fail(message: str, code: int = EXIT_USAGE) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code)


def _prepare(config: Path | None, format: str) -> None:
    if format not in OUTPUT_FORMATS:
        _fail(f"Invalid format '{format}'. Must be one of: {', '.join(OUTPUT_FORMATS)}")
    try:
        apply_config(load_config(config))
    except ValueError as e:
        _fail(str(e))


def _coerce_value(raw: str, value_type: str) -> Any:
    if value_type == "int":
        return int(raw)
    if value_type == "float":
        return float(raw)
    if value_type == "json":
        return jsonlib.loads(raw)
    return raw


def _load_json_object(path: Path, what: str) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = jsonlib.load(f)
    except FileNotFoundError:
        _fail(f"{what} file not found: {path}")
    except jsonlib.JSONDecodeError as e:
        _fail(f"Invalid JSON in {what} file {path}: {e}")
    if not isinstance(data, dict):
        _fail(f"{what} file must contain a JSON object: {path}")
    return data


def build_record(data: dict[str, Any], rules: dict[str, str], tag: str) -> Any:
    """Build a dataclass instance whose fields carry the given rule specifications."""
    names = list(dict.fromkeys([*data, *rules]))
    fields = [
        (name, Any, dataclasses.field(default=None, metadata={tag: rules.get(name, "")}))
        for name in names
    ]
    record_type = dataclasses.make_dataclass("JsonRecord", fields)
    return record_type(**{name: data.get(name) for name in names})


def _print_failures(rows: list[tuple[str, str, str]]) -> None:
    table = Table()
    table.add_column("Field", style="cyan")
    table.add_column("Rule", style="white")
    table.add_column("Message", style="white")
    for field_name, rule_name, message in rows:
        table.add_row(field_name, rule_name, escape(message))
    console.print(table)


def _report_value(errors: ErrorList, format: str) -> None:
    if format == "json":
        console.print_json(errors.to_json())
        return
    if errors.empty():
        console.print("[green]Valid[/green]")
        return
    console.print(f"[red]Invalid:[/red] {len(errors)} failure(s)")
    _print_failures([("value", failure.rule, failure.message) for failure in errors])


def _report_record(errors: ErrorMap, format: str) -> None:
    if format == "json":
        console.print_json(errors.to_json())
        return
    if errors.empty():
        console.print("[green]Valid[/green]")
        return
    console.print(f"[red]Invalid:[/red] {len(errors)} field(s) failed")
    _print_failures([
        (field_name, failure.rule, failure.message)
        for field_name, field_errors in errors.items()
        for failure in field_errors
    ])


@app.command()
def check(
    value: Annotated[
        str,
        typer.Argument(help="Value to validate")
    ],
    rules: Annotated[
        list[str],
        typer.Argument(help="Rule specifications, e.g. 'required|max:255'")
    ],
    value_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Interpret VALUE as: str, int, float, json (default: str)")
    ] = "str",
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .rulecheck.json)")
    ] = None,
) -> None:
    """Validate a single value against rule specifications."""
    if value_type not in VALUE_TYPES:
        _fail(f"Invalid type '{value_type}'. Must be one of: {', '.join(VALUE_TYPES)}")
    _prepare(config, format)

    try:
        typed_value = _coerce_value(value, value_type)
    except ValueError as e:
        _fail(f"Cannot read value as {value_type}: {e}")

    try:
        errors = validate_value(typed_value, *rules)
    except RulecheckError as e:
        _fail(str(e))

    _report_value(errors, format)
    if not errors.empty():
        raise typer.Exit(EXIT_FAILED)


@app.command()
def record(
    data: Annotated[
        Path,
        typer.Argument(help="JSON file with the record as an object")
    ],
    rules: Annotated[
        Path,
        typer.Argument(help="JSON file mapping field names to rule specifications")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .rulecheck.json)")
    ] = None,
) -> None:
    """Validate a JSON record field by field."""
    _prepare(config, format)

    record_data = _load_json_object(data, "Data")
    field_rules = _load_json_object(rules, "Rules")
    if not all(isinstance(spec, str) for spec in field_rules.values()):
        _fail("Rules file values must be rule specification strings")

    try:
        instance = build_record(record_data, field_rules, get_default_tag())
    except TypeError as e:
        _fail(f"Cannot build record: {e}")

    try:
        errors = validate_record(instance)
    except RulecheckError as e:
        _fail(str(e))

    _report_record(errors, format)
    if not errors.empty():
        raise typer.Exit(EXIT_FAILED)


@app.command()
def parse(
    spec: Annotated[
        str,
        typer.Argument(help="Rule specification to parse")
    ],
) -> None:
    """Show how a rule specification is split and resolved."""
    table = Table()
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Params", style="white")
    table.add_column("Resolves To", style="white")

    unknown = 0
    for index, rule in enumerate(parse_rules(spec), start=1):
        resolution = find(rule)
        if resolution is None:
            unknown += 1
            target = "[red]unknown[/red]"
        else:
            target = resolution.kind.value
            if resolution.builtin:
                target += " (built-in)"
        params = ", ".join(repr(param) for param in rule.params)
        table.add_row(str(index), escape(repr(rule.name)), escape(params), target)

    console.print(table)
    if unknown:
        console.print(f"[red]{unknown} rule(s) not found[/red]")
        raise typer.Exit(EXIT_FAILED)


@app.command("rules")
def list_rules() -> None:
    """List registered validators, options and actions."""
    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Namespace", style="white")

    for name in sorted(BUILTIN_VALIDATORS):
        table.add_row(name, "validator (built-in)")
    for name in sorted(VALIDATORS):
        table.add_row(name, "validator")
    for option in OPTIONS:
        table.add_row(str(option), "option")
    for name in ACTIONS:
        table.add_row(name, "action")

    console.print(table)
