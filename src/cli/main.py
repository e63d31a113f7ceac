"""Command line interface of the tour (Typer + Rich).

Each command runs one demonstration from `core.services.showcase` and prints
the parsed value. Validation failures are printed as a readable message plus
an issues table, and the command exits with code 1.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adapters.json_exporter import export_model_json
from adapters.json_loader import load_json
from cli import doctor
from cli.ui_components import (
    build_error_panel,
    build_issues_table,
    build_result_panel,
    build_shape_table,
    print_banner,
)
from core.config import AppSettings
from core.errors import ReadableValidationError, from_validation_error
from core.services import showcase

app = typer.Typer(
    no_args_is_help=True,
    help="A tour of schema validation with pydantic: objects, records, maps, promises, refinements.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    handler = RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)
    logging.basicConfig(level=level.upper(), format="%(message)s", handlers=[handler], force=True)


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()


def _readable(exc: ValidationError, settings: AppSettings) -> ReadableValidationError:
    return from_validation_error(
        exc,
        prefix=settings.error_prefix,
        prefix_separator=settings.error_prefix_separator,
        issue_separator=settings.error_issue_separator,
        max_issues=settings.max_issues_in_message,
    )


def _print_invalid(readable: ReadableValidationError) -> None:
    _console.print(build_error_panel(readable))
    _console.print(build_issues_table(readable))


def _fail(exc: ValidationError, settings: AppSettings) -> NoReturn:
    logger.debug("Validation failed: %s", exc)
    _print_invalid(_readable(exc, settings))
    raise typer.Exit(code=1)


def _render(name: str, title: str, value: Any) -> None:
    if name == "shape":
        _console.print(build_shape_table(value))
    elif isinstance(value, showcase.ErrorHandlingOutcome):
        if value.readable is None:
            _console.print(build_result_panel(f"{title}: input is valid", value.result.data))
        else:
            _print_invalid(value.readable)
    else:
        _console.print(build_result_panel(title, value))


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="DEBUG logging on stderr."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {_readable(exc, AppSettings.model_construct())}")
        if ctx.invoked_subcommand == "doctor":
            # doctor reports the broken settings itself.
            return
        raise typer.Exit(code=2) from exc

    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings

    if settings.show_banner and not no_banner:
        print_banner(_console)


@app.command()
def user(
    ctx: typer.Context,
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        help="JSON file with the user to validate (default: built-in sample).",
    ),
    export: Optional[Path] = typer.Option(None, "--export", help="Write the parsed user as JSON."),
) -> None:
    """Validate a user object."""

    settings = _settings(ctx)
    data = None
    if input_path is not None:
        try:
            data = load_json(input_path)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise typer.BadParameter(f"not a readable JSON document ({exc})", param_hint="--input") from exc
        if not isinstance(data, dict):
            raise typer.BadParameter("the JSON document must be an object", param_hint="--input")
    try:
        parsed = showcase.demo_user(data=data)
    except ValidationError as exc:
        _fail(exc, settings)

    _render("user", "User", parsed)
    if export is not None:
        path = export_model_json(model=parsed, output_path=export)
        _console.print(f"[green]Saved:[/green] {path}")


@app.command()
def shape() -> None:
    """Show the fields of the user schema."""

    _render("shape", "Shape", showcase.demo_shape())


@app.command()
def partial(ctx: typer.Context) -> None:
    """Validate a user where every key is optional."""

    try:
        parsed = showcase.demo_partial()
    except ValidationError as exc:
        _fail(exc, _settings(ctx))
    _render("partial", "Partial user", parsed)


@app.command()
def record(
    ctx: typer.Context,
    include_invalid: bool = typer.Option(
        False, "--include-invalid", help="Add an entry whose value is not a string."
    ),
) -> None:
    """Validate a record of strings (keys are not checked)."""

    try:
        parsed = showcase.demo_record(include_invalid=include_invalid)
    except ValidationError as exc:
        _fail(exc, _settings(ctx))
    _render("record", "Record", parsed)


@app.command(name="map")
def map_(ctx: typer.Context) -> None:
    """Validate a mapping of id -> {name}."""

    try:
        parsed = showcase.demo_map()
    except ValidationError as exc:
        _fail(exc, _settings(ctx))
    _render("map", "Map", parsed)


@app.command()
def promise(
    ctx: typer.Context,
    value: str = typer.Option("Hello there", "--value", help="Value the awaitable resolves to."),
    resolve_to_number: bool = typer.Option(
        False, "--resolve-to-number", help="Resolve to a number instead of text."
    ),
    not_awaitable: bool = typer.Option(
        False, "--not-awaitable", help="Pass the plain value instead of an awaitable."
    ),
) -> None:
    """Validate an awaitable that resolves to a string."""

    resolved: Any = 42 if resolve_to_number else value
    try:
        parsed = showcase.demo_promise(value=resolved, awaitable=not not_awaitable)
    except ValidationError as exc:
        _fail(exc, _settings(ctx))
    _render("promise", "Promise", parsed)


@app.command()
def email(
    ctx: typer.Context,
    address: Optional[str] = typer.Argument(None, help="Email to check (default: built-in sample)."),
) -> None:
    """Validate a brand email (format + domain refinement)."""

    settings = _settings(ctx)
    kwargs: dict[str, Any] = {"settings": settings}
    if address is not None:
        kwargs["email"] = address
    try:
        parsed = showcase.demo_email(**kwargs)
    except ValidationError as exc:
        _fail(exc, settings)
    _render("email", "Brand email", parsed)


@app.command()
def family(
    ctx: typer.Context,
    duplicate: bool = typer.Option(False, "--duplicate", help="List a family member twice."),
) -> None:
    """Validate a family roster with a custom error type."""

    try:
        parsed = showcase.demo_family(duplicate=duplicate)
    except ValidationError as exc:
        _fail(exc, _settings(ctx))
    _render("family", "Family", parsed)


@app.command()
def errors(
    ctx: typer.Context,
    raw: bool = typer.Option(False, "--raw", help="Also print the library's own error text."),
) -> None:
    """Report an invalid user with safe parsing and a readable message."""

    outcome = showcase.demo_error_handling(settings=_settings(ctx))
    _render("errors", "Error handling", outcome)
    if raw and outcome.result.error is not None:
        _console.print(str(outcome.result.error), markup=False, highlight=False)


@app.command(name="all")
def run_all(ctx: typer.Context) -> None:
    """Run every demonstration with its sample value.

    A failing demonstration is reported and the run goes on; the exit code is 1
    when at least one failed.
    """

    settings = _settings(ctx)
    failed: list[str] = []
    for demo in showcase.DEMOS.values():
        _console.rule(demo.title)
        try:
            value = demo(settings)
        except ValidationError as exc:
            logger.debug("Demonstration %s failed: %s", demo.name, exc)
            _print_invalid(_readable(exc, settings))
            failed.append(demo.name)
            continue
        _render(demo.name, demo.title, value)

    if failed:
        _console.print(f"[red]Failed:[/red] {', '.join(failed)}")
        raise typer.Exit(code=1)


@app.command(name="list")
def list_demos() -> None:
    """List the demonstrations in the order `all` runs them."""

    table = Table(title="Demonstrations")
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("About", style="dim")
    for demo in showcase.DEMOS.values():
        doc = (demo.run.__doc__ or "").strip().splitlines()
        table.add_row(demo.name, demo.title, doc[0] if doc else "")
    _console.print(table)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
