"""Doctor command for environment diagnostics."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_distribution(name: str) -> tuple[bool, str]:
    try:
        return True, version(name)
    except PackageNotFoundError:
        return False, "not installed"


def _check_pydantic_major() -> tuple[bool, str]:
    ok, detail = _check_distribution("pydantic")
    if not ok:
        return ok, detail
    if not detail.startswith("2."):
        return False, f"{detail} (pydantic v2 required)"
    return True, detail


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    table = Table(title="schema-tour Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_pydantic, detail_pydantic = _check_pydantic_major()
    table.add_row("pydantic", "OK" if ok_pydantic else "FAIL", detail_pydantic)

    ok_email, detail_email = _check_distribution("email-validator")
    table.add_row("email-validator", "OK" if ok_email else "FAIL", detail_email)

    ok_settings_pkg, detail_settings_pkg = _check_distribution("pydantic-settings")
    table.add_row("pydantic-settings", "OK" if ok_settings_pkg else "FAIL", detail_settings_pkg)

    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    settings: AppSettings | None = None
    try:
        settings = AppSettings()
    except ValidationError as exc:
        table.add_row("Settings", "FAIL", f"{exc.error_count()} invalid value(s)")
    if settings is not None:
        table.add_row("Settings", "OK", "loaded")
        table.add_row("Brand domain", "OK", settings.brand_email_domain)
        table.add_row("Error prefix", "OK", repr(settings.error_prefix))
        table.add_row("Max issues", "OK", str(settings.max_issues_in_message))

    _console.print(table)

    if not ok_email:
        _console.print(
            "\n[yellow]Note:[/yellow] the `email` demo needs `pip install 'pydantic[email]'`."
        )
    if not (ok_pydantic and ok_email and settings is not None):
        raise typer.Exit(code=1)
