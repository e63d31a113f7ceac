"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same tables and panels.
"""

from __future__ import annotations

from typing import Any

from pydantic.fields import FieldInfo
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from core.errors import ReadableValidationError, format_path


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Can be turned off for non-interactive runs (pipes, scripts).
    """

    title = Text("schema-tour", style="bold cyan")
    subtitle = Text("Objects • Unions • Records • Maps • Promises • Refinements", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_result_panel(title: str, value: Any) -> Panel:
    """Panel with the pretty-printed result of a parse call."""

    return Panel(Pretty(value, expand_all=False), title=Text(title, style="bold green"), border_style="green")


def _type_label(annotation: Any) -> str:
    if isinstance(annotation, type) and not getattr(annotation, "__args__", None):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


def build_shape_table(fields: dict[str, FieldInfo]) -> Table:
    table = Table(title="Schema shape")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Type", style="white")
    table.add_column("Required", style="green")
    table.add_column("Constraints", style="magenta")
    table.add_column("Description", style="dim")

    for key, info in fields.items():
        annotation = _type_label(info.annotation)
        constraints = ", ".join(repr(m) for m in info.metadata)
        if info.discriminator:
            constraints = ", ".join(filter(None, [constraints, f"discriminator={info.discriminator!r}"]))
        table.add_row(
            key,
            annotation,
            "yes" if info.is_required() else "no",
            constraints or "-",
            info.description or "",
        )
    return table


def build_issues_table(error: ReadableValidationError) -> Table:
    """One row per pydantic error, including those cut from the message."""

    table = Table(title="Issues")
    table.add_column("Path", style="cyan", no_wrap=True)
    table.add_column("Type", style="yellow")
    table.add_column("Message", style="red")
    table.add_column("Input", style="dim")

    for detail in error.details:
        table.add_row(
            format_path(detail.get("loc", ())) or "-",
            str(detail.get("type", "")),
            str(detail.get("msg", "")),
            repr(detail.get("input")),
        )
    return table


def build_error_panel(error: ReadableValidationError) -> Panel:
    return Panel(Text(error.message), title=Text("Invalid input", style="bold red"), border_style="red")
