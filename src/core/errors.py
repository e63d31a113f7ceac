"""Human-readable validation errors.

Why:
- `str(ValidationError)` is accurate but too detailed for end users.
- One line per failure, with a prefix and the path of each issue, is what a
  form or a terminal needs.

Format: `Validation error: <message> at "<path>"; <message> at "<path>"`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

DEFAULT_PREFIX = "Validation error"
DEFAULT_PREFIX_SEPARATOR = ": "
DEFAULT_ISSUE_SEPARATOR = "; "
DEFAULT_MAX_ISSUES = 99


class ReadableValidationError(Exception):
    """A `ValidationError` rendered as a single readable message.

    `details` keeps every pydantic error dict, including the ones left out of
    `message` by `max_issues`.
    """

    def __init__(self, message: str, details: list[dict[str, Any]]) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


def format_path(loc: Sequence[int | str]) -> str:
    """`("coordinates", 2)` -> `coordinates[2]`; `("a", "b")` -> `a.b`; `("k", "[key]")` -> `k[key]`."""

    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        elif part == "[key]":
            # Dict key failures: pydantic appends this marker after the key.
            out += part
        elif out:
            out += f".{part}"
        else:
            out = str(part)
    return out


def format_issue(error: dict[str, Any]) -> str:
    path = format_path(error.get("loc", ()))
    message = error.get("msg", "Invalid input")
    if not path:
        return message
    return f'{message} at "{path}"'


def from_validation_error(
    exc: ValidationError,
    *,
    prefix: str | None = DEFAULT_PREFIX,
    prefix_separator: str = DEFAULT_PREFIX_SEPARATOR,
    issue_separator: str = DEFAULT_ISSUE_SEPARATOR,
    max_issues: int = DEFAULT_MAX_ISSUES,
) -> ReadableValidationError:
    """Convert a pydantic `ValidationError` into a `ReadableValidationError`."""

    if max_issues < 1:
        raise ValueError("max_issues must be >= 1")

    details = exc.errors(include_url=False)
    reason = issue_separator.join(format_issue(e) for e in details[:max_issues])

    if not prefix:
        message = reason
    elif reason:
        message = f"{prefix}{prefix_separator}{reason}"
    else:
        message = prefix
    return ReadableValidationError(message, details)
