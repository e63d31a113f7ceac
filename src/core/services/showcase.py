"""The demonstrations of the tour.

Each `demo_*` function builds (or receives) an example value, validates it
with one schema and returns the parsed value. Printing stays in the CLI so
the same functions are usable from tests or a REPL.

Validation failures propagate as `pydantic.ValidationError`, except in
`demo_error_handling`, which is about reporting them.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, TypeAdapter
from pydantic.fields import FieldInfo

from core import samples
from core.config import AppSettings
from core.domain.models import FamilyRoster, NamedUser, User, brand_email
from core.domain.schemas import (
    ParseResult,
    PromiseSchema,
    map_of,
    parse,
    partial,
    record_of,
    safe_parse,
    shape,
)
from core.errors import ReadableValidationError, from_validation_error

logger = logging.getLogger(__name__)

UserRecord = record_of(str)
UserMap = map_of(str, NamedUser)
StringPromise = PromiseSchema(str)
Family = TypeAdapter(FamilyRoster)


@dataclass
class ErrorHandlingOutcome:
    """What `demo_error_handling` observed."""

    result: ParseResult[Any]
    readable: ReadableValidationError | None = None


def demo_user(*, data: dict[str, Any] | None = None) -> User:
    """Object validation: unions, lengths, literals, tuples, discriminated unions."""

    payload = samples.sample_user() if data is None else data
    logger.debug("Parsing user with keys %s", sorted(payload))
    user = parse(User, payload)
    logger.info("User %r parsed", user.username)
    return user


def demo_shape() -> dict[str, FieldInfo]:
    return shape(User)


def demo_partial(*, data: dict[str, Any] | None = None) -> BaseModel:
    """Same rules as `User`, but every key may be missing."""

    payload = {"username": "jakeinerney"} if data is None else data
    return parse(partial(User), payload)


def demo_record(*, include_invalid: bool = False) -> dict[str, str]:
    """Record: keys are free, values must be strings."""

    return parse(UserRecord, samples.sample_record(include_invalid=include_invalid))


def demo_map() -> dict[str, NamedUser]:
    return parse(UserMap, samples.sample_user_map())


def demo_promise(*, value: Any = "Hello there", awaitable: bool = True) -> str:
    """Awaitable validation.

    `PromiseSchema.parse` rejects non-awaitables right away; the resolved value
    is validated only once awaited.
    """

    source = samples.sample_promise(value) if awaitable else value
    pending = StringPromise.parse(source)
    logger.debug("Awaiting %r", pending)
    return asyncio.run(pending)


def demo_email(*, email: str = samples.SAMPLE_EMAIL, settings: AppSettings | None = None) -> str:
    """Refinement on top of a built-in string format."""

    settings = settings or AppSettings()
    schema = TypeAdapter(brand_email(settings.brand_email_domain))
    return parse(schema, email)


def demo_family(*, duplicate: bool = False) -> list[str]:
    """Custom error type and context from a validator."""

    return parse(Family, samples.sample_family(duplicate=duplicate))


def demo_error_handling(
    *,
    data: dict[str, Any] | None = None,
    settings: AppSettings | None = None,
) -> ErrorHandlingOutcome:
    """`safe_parse` instead of try/except, then a readable message."""

    settings = settings or AppSettings()
    payload = samples.invalid_user() if data is None else data
    result = safe_parse(User, payload)
    if result.success:
        return ErrorHandlingOutcome(result=result)

    assert result.error is not None
    logger.info("User rejected with %d issue(s)", result.error.error_count())
    readable = from_validation_error(
        result.error,
        prefix=settings.error_prefix,
        prefix_separator=settings.error_prefix_separator,
        issue_separator=settings.error_issue_separator,
        max_issues=settings.max_issues_in_message,
    )
    return ErrorHandlingOutcome(result=result, readable=readable)


@dataclass(frozen=True)
class Demo:
    name: str
    title: str
    run: Callable[..., Any]
    uses_settings: bool = False

    def __call__(self, settings: AppSettings | None = None) -> Any:
        if self.uses_settings and settings is not None:
            return self.run(settings=settings)
        return self.run()


DEMOS: dict[str, Demo] = {
    demo.name: demo
    for demo in (
        Demo("user", "Object schema", demo_user),
        Demo("shape", "Schema shape", demo_shape),
        Demo("partial", "Partial schema", demo_partial),
        Demo("record", "Record", demo_record),
        Demo("map", "Map", demo_map),
        Demo("promise", "Promise", demo_promise),
        Demo("email", "Refinement", demo_email, uses_settings=True),
        Demo("family", "Super refinement", demo_family),
        Demo("errors", "Error handling", demo_error_handling, uses_settings=True),
    )
}
