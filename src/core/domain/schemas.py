"""Schema combinators on top of pydantic.

Why a thin layer:
- Models (`BaseModel`) and arbitrary types (`TypeAdapter`) validate through
  different entry points; `parse`/`safe_parse` give both a single call.
- Records, maps and awaitables are plain `TypeAdapter`s over typing constructs.
- Model variants (partial, pick, omit...) are generated with `create_model`
  so the original schema stays untouched.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Mapping
from dataclasses import dataclass
from typing import Annotated, Any, Generic, Optional, TypeVar, Union

from pydantic import AfterValidator, BaseModel, Field, TypeAdapter, ValidationError, create_model
from pydantic.fields import FieldInfo
from pydantic_core import PydanticCustomError

T = TypeVar("T")

Schema = Union[type[BaseModel], TypeAdapter]


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of `safe_parse`: either `data` or `error` is set."""

    success: bool
    data: T | None = None
    error: ValidationError | None = None


def parse(schema: Schema, data: Any) -> Any:
    """Validate `data` against a model class or a `TypeAdapter`.

    Raises `pydantic.ValidationError` when the input does not conform.
    """

    if isinstance(schema, TypeAdapter):
        return schema.validate_python(data)
    return schema.model_validate(data)


def safe_parse(schema: Schema, data: Any) -> ParseResult[Any]:
    """Like `parse` but reports validation failures in the result."""

    try:
        return ParseResult(success=True, data=parse(schema, data))
    except ValidationError as exc:
        return ParseResult(success=False, error=exc)


def record_of(value_type: Any) -> TypeAdapter:
    """String-keyed record; only the values are validated."""

    return TypeAdapter(dict[str, value_type])


def map_of(key_type: Any, value_type: Any) -> TypeAdapter:
    """Mapping with validated keys and values (any `Mapping` is accepted)."""

    return TypeAdapter(dict[key_type, value_type])


def _require_awaitable(value: Any) -> Any:
    if not inspect.isawaitable(value):
        raise PydanticCustomError(
            "awaitable_type",
            "Expected awaitable, received {received}",
            {"received": type(value).__name__},
        )
    return value


_AWAITABLE = TypeAdapter(Annotated[Any, AfterValidator(_require_awaitable)])


class PromiseSchema:
    """Validation of an awaitable in two steps.

    1. `parse` checks that the input is awaitable (synchronously).
    2. The returned coroutine awaits it and validates the resolved value.
    """

    def __init__(self, inner: Any) -> None:
        self.inner = inner if isinstance(inner, TypeAdapter) else TypeAdapter(inner)

    def parse(self, value: Any) -> Awaitable[Any]:
        awaitable = _AWAITABLE.validate_python(value)

        async def resolved() -> Any:
            return self.inner.validate_python(await awaitable)

        return resolved()


def shape(model: type[BaseModel]) -> dict[str, FieldInfo]:
    """Fields of `model` keyed by their external name (alias when set)."""

    return {info.alias or name: info for name, info in model.model_fields.items()}


def _definition(info: FieldInfo, *, optional: bool = False) -> tuple[Any, FieldInfo]:
    annotation: Any = info.annotation
    extras: list[Any] = list(info.metadata)
    if info.discriminator is not None:
        extras.append(Field(discriminator=info.discriminator))
    if extras:
        annotation = Annotated[(annotation, *extras)]

    common = {"alias": info.alias, "description": info.description}
    if optional:
        return Optional[annotation], Field(default=None, **common)
    if info.default_factory is not None:
        return annotation, Field(default_factory=info.default_factory, **common)
    if info.is_required():
        return annotation, Field(..., **common)
    return annotation, Field(default=info.default, **common)


def _check_names(model: type[BaseModel], names: tuple[str, ...]) -> None:
    unknown = [n for n in names if n not in model.model_fields]
    if unknown:
        raise KeyError(f"{model.__name__} has no field(s): {', '.join(unknown)}")


def _derive(model: type[BaseModel], suffix: str, fields: Mapping[str, tuple[Any, FieldInfo]]):
    return create_model(
        f"{model.__name__}{suffix}",
        __config__=model.model_config,
        __module__=model.__module__,
        **fields,
    )


def partial(model: type[BaseModel]) -> type[BaseModel]:
    """Every field optional (default None); the inner constraints still apply."""

    fields = {name: _definition(info, optional=True) for name, info in model.model_fields.items()}
    return _derive(model, "Partial", fields)


def pick(model: type[BaseModel], *names: str) -> type[BaseModel]:
    _check_names(model, names)
    fields = {name: _definition(model.model_fields[name]) for name in names}
    return _derive(model, "Pick", fields)


def omit(model: type[BaseModel], *names: str) -> type[BaseModel]:
    _check_names(model, names)
    fields = {
        name: _definition(info)
        for name, info in model.model_fields.items()
        if name not in names
    }
    return _derive(model, "Omit", fields)


def extend(model: type[BaseModel], **fields: Any) -> type[BaseModel]:
    """Subclass `model` with extra fields (`name=(type, default_or_Field)`)."""

    return create_model(f"{model.__name__}Extended", __base__=model, __module__=model.__module__, **fields)


def merge(model: type[BaseModel], other: type[BaseModel]) -> type[BaseModel]:
    """Fields of both models; `other` wins on name clashes."""

    fields = {name: _definition(info) for name, info in other.model_fields.items()}
    return create_model(
        f"{model.__name__}{other.__name__}",
        __base__=model,
        __module__=model.__module__,
        **fields,
    )


def strict(model: type[BaseModel]) -> type[BaseModel]:
    """Reject unknown keys."""

    return create_model(
        f"Strict{model.__name__}",
        __base__=model,
        __module__=model.__module__,
        __cls_kwargs__={"extra": "forbid"},
    )


def passthrough(model: type[BaseModel]) -> type[BaseModel]:
    """Keep unknown keys as extra attributes."""

    return create_model(
        f"Passthrough{model.__name__}",
        __base__=model,
        __module__=model.__module__,
        __cls_kwargs__={"extra": "allow"},
    )
