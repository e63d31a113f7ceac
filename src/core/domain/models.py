"""Schemas of the tour (pydantic v2).

Each field maps to one validation feature:
- unions, minimum length, numeric comparisons, optional/nullable/default
- literals and enums, non-empty arrays, tuples
- discriminated unions and instance checks
- refinements with a custom message or a custom error type
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import AfterValidator, BaseModel, EmailStr, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict
from pydantic_core import PydanticCustomError

BRAND_EMAIL_DOMAIN = "grow.com"


class Hobby(str, Enum):
    """Closed set of hobbies a user may pick."""

    WOODWORKING = "Woodworking"
    BIKING = "Biking"
    GUITAR = "Guitar"


class SubscriptionSuccess(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: Literal["success"]
    user_subscribed: bool
    subscription_tier: str


class SubscriptionFailed(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    status: Literal["failed"]
    # Plain isinstance check.
    error: Exception


SubscriptionRenewal = Annotated[
    Union[SubscriptionSuccess, SubscriptionFailed],
    Field(discriminator="status"),
]

# Strict items: numeric text is not a number.
Coordinates = tuple[StrictFloat, StrictStr, Annotated[StrictInt, Field(gt=80)]]


class User(BaseModel):
    """A user record.

    Keys are accepted in camelCase (`isDeveloper`) or by field name
    (`is_developer`). Unknown keys are dropped.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Union[str, float] = Field(
        ...,
        description="Opaque identifier, text or number.",
    )
    username: str = Field(
        ...,
        min_length=3,
        description="Public handle.",
    )
    age: StrictFloat = Field(
        ...,
        gt=0,
        description="Age in years.",
    )
    birthday: datetime | None = Field(
        default=None,
        description="Date of birth, optional.",
    )
    is_developer: StrictBool | None = Field(
        default=False,
        description="Nullable flag, False when missing.",
    )
    is_super_cool: Literal[True] = Field(
        ...,
        description="Must be exactly True.",
    )
    hobbies: Hobby = Field(
        ...,
        description="One of the supported hobbies.",
    )
    family: list[str] = Field(
        ...,
        min_length=1,
        description="Family member names, at least one.",
    )
    coordinates: Coordinates = Field(
        ...,
        description="(number, text, integer greater than 80).",
    )
    subscription_renewal: SubscriptionRenewal = Field(
        ...,
        description="Outcome of the last renewal, keyed by `status`.",
    )


class NamedUser(BaseModel):
    name: str


def _ends_with_domain(domain: str):
    suffix = f"@{domain}"

    def check(value: str) -> str:
        if not value.endswith(suffix):
            raise PydanticCustomError(
                "brand_email",
                "Email must end with {suffix}",
                {"suffix": suffix},
            )
        return value

    return check


def brand_email(domain: str = BRAND_EMAIL_DOMAIN):
    """Build an email type that only accepts addresses of `domain`."""

    return Annotated[EmailStr, AfterValidator(_ends_with_domain(domain))]


BrandEmail = brand_email()


def _unique_members(members: list[str]) -> list[str]:
    seen: set[str] = set()
    for index, name in enumerate(members):
        if name in seen:
            raise PydanticCustomError(
                "duplicate_family_member",
                "Family member '{name}' is listed twice (position {index})",
                {"name": name, "index": index},
            )
        seen.add(name)
    return members


FamilyRoster = Annotated[list[str], Field(min_length=1), AfterValidator(_unique_members)]
