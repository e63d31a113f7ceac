"""Example values fed to the schemas, one per demonstration."""

from __future__ import annotations

from datetime import datetime
from typing import Any

SAMPLE_EMAIL = "jake.mcinerney@grow.com"
WRONG_EMAIL = "jake.mcinerney@epcior.com"


def sample_user() -> dict[str, Any]:
    """A user that satisfies every rule of `User`."""

    return {
        "id": "jfkdsaljfkd!!!$j34k2lj",
        "username": "jakeinerney",
        "age": 32,
        "birthday": datetime.now(),
        "isDeveloper": True,
        "isSuperCool": True,
        "hobbies": "Guitar",
        "family": ["Kaitlin", "Charlie"],
        "coordinates": [45, "38", 87],
        "subscriptionRenewal": {
            "status": "success",
            "userSubscribed": True,
            "subscriptionTier": "whiteLabel",
        },
    }


def invalid_user() -> dict[str, Any]:
    """Wrong type for `username`, everything else missing."""

    return {"username": 1}


def sample_record(*, include_invalid: bool = False) -> dict[str, Any]:
    record: dict[str, Any] = {
        "keyDoesNotMatter": "this'll log correctly",
        "thisKeyDoesNotMatterEither": "so will this",
    }
    if include_invalid:
        record["thisWillThrowAnError"] = 1
    return record


def sample_user_map() -> dict[str, dict[str, str]]:
    return {
        "id-wayne": {"name": "Wayne"},
        "id-garth": {"name": "Garth"},
    }


async def _resolved(value: Any) -> Any:
    return value


def sample_promise(value: Any = "Hello there"):
    """An awaitable that resolves immediately to `value`."""

    return _resolved(value)


def sample_family(*, duplicate: bool = False) -> list[str]:
    family = ["Kaitlin", "Charlie"]
    if duplicate:
        family.append("Kaitlin")
    return family
