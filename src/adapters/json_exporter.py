"""JSON export of parsed values.

Why JSON:
- A parsed model is easiest to inspect (or diff) as a stable document.
- Keys are written by alias so the output reads like the input.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def export_model_json(*, model: BaseModel, output_path: Path) -> Path:
    """Export `model` to UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = model.model_dump(mode="json", by_alias=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
