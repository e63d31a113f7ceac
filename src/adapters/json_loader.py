"""Loading of JSON inputs for the demonstrations.

The file is only decoded here; validation is the schema's job.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def load_json(path: Path) -> Any:
    raw = path.read_text(encoding="utf-8")
    return json.loads(raw)
