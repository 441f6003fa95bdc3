"""Reading payload files and writing rendered views."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from trip_options.adapters.io.payload import parse_recommendation
from trip_options.core.errors import PayloadError
from trip_options.core.models import Recommendation


def load_recommendation(path: Path) -> Recommendation:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise PayloadError(f"cannot read recommendation from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise PayloadError(f"recommendation in {path} must be a JSON object")
    return parse_recommendation(data)


def write_view(path: Path, payload: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, ensure_ascii=True, indent=2, default=str)
