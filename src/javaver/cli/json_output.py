"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from pathlib import Path
from typing import Any

from javaver.cli.output import machine_output


def _serialize_for_json(obj: Any) -> Any:
    """Recursively convert Path values to strings.

    For Pydantic models, use model.model_dump(mode='json') to convert
    to dict, then pass to emit_json().
    """
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, dict):
        return {key: _serialize_for_json(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_serialize_for_json(item) for item in obj]
    return obj


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    Routes JSON through machine_output() so data stays on stdout while human
    messages stay on stderr.

    Args:
        data: Dictionary to serialize as JSON
    """
    machine_output(json.dumps(_serialize_for_json(data), indent=2))
