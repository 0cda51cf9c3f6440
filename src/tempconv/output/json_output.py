from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tempconv.models.result import Conversion


def _serialize(data: Conversion | list[Conversion] | list[dict[str, Any]]) -> Any:
    """Dump conversion records in JSON mode so scales become their codes."""
    if isinstance(data, list):
        return [_serialize(item) for item in data]
    if isinstance(data, dict):
        return data
    return data.model_dump(mode="json")


def _envelope(*, ok: bool, command: str, **body: Any) -> str:
    envelope: dict[str, Any] = {
        "ok": ok,
        "command": command,
        **body,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return json.dumps(envelope, indent=2)


def format_json_response(
    *, data: Conversion | list[Conversion] | list[dict[str, Any]], command: str
) -> str:
    """Return a JSON envelope for a successful command.

    The envelope has the shape::

        {
          "ok": true,
          "command": "<command>",
          "data": <conversion, list of conversions, or scale rows>,
          "timestamp": "<ISO-8601 UTC>"
        }
    """
    return _envelope(ok=True, command=command, data=_serialize(data))


def format_json_error(*, code: str, message: str, command: str) -> str:
    """Return a JSON envelope with ``"ok": false`` and an ``error`` object."""
    return _envelope(ok=False, command=command, error={"code": code, "message": message})
