# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Tool output serialization.

Tool results are plain dicts built by swatchkit.runtime.tools. This
module turns them into the JSON text a tool-calling server returns.
"""

from __future__ import annotations

import json
from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


def to_tool_output(
    data: dict,
    *,
    format: SerializerFormat = SerializerFormat.JSON_PRETTY,
) -> str:
    """Serialize a tool result dict as JSON.

    Args:
        data: Result from one of the tool functions.
        format: JSON (compact separators) or JSON_PRETTY (indent=2).

    Returns:
        JSON string suitable for tool output.
    """
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def tool_error(message: str) -> dict:
    """Error payload for a failed tool call."""
    return {"error": message}
