# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Tool-facing runtime for swatchkit.

Adapters between raw tool-call arguments and the color core:

1. Tool functions -- parse arguments, call the core, return dicts
2. Serializers -- turn those dicts into JSON tool output

The runtime never talks to a transport.
"""

from swatchkit.runtime.serializers import (
    SerializerFormat,
    to_tool_output,
    tool_error,
)
from swatchkit.runtime.tools import (
    analyze_palette_tool,
    check_contrast_tool,
    convert_color_tool,
    generate_palette_tool,
    get_harmonies_tool,
    suggest_text_color_tool,
)

__all__ = [
    "generate_palette_tool",
    "get_harmonies_tool",
    "check_contrast_tool",
    "suggest_text_color_tool",
    "convert_color_tool",
    "analyze_palette_tool",
    "to_tool_output",
    "tool_error",
    "SerializerFormat",
]
