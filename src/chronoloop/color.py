# SPDX-License-Identifier: MIT

from typing import Optional

# Neutral color for items without a project or explicit color
DEFAULT_COLOR = "grey50"

# Fixed category colors
GOAL_COLOR = "medium_purple"
REMINDER_COLOR = "dodger_blue1"

# Colors for workload intensity buckets
INTENSITY_COLORS = {
    "none": "bright_black",
    "light": "green",
    "moderate": "yellow",
    "heavy": "orange1",
    "overloaded": "red",
}

PROJECT_PALETTE = [
    "blue",
    "green",
    "purple",
    "red",
    "yellow",
    "slate_blue1",
    "hot_pink",
    "dark_cyan",
]


def string_hash(value: str) -> int:
    """Rolling 31-multiplier hash over UTF-16 code units, wrapped to signed 32 bits.

    Characters outside the BMP contribute both halves of their surrogate pair.
    """
    encoded = value.encode("utf-16-le", "surrogatepass")
    hash_value = 0
    for index in range(0, len(encoded), 2):
        code_unit = int.from_bytes(encoded[index : index + 2], "little")
        hash_value = (hash_value * 31 + code_unit) & 0xFFFFFFFF
    if hash_value >= 0x80000000:
        hash_value -= 0x100000000
    return hash_value


def get_project_color(project: Optional[str]) -> str:
    """Return a stable palette color for a project name.

    The same project always maps to the same color, across renders and sessions.
    """
    if not project:
        return DEFAULT_COLOR
    return PROJECT_PALETTE[abs(string_hash(project)) % len(PROJECT_PALETTE)]
