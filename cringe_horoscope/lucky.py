# cringe_horoscope/lucky.py
"""Lucky-color helpers: named colors -> hex, plus a readable text color."""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional

NAMED_COLORS: Dict[str, str] = {
    "white": "#ffffff",
    "black": "#000000",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "cyan": "#00ffff",
    "magenta": "#ff00ff",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "grey": "#808080",
    "maroon": "#800000",
    "olive": "#808000",
    "lime": "#00ff00",
    "aqua": "#00ffff",
    "teal": "#008080",
    "navy": "#000080",
    "fuchsia": "#ff00ff",
    "purple": "#800080",
    "orange": "#ffa500",
    "pink": "#ffc0cb",
    "indigo": "#4b0082",
    # provider colors
    "bronze": "#cd7f32",
    "slate-gray": "#708090",
    "slate gray": "#708090",
    "slategray": "#708090",
    "lilac": "#c8a2c8",
    "obsidian": "#0f1419",
    "lavender": "#e6e6fa",
    "gold": "#ffd700",
    # fallback table colors
    "navy-blue": "#000080",
    "amber": "#ffbf00",
    "jade-green": "#00a86b",
    "mahogany": "#c04000",
    "amethyst": "#9966cc",
    "sea green": "#2e8b57",
    "brown": "#a52a2a",
}

_HEX6_RE = re.compile(r"^[0-9a-f]{6}$", re.I)


def css_color(color: str) -> str:
    """Hex for known names, hex passes through, white for anything else."""
    value = (color or "").strip()
    if value.startswith("#"):
        return value
    return NAMED_COLORS.get(value.lower(), "#ffffff")


def is_light_color(color: str) -> bool:
    value = (color or "").lower()
    value = NAMED_COLORS.get(value, value).lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if not _HEX6_RE.match(value):
        return False
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255 > 0.5


def text_color(background: str) -> str:
    # unknown names render on white, so they need black text
    if (background or "").lower() not in NAMED_COLORS and not (background or "").startswith("#"):
        return "#000000"
    return "#000000" if is_light_color(background) else "#ffffff"


def describe_lucky(result: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    color = result.get("lucky_color")
    number = result.get("lucky_number")
    if not color and number is None:
        return None
    out: Dict[str, Any] = {"number": number}
    if color:
        out.update({"color": color, "css": css_color(color), "text_color": text_color(color)})
    return out
