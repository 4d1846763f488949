"""
Palette presets -> 4-role theme.

Algorithm (5-color preset):
1. luminance = (0.2126*R + 0.7152*G + 0.0722*B) / 255, clamped to [0, 1]
2. sort ascending: darkest -> text, lightest -> background
3. middle colors re-sorted: primary at floor((k-1)/2), accent at ceil((k-1)/2)

Fewer than 5 valid colors -> positional mapping
(1 -> background, 4 -> text, 2 -> primary, 3 -> accent).
"""

import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from src.domain.constants import COLOR_ROLES, FALLBACK_THEME
from src.domain.errors import ErrorCodes, PaletteError

HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
PALETTE_SIZE = 5

RGB = tuple[int, int, int]


# =============================================================================
# Colors
# =============================================================================


def parse_hex(color: Any) -> RGB | None:
    """Parse "#RRGGBB" into (r, g, b); anything else -> None."""
    if not isinstance(color, str):
        return None
    match = HEX_COLOR_RE.match(color.strip())
    if not match:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b


def luminance(rgb: RGB) -> float:
    """Perceptual luminance in [0, 1]."""
    r, g, b = rgb
    value = (0.2126 * r + 0.7152 * g + 0.0722 * b) / 255
    return min(1.0, max(0.0, value))


def with_alpha(color: str, alpha_hex: str) -> str:
    """Append an alpha byte: "#RRGGBB" + "22" -> "#RRGGBB22"."""
    if isinstance(color, str) and HEX_COLOR_RE.match(color.strip()):
        return f"{color.strip()}{alpha_hex}"
    return color


# =============================================================================
# Palette -> Theme
# =============================================================================


def _positional_theme(colors: Sequence[Any]) -> dict[str, str]:
    def _at(index: int, role: str) -> str:
        if index < len(colors) and isinstance(colors[index], str) and colors[index]:
            return colors[index]
        return FALLBACK_THEME[role]

    return {
        "background": _at(1, "background"),
        "text": _at(4, "text"),
        "primary": _at(2, "primary"),
        "accent": _at(3, "accent"),
    }


def palette_to_theme(colors: Sequence[Any]) -> dict[str, str]:
    """
    Derive a theme from a 5-color palette.

    Args:
        colors: palette colors ("#RRGGBB"); malformed entries are excluded

    Returns:
        {"primary", "accent", "background", "text"}, always fully populated
    """
    valid = []
    for color in colors:
        rgb = parse_hex(color)
        if rgb is not None:
            valid.append((color, rgb))
    if len(valid) < PALETTE_SIZE:
        return _positional_theme(colors)

    # sorted() is stable: equal luminance keeps palette order
    ranked = sorted(valid, key=lambda item: luminance(item[1]))
    text = ranked[0][0]
    background = ranked[-1][0]

    middle = sorted(ranked[1:-1], key=lambda item: luminance(item[1]))
    k = len(middle)
    primary = middle[math.floor((k - 1) / 2)][0]
    accent = middle[math.ceil((k - 1) / 2)][0]

    return {
        "primary": primary,
        "accent": accent,
        "background": background,
        "text": text,
    }


# =============================================================================
# Theme merge
# =============================================================================


def merge_theme(
    colors: Mapping[str, Any] | None,
    overrides: Mapping[str, Any] | None,
) -> dict[str, str]:
    """
    Template colors overridden role by role by document theme.

    Pure: inputs are never mutated. Only the 4 roles are returned and each
    one is populated (template, then FALLBACK_THEME).
    """
    colors = colors or {}
    overrides = overrides or {}
    theme: dict[str, str] = {}
    for role in COLOR_ROLES:
        override = overrides.get(role)
        base = colors.get(role)
        if isinstance(override, str) and override:
            theme[role] = override
        elif isinstance(base, str) and base:
            theme[role] = base
        else:
            theme[role] = FALLBACK_THEME[role]
    return theme


def apply_palette(theme: Mapping[str, str] | None, colors: Sequence[Any]) -> dict[str, str]:
    """Merge a palette's derived roles into an existing theme override map."""
    merged = dict(theme or {})
    merged.update(palette_to_theme(colors))
    return merged


# =============================================================================
# Presets
# =============================================================================


@dataclass(frozen=True)
class PalettePreset:
    """One-click theme suggestion."""
    id: str
    name: str
    colors: tuple[str, str, str, str, str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "colors": list(self.colors),
            "theme": palette_to_theme(self.colors),
        }


PALETTE_PRESETS: tuple[PalettePreset, ...] = (
    PalettePreset("agrume", "Agrume", ("#1f2937", "#fff7ed", "#f97316", "#fdba74", "#431407")),
    PalettePreset("menthe", "Menthe", ("#064e3b", "#ecfdf5", "#10b981", "#a7f3d0", "#022c22")),
    PalettePreset("lavande", "Lavande", ("#312e81", "#f5f3ff", "#8b5cf6", "#c4b5fd", "#1e1b4b")),
    PalettePreset("ocean", "Océan", ("#0c4a6e", "#f0f9ff", "#0ea5e9", "#7dd3fc", "#082f49")),
    PalettePreset("papier", "Papier", ("#292524", "#fafaf9", "#a8a29e", "#e7e5e4", "#0c0a09")),
)


def list_presets() -> list[PalettePreset]:
    return list(PALETTE_PRESETS)


def get_preset(preset_id: str) -> PalettePreset:
    """
    Preset lookup.

    Raises:
        PaletteError: PALETTE_NOT_FOUND
    """
    for preset in PALETTE_PRESETS:
        if preset.id == preset_id:
            return preset
    raise PaletteError(
        ErrorCodes.PALETTE_NOT_FOUND,
        f"Palette '{preset_id}' not found",
        preset_id=preset_id,
    )
