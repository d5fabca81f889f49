"""Theme settings to CSS custom property conversion."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_PRESET_SOURCES: tuple[tuple[tuple[str, str], str, str], ...] = (
    (("color", "palette"), "color", "color"),
    (("typography", "fontSizes"), "font-size", "size"),
    (("spacing", "spacingSizes"), "spacing", "size"),
)


def css_variables_from_settings(settings: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten theme presets into ``--wp--preset--{kind}--{slug}`` variables."""
    variables: dict[str, str] = {}
    if not settings:
        return variables
    for (section, key), kind, value_key in _PRESET_SOURCES:
        group = settings.get(section)
        presets = group.get(key) if isinstance(group, Mapping) else None
        for preset in presets or ():
            if not isinstance(preset, Mapping):
                continue
            slug = preset.get("slug")
            value = preset.get(value_key)
            if not slug or value is None:
                continue
            variables[f"--wp--preset--{kind}--{slug}"] = str(value)
    return variables


__all__ = ["css_variables_from_settings"]
