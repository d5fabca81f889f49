"""Attribute rules shared across block handlers.

Every reader here tolerates missing or malformed input and falls back to a
default instead of raising.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from bs4 import BeautifulSoup

from block_bridge.models import StylePair

MEDIA_SIZES: tuple[str, ...] = ("thumbnail", "medium", "large", "full")
PARAGRAPH_ALLOWED_TAGS: frozenset[str] = frozenset({"strong", "em", "a", "br", "span"})

_NUMERIC = re.compile(r"^-?\d+(\.\d+)?$")


def nested(attrs: Mapping[str, Any] | None, *path: str, default: Any = None) -> Any:
    """Return ``attrs[path[0]][path[1]]...`` or ``default`` on any miss."""
    current: Any = attrs
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return default if current is None else current


def _finite(number: int | float) -> bool:
    # Integers too large for a float count as non-finite.
    try:
        return math.isfinite(number)
    except OverflowError:
        return False


def as_int(value: Any, default: int | None) -> int | None:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return int(value) if _finite(value) else default
    if isinstance(value, str) and _NUMERIC.match(value.strip()):
        return as_int(float(value), default)
    return default


def as_number(value: Any, default: float | int) -> float | int:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return value if _finite(value) else default
    if isinstance(value, str) and _NUMERIC.match(value.strip()):
        number = float(value)
        if not _finite(number):
            return default
        return int(number) if number.is_integer() else number
    return default


def as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in {"", "0", "false", "no", "off"}
    return bool(value)


def as_str(value: Any, default: str = "") -> str:
    """Strings pass through, scalars are formatted, anything else is ``default``."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and _finite(value):
        return str(value)
    return default


def as_token(value: Any) -> str | None:
    """A non-blank scalar as a stripped string, for use inside class names."""
    return as_str(value).strip() or None


def with_unit(value: Any, unit: str = "px") -> str | None:
    """Append ``unit`` to bare numbers; pass other strings through."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return f"{value}{unit}" if _finite(value) else None
    if not isinstance(value, str) or not value.strip():
        return None
    if _NUMERIC.match(value.strip()):
        return f"{value.strip()}{unit}"
    return value


def as_sequence(value: Any) -> Sequence[Any]:
    """``value`` when it is a list-like container, otherwise an empty tuple."""
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return value
    return ()


# Classes ---------------------------------------------------------------------


def custom_class_tokens(attrs: Mapping[str, Any]) -> list[str]:
    return as_str(attrs.get("className")).split()


def text_align_classes(value: Any) -> list[str]:
    token = as_token(value)
    return [f"has-text-align-{token}"] if token else []


def align_classes(value: Any) -> list[str]:
    token = as_token(value)
    return [f"align{token}"] if token else []


def text_alignment(attrs: Mapping[str, Any]) -> str | None:
    return as_token(attrs.get("align")) or as_token(attrs.get("textAlign"))


def preset_classes(
    attrs: Mapping[str, Any],
    *,
    text: bool = True,
    background: bool = True,
    font_size: bool = True,
) -> list[str]:
    """Classes for named palette colors and font sizes, specific class first."""
    classes: list[str] = []
    text_color = as_token(attrs.get("textColor")) if text else None
    background_color = as_token(attrs.get("backgroundColor")) if background else None
    size = as_token(attrs.get("fontSize")) if font_size else None
    if text_color:
        classes.extend([f"has-{text_color}-color", "has-text-color"])
    if background_color:
        classes.extend([f"has-{background_color}-background-color", "has-background"])
    if size:
        classes.extend([f"has-{size}-font-size", "has-font-size"])
    return classes


def custom_styles(
    attrs: Mapping[str, Any],
    *,
    text: bool = True,
    background: bool = True,
    typography: bool = True,
) -> list[StylePair]:
    """Inline declarations for literal (non-preset) color and typography values."""
    styles: list[StylePair] = []
    text_value = as_str(nested(attrs, "style", "color", "text")) if text else ""
    background_value = as_str(nested(attrs, "style", "color", "background")) if background else ""
    if text_value:
        styles.append(("color", text_value))
    if background_value:
        styles.append(("background-color", background_value))
    if typography:
        font_size = as_str(nested(attrs, "style", "typography", "fontSize"))
        line_height = as_str(nested(attrs, "style", "typography", "lineHeight"))
        if font_size:
            styles.append(("font-size", font_size))
        if line_height:
            styles.append(("line-height", line_height))
    return styles


def spacing_styles(attrs: Mapping[str, Any]) -> list[StylePair]:
    styles: list[StylePair] = []
    for box in ("padding", "margin"):
        sides = nested(attrs, "style", "spacing", box)
        if isinstance(sides, Mapping):
            for side in ("top", "right", "bottom", "left"):
                value = as_str(sides.get(side))
                if value:
                    styles.append((f"{box}-{side}", value))
        elif isinstance(sides, str) and sides:
            styles.append((box, sides))
    return styles


# Links -----------------------------------------------------------------------


def is_external_link(url: Any, site_url: str) -> bool:
    """True for non-empty URLs outside ``site_url`` that are not root-relative."""
    if not url or not isinstance(url, str):
        return False
    if site_url and url.startswith(site_url):
        return False
    return not url.startswith("/")


# Markup ----------------------------------------------------------------------


def strip_tags(html: str | None, allowed: Iterable[str] = ()) -> str:
    """Remove markup, keeping the text and any tags named in ``allowed``."""
    if not html:
        return ""
    keep = frozenset(allowed)
    if not keep:
        return BeautifulSoup(html, "html.parser").get_text()
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(True):
        if tag.name not in keep:
            tag.unwrap()
    return str(soup)


def has_text_formatting(html: str | None) -> bool:
    return bool(html) and "<" in html


def element_text(html: str | None, selector: str) -> str:
    """Text of the first element matching ``selector`` or an empty string."""
    if not html:
        return ""
    match = BeautifulSoup(html, "html.parser").select_one(selector)
    return match.get_text(strip=True) if match else ""


def text_without(html: str | None, *excluded: str) -> str:
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for name in excluded:
        for tag in soup.find_all(name):
            tag.decompose()
    return soup.get_text(" ", strip=True)


def list_items(html: str | None) -> list[str]:
    if not html:
        return []
    soup = BeautifulSoup(html, "html.parser")
    root = soup.find(["ul", "ol"]) or soup
    return [item.get_text(" ", strip=True) for item in root.find_all("li", recursive=False)]


def table_sections(html: str | None) -> dict[str, list[list[str]]]:
    sections: dict[str, list[list[str]]] = {"head": [], "body": [], "foot": []}
    if not html:
        return sections
    soup = BeautifulSoup(html, "html.parser")
    for key, tag_name in (("head", "thead"), ("body", "tbody"), ("foot", "tfoot")):
        section = soup.find(tag_name)
        if section is None:
            continue
        for row in section.find_all("tr"):
            sections[key].append([cell.get_text(strip=True) for cell in row.find_all(["td", "th"])])
    if not any(sections.values()):
        for row in soup.find_all("tr"):
            sections["body"].append([cell.get_text(strip=True) for cell in row.find_all(["td", "th"])])
    return sections


# Media -----------------------------------------------------------------------


def media_sizes(resolver: Any, media_id: Any) -> dict[str, str]:
    """Resolve the four named size variants; a miss yields an empty string."""
    return {size: resolver.image_url(media_id, size) or "" for size in MEDIA_SIZES}


def is_media_id(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and value.strip().isdecimal()


__all__ = [
    "MEDIA_SIZES",
    "PARAGRAPH_ALLOWED_TAGS",
    "align_classes",
    "as_bool",
    "as_int",
    "as_number",
    "as_sequence",
    "as_str",
    "as_token",
    "custom_class_tokens",
    "custom_styles",
    "element_text",
    "has_text_formatting",
    "is_external_link",
    "is_media_id",
    "list_items",
    "media_sizes",
    "nested",
    "preset_classes",
    "spacing_styles",
    "strip_tags",
    "table_sections",
    "text_align_classes",
    "text_alignment",
    "text_without",
    "with_unit",
]
