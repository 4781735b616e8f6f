"""Utility helpers shared by the site document loader."""

from __future__ import annotations

import datetime as dt
import math
import typing as typ

from site_export._constants import ANIMATIONS

from .models import SectionStyle, Spacing, ThemeSettings

ALIGNMENTS = ("left", "center", "right")


def _pick(payload: typ.Mapping[str, typ.Any], *keys: str) -> typ.Any:  # noqa: ANN401
    """Return the first non-``None`` value found under any of ``keys``."""
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_number(value: object | None) -> float | None:
    """Return ``value`` as a finite float, or None when it is not numeric.

    Strings such as ``"24"`` or ``"24px"`` are accepted; booleans, NaN, and
    anything unparsable are treated as absent rather than raising.
    """
    match value:
        case bool():
            return None
        case int() | float():
            number = float(value)
        case str() as text:
            cleaned = text.strip().removesuffix("px").strip()
            try:
                number = float(cleaned)
            except ValueError:
                return None
        case _:
            return None
    if not math.isfinite(number):
        return None
    return number


def _build_spacing(payload: object | None) -> Spacing | None:
    """Build a Spacing from a ``{top, bottom, left, right}`` mapping."""
    if not isinstance(payload, dict):
        return None
    return Spacing(
        top=_coerce_number(payload.get("top")),
        bottom=_coerce_number(payload.get("bottom")),
        left=_coerce_number(payload.get("left")),
        right=_coerce_number(payload.get("right")),
    )


def _build_section_style(payload: object | None) -> SectionStyle | None:
    """Build a SectionStyle from editor (camelCase) or snake_case keys."""
    if not isinstance(payload, dict):
        return None
    align = _optional_str(payload.get("align"))
    animation = _optional_str(payload.get("animation"))
    return SectionStyle(
        padding=_build_spacing(payload.get("padding")),
        margin=_build_spacing(payload.get("margin")),
        background_color=_optional_str(
            _pick(payload, "backgroundColor", "background_color")
        ),
        background_image=_optional_str(
            _pick(payload, "backgroundImage", "background_image")
        ),
        background_size=_optional_str(
            _pick(payload, "backgroundSize", "background_size")
        ),
        background_position=_optional_str(
            _pick(payload, "backgroundPosition", "background_position")
        ),
        color=_optional_str(payload.get("color")),
        text_color=_optional_str(_pick(payload, "textColor", "text_color")),
        border_radius=_coerce_number(_pick(payload, "borderRadius", "border_radius")),
        shadow=bool(payload.get("shadow")),
        max_width=_coerce_number(_pick(payload, "maxWidth", "max_width")),
        align=align if align in ALIGNMENTS else None,  # type: ignore[arg-type]
        animation=animation if animation in ANIMATIONS else None,
    )


def _build_theme_settings(payload: object | None) -> ThemeSettings:
    """Build ThemeSettings from a ``settings`` mapping, applying defaults."""
    base = ThemeSettings()
    if not isinstance(payload, dict):
        return base
    theme = payload.get("theme")
    if not isinstance(theme, dict):
        return base
    return ThemeSettings(
        primary_color=_optional_str(_pick(theme, "primaryColor", "primary_color"))
        or base.primary_color,
        secondary_color=_optional_str(
            _pick(theme, "secondaryColor", "secondary_color")
        )
        or base.secondary_color,
    )


def _parse_timestamp(value: dt.datetime | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None.

    Values without an offset are read as UTC. Countdown targets check for
    offset-less date-times first and leave those to the page script.
    """
    match value:
        case dt.datetime():
            parsed = value
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "ALIGNMENTS",
    "_build_section_style",
    "_build_spacing",
    "_build_theme_settings",
    "_coerce_number",
    "_optional_str",
    "_parse_timestamp",
    "_pick",
]
