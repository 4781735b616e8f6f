"""Turn a section's style descriptor into an inline CSS declaration string.

The resolver merges an explicit :class:`~site_export.config.SectionStyle` with
variant-supplied defaults and serialises the result in a fixed property order
(background, colour, padding, margin, radius, shadow, max-width) so that two
renders of the same document are byte-identical. Absent fields are skipped;
nothing here raises on malformed input because the loader has already reduced
bad numerics to ``None``.

Examples
--------
>>> from site_export.config import SectionStyle, Spacing
>>> resolve_style(SectionStyle(padding=Spacing(top=40))).inline
'padding-top: 40px; '
>>> resolve_style(None).inline
''
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from site_export._constants import SECTION_SHADOW
from site_export.config import SectionStyle, Spacing


@dc.dataclass(slots=True, frozen=True)
class ResolvedStyle:
    """Serialised wrapper style plus an optional entrance-animation class."""

    inline: str = ""
    css_class: str | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when neither an inline style nor a class is present."""
        return not self.inline and not self.css_class


def format_number(value: float) -> str:
    """Render ``value`` without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def px(value: float | None) -> str | None:
    """Return ``value`` as a CSS pixel length, or None when absent."""
    if value is None:
        return None
    return f"{format_number(value)}px"


def _merge_spacing(base: Spacing | None, override: Spacing | None) -> Spacing | None:
    if base is None:
        return override
    if override is None:
        return base
    return Spacing(
        top=override.top if override.top is not None else base.top,
        bottom=override.bottom if override.bottom is not None else base.bottom,
        left=override.left if override.left is not None else base.left,
        right=override.right if override.right is not None else base.right,
    )


def merge_styles(
    defaults: SectionStyle | None, style: SectionStyle | None
) -> SectionStyle:
    """Overlay ``style`` on ``defaults``; explicit fields always win."""
    if defaults is None:
        return style or SectionStyle()
    if style is None:
        return defaults
    merged: dict[str, typ.Any] = {}
    for field in dc.fields(SectionStyle):
        explicit = getattr(style, field.name)
        fallback = getattr(defaults, field.name)
        if field.name in {"padding", "margin"}:
            merged[field.name] = _merge_spacing(fallback, explicit)
        elif field.name == "shadow":
            merged[field.name] = explicit or fallback
        else:
            merged[field.name] = explicit if explicit is not None else fallback
    return SectionStyle(**merged)


def _horizontal_margins(style: SectionStyle) -> tuple[str | None, str | None]:
    margin = style.margin or Spacing()
    left = px(margin.left)
    right = px(margin.right)
    if style.max_width is not None and style.align == "center":
        return "auto", "auto"
    if style.max_width is not None and style.align == "right":
        return "auto", right or "0"
    return left, right


def style_declarations(style: SectionStyle) -> list[tuple[str, str]]:
    """Return ``(property, value)`` pairs for ``style`` in emission order."""
    declarations: list[tuple[str, str]] = []

    def add(name: str, value: str | None) -> None:
        if value is not None:
            declarations.append((name, value))

    add("background-color", style.background_color)
    if style.background_image:
        add("background-image", f"url({style.background_image})")
        add("background-size", style.background_size or "cover")
        add("background-position", style.background_position or "center")
        add("background-repeat", "no-repeat")
    add("color", style.text_color or style.color)

    padding = style.padding or Spacing()
    add("padding-top", px(padding.top))
    add("padding-bottom", px(padding.bottom))
    add("padding-left", px(padding.left))
    add("padding-right", px(padding.right))

    margin = style.margin or Spacing()
    add("margin-top", px(margin.top))
    add("margin-bottom", px(margin.bottom))
    margin_left, margin_right = _horizontal_margins(style)
    add("margin-left", margin_left)
    add("margin-right", margin_right)

    add("border-radius", px(style.border_radius))
    if style.shadow:
        add("box-shadow", SECTION_SHADOW)
    if style.max_width is not None:
        add("max-width", px(style.max_width))
        add("width", "100%")
    return declarations


def resolve_style(
    style: SectionStyle | None, defaults: SectionStyle | None = None
) -> ResolvedStyle:
    """Merge ``style`` over ``defaults`` and serialise it for a wrapper tag.

    Parameters
    ----------
    style : SectionStyle or None
        The section's explicit style descriptor.
    defaults : SectionStyle or None, optional
        Variant-specific defaults, overridden field-by-field by ``style``.

    Returns
    -------
    ResolvedStyle
        Inline declarations, each terminated by ``"; "``, and the
        ``animate-*`` class when an entrance animation is configured.
    """
    merged = merge_styles(defaults, style)
    inline = "".join(f"{name}: {value}; " for name, value in style_declarations(merged))
    css_class = f"animate-{merged.animation}" if merged.animation else None
    return ResolvedStyle(inline=inline, css_class=css_class)


__all__ = [
    "ResolvedStyle",
    "format_number",
    "merge_styles",
    "px",
    "resolve_style",
    "style_declarations",
]
