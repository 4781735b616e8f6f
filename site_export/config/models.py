"""Typed dataclasses describing the exported site document."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import typing as typ

from site_export._constants import DEFAULT_PRIMARY_COLOR, DEFAULT_SECONDARY_COLOR


class DocumentConfigError(ValueError):
    """Raised when a site document is structurally invalid."""


Alignment = typ.Literal["left", "center", "right"]


@dc.dataclass(slots=True)
class Spacing:
    """Per-edge pixel spacing; ``None`` edges are left unset."""

    top: float | None = None
    bottom: float | None = None
    left: float | None = None
    right: float | None = None


@dc.dataclass(slots=True)
class SectionStyle:
    """Optional presentation descriptor shared by every section type.

    Attributes
    ----------
    padding, margin : Spacing or None
        Box-model spacing in pixels.
    background_color, background_image : str or None
        Flat background colour and optional image URL.
    background_size, background_position : str or None
        CSS values applied alongside ``background_image``.
    color, text_color : str or None
        Foreground colour; ``text_color`` wins when both are set.
    border_radius : float or None
        Corner radius in pixels.
    shadow : bool
        Apply the shared drop shadow.
    max_width : float or None
        Maximum content width in pixels.
    align : str or None
        Horizontal alignment used together with ``max_width``.
    animation : str or None
        Named entrance animation.
    """

    padding: Spacing | None = None
    margin: Spacing | None = None
    background_color: str | None = None
    background_image: str | None = None
    background_size: str | None = None
    background_position: str | None = None
    color: str | None = None
    text_color: str | None = None
    border_radius: float | None = None
    shadow: bool = False
    max_width: float | None = None
    align: Alignment | None = None
    animation: str | None = None


@dc.dataclass(slots=True)
class Section:
    """A single typed block of page content."""

    id: str
    type: str
    order: float
    data: dict[str, typ.Any] = dc.field(default_factory=dict)
    style: SectionStyle | None = None


@dc.dataclass(slots=True)
class ThemeSettings:
    """Theme colours exposed to the document as CSS custom properties."""

    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR


@dc.dataclass(slots=True)
class DocumentContext:
    """Cross-cutting inputs passed to every section generator."""

    site_name: str
    theme: ThemeSettings = dc.field(default_factory=ThemeSettings)
    site_id: str | None = None
    rendered_at: dt.datetime | None = None


@dc.dataclass(slots=True)
class SiteDocument:
    """A loaded export request: context plus the ordered section list."""

    context: DocumentContext
    sections: list[Section] = dc.field(default_factory=list)


__all__ = [
    "Alignment",
    "DocumentConfigError",
    "DocumentContext",
    "Section",
    "SectionStyle",
    "SiteDocument",
    "Spacing",
    "ThemeSettings",
]
