"""Unit tests for loading site documents from YAML and JSON."""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from site_export.config import (
    DocumentConfigError,
    Spacing,
    build_section,
    build_site_document,
    load_site_document,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_load_yaml_document(tmp_path: Path) -> None:
    """YAML documents produce context, theme and sections in input order."""
    path = tmp_path / "site.yaml"
    path.write_text(
        """
siteName: Demo Store
siteId: abc
renderedAt: 2025-01-01T00:00:00Z
settings:
  theme:
    primaryColor: "#123456"
sections:
  - id: hero-1
    type: hero
    order: 2
    data:
      title: Hello
  - type: navbar
    order: 1
    style:
      padding: {top: "24px", bottom: 8}
      animation: slideUp
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    document = load_site_document(path)
    assert document.context.site_name == "Demo Store"
    assert document.context.site_id == "abc"
    assert document.context.rendered_at == dt.datetime(2025, 1, 1, tzinfo=dt.UTC)
    assert document.context.theme.primary_color == "#123456"
    assert document.context.theme.secondary_color == "#F0CAE1", (
        "expected the default secondary colour to fill the gap"
    )
    assert [section.type for section in document.sections] == ["hero", "navbar"]
    navbar = document.sections[1]
    assert navbar.id == "section-1", f"expected a positional id, got {navbar.id!r}"
    assert navbar.style is not None
    assert navbar.style.padding == Spacing(top=24.0, bottom=8.0)
    assert navbar.style.animation == "slideUp"


def test_load_json_document(tmp_path: Path) -> None:
    """JSON documents are decoded with msgspec."""
    path = tmp_path / "site.json"
    path.write_text(
        '{"siteName": "Json Store", "sections": [{"type": "faq", "order": 0}]}',
        encoding="utf-8",
    )
    document = load_site_document(path)
    assert document.context.site_name == "Json Store"
    assert document.sections[0].type == "faq"


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing document raises FileNotFoundError naming the path."""
    with pytest.raises(FileNotFoundError, match="missing.yaml"):
        load_site_document(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        (["not", "a", "mapping"], "must be a mapping"),
        ({"sections": {"type": "hero"}}, "must be a list"),
        ({"sections": ["hero"]}, "Section #0 must be a mapping"),
        ({"sections": [{"order": 1}]}, "Section #0 is missing 'type'"),
    ],
)
def test_structural_errors(raw: object, message: str) -> None:
    """Structural problems raise DocumentConfigError with a precise message."""
    with pytest.raises(DocumentConfigError, match=message):
        build_site_document(raw)


def test_malformed_style_values_degrade_to_absent() -> None:
    """Bad numerics and unknown enumerations are dropped, never raised."""
    section = build_section(
        {
            "type": "features",
            "order": "soon",
            "style": {
                "padding": {"top": "wide", "left": 12},
                "borderRadius": True,
                "align": "diagonal",
                "animation": "spin",
            },
        }
    )
    assert section.order == 0.0, f"expected order 0.0, got {section.order!r}"
    assert section.style is not None
    assert section.style.padding == Spacing(left=12.0)
    assert section.style.border_radius is None
    assert section.style.align is None
    assert section.style.animation is None


def test_default_site_name() -> None:
    """Documents without a name fall back to the default title."""
    document = build_site_document({})
    assert document.context.site_name == "My Site"
    assert document.sections == []
