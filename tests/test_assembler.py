"""Unit tests for :mod:`site_export.generator.assembler`."""

from __future__ import annotations

import logging
import typing as typ

import pytest
from bs4 import BeautifulSoup

from site_export.config import (
    DocumentContext,
    SectionStyle,
    SiteDocument,
    build_sections,
)
from site_export.generator import DocumentAssembler, compile_document, normalize_ids
from site_export.generator.assembler import order_sections, salvage_sections
from site_export.generator.variants import VARIANTS, Variant

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


def _about(title: str, order: float) -> dict[str, object]:
    return {"type": "about", "order": order, "data": {"title": title}}


def test_order_sections_is_stable() -> None:
    """Equal ``order`` values keep their input order."""
    sections = build_sections(
        [_about("A", 3), _about("B", 1), _about("C", 1), _about("D", 2)]
    )
    titles = [section.data["title"] for section in order_sections(sections)]
    assert titles == ["B", "C", "D", "A"], f"unexpected order {titles!r}"


def test_document_emits_sections_in_order() -> None:
    """Rendered headings follow the section order, not the input order."""
    html = compile_document(
        [_about("A", 3), _about("B", 1), _about("C", 1), _about("D", 2)], "Demo"
    )
    soup = BeautifulSoup(html, "html.parser")
    headings = [heading.get_text() for heading in soup.find_all("h2")]
    assert headings == ["B", "C", "D", "A"], f"unexpected headings {headings!r}"
    assert soup.title is not None and soup.title.get_text() == "Demo"
    assert html.endswith("\n")


def test_navbar_and_footer_are_not_wrapped() -> None:
    """Self-wrapping variants emit their own root; others get ``<section>``."""
    html = compile_document(
        [
            {"type": "navbar", "order": 0},
            {"type": "about", "order": 1},
            {"type": "footer", "order": 2},
        ],
        "Demo",
    )
    soup = BeautifulSoup(html, "html.parser")
    assert soup.nav is not None and soup.nav.find_parent("section") is None
    assert soup.footer is not None and soup.footer.find_parent("section") is None
    assert len(soup.find_all("section")) == 1, "expected only the about section"


def test_wrapper_carries_style_and_animation() -> None:
    """The section wrapper holds the resolved inline style and animation class."""
    html = compile_document(
        [
            {
                "type": "about",
                "style": {
                    "backgroundColor": "#fafafa",
                    "padding": {"top": 10, "bottom": 10, "left": 0, "right": 0},
                    "animation": "slideUp",
                },
            }
        ],
        "Demo",
    )
    section = BeautifulSoup(html, "html.parser").section
    assert section is not None
    assert section["class"] == ["animate-slideUp"]
    assert section["style"].startswith("background-color: #fafafa;"), section["style"]
    assert "padding-top: 10px; padding-bottom: 10px;" in section["style"]


def test_compilation_is_deterministic_modulo_ids() -> None:
    """Two compilations differ only in their allocated identifiers."""
    sections = [
        {"type": "navbar", "order": 0},
        {"type": "hero", "order": 1},
        {"type": "products", "order": 2, "data": {"layout": "carousel"}},
        {"type": "countdown", "order": 3},
        {"type": "footer", "order": 4},
    ]
    first = compile_document(sections, "Demo", site_id="abc")
    second = compile_document(sections, "Demo", site_id="abc")
    assert normalize_ids(first) == normalize_ids(second)


def test_theme_colours_become_css_variables() -> None:
    """Theme settings populate the ``:root`` custom properties."""
    html = compile_document(
        [], "Demo", {"theme": {"primaryColor": "#123456", "secondaryColor": "#abcdef"}}
    )
    assert "--primary-color: #123456;" in html
    assert "--secondary-color: #abcdef;" in html


def test_single_faq_script_for_many_accordions() -> None:
    """Two FAQ sections share the one document-level accordion script."""
    html = compile_document(
        [{"type": "faq", "order": 0}, {"type": "faq", "order": 1}], "Demo"
    )
    assert html.count("document.querySelectorAll('.faq-item')") == 1


def test_unknown_type_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    """Unsupported types contribute nothing and are logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="site_export.generator.assembler"):
        html = compile_document(
            [{"type": "hologram", "order": 0}, _about("Still here", 1)], "Demo"
        )
    assert "Still here" in html
    assert "hologram" in caplog.text, "expected the skipped type to be logged"


@pytest.mark.parametrize(
    "entry",
    [
        pytest.param({"order": 0, "data": {}}, id="missing-type"),
        pytest.param(None, id="none-entry"),
        pytest.param({"type": 42, "order": 0}, id="non-string-type"),
        pytest.param(["about"], id="list-entry"),
    ],
)
def test_malformed_entry_is_skipped(
    entry: object, caplog: pytest.LogCaptureFixture
) -> None:
    """A malformed entry renders nothing while its neighbour still renders."""
    with caplog.at_level(logging.DEBUG, logger="site_export.generator.assembler"):
        html = compile_document([entry, _about("Survivor", 1)], "Demo")
    soup = BeautifulSoup(html, "html.parser")
    headings = [heading.get_text() for heading in soup.find_all("h2")]
    assert headings == ["Survivor"], f"unexpected headings {headings!r}"
    assert len(soup.find_all("section")) == 1
    assert caplog.records, "expected the skipped entry to be logged"


def test_salvage_sections_keeps_positional_ids() -> None:
    """Skipped entries do not shift the ids of the sections after them."""
    sections = salvage_sections([None, _about("Kept", 1)])
    assert [section.id for section in sections] == ["section-1"]


def test_failing_generator_is_contained(
    mocker: MockerFixture, caplog: pytest.LogCaptureFixture
) -> None:
    """A raising generator yields an empty fragment and a warning."""

    def boom(*_args: object) -> str:
        msg = "bad data"
        raise ValueError(msg)

    mocker.patch.dict(VARIANTS, {"features": Variant("features", boom, SectionStyle())})
    with caplog.at_level(logging.WARNING, logger="site_export.generator.assembler"):
        html = compile_document(
            [{"type": "features", "order": 0}, _about("Survivor", 1)], "Demo"
        )
    soup = BeautifulSoup(html, "html.parser")
    assert len(soup.find_all("section")) == 1
    assert "Survivor" in html
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_run_writes_document(tmp_path: Path) -> None:
    """``run`` creates parent directories and writes UTF-8 HTML."""
    document = SiteDocument(
        context=DocumentContext(site_name="Café"),
        sections=build_sections([_about("Hello", 0)]),
    )
    output = tmp_path / "public" / "index.html"
    assert DocumentAssembler(document).run(output) == output
    content = output.read_text(encoding="utf-8")
    assert content.startswith("<!DOCTYPE html>")
    assert "<title>Café</title>" in content
