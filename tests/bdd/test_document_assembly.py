"""Behaviour tests for compiling site documents using pytest-bdd.

These scenarios drive :class:`site_export.generator.DocumentAssembler` from a
YAML document written to a temporary directory and inspect the resulting page
with BeautifulSoup, or compile a raw section list directly. They cover
section ordering, the wrapper policy for the navigation chrome, site-scoped
link rewriting, and skipping malformed entries.

Usage
-----
Run ``pytest tests/bdd/test_document_assembly.py -v`` or filter with
``pytest -k document_assembly``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from site_export.config import load_site_document
from site_export.generator import DocumentAssembler, compile_document

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "document_assembly.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps.

    Returns
    -------
    ScenarioState
        Mutable dictionary used to exchange state between ``given``, ``when``,
        and ``then`` steps.
    """
    return {}


def _write_document(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


@given("a site document with sections out of order")
def given_unordered_document(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write a document whose about sections are listed out of order.

    Parameters
    ----------
    tmp_path : Path
        Pytest-provided temporary directory where the document is written.
    scenario_state : ScenarioState
        Mutable dictionary storing the ``document_path``.
    """
    scenario_state["document_path"] = _write_document(
        tmp_path,
        """
        siteName: Ordered
        sections:
          - {type: about, order: 3, data: {title: Third}}
          - {type: about, order: 1, data: {title: First}}
          - {type: about, order: 2, data: {title: Second}}
        """,
    )


@given("a site document with a navbar, a hero and a footer")
def given_chrome_document(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write a document mixing self-wrapping and wrapped sections."""
    scenario_state["document_path"] = _write_document(
        tmp_path,
        """
        siteName: Chrome
        sections:
          - {type: footer, order: 2}
          - {type: hero, order: 1, data: {title: Welcome aboard}}
          - {type: navbar, order: 0}
        """,
    )


@given(parsers.parse('a site document for the published site "{site_id}"'))
def given_published_document(
    tmp_path: Path, scenario_state: ScenarioState, site_id: str
) -> None:
    """Write a document carrying a ``siteId`` and a selected product.

    Parameters
    ----------
    tmp_path : Path
        Pytest-provided temporary directory where the document is written.
    scenario_state : ScenarioState
        Mutable dictionary storing the ``document_path``.
    site_id : str
        Published site identifier taken from the scenario text.
    """
    scenario_state["document_path"] = _write_document(
        tmp_path,
        f"""
        siteName: Published
        siteId: {site_id}
        sections:
          - {{type: navbar, order: 0}}
          - type: products
            order: 1
            data:
              selectedProducts:
                - {{id: p1, name: Sneaker, price: 80}}
        """,
    )


@given("a section list with an entry missing its type and an empty entry")
def given_malformed_sections(scenario_state: ScenarioState) -> None:
    """Store raw editor sections where two of three entries are malformed.

    Parameters
    ----------
    scenario_state : ScenarioState
        Mutable dictionary storing the raw ``sections`` list.
    """
    scenario_state["sections"] = [
        {"order": 0, "data": {"title": "Orphan"}},
        None,
        {"type": "about", "order": 2, "data": {"title": "Still standing"}},
    ]


@when("I compile the document")
def when_compile(scenario_state: ScenarioState) -> None:
    """Compile the written document and parse the HTML.

    Parameters
    ----------
    scenario_state : ScenarioState
        Shared dictionary providing the ``document_path``; receives ``soup``.
    """
    path = typ.cast("Path", scenario_state["document_path"])
    html = DocumentAssembler(load_site_document(path)).compile()
    scenario_state["soup"] = BeautifulSoup(html, "html.parser")


@when("I compile the section list")
def when_compile_sections(scenario_state: ScenarioState) -> None:
    """Compile the raw section list directly and parse the HTML."""
    html = compile_document(scenario_state["sections"], "Salvaged")
    scenario_state["soup"] = BeautifulSoup(html, "html.parser")


@then("the section headings appear in ascending order")
def then_headings_ordered(scenario_state: ScenarioState) -> None:
    """Verify the about headings follow the ``order`` values."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    headings = [heading.get_text() for heading in soup.find_all("h2")]
    assert headings == ["First", "Second", "Third"], (
        f"expected ordered headings, got {headings!r}"
    )


@then("the navbar and footer are top-level elements")
def then_chrome_unwrapped(scenario_state: ScenarioState) -> None:
    """Verify the navigation chrome sits directly in ``<body>``."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    for tag in ("nav", "footer"):
        element = soup.find(tag)
        assert element is not None, f"expected a <{tag}> element"
        assert element.parent is not None and element.parent.name == "body", (
            f"expected <{tag}> directly under <body>, got {element.parent!r}"
        )


@then("the hero is wrapped in a section element")
def then_hero_wrapped(scenario_state: ScenarioState) -> None:
    """Verify the hero fragment sits inside a ``<section>`` wrapper."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    hero = soup.select_one(".hero-section")
    assert hero is not None, "expected the hero markup"
    assert hero.find_parent("section") is not None


@then(parsers.parse('the navbar links point under "{base}"'))
def then_navbar_links(scenario_state: ScenarioState, base: str) -> None:
    """Verify the default menu resolves beneath the site base path."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    hrefs = [anchor["href"] for anchor in soup.select("nav .nav-link")]
    assert hrefs, "expected desktop menu links"
    assert all(href.startswith(base) for href in hrefs), (
        f"expected links under {base}, got {hrefs!r}"
    )


@then(parsers.parse('the product card links to "{href}"'))
def then_product_link(scenario_state: ScenarioState, href: str) -> None:
    """Verify the product card points at the site-scoped detail page."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    card = soup.select_one("a.product-card")
    assert card is not None, "expected a rendered product card"
    assert card["href"] == href


@then("only the well-formed section is rendered")
def then_only_valid_section(scenario_state: ScenarioState) -> None:
    """Verify the malformed entries left no trace and the valid one rendered."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    headings = [heading.get_text() for heading in soup.find_all("h2")]
    assert headings == ["Still standing"], (
        f"expected only the valid section, got {headings!r}"
    )
    assert len(soup.find_all("section")) == 1
    assert "Orphan" not in soup.get_text()
