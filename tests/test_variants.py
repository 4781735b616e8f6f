"""Unit tests for the section variant generators.

Every registered type must render something useful from empty data, and the
families with real behaviour (navigation, hero, catalogue, media) are checked
through their rendered markup with BeautifulSoup.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from site_export.config import DocumentContext, SectionStyle
from site_export.generator.models import RenderContext
from site_export.generator.renderer import build_environment
from site_export.generator.unique_id import UNIQUE_ID_PATTERN
from site_export.generator.variants import (
    SELF_WRAPPING,
    SUPPORTED_TYPES,
    get_variant,
)
from site_export.generator.variants.media import embed_url
from site_export.generator.variants.navigation import badge_label


def _context(site_id: str | None = None) -> RenderContext:
    return RenderContext(
        document=DocumentContext(site_name="Demo", site_id=site_id),
        env=build_environment(),
    )


def _render(
    section_type: str,
    data: dict[str, object] | None = None,
    *,
    site_id: str | None = None,
    style: SectionStyle | None = None,
) -> BeautifulSoup:
    variant = get_variant(section_type)
    assert variant is not None, f"expected {section_type!r} to be registered"
    html = variant.generate(data or {}, style, _context(site_id))
    return BeautifulSoup(html, "html.parser")


def test_registry_covers_every_section_type() -> None:
    """All twenty-four editor section types are registered."""
    assert len(SUPPORTED_TYPES) == 24, f"unexpected types {SUPPORTED_TYPES!r}"
    assert SELF_WRAPPING == {"navbar", "footer"}


@pytest.mark.parametrize("section_type", SUPPORTED_TYPES)
def test_empty_data_renders_placeholder_content(section_type: str) -> None:
    """Every variant renders non-empty markup from an empty data mapping."""
    soup = _render(section_type)
    assert soup.get_text(strip=True) or soup.find(True), (
        f"expected {section_type} to render placeholder content"
    )


@pytest.mark.parametrize("section_type", SUPPORTED_TYPES)
def test_wrapper_defaults_are_section_styles(section_type: str) -> None:
    """Style defaults resolve to a SectionStyle for any data."""
    variant = get_variant(section_type)
    assert variant is not None
    assert isinstance(variant.defaults({}), SectionStyle)


def test_products_without_selection_shows_placeholder() -> None:
    """An empty selection renders the "No products selected" block."""
    soup = _render("products", {"selectedProducts": []})
    placeholder = soup.select_one(".products-placeholder")
    assert placeholder is not None, "expected the products placeholder block"
    assert "No products selected" in placeholder.get_text()


def test_product_cards_link_under_site_base() -> None:
    """Product cards link to site-scoped detail pages and prefer sellingPrice."""
    soup = _render(
        "products",
        {
            "selectedProducts": [
                {"id": "p1", "name": "Boot", "price": 99, "sellingPrice": 79}
            ]
        },
        site_id="abc",
    )
    links = [anchor["href"] for anchor in soup.find_all("a")]
    assert "/site/abc/product/p1" in links, f"unexpected product links {links!r}"
    assert "$79" in soup.get_text(), "expected the selling price to be shown"


def test_deals_fall_back_to_four_placeholders() -> None:
    """The deals strip shows four placeholder deals when none are selected."""
    soup = _render("deals")
    text = soup.get_text()
    for name in ("Classic Platform", "Retro High-Tops", "Performance Boost"):
        assert name in text, f"expected placeholder deal {name!r}"


def test_collections_hover_rules_are_scoped_to_instance() -> None:
    """Collection button hover CSS targets the instance's own class."""
    soup = _render("collections", {"cardStyle": {"buttonHoverEffect": "glow"}})
    css = "".join(block.get_text() for block in soup.find_all("style"))
    classes = {
        name
        for element in soup.select("[class]")
        for name in element["class"]
        if name.endswith("-btn")
    }
    assert len(classes) == 1, f"expected one scoped button class, got {classes!r}"
    (button_class,) = classes
    assert UNIQUE_ID_PATTERN.search(button_class), button_class
    assert f".{button_class}" in css, "expected hover css to use the scoped class"


def test_navbar_resolves_menu_links_for_site() -> None:
    """Collection items and aliases resolve under ``/site/{id}``."""
    soup = _render(
        "navbar",
        {
            "menuItems": [
                "Plain",
                {"label": "Shoes", "link": "/", "collectionId": "c1"},
                {
                    "label": "More",
                    "type": "dropdown",
                    "dropdownItems": [{"label": "About", "link": "about"}],
                },
            ]
        },
        site_id="abc",
    )
    desktop = soup.select_one(".nav-desktop-menu")
    assert desktop is not None, "expected a desktop menu"
    hrefs = [anchor["href"] for anchor in desktop.find_all("a")]
    assert hrefs == ["#", "/site/abc/products?collection=c1", "/site/abc/about"], (
        f"unexpected desktop menu links {hrefs!r}"
    )


def test_navbar_default_menu_and_storage_badges() -> None:
    """Default items use the site base; badges read site-scoped storage keys."""
    soup = _render("navbar", {"cartCount": 12}, site_id="abc")
    labels = [anchor.get_text(strip=True) for anchor in soup.select(".nav-link")]
    assert labels == ["Home", "Products", "About"], f"unexpected menu {labels!r}"
    badge = soup.select_one('[data-badge="cart"]')
    assert badge is not None and badge.get_text() == "9+"
    script = soup.script.get_text() if soup.script else ""
    assert "localStorage.getItem(key)" in script
    assert "'cart_abc'" in script and "'favorites_abc'" in script


def test_navbar_without_site_id_skips_storage_script() -> None:
    """Without a site id the static counts are final."""
    soup = _render("navbar")
    script = soup.script.get_text() if soup.script else ""
    assert "localStorage" not in script, "expected no storage lookup without site id"
    assert soup.nav is not None and soup.nav.find_parent("section") is None


def test_navbar_applies_section_style_to_nav() -> None:
    """The section style lands on the ``<nav>`` element itself."""
    soup = _render("navbar", style=SectionStyle(background_color="#000000"))
    assert soup.nav is not None
    assert "background-color: #000000;" in soup.nav["style"]


@pytest.mark.parametrize(
    ("count", "expected"), [(0, ""), (-1, ""), (1, "1"), (9, "9"), (10, "9+")]
)
def test_badge_label(count: int, expected: str) -> None:
    """Counts above nine collapse to ``9+``."""
    assert badge_label(count) == expected


def test_footer_classic_defaults() -> None:
    """The classic footer renders the three default link columns."""
    soup = _render("footer")
    headings = [heading.get_text() for heading in soup.find_all("h4")]
    assert headings == ["Company", "Support", "Connect"], f"got {headings!r}"
    footer = soup.footer
    assert footer is not None
    assert soup.select_one(f"#{footer['id']}-top") is not None, (
        "expected a back-to-top button keyed by the footer id"
    )
    assert "window.scrollY > 300" in soup.script.get_text()


def test_footer_minimal_uses_svg_social_icons() -> None:
    """Known platforms render inline SVG; unknown ones fall back to an icon."""
    soup = _render(
        "footer",
        {
            "layout": "minimal",
            "socialLinks": [
                {"platform": "YouTube", "link": "https://youtube.com/x"},
                {"platform": "Mastodon", "icon": "public", "link": "#"},
            ],
        },
    )
    assert len(soup.find_all("svg", attrs={"aria-hidden": "true"})) == 1
    assert "public" in [icon.get_text() for icon in soup.select(".material-icons")]


def test_hero_single_slide_has_no_navigation() -> None:
    """A plain hero renders one title and no carousel controls."""
    soup = _render(
        "hero", {"title": "Hello", "buttonText": "Shop", "buttonLink": "/products"}
    )
    assert soup.h1 is not None and soup.h1.get_text() == "Hello"
    assert soup.select_one(".hero-prev") is None
    assert soup.select_one(".hero-btn")["href"] == "/products"


def test_hero_carousel_stacks_slides() -> None:
    """Only the first slide is visible; autoplay uses the configured interval."""
    soup = _render(
        "hero",
        {
            "isCarousel": True,
            "autoplay": True,
            "autoplayInterval": 7000,
            "textStyle": {"titleFontSize": 60},
            "slides": [
                {"title": "One"},
                {"title": "Two", "textStyle": {"titleFontSize": 30}},
            ],
        },
    )
    slides = soup.select(".hero-slide")
    assert len(slides) == 2
    assert "display: flex" in slides[0]["style"]
    assert "display: none" in slides[1]["style"]
    assert len(soup.select(".hero-dot")) == 2
    assert "font-size: 60px" in slides[0].h1["style"]
    assert "font-size: 30px" in slides[1].h1["style"]
    assert "7000" in soup.script.get_text()


def test_hero_single_carousel_slide_omits_controls() -> None:
    """A one-slide carousel has no controls and no script."""
    soup = _render("hero", {"isCarousel": True, "slides": [{"title": "Only"}]})
    assert soup.select_one(".hero-prev") is None
    assert soup.script is None


def test_hero_minimal_forces_outlined_uppercase_button() -> None:
    """Minimal heroes ignore the filled variant and uppercase the button."""
    soup = _render(
        "hero",
        {
            "layout": "minimal",
            "buttonText": "Explore",
            "textStyle": {"buttonStyle": {"variant": "filled"}},
        },
    )
    style = soup.select_one(".hero-btn")["style"]
    assert "background: transparent" in style
    assert "text-transform: uppercase" in style


@pytest.mark.parametrize(
    ("url", "kind", "expected"),
    [
        (
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "youtube",
            "https://www.youtube.com/embed/dQw4w9WgXcQ?controls=1&rel=0",
        ),
        (
            "https://vimeo.com/76979871",
            "vimeo",
            "https://player.vimeo.com/video/76979871?controls=1",
        ),
        ("https://cdn.example/clip.mp4", "custom", "https://cdn.example/clip.mp4"),
    ],
)
def test_embed_url(url: str, kind: str, expected: str) -> None:
    """Share links become embed urls."""
    assert embed_url(url, kind) == expected


def test_image_comparison_clamps_slider_position() -> None:
    """Out-of-range slider positions are clamped to 100%."""
    soup = _render(
        "imageComparison",
        {"beforeImage": "a.png", "afterImage": "b.png", "sliderPosition": 150},
    )
    handle = soup.select_one('[id$="-handle"]')
    assert handle is not None
    assert "left: 100%" in handle["style"]


def test_banner_marquee_repeats_message() -> None:
    """Marquee banners repeat the message twelve times."""
    soup = _render("banner", {"enableMarquee": True, "text": "Sale"})
    wrap = soup.select_one("[id]")
    items = soup.select(f".marquee-item-{wrap['id']}")
    assert len(items) == 12, f"expected 12 marquee items, got {len(items)}"


def test_faq_has_no_instance_script() -> None:
    """FAQ accordions rely on the document-level script."""
    soup = _render("faq")
    assert len(soup.select(".faq-item")) == 4
    assert soup.script is None
