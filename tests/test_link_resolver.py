"""Unit tests for site-scoped link rewriting."""

from __future__ import annotations

import pytest

from site_export.generator.link_resolver import (
    collection_url,
    product_url,
    resolve_link,
    site_base_path,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/", "/site/abc"),
        ("/products", "/site/abc/products"),
        ("products", "/site/abc/products"),
        ("about", "/site/abc/about"),
        ("/cart", "/site/abc/cart"),
        ("favorites", "/site/abc/favorites"),
        ("/login", "/site/abc/login"),
        ("register", "/site/abc/register"),
        ("/products?collection=c9", "/site/abc/products?collection=c9"),
        ("https://x.com", "https://x.com"),
        ("/site/other/products", "/site/other/products"),
        ("#contact", "#contact"),
        ("/blog/launch", "/blog/launch"),
        ("pages/faq", "pages/faq"),
        ("", "#"),
        (None, "#"),
    ],
)
def test_rewrite_table_with_site_id(path: str | None, expected: str) -> None:
    """Known paths are moved under the site base; others pass through."""
    actual = resolve_link(path, site_id="abc")
    assert actual == expected, f"expected {expected!r} for {path!r}, got {actual!r}"


def test_collection_id_takes_precedence() -> None:
    """A collection id always links to the filtered product listing."""
    actual = resolve_link("/about", site_id="abc", collection_id="c1")
    assert actual == "/site/abc/products?collection=c1", (
        f"expected collection listing url, got {actual!r}"
    )


def test_without_site_id_links_are_untouched() -> None:
    """Without a site id nothing is rewritten, collection ids included."""
    assert resolve_link("/products") == "/products"
    assert resolve_link("/", collection_id="c1") == "/"
    assert site_base_path(None) == ""


def test_catalogue_urls() -> None:
    """Product and collection urls share the site base path."""
    assert product_url("p1", "abc") == "/site/abc/product/p1"
    assert product_url("p1", None) == "/product/p1"
    assert collection_url("c1", "abc") == "/site/abc/products?collection=c1"
