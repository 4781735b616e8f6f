"""Helpers for rewriting editor links into site-scoped URLs."""

from __future__ import annotations

from site_export._constants import SITE_BASE_TEMPLATE

# Bare editor paths with a fixed counterpart under the published site base.
LINK_ALIASES: dict[str, str] = {
    "/products": "/products",
    "products": "/products",
    "/about": "/about",
    "about": "/about",
    "/cart": "/cart",
    "cart": "/cart",
    "/favorites": "/favorites",
    "favorites": "/favorites",
    "/login": "/login",
    "login": "/login",
    "/register": "/register",
    "register": "/register",
}
COLLECTION_QUERY_PREFIX = "/products?collection="


def site_base_path(site_id: str | None) -> str:
    """Return ``/site/{site_id}``, or an empty string when no site is set."""
    if not site_id:
        return ""
    return SITE_BASE_TEMPLATE.format(site_id=site_id)


def resolve_link(
    path: str | None,
    *,
    site_id: str | None = None,
    collection_id: str | None = None,
) -> str:
    """Rewrite ``path`` into a URL under the published site.

    Parameters
    ----------
    path : str or None
        Link target as entered in the editor.
    site_id : str, optional
        Published site identifier; without it links are returned untouched.
    collection_id : str, optional
        Collection the link points at; takes precedence over ``path``.

    Returns
    -------
    str
        The rewritten link, the original link, or ``"#"`` when empty.

    Examples
    --------
    >>> resolve_link("/products", site_id="abc")
    '/site/abc/products'
    >>> resolve_link("/", site_id="abc")
    '/site/abc'
    >>> resolve_link("https://x.com", site_id="abc")
    'https://x.com'
    >>> resolve_link("", site_id=None)
    '#'
    """
    base = site_base_path(site_id)
    if collection_id and base:
        return f"{base}{COLLECTION_QUERY_PREFIX}{collection_id}"
    if not path:
        return "#"
    if path.startswith("http") or path.startswith("/site/") or not base:
        return path
    if path in LINK_ALIASES:
        return f"{base}{LINK_ALIASES[path]}"
    if path == "/":
        return base
    if path.startswith(COLLECTION_QUERY_PREFIX):
        return f"{base}{path}"
    # Other relative pages are not served under the site base.
    return path


def product_url(product_id: object, site_id: str | None) -> str:
    """Return the product detail URL for ``product_id``."""
    return f"{site_base_path(site_id)}/product/{product_id}"


def collection_url(collection_id: object, site_id: str | None) -> str:
    """Return the product listing URL filtered to ``collection_id``."""
    return f"{site_base_path(site_id)}{COLLECTION_QUERY_PREFIX}{collection_id}"


__all__ = [
    "COLLECTION_QUERY_PREFIX",
    "LINK_ALIASES",
    "collection_url",
    "product_url",
    "resolve_link",
    "site_base_path",
]
