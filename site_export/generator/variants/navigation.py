"""Generators for the self-wrapping ``navbar`` and ``footer`` sections.

Unlike every other variant these two return a complete ``<nav>``/``<footer>``
element. The section style is therefore resolved here, against the variant's
own colour defaults, and applied to that root element; the assembler emits the
fragment as-is.

Cart and wishlist badges are rendered from the static ``cartCount`` and
``wishlistCount`` fields and, when the document has a site id, refreshed in
the browser from the site-scoped ``localStorage`` keys.
"""

from __future__ import annotations

import typing as typ

from site_export._constants import (
    BADGE_OVERFLOW_LIMIT,
    CART_STORAGE_KEY,
    FAVORITES_STORAGE_KEY,
)
from site_export.config import SectionStyle, Spacing

from ..style_resolver import merge_styles, resolve_style
from ..unique_id import allocate_id
from ._shared import (
    Data,
    choice,
    flag,
    initial,
    integer,
    records,
    records_or,
    text,
)

if typ.TYPE_CHECKING:
    from ..models import RenderContext

HOVER_EFFECTS = ("none", "underline", "slide", "highlight", "scale", "glow", "fill")
FOOTER_LAYOUTS = ("classic", "minimal")

FOOTER_COLUMNS: tuple[Data, ...] = (
    {
        "title": "Company",
        "links": [
            {"label": "About Us", "link": "#"},
            {"label": "Contact", "link": "#"},
            {"label": "Careers", "link": "#"},
        ],
    },
    {
        "title": "Support",
        "links": [
            {"label": "Help Center", "link": "#"},
            {"label": "Privacy Policy", "link": "#"},
            {"label": "Terms of Service", "link": "#"},
        ],
    },
    {
        "title": "Connect",
        "links": [
            {"label": "Facebook", "link": "#"},
            {"label": "Twitter", "link": "#"},
            {"label": "Instagram", "link": "#"},
        ],
    },
)
POLICY_LINKS: tuple[Data, ...] = (
    {"label": "Privacy policy", "link": "#"},
    {"label": "Refund policy", "link": "#"},
    {"label": "Contact information", "link": "#"},
    {"label": "Terms of service", "link": "#"},
    {"label": "Shipping policy", "link": "#"},
)
SOCIAL_LINKS: tuple[Data, ...] = (
    {"platform": "Facebook", "icon": "facebook", "link": "#"},
    {"platform": "Instagram", "icon": "camera_alt", "link": "#"},
    {"platform": "TikTok", "icon": "music_note", "link": "#"},
)
LEGAL_LINKS = ("Privacy", "Terms", "Cookies")

# 24x24 viewBox paths, keyed by lower-cased platform name.
SOCIAL_ICON_PATHS: dict[str, str] = {
    "facebook": (
        "M24 12.073c0-6.627-5.373-12-12-12s-12 5.373-12 12c0 5.99 4.388 10.954 "
        "10.125 11.854v-8.385H7.078v-3.47h3.047V9.43c0-3.007 1.792-4.669 "
        "4.533-4.669 1.312 0 2.686.235 2.686.235v2.953H15.83c-1.491 0-1.956.925"
        "-1.956 1.874v2.25h3.328l-.532 3.47h-2.796v8.385C19.612 23.027 24 "
        "18.062 24 12.073z"
    ),
    "instagram": (
        "M12 2.163c3.204 0 3.584.012 4.85.07 3.252.148 4.771 1.691 4.919 4.919"
        ".058 1.265.069 1.645.069 4.849 0 3.205-.012 3.584-.069 4.849-.149 "
        "3.225-1.664 4.771-4.919 4.919-1.266.058-1.644.07-4.85.07-3.204 0-3.584"
        "-.012-4.849-.07-3.26-.149-4.771-1.699-4.919-4.92-.058-1.265-.07-1.644"
        "-.07-4.849 0-3.204.013-3.583.07-4.849.149-3.227 1.664-4.771 4.919-4.919"
        " 1.266-.057 1.645-.069 4.849-.069zm0-2.163c-3.259 0-3.667.014-4.947.072"
        "-4.358.2-6.78 2.618-6.98 6.98-.059 1.281-.073 1.689-.073 4.948 0 3.259"
        ".014 3.668.072 4.948.2 4.358 2.618 6.78 6.98 6.98 1.281.058 1.689.072 "
        "4.948.072 3.259 0 3.668-.014 4.948-.072 4.354-.2 6.782-2.618 6.979-6.98"
        ".059-1.28.073-1.689.073-4.948 0-3.259-.014-3.667-.072-4.947-.196-4.354"
        "-2.617-6.78-6.979-6.98-1.281-.059-1.69-.073-4.949-.073zm0 5.838c-3.403 "
        "0-6.162 2.759-6.162 6.162s2.759 6.163 6.162 6.163 6.162-2.759 6.162"
        "-6.163c0-3.403-2.759-6.162-6.162-6.162zm0 10.162c-2.209 0-4-1.79-4-4 "
        "0-2.209 1.791-4 4-4s4 1.791 4 4c0 2.21-1.791 4-4 4zm6.406-11.845c-.796 "
        "0-1.441.645-1.441 1.44s.645 1.44 1.441 1.44c.795 0 1.439-.645 1.439"
        "-1.44s-.644-1.44-1.439-1.44z"
    ),
    "tiktok": (
        "M19.59 6.69a4.83 4.83 0 01-3.77-4.25V2h-3.45v13.67a2.89 2.89 0 01-5.2 "
        "1.74 2.89 2.89 0 012.31-4.64 2.93 2.93 0 01.88.13V9.4a6.84 6.84 0 00-1"
        "-.05A6.33 6.33 0 005 20.1a6.34 6.34 0 0010.86-4.43v-7a8.16 8.16 0 "
        "004.77 1.52v-3.4a4.85 4.85 0 01-1-.1z"
    ),
    "twitter": (
        "M18.244 2.25h3.308l-7.227 8.26 8.502 11.24H16.17l-5.214-6.817L4.99 "
        "21.75H1.68l7.73-8.835L1.254 2.25H8.08l4.713 6.231zm-1.161 17.52h1.833"
        "L7.084 4.126H5.117z"
    ),
    "linkedin": (
        "M20.447 20.452h-3.554v-5.569c0-1.328-.027-3.037-1.852-3.037-1.853 0"
        "-2.136 1.445-2.136 2.939v5.667H9.351V9h3.414v1.561h.046c.477-.9 1.637"
        "-1.85 3.37-1.85 3.601 0 4.267 2.37 4.267 5.455v6.286zM5.337 7.433c"
        "-1.144 0-2.063-.926-2.063-2.065 0-1.138.92-2.063 2.063-2.063 1.14 0 "
        "2.064.925 2.064 2.063 0 1.139-.925 2.065-2.064 2.065zm1.782 13.019H3.555"
        "V9h3.564v11.452zM22.225 0H1.771C.792 0 0 .774 0 1.729v20.542C0 23.227"
        ".792 24 1.771 24h20.451C23.2 24 24 23.227 24 22.271V1.729C24 .774 23.2 "
        "0 22.222 0h.003z"
    ),
    "youtube": (
        "M23.498 6.186a3.016 3.016 0 0 0-2.122-2.136C19.505 3.545 12 3.545 12 "
        "3.545s-7.505 0-9.377.505A3.017 3.017 0 0 0 .502 6.186C0 8.07 0 12 0 "
        "12s0 3.93.502 5.814a3.016 3.016 0 0 0 2.122 2.136c1.871.505 9.376.505 "
        "9.376.505s7.505 0 9.377-.505a3.015 3.015 0 0 0 2.122-2.136C24 15.93 24 "
        "12 24 12s0-3.93-.502-5.814zM9.545 15.568V8.432L15.818 12l-6.273 3.568z"
    ),
}


def badge_label(count: int) -> str:
    """Return the badge text for ``count``; empty when there is nothing to show.

    Examples
    --------
    >>> badge_label(0), badge_label(3), badge_label(12)
    ('', '3', '9+')
    """
    if count <= 0:
        return ""
    if count > BADGE_OVERFLOW_LIMIT:
        return f"{BADGE_OVERFLOW_LIMIT}+"
    return str(count)


def _menu_entry(item: Data, ctx: RenderContext) -> dict[str, typ.Any]:
    dropdown = []
    if item.get("type") == "dropdown":
        dropdown = [
            {
                "label": text(child, "label"),
                "href": ctx.link(
                    text(child, "link"), text(child, "collectionId") or None
                ),
                "is_collection": bool(child.get("collectionId")),
                "collection_name": text(child, "collectionName"),
            }
            for child in records(item, "dropdownItems")
        ]
    return {
        "label": text(item, "label"),
        "href": ctx.link(text(item, "link"), text(item, "collectionId") or None),
        "badge": text(item, "badge"),
        "icon": text(item, "icon"),
        "dropdown": dropdown,
    }


def menu_entries(data: Data, ctx: RenderContext) -> list[dict[str, typ.Any]]:
    """Normalise ``menuItems`` into label/href/dropdown records.

    Bare strings become ``#`` links; an empty menu yields Home, Products and
    About under the site base path.
    """
    raw = data.get("menuItems")
    items = raw if isinstance(raw, list) else []
    if not items:
        base = ctx.base_url
        return [
            _menu_entry({"label": label, "link": link}, ctx)
            for label, link in (
                ("Home", base or "#"),
                ("Products", f"{base}/products"),
                ("About", f"{base}/about"),
            )
        ]
    entries = []
    for item in items:
        if isinstance(item, str):
            entries.append(_menu_entry({"label": item, "link": "#"}, ctx))
        elif isinstance(item, dict):
            entries.append(_menu_entry(item, ctx))
    return entries


def navbar_style(data: Data) -> SectionStyle:
    return SectionStyle(
        background_color=text(data, "backgroundColor", "#FFFFFF"),
        color=text(data, "textColor", "#27491F"),
    )


def navbar(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the site header with desktop and mobile menus.

    Hover rules and menu toggles are scoped to the navbar's allocated id, so
    more than one navbar can share a page.
    """
    merged = merge_styles(navbar_style(data), style)
    foreground = merged.text_color or merged.color or "#27491F"
    logo_text = text(data, "logoText", "MADAS")
    cart_count = integer(data, "cartCount", 0)
    wishlist_count = integer(data, "wishlistCount", 0)
    base = ctx.base_url
    return ctx.render(
        "variants/navbar.jinja",
        uid=allocate_id("navbar"),
        wrapper=resolve_style(style, navbar_style(data)),
        sticky=flag(data, "sticky", default=False),
        foreground=foreground,
        background=merged.background_color or "#FFFFFF",
        logo=text(data, "logo"),
        logo_text=logo_text,
        logo_initial=initial(logo_text, "M"),
        home_href=base or "#",
        entries=menu_entries(data, ctx),
        show_search=flag(data, "showSearch", default=True),
        search_placeholder=text(data, "searchPlaceholder", "Search products..."),
        show_cart=flag(data, "showCart", default=True),
        show_wishlist=flag(data, "showWishlist", default=True),
        show_user=flag(data, "showUserIcon", default=True),
        cart_href=f"{base}/cart",
        wishlist_href=f"{base}/favorites",
        login_href=f"{base}/login",
        cart_count=max(0, cart_count),
        wishlist_count=max(0, wishlist_count),
        cart_badge=badge_label(cart_count),
        wishlist_badge=badge_label(wishlist_count),
        badge_limit=BADGE_OVERFLOW_LIMIT,
        cart_key=CART_STORAGE_KEY.format(site_id=ctx.site_id) if ctx.site_id else "",
        favorites_key=(
            FAVORITES_STORAGE_KEY.format(site_id=ctx.site_id) if ctx.site_id else ""
        ),
        hover_effect=choice(data, "hoverEffect", HOVER_EFFECTS, "underline"),
        hover_color=text(data, "hoverColor", foreground),
        hover_background=text(data, "hoverBackgroundColor", "rgba(0,0,0,0.05)"),
    )


def social_icon(platform: str) -> str | None:
    """Return the SVG path for a known social platform, else None."""
    return SOCIAL_ICON_PATHS.get(platform.strip().lower())


def _links(entries: list[dict[str, typ.Any]], ctx: RenderContext) -> None:
    for entry in entries:
        entry["href"] = ctx.link(text(entry, "link"))


def footer_style(data: Data) -> SectionStyle:
    if choice(data, "layout", FOOTER_LAYOUTS, "classic") == "minimal":
        return SectionStyle(background_color="#ffffff", color="#1f2937")
    return SectionStyle(
        padding=Spacing(top=48, bottom=48, left=24, right=24),
        background_color="#111827",
        color="#ffffff",
    )


def footer(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the classic link-grid footer or the minimal brand footer.

    Both layouts add a fixed back-to-top button that appears once the page
    has scrolled past 300px.
    """
    layout = choice(data, "layout", FOOTER_LAYOUTS, "classic")
    minimal = layout == "minimal"
    merged = merge_styles(footer_style(data), style)
    columns, _ = records_or(data, "columns", FOOTER_COLUMNS)
    for column in columns:
        column["links"] = records(column, "links")
        _links(column["links"], ctx)
    policies, _ = records_or(data, "policyLinks", POLICY_LINKS)
    _links(policies, ctx)
    socials, _ = records_or(data, "socialLinks", SOCIAL_LINKS)
    _links(socials, ctx)
    for social in socials:
        social["svg_path"] = social_icon(text(social, "platform"))
        social["icon"] = text(social, "icon", "link")
    return ctx.render(
        "variants/footer.jinja",
        uid=allocate_id("footer"),
        layout=layout,
        wrapper=resolve_style(style, footer_style(data)),
        background=merged.background_color or ("#ffffff" if minimal else "#111827"),
        foreground=(
            merged.text_color or merged.color or ("#1f2937" if minimal else "#ffffff")
        ),
        muted="#9ca3af",
        link_color="#6b7280" if minimal else "#9ca3af",
        border_color="#e5e7eb" if minimal else "#374151",
        logo=text(data, "logo"),
        logo_text=text(data, "logoText", "BRAND"),
        tagline=text(
            data,
            "tagline",
            "Sign up for exclusive offers and be the first to know about new "
            "arrivals.",
        ),
        copyright=text(data, "copyrightText", "© 2024 Brand. All rights reserved."),
        columns=columns,
        policies=policies,
        socials=socials,
        legal_links=LEGAL_LINKS,
        social_background=text(data, "socialIconBackgroundColor", "#1f2937"),
        social_hover_background=text(
            data, "socialIconHoverBackgroundColor", "#27491F"
        ),
        show_newsletter=flag(data, "showNewsletter", default=False),
        newsletter_text=text(data, "newsletterText", "Subscribe to our newsletter"),
        newsletter_placeholder=text(data, "newsletterPlaceholder", "Email address"),
    )


GENERATORS = {
    "navbar": navbar,
    "footer": footer,
}
STYLE_DEFAULTS = {
    "navbar": navbar_style,
    "footer": footer_style,
}


__all__ = [
    "GENERATORS",
    "STYLE_DEFAULTS",
    "badge_label",
    "footer",
    "menu_entries",
    "navbar",
    "social_icon",
]
