"""Generators for catalogue-driven sections: products, deals and collections.

Catalogue records arrive already resolved (name, image, price, ids); these
generators only lay them out. Each card is rendered from its own template so
the same markup can sit in a grid cell or a carousel slide.

Carousel layouts emit the desktop state statically and let the shared
carousel script recompute ``itemsPerView`` for the current viewport. The start
index is always clamped to ``[0, max(0, count - itemsPerView)]``.
"""

from __future__ import annotations

import typing as typ

from site_export._constants import MOBILE_BREAKPOINT, TABLET_BREAKPOINT
from site_export.config import SectionStyle

from ..link_resolver import collection_url, product_url
from ..renderer import css_declarations
from ..style_resolver import format_number
from ..unique_id import allocate_id
from ._shared import (
    ASPECT_RATIOS,
    CARD_SHADOWS,
    Data,
    carousel_max_index,
    choice,
    countdown_state,
    flag,
    integer,
    items_per_view,
    mapping,
    merge_defaults,
    number,
    price_label,
    records,
    records_or,
    section_defaults,
    text,
)

if typ.TYPE_CHECKING:
    from ..models import RenderContext

PRODUCT_CARD_DEFAULTS: dict[str, typ.Any] = {
    "backgroundColor": "#ffffff",
    "textColor": "#1f2937",
    "priceColor": "#6b7280",
    "borderRadius": 12,
    "shadow": "md",
    "imageAspect": "square",
    "imageFit": "cover",
    "imageBackgroundColor": "#f3f4f6",
    "buttonBackgroundColor": "#27491F",
    "buttonTextColor": "#ffffff",
    "buttonBorderRadius": 8,
    "buttonFullWidth": True,
    "showBorder": True,
    "borderColor": "#e5e7eb",
}
DEAL_CARD_DEFAULTS: dict[str, typ.Any] = {
    "backgroundColor": "#ffffff",
    "textColor": "#1f2937",
    "descriptionColor": "#6b7280",
    "priceColor": "#1f2937",
    "borderRadius": 8,
    "showBorder": True,
    "borderColor": "#e5e7eb",
    "imageBackgroundColor": "#f3f4f6",
    "imageFit": "cover",
    "buttonBackgroundColor": "#F0CAE1",
    "buttonTextColor": "#27491F",
    "buttonBorderRadius": 6,
}
DEAL_COUNTDOWN_DEFAULTS: dict[str, typ.Any] = {
    "backgroundColor": "#1f2937",
    "textColor": "#ffffff",
    "labelColor": "#9ca3af",
    "borderRadius": 8,
    "style": "modern",
}
COLLECTION_CARD_DEFAULTS: dict[str, typ.Any] = {
    "backgroundColor": "#ffffff",
    "textColor": "#1f2937",
    "borderRadius": 16,
    "showBorder": False,
    "borderColor": "#e5e7eb",
    "imageAspect": "square",
    "imageFit": "cover",
    "overlayColor": "#000000",
    "overlayOpacity": 0.4,
    "showName": True,
    "showDescription": False,
    "showProductCount": True,
    "namePosition": "overlay",
    "showButton": True,
    "buttonText": "EXPLORE COLLECTION",
    "buttonBackgroundColor": "rgba(255,255,255,0.2)",
    "buttonTextColor": "#ffffff",
    "buttonBorderRadius": 4,
    "buttonHoverBackgroundColor": "#ffffff",
    "buttonHoverTextColor": "#1f2937",
    "buttonHoverEffect": "fill",
}

DEAL_PLACEHOLDERS: tuple[Data, ...] = (
    {
        "id": "1",
        "name": "Classic Platform",
        "price": 129,
        "description": "Bold floral pattern with attitude",
    },
    {
        "id": "2",
        "name": "Retro High-Tops",
        "price": 89,
        "description": "Timeless design with modern edge",
    },
    {
        "id": "3",
        "name": "Performance Boost",
        "price": 159,
        "description": "Innovation meets street style",
    },
    {
        "id": "4",
        "name": "Premium Collection",
        "price": 199,
        "description": "Elevated style with bold presence",
    },
)
COLLECTION_PLACEHOLDERS: tuple[Data, ...] = (
    {"id": "1", "name": "New Arrivals", "image": "", "productCount": 24},
    {"id": "2", "name": "Best Sellers", "image": "", "productCount": 18},
    {"id": "3", "name": "Summer Collection", "image": "", "productCount": 32},
    {"id": "4", "name": "Sale", "image": "", "productCount": 45},
)

DEAL_COUNTDOWN_STYLES = ("modern", "boxed", "minimal")
HOVER_EFFECTS = ("fill", "scale", "glow", "none")
URGENT_BACKGROUND = "#dc2626"
CAROUSEL_GAP = 24


def _heading_css(data: Data) -> tuple[str, str]:
    title_style = mapping(data, "titleStyle")
    subtitle_style = mapping(data, "subtitleStyle")
    align = text(title_style, "textAlign", "center")
    title_css = css_declarations(
        {
            "font-size": text(title_style, "fontSize", "2.5rem"),
            "font-weight": text(title_style, "fontWeight", "700"),
            "color": text(title_style, "color", "inherit"),
            "text-align": align,
            "margin-bottom": "1rem",
        }
    )
    subtitle_css = css_declarations(
        {
            "font-size": text(subtitle_style, "fontSize", "1rem"),
            "color": text(subtitle_style, "color", "#666"),
            "text-align": align,
            "margin-bottom": "3rem",
        }
    )
    return title_css, subtitle_css


def _columns(data: Data, allowed: range, default: int = 4) -> int:
    columns = integer(data, "columns", default)
    return columns if columns in allowed else default


def carousel_settings(count: int, columns: int) -> dict[str, typ.Any]:
    """Return the per-viewport card counts and initial clamp for a carousel.

    Examples
    --------
    >>> carousel_settings(10, 4)["max_index"]
    6
    """
    per_view = {
        "mobile": items_per_view(columns, MOBILE_BREAKPOINT - 1),
        "tablet": items_per_view(columns, TABLET_BREAKPOINT - 1),
        "desktop": items_per_view(columns),
    }
    return {
        "per_view": per_view,
        "max_index": carousel_max_index(count, per_view["desktop"]),
        "gap": CAROUSEL_GAP,
    }


def products(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render selected products as a grid, a list or a carousel.

    An empty selection renders the "No products selected" placeholder block
    rather than an empty grid.
    """
    title_css, subtitle_css = _heading_css(data)
    selected = records(data, "selectedProducts")
    layout = choice(data, "layout", ("grid", "list", "carousel"), "grid")
    columns = _columns(data, range(2, 5))
    card = merge_defaults(PRODUCT_CARD_DEFAULTS, mapping(data, "cardStyle"))
    card_shadow = CARD_SHADOWS.get(str(card["shadow"]), CARD_SHADOWS["md"])
    aspect = ASPECT_RATIOS.get(str(card["imageAspect"]), ASPECT_RATIOS["square"])
    show_price = flag(data, "showPrice", default=True)
    show_add_to_cart = flag(data, "showAddToCart", default=True)
    cards = [
        ctx.render(
            "variants/product_card.jinja",
            product=product,
            href=product_url(product.get("id", ""), ctx.site_id),
            price=price_label(product),
            card=card,
            card_shadow=card_shadow,
            aspect=aspect,
            show_price=show_price,
            show_add_to_cart=show_add_to_cart,
        )
        for product in selected
    ]
    carousel = carousel_settings(len(cards), columns) if layout == "carousel" else {}
    return ctx.render(
        "variants/products.jinja",
        uid=allocate_id("productsCarousel") if carousel else "",
        title=text(data, "title", "Products"),
        subtitle=text(data, "subtitle"),
        title_css=title_css,
        subtitle_css=subtitle_css,
        cards=cards,
        layout=layout,
        grid_columns=f"repeat({columns}, 1fr)" if layout == "grid" else "1fr",
        carousel=carousel,
    )


def deals(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the deal-of-the-day strip with an optional countdown header."""
    items, _ = records_or(data, "selectedProducts", DEAL_PLACEHOLDERS)
    layout = choice(data, "layout", ("grid", "carousel"), "grid")
    columns = _columns(data, range(2, 5))
    card = merge_defaults(DEAL_CARD_DEFAULTS, mapping(data, "cardStyle"))
    timer = merge_defaults(DEAL_COUNTDOWN_DEFAULTS, mapping(data, "countdownStyle"))
    timer["style"] = (
        timer["style"] if timer["style"] in DEAL_COUNTDOWN_STYLES else "modern"
    )
    end_date = data.get("countdownEndDate")
    show_countdown = flag(data, "showCountdown", default=False) and bool(end_date)
    state = countdown_state(end_date, ctx.rendered_at) if show_countdown else None
    cards = [
        ctx.render(
            "variants/deal_card.jinja",
            product=item,
            description=text(item, "description", "Premium quality product"),
            price=price_label(item),
            card=card,
        )
        for item in items
    ]
    carousel = carousel_settings(len(cards), columns) if layout == "carousel" else {}
    view_more = text(data, "viewMoreText").strip()
    return ctx.render(
        "variants/deals.jinja",
        uid=allocate_id("deal"),
        title=text(data, "title", "DEAL OF THE DAY"),
        view_more=view_more,
        view_more_href=ctx.link(text(data, "viewMoreLink", "#")),
        cards=cards,
        layout=layout,
        grid_columns=f"repeat({columns}, 1fr)",
        carousel=carousel,
        timer=timer,
        state=state,
        digits=state.parts.padded() if state else {},
        urgent_background=(
            "transparent" if timer["style"] == "minimal" else URGENT_BACKGROUND
        ),
    )


def collections(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render collection tiles as a grid, a carousel or a featured mosaic."""
    title_css, subtitle_css = _heading_css(data)
    items, _ = records_or(data, "selectedCollections", COLLECTION_PLACEHOLDERS)
    layout = choice(data, "layout", ("grid", "carousel", "featured"), "grid")
    columns = _columns(data, range(2, 7))
    card = merge_defaults(COLLECTION_CARD_DEFAULTS, mapping(data, "cardStyle"))
    card["buttonHoverEffect"] = (
        card["buttonHoverEffect"]
        if card["buttonHoverEffect"] in HOVER_EFFECTS
        else "fill"
    )
    opacity = number(card, "overlayOpacity", 0.4)
    aspect = ASPECT_RATIOS.get(str(card["imageAspect"]), ASPECT_RATIOS["square"])
    uid = allocate_id("collectionsCarousel" if layout == "carousel" else "collections")
    cards = [
        ctx.render(
            "variants/collection_card.jinja",
            uid=uid,
            collection=item,
            href=collection_url(item["id"], ctx.site_id) if item.get("id") else "#",
            card=card,
            aspect=aspect,
            featured=layout == "featured" and index == 0,
        )
        for index, item in enumerate(items)
    ]
    carousel = carousel_settings(len(cards), columns) if layout == "carousel" else {}
    return ctx.render(
        "variants/collections.jinja",
        uid=uid,
        title=text(data, "title", "Shop by Collection"),
        subtitle=text(data, "subtitle", "Browse our curated collections"),
        title_css=title_css,
        subtitle_css=subtitle_css,
        align=text(mapping(data, "titleStyle"), "textAlign", "center"),
        cards=cards,
        layout=layout,
        grid_columns=f"repeat({columns}, 1fr)",
        carousel=carousel,
        card=card,
        overlay_hover_opacity=format_number(round(max(0.0, opacity - 0.1), 2)),
    )


GENERATORS = {
    "products": products,
    "deals": deals,
    "collections": collections,
}
STYLE_DEFAULTS = {
    "products": section_defaults("#ffffff"),
    "deals": section_defaults("#ffffff"),
    "collections": section_defaults("#ffffff"),
}


__all__ = [
    "GENERATORS",
    "STYLE_DEFAULTS",
    "carousel_settings",
    "collections",
    "deals",
    "products",
]
