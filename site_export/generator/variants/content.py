"""Generators for the static content sections.

Features, testimonials, call-to-action, about, contact, gallery, pricing, FAQ,
stats, team and services share one shape: read a handful of text fields,
substitute placeholder records when the backing list is empty, and render a
fixed template. None of them emit per-instance scripts; FAQ accordions are
bound by the document-level bootstrap script.
"""

from __future__ import annotations

import typing as typ

from site_export.config import SectionStyle, Spacing

from ._shared import (
    Data,
    choice,
    initial,
    integer,
    records_or,
    section_defaults,
    text,
)

if typ.TYPE_CHECKING:
    from ..models import RenderContext

FEATURE_PLACEHOLDERS: tuple[Data, ...] = (
    {"icon": "⭐", "title": "Feature 1", "description": "Description here"},
    {"icon": "🚀", "title": "Feature 2", "description": "Description here"},
    {"icon": "💎", "title": "Feature 3", "description": "Description here"},
)
TESTIMONIAL_PLACEHOLDERS: tuple[Data, ...] = (
    {"name": "John Doe", "role": "Customer", "text": "Amazing service!", "rating": 5},
    {"name": "Jane Smith", "role": "Customer", "text": "Great products!", "rating": 5},
)
PRICING_PLACEHOLDERS: tuple[Data, ...] = tuple(
    {"name": name, "price": (index + 1) * 29, "features": []}
    for index, name in enumerate(("Basic", "Pro", "Enterprise"))
)
FAQ_PLACEHOLDERS: tuple[Data, ...] = tuple(
    {
        "question": f"Question {index}?",
        "answer": f"Answer to question {index} goes here...",
    }
    for index in range(1, 5)
)
STAT_PLACEHOLDERS: tuple[Data, ...] = (
    {"value": "10K+", "label": "Happy Customers", "icon": "😊"},
    {"value": "500+", "label": "Products Sold", "icon": "📦"},
    {"value": "99%", "label": "Satisfaction Rate", "icon": "⭐"},
    {"value": "24/7", "label": "Support Available", "icon": "💬"},
)
TEAM_PLACEHOLDERS: tuple[Data, ...] = (
    {
        "name": "John Doe",
        "role": "CEO & Founder",
        "bio": "Visionary leader with 10+ years experience",
    },
    {"name": "Jane Smith", "role": "CTO", "bio": "Tech innovator and problem solver"},
    {
        "name": "Mike Johnson",
        "role": "Lead Designer",
        "bio": "Creative mind behind our designs",
    },
    {
        "name": "Sarah Wilson",
        "role": "Marketing Head",
        "bio": "Growth strategist and brand expert",
    },
)
SERVICE_PLACEHOLDERS: tuple[Data, ...] = (
    {
        "icon": "🚀",
        "title": "Fast Delivery",
        "description": "Get your products delivered within 24-48 hours",
        "price": "Free",
    },
    {
        "icon": "🛡️",
        "title": "Secure Payment",
        "description": "Multiple secure payment options available",
    },
    {
        "icon": "🔄",
        "title": "Easy Returns",
        "description": "30-day hassle-free return policy",
    },
    {
        "icon": "💬",
        "title": "24/7 Support",
        "description": "Round the clock customer support",
    },
    {
        "icon": "🎁",
        "title": "Gift Wrapping",
        "description": "Beautiful gift wrapping service",
        "price": "$5",
    },
    {
        "icon": "📦",
        "title": "Track Orders",
        "description": "Real-time order tracking",
        "price": "Free",
    },
)
GALLERY_PLACEHOLDER_TILES = 8


def features(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the feature card grid."""
    items, _ = records_or(data, "items", FEATURE_PLACEHOLDERS)
    return ctx.render(
        "variants/features.jinja",
        title=text(data, "title", "Features"),
        subtitle=text(data, "subtitle"),
        cards=items,
    )


def testimonials(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render quoted testimonials with a star rating."""
    items, _ = records_or(data, "items", TESTIMONIAL_PLACEHOLDERS)
    for item in items:
        item["stars"] = "⭐" * max(0, integer(item, "rating", 5))
    return ctx.render(
        "variants/testimonials.jinja",
        title=text(data, "title", "Testimonials"),
        cards=items,
    )


def cta(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the call-to-action banner."""
    background = text(data, "backgroundColor", "#27491F")
    return ctx.render(
        "variants/cta.jinja",
        title=text(data, "title", "Get Started"),
        subtitle=text(data, "subtitle"),
        button_text=text(data, "buttonText", "Get Started"),
        button_href=ctx.link(text(data, "buttonLink")),
        button_background=text(data, "buttonBackgroundColor", "#ffffff"),
        button_color=text(data, "buttonTextColor", background),
    )


def about(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the two-column about block."""
    return ctx.render(
        "variants/about.jinja",
        title=text(data, "title", "About Us"),
        content=text(data, "content"),
        image=text(data, "image"),
    )


def contact(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the email, phone and address cards."""
    channels = (
        ("email", "Email", text(data, "email")),
        ("phone", "Phone", text(data, "phone")),
        ("location_on", "Address", text(data, "address")),
    )
    return ctx.render(
        "variants/contact.jinja",
        title=text(data, "title", "Contact Us"),
        subtitle=text(data, "subtitle"),
        channels=channels,
    )


def gallery(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the square image grid, or placeholder tiles when empty."""
    images, placeholder = records_or(data, "images", ())
    return ctx.render(
        "variants/gallery.jinja",
        title=text(data, "title", "Gallery"),
        images=images,
        placeholder_tiles=GALLERY_PLACEHOLDER_TILES if placeholder else 0,
    )


def pricing(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render pricing plans with their feature checklists."""
    plans, _ = records_or(data, "plans", PRICING_PLACEHOLDERS)
    for plan in plans:
        features_list = plan.get("features")
        plan["features"] = (
            [str(feature) for feature in features_list]
            if isinstance(features_list, list)
            else []
        )
        plan["price"] = plan.get("price") or 0
    return ctx.render(
        "variants/pricing.jinja",
        title=text(data, "title", "Pricing"),
        subtitle=text(data, "subtitle"),
        plans=plans,
        currency=text(data, "currency", "$"),
        billing_period=text(data, "billingPeriod", "/month"),
        button_text=text(data, "buttonText", "Get Started"),
    )


def faq(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render accordion items bound by the shared FAQ script."""
    entries, _ = records_or(data, "items", FAQ_PLACEHOLDERS)
    return ctx.render(
        "variants/faq.jinja",
        title=text(data, "title", "FAQ"),
        entries=entries,
    )


def stats(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render headline numbers on the brand gradient."""
    entries, _ = records_or(data, "stats", STAT_PLACEHOLDERS)
    layout = choice(data, "layout", ("row", "grid"), "row")
    return ctx.render(
        "variants/stats.jinja",
        title=text(data, "title"),
        subtitle=text(data, "subtitle"),
        entries=entries,
        columns=4 if layout == "row" else 2,
    )


def team(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render team member cards with portrait or initial avatars."""
    members, _ = records_or(data, "members", TEAM_PLACEHOLDERS)
    for member in members:
        member["initial"] = initial(member.get("name"), "T")
    layout = choice(data, "layout", ("grid", "list"), "grid")
    return ctx.render(
        "variants/team.jinja",
        title=text(data, "title", "Meet Our Team"),
        subtitle=text(data, "subtitle", "The people behind our success"),
        members=members,
        columns=4 if layout == "grid" else 2,
    )


def services(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the service offering cards."""
    offerings, _ = records_or(data, "services", SERVICE_PLACEHOLDERS)
    for offering in offerings:
        link = offering.get("link")
        offering["href"] = ctx.link(str(link)) if link else ""
    return ctx.render(
        "variants/services.jinja",
        title=text(data, "title", "Our Services"),
        subtitle=text(data, "subtitle", "What we offer"),
        offerings=offerings,
    )


def cta_style(data: Data) -> SectionStyle:
    """Return the CTA wrapper defaults, which follow ``backgroundColor``."""
    return SectionStyle(
        padding=Spacing(top=80, bottom=80, left=20, right=20),
        background_color=text(data, "backgroundColor", "#27491F"),
        color="#ffffff",
    )


GENERATORS = {
    "features": features,
    "testimonials": testimonials,
    "cta": cta,
    "about": about,
    "contact": contact,
    "gallery": gallery,
    "pricing": pricing,
    "faq": faq,
    "stats": stats,
    "team": team,
    "services": services,
}
STYLE_DEFAULTS = {
    "features": section_defaults("#ffffff"),
    "testimonials": section_defaults("#ffffff"),
    "cta": cta_style,
    "about": section_defaults("#ffffff"),
    "contact": section_defaults("#f9fafb"),
    "gallery": section_defaults("#ffffff"),
    "pricing": section_defaults("#f9fafb"),
    "faq": section_defaults("#ffffff"),
    "stats": section_defaults("var(--primary-color)", color="#ffffff"),
    "team": section_defaults("#ffffff"),
    "services": section_defaults("#f9fafb"),
}


__all__ = [
    "GENERATORS",
    "STYLE_DEFAULTS",
    "about",
    "contact",
    "cta",
    "faq",
    "features",
    "gallery",
    "pricing",
    "services",
    "stats",
    "team",
    "testimonials",
]
