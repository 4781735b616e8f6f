"""Generators for launch countdowns, announcement banners and newsletters."""

from __future__ import annotations

import typing as typ

from site_export.config import SectionStyle, Spacing

from ..style_resolver import format_number
from ..unique_id import allocate_id
from ._shared import (
    Data,
    countdown_state,
    flag,
    number,
    section_defaults,
    text,
)

if typ.TYPE_CHECKING:
    from ..models import RenderContext

COUNTDOWN_UNITS = (
    ("days", "Days", "showDays"),
    ("hours", "Hours", "showHours"),
    ("minutes", "Minutes", "showMinutes"),
    ("seconds", "Seconds", "showSeconds"),
)
BANNER_TEXT = "🎉 Special Offer: Get 20% off your first order! Use code WELCOME20"
MARQUEE_REPEAT = 12


def countdown(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the launch countdown with its ticking script.

    When the document carries ``rendered_at`` the digits are pre-rendered
    and an already-passed target shows the expired message statically;
    otherwise the markup starts at ``00`` and the script takes over.
    """
    state = countdown_state(data.get("targetDate"), ctx.rendered_at)
    digits = state.parts.padded()
    unit_cells = [
        (unit, label, digits[unit])
        for unit, label, toggle in COUNTDOWN_UNITS
        if flag(data, toggle, default=True)
    ]
    return ctx.render(
        "variants/countdown.jinja",
        uid=allocate_id("countdown"),
        title=text(data, "title", "Coming Soon"),
        subtitle=text(data, "subtitle", "Something amazing is on its way"),
        unit_cells=unit_cells,
        state=state,
        expired_message=text(data, "expiredMessage", "The wait is over!"),
        background=text(data, "backgroundColor", "#27491F"),
        foreground=text(data, "textColor", "#ffffff"),
        show_notify=flag(data, "showNotifyForm", default=True),
    )


def banner(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render a static announcement strip or a looping marquee."""
    link = text(data, "link")
    marquee = flag(data, "enableMarquee", default=False)
    return ctx.render(
        "variants/banner.jinja",
        uid=allocate_id("banner"),
        message=text(data, "text", BANNER_TEXT),
        href=ctx.link(link) if link else "",
        link_text=text(data, "linkText", "Shop Now"),
        background=text(data, "backgroundColor", "#27491F"),
        foreground=text(data, "textColor", "#ffffff"),
        icon=text(data, "icon"),
        dismissible=flag(data, "dismissible", default=False) and not marquee,
        marquee=marquee,
        repeat=MARQUEE_REPEAT,
        speed=format_number(number(data, "marqueeSpeed", 20)),
    )


def newsletter(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the signup form; submitting swaps in the success message."""
    return ctx.render(
        "variants/newsletter.jinja",
        uid=allocate_id("newsletter"),
        title=text(data, "title", "Stay Updated"),
        subtitle=text(
            data,
            "subtitle",
            "Subscribe to our newsletter for the latest updates and exclusive offers",
        ),
        placeholder=text(data, "placeholder", "Enter your email address"),
        button_text=text(data, "buttonText", "Subscribe"),
        success_message=text(data, "successMessage", "Thank you for subscribing!"),
    )


def countdown_style(data: Data) -> SectionStyle:
    return SectionStyle(
        padding=Spacing(top=80, bottom=80, left=20, right=20),
        background_color=text(data, "backgroundColor", "#27491F"),
        color=text(data, "textColor", "#ffffff"),
    )


def banner_style(data: Data) -> SectionStyle:
    return SectionStyle(
        padding=Spacing(top=12, bottom=12, left=24, right=24),
        background_color=text(data, "backgroundColor", "#27491F"),
        color=text(data, "textColor", "#ffffff"),
    )


def newsletter_style(data: Data) -> SectionStyle:
    return section_defaults(text(data, "backgroundColor", "#f9fafb"))


GENERATORS = {
    "countdown": countdown,
    "banner": banner,
    "newsletter": newsletter,
}
STYLE_DEFAULTS = {
    "countdown": countdown_style,
    "banner": banner_style,
    "newsletter": newsletter_style,
}


__all__ = [
    "GENERATORS",
    "STYLE_DEFAULTS",
    "banner",
    "countdown",
    "newsletter",
]
