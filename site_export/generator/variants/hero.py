"""Generator for the hero banner, either a single slide or a carousel.

A carousel stacks one absolutely sized slide per entry and shows only the
active one. Slides inherit the section's ``textStyle`` key by key when they
omit their own, and inherit its ``buttonStyle`` as a whole.
"""

from __future__ import annotations

import typing as typ

from site_export.config import SectionStyle

from ..renderer import css_declarations, css_number
from ..unique_id import allocate_id
from ._shared import (
    Data,
    choice,
    flag,
    integer,
    mapping,
    merge_defaults,
    records,
    text,
)

if typ.TYPE_CHECKING:
    from ..models import RenderContext

HERO_LAYOUTS = ("default", "minimal")
BUTTON_VARIANTS = ("filled", "outlined", "ghost")
DEFAULT_BACKGROUND = "#27491F"
DEFAULT_FOREGROUND = "#FFFFFF"
OVERLAY_OPACITY = 0.4
DEFAULT_AUTOPLAY_INTERVAL = 5000


def button_css(
    button: Data, *, minimal: bool, foreground: str, background: str
) -> str:
    """Return the inline style for a hero call-to-action button.

    The minimal layout always renders an uppercase outlined button; otherwise
    ``button["variant"]`` selects ``filled``, ``outlined`` or ``ghost``.

    Examples
    --------
    >>> "background: transparent" in button_css(
    ...     {}, minimal=True, foreground="#fff", background="#000"
    ... )
    True
    """
    variant = (
        "outlined" if minimal else choice(button, "variant", BUTTON_VARIANTS, "filled")
    )
    font_size = button.get("fontSize") or (14 if minimal else 16)
    declarations: dict[str, object | None] = {
        "display": "inline-block",
        "padding": text(button, "padding", "16px 40px" if minimal else "12px 32px"),
        "border-radius": f"{css_number(button.get('borderRadius') or 0)}px",
        "text-decoration": "none",
        "font-weight": text(button, "fontWeight", "500"),
        "font-size": f"{css_number(font_size)}px",
        "letter-spacing": "0.1em" if minimal else None,
        "text-transform": "uppercase" if minimal else None,
        "transition": "all 0.3s ease",
    }
    color = text(button, "textColor", foreground)
    match variant:
        case "outlined":
            border = f"1px solid {color}"
            declarations.update(
                {"background": "transparent", "color": color, "border": border}
            )
        case "ghost":
            border = "1px solid transparent"
            declarations.update(
                {"background": "transparent", "color": color, "border": border}
            )
        case _:
            declarations.update(
                {
                    "background": text(button, "backgroundColor", "white"),
                    "color": text(button, "textColor", background),
                    "border": "none",
                    "box-shadow": "0 4px 6px rgba(0,0,0,0.1)",
                }
            )
    return css_declarations(declarations)


def background_css(source: Data, fallback: Data) -> str:
    """Return the slide background: an image when set, else a flat colour."""
    image = text(source, "backgroundImage")
    if not image:
        return css_declarations(
            {"background": text(source, "backgroundColor", DEFAULT_BACKGROUND)}
        )
    return css_declarations(
        {
            "background-image": f"url({image})",
            "background-size": text(
                source, "backgroundSize", text(fallback, "backgroundSize", "cover")
            ),
            "background-position": text(
                source,
                "backgroundPosition",
                text(fallback, "backgroundPosition", "center"),
            ),
            "background-repeat": "no-repeat",
        }
    )


def build_slide(
    source: Data,
    text_style: Data,
    ctx: RenderContext,
    *,
    minimal: bool,
    fallback: Data | None = None,
) -> dict[str, typ.Any]:
    """Resolve one slide's text, button and background into template values."""
    foreground = text(source, "textColor", DEFAULT_FOREGROUND)
    background = text(source, "backgroundColor", DEFAULT_BACKGROUND)
    button_text = text(source, "buttonText")
    overlay = (
        not minimal
        and bool(text(source, "backgroundImage"))
        and bool(text(source, "backgroundColor"))
    )
    return {
        "title": text(source, "title", "Welcome"),
        "subtitle": text(source, "subtitle"),
        "foreground": foreground,
        "background_css": background_css(source, fallback or {}),
        "overlay": background if overlay else "",
        "title_size": css_number(text_style.get("titleFontSize") or 48),
        "title_weight": text(text_style, "titleFontWeight", "bold"),
        "title_align": text(text_style, "titleAlignment", "center"),
        "subtitle_size": css_number(text_style.get("subtitleFontSize") or 20),
        "subtitle_weight": text(text_style, "subtitleFontWeight", "normal"),
        "subtitle_align": text(text_style, "subtitleAlignment", "center"),
        "button_text": button_text,
        "button_href": ctx.link(text(source, "buttonLink")) if button_text else "",
        "button_css": button_css(
            mapping(text_style, "buttonStyle"),
            minimal=minimal,
            foreground=foreground,
            background=background,
        ),
    }


def hero(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render the hero banner.

    Carousel mode (``isCarousel`` with a non-empty ``slides`` list) emits
    navigation controls only when there is more than one slide, and an
    autoplay timer only when ``autoplay`` is set.
    """
    minimal = choice(data, "layout", HERO_LAYOUTS, "default") == "minimal"
    text_style = mapping(data, "textStyle")
    slides = records(data, "slides") if flag(data, "isCarousel", default=False) else []
    if slides:
        views = [
            build_slide(
                slide,
                merge_defaults(text_style, mapping(slide, "textStyle")),
                ctx,
                minimal=minimal,
                fallback=data,
            )
            for slide in slides
        ]
    else:
        views = [build_slide(data, text_style, ctx, minimal=minimal)]
    return ctx.render(
        "variants/hero.jinja",
        uid=allocate_id("heroCarousel" if slides else "hero"),
        carousel=bool(slides),
        slides=views,
        minimal=minimal,
        section_background=background_css(data, {}),
        foreground=text(data, "textColor", DEFAULT_FOREGROUND),
        overlay_opacity=OVERLAY_OPACITY,
        autoplay=flag(data, "autoplay", default=False) and len(views) > 1,
        autoplay_interval=max(
            1, integer(data, "autoplayInterval", DEFAULT_AUTOPLAY_INTERVAL)
        ),
    )


GENERATORS = {"hero": hero}
STYLE_DEFAULTS = {"hero": SectionStyle()}


__all__ = [
    "GENERATORS",
    "STYLE_DEFAULTS",
    "background_css",
    "build_slide",
    "button_css",
    "hero",
]
