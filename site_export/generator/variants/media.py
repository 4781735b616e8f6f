"""Generators for embedded media and decorative sections.

``video`` turns share links into embed URLs, ``imageComparison`` emits a
clip-path slider driven by pointer and touch events, ``partners`` renders a
logo wall or an endless marquee, and ``divider`` draws one of six rules.
"""

from __future__ import annotations

import re
import typing as typ

from site_export.config import SectionStyle, Spacing

from ..style_resolver import format_number
from ..unique_id import allocate_id
from ._shared import (
    Data,
    choice,
    flag,
    number,
    records_or,
    section_defaults,
    text,
)

if typ.TYPE_CHECKING:
    from ..models import RenderContext

YOUTUBE_ID_PATTERN = re.compile(
    r"(?:youtu\.be/|youtube\.com(?:/embed/|/v/|/watch\?v=|/watch\?.+&v=))"
    r"([^&?/\s]{11})"
)
VIMEO_ID_PATTERN = re.compile(r"vimeo\.com/(\d+)")
VIDEO_TYPES = ("youtube", "vimeo", "custom")

PARTNER_PLACEHOLDERS: tuple[Data, ...] = tuple(
    {"name": f"Company {index}"} for index in range(1, 7)
)

DIVIDER_STYLES = ("line", "dotted", "dashed", "gradient", "wave", "zigzag")
WAVE_PATH = "M0,20 C200,40 400,0 600,20 C800,40 1000,0 1200,20"
ZIGZAG_PATH = "M0,20 " + " ".join(
    f"L{x},{5 if index % 2 == 0 else 20}"
    for index, x in enumerate(range(60, 1201, 60))
)
SLIDER_ORIENTATIONS = ("horizontal", "vertical")


def embed_url(video_url: str, video_type: str, *, controls: bool = True) -> str:
    """Return the iframe URL for a YouTube or Vimeo share link.

    Unrecognised links are treated as bare video ids; ``custom`` sources are
    returned unchanged.

    Examples
    --------
    >>> embed_url("https://youtu.be/dQw4w9WgXcQ", "youtube")
    'https://www.youtube.com/embed/dQw4w9WgXcQ?controls=1&rel=0'
    >>> embed_url("https://vimeo.com/76979871", "vimeo", controls=False)
    'https://player.vimeo.com/video/76979871?controls=0'
    """
    if not video_url:
        return ""
    flag_value = 1 if controls else 0
    match video_type:
        case "youtube":
            found = YOUTUBE_ID_PATTERN.search(video_url)
            video_id = found.group(1) if found else video_url
            return (
                f"https://www.youtube.com/embed/{video_id}"
                f"?controls={flag_value}&rel=0"
            )
        case "vimeo":
            found = VIMEO_ID_PATTERN.search(video_url)
            video_id = found.group(1) if found else video_url
            return f"https://player.vimeo.com/video/{video_id}?controls={flag_value}"
        case _:
            return video_url


def video(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render a 16:9 embed, a native ``<video>``, or the empty placeholder."""
    video_url = text(data, "videoUrl")
    video_type = choice(data, "videoType", VIDEO_TYPES, "youtube")
    controls = flag(data, "showControls", default=True)
    return ctx.render(
        "variants/video.jinja",
        title=text(data, "title"),
        subtitle=text(data, "subtitle"),
        video_url=video_url,
        video_type=video_type,
        embed=embed_url(video_url, video_type, controls=controls),
        controls=controls,
        poster=text(data, "thumbnailUrl"),
    )


def image_comparison(
    data: Data, style: SectionStyle | None, ctx: RenderContext
) -> str:
    """Render the before/after slider.

    The slider position is clamped to ``0..100`` both here and in the emitted
    script, which recomputes it from the container's bounding rect.
    """
    before = text(data, "beforeImage")
    after = text(data, "afterImage")
    position = min(100.0, max(0.0, number(data, "sliderPosition", 50)))
    return ctx.render(
        "variants/image_comparison.jinja",
        uid=allocate_id("imgCompare"),
        title=text(data, "title"),
        subtitle=text(data, "subtitle"),
        before=before,
        after=after,
        has_images=bool(before and after),
        before_label=text(data, "beforeLabel", "Before"),
        after_label=text(data, "afterLabel", "After"),
        position=format_number(position),
        remainder=format_number(100 - position),
        slider_color=text(data, "sliderColor", "#FFFFFF"),
        show_labels=flag(data, "showLabels", default=True),
        orientation=choice(data, "orientation", SLIDER_ORIENTATIONS, "horizontal"),
    )


def partners(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render partner logos as a grid or a looping marquee."""
    logos, _ = records_or(data, "partners", PARTNER_PLACEHOLDERS)
    for logo in logos:
        link = logo.get("link")
        logo["href"] = ctx.link(str(link)) if link else ""
    auto_scroll = flag(data, "autoScroll", default=False)
    return ctx.render(
        "variants/partners.jinja",
        uid=allocate_id("partners") if auto_scroll else "",
        title=text(data, "title", "Trusted By"),
        subtitle=text(data, "subtitle"),
        logos=logos,
        grayscale=flag(data, "grayscale", default=True),
        auto_scroll=auto_scroll,
    )


def divider(data: Data, style: SectionStyle | None, ctx: RenderContext) -> str:
    """Render a horizontal rule in one of the supported styles."""
    thickness = number(data, "height", 1)
    return ctx.render(
        "variants/divider.jinja",
        kind=choice(data, "style", DIVIDER_STYLES, "line"),
        color=text(data, "color", "#e5e7eb"),
        thickness=format_number(thickness),
        width=text(data, "width", "100%"),
        svg_height=format_number(max(thickness * 20, 20)),
        wave_path=WAVE_PATH,
        zigzag_path=ZIGZAG_PATH,
    )


def divider_style(data: Data) -> SectionStyle:
    """Return divider padding, which follows the ``spacing`` field."""
    spacing = number(data, "spacing", 40)
    return SectionStyle(
        padding=Spacing(top=spacing, bottom=spacing, left=24, right=24)
    )


GENERATORS = {
    "video": video,
    "imageComparison": image_comparison,
    "partners": partners,
    "divider": divider,
}
STYLE_DEFAULTS = {
    "video": section_defaults("#111827"),
    "imageComparison": section_defaults("#ffffff"),
    "partners": section_defaults("#ffffff", vertical=48, horizontal=24),
    "divider": divider_style,
}


__all__ = [
    "GENERATORS",
    "STYLE_DEFAULTS",
    "divider",
    "embed_url",
    "image_comparison",
    "partners",
    "video",
]
