"""Defaulting helpers and layout arithmetic shared by the section generators.

Every generator reads loosely typed editor data. The helpers here apply the
"missing means default" rule consistently: ``None`` and absent keys fall back,
while explicit falsy values such as ``0`` or ``False`` are respected where the
editor allows them.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import json
import typing as typ

from site_export._constants import (
    DEFAULT_COUNTDOWN_DAYS,
    MOBILE_BREAKPOINT,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    TABLET_BREAKPOINT,
)
from site_export.config import SectionStyle, Spacing
from site_export.config.helpers import _coerce_number, _parse_timestamp

Data = typ.Mapping[str, typ.Any]

CARD_SHADOWS: dict[str, str] = {
    "none": "none",
    "sm": "0 1px 2px rgba(0,0,0,0.05)",
    "md": "0 4px 6px -1px rgba(0,0,0,0.1), 0 2px 4px -1px rgba(0,0,0,0.06)",
    "lg": "0 10px 15px -3px rgba(0,0,0,0.1), 0 4px 6px -2px rgba(0,0,0,0.05)",
    "xl": "0 20px 25px -5px rgba(0,0,0,0.1), 0 10px 10px -5px rgba(0,0,0,0.04)",
}
ASPECT_RATIOS: dict[str, str] = {
    "square": "1/1",
    "portrait": "3/4",
    "landscape": "4/3",
    "wide": "16/9",
}


def text(data: Data, key: str, default: str = "") -> str:
    """Return ``data[key]`` as a string, or ``default`` when missing/empty."""
    value = data.get(key)
    if value is None or value == "":
        return default
    return str(value)


def number(data: Data, key: str, default: float) -> float:
    """Return a numeric field, falling back on missing or malformed input."""
    value = _coerce_number(data.get(key))
    return default if value is None else value


def integer(data: Data, key: str, default: int) -> int:
    """Return an integral field, falling back on missing or malformed input."""
    return int(number(data, key, default))


def flag(data: Data, key: str, *, default: bool) -> bool:
    """Return a boolean field; only an explicit value overrides ``default``."""
    value = data.get(key)
    if value is None:
        return default
    return bool(value)


def choice(data: Data, key: str, options: typ.Collection[str], default: str) -> str:
    """Return ``data[key]`` when it is one of ``options``, else ``default``."""
    value = data.get(key)
    return value if isinstance(value, str) and value in options else default


def mapping(data: Data, key: str) -> dict[str, typ.Any]:
    """Return a nested mapping field, or an empty dict."""
    value = data.get(key)
    return dict(value) if isinstance(value, dict) else {}


def records(data: Data, key: str) -> list[dict[str, typ.Any]]:
    """Return a list field keeping only mapping entries."""
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [dict(item) for item in value if isinstance(item, dict)]


def records_or(
    data: Data, key: str, placeholders: typ.Sequence[Data]
) -> tuple[list[dict[str, typ.Any]], bool]:
    """Return the list under ``key`` or a copy of ``placeholders`` when empty.

    The second element reports whether placeholders were substituted.
    """
    items = records(data, key)
    if items:
        return items, False
    return [dict(item) for item in placeholders], True


def merge_defaults(defaults: Data, override: Data | None) -> dict[str, typ.Any]:
    """Overlay the non-``None`` entries of ``override`` on ``defaults``."""
    merged = dict(defaults)
    if override:
        merged.update(
            {
                key: value
                for key, value in override.items()
                if value is not None and value != ""
            }
        )
    return merged


def price_label(item: Data) -> str:
    """Return the display price, preferring ``sellingPrice`` over ``price``."""
    value = item.get("sellingPrice") or item.get("price")
    if value is None:
        return "$"
    numeric = _coerce_number(value)
    if numeric is not None and numeric.is_integer():
        return f"${int(numeric)}"
    return f"${value}"


def initial(value: object, default: str) -> str:
    """Return the first character of ``value`` or ``default`` when empty."""
    label = str(value or "")
    return label[:1] or default


@dc.dataclass(slots=True, frozen=True)
class CountdownParts:
    """Whole days, hours, minutes and seconds remaining until a target."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    expired: bool = True

    def padded(self) -> dict[str, str]:
        """Return each unit zero-padded to two digits."""
        return {
            "days": f"{self.days:02d}",
            "hours": f"{self.hours:02d}",
            "minutes": f"{self.minutes:02d}",
            "seconds": f"{self.seconds:02d}",
        }


def split_remaining(target: dt.datetime, now: dt.datetime) -> CountdownParts:
    """Split the interval ``target - now`` the way countdown scripts do.

    Examples
    --------
    >>> start = dt.datetime(2025, 1, 1, tzinfo=dt.UTC)
    >>> split_remaining(start + dt.timedelta(seconds=90_061), start)
    CountdownParts(days=1, hours=1, minutes=1, seconds=1, expired=False)
    """
    delta = target - now
    diff = (
        delta.days * MS_PER_DAY
        + delta.seconds * MS_PER_SECOND
        + delta.microseconds // 1000
    )
    if diff <= 0:
        return CountdownParts()
    return CountdownParts(
        days=diff // MS_PER_DAY,
        hours=diff % MS_PER_DAY // MS_PER_HOUR,
        minutes=diff % MS_PER_HOUR // MS_PER_MINUTE,
        seconds=diff % MS_PER_MINUTE // MS_PER_SECOND,
        expired=False,
    )


UNIX_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.UTC)


def viewer_local(value: object) -> bool:
    """Return True for ISO date-times that carry no UTC offset.

    Browsers read such strings in the viewer's time zone, so their instant is
    unknown until the page loads. Date-only strings are UTC in both worlds.

    Examples
    --------
    >>> viewer_local("2026-01-01T00:00"), viewer_local("2026-01-01")
    (True, False)
    """
    if not isinstance(value, str):
        return False
    text = value.strip()
    if len(text) <= len("YYYY-MM-DD") or text.endswith("Z"):
        return False
    try:
        parsed = dt.datetime.fromisoformat(text)
    except ValueError:
        return False
    return parsed.tzinfo is None


@dc.dataclass(slots=True, frozen=True)
class CountdownState:
    """How a countdown renders before and after its script starts.

    Attributes
    ----------
    target_expr : str
        JavaScript expression evaluating to the target in epoch milliseconds.
    parts : CountdownParts
        Digits shown in the static markup.
    known_expired : bool
        True when the target had already passed at the reference instant.
    """

    target_expr: str
    parts: CountdownParts
    known_expired: bool = False


def epoch_ms(moment: dt.datetime) -> int:
    """Return ``moment`` as whole milliseconds since the Unix epoch."""
    return (moment - UNIX_EPOCH) // dt.timedelta(milliseconds=1)


def countdown_state(
    value: object, rendered_at: dt.datetime | None
) -> CountdownState:
    """Resolve a countdown target against the optional reference instant.

    A missing target means "30 days from now": measured from ``rendered_at``
    when one is supplied, otherwise computed by the script at page load.
    Unparseable targets are handed to ``Date`` verbatim; the resulting
    ``NaN`` renders as expired. Date-times without an offset are also handed
    over verbatim and left for the script, which reads them in local time.
    """
    reference = _parse_timestamp(rendered_at)
    if viewer_local(value):
        expr = f"new Date({json.dumps(str(value).strip())}).getTime()"
        return CountdownState(expr, CountdownParts(expired=False))
    missing = value is None or value == ""
    if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
        value = dt.datetime.combine(value, dt.time(), tzinfo=dt.UTC)
    target = _parse_timestamp(value)
    if target is None and missing and reference is not None:
        target = reference + dt.timedelta(days=DEFAULT_COUNTDOWN_DAYS)

    if target is not None:
        expr = str(epoch_ms(target))
    elif missing:
        expr = f"new Date().getTime() + {DEFAULT_COUNTDOWN_DAYS * MS_PER_DAY}"
    else:
        expr = f"new Date({json.dumps(str(value))}).getTime()"

    if reference is None:
        return CountdownState(expr, CountdownParts(expired=False))
    if target is None:
        return CountdownState(expr, CountdownParts(), known_expired=True)
    parts = split_remaining(target, reference)
    return CountdownState(expr, parts, known_expired=parts.expired)


def items_per_view(columns: int, viewport_width: float | None = None) -> int:
    """Return how many carousel cards fit for ``viewport_width`` pixels."""
    if viewport_width is None:
        return columns
    if viewport_width < MOBILE_BREAKPOINT:
        return 1
    if viewport_width < TABLET_BREAKPOINT:
        return 2
    return columns


def carousel_max_index(count: int, per_view: int) -> int:
    """Return the highest valid carousel start index.

    Examples
    --------
    >>> carousel_max_index(10, 4)
    6
    >>> carousel_max_index(2, 4)
    0
    """
    return max(0, count - max(1, per_view))


def section_defaults(
    background: str,
    *,
    vertical: float = 60,
    horizontal: float = 20,
    color: str | None = None,
) -> SectionStyle:
    """Return the wrapper style a variant falls back on when unstyled."""
    return SectionStyle(
        padding=Spacing(
            top=vertical, bottom=vertical, left=horizontal, right=horizontal
        ),
        background_color=background,
        color=color,
    )


__all__ = [
    "ASPECT_RATIOS",
    "CARD_SHADOWS",
    "CountdownParts",
    "CountdownState",
    "Data",
    "carousel_max_index",
    "choice",
    "countdown_state",
    "epoch_ms",
    "flag",
    "initial",
    "integer",
    "items_per_view",
    "mapping",
    "merge_defaults",
    "number",
    "price_label",
    "records",
    "records_or",
    "section_defaults",
    "split_remaining",
    "text",
    "viewer_local",
]
