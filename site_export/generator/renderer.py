"""Jinja environment construction for the document shell and variant templates."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from site_export._constants import (
    GRID_COLLAPSE_BREAKPOINT,
    MOBILE_BREAKPOINT,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    TABLET_BREAKPOINT,
    URGENT_THRESHOLD_MS,
)
from site_export.config.helpers import _coerce_number

from .style_resolver import format_number, px

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def css_declarations(values: typ.Mapping[str, object | None]) -> str:
    """Serialise ``values`` as ``name: value; `` pairs, skipping empty ones.

    Examples
    --------
    >>> css_declarations({"color": "#fff", "margin": None})
    'color: #fff; '
    """
    return "".join(
        f"{name}: {value}; "
        for name, value in values.items()
        if value is not None and value is not False and value != ""
    )


def css_number(value: object) -> str:
    """Format numeric ``value`` compactly; pass anything else through as text."""
    number = _coerce_number(value)
    return str(value) if number is None else format_number(number)


def js_literal(value: object) -> str:
    """Return ``value`` encoded as a JavaScript literal."""
    return json.dumps(value)


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Create the Jinja environment shared by a single compilation.

    Parameters
    ----------
    templates_dir : Path, optional
        Directory containing ``document.jinja`` and ``variants/``; defaults to
        the packaged templates.

    Returns
    -------
    Environment
        Environment with autoescaping disabled so editor rich text reaches the
        page unchanged, plus the ``px``, ``num``, ``css`` and ``js`` filters and the
        ``units`` and ``breakpoints`` globals read by generated scripts.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=False,  # noqa: S701 - section content is inserted verbatim
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
    )
    env.filters["px"] = px
    env.filters["num"] = css_number
    env.filters["css"] = css_declarations
    env.filters["js"] = js_literal
    env.globals["units"] = {
        "second": MS_PER_SECOND,
        "minute": MS_PER_MINUTE,
        "hour": MS_PER_HOUR,
        "day": MS_PER_DAY,
        "urgent": URGENT_THRESHOLD_MS,
    }
    env.globals["breakpoints"] = {
        "mobile": MOBILE_BREAKPOINT,
        "tablet": TABLET_BREAKPOINT,
        "collapse": GRID_COLLAPSE_BREAKPOINT,
    }
    return env


__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "build_environment",
    "css_declarations",
    "css_number",
    "js_literal",
]
