"""Assemble rendered sections into a standalone HTML document.

:class:`DocumentAssembler` is the compiler's top level. It orders the sections
by ``order`` (stably, so ties keep their input order), dispatches each one
through the variant lookup table, wraps every fragment except the
self-wrapping ``navbar`` and ``footer`` in a styled ``<section>`` tag, and
embeds the result in ``document.jinja`` together with the theme variables,
the shared grid and animation CSS, and the single FAQ accordion script.

A section whose type is unknown, or whose generator raises on malformed data,
contributes an empty fragment; one bad section never aborts the document.

>>> from site_export.generator import compile_document
>>> html = compile_document([{"type": "divider", "order": 0}], "Demo")
>>> html.count("<section")
1
"""

from __future__ import annotations

import functools
import logging
import typing as typ

from site_export._constants import ANIMATIONS, INTER_FONT_URL, MATERIAL_ICONS_URL
from site_export.config import (
    DocumentConfigError,
    DocumentContext,
    Section,
    SiteDocument,
    ThemeSettings,
    build_section,
)
from site_export.config.helpers import _build_theme_settings

from .models import RenderContext
from .renderer import build_environment
from .style_resolver import resolve_style
from .variants import get_variant

if typ.TYPE_CHECKING:
    import datetime as dt
    from pathlib import Path

    from jinja2 import Environment

logger = logging.getLogger(__name__)

DOCUMENT_TEMPLATE = "document.jinja"


@functools.cache
def _default_environment() -> Environment:
    return build_environment()


def order_sections(sections: typ.Iterable[Section]) -> list[Section]:
    """Return ``sections`` sorted by ``order``; equal orders keep input order."""
    return sorted(sections, key=lambda section: section.order)


def salvage_sections(
    payloads: typ.Iterable[Section | typ.Mapping[str, typ.Any]],
) -> list[Section]:
    """Build every well-formed section, skipping malformed entries.

    An entry that is not a mapping or has no ``type`` contributes nothing,
    like an unsupported type does; its neighbours are unaffected.
    """
    sections: list[Section] = []
    for index, payload in enumerate(payloads):
        try:
            sections.append(build_section(payload, index=index))
        except DocumentConfigError as error:
            logger.debug("Skipping malformed section #%d: %s", index, error)
    return sections


class DocumentAssembler:
    """Compile a :class:`SiteDocument` into one HTML page."""

    def __init__(
        self, document: SiteDocument, *, templates_dir: Path | None = None
    ) -> None:
        """Initialise the assembler and its Jinja environment.

        Parameters
        ----------
        document : SiteDocument
            Loaded site context plus the unordered section list.
        templates_dir : Path, optional
            Directory holding ``document.jinja`` and ``variants/``. Defaults
            to the packaged templates, whose environment is shared between
            assemblers.
        """
        self.document = document
        self.env = (
            build_environment(templates_dir)
            if templates_dir is not None
            else _default_environment()
        )
        self.template = self.env.get_template(DOCUMENT_TEMPLATE)
        self.context = RenderContext(document=document.context, env=self.env)

    def render_section(self, section: Section) -> str:
        """Render one section, including its wrapper, or ``""`` on failure."""
        variant = get_variant(section.type)
        if variant is None:
            logger.debug(
                "Skipping section %s with unsupported type %r",
                section.id,
                section.type,
            )
            return ""
        try:
            fragment = variant.generate(section.data, section.style, self.context)
            if not fragment or variant.wraps_itself:
                return fragment
            wrapper = resolve_style(section.style, variant.defaults(section.data))
        except Exception:  # noqa: BLE001
            logger.warning(
                "Section %s (%s) failed to render; emitting an empty fragment",
                section.id,
                section.type,
                exc_info=True,
            )
            return ""
        class_attr = f' class="{wrapper.css_class}"' if wrapper.css_class else ""
        return f'<section style="{wrapper.inline}"{class_attr}>{fragment}</section>'

    def render_body(self) -> str:
        """Render every section in order and join the fragments."""
        return "\n".join(
            self.render_section(section)
            for section in order_sections(self.document.sections)
        )

    def compile(self) -> str:
        """Return the complete HTML document as a string."""
        context = self.document.context
        html = self.template.render(
            site_name=context.site_name,
            inter_font_url=INTER_FONT_URL,
            material_icons_url=MATERIAL_ICONS_URL,
            theme=context.theme,
            animations=ANIMATIONS,
            body=self.render_body(),
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output: Path) -> Path:
        """Compile the document and write it to ``output``.

        Parent directories are created as needed and the file is written as
        UTF-8. Filesystem errors propagate to the caller.
        """
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.compile(), encoding="utf-8")
        logger.info("Wrote %d sections to %s", len(self.document.sections), output)
        return output


def compile_document(
    sections: typ.Iterable[Section | typ.Mapping[str, typ.Any]],
    site_name: str,
    settings: typ.Mapping[str, typ.Any] | ThemeSettings | None = None,
    site_id: str | None = None,
    *,
    rendered_at: dt.datetime | None = None,
) -> str:
    """Compile ``sections`` into a standalone HTML document.

    Parameters
    ----------
    sections : iterable of Section or mapping
        Sections in any order; raw editor mappings are normalised first and
        malformed entries are skipped.
    site_name : str
        Text for the document ``<title>``.
    settings : mapping or ThemeSettings, optional
        Editor ``settings`` payload (``{"theme": {...}}``) or ready-made
        theme colours.
    site_id : str, optional
        Published site identifier that activates site-scoped links.
    rendered_at : datetime, optional
        Reference instant used to pre-render countdown digits.

    Returns
    -------
    str
        The HTML document, ending with a newline.
    """
    theme = (
        settings
        if isinstance(settings, ThemeSettings)
        else _build_theme_settings(dict(settings) if settings else None)
    )
    document = SiteDocument(
        context=DocumentContext(
            site_name=site_name,
            theme=theme,
            site_id=site_id or None,
            rendered_at=rendered_at,
        ),
        sections=salvage_sections(sections),
    )
    return DocumentAssembler(document).compile()


__all__ = [
    "DOCUMENT_TEMPLATE",
    "DocumentAssembler",
    "compile_document",
    "order_sections",
    "salvage_sections",
]
