"""Load and validate exported site documents.

This subpackage parses the editor's export payload (``siteName``, ``siteId``,
``settings.theme`` and ``sections``), normalises each section's shared style
descriptor, and produces typed dataclasses (:class:`SiteDocument`,
:class:`Section`, :class:`SectionStyle`, etc.) that the compiler consumes. The
primary entry point is :func:`load_site_document`, which accepts YAML or JSON.

Examples
--------
>>> from pathlib import Path
>>> from site_export.config import load_site_document
>>> document = load_site_document(Path("site.yaml"))  # doctest: +SKIP
>>> document.context.site_name  # doctest: +SKIP
'Demo Store'
"""

from .loader import (
    build_section,
    build_sections,
    build_site_document,
    load_site_document,
)
from .models import (
    Alignment,
    DocumentConfigError,
    DocumentContext,
    Section,
    SectionStyle,
    SiteDocument,
    Spacing,
    ThemeSettings,
)

__all__ = [
    "Alignment",
    "DocumentConfigError",
    "DocumentContext",
    "Section",
    "SectionStyle",
    "SiteDocument",
    "Spacing",
    "ThemeSettings",
    "build_section",
    "build_sections",
    "build_site_document",
    "load_site_document",
]
