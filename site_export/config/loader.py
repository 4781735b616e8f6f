"""Load exported site documents (YAML or JSON) into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
from ruamel.yaml import YAML

from .helpers import (
    _build_section_style,
    _build_theme_settings,
    _coerce_number,
    _optional_str,
    _parse_timestamp,
    _pick,
)
from .models import DocumentConfigError, DocumentContext, Section, SiteDocument

JSON_SUFFIXES = frozenset({".json"})
DEFAULT_SITE_NAME = "My Site"


def load_site_document(path: Path) -> SiteDocument:
    """Load the document describing a site's sections and theme.

    Parameters
    ----------
    path : Path
        Filesystem path to a ``.yaml``/``.yml`` or ``.json`` export document.

    Returns
    -------
    SiteDocument
        Parsed context (site name, theme, site id) plus the section list in
        input order.

    Raises
    ------
    FileNotFoundError
        If the document does not exist at ``path``.
    DocumentConfigError
        If the top-level structure or a section entry is malformed.
    msgspec.DecodeError
        If a JSON document cannot be decoded.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from site_export.config import load_site_document
    >>> document = load_site_document(Path("site.yaml"))  # doctest: +SKIP
    >>> [section.type for section in document.sections][:1]  # doctest: +SKIP
    ['navbar']
    """
    if not path.exists():
        msg = f"Site document '{path}' not found."
        raise FileNotFoundError(msg)

    if path.suffix.lower() in JSON_SUFFIXES:
        loaded = msgspec_json.decode(path.read_bytes())
    else:
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    return build_site_document(loaded or {})


def build_site_document(raw: object) -> SiteDocument:
    """Build a SiteDocument from an already decoded mapping."""
    if not isinstance(raw, dict):
        msg = "Top-level document structure must be a mapping."
        raise DocumentConfigError(msg)

    context = DocumentContext(
        site_name=_optional_str(_pick(raw, "siteName", "site_name"))
        or DEFAULT_SITE_NAME,
        theme=_build_theme_settings(raw.get("settings")),
        site_id=_optional_str(_pick(raw, "siteId", "site_id")),
        rendered_at=_parse_timestamp(_pick(raw, "renderedAt", "rendered_at")),
    )
    sections_raw = raw.get("sections") or []
    if not isinstance(sections_raw, list):
        msg = "'sections' must be a list of section mappings."
        raise DocumentConfigError(msg)
    sections = [
        build_section(payload, index=index)
        for index, payload in enumerate(sections_raw)
    ]
    return SiteDocument(context=context, sections=sections)


def build_section(payload: object, *, index: int = 0) -> Section:
    """Build one Section from its mapping, defaulting everything but ``type``."""
    match payload:
        case Section():
            return payload
        case dict():
            pass
        case _:
            msg = f"Section #{index} must be a mapping."
            raise DocumentConfigError(msg)

    section_type = _optional_str(payload.get("type"))
    if not section_type:
        msg = f"Section #{index} is missing 'type'."
        raise DocumentConfigError(msg)
    data = payload.get("data")
    return Section(
        id=_optional_str(payload.get("id")) or f"section-{index}",
        type=section_type,
        order=_coerce_number(payload.get("order")) or 0.0,
        data=dict(data) if isinstance(data, dict) else {},
        style=_build_section_style(payload.get("style")),
    )


def build_sections(
    payloads: typ.Iterable[Section | typ.Mapping[str, typ.Any]],
) -> list[Section]:
    """Normalise a mixed iterable of Sections and raw mappings."""
    return [
        build_section(payload, index=index)
        for index, payload in enumerate(payloads)
    ]


__all__ = [
    "build_section",
    "build_sections",
    "build_site_document",
    "load_site_document",
]
