"""Shared dataclasses used by the document compilation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .link_resolver import resolve_link, site_base_path

if typ.TYPE_CHECKING:
    import datetime as dt

    from jinja2 import Environment

    from site_export.config import DocumentContext, SectionStyle


@dc.dataclass(slots=True)
class RenderContext:
    """Per-document state handed to every variant generator.

    Attributes
    ----------
    document : DocumentContext
        Site name, theme, optional site id and optional reference instant.
    env : Environment
        Jinja environment holding the variant templates.
    """

    document: DocumentContext
    env: Environment

    @property
    def site_id(self) -> str | None:
        """Return the published site identifier, if any."""
        return self.document.site_id

    @property
    def base_url(self) -> str:
        """Return the site base path (empty when no site id is set)."""
        return site_base_path(self.document.site_id)

    @property
    def rendered_at(self) -> dt.datetime | None:
        """Return the caller-supplied reference instant, if any."""
        return self.document.rendered_at

    def link(self, path: str | None, collection_id: str | None = None) -> str:
        """Resolve ``path`` against this document's site id."""
        return resolve_link(path, site_id=self.site_id, collection_id=collection_id)

    def render(self, template_name: str, **values: object) -> str:
        """Render ``template_name`` with ``values`` plus the shared globals."""
        template = self.env.get_template(template_name)
        return template.render(
            base_url=self.base_url,
            site_id=self.site_id,
            theme=self.document.theme,
            **values,
        ).strip()


class VariantGenerator(typ.Protocol):
    """Callable signature shared by every section generator."""

    def __call__(
        self,
        data: typ.Mapping[str, typ.Any],
        style: SectionStyle | None,
        ctx: RenderContext,
    ) -> str: ...


__all__ = ["RenderContext", "VariantGenerator"]
