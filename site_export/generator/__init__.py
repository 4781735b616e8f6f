"""Section-tree to HTML compiler.

The pieces are layered bottom-up: :mod:`.style_resolver` and
:mod:`.link_resolver` are pure helpers, :mod:`.variants` holds one generator
per section type, and :mod:`.assembler` orders, dispatches, wraps and embeds
the rendered sections in the document shell.
"""

from __future__ import annotations

from .assembler import DocumentAssembler, compile_document, order_sections
from .link_resolver import resolve_link, site_base_path
from .models import RenderContext
from .style_resolver import ResolvedStyle, resolve_style
from .unique_id import allocate_id, normalize_ids
from .variants import SELF_WRAPPING, SUPPORTED_TYPES

__all__ = [
    "SELF_WRAPPING",
    "SUPPORTED_TYPES",
    "DocumentAssembler",
    "RenderContext",
    "ResolvedStyle",
    "allocate_id",
    "compile_document",
    "normalize_ids",
    "order_sections",
    "resolve_link",
    "resolve_style",
    "site_base_path",
]
