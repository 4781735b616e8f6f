"""Compile website-builder section trees into standalone HTML documents.

This package turns the ordered section list produced by the visual site
editor into one self-contained HTML page with inlined CSS and vanilla
scripts. It exposes the Cyclopts CLI used by ``site-export`` together with the
pure compiler entry point.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``compile_document``: Pure section-list to HTML compiler.

Examples
--------
>>> from site_export import compile_document
>>> html = compile_document([], "Demo Store")
>>> html.startswith("<!DOCTYPE html>")
True
"""

from __future__ import annotations

from .cli import app, main
from .generator import compile_document

__all__ = ["app", "compile_document", "main"]
