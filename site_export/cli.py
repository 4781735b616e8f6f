"""Cyclopts CLI entrypoint for exporting a site document to static HTML.

The ``site-export`` console script loads a YAML or JSON export of the site
editor's section list, compiles it into one standalone HTML page, and writes
the result to disk. Every option can also be supplied through an ``INPUT_*``
environment variable, which is how CI jobs drive the export.

Examples
--------
Export the default document:

>>> from site_export.cli import main
>>> main()  # doctest: +SKIP

Export a JSON document for a published site into a custom location:

>>> from site_export.cli import app
>>> app(
...     ["export", "--document", "site.json", "--output", "dist/index.html",
...      "--site-id", "abc"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_document
from .generator import DocumentAssembler
from .generator.variants import SELF_WRAPPING, SUPPORTED_TYPES

DEFAULT_DOCUMENT = Path("site.yaml")
DEFAULT_OUTPUT = Path("public/index.html")

app = App(
    name="site-export",
    config=cyclopts.config.Env("INPUT_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Compile a site document into a standalone HTML page.")
def export(
    *,
    document: typ.Annotated[
        Path, Parameter(help="Path to the site document", env_var="INPUT_DOCUMENT")
    ] = DEFAULT_DOCUMENT,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the HTML", env_var="INPUT_OUTPUT")
    ] = DEFAULT_OUTPUT,
    site_id: typ.Annotated[
        str | None,
        Parameter(help="Override the published site id", env_var="INPUT_SITE_ID"),
    ] = None,
    site_name: typ.Annotated[
        str | None,
        Parameter(help="Override the page title", env_var="INPUT_SITE_NAME"),
    ] = None,
) -> None:
    """Export ``document`` to ``output``.

    Parameters
    ----------
    document : Path, optional
        YAML (``.yaml``/``.yml``) or JSON export from the site editor.
    output : Path, optional
        Destination HTML file; parent directories are created.
    site_id : str or None, optional
        Replaces the document's ``siteId``, switching links to
        ``/site/{site_id}/...``.
    site_name : str or None, optional
        Replaces the document's ``siteName``.

    Raises
    ------
    FileNotFoundError
        If ``document`` does not exist.
    DocumentConfigError
        If the document is structurally invalid.
    """
    site_document = load_site_document(document)
    overrides = {
        key: value
        for key, value in (("site_id", site_id), ("site_name", site_name))
        if value
    }
    if overrides:
        site_document = dc.replace(
            site_document, context=dc.replace(site_document.context, **overrides)
        )
    written = DocumentAssembler(site_document).run(output)
    print(f"wrote {_format_path(written)}")


@app.command(help="List the supported section types.")
def variants() -> None:
    """Print each supported section type, marking self-wrapping ones."""
    for name in SUPPORTED_TYPES:
        suffix = " (self-wrapping)" if name in SELF_WRAPPING else ""
        print(f"{name}{suffix}")


def main() -> None:
    """Invoke the Cyclopts application that powers ``site-export``.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
