"""Utilities for generating a personal portfolio site.

This package exposes the CLI entry points used by ``uv run folio`` to render
the single-page portfolio and the blog gallery, and the state models that
describe the pages' client-side behaviour (scroll-spy, theme, lightbox).

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from folio_pages import main
>>> main()  # doctest: +SKIP
>>> from folio_pages import app
>>> app.name[0]
'folio'
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
