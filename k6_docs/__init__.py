"""Build the k6 documentation website from a folder of markdown documents.

This package loads markdown/MDX documents, builds the hierarchical sidebar,
computes routes and breadcrumbs, and renders static HTML pages plus the legacy
redirect table. The ``k6-docs`` console script wraps the pipeline.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from k6_docs import main
>>> main()  # doctest: +SKIP
>>> from k6_docs import app  # doctest: +SKIP
>>> app.name  # doctest: +SKIP
('k6-docs',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
