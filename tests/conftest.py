"""Shared fixtures for the k6 docs test suite.

The ``docs_content`` fixture lays out a miniature copy of the real content
tree: numbered folders, a document whose title contains a slash, a draft, a
hidden page, a redirect-only page, the doubled ``examples/examples`` folder,
and one file with broken frontmatter. Tests build configurations around it
with ``site_config`` or ``write_site_yaml``.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

from k6_docs.config import SiteConfig

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DOCS: dict[str, str] = {
    "01 guides/01 Getting started/01 Welcome.md": """
        ---
        title: Welcome
        excerpt: Start here.
        ---
        Welcome to the **k6** docs.
        """,
    "01 guides/01 Getting started/02 Running k6.md": """
        ---
        title: Running k6
        head_title: How to run k6
        ---
        Run a script:

        ```bash
        k6 run script.js
        ```
        """,
    "01 guides/01 Getting started/99 Broken.md": """
        This file forgot its frontmatter.
        """,
    "01 guides/02 Using k6/01 HTTP Requests.md": """
        ---
        title: HTTP Requests
        ---
        Making requests.
        """,
    "01 guides/02 Using k6/02 Protocols/01 SSL-TLS.md": """
        ---
        title: SSL/TLS
        ---
        TLS settings.
        """,
    "01 guides/02 Using k6/03 Draft feature.md": """
        ---
        title: Draft feature
        draft: 'true'
        ---
        Not ready yet.
        """,
    "01 guides/02 Using k6/04 Hidden.md": """
        ---
        title: Hidden page
        hideFromSidebar: true
        ---
        Reachable only by link.
        """,
    "01 guides/02 Using k6/05 Old page.md": """
        ---
        title: Old page
        redirect: /using-k6/http-requests
        ---
        """,
    "02 javascript api/01 k6-http.md": """
        ---
        title: k6/http
        ---
        The k6/http module.
        """,
    "03 examples/01 examples/01 HTTP2.md": """
        ---
        title: HTTP2
        ---
        An HTTP/2 example.
        """,
}


def write_docs(content_dir: Path, docs: cabc.Mapping[str, str]) -> Path:
    """Write ``docs`` (relative path -> source) under ``content_dir/docs``."""
    for relative, source in docs.items():
        path = content_dir / "docs" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(source).lstrip("\n"), encoding="utf-8")
    return content_dir


@pytest.fixture(autouse=True)
def _reset_k6_docs_logger() -> cabc.Iterator[None]:
    """Undo CLI logging configuration so caplog sees every record."""
    yield
    logger = logging.getLogger("k6_docs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def docs_content(tmp_path: Path) -> Path:
    """Return a content directory populated with the sample docs tree."""
    return write_docs(tmp_path / "content", DOCS)


@pytest.fixture
def site_config(docs_content: Path, tmp_path: Path) -> SiteConfig:
    """Return a default site configuration rooted in temporary directories."""
    return SiteConfig(content_dir=docs_content, output_dir=tmp_path / "public")


@pytest.fixture
def write_site_yaml(docs_content: Path, tmp_path: Path) -> cabc.Callable[..., Path]:
    """Return a helper that writes ``site.yaml`` pointing at the sample docs."""

    def _write(extra: str = "") -> Path:
        config_path = tmp_path / "site.yaml"
        config_path.write_text(
            f"content_dir: {docs_content}\n"
            f"output_dir: {tmp_path / 'public'}\n" + dedent(extra),
            encoding="utf-8",
        )
        return config_path

    return _write
