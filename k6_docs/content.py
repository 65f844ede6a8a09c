r"""Load markdown/MDX documents and their frontmatter into typed records.

This module is the content-sourcing boundary of the build: it walks the docs
folder in a deterministic order, splits each file into YAML frontmatter and
body, and returns :class:`DocumentRecord` instances with every optional field
already defaulted. Files with broken markup are logged and skipped so one bad
page never stops the build.

Example
-------
>>> from k6_docs.content import parse_front_matter
>>> meta, body = parse_front_matter("---\ntitle: Welcome\n---\nHello")
>>> meta["title"], body
('Welcome', 'Hello')
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from . import _constants as const
from .logging import get_logger
from .paths import split_segments

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = get_logger("content")

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)
TRUTHY_STRINGS = frozenset({"true", "yes", "1"})


class ContentError(ValueError):
    """Raised when a source document lacks the structured content it needs."""


@dc.dataclass(frozen=True, slots=True)
class DocumentRecord:
    """One markdown source file with normalized frontmatter.

    Attributes
    ----------
    name : str
        File stem, order prefix included (``01 Welcome``).
    relative_directory : tuple[str, ...]
        Folder segments relative to the content root (``("docs", "01 guides")``).
    title : str
        Frontmatter title; also the source of the route's last segment.
    head_title : str
        Optional ``<title>`` override; empty when absent.
    excerpt : str
        Short description; empty when absent.
    redirect : str or None
        Target the page redirects to; ``None`` when the field is empty.
    hide_from_sidebar : bool
        Whether the document is left out of the sidebar tree.
    draft : bool
        Whether the document is unpublished in production builds.
    body : str
        Markdown body without the frontmatter block.
    source_path : Path
        File the record was loaded from.
    """

    name: str
    relative_directory: tuple[str, ...]
    title: str
    head_title: str = ""
    excerpt: str = ""
    redirect: str | None = None
    hide_from_sidebar: bool = False
    draft: bool = False
    body: str = ""
    source_path: Path | None = None

    @property
    def directory(self) -> str:
        """Return the relative directory joined with ``/``."""
        return "/".join(self.relative_directory)

    def frontmatter(self) -> dict[str, typ.Any]:
        """Return the normalized frontmatter mapping exposed to templates."""
        return {
            "title": self.title,
            "head_title": self.head_title,
            "excerpt": self.excerpt,
            "redirect": self.redirect or "",
            "hideFromSidebar": self.hide_from_sidebar,
            "draft": self.draft,
        }


def parse_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into a frontmatter mapping and the remaining body.

    Raises
    ------
    ContentError
        If the frontmatter block is missing, not valid YAML, or not a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        msg = "document has no frontmatter block"
        raise ContentError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1))
    except YAMLError as exc:
        msg = f"frontmatter is not valid YAML: {exc}"
        raise ContentError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "frontmatter must be a mapping"
        raise ContentError(msg)
    return dict(loaded), text[match.end() :].lstrip("\n")


def _as_bool(value: object) -> bool:
    match value:
        case bool():
            return value
        case str() as text:
            return text.strip().lower() in TRUTHY_STRINGS
        case None:
            return False
        case _:
            return bool(value)


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def build_record(
    *,
    name: str,
    relative_directory: cabc.Sequence[str],
    text: str,
    source_path: Path | None = None,
) -> DocumentRecord:
    """Build a :class:`DocumentRecord` from raw file text.

    Raises
    ------
    ContentError
        If the frontmatter is malformed or has no ``title``.
    """
    meta, body = parse_front_matter(text)
    title = _as_text(meta.get(const.FRONTMATTER_TITLE))
    if not title:
        msg = "frontmatter is missing a title"
        raise ContentError(msg)
    redirect = _as_text(meta.get(const.FRONTMATTER_REDIRECT))
    return DocumentRecord(
        name=name,
        relative_directory=tuple(relative_directory),
        title=title,
        head_title=_as_text(meta.get(const.FRONTMATTER_HEAD_TITLE)),
        excerpt=_as_text(meta.get(const.FRONTMATTER_EXCERPT)),
        redirect=redirect or None,
        hide_from_sidebar=_as_bool(meta.get(const.FRONTMATTER_HIDE_FROM_SIDEBAR)),
        draft=_as_bool(meta.get(const.FRONTMATTER_DRAFT)),
        body=body,
        source_path=source_path,
    )


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"file is not valid UTF-8: {exc.reason} at byte {exc.start}"
        raise ContentError(msg) from exc
    except OSError as exc:
        msg = f"file cannot be read: {exc.strerror or exc}"
        raise ContentError(msg) from exc


def load_documents(
    content_dir: Path,
    *,
    docs_dir: str = "docs",
    extensions: cabc.Iterable[str] = (".md",),
) -> list[DocumentRecord]:
    """Load every document under ``content_dir/docs_dir`` sorted by path.

    Parameters
    ----------
    content_dir : Path
        Root of the content tree; relative directories are computed from it.
    docs_dir : str, optional
        Sub-folder holding the documentation pages. Defaults to ``"docs"``.
    extensions : Iterable[str], optional
        File suffixes treated as documents. Defaults to ``(".md",)``.

    Returns
    -------
    list[DocumentRecord]
        Records in ascending absolute-path order. Malformed documents are
        logged with their location and omitted.

    Raises
    ------
    FileNotFoundError
        If the docs folder does not exist.
    """
    docs_root = content_dir / docs_dir
    if not docs_root.is_dir():
        msg = f"Docs directory '{docs_root}' not found."
        raise FileNotFoundError(msg)

    suffixes = {suffix.lower() for suffix in extensions}
    candidates = sorted(
        (
            path.resolve()
            for path in docs_root.rglob("*")
            if path.is_file() and path.suffix.lower() in suffixes
        ),
        key=lambda path: path.as_posix(),
    )
    base = content_dir.resolve()
    records: list[DocumentRecord] = []
    for path in candidates:
        relative = path.parent.relative_to(base).as_posix()
        try:
            record = build_record(
                name=path.stem,
                relative_directory=split_segments(relative),
                text=_read_source(path),
                source_path=path,
            )
        except ContentError as exc:
            logger.warning(
                "markup is broken, skipping %s/%s: %s", relative, path.name, exc
            )
            continue
        records.append(record)
    logger.debug("loaded %d documents from %s", len(records), docs_root)
    return records


__all__ = [
    "ContentError",
    "DocumentRecord",
    "build_record",
    "load_documents",
    "parse_front_matter",
]
