"""Shared dataclasses produced by the page generation pipeline."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from k6_docs.content import DocumentRecord
    from k6_docs.redirects import RedirectRule
    from k6_docs.sidebar import TreeNode


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """Top-level navigation entry linking to a docs section."""

    label: str
    to: str

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-ready mapping of the link."""
        return {"label": self.label, "to": self.to}


@dc.dataclass(frozen=True, slots=True)
class DocumentPage:
    """A document record enriched with its public route and source link.

    Attributes
    ----------
    record : DocumentRecord
        The loaded source document.
    slug : str
        Final route of the page.
    file_origin : str
        URI-encoded link to the file in the source repository.
    """

    record: DocumentRecord
    slug: str
    file_origin: str

    @property
    def frontmatter(self) -> dict[str, typ.Any]:
        """Return the record frontmatter extended with ``slug`` and ``fileOrigin``."""
        return {
            **self.record.frontmatter(),
            "slug": self.slug,
            "fileOrigin": self.file_origin,
        }

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the document page."""
        return {
            "name": self.record.name,
            "relative_directory": self.record.directory,
            "frontmatter": self.frontmatter,
            "body": self.record.body,
        }


@dc.dataclass(frozen=True, slots=True)
class PageRequest:
    """Instruction for the host to render one page.

    Attributes
    ----------
    route_path : str
        Public route, always starting with ``/``.
    template : str
        Template identifier understood by the site writer.
    context : Mapping[str, Any]
        Read-only values handed to the template.
    """

    route_path: str
    template: str
    context: cabc.Mapping[str, typ.Any]

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the request, context included."""
        return {
            "route_path": self.route_path,
            "template": self.template,
            "context": serialize(self.context),
        }


@dc.dataclass(frozen=True, slots=True)
class SitePlan:
    """Everything a single build produces before anything is written."""

    sidebar: TreeNode
    nav_links: tuple[NavLink, ...]
    pages: tuple[PageRequest, ...]
    redirects: tuple[RedirectRule, ...]

    def routes(self) -> list[str]:
        """Return page routes in emission order."""
        return [page.route_path for page in self.pages]

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the whole plan."""
        return {
            "sidebar": self.sidebar.to_dict(),
            "nav_links": serialize(self.nav_links),
            "pages": [page.to_dict() for page in self.pages],
            "redirects": serialize(self.redirects),
        }


def serialize(value: object) -> typ.Any:
    """Convert context values into plain JSON-compatible structures."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, cabc.Mapping):
        return {str(key): serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return value


__all__ = ["DocumentPage", "NavLink", "PageRequest", "SitePlan", "serialize"]
