"""Turn loaded documents into a sidebar tree and page-creation requests.

:class:`DocsPageGenerator` is the heart of the build. It runs in two serial
phases over an already sorted list of :class:`~k6_docs.content.DocumentRecord`:
first every visible document is pushed into the sidebar tree, then each
publishable document is mapped to a :class:`~k6_docs.generator.models.
PageRequest` carrying its route, the sidebar subtree of its section,
breadcrumbs, and navigation links. Section landing pages, breadcrumb stub
pages, and redirect rules are planned from the finished tree. Nothing is
written to disk here; see :class:`~k6_docs.generator.site_writer.SiteWriter`.

Example
-------
>>> from pathlib import Path
>>> from k6_docs.config import load_site_config
>>> from k6_docs.content import load_documents
>>> from k6_docs.generator import DocsPageGenerator
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> documents = load_documents(site.content_dir)  # doctest: +SKIP
>>> plan = DocsPageGenerator(site, production=True).plan(documents)  # doctest: +SKIP
>>> plan.routes()[:1]  # doctest: +SKIP
['/getting-started/running-k6']
"""

from __future__ import annotations

import functools
import types
import typing as typ
from urllib.parse import quote

from k6_docs import _constants as const
from k6_docs.breadcrumbs import build_breadcrumbs
from k6_docs.logging import get_logger
from k6_docs.paths import (
    compose,
    drop_trailing_slash,
    ensure_root,
    remove_root_segment,
    route_pipeline,
    slugify,
    split_segments,
    strip_directory_prefix,
    strip_order_prefix,
)
from k6_docs.redirects import build_redirect_rules
from k6_docs.sidebar import (
    SidebarEntry,
    SidebarTreeBuilder,
    TreeNode,
    list_children,
    require_subtree,
)

from .models import DocumentPage, NavLink, PageRequest, SitePlan

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from k6_docs.config import SiteConfig
    from k6_docs.content import DocumentRecord

logger = get_logger("generator")

# Characters encodeURI leaves untouched besides ASCII letters and digits.
URI_SAFE_CHARACTERS = ";,/?:@&=+$-_.!~*'()#"


class DocsPageGenerator:
    """Plan every page of the documentation site from a list of documents."""

    def __init__(self, site_config: SiteConfig, *, production: bool) -> None:
        """Initialize the generator with routing rules and the build mode.

        Parameters
        ----------
        site_config : SiteConfig
            Site configuration providing the docs folder, routing rules, the
            source repository URL, and extra redirects.
        production : bool
            Whether this is a production build; drafts are filtered when set.
        """
        self.site = site_config
        self.routing = site_config.routing
        self.production = production
        self.root_slug = slugify(self.routing.root_section)
        dedupe = [slugify(segment) for segment in self.routing.dedupe_segments]
        self._sidebar_route = route_pipeline(
            root_section=self.root_slug,
            dedupe_segments=dedupe,
            redirect_subpath=self.routing.root_redirect_subpath,
        )
        self._page_route = route_pipeline(
            root_section=self.root_slug, dedupe_segments=dedupe
        )
        self._stub_route = compose(
            slugify,
            functools.partial(remove_root_segment, segment=self.root_slug),
            ensure_root,
            drop_trailing_slash,
        )

    def plan(self, documents: cabc.Sequence[DocumentRecord]) -> SitePlan:
        """Build the sidebar and every page and redirect for ``documents``.

        Parameters
        ----------
        documents : Sequence[DocumentRecord]
            Documents in their final, deterministic order.

        Returns
        -------
        SitePlan
            Sidebar tree, navigation links, page requests, and redirect rules.

        Raises
        ------
        SidebarPathError
            If a document sits in a malformed directory path.
        MissingSectionError
            If a page belongs to a section that has no sidebar entries.
        """
        sidebar = self.build_sidebar(documents)
        nav_links = self.build_nav_links(sidebar)

        pages = self._document_pages(documents, sidebar, nav_links)
        taken = {page.route_path for page in pages}
        pages.extend(self._section_pages(sidebar, nav_links, taken))
        pages.extend(self._breadcrumb_stub_pages(sidebar, nav_links, taken))

        redirects = build_redirect_rules(
            path_prefix=self.routing.path_prefix, extra=self.site.redirects
        )
        logger.info(
            "planned %d pages and %d redirects (%s build)",
            len(pages),
            len(redirects),
            "production" if self.production else "development",
        )
        return SitePlan(
            sidebar=sidebar,
            nav_links=nav_links,
            pages=tuple(pages),
            redirects=redirects,
        )

    def build_sidebar(self, documents: cabc.Iterable[DocumentRecord]) -> TreeNode:
        """Insert every sidebar-visible document and return the frozen tree."""
        builder = SidebarTreeBuilder()
        for record in documents:
            if self.is_hidden_from_sidebar(record):
                continue
            directory = self._docs_relative_directory(record)
            builder.add_node(
                split_segments(directory),
                record.name,
                SidebarEntry(
                    path=self._sidebar_route(self._raw_path(directory, record)),
                    title=record.title,
                    redirect=record.redirect,
                ),
            )
        return builder.get_tree()

    def build_nav_links(self, sidebar: TreeNode) -> tuple[NavLink, ...]:
        """Return one navigation link per top-level section, in sidebar order."""
        return tuple(
            NavLink(label=self._section_label(key), to=self._section_route(key))
            for key, _node in list_children(sidebar)
        )

    def is_hidden_from_sidebar(self, record: DocumentRecord) -> bool:
        """Return whether ``record`` is left out of the sidebar tree."""
        return (record.draft and self.production) or record.hide_from_sidebar

    def is_page_skipped(self, record: DocumentRecord) -> bool:
        """Return whether no page is generated for ``record`` at all."""
        return (record.draft and self.production) or bool(record.redirect)

    def _document_pages(
        self,
        documents: cabc.Iterable[DocumentRecord],
        sidebar: TreeNode,
        nav_links: tuple[NavLink, ...],
    ) -> list[PageRequest]:
        pages: list[PageRequest] = []
        sources: dict[str, str] = {}
        for record in documents:
            if self.is_page_skipped(record):
                logger.debug("skipping page for %s/%s", record.directory, record.name)
                continue
            directory = self._docs_relative_directory(record)
            route = self._page_route(self._raw_path(directory, record))
            location = f"{record.directory}/{record.name}"
            if route in sources:
                logger.warning(
                    "route %s from %s replaces the page from %s",
                    route,
                    location,
                    sources[route],
                )
            sources[route] = location
            document = DocumentPage(
                record=record, slug=route, file_origin=self._file_origin(record)
            )
            context = {
                "document": document,
                "sidebar_tree": self._document_sidebar(sidebar, directory),
                "breadcrumbs": build_breadcrumbs(route),
                "nav_links": nav_links,
            }
            pages.append(
                PageRequest(
                    route_path=route,
                    template=const.DOC_PAGE_TEMPLATE,
                    context=types.MappingProxyType(context),
                )
            )
        return pages

    def _section_pages(
        self,
        sidebar: TreeNode,
        nav_links: tuple[NavLink, ...],
        taken: set[str],
    ) -> list[PageRequest]:
        pages: list[PageRequest] = []
        for key, _node in list_children(sidebar):
            route = self._section_route(key)
            if route in taken:
                logger.debug("section %s already has a page at %s", key, route)
                continue
            taken.add(route)
            context = {
                "section": key,
                "title": self._section_label(key),
                "sidebar_tree": self._section_subtree(sidebar, key),
                "nav_links": nav_links,
            }
            pages.append(
                PageRequest(
                    route_path=route,
                    template=const.SECTION_INDEX_TEMPLATE,
                    context=types.MappingProxyType(context),
                )
            )
        return pages

    def _breadcrumb_stub_pages(
        self,
        sidebar: TreeNode,
        nav_links: tuple[NavLink, ...],
        taken: set[str],
    ) -> list[PageRequest]:
        excluded = set(self.routing.stub_excluded_sections)
        pages: list[PageRequest] = []
        for section, _node in list_children(sidebar):
            if section in excluded:
                continue
            subtree = self._section_subtree(sidebar, section)
            for name, child in list_children(subtree):
                route = self._stub_route(f"{section}/{name}")
                if route in taken:
                    logger.debug("breadcrumb stub %s already has a page", route)
                    continue
                taken.add(route)
                context = {
                    "title": name,
                    "sidebar_tree": subtree,
                    "breadcrumbs": build_breadcrumbs(route),
                    "nav_links": nav_links,
                    "direct_children": list_children(child),
                }
                pages.append(
                    PageRequest(
                        route_path=route,
                        template=const.BREADCRUMB_STUB_TEMPLATE,
                        context=types.MappingProxyType(context),
                    )
                )
        return pages

    def _docs_relative_directory(self, record: DocumentRecord) -> str:
        return strip_directory_prefix(record.directory, self.site.docs_dir)

    @staticmethod
    def _raw_path(directory: str, record: DocumentRecord) -> str:
        """Return the slugified ``/<directory>/<title>`` path of ``record``."""
        # Titles such as "k6/html" must not introduce an extra segment.
        title = record.title.replace("/", "-")
        parts = [part for part in (directory, title) if part]
        return slugify("/" + "/".join(parts))

    def _document_sidebar(self, sidebar: TreeNode, directory: str) -> TreeNode:
        segments = split_segments(directory)
        if not segments:
            return sidebar
        section = strip_order_prefix(segments[0].strip())
        return self._section_subtree(sidebar, section)

    def _section_subtree(self, sidebar: TreeNode, section: str) -> TreeNode:
        return require_subtree(sidebar, section, self.routing.sidebar_root_aliases)

    def _section_label(self, key: str) -> str:
        return self.routing.nav_labels.get(key, key.upper())

    def _section_route(self, key: str) -> str:
        slug = slugify(key)
        return "/" if slug == self.root_slug else f"/{slug}"

    def _file_origin(self, record: DocumentRecord) -> str:
        suffix = record.source_path.suffix if record.source_path else ".md"
        location = "/".join(
            part for part in (self.site.source_repo_url, record.directory) if part
        )
        return quote(f"{location}/{record.name}{suffix}", safe=URI_SAFE_CHARACTERS)


__all__ = ["DocsPageGenerator"]
