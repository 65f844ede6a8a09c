"""Render a :class:`~k6_docs.generator.models.SitePlan` into static files.

The site writer plays the host's role for page-creation requests: every
:class:`~k6_docs.generator.models.PageRequest` becomes
``<output_dir>/<route>/index.html`` rendered from the Jinja template named by
its identifier. Redirect rules land in a Netlify-style ``_redirects`` file, and
in-browser redirects additionally get a meta-refresh page. A JSON manifest
records every route so builds can be diffed.

Example
-------
>>> from k6_docs.generator import SiteWriter
>>> writer = SiteWriter(site_config)  # doctest: +SKIP
>>> written = writer.write(plan)  # doctest: +SKIP
>>> written[0].name  # doctest: +SKIP
'index.html'
"""

from __future__ import annotations

import datetime as dt
import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from k6_docs import _constants as const
from k6_docs.logging import get_logger

from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from jinja2 import Template

    from k6_docs.config import SiteConfig
    from k6_docs.redirects import RedirectRule

    from .models import PageRequest, SitePlan

logger = get_logger("site_writer")


class SiteWriter:
    """Write page requests, redirects, and the route manifest to disk."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the writer with templates and the output location.

        Parameters
        ----------
        site_config : SiteConfig
            Site configuration providing the theme and default output folder.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        output_dir : Path, optional
            Override for the output directory; defaults to the site config.
        """
        self.site = site_config
        self.output_dir = output_dir or site_config.output_dir
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.renderer = HtmlContentRenderer(site_config.theme.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._templates: dict[str, Template] = {}

    def write(self, plan: SitePlan) -> list[Path]:
        """Render every planned page and redirect into the output directory.

        Returns
        -------
        list[Path]
            Written HTML pages in plan order, followed by the ``_redirects``
            file, redirect pages, and the route manifest.

        Raises
        ------
        KeyError
            If a page request names an unknown template identifier.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        generated_at = dt.datetime.now(dt.UTC)
        written: list[Path] = []
        for page in plan.pages:
            html = self._render_page(page, generated_at)
            written.append(self._write_html(page.route_path, html))

        written.append(self._write_redirects_file(plan.redirects))
        written.extend(
            self._write_html(rule.from_path, self._render_redirect(rule))
            for rule in plan.redirects
            if rule.redirect_in_browser
        )
        written.append(self._write_manifest(plan))
        logger.info("wrote %d files to %s", len(written), self.output_dir)
        return written

    def page_path(self, route_path: str) -> Path:
        """Return the ``index.html`` location that serves ``route_path``."""
        relative = route_path.strip("/")
        directory = self.output_dir / relative if relative else self.output_dir
        return directory / "index.html"

    def _template(self, identifier: str) -> Template:
        if identifier not in self._templates:
            try:
                filename = const.TEMPLATE_FILES[identifier]
            except KeyError as exc:
                msg = f"Unknown page template '{identifier}'."
                raise KeyError(msg) from exc
            self._templates[identifier] = self.env.get_template(filename)
        return self._templates[identifier]

    def _render_page(self, page: PageRequest, generated_at: dt.datetime) -> str:
        context = dict(page.context)
        document = context.get("document")
        if document is not None:
            context["body_html"] = self.renderer.markdown(document.record.body)
        html = self._template(page.template).render(
            **context,
            route_path=page.route_path,
            site_name=self.site.theme.site_name,
            pygments_css=self.renderer.stylesheet,
            generated_at=generated_at,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def _render_redirect(self, rule: RedirectRule) -> str:
        template = self.env.get_template(const.REDIRECT_PAGE_TEMPLATE_FILE)
        return template.render(rule=rule, site_name=self.site.theme.site_name)

    def _write_html(self, route_path: str, html: str) -> Path:
        path = self.page_path(route_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        return path

    def _write_redirects_file(self, redirects: tuple[RedirectRule, ...]) -> Path:
        lines = [
            f"{rule.from_path} {rule.to_path} {rule.status_code}" for rule in redirects
        ]
        path = self.output_dir / const.REDIRECTS_FILE
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    def _write_manifest(self, plan: SitePlan) -> Path:
        manifest = {
            "pages": [
                {"route_path": page.route_path, "template": page.template}
                for page in plan.pages
            ],
            "nav_links": [link.to_dict() for link in plan.nav_links],
            "redirects": [rule.to_dict() for rule in plan.redirects],
        }
        path = self.output_dir / const.ROUTES_MANIFEST
        path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
        return path


__all__ = ["SiteWriter"]
