"""Cyclopts CLI entrypoint for building the k6 documentation site.

The ``k6-docs`` console script loads the site configuration and the markdown
content, plans every page with :class:`~k6_docs.generator.DocsPageGenerator`,
and writes static HTML with :class:`~k6_docs.generator.SiteWriter`. Every
option can also be supplied through ``K6_DOCS_*`` environment variables, which
is how CI selects a production build.

Examples
--------
Build the site for production:

>>> from k6_docs.cli import app
>>> app(["generate", "--mode", "production"])  # doctest: +SKIP

List the routes a development build would create without writing files:

>>> app(["routes", "--config", "config/site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, SiteConfigError, load_site_config
from .content import load_documents
from .generator import DocsPageGenerator, SitePlan, SiteWriter
from .logging import configure_logging
from .redirects import build_redirect_rules
from .sidebar import MissingSectionError, SidebarPathError

DEFAULT_CONFIG = Path("config/site.yaml")

BuildModeOption = typ.Annotated[
    typ.Literal["production", "development"] | None,
    Parameter(help="Build mode; production filters drafts", env_var="K6_DOCS_MODE"),
]
ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="K6_DOCS_CONFIG")
]
VerboseOption = typ.Annotated[bool, Parameter(help="Enable debug logging")]

app = App(name="k6-docs", config=cyclopts.config.Env("K6_DOCS_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _fail(exc: Exception) -> typ.NoReturn:
    """Report a build-stopping error and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


def _plan_site(site_config: SiteConfig, mode: str | None) -> SitePlan:
    """Load documents and plan the site, turning build errors into exits."""
    try:
        production = site_config.is_production(mode)
        documents = load_documents(
            site_config.content_dir,
            docs_dir=site_config.docs_dir,
            extensions=site_config.extensions,
        )
        return DocsPageGenerator(site_config, production=production).plan(documents)
    except (
        FileNotFoundError,
        MissingSectionError,
        SidebarPathError,
        SiteConfigError,
    ) as exc:
        _fail(exc)


def _load_config(config: Path) -> SiteConfig:
    try:
        return load_site_config(config)
    except (FileNotFoundError, SiteConfigError, TypeError) as exc:
        _fail(exc)


@app.command(help="Render every documentation page and redirect to static HTML.")
def generate(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    mode: BuildModeOption = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="K6_DOCS_OUTPUT_DIR"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Generate the documentation site for the requested configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``K6_DOCS_CONFIG``).
    mode : {"production", "development"}, optional
        Build mode; falls back to the configured ``build_mode`` and then to
        comparing ``main_url`` with ``production_url``.
    output_dir : Path or None, optional
        Override for the output directory declared in the configuration.
    verbose : bool, optional
        Enable debug logging.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.
    """
    configure_logging(verbose=verbose)
    site_config = _load_config(config)
    plan = _plan_site(site_config, mode)
    written = SiteWriter(site_config, output_dir=output_dir).write(plan)
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the route and template of every planned page.")
def routes(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    mode: BuildModeOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print ``<route> <template>`` for each page without writing anything."""
    configure_logging(verbose=verbose)
    plan = _plan_site(_load_config(config), mode)
    for page in plan.pages:
        print(f"{page.route_path} {page.template}")


@app.command(help="Print the legacy redirect table.")
def redirects(*, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Print every redirect rule as ``<from> -> <to> (<status>)``."""
    site_config = _load_config(config)
    rules = build_redirect_rules(
        path_prefix=site_config.routing.path_prefix, extra=site_config.redirects
    )
    for rule in rules:
        print(f"{rule.from_path} -> {rule.to_path} ({rule.status_code})")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``k6-docs`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
