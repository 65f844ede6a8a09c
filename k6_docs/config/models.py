"""Typed dataclasses describing the k6 docs site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

BuildMode = typ.Literal["production", "development"]
BUILD_MODES: tuple[str, ...] = ("production", "development")


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class RedirectConfig:
    """A legacy URL mapping declared in the site configuration."""

    from_path: str
    to_path: str
    permanent: bool = True
    redirect_in_browser: bool = False


@dc.dataclass(slots=True)
class ThemeConfig:
    """Presentation settings shared by every rendered page."""

    site_name: str = "k6 Documentation"
    pygments_style: str = "monokai"


@dc.dataclass(slots=True)
class RoutingConfig:
    """Rules that map the content folder layout onto public routes.

    Attributes
    ----------
    root_section : str
        Top-level section served from ``/`` instead of ``/<section>``.
    root_redirect_subpath : str or None
        Path inside the root section whose sidebar link points at ``/``.
    dedupe_segments : list[str]
        Segments collapsed when a folder repeats its own name.
    sidebar_root_aliases : list[str]
        Section keys that receive the whole sidebar tree.
    stub_excluded_sections : list[str]
        Sections that get no breadcrumb stub pages for their children.
    nav_labels : dict[str, str]
        Navigation label overrides keyed by section.
    path_prefix : str
        Prefix prepended to the welcome redirect when deployed under a subpath.
    """

    root_section: str = "guides"
    root_redirect_subpath: str | None = "getting-started/welcome"
    dedupe_segments: list[str] = dc.field(default_factory=lambda: ["examples"])
    sidebar_root_aliases: list[str] = dc.field(default_factory=list)
    stub_excluded_sections: list[str] = dc.field(
        default_factory=lambda: ["javascript api"]
    )
    nav_labels: dict[str, str] = dc.field(
        default_factory=lambda: {"cloud": "Cloud Docs"}
    )
    path_prefix: str = ""


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved settings for one documentation build."""

    content_dir: Path = Path("src/data/markdown")
    docs_dir: str = "docs"
    output_dir: Path = Path("public")
    extensions: list[str] = dc.field(default_factory=lambda: [".md"])
    build_mode: BuildMode | None = None
    main_url: str | None = None
    production_url: str = "https://k6.io"
    source_repo_url: str = "https://github.com/loadimpact/k6-docs/blob/master/src/data"
    routing: RoutingConfig = dc.field(default_factory=RoutingConfig)
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    redirects: list[RedirectConfig] = dc.field(default_factory=list)

    def is_production(self, mode: str | None = None) -> bool:
        """Return whether drafts are filtered for this build.

        Parameters
        ----------
        mode : str, optional
            Explicit build mode (for example from the CLI); takes precedence
            over the configured ``build_mode``.

        Returns
        -------
        bool
            ``True`` for production builds. Without any explicit mode the build
            counts as production when ``main_url`` is the production URL.

        Raises
        ------
        SiteConfigError
            If ``mode`` is not a known build mode.
        """
        selected = mode or self.build_mode
        if selected is None:
            return self.main_url == self.production_url
        if selected not in BUILD_MODES:
            known = ", ".join(BUILD_MODES)
            msg = f"Unknown build mode '{selected}'. Expected one of: {known}"
            raise SiteConfigError(msg)
        return selected == "production"


__all__ = [
    "BUILD_MODES",
    "BuildMode",
    "RedirectConfig",
    "RoutingConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
]
