"""Load the site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_redirects,
    _build_routing_config,
    _build_theme_config,
    _optional_str,
    _string_list,
    _validate_build_mode,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the docs build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for every absent key.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a field has an invalid value (for example an unknown build mode).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from k6_docs.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.routing.root_section  # doctest: +SKIP
    'guides'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base = SiteConfig()

    docs_dir = (_optional_str(raw.get("docs_dir")) or base.docs_dir).strip("/")
    if not docs_dir:
        msg = "'docs_dir' must name a folder inside content_dir."
        raise SiteConfigError(msg)

    extensions = _string_list(raw.get("extensions"), field="extensions")
    normalized_extensions = [
        ext if ext.startswith(".") else f".{ext}" for ext in extensions
    ] or list(base.extensions)

    return SiteConfig(
        content_dir=Path(_optional_str(raw.get("content_dir")) or base.content_dir),
        docs_dir=docs_dir,
        output_dir=Path(_optional_str(raw.get("output_dir")) or base.output_dir),
        extensions=normalized_extensions,
        build_mode=_validate_build_mode(raw.get("build_mode")),
        main_url=_optional_str(raw.get("main_url")),
        production_url=_optional_str(raw.get("production_url"))
        or base.production_url,
        source_repo_url=(
            _optional_str(raw.get("source_repo_url")) or base.source_repo_url
        ).rstrip("/"),
        routing=_build_routing_config(raw.get("routing", {}) or {}),
        theme=_build_theme_config(raw.get("theme", {}) or {}),
        redirects=_build_redirects(raw.get("redirects")),
    )


__all__ = ["load_site_config"]
