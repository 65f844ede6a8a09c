"""Load and validate the site configuration for k6 docs builds.

This subpackage parses the project's ``site.yaml`` file and produces typed
dataclasses (:class:`SiteConfig`, :class:`RoutingConfig`, ...) that the page
generator and site writer consume. The primary entry point is
:func:`load_site_config`, which applies defaults for absent keys and rejects
invalid values with :class:`SiteConfigError`.

Examples
--------
>>> from pathlib import Path
>>> from k6_docs.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.is_production("production")  # doctest: +SKIP
True
"""

from .loader import load_site_config
from .models import (
    BUILD_MODES,
    BuildMode,
    RedirectConfig,
    RoutingConfig,
    SiteConfig,
    SiteConfigError,
    ThemeConfig,
)

__all__ = [
    "BUILD_MODES",
    "BuildMode",
    "RedirectConfig",
    "RoutingConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
    "load_site_config",
]
