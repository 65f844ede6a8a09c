"""Utilities for planning, rendering, and writing k6 documentation pages."""

from .models import DocumentPage, NavLink, PageRequest, SitePlan
from .page_generator import DocsPageGenerator
from .renderer import HtmlContentRenderer
from .site_writer import SiteWriter

__all__ = [
    "DocsPageGenerator",
    "DocumentPage",
    "HtmlContentRenderer",
    "NavLink",
    "PageRequest",
    "SitePlan",
    "SiteWriter",
]
