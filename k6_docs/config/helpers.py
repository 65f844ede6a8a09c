"""Utility helpers shared by the k6 docs configuration loader."""

from __future__ import annotations

import typing as typ

from .models import (
    BUILD_MODES,
    BuildMode,
    RedirectConfig,
    RoutingConfig,
    SiteConfigError,
    ThemeConfig,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(value: object | None, *, field: str) -> list[str]:
    """Normalize a scalar or list into a list of non-empty strings."""
    match value:
        case None:
            return []
        case str() as text:
            return [text] if text.strip() else []
        case list() | tuple():
            normalized: list[str] = []
            for item in value:
                text = str(item).strip()
                if text:
                    normalized.append(text)
            return normalized
        case _:
            msg = f"'{field}' must be a string or a list of strings."
            raise SiteConfigError(msg)


def _validate_build_mode(value: object | None) -> BuildMode | None:
    """Return the configured build mode or None, rejecting unknown modes."""
    mode = _optional_str(value)
    if mode is None:
        return None
    if mode not in BUILD_MODES:
        known = ", ".join(BUILD_MODES)
        msg = f"Unknown build_mode '{mode}'. Expected one of: {known}"
        raise SiteConfigError(msg)
    return typ.cast("BuildMode", mode)


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    return ThemeConfig(
        site_name=payload.get("site_name", base.site_name),
        pygments_style=payload.get("pygments_style", base.pygments_style),
    )


def _build_routing_config(payload: typ.Mapping[str, typ.Any]) -> RoutingConfig:
    """Build the RoutingConfig, keeping defaults for keys that are absent."""
    base = RoutingConfig()
    root_section = _optional_str(payload.get("root_section", base.root_section))
    if not root_section:
        msg = "'root_section' must not be empty."
        raise SiteConfigError(msg)

    nav_labels_raw = payload.get("nav_labels", base.nav_labels) or {}
    if not isinstance(nav_labels_raw, dict):
        msg = "'nav_labels' must be a mapping of section to label."
        raise SiteConfigError(msg)

    def _list_or_default(key: str, default: list[str]) -> list[str]:
        if key not in payload:
            return list(default)
        return _string_list(payload.get(key), field=key)

    path_prefix = _optional_str(payload.get("path_prefix")) or ""
    return RoutingConfig(
        root_section=root_section,
        root_redirect_subpath=_optional_str(
            payload.get("root_redirect_subpath", base.root_redirect_subpath)
        ),
        dedupe_segments=_list_or_default("dedupe_segments", base.dedupe_segments),
        sidebar_root_aliases=_list_or_default(
            "sidebar_root_aliases", base.sidebar_root_aliases
        ),
        stub_excluded_sections=_list_or_default(
            "stub_excluded_sections", base.stub_excluded_sections
        ),
        nav_labels={str(key): str(label) for key, label in nav_labels_raw.items()},
        path_prefix=path_prefix.rstrip("/"),
    )


def _build_redirects(entries: object | None) -> list[RedirectConfig]:
    """Parse the optional ``redirects`` list into RedirectConfig entries."""
    if entries is None:
        return []
    if not isinstance(entries, list):
        msg = "'redirects' must be a list of mappings."
        raise SiteConfigError(msg)
    redirects: list[RedirectConfig] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            msg = f"Redirect #{index} must be a mapping with 'from' and 'to'."
            raise SiteConfigError(msg)
        from_path = _optional_str(entry.get("from"))
        to_path = _optional_str(entry.get("to"))
        if not from_path or not to_path:
            msg = f"Redirect #{index} is missing 'from' or 'to'."
            raise SiteConfigError(msg)
        redirects.append(
            RedirectConfig(
                from_path=from_path,
                to_path=to_path,
                permanent=bool(entry.get("permanent", True)),
                redirect_in_browser=bool(entry.get("redirect_in_browser", False)),
            )
        )
    return redirects


__all__ = [
    "_build_redirects",
    "_build_routing_config",
    "_build_theme_config",
    "_optional_str",
    "_string_list",
    "_validate_build_mode",
]
