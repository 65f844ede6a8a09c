r"""Pure string rewrites that turn content locations into public routes.

Source documents live on disk under numbered folders (``01 guides/02 Using
k6``) so that the sidebar follows a designed order. None of that ordering may
leak into URLs, and a few structural quirks of the content tree (the root
``guides`` section, the ``examples/examples`` folder) need normalising before a
path becomes a route. Each helper here is a plain ``str -> str`` function;
:func:`compose` chains them left to right.

Example
-------
>>> from functools import partial
>>> from k6_docs.paths import compose, dedupe_repeated_segment, drop_trailing_slash
>>> from k6_docs.paths import strip_directory_prefix
>>> to_route = compose(
...     partial(strip_directory_prefix, prefix_segment="docs"),
...     partial(dedupe_repeated_segment, segment="guides"),
...     drop_trailing_slash,
... )
>>> to_route("/docs/3-guides/guides/intro")
'/guides/intro'
"""

from __future__ import annotations

import functools
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

PathTransformer = typ.Callable[[str], str]

ORDER_PREFIX_PATTERN = re.compile(r"^\d+[-\s]")
SLUG_DROPPED_PATTERN = re.compile(r"[%@~'\"]")
SLUG_DISALLOWED_PATTERN = re.compile(r"[^a-z0-9_+/-]+")
HYPHEN_RUN_PATTERN = re.compile(r"-{2,}")
SEGMENT_EDGE_HYPHENS_PATTERN = re.compile(r"-*/-*")


def strip_directory_prefix(path: str, prefix_segment: str) -> str:
    """Remove a leading ``prefix_segment`` directory from ``path``.

    A leading slash, when present, is preserved. Paths that do not start with
    the segment are returned untouched.

    >>> strip_directory_prefix("docs/01 guides/intro", "docs")
    '01 guides/intro'
    >>> strip_directory_prefix("/docs", "docs")
    '/'
    >>> strip_directory_prefix("/guides/docs", "docs")
    '/guides/docs'
    """
    leading = "/" if path.startswith("/") else ""
    body = path[len(leading) :]
    if body == prefix_segment:
        return leading
    if body.startswith(f"{prefix_segment}/"):
        return leading + body[len(prefix_segment) + 1 :]
    return path


def strip_order_prefix(segment: str) -> str:
    """Drop a numeric ordering token (``3-`` or ``03 ``) from one segment.

    >>> strip_order_prefix("3-guides")
    'guides'
    >>> strip_order_prefix("guides")
    'guides'
    """
    return ORDER_PREFIX_PATTERN.sub("", segment, count=1)


def unorderify(path: str) -> str:
    """Apply :func:`strip_order_prefix` to every segment of ``path``."""
    return "/".join(strip_order_prefix(segment) for segment in path.split("/"))


def slugify(path: str) -> str:
    """Convert ``path`` into a lowercase, hyphenated, URL-safe slug.

    Slashes are kept as segment separators and ``+`` and ``_`` survive, so an
    already valid slug is returned unchanged.

    >>> slugify("/Using k6/SSL-TLS")
    '/using-k6/ssl-tls'
    >>> slugify("/results visualization/InfluxDB + Grafana")
    '/results-visualization/influxdb-+-grafana'
    """
    slug = path.lower()
    slug = SLUG_DROPPED_PATTERN.sub("", slug)
    slug = SLUG_DISALLOWED_PATTERN.sub("-", slug)
    slug = HYPHEN_RUN_PATTERN.sub("-", slug)
    slug = SEGMENT_EDGE_HYPHENS_PATTERN.sub("/", slug)
    return slug.strip("-")


def dedupe_repeated_segment(path: str, segment: str) -> str:
    """Collapse consecutive copies of ``segment`` into a single one.

    Segments are compared with their order prefix removed, so a numbered
    folder followed by a same-named child (``3-guides/guides``) collapses too.

    >>> dedupe_repeated_segment("/examples/examples/http2", "examples")
    '/examples/http2'
    """
    if not segment:
        return path
    collapsed: list[str] = []
    for part in path.split("/"):
        if (
            collapsed
            and strip_order_prefix(part) == segment
            and strip_order_prefix(collapsed[-1]) == segment
        ):
            collapsed[-1] = segment
            continue
        collapsed.append(part)
    return "/".join(collapsed)


def remove_root_segment(
    path: str, segment: str, redirect_subpath: str | None = None
) -> str:
    """Remove the leading site-root ``segment`` so ``segment/x`` becomes ``/x``.

    When the remainder equals ``redirect_subpath`` the whole path resolves to
    ``/``; the page behind that sub-path is served from the root instead.

    >>> remove_root_segment("/guides/getting-started/running-k6", "guides")
    '/getting-started/running-k6'
    >>> remove_root_segment(
    ...     "/guides/getting-started/welcome", "guides", "getting-started/welcome"
    ... )
    '/'
    """
    body = path[1:] if path.startswith("/") else path
    head, _sep, rest = body.partition("/")
    if head != segment:
        return path
    if redirect_subpath is not None and rest.strip("/") == redirect_subpath.strip("/"):
        return "/"
    return f"/{rest}"


def drop_trailing_slash(path: str) -> str:
    """Remove trailing slashes unless the path is the root itself.

    >>> drop_trailing_slash("/using-k6/")
    '/using-k6'
    >>> drop_trailing_slash("/")
    '/'
    """
    return path.rstrip("/") or "/"


def ensure_root(path: str) -> str:
    """Return ``path`` with a leading slash, mapping the empty string to ``/``."""
    if not path:
        return "/"
    if not path.startswith("/"):
        return f"/{path}"
    return path


def split_segments(path: str) -> tuple[str, ...]:
    """Split a relative directory into segments; the empty string has none.

    Empty segments (``a//b`` or a trailing slash) are kept so callers can
    reject malformed input instead of silently dropping it.
    """
    if not path:
        return ()
    return tuple(path.split("/"))


def compose(*transformers: PathTransformer) -> PathTransformer:
    """Chain ``transformers`` left to right into a single transformer.

    >>> compose(str.strip, str.upper)("  k6 ")
    'K6'
    """

    def _pipeline(value: str) -> str:
        return functools.reduce(lambda acc, func: func(acc), transformers, value)

    return _pipeline


def route_pipeline(
    *,
    root_section: str,
    dedupe_segments: cabc.Iterable[str] = (),
    redirect_subpath: str | None = None,
) -> PathTransformer:
    """Build the normalisation chain applied to every slugified document path.

    Order prefixes are stripped first, then the root section is removed, then
    repeated segments collapse, and finally trailing slashes go. The result is
    always a non-empty route that starts with ``/``.
    """
    steps: list[PathTransformer] = [
        unorderify,
        ensure_root,
        functools.partial(
            remove_root_segment,
            segment=root_section,
            redirect_subpath=redirect_subpath,
        ),
    ]
    steps.extend(
        functools.partial(dedupe_repeated_segment, segment=segment)
        for segment in dedupe_segments
    )
    steps.extend([drop_trailing_slash, ensure_root])
    return compose(*steps)


__all__ = [
    "PathTransformer",
    "compose",
    "dedupe_repeated_segment",
    "drop_trailing_slash",
    "ensure_root",
    "remove_root_segment",
    "route_pipeline",
    "slugify",
    "split_segments",
    "strip_directory_prefix",
    "strip_order_prefix",
    "unorderify",
]
