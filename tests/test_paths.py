"""Unit tests for the path transformers that turn content paths into routes."""

from __future__ import annotations

import functools

import pytest

from k6_docs.paths import (
    compose,
    dedupe_repeated_segment,
    drop_trailing_slash,
    ensure_root,
    remove_root_segment,
    route_pipeline,
    slugify,
    split_segments,
    strip_directory_prefix,
    strip_order_prefix,
    unorderify,
)


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("3-guides", "guides"),
        ("guides", "guides"),
        ("01 Getting started", "Getting started"),
        ("k6-http", "k6-http"),
        ("2fa", "2fa"),
    ],
)
def test_strip_order_prefix(segment: str, expected: str) -> None:
    """Only a leading ``<digits>-`` or ``<digits> `` token is removed."""
    actual = strip_order_prefix(segment)
    assert actual == expected, f"expected {expected!r} for {segment!r}, got {actual!r}"


def test_unorderify_strips_every_segment() -> None:
    """Every segment of a path loses its order prefix."""
    actual = unorderify("/01-guides/02-using-k6/03-protocols")
    assert actual == "/guides/using-k6/protocols", f"unexpected path {actual!r}"


def test_strip_directory_prefix() -> None:
    """The docs folder is removed with or without a leading slash."""
    assert strip_directory_prefix("docs/01 guides", "docs") == "01 guides"
    assert strip_directory_prefix("/docs/a/b", "docs") == "/a/b"
    assert strip_directory_prefix("docs", "docs") == "", "bare prefix maps to empty"
    assert strip_directory_prefix("documents/a", "docs") == "documents/a", (
        "a segment that merely starts with the prefix must be left alone"
    )


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/Using k6/SSL-TLS", "/using-k6/ssl-tls"),
        ("/01 guides/01 Getting started/Welcome", "/01-guides/01-getting-started/welcome"),
        ("/results visualization/InfluxDB + Grafana", "/results-visualization/influxdb-+-grafana"),
        ("/misc/What's new?", "/misc/whats-new"),
        ("/a  --  b/", "/a-b/"),
        ("/javascript-api/k6-http", "/javascript-api/k6-http"),
    ],
)
def test_slugify(raw: str, expected: str) -> None:
    """Slugify lowercases and hyphenates while keeping slug characters."""
    actual = slugify(raw)
    assert actual == expected, f"expected {expected!r} for {raw!r}, got {actual!r}"


@pytest.mark.parametrize(
    "raw", ["/Using k6/SSL-TLS", "  Mixed CASE & symbols!! ", "/k6/html (legacy)"]
)
def test_slugify_is_stable(raw: str) -> None:
    """Slugifying an existing slug changes nothing."""
    once = slugify(raw)
    assert slugify(once) == once, f"slugify is not idempotent for {raw!r}"


def test_dedupe_repeated_segment() -> None:
    """A folder that repeats its own name collapses into one segment."""
    assert dedupe_repeated_segment("/examples/examples/http2", "examples") == (
        "/examples/http2"
    )
    assert dedupe_repeated_segment("/examples/http2", "examples") == "/examples/http2"
    assert dedupe_repeated_segment("/my-examples/examples", "examples") == (
        "/my-examples/examples"
    ), "only whole segments are compared"


def test_remove_root_segment() -> None:
    """The root section disappears and the welcome sub-path maps to the root."""
    assert remove_root_segment("/guides/using-k6", "guides") == "/using-k6"
    assert remove_root_segment("guides/using-k6", "guides") == "/using-k6"
    assert remove_root_segment("/guides", "guides") == "/"
    assert remove_root_segment("/cloud/guides/x", "guides") == "/cloud/guides/x"
    welcome = remove_root_segment(
        "/guides/getting-started/welcome", "guides", "getting-started/welcome"
    )
    assert welcome == "/", f"welcome should resolve to the root, got {welcome!r}"


def test_drop_trailing_slash_is_idempotent() -> None:
    """Dropping the trailing slash twice equals dropping it once."""
    for raw in ["/using-k6/", "/using-k6", "/", ""]:
        once = drop_trailing_slash(raw)
        assert drop_trailing_slash(once) == once, f"not idempotent for {raw!r}"
    assert drop_trailing_slash("/") == "/"
    assert drop_trailing_slash("/using-k6/") == "/using-k6"


def test_compose_runs_left_to_right() -> None:
    """The documented composition example yields ``/guides/intro``."""
    pipeline = compose(
        functools.partial(strip_directory_prefix, prefix_segment="docs"),
        functools.partial(dedupe_repeated_segment, segment="guides"),
        drop_trailing_slash,
    )
    actual = pipeline("/docs/3-guides/guides/intro")
    assert actual == "/guides/intro", f"unexpected composed path {actual!r}"


def test_compose_is_associative() -> None:
    """Grouping composed transformers differently gives the same result."""
    first = functools.partial(strip_directory_prefix, prefix_segment="docs")
    second = unorderify
    third = drop_trailing_slash
    raw = "/docs/01-guides/02-using-k6/"
    left = compose(compose(first, second), third)(raw)
    right = compose(first, compose(second, third))(raw)
    assert left == right == "/guides/using-k6"


def test_route_pipeline_never_returns_empty() -> None:
    """A path that normalises away entirely becomes ``/``."""
    pipeline = route_pipeline(root_section="guides")
    assert pipeline("/01-guides") == "/"
    assert pipeline("") == "/"
    assert ensure_root("using-k6") == "/using-k6"


def test_split_segments_keeps_empty_parts() -> None:
    """Malformed directories keep their empty segments for later rejection."""
    assert split_segments("") == ()
    assert split_segments("a/b") == ("a", "b")
    assert split_segments("a//b") == ("a", "", "b")
