"""Tests for the ``k6-docs`` command functions."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from k6_docs.cli import generate, redirects, routes

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def test_routes_lists_pages(
    write_site_yaml: cabc.Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """``routes`` prints one ``<route> <template>`` line per page."""
    routes(config=write_site_yaml(), mode="production")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "/getting-started/welcome doc_page"
    assert "/ section_index" in lines
    assert "/using-k6 breadcrumb_stub" in lines
    assert not any(line.startswith("/using-k6/draft-feature") for line in lines)


def test_routes_mode_overrides_config(
    write_site_yaml: cabc.Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """An explicit development mode keeps drafts despite the config."""
    routes(config=write_site_yaml("build_mode: production\n"), mode="development")
    out = capsys.readouterr().out
    assert "/using-k6/draft-feature doc_page" in out


def test_generate_writes_site(
    write_site_yaml: cabc.Callable[..., Path],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``generate`` renders into the output override and reports each file."""
    target = tmp_path / "site"
    generate(config=write_site_yaml(), mode="production", output_dir=target)
    out = capsys.readouterr().out
    assert (target / "getting-started" / "running-k6" / "index.html").is_file()
    assert (target / "_redirects").is_file()
    assert f"wrote {target / 'index.html'}" in out


def test_redirects_command(
    write_site_yaml: cabc.Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """``redirects`` prints the table with status codes."""
    redirects(config=write_site_yaml("routing:\n  path_prefix: /docs\n"))
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "/docs/getting-started/welcome -> /docs (301)"


def test_missing_config_exits(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing configuration file exits with status 1."""
    with pytest.raises(SystemExit) as excinfo:
        routes(config=tmp_path / "absent.yaml")
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("error: Configuration file")


def test_missing_section_exits(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A page outside every sidebar section stops the build."""
    page = tmp_path / "content" / "docs" / "05 cloud" / "01 Intro.md"
    page.parent.mkdir(parents=True)
    page.write_text(
        "---\ntitle: Intro\nhideFromSidebar: true\n---\nHi\n", encoding="utf-8"
    )
    config_path = tmp_path / "site.yaml"
    config_path.write_text(f"content_dir: {tmp_path / 'content'}\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        routes(config=config_path, mode="production")
    assert excinfo.value.code == 1
    assert "Unknown sidebar section 'cloud'" in capsys.readouterr().err
