"""Behaviour tests for draft and redirect filtering.

These pytest-bdd scenarios are backed by ``features/draft_filtering.feature``.
They plan the shared sample content in each build mode and check which pages
and sidebar links survive.

Usage:
    pytest tests/bdd/test_draft_filtering.py -v
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from k6_docs.config import SiteConfig
from k6_docs.content import load_documents
from k6_docs.generator import DocsPageGenerator, SitePlan
from k6_docs.sidebar import find_node

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "draft_filtering.feature"
)
scenarios(FEATURE_FILE)

DRAFT_ROUTE = "/using-k6/draft-feature"
DRAFT_KEYS = ("guides", "Using k6", "Draft feature")


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _plan(scenario_state: dict[str, object]) -> SitePlan:
    plan = scenario_state["plan"]
    assert isinstance(plan, SitePlan), "the site must be planned first"
    return plan


@given("the sample documentation content")
def given_sample_content(
    site_config: SiteConfig, scenario_state: dict[str, object]
) -> None:
    """Store the site configuration pointing at the sample docs."""
    scenario_state["config"] = site_config


@when(parsers.parse("the site is planned for a {mode} build"))
def when_site_planned(mode: str, scenario_state: dict[str, object]) -> None:
    """Plan the site in the requested build mode."""
    config = scenario_state["config"]
    assert isinstance(config, SiteConfig)
    documents = load_documents(config.content_dir)
    generator = DocsPageGenerator(config, production=config.is_production(mode))
    scenario_state["plan"] = generator.plan(documents)


@then(parsers.parse("the draft page is {state}"))
def then_draft_page(state: str, scenario_state: dict[str, object]) -> None:
    """Check whether the draft route was planned."""
    present = DRAFT_ROUTE in _plan(scenario_state).routes()
    assert present is (state == "present"), f"expected draft page to be {state}"


@then(parsers.parse("the draft sidebar link is {state}"))
def then_draft_link(state: str, scenario_state: dict[str, object]) -> None:
    """Check whether the draft appears in the sidebar tree."""
    node = find_node(_plan(scenario_state).sidebar, DRAFT_KEYS)
    assert (node is not None) is (state == "present"), (
        f"expected draft sidebar link to be {state}"
    )


@then(parsers.parse('the route "{route}" is absent'))
def then_route_absent(route: str, scenario_state: dict[str, object]) -> None:
    """Ensure no page was planned for ``route``."""
    assert route not in _plan(scenario_state).routes()


@then(parsers.parse('the sidebar link "{title}" points at "{target}"'))
def then_sidebar_link_target(
    title: str, target: str, scenario_state: dict[str, object]
) -> None:
    """Ensure the sidebar entry for ``title`` carries its redirect target."""
    node = find_node(_plan(scenario_state).sidebar, ("guides", "Using k6", title))
    assert node is not None, f"missing sidebar entry {title!r}"
    assert node.data is not None
    assert node.data.redirect == target
