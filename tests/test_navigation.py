"""Unit tests for the navigation bar model."""

from __future__ import annotations

import pytest

from folio_pages.navigation import NavigationBar, OpenExternal, ScrollTo
from folio_pages.sections import SectionRegistry
from folio_pages.state import ActiveSectionState, ThemeState


@pytest.fixture
def nav(registry: SectionRegistry) -> NavigationBar:
    return NavigationBar(registry, ActiveSectionState(registry), ThemeState())


def test_items_mark_the_active_section(nav: NavigationBar) -> None:
    items = nav.items()
    assert [item.identifier for item in items if item.is_active] == ["about"]
    nav.active.set("experience")
    active = [item.identifier for item in nav.items() if item.is_active]
    assert active == ["experience"]


def test_items_expose_hrefs(nav: NavigationBar) -> None:
    by_id = {item.identifier: item for item in nav.items()}
    assert by_id["cp-life"].href == "#cp-life"
    assert by_id["cp-life"].label == "programming"
    assert by_id["blog"].href == "/blog"
    assert by_id["blog"].external


def test_activate_internal_scrolls_and_closes_menu(nav: NavigationBar) -> None:
    nav.toggle_menu()
    assert nav.menu_open
    assert nav.activate("skills") == ScrollTo("skills")
    assert not nav.menu_open


def test_activate_external_leaves_state_alone(nav: NavigationBar) -> None:
    nav.toggle_menu()
    nav.active.set("resume")
    assert nav.activate("blog") == OpenExternal("/blog")
    assert nav.active.value == "resume"
    assert nav.menu_open


def test_activate_unknown_entry_raises(nav: NavigationBar) -> None:
    with pytest.raises(KeyError):
        nav.activate("nowhere")


@pytest.mark.parametrize(
    ("offset", "expected"),
    [(0, False), (20, False), (20.5, True), (400, True)],
)
def test_scrolled_flips_past_threshold(
    nav: NavigationBar, offset: float, expected: bool
) -> None:
    assert nav.on_scroll(offset) is expected


def test_theme_toggle_goes_through_theme_state(nav: NavigationBar) -> None:
    assert nav.toggle_theme() is False
    assert nav.theme.root.attributes["data-theme"] == "light"
    assert nav.toggle_theme() is True


def test_item_tone_prefers_active_over_hover(nav: NavigationBar) -> None:
    nav.hover("about")
    assert nav.item_tone("about") == "active"
    nav.hover("projects")
    assert nav.item_tone("projects") == "hover"
    nav.hover(None)
    assert nav.item_tone("projects") == "idle"


def test_items_carry_the_tone_of_each_control(nav: NavigationBar) -> None:
    nav.hover("projects")
    tones = {item.identifier: item.tone for item in nav.items()}
    assert tones["about"] == "active"
    assert tones["projects"] == "hover"
    assert tones["skills"] == "idle"
    nav.active.set("projects")
    assert {item.identifier: item.tone for item in nav.items()}["projects"] == "active"
