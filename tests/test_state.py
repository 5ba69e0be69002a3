"""Unit tests for the session state owned by the page layouts."""

from __future__ import annotations

import pytest

from folio_pages.sections import SectionRegistry
from folio_pages.state import (
    ActiveSectionState,
    DocumentRoot,
    GalleryImageRef,
    GallerySelection,
    ThemeState,
    UnknownSectionError,
)


def test_active_section_defaults_to_first(registry: SectionRegistry) -> None:
    state = ActiveSectionState(registry)
    assert state.value == "about"
    assert state.is_active("about")


def test_active_section_reports_changes(registry: SectionRegistry) -> None:
    state = ActiveSectionState(registry)
    assert state.set("skills") is True
    assert state.set("skills") is False
    assert state.value == "skills"


@pytest.mark.parametrize("identifier", ["blog", "missing"])
def test_active_section_rejects_untracked(
    registry: SectionRegistry, identifier: str
) -> None:
    state = ActiveSectionState(registry)
    with pytest.raises(UnknownSectionError):
        state.set(identifier)
    assert state.value == "about"


def test_unknown_section_error_message_is_unquoted(
    registry: SectionRegistry,
) -> None:
    state = ActiveSectionState(registry)
    with pytest.raises(ValueError, match="is not a tracked section") as excinfo:
        state.set("missing")
    assert isinstance(excinfo.value, UnknownSectionError)
    assert str(excinfo.value) == "'missing' is not a tracked section."


@pytest.mark.parametrize("dark", [True, False])
def test_theme_double_toggle_round_trips(dark: bool) -> None:
    theme = ThemeState(dark=dark)
    seen: list[tuple[bool, str, bool]] = []
    for _ in range(2):
        theme.toggle()
        seen.append(
            (
                theme.dark,
                theme.root.attributes["data-theme"],
                "dark" in theme.root.classes,
            )
        )
    assert seen[0] == (not dark, "light" if dark else "dark", not dark)
    assert seen[1] == (dark, "dark" if dark else "light", dark)


def test_theme_writes_initial_state_to_root() -> None:
    root = DocumentRoot(classes={"js"})
    theme = ThemeState(dark=True, root=root)
    assert theme.name == "dark"
    assert root.class_attr == "dark js"
    assert root.attributes == {"data-theme": "dark"}


def test_gallery_selection_lifecycle() -> None:
    selection = GallerySelection()
    assert selection.current is None
    assert not selection.is_open

    selection.select("chess-1.jpg", "Chess photo 1")
    assert selection.current == GalleryImageRef("chess-1.jpg", "Chess photo 1")

    selection.select("chess-2.jpg", "Chess photo 2")
    assert selection.current == GalleryImageRef("chess-2.jpg", "Chess photo 2")

    selection.dismiss()
    assert selection.current is None


def test_gallery_click_on_image_keeps_overlay() -> None:
    selection = GallerySelection()
    selection.select("run.jpg", "Marathon Running photo 1")
    assert selection.click("image") is False
    assert selection.is_open


@pytest.mark.parametrize("target", ["backdrop", "close"])
def test_gallery_click_outside_image_dismisses(target: str) -> None:
    selection = GallerySelection()
    selection.select("hike.jpg", "Hiking photo 1")
    assert selection.click(target) is True  # type: ignore[arg-type]
    assert selection.current is None


def test_gallery_click_when_closed_is_noop() -> None:
    selection = GallerySelection()
    assert selection.click("backdrop") is False
