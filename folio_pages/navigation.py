"""Navigation bar model for the portfolio layout.

The bar renders one control per registered section, highlights the active
one, and owns two small pieces of presentational state of its own: whether
the mobile menu is open and whether the page has scrolled past the point
where the bar gains a solid background. Hover styling is a lookup on state
(:meth:`NavigationBar.item_tone`) rather than direct style mutation; each
rendered control carries its tone as an ``is-<tone>`` class, and
``static/folio.js`` swaps those classes as the pointer and the active section
move.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import NAV_SCROLL_THRESHOLD_PX

if typ.TYPE_CHECKING:
    from .sections import SectionRegistry
    from .state import ActiveSectionState, ThemeState

ItemTone = typ.Literal["active", "hover", "idle"]


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """Rendered navigation control."""

    identifier: str
    label: str
    href: str
    is_active: bool
    external: bool
    tone: ItemTone = "idle"


@dc.dataclass(frozen=True, slots=True)
class ScrollTo:
    """Smooth-scroll the viewport to a section of the main layout."""

    identifier: str


@dc.dataclass(frozen=True, slots=True)
class OpenExternal:
    """Open a location in a new browsing context."""

    target: str


NavAction = ScrollTo | OpenExternal


class NavigationBar:
    """Navigation controls bound to the layout's active section and theme.

    Parameters
    ----------
    registry : SectionRegistry
        Sections to render, in order.
    active : ActiveSectionState
        Read-only from the bar's point of view; the tracker writes it.
    theme : ThemeState
        Flipped through :meth:`toggle_theme`.
    scroll_threshold : int, optional
        Offset in pixels past which :attr:`scrolled` becomes true.
    """

    def __init__(
        self,
        registry: SectionRegistry,
        active: ActiveSectionState,
        theme: ThemeState,
        *,
        scroll_threshold: int = NAV_SCROLL_THRESHOLD_PX,
    ) -> None:
        self.registry = registry
        self.active = active
        self.theme = theme
        self.scroll_threshold = scroll_threshold
        self.menu_open = False
        self.scrolled = False
        self.hovered: str | None = None

    def items(self) -> list[NavItem]:
        """Return one control per descriptor with the active entry marked."""
        return [
            NavItem(
                identifier=entry.identifier,
                label=entry.label,
                href=entry.href,
                is_active=self.active.is_active(entry.identifier),
                external=entry.is_external_link,
                tone=self.item_tone(entry.identifier),
            )
            for entry in self.registry
        ]

    def activate(self, identifier: str) -> NavAction:
        """Resolve a click on the control for ``identifier``.

        Internal sections scroll into view and close the mobile menu. External
        entries open their target elsewhere and leave the active section and
        the menu untouched.

        Raises
        ------
        KeyError
            If ``identifier`` is not registered.
        """
        entry = self.registry.get(identifier)
        if entry is None:
            msg = f"Unknown navigation entry '{identifier}'."
            raise KeyError(msg)
        if entry.external_target is not None:
            return OpenExternal(entry.external_target)
        self.menu_open = False
        return ScrollTo(entry.identifier)

    def toggle_menu(self) -> bool:
        """Open or close the mobile menu and return the new state."""
        self.menu_open = not self.menu_open
        return self.menu_open

    def toggle_theme(self) -> bool:
        """Flip the page theme; returns ``True`` when dark mode is now on."""
        return self.theme.toggle()

    def on_scroll(self, offset: float) -> bool:
        """Record the page scroll offset and return the ``scrolled`` flag."""
        self.scrolled = offset > self.scroll_threshold
        return self.scrolled

    def hover(self, identifier: str | None) -> None:
        """Track the control under the pointer (``None`` when it leaves)."""
        self.hovered = identifier

    def item_tone(self, identifier: str) -> ItemTone:
        """Return the style bucket for a control."""
        if self.active.is_active(identifier):
            return "active"
        if self.hovered == identifier:
            return "hover"
        return "idle"


__all__ = [
    "ItemTone",
    "NavAction",
    "NavItem",
    "NavigationBar",
    "OpenExternal",
    "ScrollTo",
]
