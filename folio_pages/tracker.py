"""Scroll-spy tracking of the section currently in view.

:class:`ActiveSectionTracker` attaches one visibility observer per tracked
section of a :class:`~folio_pages.sections.SectionRegistry`. Whenever an
observed section becomes visible past the threshold, the tracker writes its
identifier into the layout's :class:`~folio_pages.state.ActiveSectionState`.
Observers are collected in a :class:`SubscriptionArena` so tearing down the
layout releases all of them at once.

The viewport itself is abstracted behind :class:`ViewportHost`. In the browser
``static/folio.js`` plays that role with ``IntersectionObserver`` and reads its
inputs from :meth:`ActiveSectionTracker.client_config`.

Examples
--------
>>> from folio_pages.sections import SectionDescriptor, SectionRegistry
>>> from folio_pages.state import ActiveSectionState
>>> registry = SectionRegistry([SectionDescriptor("about", "about")])
>>> tracker = ActiveSectionTracker(registry, ActiveSectionState(registry))
>>> tracker.client_config()
{'sections': ['about'], 'threshold': 0.35}
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from ._constants import SECTION_VISIBILITY_THRESHOLD

if typ.TYPE_CHECKING:
    from .sections import SectionRegistry
    from .state import ActiveSectionState

Disposer = cabc.Callable[[], None]


@dc.dataclass(frozen=True, slots=True)
class VisibilityEntry:
    """One observer notification for a section."""

    identifier: str
    is_intersecting: bool
    ratio: float = 0.0


VisibilityCallback = cabc.Callable[[VisibilityEntry], None]


class ViewportHost(typ.Protocol):
    """Source of rendered section elements and visibility notifications."""

    def find_section(self, identifier: str) -> object | None:
        """Return the rendered element for ``identifier``, if any."""
        ...

    def observe(
        self,
        element: object,
        identifier: str,
        threshold: float,
        callback: VisibilityCallback,
    ) -> Disposer:
        """Start observing ``element`` and return a function that stops it."""
        ...


class SubscriptionArena:
    """Collect disposers so they can be released together."""

    def __init__(self) -> None:
        self._disposers: list[Disposer] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        """Return whether :meth:`dispose` has run."""
        return self._closed

    def add(self, disposer: Disposer) -> None:
        """Register ``disposer``; released immediately if already closed."""
        if self._closed:
            disposer()
            return
        self._disposers.append(disposer)

    def dispose(self) -> None:
        """Invoke every registered disposer once, newest first.

        A disposer that raises does not stop the rest from running; the first
        error is re-raised once every disposer has been called.
        """
        self._closed = True
        first_error: Exception | None = None
        while self._disposers:
            disposer = self._disposers.pop()
            try:
                disposer()
            except Exception as exc:  # noqa: BLE001 - re-raised after the loop
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    def __len__(self) -> int:
        return len(self._disposers)


class ActiveSectionTracker:
    """Keep the active section in step with viewport visibility.

    Parameters
    ----------
    registry : SectionRegistry
        Sections to observe. External entries are never observed.
    state : ActiveSectionState
        State written by the visibility callbacks. The tracker is its only
        writer.
    threshold : float, optional
        Fraction of a section's height that must be visible for it to count
        as in view. Defaults to 35%.
    """

    def __init__(
        self,
        registry: SectionRegistry,
        state: ActiveSectionState,
        *,
        threshold: float = SECTION_VISIBILITY_THRESHOLD,
    ) -> None:
        if not 0.0 <= threshold <= 1.0:
            msg = f"Visibility threshold must be within [0, 1], got {threshold!r}."
            raise ValueError(msg)
        self.registry = registry
        self.state = state
        self.threshold = threshold
        self._arena: SubscriptionArena | None = None

    @property
    def attached(self) -> bool:
        """Return whether observers are currently live."""
        return self._arena is not None and not self._arena.closed

    def attach(self, host: ViewportHost) -> SubscriptionArena:
        """Observe every rendered section and return the subscription arena.

        Sections without a rendered element are skipped without error.

        Raises
        ------
        RuntimeError
            If the tracker is already attached.
        """
        if self.attached:
            msg = "Tracker is already attached; detach it before re-attaching."
            raise RuntimeError(msg)
        arena = SubscriptionArena()
        self._arena = arena
        for identifier in self.registry.identifiers:
            element = host.find_section(identifier)
            if element is None:
                continue
            callback = self._callback_for(arena, identifier)
            disposer = host.observe(element, identifier, self.threshold, callback)
            arena.add(disposer)
        return arena

    def detach(self) -> None:
        """Release all observers. Safe to call when not attached."""
        if self._arena is None:
            return
        try:
            self._arena.dispose()
        finally:
            self._arena = None

    def _callback_for(
        self, arena: SubscriptionArena, identifier: str
    ) -> VisibilityCallback:
        def on_visibility(entry: VisibilityEntry) -> None:
            # Late notifications from a torn-down arena must not write state.
            if arena.closed or not entry.is_intersecting:
                return
            self.state.set(identifier)

        return on_visibility

    def client_config(self) -> dict[str, typ.Any]:
        """Return the tracker inputs serialised for ``static/folio.js``."""
        return {
            "sections": list(self.registry.identifiers),
            "threshold": self.threshold,
        }


__all__ = [
    "ActiveSectionTracker",
    "Disposer",
    "SubscriptionArena",
    "ViewportHost",
    "VisibilityCallback",
    "VisibilityEntry",
]
