"""Session state owned by the page layouts.

The main layout owns the active section and the theme; the gallery page owns
the lightbox selection. Each value has exactly one setter, and nothing else
writes it. The generated HTML is rendered from the initial values, and
``static/folio.js`` applies the same transitions in the browser.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import THEME_ATTRIBUTE, THEME_DARK_CLASS

if typ.TYPE_CHECKING:
    from .sections import SectionRegistry


class UnknownSectionError(ValueError):
    """Raised when a state write names a section outside the registry."""


class ActiveSectionState:
    """Identifier of the section currently deemed in view.

    The value starts at the registry's first internal section and only ever
    holds identifiers of internal sections from that registry.
    """

    def __init__(self, registry: SectionRegistry) -> None:
        self._registry = registry
        self._value = registry.first

    @property
    def value(self) -> str:
        """Return the active section identifier."""
        return self._value

    def set(self, identifier: str) -> bool:
        """Make ``identifier`` the active section.

        Returns
        -------
        bool
            ``True`` when the value changed.

        Raises
        ------
        UnknownSectionError
            If ``identifier`` is not an internal section of the registry.
        """
        if not self._registry.is_tracked(identifier):
            msg = f"'{identifier}' is not a tracked section."
            raise UnknownSectionError(msg)
        changed = identifier != self._value
        self._value = identifier
        return changed

    def is_active(self, identifier: str) -> bool:
        """Return whether ``identifier`` is the active section."""
        return identifier == self._value


@dc.dataclass(slots=True)
class DocumentRoot:
    """Class list and attributes written onto the ``<html>`` element."""

    classes: set[str] = dc.field(default_factory=set)
    attributes: dict[str, str] = dc.field(default_factory=dict)

    def toggle_class(self, name: str, *, enabled: bool) -> None:
        """Add or remove ``name`` from the class list."""
        if enabled:
            self.classes.add(name)
        else:
            self.classes.discard(name)

    @property
    def class_attr(self) -> str:
        """Return the class list as a space-separated attribute value."""
        return " ".join(sorted(self.classes))


class ThemeState:
    """Dark/light flag mirrored onto the document root on every change.

    Examples
    --------
    >>> theme = ThemeState(dark=True)
    >>> theme.toggle()
    False
    >>> theme.root.attributes["data-theme"]
    'light'
    """

    def __init__(self, *, dark: bool = True, root: DocumentRoot | None = None) -> None:
        self.root = root if root is not None else DocumentRoot()
        self._dark = bool(dark)
        self._apply()

    @property
    def dark(self) -> bool:
        """Return whether the dark theme is active."""
        return self._dark

    @property
    def name(self) -> str:
        """Return ``"dark"`` or ``"light"``."""
        return "dark" if self._dark else "light"

    def toggle(self) -> bool:
        """Flip the theme, update the document root, and return the new flag."""
        self._dark = not self._dark
        self._apply()
        return self._dark

    def _apply(self) -> None:
        self.root.toggle_class(THEME_DARK_CLASS, enabled=self._dark)
        self.root.attributes[THEME_ATTRIBUTE] = self.name


@dc.dataclass(frozen=True, slots=True)
class GalleryImageRef:
    """Source and alternative text of one enlarged gallery image."""

    source: str
    alt_text: str


class GallerySelection:
    """At most one image shown in the lightbox overlay."""

    def __init__(self) -> None:
        self._current: GalleryImageRef | None = None

    @property
    def current(self) -> GalleryImageRef | None:
        """Return the selected image, or ``None`` when the lightbox is closed."""
        return self._current

    @property
    def is_open(self) -> bool:
        """Return whether the lightbox overlay is mounted."""
        return self._current is not None

    def select(self, source: str, alt_text: str) -> GalleryImageRef:
        """Open the lightbox on the given image, replacing any selection."""
        self._current = GalleryImageRef(source=source, alt_text=alt_text)
        return self._current

    def dismiss(self) -> None:
        """Close the lightbox. Dismissing a closed lightbox is a no-op."""
        self._current = None

    def click(self, target: OverlayTarget) -> bool:
        """Apply a click on part of the overlay and return whether it closed.

        Clicks on the backdrop or the close control dismiss the lightbox;
        clicks on the enlarged image itself are ignored.
        """
        if target == "image" or self._current is None:
            return False
        self.dismiss()
        return True


OverlayTarget = typ.Literal["backdrop", "close", "image"]


__all__ = [
    "ActiveSectionState",
    "DocumentRoot",
    "GalleryImageRef",
    "GallerySelection",
    "OverlayTarget",
    "ThemeState",
    "UnknownSectionError",
]
