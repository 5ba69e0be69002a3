"""Ordered registry of the sections exposed by the portfolio page.

The registry is built once from the navigation block of ``config/site.yaml``
and never changes afterwards. Internal sections are tracked for visibility
and scrolled to from the navigation bar; external entries (such as the blog)
only appear as navigation links that open another page.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class SectionRegistryError(ValueError):
    """Raised when section descriptors cannot form a valid registry."""


@dc.dataclass(frozen=True, slots=True)
class SectionDescriptor:
    """Identity and link behaviour of one navigable section."""

    identifier: str
    label: str
    external_target: str | None = None

    @property
    def is_external_link(self) -> bool:
        """Return whether activating the entry leaves the main layout."""
        return self.external_target is not None

    @property
    def href(self) -> str:
        """Return the anchor or external location for the entry."""
        return self.external_target or f"#{self.identifier}"


class SectionRegistry:
    """Immutable, ordered collection of section descriptors.

    Parameters
    ----------
    descriptors : Iterable[SectionDescriptor]
        Entries in navigation order.

    Raises
    ------
    SectionRegistryError
        If an identifier is blank or repeated, or if no internal section is
        present to serve as the default active section.

    Examples
    --------
    >>> registry = SectionRegistry(
    ...     [
    ...         SectionDescriptor("about", "about"),
    ...         SectionDescriptor("blog", "blog", "/blog"),
    ...     ]
    ... )
    >>> registry.first, registry.identifiers
    ('about', ('about',))
    """

    def __init__(self, descriptors: cabc.Iterable[SectionDescriptor]) -> None:
        entries = tuple(descriptors)
        seen: set[str] = set()
        for entry in entries:
            if not entry.identifier.strip():
                msg = "Section identifiers must be non-empty."
                raise SectionRegistryError(msg)
            if entry.identifier in seen:
                msg = f"Duplicate section identifier '{entry.identifier}'."
                raise SectionRegistryError(msg)
            seen.add(entry.identifier)
        tracked = tuple(e.identifier for e in entries if not e.is_external_link)
        if not tracked:
            msg = "Section registry requires at least one internal section."
            raise SectionRegistryError(msg)
        self._entries = entries
        self._tracked = tracked
        self._by_id = {entry.identifier: entry for entry in entries}

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Return identifiers of the internal, visibility-tracked sections."""
        return self._tracked

    @property
    def first(self) -> str:
        """Return the identifier that is active before any scrolling."""
        return self._tracked[0]

    def get(self, identifier: str) -> SectionDescriptor | None:
        """Return the descriptor for ``identifier`` if registered."""
        return self._by_id.get(identifier)

    def is_tracked(self, identifier: str) -> bool:
        """Return whether ``identifier`` names an internal section."""
        return identifier in self._tracked

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_id

    def __iter__(self) -> cabc.Iterator[SectionDescriptor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        ids = ", ".join(entry.identifier for entry in self._entries)
        return f"SectionRegistry([{ids}])"


__all__ = ["SectionDescriptor", "SectionRegistry", "SectionRegistryError"]
