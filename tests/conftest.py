"""Shared fixtures for the folio_pages test suite.

``FakeViewport`` stands in for the browser when exercising the scroll-spy
tracker: tests register which sections are rendered, then push visibility
notifications through :meth:`FakeViewport.emit`. The ``site_config`` fixture
loads the repository's ``config/site.yaml`` with asset copying disabled so
builders can run inside ``tmp_path``.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest

from folio_pages.config import load_site_config
from folio_pages.sections import SectionDescriptor, SectionRegistry
from folio_pages.tracker import VisibilityEntry

if typ.TYPE_CHECKING:
    from folio_pages.config import SiteConfig
    from folio_pages.tracker import Disposer, VisibilityCallback

REPO_ROOT = Path(__file__).resolve().parents[1]
SITE_CONFIG_PATH = REPO_ROOT / "config" / "site.yaml"


@dc.dataclass(slots=True)
class Observation:
    """One live observer registered with :class:`FakeViewport`."""

    identifier: str
    threshold: float
    callback: VisibilityCallback
    active: bool = True


class FakeViewport:
    """In-memory viewport host that records observers and replays events."""

    def __init__(self, rendered: typ.Iterable[str]) -> None:
        self.rendered = set(rendered)
        self.observations: list[Observation] = []
        self.stale: list[Observation] = []

    def find_section(self, identifier: str) -> object | None:
        """Return a token for rendered sections and ``None`` otherwise."""
        if identifier in self.rendered:
            return f"<section id={identifier}>"
        return None

    def observe(
        self,
        element: object,
        identifier: str,
        threshold: float,
        callback: VisibilityCallback,
    ) -> Disposer:
        """Record an observer and return its disposer."""
        observation = Observation(identifier, threshold, callback)
        self.observations.append(observation)

        def dispose() -> None:
            observation.active = False
            self.observations.remove(observation)
            self.stale.append(observation)

        return dispose

    @property
    def observed(self) -> list[str]:
        """Return identifiers with a live observer, in registration order."""
        return [observation.identifier for observation in self.observations]

    def emit(self, identifier: str, *, ratio: float) -> None:
        """Notify the observers of ``identifier`` that its visibility changed."""
        for observation in list(self.observations):
            if observation.identifier != identifier:
                continue
            entry = VisibilityEntry(
                identifier=identifier,
                is_intersecting=ratio >= observation.threshold,
                ratio=ratio,
            )
            observation.callback(entry)

    def emit_stale(self, identifier: str, *, ratio: float) -> None:
        """Replay a notification through an observer that was already disposed."""
        for observation in self.stale:
            if observation.identifier == identifier:
                observation.callback(
                    VisibilityEntry(identifier, is_intersecting=True, ratio=ratio)
                )


@pytest.fixture
def registry() -> SectionRegistry:
    """Return the portfolio's section registry with the external blog link."""
    return SectionRegistry(
        [
            SectionDescriptor("about", "about"),
            SectionDescriptor("cp-life", "programming"),
            SectionDescriptor("projects", "projects"),
            SectionDescriptor("skills", "skills"),
            SectionDescriptor("experience", "experience"),
            SectionDescriptor("resume", "resume"),
            SectionDescriptor("blog", "blog", "/blog"),
            SectionDescriptor("connect", "connect"),
        ]
    )


@pytest.fixture
def site_config() -> SiteConfig:
    """Load ``config/site.yaml`` without the authored assets directory."""
    return dc.replace(load_site_config(SITE_CONFIG_PATH), assets_dir=None)


@pytest.fixture
def make_viewport() -> typ.Callable[..., FakeViewport]:
    """Return a factory building viewports with the given rendered sections."""
    return FakeViewport
