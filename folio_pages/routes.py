"""Map request paths to the two pages the site serves.

The site has a main single-page layout at ``/`` and a gallery page at
``/blog``. Any other path falls back to the main layout, matching the static
host rewriting unknown paths to the root document.

Examples
--------
>>> switch = RouteSwitch()
>>> switch.resolve("/blog/").page
'blog'
>>> switch.resolve("/anything?x=1").page
'portfolio'
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import typing as typ
from pathlib import Path
from urllib.parse import urlsplit

from ._constants import BLOG_PATH, ROOT_PATH

PageKey = typ.Literal["portfolio", "blog"]


@dc.dataclass(frozen=True, slots=True)
class Route:
    """A path served by the site and the page rendered for it."""

    path: str
    page: PageKey

    def output_path(self, public_dir: Path) -> Path:
        """Return the static file written for this route under ``public_dir``."""
        relative = self.path.strip("/")
        if not relative:
            return public_dir / "index.html"
        return public_dir / relative / "index.html"


class RouteSwitch:
    """Choose between the main layout and the gallery page for a path."""

    def __init__(self, secondary_path: str = BLOG_PATH) -> None:
        self.main = Route(path=ROOT_PATH, page="portfolio")
        self.secondary = Route(path=normalize_path(secondary_path), page="blog")
        if self.secondary.path == ROOT_PATH:
            msg = "The gallery page cannot be mounted at the root path."
            raise ValueError(msg)

    @property
    def routes(self) -> tuple[Route, Route]:
        """Return the defined routes, main layout first."""
        return (self.main, self.secondary)

    def resolve(self, path: str) -> Route:
        """Return the gallery route iff ``path`` is the secondary path."""
        if normalize_path(path) == self.secondary.path:
            return self.secondary
        return self.main


def normalize_path(path: str) -> str:
    """Strip query, fragment, ``index.html`` and trailing slashes from ``path``."""
    raw = urlsplit(path).path or ROOT_PATH
    if not raw.startswith("/"):
        raw = f"/{raw}"
    normalized = posixpath.normpath(raw)
    if posixpath.basename(normalized) == "index.html":
        normalized = posixpath.dirname(normalized)
    normalized = normalized.rstrip("/")
    return normalized or ROOT_PATH


__all__ = ["PageKey", "Route", "RouteSwitch", "normalize_path"]
