"""Portfolio main-layout rendering pipeline.

This module turns the ``portfolio`` block of ``config/site.yaml`` into the
static ``public/index.html`` artefact. The layout owns the session state of
the page: the active section (written only by the scroll-spy tracker) and the
theme (flipped only by the navigation bar toggle). The builder renders the
initial value of both and serialises the tracker inputs for the client
script, so the markup and ``static/folio.js`` agree on section identifiers,
the visibility threshold, and the theme attribute.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> PortfolioPageBuilder(site).run(Path("public/index.html"))  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from ._constants import CLIENT_CONFIG_ELEMENT_ID, THEME_ATTRIBUTE, THEME_DARK_CLASS
from .navigation import NavigationBar
from .rendering import create_environment
from .state import ActiveSectionState, ThemeState
from .tracker import ActiveSectionTracker

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig
    from .sections import SectionRegistry


@dc.dataclass(slots=True)
class PortfolioLayout:
    """Root scope of the main layout and the state it owns."""

    registry: SectionRegistry
    active: ActiveSectionState
    theme: ThemeState
    tracker: ActiveSectionTracker
    navigation: NavigationBar

    @classmethod
    def create(cls, registry: SectionRegistry, *, dark: bool = True) -> PortfolioLayout:
        """Wire the state, tracker, and navigation bar for ``registry``."""
        active = ActiveSectionState(registry)
        theme = ThemeState(dark=dark)
        return cls(
            registry=registry,
            active=active,
            theme=theme,
            tracker=ActiveSectionTracker(registry, active),
            navigation=NavigationBar(registry, active, theme),
        )

    def teardown(self) -> None:
        """Release every visibility observer owned by the layout."""
        self.tracker.detach()

    def client_config(self, *, blog_path: str) -> dict[str, typ.Any]:
        """Return the JSON payload read by ``static/folio.js``."""
        return {
            "page": "portfolio",
            **self.tracker.client_config(),
            "scrollThreshold": self.navigation.scroll_threshold,
            "theme": self.theme.name,
            "themeClass": THEME_DARK_CLASS,
            "themeAttribute": THEME_ATTRIBUTE,
            "blogPath": blog_path,
        }


class PortfolioPageBuilder:
    """Render the main single-page layout from structured config data."""

    def __init__(self, site: SiteConfig, *, templates_dir: Path | None = None) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration; the ``portfolio`` block provides the
            navigation links and every content section.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``folio_pages/templates``.
        """
        self.site = site
        self.page = site.portfolio
        self.env = create_environment(templates_dir)
        self.template = self.env.get_template("portfolio_page.jinja")

    def render(self, *, now: dt.datetime | None = None) -> str:
        """Return the rendered HTML for the main layout."""
        generated_at = now or dt.datetime.now(dt.UTC)
        layout = PortfolioLayout.create(
            self.page.section_registry(), dark=self.page.dark_by_default
        )
        client_config = layout.client_config(blog_path=self.site.blog_path)
        context = {
            "page": self.page,
            "layout": layout,
            "nav_items": layout.navigation.items(),
            "document_root": layout.theme.root,
            "client_config_id": CLIENT_CONFIG_ELEMENT_ID,
            "client_config": client_config,
            "generated_at": generated_at,
            "year": generated_at.year,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output_path: Path) -> Path:
        """Render and write the main layout HTML, returning the output path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["PortfolioLayout", "PortfolioPageBuilder"]
