"""Blog gallery page rendering pipeline.

The blog page is a "coming soon" notice followed by labelled groups of
photos. Activating a thumbnail opens a lightbox overlay; the backdrop and the
close control dismiss it. The page owns a
:class:`~folio_pages.state.GallerySelection`; the overlay markup is only
mounted while a selection is present. The generated page starts without one
and ``static/folio.js`` mounts the overlay client-side.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from ._constants import CLIENT_CONFIG_ELEMENT_ID
from .rendering import create_environment
from .state import GallerySelection, ThemeState

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import BlogPageConfig, SiteConfig


@dc.dataclass(frozen=True, slots=True)
class Thumbnail:
    """One gallery image as rendered in the grid."""

    key: str
    source: str
    alt_text: str
    position: int


@dc.dataclass(frozen=True, slots=True)
class GalleryGroup:
    """Labelled category of thumbnails, in authored order."""

    key: str
    label: str
    emoji: str
    thumbnails: list[Thumbnail]


def build_gallery(blog: BlogPageConfig) -> list[GalleryGroup]:
    """Flatten the configured categories into render-ready groups."""
    groups: list[GalleryGroup] = []
    position = 0
    for category in blog.categories:
        thumbnails: list[Thumbnail] = []
        for index, image in enumerate(category.images, start=1):
            thumbnails.append(
                Thumbnail(
                    key=f"{category.key}-{index}",
                    source=image.src,
                    alt_text=image.alt,
                    position=position,
                )
            )
            position += 1
        groups.append(
            GalleryGroup(
                key=category.key,
                label=category.label,
                emoji=category.emoji,
                thumbnails=thumbnails,
            )
        )
    return groups


class BlogPageBuilder:
    """Render the gallery page from structured config data."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        templates_dir: Path | None = None,
        selection: GallerySelection | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration; the ``blog`` block provides the copy and
            gallery categories.
        templates_dir : Path, optional
            Directory containing Jinja templates.
        selection : GallerySelection, optional
            Lightbox state to render. Defaults to an empty selection.
        """
        self.site = site
        self.blog = site.blog
        self.selection = selection or GallerySelection()
        self.env = create_environment(templates_dir)
        self.template = self.env.get_template("blog_page.jinja")

    def render(self, *, now: dt.datetime | None = None) -> str:
        """Return the rendered HTML for the gallery page."""
        generated_at = now or dt.datetime.now(dt.UTC)
        root = ThemeState(dark=True).root
        context = {
            "blog": self.blog,
            "groups": build_gallery(self.blog),
            "lightbox": self.selection.current,
            "document_root": root,
            "client_config_id": CLIENT_CONFIG_ELEMENT_ID,
            "client_config": {"page": "blog"},
            "generated_at": generated_at,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output_path: Path) -> Path:
        """Render and write the gallery HTML, returning the output path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["BlogPageBuilder", "GalleryGroup", "Thumbnail", "build_gallery"]
