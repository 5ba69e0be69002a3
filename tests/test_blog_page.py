"""Rendering tests for the blog gallery page."""

from __future__ import annotations

import json
import typing as typ

from bs4 import BeautifulSoup

from folio_pages.blog_page import BlogPageBuilder, build_gallery
from folio_pages.state import GallerySelection

if typ.TYPE_CHECKING:
    from folio_pages.config import SiteConfig


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_gallery_groups_keep_authored_order(site_config: SiteConfig) -> None:
    groups = build_gallery(site_config.blog)
    assert [group.key for group in groups] == [
        "football",
        "chess",
        "marathon",
        "hiking",
    ]
    positions = [thumb.position for group in groups for thumb in group.thumbnails]
    assert positions == list(range(12))
    assert groups[1].thumbnails[0].key == "chess-1"
    assert groups[1].thumbnails[0].alt_text == "Chess photo 1"


def test_thumbnails_expose_lightbox_hooks(site_config: SiteConfig) -> None:
    soup = _soup(BlogPageBuilder(site_config).render())
    thumbs = soup.select("[data-lightbox-src]")
    assert len(thumbs) == 12
    first = thumbs[0]
    assert first["data-lightbox-src"].startswith("https://images.unsplash.com/")
    assert first["data-lightbox-alt"] == "Football photo 1"
    image = first.find("img")
    assert image is not None
    assert image.has_attr("data-hide-on-error")


def test_lightbox_not_mounted_without_selection(site_config: SiteConfig) -> None:
    soup = _soup(BlogPageBuilder(site_config).render())
    assert soup.select("[data-lightbox]") == []


def test_lightbox_mounted_for_selection(site_config: SiteConfig) -> None:
    selection = GallerySelection()
    selection.select("hike.jpg", "Hiking photo 2")
    soup = _soup(BlogPageBuilder(site_config, selection=selection).render())
    overlays = soup.select("[data-lightbox]")
    assert len(overlays) == 1
    image = overlays[0].select_one("[data-lightbox-image]")
    assert image is not None
    assert (image["src"], image["alt"]) == ("hike.jpg", "Hiking photo 2")
    assert overlays[0].select_one("[data-lightbox-dismiss='close']") is not None


def test_copy_and_back_link(site_config: SiteConfig) -> None:
    soup = _soup(BlogPageBuilder(site_config).render())
    status = soup.select_one("[data-test='blog-status']")
    assert status is not None
    assert "Check back soon!" in status.get_text()
    back = soup.select_one("[data-test='back-link']")
    assert back is not None
    assert back["href"] == "/"
    assert "Back to Portfolio" in back.get_text()


def test_blog_client_config(site_config: SiteConfig) -> None:
    soup = _soup(BlogPageBuilder(site_config).render())
    node = soup.find("script", id="folio-config")
    assert node is not None
    assert json.loads(node.string or "") == {"page": "blog"}
    html = soup.find("html")
    assert html is not None
    assert html["data-theme"] == "dark"
