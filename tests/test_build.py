"""Tests for rendering every route into an output directory."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest

from folio_pages.blog_page import BlogPageBuilder
from folio_pages.build import build_site, builder_for, copy_static_assets
from folio_pages.portfolio_page import PortfolioPageBuilder
from folio_pages.routes import Route

if typ.TYPE_CHECKING:
    from pathlib import Path

    from folio_pages.config import SiteConfig


def test_build_site_writes_both_routes(site_config: SiteConfig, tmp_path: Path) -> None:
    written = build_site(site_config, output_dir=tmp_path)
    assert written[:2] == [tmp_path / "index.html", tmp_path / "blog" / "index.html"]
    assert (tmp_path / "static" / "folio.js").is_file()
    assert (tmp_path / "static" / "folio.css").is_file()
    portfolio_html = (tmp_path / "index.html").read_text(encoding="utf-8")
    blog_html = (tmp_path / "blog" / "index.html").read_text(encoding="utf-8")
    assert 'data-section="about"' in portfolio_html
    assert "data-lightbox-src" in blog_html


def test_build_site_honours_custom_blog_path(
    site_config: SiteConfig, tmp_path: Path
) -> None:
    site = dc.replace(site_config, blog_path="/gallery")
    build_site(site, output_dir=tmp_path)
    assert (tmp_path / "gallery" / "index.html").is_file()
    assert not (tmp_path / "blog").exists()


def test_builder_for_each_page(site_config: SiteConfig) -> None:
    portfolio = builder_for(site_config, Route("/", "portfolio"))
    blog = builder_for(site_config, Route("/blog", "blog"))
    assert isinstance(portfolio, PortfolioPageBuilder)
    assert isinstance(blog, BlogPageBuilder)


def test_copy_static_assets_includes_authored_files(tmp_path: Path) -> None:
    assets = tmp_path / "assets"
    (assets / "image").mkdir(parents=True)
    (assets / "image" / "Resume.pdf").write_bytes(b"%PDF-1.4\n")
    public = tmp_path / "public"
    copied = copy_static_assets(public, assets_dir=assets)
    assert copied == [public / "static", public]
    assert (public / "image" / "Resume.pdf").read_bytes() == b"%PDF-1.4\n"


def test_copy_static_assets_requires_existing_dir(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Assets directory"):
        copy_static_assets(tmp_path / "public", assets_dir=tmp_path / "missing")
