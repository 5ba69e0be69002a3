"""Render every route of the site into the output directory.

:func:`build_site` walks the :class:`~folio_pages.routes.RouteSwitch`, renders
the page each route resolves to, and copies the client script, stylesheet,
and any authored assets (profile photo, logos, résumé PDF) next to the HTML.
"""

from __future__ import annotations

import shutil
import typing as typ
from pathlib import Path

from ._constants import STATIC_DIRNAME
from .blog_page import BlogPageBuilder
from .portfolio_page import PortfolioPageBuilder
from .routes import RouteSwitch

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .routes import Route

PageBuilder = BlogPageBuilder | PortfolioPageBuilder
PACKAGE_STATIC_DIR = Path(__file__).parent / STATIC_DIRNAME


def route_switch_for(site: SiteConfig) -> RouteSwitch:
    """Return the route switch configured for ``site``."""
    return RouteSwitch(secondary_path=site.blog_path)


def builder_for(
    site: SiteConfig, route: Route, *, templates_dir: Path | None = None
) -> PageBuilder:
    """Return the builder for the page ``route`` resolves to."""
    match route.page:
        case "blog":
            return BlogPageBuilder(site, templates_dir=templates_dir)
        case _:
            return PortfolioPageBuilder(site, templates_dir=templates_dir)


def build_site(
    site: SiteConfig,
    *,
    output_dir: Path | None = None,
    templates_dir: Path | None = None,
) -> list[Path]:
    """Write both pages and the static assets, returning the written paths.

    Parameters
    ----------
    site : SiteConfig
        Parsed site configuration.
    output_dir : Path, optional
        Override for ``site.output_dir``.
    templates_dir : Path, optional
        Directory containing Jinja templates.

    Returns
    -------
    list[Path]
        The rendered HTML files, in route order, followed by the copied
        asset directories.
    """
    public_dir = output_dir or site.output_dir
    public_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for route in route_switch_for(site).routes:
        target = route.output_path(public_dir)
        builder = builder_for(site, route, templates_dir=templates_dir)
        written.append(builder.run(target))
    written.extend(copy_static_assets(public_dir, assets_dir=site.assets_dir))
    return written


def copy_static_assets(
    public_dir: Path, *, assets_dir: Path | None = None
) -> list[Path]:
    """Copy the bundled client files and the authored assets into ``public_dir``.

    Raises
    ------
    FileNotFoundError
        If ``assets_dir`` is configured but does not exist.
    """
    copied: list[Path] = []
    static_target = public_dir / STATIC_DIRNAME
    shutil.copytree(PACKAGE_STATIC_DIR, static_target, dirs_exist_ok=True)
    copied.append(static_target)
    if assets_dir is not None:
        if not assets_dir.is_dir():
            msg = f"Assets directory '{assets_dir}' not found."
            raise FileNotFoundError(msg)
        shutil.copytree(assets_dir, public_dir, dirs_exist_ok=True)
        copied.append(public_dir)
    return copied


__all__ = [
    "PageBuilder",
    "build_site",
    "builder_for",
    "copy_static_assets",
    "route_switch_for",
]
