"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from folio_pages._constants import BLOG_PATH, ROOT_PATH
from folio_pages.routes import normalize_path

from .blog import _build_blog_config
from .models import SiteConfig, SiteConfigError
from .portfolio import _build_portfolio_config


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing the portfolio and blog content.

    Parameters
    ----------
    path : Path
        Filesystem path to the content file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed site configuration with the portfolio layout, blog page, and
        output settings.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from folio_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.portfolio.section_registry().first  # doctest: +SKIP
    'about'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    site = raw.get("site", {}) or {}

    portfolio_raw = raw.get("portfolio")
    if not portfolio_raw:
        msg = "Site configuration requires a 'portfolio' block."
        raise SiteConfigError(msg)
    blog_raw = raw.get("blog")
    if not blog_raw:
        msg = "Site configuration requires a 'blog' block."
        raise SiteConfigError(msg)

    blog_path = normalize_path(str(site.get("blog_path", BLOG_PATH)))
    if blog_path == ROOT_PATH:
        msg = "Site 'blog_path' must not be the root path."
        raise SiteConfigError(msg)

    assets_dir = site.get("assets_dir")
    return SiteConfig(
        portfolio=_build_portfolio_config(portfolio_raw),
        blog=_build_blog_config(blog_raw),
        output_dir=Path(site.get("output_dir", "public")),
        blog_path=blog_path,
        assets_dir=_resolve_relative(Path(assets_dir), path) if assets_dir else None,
    )


def _resolve_relative(candidate: Path, config_path: Path) -> Path:
    """Resolve ``candidate`` against the directory holding the config file."""
    if candidate.is_absolute():
        return candidate
    return config_path.parent / candidate


__all__ = ["load_site_config"]
