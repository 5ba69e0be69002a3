"""Load and validate the portfolio content YAML.

This subpackage parses the project's ``site.yaml`` file and produces strongly
typed dataclasses (:class:`SiteConfig`, :class:`PortfolioPageConfig`,
:class:`BlogPageConfig`, etc.) that the page builders consume. The primary
entry point is :func:`load_site_config`, which ensures required fields are
present, applies defaults, and returns a :class:`SiteConfig` ready for
rendering.

Examples
--------
>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> [link.section for link in site.portfolio.nav_links][:2]  # doctest: +SKIP
['about', 'cp-life']
"""

from .loader import load_site_config
from .models import (
    AboutSectionConfig,
    AwardConfig,
    BlogPageConfig,
    ConnectSectionConfig,
    ContestConfig,
    EducationEntryConfig,
    ExperienceSectionConfig,
    FooterConfig,
    GalleryCategoryConfig,
    GalleryImageConfig,
    ImageConfig,
    LevelStyleConfig,
    NavLinkConfig,
    PlatformCardConfig,
    PortfolioPageConfig,
    ProgrammingSectionConfig,
    ProjectConfig,
    ProjectsSectionConfig,
    ResumeSectionConfig,
    SectionHeaderConfig,
    SiteConfig,
    SiteConfigError,
    SkillConfig,
    SkillsSectionConfig,
    SocialLinkConfig,
)

__all__ = [
    "AboutSectionConfig",
    "AwardConfig",
    "BlogPageConfig",
    "ConnectSectionConfig",
    "ContestConfig",
    "EducationEntryConfig",
    "ExperienceSectionConfig",
    "FooterConfig",
    "GalleryCategoryConfig",
    "GalleryImageConfig",
    "ImageConfig",
    "LevelStyleConfig",
    "NavLinkConfig",
    "PlatformCardConfig",
    "PortfolioPageConfig",
    "ProgrammingSectionConfig",
    "ProjectConfig",
    "ProjectsSectionConfig",
    "ResumeSectionConfig",
    "SectionHeaderConfig",
    "SiteConfig",
    "SiteConfigError",
    "SkillConfig",
    "SkillsSectionConfig",
    "SocialLinkConfig",
    "load_site_config",
]
