"""Typed dataclasses describing the portfolio site content."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from folio_pages.sections import SectionDescriptor, SectionRegistry


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ImageConfig:
    """Image reference with alternative text."""

    src: str
    alt: str


@dc.dataclass(slots=True)
class SectionHeaderConfig:
    """Subtitle, heading, and optional intro shared by content sections."""

    subtitle: str
    title: str
    intro: str | None = None


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Navigation entry pointing at a section or an external page."""

    label: str
    section: str
    external: str | None = None

    def to_descriptor(self) -> SectionDescriptor:
        """Return the registry descriptor for this link."""
        return SectionDescriptor(
            identifier=self.section, label=self.label, external_target=self.external
        )


@dc.dataclass(slots=True)
class EducationEntryConfig:
    """One academic milestone in the About section."""

    level: str
    name: str
    year: str


@dc.dataclass(slots=True)
class AwardConfig:
    """Contest placement highlighted in the About section."""

    rank: str
    event: str
    description: str


@dc.dataclass(slots=True)
class AboutSectionConfig:
    """Hero copy, profile photo, education, and awards."""

    eyebrow: str
    greeting: str
    name: str
    tagline: str
    photo: ImageConfig
    education: list[EducationEntryConfig]
    awards: list[AwardConfig]
    education_heading: str = "Education"
    awards_heading: str = "Awards"


@dc.dataclass(slots=True)
class PlatformCardConfig:
    """Competitive programming judge profile."""

    emoji: str
    platform: str
    handle: str
    rating: str
    rating_label: str
    rating_color: str


@dc.dataclass(slots=True)
class ContestConfig:
    """Contest participation badge."""

    name: str
    description: str


@dc.dataclass(slots=True)
class ProgrammingSectionConfig:
    """Platform ratings and contest participations."""

    header: SectionHeaderConfig
    platforms: list[PlatformCardConfig]
    contests_heading: str
    contests: list[ContestConfig]


@dc.dataclass(slots=True)
class ProjectConfig:
    """Project card content."""

    title: str
    emoji: str
    description: str
    tech: list[str]
    github: str
    featured: bool = False


@dc.dataclass(slots=True)
class ProjectsSectionConfig:
    """Grid of project cards."""

    header: SectionHeaderConfig
    projects: list[ProjectConfig]


@dc.dataclass(slots=True)
class LevelStyleConfig:
    """Badge colours for one proficiency level."""

    color: str
    background: str
    border: str


@dc.dataclass(slots=True)
class SkillConfig:
    """Skill card content."""

    name: str
    emoji: str
    level: str
    description: str


@dc.dataclass(slots=True)
class SkillsSectionConfig:
    """Grid of skill cards plus the level-to-badge style lookup."""

    header: SectionHeaderConfig
    levels: dict[str, LevelStyleConfig]
    skills: list[SkillConfig]

    def level_style(self, level: str) -> LevelStyleConfig:
        """Return the badge style for ``level``."""
        return self.levels[level]


@dc.dataclass(slots=True)
class ExperienceSectionConfig:
    """Placeholder work history."""

    header: SectionHeaderConfig
    placeholder_count: int
    loading_text: str


@dc.dataclass(slots=True)
class ResumeSectionConfig:
    """Résumé download card."""

    header: SectionHeaderConfig
    title: str
    summary: str
    meta: str
    href: str
    cta_label: str = "Open PDF"


@dc.dataclass(slots=True)
class SocialLinkConfig:
    """Social profile button with its brand hover colours."""

    name: str
    href: str
    icon: str
    hover_background: str
    hover_color: str = "#fff"

    @property
    def opens_new_context(self) -> bool:
        """Return whether the link should open in a new browsing context."""
        return not self.href.startswith("mailto:")


@dc.dataclass(slots=True)
class ConnectSectionConfig:
    """Social buttons and the direct email call to action."""

    header: SectionHeaderConfig
    socials: list[SocialLinkConfig]
    direct_prompt: str
    email: str
    email_href: str


@dc.dataclass(slots=True)
class FooterConfig:
    """Credit line and copyright holder."""

    credit: str
    owner: str


@dc.dataclass(slots=True)
class PortfolioPageConfig:
    """Aggregated content of the main single-page layout."""

    title: str
    brand_text: str
    nav_links: list[NavLinkConfig]
    about: AboutSectionConfig
    programming: ProgrammingSectionConfig
    projects: ProjectsSectionConfig
    skills: SkillsSectionConfig
    experience: ExperienceSectionConfig
    resume: ResumeSectionConfig
    connect: ConnectSectionConfig
    footer: FooterConfig
    dark_by_default: bool = True

    def section_registry(self) -> SectionRegistry:
        """Build the ordered section registry from the navigation links."""
        return SectionRegistry(link.to_descriptor() for link in self.nav_links)


@dc.dataclass(slots=True)
class GalleryImageConfig:
    """Thumbnail in a gallery category."""

    src: str
    alt: str


@dc.dataclass(slots=True)
class GalleryCategoryConfig:
    """Labelled group of gallery images."""

    key: str
    label: str
    emoji: str
    images: list[GalleryImageConfig]


@dc.dataclass(slots=True)
class BlogPageConfig:
    """Coming-soon blog page with the photo gallery."""

    title: str
    eyebrow: str
    heading: str
    status: str
    gallery_eyebrow: str
    gallery_intro: str
    categories: list[GalleryCategoryConfig]
    back_label: str = "Back to Portfolio"
    back_href: str = "/"


@dc.dataclass(slots=True)
class SiteConfig:
    """Complete site definition sourced from YAML config."""

    portfolio: PortfolioPageConfig
    blog: BlogPageConfig
    output_dir: Path = Path("public")
    blog_path: str = "/blog"
    assets_dir: Path | None = None


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
]
