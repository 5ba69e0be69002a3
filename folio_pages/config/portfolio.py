"""Portfolio-page configuration builders."""

from __future__ import annotations

import typing as typ

from folio_pages.sections import SectionRegistryError

from .helpers import (
    _as_list,
    _build_image,
    _build_section_header,
    _optional_str,
    _require_fields,
)
from .models import (
    AboutSectionConfig,
    AwardConfig,
    ConnectSectionConfig,
    ContestConfig,
    EducationEntryConfig,
    ExperienceSectionConfig,
    FooterConfig,
    LevelStyleConfig,
    NavLinkConfig,
    PlatformCardConfig,
    PortfolioPageConfig,
    ProgrammingSectionConfig,
    ProjectConfig,
    ProjectsSectionConfig,
    ResumeSectionConfig,
    SiteConfigError,
    SkillConfig,
    SkillsSectionConfig,
    SocialLinkConfig,
)


def _build_portfolio_config(payload: typ.Mapping[str, typ.Any]) -> PortfolioPageConfig:
    """Build the main layout configuration from the provided payload."""
    match payload:
        case dict() as data:
            title = data.get("title")
            brand_text = data.get("brand_text")
        case _:
            msg = "Portfolio configuration must be a mapping."
            raise SiteConfigError(msg)
    if not (title and brand_text):
        msg = "Portfolio configuration requires 'title' and 'brand_text'."
        raise SiteConfigError(msg)

    navigation = data.get("navigation", {}) or {}
    nav_links = _build_nav_links(navigation.get("links"))
    if not nav_links:
        msg = "Portfolio navigation requires at least one link."
        raise SiteConfigError(msg)

    config = PortfolioPageConfig(
        title=str(title),
        brand_text=str(brand_text),
        nav_links=nav_links,
        about=_build_about_config(data.get("about")),
        programming=_build_programming_config(data.get("programming")),
        projects=_build_projects_config(data.get("projects")),
        skills=_build_skills_config(data.get("skills")),
        experience=_build_experience_config(data.get("experience")),
        resume=_build_resume_config(data.get("resume")),
        connect=_build_connect_config(data.get("connect")),
        footer=_build_footer_config(data.get("footer")),
        dark_by_default=bool(data.get("dark_by_default", True)),
    )
    try:
        config.section_registry()
    except SectionRegistryError as exc:
        raise SiteConfigError(str(exc)) from exc
    return config


def _build_nav_links(entries: object) -> list[NavLinkConfig]:
    """Build navigation entries; external ones carry a target location."""
    links: list[NavLinkConfig] = []
    for entry in _as_list(entries, context="Portfolio navigation links"):
        match entry:
            case {"label": label, "section": section, **rest}:
                pass
            case _:
                msg = "Portfolio navigation links require 'label' and 'section'."
                raise SiteConfigError(msg)
        if not label or not section:
            msg = "Portfolio navigation links require 'label' and 'section'."
            raise SiteConfigError(msg)
        links.append(
            NavLinkConfig(
                label=str(label),
                section=str(section),
                external=_optional_str(rest.get("external")),
            )
        )
    return links


def _build_about_config(payload: object) -> AboutSectionConfig:
    """Build the hero/About section."""
    match payload:
        case dict() as data:
            pass
        case _:
            msg = "Portfolio about configuration must be a mapping."
            raise SiteConfigError(msg)
    _require_fields(
        data, ["eyebrow", "greeting", "name", "tagline"], context="About section"
    )
    education: list[EducationEntryConfig] = []
    for entry in _as_list(data.get("education"), context="About education"):
        match entry:
            case {"level": level, "name": name, "year": year}:
                education.append(
                    EducationEntryConfig(
                        level=str(level), name=str(name), year=str(year)
                    )
                )
            case _:
                msg = "Education entries require 'level', 'name', and 'year'."
                raise SiteConfigError(msg)
    awards: list[AwardConfig] = []
    for entry in _as_list(data.get("awards"), context="About awards"):
        match entry:
            case {"rank": rank, "event": event, "description": description}:
                awards.append(
                    AwardConfig(
                        rank=str(rank), event=str(event), description=str(description)
                    )
                )
            case _:
                msg = "Award entries require 'rank', 'event', and 'description'."
                raise SiteConfigError(msg)
    return AboutSectionConfig(
        eyebrow=str(data["eyebrow"]),
        greeting=str(data["greeting"]),
        name=str(data["name"]),
        tagline=str(data["tagline"]),
        photo=_build_image(data.get("photo"), context="About section photo"),
        education=education,
        awards=awards,
        education_heading=str(data.get("education_heading", "Education")),
        awards_heading=str(data.get("awards_heading", "Awards")),
    )


def _build_programming_config(payload: object) -> ProgrammingSectionConfig:
    """Build the competitive programming section."""
    match payload:
        case {"header": header, **rest}:
            pass
        case _:
            msg = "Programming section requires a 'header' block."
            raise SiteConfigError(msg)
    platforms: list[PlatformCardConfig] = []
    for entry in _as_list(rest.get("platforms"), context="Programming platforms"):
        match entry:
            case dict() as card:
                pass
            case _:
                continue
        _require_fields(
            card,
            ["emoji", "platform", "handle", "rating", "rating_label", "rating_color"],
            context="Programming platform card",
        )
        platforms.append(
            PlatformCardConfig(
                emoji=str(card["emoji"]),
                platform=str(card["platform"]),
                handle=str(card["handle"]),
                rating=str(card["rating"]),
                rating_label=str(card["rating_label"]),
                rating_color=str(card["rating_color"]),
            )
        )
    contests: list[ContestConfig] = []
    for entry in _as_list(rest.get("contests"), context="Programming contests"):
        match entry:
            case {"name": name, "description": description} if name:
                contests.append(
                    ContestConfig(name=str(name), description=str(description))
                )
            case _:
                msg = "Contest entries require 'name' and 'description'."
                raise SiteConfigError(msg)
    return ProgrammingSectionConfig(
        header=_build_section_header(header, context="Programming section header"),
        platforms=platforms,
        contests_heading=str(rest.get("contests_heading", "Contests Participated")),
        contests=contests,
    )


def _build_projects_config(payload: object) -> ProjectsSectionConfig:
    """Build the projects grid."""
    match payload:
        case {"header": header, **rest}:
            pass
        case _:
            msg = "Projects section requires a 'header' block."
            raise SiteConfigError(msg)
    projects: list[ProjectConfig] = []
    for entry in _as_list(rest.get("items"), context="Projects items"):
        match entry:
            case {
                "title": title,
                "emoji": emoji,
                "description": description,
                "github": github,
                **extra,
            }:
                pass
            case _:
                msg = (
                    "Project entries require 'title', 'emoji', 'description', "
                    "and 'github'."
                )
                raise SiteConfigError(msg)
        tech_raw = _as_list(extra.get("tech"), context="Project tech")
        tech = [str(item) for item in tech_raw]
        projects.append(
            ProjectConfig(
                title=str(title),
                emoji=str(emoji),
                description=str(description),
                tech=tech,
                github=str(github),
                featured=bool(extra.get("featured", False)),
            )
        )
    return ProjectsSectionConfig(
        header=_build_section_header(header, context="Projects section header"),
        projects=projects,
    )


def _build_skills_config(payload: object) -> SkillsSectionConfig:
    """Build the skills grid and validate each level against the style map."""
    match payload:
        case {"header": header, "levels": dict() as levels_raw, **rest}:
            pass
        case _:
            msg = "Skills section requires 'header' and 'levels' blocks."
            raise SiteConfigError(msg)
    levels: dict[str, LevelStyleConfig] = {}
    for level, style in levels_raw.items():
        match style:
            case {"color": color, "background": background, "border": border}:
                levels[str(level)] = LevelStyleConfig(
                    color=str(color), background=str(background), border=str(border)
                )
            case _:
                msg = f"Skill level '{level}' requires 'color', 'background', 'border'."
                raise SiteConfigError(msg)
    skills: list[SkillConfig] = []
    for entry in _as_list(rest.get("items"), context="Skills items"):
        match entry:
            case {
                "name": name,
                "emoji": emoji,
                "level": level,
                "description": description,
            }:
                pass
            case _:
                msg = "Skill entries require 'name', 'emoji', 'level', 'description'."
                raise SiteConfigError(msg)
        if str(level) not in levels:
            msg = f"Skill '{name}' uses unknown level '{level}'."
            raise SiteConfigError(msg)
        skills.append(
            SkillConfig(
                name=str(name),
                emoji=str(emoji),
                level=str(level),
                description=str(description),
            )
        )
    return SkillsSectionConfig(
        header=_build_section_header(header, context="Skills section header"),
        levels=levels,
        skills=skills,
    )


def _build_experience_config(payload: object) -> ExperienceSectionConfig:
    """Build the placeholder experience section."""
    match payload:
        case {"header": header, **rest}:
            pass
        case _:
            msg = "Experience section requires a 'header' block."
            raise SiteConfigError(msg)
    try:
        placeholder_count = int(rest.get("placeholder_count", 2))
    except (TypeError, ValueError) as exc:
        msg = "Experience 'placeholder_count' must be numeric."
        raise SiteConfigError(msg) from exc
    if placeholder_count < 0:
        msg = "Experience 'placeholder_count' must not be negative."
        raise SiteConfigError(msg)
    return ExperienceSectionConfig(
        header=_build_section_header(header, context="Experience section header"),
        placeholder_count=placeholder_count,
        loading_text=str(rest.get("loading_text", "Loading experience data...")),
    )


def _build_resume_config(payload: object) -> ResumeSectionConfig:
    """Build the résumé download card."""
    match payload:
        case {"header": header, **rest}:
            pass
        case _:
            msg = "Resume section requires a 'header' block."
            raise SiteConfigError(msg)
    _require_fields(
        rest, ["title", "summary", "meta", "href"], context="Resume section"
    )
    return ResumeSectionConfig(
        header=_build_section_header(
            header, context="Resume section header", require_intro=False
        ),
        title=str(rest["title"]),
        summary=str(rest["summary"]),
        meta=str(rest["meta"]),
        href=str(rest["href"]),
        cta_label=str(rest.get("cta_label", "Open PDF")),
    )


def _build_connect_config(payload: object) -> ConnectSectionConfig:
    """Build the social links and email call to action."""
    match payload:
        case {"header": header, **rest}:
            pass
        case _:
            msg = "Connect section requires a 'header' block."
            raise SiteConfigError(msg)
    _require_fields(
        rest, ["direct_prompt", "email", "email_href"], context="Connect section"
    )
    socials: list[SocialLinkConfig] = []
    for entry in _as_list(rest.get("socials"), context="Connect socials"):
        match entry:
            case {
                "name": name,
                "href": href,
                "icon": icon,
                "hover_background": bg,
                **extra,
            }:
                pass
            case _:
                msg = (
                    "Social links require 'name', 'href', 'icon', "
                    "and 'hover_background'."
                )
                raise SiteConfigError(msg)
        socials.append(
            SocialLinkConfig(
                name=str(name),
                href=str(href),
                icon=str(icon),
                hover_background=str(bg),
                hover_color=str(extra.get("hover_color", "#fff")),
            )
        )
    if not socials:
        msg = "Connect section requires at least one social link."
        raise SiteConfigError(msg)
    return ConnectSectionConfig(
        header=_build_section_header(header, context="Connect section header"),
        socials=socials,
        direct_prompt=str(rest["direct_prompt"]),
        email=str(rest["email"]),
        email_href=str(rest["email_href"]),
    )


def _build_footer_config(payload: object) -> FooterConfig:
    """Build the footer credit line."""
    match payload:
        case {"credit": credit, "owner": owner} if credit and owner:
            return FooterConfig(credit=str(credit), owner=str(owner))
        case _:
            msg = "Portfolio footer requires 'credit' and 'owner'."
            raise SiteConfigError(msg)


__all__ = [
    "_build_about_config",
    "_build_connect_config",
    "_build_experience_config",
    "_build_footer_config",
    "_build_nav_links",
    "_build_portfolio_config",
    "_build_programming_config",
    "_build_projects_config",
    "_build_resume_config",
    "_build_skills_config",
]
