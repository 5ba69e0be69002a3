"""Utility helpers shared by the site configuration builders."""

from __future__ import annotations

import typing as typ

from .models import ImageConfig, SectionHeaderConfig, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_fields(
    data: typ.Mapping[str, object], keys: typ.Iterable[str], *, context: str
) -> None:
    """Raise ``SiteConfigError`` naming the first missing or empty key."""
    for key in keys:
        if data.get(key) in (None, ""):
            msg = f"{context} is missing '{key}'."
            raise SiteConfigError(msg)


def _as_list(value: object, *, context: str) -> list[typ.Any]:
    """Return ``value`` when it is a list, or an empty list when absent."""
    match value:
        case None:
            return []
        case list() as items:
            return items
        case _:
            msg = f"{context} must be a list."
            raise SiteConfigError(msg)


def _build_image(payload: object, *, context: str) -> ImageConfig:
    """Build an image reference requiring ``src`` and ``alt``."""
    match payload:
        case {"src": src, "alt": alt} if src and alt:
            return ImageConfig(src=str(src), alt=str(alt))
        case _:
            msg = f"{context} requires an image mapping with 'src' and 'alt'."
            raise SiteConfigError(msg)


def _build_section_header(
    payload: object, *, context: str, require_intro: bool = True
) -> SectionHeaderConfig:
    """Build the subtitle/title/intro block shown above a section."""
    match payload:
        case {"subtitle": subtitle, "title": title, **rest} if subtitle and title:
            pass
        case _:
            msg = f"{context} requires 'subtitle' and 'title'."
            raise SiteConfigError(msg)
    intro = _optional_str(rest.get("intro"))
    if require_intro and intro is None:
        msg = f"{context} requires an 'intro'."
        raise SiteConfigError(msg)
    return SectionHeaderConfig(subtitle=str(subtitle), title=str(title), intro=intro)


__all__ = [
    "_as_list",
    "_build_image",
    "_build_section_header",
    "_optional_str",
    "_require_fields",
]
