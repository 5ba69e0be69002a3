"""Blog/gallery page configuration builders."""

from __future__ import annotations

import typing as typ

from .helpers import _as_list, _optional_str, _require_fields
from .models import (
    BlogPageConfig,
    GalleryCategoryConfig,
    GalleryImageConfig,
    SiteConfigError,
)


def _build_blog_config(payload: typ.Mapping[str, typ.Any] | None) -> BlogPageConfig:
    """Build the blog page configuration from the provided payload."""
    match payload:
        case dict() as data:
            pass
        case _:
            msg = "Blog configuration must be a mapping."
            raise SiteConfigError(msg)
    _require_fields(
        data,
        ["title", "eyebrow", "heading", "status", "gallery_eyebrow", "gallery_intro"],
        context="Blog configuration",
    )
    categories = _build_gallery_categories(data.get("categories"))
    return BlogPageConfig(
        title=str(data["title"]),
        eyebrow=str(data["eyebrow"]),
        heading=str(data["heading"]),
        status=str(data["status"]),
        gallery_eyebrow=str(data["gallery_eyebrow"]),
        gallery_intro=str(data["gallery_intro"]),
        categories=categories,
        back_label=str(data.get("back_label", "Back to Portfolio")),
        back_href=str(data.get("back_href", "/")),
    )


def _build_gallery_categories(entries: object) -> list[GalleryCategoryConfig]:
    """Build gallery categories, keeping the authored image order."""
    categories: list[GalleryCategoryConfig] = []
    seen: set[str] = set()
    for entry in _as_list(entries, context="Blog categories"):
        match entry:
            case {"key": key, "label": label, **rest} if key and label:
                pass
            case _:
                msg = "Gallery categories require 'key' and 'label'."
                raise SiteConfigError(msg)
        if key in seen:
            msg = f"Duplicate gallery category '{key}'."
            raise SiteConfigError(msg)
        seen.add(str(key))
        images = _build_gallery_images(rest.get("images"), label=str(label))
        categories.append(
            GalleryCategoryConfig(
                key=str(key),
                label=str(label),
                emoji=str(rest.get("emoji", "")),
                images=images,
            )
        )
    return categories


def _build_gallery_images(entries: object, *, label: str) -> list[GalleryImageConfig]:
    """Build thumbnails; alt text defaults to ``"<label> photo <n>"``."""
    images: list[GalleryImageConfig] = []
    for index, entry in enumerate(
        _as_list(entries, context=f"Gallery '{label}' images"), start=1
    ):
        match entry:
            case str() as src if src.strip():
                alt = None
            case {"src": src, **rest} if src:
                alt = _optional_str(rest.get("alt"))
            case _:
                msg = f"Gallery '{label}' image {index} requires a 'src'."
                raise SiteConfigError(msg)
        images.append(
            GalleryImageConfig(
                src=str(src).strip(), alt=alt or f"{label} photo {index}"
            )
        )
    if not images:
        msg = f"Gallery category '{label}' requires at least one image."
        raise SiteConfigError(msg)
    return images


__all__ = ["_build_blog_config", "_build_gallery_categories", "_build_gallery_images"]
