"""Jinja environment shared by the page builders.

Both builders render through the same environment setup so templates see the
same globals: the :func:`~folio_pages.animations.fade_up` and
:func:`~folio_pages.animations.stagger` presets, and a ``markdown`` filter for
short prose fields authored in ``site.yaml``.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markdown import markdown
from markupsafe import Markup

from .animations import fade_up, stagger

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"
MARKDOWN_EXTENSIONS = ["sane_lists"]


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment with autoescape and trimmed blocks."""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals["fade_up"] = fade_up
    env.globals["stagger"] = stagger
    env.filters["markdown"] = render_markdown
    return env


def render_markdown(text: str | None) -> Markup:
    """Render a short markdown snippet into HTML."""
    normalized = (text or "").strip()
    if not normalized:
        return Markup("")
    html = markdown(normalized, extensions=MARKDOWN_EXTENSIONS, output_format="html")
    return Markup(html)


__all__ = ["DEFAULT_TEMPLATES_DIR", "create_environment", "render_markdown"]
