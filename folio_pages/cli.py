"""Cyclopts CLI entrypoint for building and previewing the portfolio site.

The ``folio`` console script defined here renders the main layout and the
blog gallery from ``config/site.yaml``, lists the routes the site serves, and
runs a local preview server over the generated output. Typical usage is
``folio generate`` locally or in CI, and ``folio preview`` while editing
content.

Examples
--------
Generate the site with the default configuration:

>>> from folio_pages.cli import main
>>> main()  # doctest: +SKIP

Render into a custom directory:

>>> from folio_pages.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .build import build_site, route_switch_for
from .config import load_site_config
from .preview import create_preview_server, serve_preview

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="folio", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the portfolio and blog pages into static HTML.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Render every route of the site and copy the static assets.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` content file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Output directory; defaults to the ``site.output_dir`` setting.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.
    """
    site_config = load_site_config(config)
    for path in build_site(site_config, output_dir=output_dir):
        print(f"wrote {_format_path(path)}")


@app.command(help="List the paths the site serves and the files behind them.")
def routes(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print one ``path -> file`` line per route."""
    site_config = load_site_config(config)
    for route in route_switch_for(site_config).routes:
        target = route.output_path(site_config.output_dir)
        print(f"{route.path} -> {_format_path(target)} ({route.page})")


@app.command(help="Build the site and serve it locally.")
def preview(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    host: typ.Annotated[str, Parameter(help="Interface to bind")] = "127.0.0.1",
    port: typ.Annotated[int, Parameter(help="Port to listen on")] = 8000,
    build: typ.Annotated[
        bool, Parameter(help="Regenerate the site before serving")
    ] = True,
) -> None:
    """Serve the generated output with route-aware fallbacks."""
    site_config = load_site_config(config)
    public_dir = output_dir or site_config.output_dir
    if build:
        for path in build_site(site_config, output_dir=public_dir):
            print(f"wrote {_format_path(path)}")
    server = create_preview_server(
        public_dir, route_switch_for(site_config), host=host, port=port
    )
    print(f"serving {_format_path(public_dir)} at http://{host}:{port}/")
    serve_preview(server)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``folio`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
