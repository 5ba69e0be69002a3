"""Tests for the route-aware preview request handler.

The handler is built without a socket: ``translate_path`` only needs the
route switch and the served directory, so the instance is created with
``object.__new__`` and those attributes set directly.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from folio_pages.preview import PreviewRequestHandler, create_preview_server
from folio_pages.routes import RouteSwitch


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    (tmp_path / "blog").mkdir()
    (tmp_path / "static").mkdir()
    (tmp_path / "index.html").write_text("main", encoding="utf-8")
    (tmp_path / "blog" / "index.html").write_text("blog", encoding="utf-8")
    (tmp_path / "static" / "folio.js").write_text("js", encoding="utf-8")
    return tmp_path


def _handler(public_dir: Path) -> PreviewRequestHandler:
    handler = object.__new__(PreviewRequestHandler)
    handler.route_switch = RouteSwitch()
    handler.directory = str(public_dir)
    return handler


@pytest.mark.parametrize(
    ("request_path", "expected"),
    [
        ("/", "index.html"),
        ("/blog", "blog/index.html"),
        ("/blog/", "blog/index.html"),
        ("/static/folio.js", "static/folio.js"),
        ("/projects", "index.html"),
        ("/blog/missing.png", "index.html"),
    ],
)
def test_translate_path_routes_pages(
    public_dir: Path, request_path: str, expected: str
) -> None:
    resolved = Path(_handler(public_dir).translate_path(request_path))
    assert resolved == public_dir / expected


def test_create_preview_server_binds_handler(public_dir: Path) -> None:
    server = create_preview_server(public_dir, RouteSwitch(), port=0)
    try:
        assert server.server_address[0] == "127.0.0.1"
        assert server.RequestHandlerClass.func is PreviewRequestHandler
    finally:
        server.server_close()
