"""Local preview server for the generated site.

Files that exist under the output directory are served as-is. Every other
path goes through the :class:`~folio_pages.routes.RouteSwitch`, so ``/blog``
serves the gallery page and unknown paths fall back to the root document the
way the static host's rewrite rule does.
"""

from __future__ import annotations

import functools
import os
import typing as typ
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

if typ.TYPE_CHECKING:
    from .routes import RouteSwitch


class PreviewRequestHandler(SimpleHTTPRequestHandler):
    """Serve generated files, resolving page paths through the route switch."""

    def __init__(
        self,
        *args: typ.Any,
        route_switch: RouteSwitch,
        directory: str,
        **kwargs: typ.Any,
    ) -> None:
        self.route_switch = route_switch
        super().__init__(*args, directory=directory, **kwargs)

    def translate_path(self, path: str) -> str:
        """Return the file for ``path``, falling back to the routed page."""
        candidate = super().translate_path(path)
        if os.path.isfile(candidate):
            return candidate
        route = self.route_switch.resolve(path)
        return str(route.output_path(Path(self.directory)))


def create_preview_server(
    public_dir: Path,
    route_switch: RouteSwitch,
    *,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> ThreadingHTTPServer:
    """Bind a threaded HTTP server that previews ``public_dir``."""
    handler = functools.partial(
        PreviewRequestHandler,
        route_switch=route_switch,
        directory=str(public_dir),
    )
    return ThreadingHTTPServer((host, port), handler)


def serve_preview(server: ThreadingHTTPServer) -> None:
    """Serve until interrupted, then release the socket."""
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("stopping preview server")
    finally:
        server.server_close()


__all__ = ["PreviewRequestHandler", "create_preview_server", "serve_preview"]
