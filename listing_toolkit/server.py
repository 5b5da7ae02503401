"""
Serve the listing page over HTTP.

Every GET of ``/`` (or ``/index.html``) renders the page from scratch, so a
reload always reflects the current directory and sources.csv.  A fatal error
(missing or malformed sources.csv, ...) becomes a 500 with a plain-text body;
nothing partial is ever sent.
"""

from __future__ import annotations
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Tuple
from urllib.parse import urlparse

from .config import ListingConfig
from .errors import ListingError
from .listing import build_listing
from .utils import log

PAGE_PATHS = {"/", "/index.html"}

def make_handler(config: ListingConfig):
    class ListingHandler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:
            if urlparse(self.path).path not in PAGE_PATHS:
                self._send(HTTPStatus.NOT_FOUND, "not found\n", "text/plain")
                return
            try:
                page = build_listing(config)
            except (ListingError, OSError) as e:
                log("error", f"render failed: {e}")
                self._send(HTTPStatus.INTERNAL_SERVER_ERROR, f"listing unavailable: {e}\n", "text/plain")
                return
            self._send(HTTPStatus.OK, page, "text/html")

        def _send(self, status: HTTPStatus, text: str, content_type: str) -> None:
            body = text.encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", f"{content_type}; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format: str, *args) -> None:
            log("serve", format % args)

    return ListingHandler

def make_server(config: ListingConfig, address: Tuple[str, int] = ("127.0.0.1", 8000)) -> HTTPServer:
    return HTTPServer(address, make_handler(config))

def serve(config: ListingConfig, host: str = "127.0.0.1", port: int = 8000) -> None:
    server = make_server(config, (host, port))
    log("serve", f"listing {config.directory} at http://{host}:{server.server_port}/")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        log("serve", "stopped")
    finally:
        server.server_close()
