"""HTTP entry point of the delivery service."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from delivery.config import CompositionRoot, load_config

_log = logging.getLogger(__name__)


class HealthHandler(BaseHTTPRequestHandler):
    """Answers the health probe and 404 for everything else."""

    def do_GET(self) -> None:  # noqa: N802
        if self.path.split("?", 1)[0] == "/health":
            self._send(HTTPStatus.OK, b"Healthy", "text/plain; charset=UTF-8")
        else:
            body = json.dumps({"message": "Not Found"}).encode("utf-8")
            self._send(HTTPStatus.NOT_FOUND, body, "application/json")

    def _send(self, status: HTTPStatus, body: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        """Send request logs to the module logger instead of stderr."""
        _log.debug("%s - %s", self.address_string(), format % args)


def create_server(root: CompositionRoot, port: str | int) -> ThreadingHTTPServer:
    """Bind an HTTP server on all interfaces at the given port."""
    server = ThreadingHTTPServer(("0.0.0.0", int(port)), HealthHandler)
    server.root = root  # type: ignore[attr-defined]
    return server


def main(argv: Sequence[str] | None = None) -> int:
    """Load settings and serve HTTP until interrupted."""
    parser = argparse.ArgumentParser(prog="delivery")
    parser.add_argument("--env-file", default=".env", help="settings file to load")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.env_file)
    except FileNotFoundError as exc:
        parser.exit(1, f"Error loading .env file: {exc}\n")

    root = CompositionRoot(config)
    with create_server(root, config.http_port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0