"""HTTP front end that answers recipe search requests with JSON."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional, Sequence

from .bfs import main_bfs
from .bidirectional import main_bidirectional_bfs
from .dfs import main_dfs
from .model import SearchResult
from .scraper import ElementInfo, ScrapeError, scrape_alchemy_elements

logger = logging.getLogger(__name__)

API_PATH = "/api/data"
DEFAULT_PORT = 8080

_CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

Headers = dict[str, str]


def _error(headers: Headers, status: HTTPStatus, message: str) -> tuple[int, Headers, bytes]:
    error_headers = dict(headers)
    error_headers["Content-Type"] = "text/plain; charset=utf-8"
    error_headers["X-Content-Type-Options"] = "nosniff"
    return int(status), error_headers, (message + "\n").encode("utf-8")


@dataclass
class SearchRequest:
    """A search request as sent by the client."""

    element_target: str = ""
    algorithm_type: str = ""
    multiple: bool = False
    max_recipe: int = 0

    _FIELDS = {
        "elementtarget": ("element_target", str),
        "algorithmtype": ("algorithm_type", str),
        "multiple": ("multiple", bool),
        "maxrecipe": ("max_recipe", int),
    }

    @classmethod
    def from_json(cls, payload: str | bytes) -> SearchRequest:
        """Decode a JSON object; keys match case-insensitively, unknown keys are ignored.

        Raises ValueError when the payload is not a JSON object or a field
        has the wrong type.
        """
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValueError(str(exc)) from exc
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(
                f"cannot unmarshal {type(data).__name__} into a search request"
            )

        values: dict[str, Any] = {}
        for key, value in data.items():
            spec = cls._FIELDS.get(key.lower())
            if spec is None or value is None:
                continue
            attr, kind = spec
            if kind is int:
                valid = isinstance(value, int) and not isinstance(value, bool)
            else:
                valid = isinstance(value, kind)
            if not valid:
                raise ValueError(
                    f"cannot unmarshal {type(value).__name__} into field {key} "
                    f"of type {kind.__name__}"
                )
            values[attr] = value
        return cls(**values)


@dataclass
class RecipeBook:
    """Recipes and tiers of every known element, ready for searching."""

    recipes: dict[str, list[list[str]]] = field(default_factory=dict)
    tiers: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_elements(cls, elements: Mapping[str, ElementInfo]) -> RecipeBook:
        """Split scraped element information into recipe and tier tables."""
        return cls(
            recipes={name: info.recipes for name, info in elements.items()},
            tiers={name: info.tier for name, info in elements.items()},
        )

    def search(self, request: SearchRequest) -> Optional[SearchResult]:
        """Run the requested algorithm; None when the algorithm is unknown."""
        algorithms = {
            "bfs": main_bfs,
            "dfs": main_dfs,
            "bidirectional": main_bidirectional_bfs,
        }
        algorithm = algorithms.get(request.algorithm_type)
        if algorithm is None:
            return None
        return algorithm(
            self.recipes, self.tiers, request.element_target, request.max_recipe
        )


def handle_data(
    book: RecipeBook, method: str, body: bytes
) -> tuple[int, Headers, bytes]:
    """Answer one request to the search endpoint: (status, headers, body)."""
    headers = dict(_CORS_HEADERS)

    if method == "OPTIONS":
        return int(HTTPStatus.OK), headers, b""

    if method != "POST":
        return _error(headers, HTTPStatus.METHOD_NOT_ALLOWED, "Only POST allowed")

    if not body.strip():
        return _error(headers, HTTPStatus.BAD_REQUEST, "EOF")

    try:
        request = SearchRequest.from_json(body)
    except ValueError as exc:
        return _error(headers, HTTPStatus.BAD_REQUEST, str(exc))

    result = book.search(request)
    if result is None:
        payload = SearchResult().to_dict()
        payload["tree"] = None
    else:
        payload = result.to_dict()

    encoded = (json.dumps(payload, separators=(",", ":")) + "\n").encode("utf-8")
    return int(HTTPStatus.OK), headers, encoded


def make_server(book: RecipeBook, host: str = "", port: int = DEFAULT_PORT) -> ThreadingHTTPServer:
    """Create an HTTP server that routes the search endpoint to ``book``."""

    class _Handler(BaseHTTPRequestHandler):
        def _respond(self) -> None:
            if self.path.split("?", 1)[0] != API_PATH:
                status, headers, body = _error(
                    {}, HTTPStatus.NOT_FOUND, "404 page not found"
                )
            else:
                length = int(self.headers.get("Content-Length") or 0)
                request_body = self.rfile.read(length) if length > 0 else b""
                status, headers, body = handle_data(book, self.command, request_body)

            self.send_response(status)
            for name, value in headers.items():
                self.send_header(name, value)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(body)

        do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = do_HEAD = _respond

        def log_message(self, format: str, *args: Any) -> None:
            logger.info("%s - %s", self.address_string(), format % args)

    return ThreadingHTTPServer((host, port), _Handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Scrape the element data and serve search requests until interrupted."""
    parser = argparse.ArgumentParser(description="Serve recipe searches over HTTP.")
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        elements = scrape_alchemy_elements()
    except ScrapeError as exc:
        logger.error("Scraping failed: %s", exc)
        return 1

    logger.info("Scraped %d elements", len(elements))
    book = RecipeBook.from_elements(elements)
    logger.info("Data ready, accepting requests.")

    with make_server(book, args.host, args.port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0