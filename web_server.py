"""Web server for the garden planner.

Exposes JSON APIs for:
  - Catalogue     (list varieties, fetch one, companion lookup)
  - Planning      (run the companion-aware layout planner)

Run:
    python3 web_server.py

Then query http://localhost:8000/api/varieties
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlparse

_PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, _PROJECT_ROOT)

from garden import (
    PlanRequest,
    PlanningError,
    VarietyCatalogue,
    companion_details,
    filter_candidates,
    plan_garden,
)
from plantVarieties import variety_records

logger = logging.getLogger("garden.web")

# Shared catalogue (read-only after init)
CATALOGUE = VarietyCatalogue.from_records(variety_records)

DEFAULT_PER_PAGE = 50

_VARIETY_PATH = re.compile(r"^/api/varieties/([^/]+)$")
_COMPANIONS_PATH = re.compile(r"^/api/varieties/([^/]+)/companions$")


class NotFound(Exception):
    pass


# -------------------------------------------------------------------
# Response helpers
# -------------------------------------------------------------------

def link(href: str, method: str = "GET") -> dict:
    return {"href": href, "method": method}


def variety_links(variety_id: str) -> dict:
    return {
        "self": link(f"/api/varieties/{variety_id}"),
        "companions": link(f"/api/varieties/{variety_id}/companions"),
    }


def list_varieties(query: dict) -> dict:
    """One page of the catalogue, each entry with its links."""
    page = _positive_int(query, "page", 1)
    per_page = _positive_int(query, "per_page", DEFAULT_PER_PAGE)
    varieties = CATALOGUE.all()
    total = len(varieties)
    total_pages = max(1, -(-total // per_page))
    start = (page - 1) * per_page

    items = [
        {"payload": v.to_dict(), "links": variety_links(v.id)}
        for v in varieties[start:start + per_page]
    ]
    return {
        "items": items,
        "links": {"self": link(f"/api/varieties?page={page}&per_page={per_page}")},
        "pagination": {
            "page": page,
            "per_page": per_page,
            "total": total,
            "total_pages": total_pages,
        },
    }


def get_variety(variety_id: str) -> dict:
    variety = _lookup(variety_id)
    links = variety_links(variety_id)
    links["collection"] = link("/api/varieties")
    return {"payload": variety.to_dict(), "links": links}


def get_companions(variety_id: str) -> dict:
    variety = _lookup(variety_id)
    return {
        "payload": companion_details(variety, CATALOGUE),
        "links": {
            "self": link(f"/api/varieties/{variety_id}/companions"),
            "variety": link(f"/api/varieties/{variety_id}"),
        },
    }


def run_plan(body: dict) -> dict:
    """Parse the request, rank candidates and run the planner."""
    request = PlanRequest.from_dict(body)
    candidates = filter_candidates(CATALOGUE, request)
    plan = plan_garden(candidates, request, CATALOGUE)
    return {
        "payload": plan,
        "links": {
            "self": link("/api/plan", "POST"),
            "varieties": link("/api/varieties"),
        },
    }


def _lookup(variety_id: str):
    variety = CATALOGUE.get(variety_id)
    if variety is None:
        raise NotFound(f"Variety '{variety_id}' not found.")
    return variety


def _positive_int(query: dict, key: str, default: int) -> int:
    try:
        return max(1, int(query.get(key, [default])[0]))
    except (TypeError, ValueError):
        return default


# -------------------------------------------------------------------
# HTTP handler
# -------------------------------------------------------------------

class Handler(BaseHTTPRequestHandler):

    # ---- GET ----

    def do_GET(self):
        url = urlparse(self.path)
        path = url.path.rstrip("/")
        try:
            if path == "/api/varieties":
                return self._json(list_varieties(parse_qs(url.query)))
            m = _COMPANIONS_PATH.match(path)
            if m:
                return self._json(get_companions(m.group(1)))
            m = _VARIETY_PATH.match(path)
            if m:
                return self._json(get_variety(m.group(1)))
            raise NotFound(f"Unknown endpoint: {path}")
        except NotFound as e:
            self._json({"error": str(e)}, 404)

    # ---- POST ----

    def do_POST(self):
        path = urlparse(self.path).path.rstrip("/")
        if path != "/api/plan":
            return self._json({"error": f"Unknown endpoint: {path}"}, 404)
        try:
            body = self._body()
        except ValueError as e:
            logger.warning("%s: malformed JSON body: %s", path, e)
            return self._json({"error": f"JSON deserialization error: {e}"}, 400)
        try:
            self._json(run_plan(body))
        except PlanningError as e:
            logger.warning("%s: %s", path, e)
            self._json({"error": str(e)}, 400)

    # ---- helpers ----

    def _body(self) -> dict:
        length = int(self.headers.get("Content-Length", 0))
        if length == 0:
            return {}
        return json.loads(self.rfile.read(length).decode())

    def _json(self, payload: dict, status: int = 200):
        raw = json.dumps(payload).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(raw)))
        self.end_headers()
        self.wfile.write(raw)

    def log_message(self, fmt, *args):
        logger.debug("%s - %s", self.address_string(), fmt % args)


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------

def main() -> None:
    logging.basicConfig(
        level=os.environ.get("GARDEN_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    server = ThreadingHTTPServer((host, port), Handler)
    logger.info("Garden planner running on http://localhost:%d", port)
    logger.info("  GET  /api/varieties")
    logger.info("  GET  /api/varieties/{id}")
    logger.info("  GET  /api/varieties/{id}/companions")
    logger.info("  POST /api/plan")
    server.serve_forever()


if __name__ == "__main__":
    main()
