import json
import threading
from http.client import HTTPConnection
from http.server import ThreadingHTTPServer

import pytest

import web_server


@pytest.fixture(scope="module")
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), web_server.Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield httpd.server_address
    httpd.shutdown()
    httpd.server_close()


def request(server, method, path, body=None, raw=None):
    conn = HTTPConnection(*server, timeout=10)
    headers = {}
    if body is not None:
        raw = json.dumps(body)
    if raw is not None:
        headers["Content-Type"] = "application/json"
    conn.request(method, path, body=raw, headers=headers)
    resp = conn.getresponse()
    data = json.loads(resp.read().decode())
    conn.close()
    return resp.status, data


def test_list_varieties(server):
    status, data = request(server, "GET", "/api/varieties")
    assert status == 200
    assert data["pagination"]["total"] == len(web_server.CATALOGUE)
    first = data["items"][0]
    assert first["payload"]["id"] == "tomato"
    assert first["links"]["self"]["href"] == "/api/varieties/tomato"


def test_list_varieties_paginated(server):
    status, data = request(server, "GET", "/api/varieties?page=2&per_page=5")
    assert status == 200
    assert len(data["items"]) == 5
    assert data["pagination"]["page"] == 2
    assert data["items"][0]["payload"]["id"] == web_server.CATALOGUE.all()[5].id


def test_get_variety(server):
    status, data = request(server, "GET", "/api/varieties/basil")
    assert status == 200
    assert data["payload"]["name"] == "Basil"
    assert data["payload"]["span"] == 1
    assert data["links"]["collection"]["href"] == "/api/varieties"


def test_companions(server):
    status, data = request(server, "GET", "/api/varieties/tomato/companions")
    assert status == 200
    good = [c["id"] for c in data["payload"]["good"]]
    bad = [c["id"] for c in data["payload"]["bad"]]
    assert "basil" in good
    assert "fennel" in bad


def test_unknown_variety_is_404(server):
    status, data = request(server, "GET", "/api/varieties/triffid/companions")
    assert status == 404
    assert "triffid" in data["error"]


def test_unknown_path_is_404(server):
    status, _ = request(server, "GET", "/api/nothing")
    assert status == 404
    status, _ = request(server, "POST", "/api/nothing", body={})
    assert status == 404


def test_plan(server):
    body = {
        "season": "summer",
        "width_m": 1.2,
        "length_m": 0.9,
        "preferences": ["basil:2"],
    }
    status, data = request(server, "POST", "/api/plan", body=body)
    assert status == 200
    plan = data["payload"]
    assert plan["rows"] == 3 and plan["cols"] == 4
    assert len(plan["grid"]) == 3
    assert isinstance(plan["score"], int)
    assert isinstance(plan["warnings"], list)
    assert data["links"]["self"]["method"] == "POST"


def test_plan_with_zero_dimensions_is_400(server):
    body = {"season": "summer", "width_m": 0, "length_m": 2}
    status, data = request(server, "POST", "/api/plan", body=body)
    assert status == 400
    assert data["error"]


def test_plan_with_empty_layout_is_400(server):
    status, data = request(server, "POST", "/api/plan", body={"season": "summer", "layout": []})
    assert status == 400
    assert "row" in data["error"]


def test_malformed_json_is_400(server):
    status, data = request(server, "POST", "/api/plan", raw="{not json")
    assert status == 400
    assert "JSON" in data["error"]


@pytest.mark.parametrize("raw", [
    '{"season": "summer", "width_m": 1e400, "length_m": 1}',
    '{"season": "summer", "width_m": NaN, "length_m": 1}',
    '{"season": "summer", "width_m": 1, "length_m": 1,'
    ' "preferences": [{"id": "tomato", "quantity": 1e400}]}',
])
def test_plan_with_non_finite_numbers_is_400(server, raw):
    status, data = request(server, "POST", "/api/plan", raw=raw)
    assert status == 400
    assert data["error"]
