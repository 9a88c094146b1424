"""Tests for the Vercel entry point in api/jobs.py."""

import http.client
import importlib.util
import json
import threading
import urllib.error
import urllib.request
from http.server import HTTPServer
from pathlib import Path
from urllib.parse import urlparse

import pytest
import respx
from httpx import Response

ENTRY_PATH = Path(__file__).parent.parent / "api" / "jobs.py"


def load_entry():
    spec = importlib.util.spec_from_file_location("vercel_api_jobs", ENTRY_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def server_url():
    """Serve the Vercel handler class on a free local port."""
    server = HTTPServer(("127.0.0.1", 0), load_entry().handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/api/jobs"
    server.shutdown()
    server.server_close()


def call(url, method="GET", body=None):
    """Send a request and return (status, headers, body) even on error codes."""
    data = json.dumps(body).encode() if body is not None else None
    request = urllib.request.Request(url, data=data, method=method)
    if data is not None:
        request.add_header("Content-Type", "application/json")
    try:
        with urllib.request.urlopen(request, timeout=10) as response:
            return response.status, response.headers, response.read()
    except urllib.error.HTTPError as e:
        return e.code, e.headers, e.read()


def test_get(server_url, sheetdb_url):
    with respx.mock:
        respx.get(sheetdb_url).mock(return_value=Response(200, json=[{"title": "A"}]))
        status, headers, body = call(server_url)

    assert status == 200
    assert json.loads(body) == [{"title": "A"}]
    assert headers["Cache-Control"] == "s-maxage=60, stale-while-revalidate"
    assert headers["Content-Type"] == "application/json"


def test_post(server_url, sheetdb_url):
    with respx.mock:
        route = respx.post(sheetdb_url).mock(
            return_value=Response(201, json={"created": True})
        )
        status, _, body = call(server_url, method="POST", body={"title": "Engineer"})

    assert status == 201
    assert json.loads(body) == {"created": True}
    assert json.loads(route.calls.last.request.content) == {
        "data": {"title": "Engineer"}
    }


def test_post_upstream_failure(server_url, sheetdb_url):
    with respx.mock:
        respx.post(sheetdb_url).mock(return_value=Response(500, text="quota exceeded"))
        status, _, body = call(server_url, method="POST", body={"title": "Engineer"})

    assert status == 500
    assert json.loads(body) == {"error": "Failed to save job"}


def test_delete(server_url, sheetdb_url):
    status, headers, body = call(server_url, method="DELETE")

    assert status == 405
    assert headers["Allow"] == "GET, POST"
    assert body == b"Method DELETE Not Allowed"


def test_head(server_url, sheetdb_url):
    status, headers, body = call(server_url, method="HEAD")

    assert status == 405
    assert headers["Allow"] == "GET, POST"
    assert body == b""


def test_bad_content_length(server_url, sheetdb_url):
    parsed = urlparse(server_url)
    conn = http.client.HTTPConnection(parsed.hostname, parsed.port, timeout=10)
    try:
        conn.putrequest("POST", parsed.path)
        conn.putheader("Content-Length", "not-a-number")
        conn.endheaders()
        response = conn.getresponse()
        status, body = response.status, response.read()
    finally:
        conn.close()

    assert status == 500
    assert json.loads(body) == {"error": "Internal Server Error"}
