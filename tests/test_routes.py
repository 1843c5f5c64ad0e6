"""
End-to-end tests through the FastAPI app with the relay mocked out.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json
import re

import httpx
import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from sharesview.main import app

STATIC = {
    "entityName": "JOHNSON & JOHNSON",
    "max": {"val": 2632512803, "fy": 2021},
    "min": {"val": 2406938583, "fy": 2024},
}

REMOTE = {
    "entityName": "APPLE INC.",
    "units": {"shares": [
        {"fy": 2021, "val": 16406397000},
        {"fy": 2022, "val": 15943425000},
        {"fy": 2024, "val": 15115823000},
    ]},
}


def _hidden(page, element_id):
    tag = re.search(rf'<div id="{element_id}"[^>]*>', page).group(0)
    return 'style="display:none"' in tag


@pytest.fixture
def client(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(STATIC))
    with patch.dict(os.environ, {"SHARES_DATA_PATH": str(path)}):
        yield TestClient(app)


def _relay(handler, seen=None):
    def record(request):
        if seen is not None:
            seen.append(request)
        return handler(request)
    return patch(
        "sharesview.fetcher.build_client",
        return_value=httpx.AsyncClient(transport=httpx.MockTransport(record)),
    )


class TestPage:
    def test_cik_content(self, client):
        seen = []
        with _relay(lambda r: httpx.Response(200, json=REMOTE), seen):
            resp = client.get("/", params={"CIK": "320193"})
        assert resp.status_code == 200
        page = resp.text
        assert seen[0].url.host == "api.allorigins.win"
        assert "CIK0000320193" in seen[0].url.params["url"]
        assert "<title>Apple Inc. | Shares Outstanding</title>" in page
        assert 'id="share-max-value">16,406,397,000<' in page
        assert 'id="share-min-value">15,115,823,000<' in page
        assert not _hidden(page, "content")
        assert _hidden(page, "loader") and _hidden(page, "error-message")

    def test_cik_404(self, client):
        with _relay(lambda r: httpx.Response(404)):
            page = client.get("/?CIK=320193").text
        assert _hidden(page, "content") and _hidden(page, "loader")
        assert not _hidden(page, "error-message")
        assert "Failed to fetch data for CIK 320193. Status: 404" in page

    def test_no_query_uses_default_dataset(self, client):
        page = client.get("/").text
        assert "<h1>Johnson &amp; Johnson | Shares Outstanding</h1>" in page
        assert 'id="share-max-value">2,632,512,803<' in page
        assert 'id="share-max-fy">2021<' in page
        assert 'id="share-min-value">2,406,938,583<' in page

    @pytest.mark.parametrize("query", ["?CIK=", "?CIK=abc", "?CIK=12345678901", "?CIK=-1", "?cik=320193"])
    def test_bad_cik_falls_back(self, client, query):
        with patch("sharesview.fetcher.build_client", side_effect=AssertionError("no remote call")):
            page = client.get("/" + query).text
        assert "Johnson &amp; Johnson | Shares Outstanding" in page

    def test_first_cik_wins(self, client):
        seen = []
        with _relay(lambda r: httpx.Response(200, json=REMOTE), seen):
            client.get("/?CIK=320193&CIK=abc")
        assert "CIK0000320193" in seen[0].url.params["url"]


class TestApi:
    def test_shares_json(self, client):
        with _relay(lambda r: httpx.Response(200, json=REMOTE)):
            data = client.get("/api/shares", params={"CIK": "320193"}).json()
        assert data["state"] == "content"
        assert data["content_visible"] is True
        assert data["loader_visible"] is False
        assert data["entity_name"] == "Apple Inc."
        assert data["max_fy"] == "2021"

    def test_shares_json_error(self, client):
        with _relay(lambda r: httpx.Response(500)):
            data = client.get("/api/shares?CIK=42").json()
        assert data["state"] == "error"
        assert data["error_visible"] is True
        assert data["error_message"] == "Failed to fetch data for CIK 42. Status: 500"

    def test_data_json(self, client):
        resp = client.get("/data.json")
        assert resp.status_code == 200
        assert resp.json() == STATIC

    def test_data_json_missing(self, tmp_path):
        with patch.dict(os.environ, {"SHARES_DATA_PATH": str(tmp_path / "missing.json")}):
            resp = TestClient(app).get("/data.json")
        assert resp.status_code == 404

    def test_health(self, client):
        data = client.get("/api/health").json()
        assert data["status"] == "ok"
        assert data["data_path_exists"] is True
