import pytest
import requests
from fastapi.testclient import TestClient

from main import app

VIDEO_URL = "https://www.tiktok.com/@skatecat/video/7234567890123456789"


@pytest.fixture
def client():
    return TestClient(app)


def test_root_lists_endpoints(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["resolve"] == "/api/resolve"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["upstream"] == "https://ttdownloader.com/req/"


def test_relay_missing_url_is_client_error(client, fake_post):
    fake = fake_post()
    response = client.post("/api/download", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "URL missing"}
    assert fake.calls == []


def test_relay_returns_upstream_body_verbatim(client, fake_post, fake_response, load_fixture):
    html = load_fixture("ttdownloader_two_links.html")
    fake_post(fake_response(html))
    response = client.post("/api/download", json={"url": VIDEO_URL})
    assert response.status_code == 200
    assert response.text == html
    assert response.headers["content-type"].startswith("text/html")


def test_relay_transport_failure_is_generic(client, fake_post):
    fake_post(error=requests.Timeout("read timed out after 30s"))
    response = client.post("/api/download", json={"url": VIDEO_URL})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch video data"}


def test_resolve_returns_structured_links(client, fake_post, fake_response, load_fixture):
    fake_post(fake_response(load_fixture("ttdownloader_two_links.html")))
    response = client.post("/api/resolve", json={"url": VIDEO_URL})

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Cat learns to skateboard"
    assert [link["filename"] for link in body["links"]] == ["tiktok-video-1.mp4", "tiktok-video-2.mp4"]
    assert body["links"][0]["quality"] == "HD"
    assert body["links"][0]["has_watermark"] is False
    assert body["links"][1]["has_watermark"] is True


def test_resolve_rejects_non_tiktok_url_without_calling_upstream(client, fake_post):
    fake = fake_post()
    response = client.post("/api/resolve", json={"url": "https://example.com/video"})
    assert response.status_code == 400
    assert response.json() == {"error": "Please enter a valid TikTok URL"}
    assert fake.calls == []


def test_resolve_without_links_reports_extraction_error(client, fake_post, fake_response, load_fixture):
    fake_post(fake_response(load_fixture("no_links.html")))
    response = client.post("/api/resolve", json={"url": VIDEO_URL})
    assert response.status_code == 422
    assert response.json() == {"error": "no download links found"}


def test_resolve_surfaces_upstream_json_error(client, fake_post, fake_response):
    fake_post(fake_response('{"message": "Video is private"}', content_type="application/json"))
    response = client.post("/api/resolve", json={"url": VIDEO_URL})
    assert response.status_code == 422
    assert response.json() == {"error": "upstream error: Video is private"}


def test_relay_without_body_is_client_error(client, fake_post):
    fake = fake_post()
    response = client.post("/api/download")
    assert response.status_code == 400
    assert response.json() == {"error": "URL missing"}
    assert fake.calls == []


def test_relay_with_malformed_url_field_is_client_error(client, fake_post):
    fake = fake_post()
    response = client.post("/api/download", json={"url": ["not", "a", "string"]})
    assert response.status_code == 400
    assert response.json() == {"error": "URL missing"}
    assert fake.calls == []


def test_resolve_without_body_is_client_error(client, fake_post):
    fake = fake_post()
    response = client.post("/api/resolve")
    assert response.status_code == 400
    assert response.json() == {"error": "Please enter a TikTok URL"}
    assert fake.calls == []
