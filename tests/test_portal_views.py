from fastapi.testclient import TestClient

from intern_portal_api.app.core.config import Settings
from intern_portal_api.app.main import create_app
from intern_portal_api.app.services.portal_service import PortalDataService


def test_hello(client):
    response = client.get("/api")

    assert response.status_code == 200
    assert response.json() == {"message": "Hello World"}


def test_user_profile_is_static(client):
    first = client.get("/api/user")
    second = client.get("/api/user")

    assert first.status_code == 200
    assert first.json() == {"name": "Nachiketh", "referral": "nachiketh2025", "donations": 15420}
    assert second.json() == first.json()


def test_leaderboard_is_ordered_by_donations(client):
    response = client.get("/api/leaderboard")

    assert response.status_code == 200
    entries = response.json()
    assert [entry["name"] for entry in entries] == [
        "Alice",
        "Bob",
        "Nachiketh",
        "Charlie",
        "Diana",
        "Emma",
        "Frank",
    ]
    donations = [entry["donations"] for entry in entries]
    assert donations == sorted(donations, reverse=True)


def test_leaderboard_copies_cannot_change_provider_data():
    board = PortalDataService.get_leaderboard()
    board.clear()

    assert len(PortalDataService.get_leaderboard()) == 7


def test_cors_allows_any_origin_by_default(client):
    response = client.get("/api/user", headers={"Origin": "http://portal.example"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_can_be_restricted(store):
    config = Settings(record_store="memory", cors_origins=["http://portal.example"])
    client = TestClient(create_app(store=store, config=config))

    allowed = client.get("/api/user", headers={"Origin": "http://portal.example"})
    other = client.get("/api/user", headers={"Origin": "http://elsewhere.example"})

    assert allowed.headers["access-control-allow-origin"] == "http://portal.example"
    assert "access-control-allow-origin" not in other.headers


def test_cors_wildcard_is_sent_literally_even_with_cookies(client):
    response = client.get(
        "/api/leaderboard",
        headers={"Origin": "http://portal.example", "Cookie": "session=abc"},
    )

    assert response.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in response.headers


def test_trailing_slash_routes_answer_directly(client):
    for path in ("/api/", "/api/user/", "/api/leaderboard/", "/api/status/"):
        response = client.get(path, follow_redirects=False)
        assert response.status_code == 200, path

    assert client.get("/api/").json() == {"message": "Hello World"}
    created = client.post("/api/status/", json={"client_name": "carol"}, follow_redirects=False)
    assert created.status_code == 201
    assert created.json()["client_name"] == "carol"
