import requests
from fastapi.testclient import TestClient

from intern_portal_api.app.main import create_app
from portal_client import PortalAPI


class _AppSession:
    """Minimal ``requests.Session`` stand-in that calls the app in-process."""

    def __init__(self, client: TestClient) -> None:
        self._client = client
        self.sent_headers = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.sent_headers.append(headers or {})
        upstream = self._client.request(method, url, json=json, headers=headers)
        response = requests.Response()
        response.status_code = upstream.status_code
        response._content = upstream.content
        response.headers.update(upstream.headers)
        response.url = url
        return response


class _DownSession:
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError(f"cannot reach {url}")


def _api(test_client: TestClient, **kwargs) -> PortalAPI:
    return PortalAPI(base_url="http://testserver/", session=_AppSession(test_client), **kwargs)


def test_static_views(client):
    api = _api(client)

    assert api.hello() == ("Hello World", None)
    user, error = api.get_user()
    assert error is None
    assert user["referral"] == "nachiketh2025"
    leaderboard, error = api.get_leaderboard()
    assert error is None
    assert leaderboard[0] == {"name": "Alice", "donations": 20000}


def test_status_checks_round_trip(client):
    api = _api(client)

    record, error = api.create_status_check("alice")
    assert error is None
    assert record["client_name"] == "alice"

    records, error = api.list_status_checks()
    assert error is None
    assert records == [record]


def test_validation_error_is_reported(client):
    record, error = _api(client).create_status_check("")

    assert record is None
    assert error == {"status_code": 400, "message": "client_name is required"}


def test_unavailable_store_is_reported(offline_client):
    records, error = _api(offline_client).list_status_checks()

    assert records == []
    assert error["status_code"] == 503
    assert error["message"].startswith("Database not available: ")


def test_dashboard_combines_profile_rewards_and_rank(client):
    dashboard, error = _api(client).get_dashboard()

    assert error is None
    assert dashboard["user"]["name"] == "Nachiketh"
    assert dashboard["rank"] == 3
    unlocked = [reward["name"] for reward in dashboard["rewards"] if reward["unlocked"]]
    assert unlocked == ["Bronze Badge", "Silver Badge", "Gold Badge"]
    assert dashboard["next_reward"]["name"] == "Platinum Badge"
    assert dashboard["next_reward"]["remaining"] == 4580


def test_api_key_is_forwarded(client):
    session = _AppSession(client)
    api = PortalAPI(base_url="http://testserver", session=session, api_key="token-123")

    api.hello()

    assert session.sent_headers == [{"Authorization": "Bearer token-123"}]


def test_transport_failure_is_reported():
    api = PortalAPI(base_url="http://portal.invalid", session=_DownSession())

    user, error = api.get_user()

    assert user is None
    assert error["status_code"] is None
    assert "portal.invalid" in error["message"]
