"""Tests for the requests based API client."""

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from face_client import DEFAULT_BASE_URL, FaceAPI


def make_response(status_code, payload=None, url="http://faces.test/"):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(payload).encode() if payload is not None else b""
    response.url = url
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return FaceAPI(base_url="http://faces.test/", session=session)


def test_base_url_defaults(monkeypatch):
    monkeypatch.delenv("FACE_API_BASE_URL", raising=False)
    assert FaceAPI().base_url == DEFAULT_BASE_URL

    monkeypatch.setenv("FACE_API_BASE_URL", "http://elsewhere:9000/")
    assert FaceAPI().base_url == "http://elsewhere:9000"


def test_create_face_sends_json_body(api, session):
    session.request.return_value = make_response(200, {"id": 3})
    due = datetime(2024, 5, 1, 9, 30, tzinfo=timezone(timedelta(hours=2)))

    face_id, error = api.create_face("buy milk", ("errand", "home"), due)

    assert (face_id, error) == (3, None)
    session.request.assert_called_once_with(
        method="POST",
        url="http://faces.test/face/",
        json={"text": "buy milk", "tags": ["errand", "home"], "due": "2024-05-01T09:30:00+02:00"},
        timeout=15,
    )


def test_create_face_passes_string_timestamps_through(api, session):
    session.request.return_value = make_response(200, {"id": 0})
    api.create_face("x", [], "2024-05-01T00:00:00Z")
    assert session.request.call_args.kwargs["json"]["due"] == "2024-05-01T00:00:00Z"


def test_get_face(api, session):
    face = {"id": 1, "text": "call bob", "tags": ["work"], "due": "2024-05-01T00:00:00Z"}
    session.request.return_value = make_response(200, face)

    assert api.get_face(1) == (face, None)
    assert session.request.call_args.kwargs["url"] == "http://faces.test/face/1"


def test_get_missing_face_returns_error(api, session):
    session.request.return_value = make_response(404, {"detail": "face with id=9 not found"})

    face, error = api.get_face(9)

    assert face is None
    assert error == {"status_code": 404, "message": "face with id=9 not found"}


def test_delete_face(api, session):
    session.request.return_value = make_response(200)
    assert api.delete_face(1) == (True, None)
    assert session.request.call_args.kwargs["method"] == "DELETE"

    session.request.return_value = make_response(404, {"detail": "face with id=1 not found"})
    ok, error = api.delete_face(1)
    assert ok is False
    assert error["status_code"] == 404


def test_delete_all_faces(api, session):
    session.request.return_value = make_response(200)
    assert api.delete_all_faces() == (True, None)
    assert session.request.call_args.kwargs["url"] == "http://faces.test/face/"


def test_listing_paths(api, session):
    session.request.return_value = make_response(200, [])

    assert api.list_faces() == ([], None)
    assert session.request.call_args.kwargs["url"] == "http://faces.test/face/"

    api.faces_by_tag("two words")
    assert session.request.call_args.kwargs["url"] == "http://faces.test/tag/two%20words"

    api.faces_by_due_date(2024, 5, 1)
    assert session.request.call_args.kwargs["url"] == "http://faces.test/due/2024/5/1"


def test_listing_error_returns_empty_list(api, session):
    session.request.return_value = make_response(400, {"detail": "expect /due/<year>/<month>/<day>"})

    faces, error = api.faces_by_due_date(2024, 13, 1)

    assert faces == []
    assert error["status_code"] == 400


def test_non_json_error_body_uses_text(api, session):
    response = make_response(405)
    response._content = b"Method Not Allowed"
    session.request.return_value = response

    _, error = api.get_face(1)

    assert error == {"status_code": 405, "message": "Method Not Allowed"}


def test_connection_error(api, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    face_id, error = api.create_face("x", [], "2024-05-01T00:00:00Z")

    assert face_id is None
    assert error == {"status_code": None, "message": "connection refused"}


def test_tag_with_slash_is_refused_without_request(api, session):
    faces, error = api.faces_by_tag("a/b")

    assert faces == []
    assert error["status_code"] is None
    assert "'/'" in error["message"]
    session.request.assert_not_called()


class AppAdapter(BaseAdapter):
    """Transport adapter that sends requests through a FastAPI TestClient."""

    def __init__(self, client):
        super().__init__()
        self.client = client

    def send(self, request, **kwargs):
        url = urlsplit(request.url)
        target = f"{url.path}?{url.query}" if url.query else url.path
        served = self.client.request(
            request.method,
            target,
            content=request.body,
            headers={k: v for k, v in request.headers.items() if k.lower() != "content-length"},
        )
        response = requests.Response()
        response.status_code = served.status_code
        response._content = served.content
        response.headers = CaseInsensitiveDict(served.headers)
        response.reason = served.reason_phrase
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


@pytest.fixture
def live_api(client):
    session = requests.Session()
    session.mount("http://testserver", AppAdapter(client))
    return FaceAPI(base_url="http://testserver", session=session)


def test_round_trip_through_app(live_api):
    due = datetime(2024, 5, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    milk, error = live_api.create_face("buy milk", ["errand", "two words"], due)
    assert (milk, error) == (0, None)
    slashed, _ = live_api.create_face("path", ["a/b"], "2024-05-02T00:00:00Z")

    face, error = live_api.get_face(milk)
    assert error is None
    assert face["tags"] == ["errand", "two words"]
    assert datetime.fromisoformat(face["due"]) == due

    assert [f["id"] for f in live_api.faces_by_tag("two words")[0]] == [milk]
    assert [f["id"] for f in live_api.faces_by_due_date(2024, 5, 1)[0]] == [milk]
    assert sorted(f["id"] for f in live_api.list_faces()[0]) == [milk, slashed]

    faces, error = live_api.faces_by_tag("a/b")
    assert faces == [] and error["status_code"] is None


def test_round_trip_errors(live_api):
    face, error = live_api.get_face(5)
    assert face is None
    assert error == {"status_code": 404, "message": "face with id=5 not found"}

    faces, error = live_api.faces_by_due_date(2024, 13, 1)
    assert faces == [] and error["status_code"] == 400

    face_id, error = live_api.create_face("x", [], "2024-05-01T00:00:00")
    assert face_id is None and error["status_code"] == 400

    assert live_api.delete_face(5)[1]["status_code"] == 404
    assert live_api.delete_all_faces() == (True, None)
