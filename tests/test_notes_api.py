"""
HTTP-level tests for the /notes endpoints using FastAPI's TestClient.
"""
from __future__ import annotations

import json
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.repositories.json_storage import StorageError


@pytest.fixture()
def client(settings_env):
    app = create_app(settings_env)
    with TestClient(app) as c:
        yield c


def _create(client, title="Test Note", content="Test Content") -> dict:
    resp = client.post("/notes", json={"title": title, "content": content})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_startup_creates_data_file(client, settings_env):
    assert settings_env.notes_path.exists()
    assert json.loads(settings_env.notes_path.read_text(encoding="utf-8")) == []


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_returns_detail_view(client):
    body = _create(client)
    assert body["title"] == "Test Note"
    assert body["content"] == "Test Content"
    assert body["createdAt"] == body["modifiedAt"]
    assert {"id", "createdAt", "modifiedAt"} <= set(body)


@pytest.mark.parametrize(
    "payload",
    [
        {"title": ""},
        {"title": "", "content": "x"},
        {"title": "x", "content": ""},
        {"content": "x"},
        {"title": 1, "content": "x"},
        {"title": "x", "content": "y", "extra": True},
    ],
)
def test_create_rejects_invalid_input(client, payload):
    resp = client.post("/notes", json=payload)
    assert resp.status_code == 400
    assert client.get("/notes").json() == []


def test_list_omits_content_and_sorts(client):
    _create(client, title="b")
    _create(client, title="A")
    _create(client, title="C")

    listing = client.get("/notes").json()
    assert [n["title"] for n in listing] == ["b", "A", "C"]
    assert all("content" not in n for n in listing)

    asc = client.get("/notes", params={"orderBy": "title"}).json()
    assert [n["title"] for n in asc] == ["A", "b", "C"]
    desc = client.get("/notes", params={"orderBy": "title", "order": "desc"}).json()
    assert [n["title"] for n in desc] == ["C", "b", "A"]

    by_created = client.get("/notes", params={"orderBy": "createdAt", "order": "desc"})
    assert by_created.status_code == 200
    assert len(by_created.json()) == 3


@pytest.mark.parametrize("params", [{"orderBy": "content"}, {"orderBy": "title", "order": "up"}])
def test_list_rejects_unknown_sort_values(client, params):
    assert client.get("/notes", params=params).status_code == 400


def test_get_one_round_trip(client):
    created = _create(client)
    resp = client.get(f"/notes/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_get_missing_returns_404(client):
    resp = client.get("/notes/non-existent-id")
    assert resp.status_code == 404
    assert "not found" in resp.json()["detail"]


def test_patch_updates_only_given_fields(client):
    created = _create(client, title="Old", content="Body")

    resp = client.patch(f"/notes/{created['id']}", json={"title": "Updated Title"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Updated Title"
    assert body["content"] == "Body"
    assert body["createdAt"] == created["createdAt"]
    modified = datetime.fromisoformat(body["modifiedAt"].replace("Z", "+00:00"))
    created_at = datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00"))
    assert modified > created_at

    resp = client.patch(f"/notes/{created['id']}", json={"content": "New body"})
    assert resp.json()["title"] == "Updated Title"
    assert resp.json()["content"] == "New body"


def test_patch_missing_returns_404(client):
    resp = client.patch("/notes/non-existent-id", json={"title": "Updated"})
    assert resp.status_code == 404


def test_patch_rejects_null_fields(client):
    created = _create(client)
    resp = client.patch(f"/notes/{created['id']}", json={"title": None})
    assert resp.status_code == 400


def test_delete_single(client):
    created = _create(client)
    resp = client.delete(f"/notes/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"deletedCount": 1}
    assert client.get(f"/notes/{created['id']}").status_code == 404

    again = client.delete(f"/notes/{created['id']}")
    assert again.status_code == 200
    assert again.json() == {"deletedCount": 0}


def test_delete_many(client):
    a = _create(client, title="Note 1", content="Content 1")
    b = _create(client, title="Note 2", content="Content 2")
    c = _create(client, title="Note 3", content="Content 3")

    resp = client.request("DELETE", "/notes", json={"ids": [a["id"], b["id"], "unknown"]})
    assert resp.status_code == 200
    assert resp.json() == {"deletedCount": 2}
    assert [n["id"] for n in client.get("/notes").json()] == [c["id"]]


@pytest.mark.parametrize("kwargs", [{"json": {"ids": []}}, {"json": {}}, {}])
def test_delete_many_with_no_ids(client, kwargs):
    _create(client)
    resp = client.request("DELETE", "/notes", **kwargs)
    assert resp.status_code == 200
    assert resp.json() == {"deletedCount": 0}
    assert len(client.get("/notes").json()) == 1


def test_write_failure_returns_500(client, monkeypatch):
    def boom(*args, **kwargs):
        raise StorageError("read-only")

    repo = client.app.state.note_repository
    monkeypatch.setattr(repo, "replace_all", boom)
    resp = client.post("/notes", json={"title": "t", "content": "c"})
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Storage unavailable"}


def test_corrupt_file_lists_as_empty(client, settings_env):
    settings_env.notes_path.write_text("[{broken", encoding="utf-8")
    resp = client.get("/notes")
    assert resp.status_code == 200
    assert resp.json() == []


def test_malformed_record_lists_as_empty_and_store_recovers(client, settings_env):
    record = {
        "id": "n1",
        "title": "t",
        "content": "c",
        "createdAt": 1700000000000,
        "modifiedAt": "2024-01-01T12:00:00.000Z",
    }
    settings_env.notes_path.write_text(json.dumps([record]), encoding="utf-8")

    resp = client.get("/notes")
    assert resp.status_code == 200
    assert resp.json() == []
    assert client.get("/notes/n1").status_code == 404

    created = _create(client)
    assert [n["id"] for n in client.get("/notes").json()] == [created["id"]]


def test_delete_many_rejects_non_list_ids(client):
    created = _create(client)
    resp = client.request("DELETE", "/notes", json={"ids": "abc"})
    assert resp.status_code == 400
    assert client.get(f"/notes/{created['id']}").status_code == 200
