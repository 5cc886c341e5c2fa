from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote blog seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blog.app import create_app
from blog.core import config as core_config
from blog.domain.errors import StorageError
from blog.repositories.memory_repository import InMemoryPostRepository


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    # limpa caches para forçar re-leitura de envs
    core_config.get_settings.cache_clear()
    with TestClient(create_app()) as test_client:
        yield test_client
    core_config.get_settings.cache_clear()


def test_health(client):
    assert client.get("/").text == "Hello world!"
    assert client.get("/health").json() == {"status": "healthy", "service": "blog"}


def test_crud_flow(client):
    resp = client.post("/posts", json={"title": "Hello", "slug": "hello", "body": "World"})
    assert resp.status_code == 201
    post = resp.json()
    assert post["id"] > 0
    assert (post["title"], post["slug"], post["body"]) == ("Hello", "hello", "World")
    post_id = post["id"]

    assert client.get("/posts").json() == [post]
    assert client.get(f"/posts/{post_id}").json() == post

    resp = client.put(f"/posts/{post_id}", json={"title": "Hello2", "body": "World2"})
    assert resp.status_code == 200
    assert resp.json() == {"id": post_id, "title": "Hello2", "slug": "hello", "body": "World2"}

    resp = client.delete(f"/posts/{post_id}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Post deleted successfully"}

    assert client.delete(f"/posts/{post_id}").status_code == 404
    resp = client.get(f"/posts/{post_id}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Post not found"}


def test_validation_errors_are_400(client):
    resp = client.post("/posts", json={"title": " ", "slug": "hello", "body": "World"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Title cannot be empty"}
    resp = client.get("/posts/0")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid post ID"}
    assert client.put("/posts/-3", json={"title": "a", "body": "b"}).status_code == 400


def test_ids_beyond_integer_column_are_400(client):
    too_big = 2**63
    for resp in (
        client.get(f"/posts/{too_big}"),
        client.put(f"/posts/{too_big}", json={"title": "a", "body": "b"}),
        client.delete(f"/posts/{too_big}"),
    ):
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid post ID"}
    assert client.get(f"/posts/{too_big - 1}").status_code == 404


def test_update_missing_is_404(client):
    resp = client.put("/posts/999", json={"title": "a", "body": "b"})
    assert resp.status_code == 404


class FailingRepository(InMemoryPostRepository):
    async def find_all(self):
        raise StorageError("Could not acquire a database connection")


def test_storage_errors_are_500():
    settings = replace(core_config.get_settings(), storage_backend="memory")
    with TestClient(create_app(settings, repository=FailingRepository())) as client:
        resp = client.get("/posts")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Could not acquire a database connection"}
