"""Shared fixtures: an in-process Redis server per test."""

from __future__ import annotations

import fakeredis
import pytest

from catalog import create_app
from catalog.repositories.item_repository import ItemRepository


@pytest.fixture
def redis_server() -> fakeredis.FakeServer:
    return fakeredis.FakeServer()


@pytest.fixture
def redis_client(redis_server: fakeredis.FakeServer) -> fakeredis.FakeRedis:
    return fakeredis.FakeRedis(server=redis_server)


@pytest.fixture
def repo(redis_client: fakeredis.FakeRedis) -> ItemRepository:
    return ItemRepository(redis_client)


@pytest.fixture
def app(redis_client: fakeredis.FakeRedis):
    return create_app({"TESTING": True}, redis_client=redis_client)


@pytest.fixture
def client(app):
    return app.test_client()
