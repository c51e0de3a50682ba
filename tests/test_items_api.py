"""HTTP surface: envelope, status codes and error mapping."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError


def _create(client, name: str = "Widget", price: float = 9.99):
    return client.post("/items", json={"name": name, "price": price})


def test_create_returns_201_with_assigned_id(client) -> None:
    resp = client.post("/items", json={"id": 50, "name": "Widget", "price": 9.99})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"] == {"id": 1, "name": "Widget", "price": 9.99}


def test_create_rejects_missing_fields(client) -> None:
    resp = client.post("/items", json={"name": "Widget"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"]["code"] == "validation_error"
    assert "price" in body["error"]["details"]


def test_create_rejects_non_json_body(client) -> None:
    resp = client.post("/items", data="nope", content_type="text/plain")

    assert resp.status_code == 400


def test_get_item(client) -> None:
    _create(client)

    resp = client.get("/items/1")

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"id": 1, "name": "Widget", "price": 9.99}


def test_get_missing_item_is_404(client) -> None:
    resp = client.get("/items/9")

    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "not_found"


@pytest.mark.parametrize("raw_id", ["abc", "-1", "0", "1.5"])
def test_invalid_id_is_400(client, raw_id: str) -> None:
    for resp in (
        client.get(f"/items/{raw_id}"),
        client.put(f"/items/{raw_id}", json={"name": "Widget", "price": 1.0}),
        client.delete(f"/items/{raw_id}"),
    ):
        assert resp.status_code == 400
        body = resp.get_json()
        assert body["error"]["code"] == "validation_error"
        assert body["error"]["details"] == {"id": raw_id}


def test_update_uses_path_id(client) -> None:
    _create(client)

    resp = client.put("/items/1", json={"id": 7, "name": "Widget XL", "price": 12.5})

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"id": 1, "name": "Widget XL", "price": 12.5}
    assert client.get("/items/7").status_code == 404


def test_update_of_absent_id_creates_it(client) -> None:
    resp = client.put("/items/3", json={"name": "Gadget", "price": 2.0})

    assert resp.status_code == 200
    assert client.get("/items/3").get_json()["data"]["name"] == "Gadget"


def test_delete_is_204_even_when_absent(client) -> None:
    _create(client)

    first = client.delete("/items/1")
    second = client.delete("/items/1")

    assert (first.status_code, second.status_code) == (204, 204)
    assert first.data == b""
    assert client.get("/items/1").status_code == 404


def test_list_items(client) -> None:
    for name in ("a", "b", "c"):
        _create(client, name=name)

    resp = client.get("/items")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert sorted(item["id"] for item in data) == [1, 2, 3]


def test_corrupt_record_is_400(client, redis_client) -> None:
    redis_client.set("item:1", b"oops")

    assert client.get("/items/1").status_code == 400
    resp = client.get("/items")
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "encoding_error"


def test_store_outage_is_500(client, redis_client) -> None:
    with patch.object(redis_client, "incr", side_effect=RedisConnectionError("down")):
        resp = _create(client)

    assert resp.status_code == 500
    assert resp.get_json()["error"]["code"] == "store_unavailable"


def test_method_not_allowed(client) -> None:
    resp = client.patch("/items")

    assert resp.status_code == 405
    assert resp.get_json()["error"]["code"] == "http_error"


def test_health(client, redis_client) -> None:
    assert client.get("/health").get_json()["data"] == {"status": "ok", "store": "ok"}

    with patch.object(redis_client, "ping", side_effect=RedisConnectionError("down")):
        resp = client.get("/health")

    assert resp.status_code == 500


def test_widget_scenario(client) -> None:
    assert _create(client).get_json()["data"]["id"] == 1
    client.put("/items/1", json={"name": "Widget XL", "price": 12.5})
    assert client.get("/items/1").get_json()["data"] == {"id": 1, "name": "Widget XL", "price": 12.5}

    client.delete("/items/1")

    assert client.get("/items/1").status_code == 404
    assert client.get("/items").get_json()["data"] == []
