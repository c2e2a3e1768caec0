from __future__ import annotations

from fastapi.testclient import TestClient


def test_batch_encode_mixed_valid_and_invalid_items(client: TestClient) -> None:
    r = client.post(
        "/api/batch",
        json={
            "operation": "encode",
            "data": [
                {"latitude": 0, "longitude": 0},
                {"latitude": 91, "longitude": 0},
                {"longitude": 10},
                {"latitude": 27.9881, "longitude": 86.925, "elevation": 8848},
            ],
        },
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["operation"] == "encode"
    assert body["processed"] == 4
    assert body["successful"] == 2
    assert body["failed"] == 2

    assert [item["index"] for item in body["results"]] == [0, 3]
    assert body["results"][0]["geopin"] == "AAAA-AAAA-AAAD"
    assert body["results"][1]["dimensions"] == "3D"

    codes = {e["index"]: e["code"] for e in body["errors"]}
    assert codes == {1: "INVALID_COORDINATE", 2: "BATCH_ITEM_INVALID"}


def test_batch_decode(client: TestClient) -> None:
    r = client.post(
        "/api/batch",
        json={
            "operation": "decode",
            "data": [{"geopin": "AAAA-AAAA-AAAD"}, {"geopin": "0123-0123-0123"}],
        },
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["successful"] == 1
    assert abs(body["results"][0]["coordinates"]["latitude"]) < 1e-6
    assert body["errors"][0]["code"] == "UNKNOWN_CHARACTER"
    assert body["errors"][0]["input"] == {"geopin": "0123-0123-0123"}


def test_batch_unknown_operation_is_rejected(client: TestClient) -> None:
    r = client.post("/api/batch", json={"operation": "distance", "data": []})
    assert r.status_code == 400, r.text
    assert r.json()["code"] == "BATCH_OPERATION_INVALID"


def test_batch_over_limit_is_rejected(client: TestClient) -> None:
    # conftest caps batches at 5 items.
    data = [{"latitude": 0, "longitude": 0}] * 6
    r = client.post("/api/batch", json={"operation": "encode", "data": data})
    assert r.status_code == 400, r.text
    body = r.json()
    assert body["code"] == "BATCH_TOO_LARGE"
    assert body["details"] == {"max_items": 5, "received": 6}


def test_batch_encode_boolean_item_is_invalid(client: TestClient) -> None:
    r = client.post(
        "/api/batch",
        json={"operation": "encode", "data": [{"latitude": True, "longitude": 0}]},
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["successful"] == 0
    assert body["errors"][0]["code"] == "BATCH_ITEM_INVALID"
