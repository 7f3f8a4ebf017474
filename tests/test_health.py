from __future__ import annotations


def test_health_heartbeat(client) -> None:
    r = client.get("/health/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_db_masks_url(client) -> None:
    r = client.get("/health/db")
    assert r.status_code == 200
    body = r.json()
    assert body["orm"] == "ok"
    assert body["orm_db_url"].startswith("sqlite")
