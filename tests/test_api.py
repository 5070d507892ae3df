"""HTTP surface tests using FastAPI's test client."""

import random
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from closet_app.app import ClosetPlannerApp
from closet_app.config import ClosetConfig
from server.api import create_app

NOW = datetime(2026, 10, 21, 7, 45, tzinfo=timezone.utc)


@pytest.fixture()
def client(tmp_path: Path) -> TestClient:
    closet = ClosetPlannerApp(
        config=ClosetConfig(wardrobe_db_path=str(tmp_path / "api.db")),
        clock=lambda: NOW,
        rng=random.Random(0),
    )
    return TestClient(create_app(closet))


def _add(client: TestClient, slot: str, name: str, primary_hex: str) -> dict:
    response = client.post("/clothing", json={"slot": slot, "name": name, "primary_hex": primary_hex})
    assert response.status_code == 201
    return response.json()


def test_healthcheck(client: TestClient) -> None:
    payload = client.get("/healthz").json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "local"
    assert payload["timestamp"].startswith("2026-10-21")


def test_clothing_crud(client: TestClient) -> None:
    item = _add(client, "hoodie", "Navy Hoodie", "#1B2A4A")
    assert item["slot"] == "top"
    assert item["primary_hex"] == "#1b2a4a"

    listed = client.get("/clothing", params={"slot": "top"}).json()
    assert [entry["item_id"] for entry in listed] == [item["item_id"]]

    updated = client.put(f"/clothing/{item['item_id']}", json={"brand": "Nike"})
    assert updated.status_code == 200
    assert updated.json()["brand"] == "Nike"

    assert client.delete(f"/clothing/{item['item_id']}").json()["success"] is True
    assert client.delete(f"/clothing/{item['item_id']}").status_code == 404


def test_invalid_requests_are_rejected(client: TestClient) -> None:
    response = client.post("/clothing", json={"slot": "top", "name": "Odd", "primary_hex": "blue"})
    assert response.status_code == 422
    assert client.get("/clothing", params={"sort": "random"}).status_code == 400
    assert client.post("/clothing/missing/wear").status_code == 404


def test_daily_plan_needs_items(client: TestClient) -> None:
    response = client.post("/planner/daily")
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["status"] == "needs_items"
    assert detail["day_of_week"] == "Wednesday"


def test_plan_wear_rate_and_analytics(client: TestClient) -> None:
    top = _add(client, "top", "Navy Tee", "#1b2a4a")
    _add(client, "top", "Black Tee", "#1a1a1a")
    bottom = _add(client, "bottom", "Gray Shorts", "#808080")

    daily = client.post("/planner/daily")
    assert daily.status_code == 200
    plan = daily.json()
    assert plan["status"] == "ok"
    assert plan["date"] == "2026-10-21"
    assert plan["outfit"]["bottom"]["item_id"] == bottom["item_id"]
    assert 0 <= plan["outfit"]["drip_score"] <= 100

    week = client.post("/planner/week").json()
    assert [entry["day"] for entry in week["week"]] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

    worn = client.post(
        "/planner/wear",
        json={
            "top_id": top["item_id"],
            "bottom_id": bottom["item_id"],
            "harmony_score": 88,
            "drip_score": 84,
        },
    )
    assert worn.status_code == 201
    assert worn.json()["streak"] == 1
    entry_id = worn.json()["entry"]["entry_id"]

    rated = client.post(f"/history/{entry_id}/rating", json={"rating": 4})
    assert rated.status_code == 200
    assert rated.json()["rating"] == 4
    assert client.post("/history/unknown/rating", json={"rating": 4}).status_code == 404
    assert client.post(f"/history/{entry_id}/rating", json={"rating": 9}).status_code == 422

    analytics = client.get("/analytics").json()
    assert analytics["total_items"] == 3
    assert analytics["total_wears"] == 1
    assert analytics["streak"] == 1
    assert analytics["avg_harmony"] == 88
    assert analytics["most_worn_top"]["item_id"] == top["item_id"]


@pytest.mark.parametrize("field", ["slot", "name", "primary_hex", "tags"])
def test_null_fields_in_update_leave_item_unchanged(client: TestClient, field: str) -> None:
    item = _add(client, "top", "Navy Tee", "#1b2a4a")
    response = client.put(f"/clothing/{item['item_id']}", json={field: None})
    assert response.status_code == 200
    assert response.json()[field] == item[field]


def test_weekly_plan_needs_items(client: TestClient) -> None:
    _add(client, "top", "Navy Tee", "#1b2a4a")
    response = client.post("/planner/week")
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["status"] == "needs_items"
    assert (detail["tops"], detail["bottoms"]) == (1, 0)
    assert detail["week"] == [
        {"day": day, "outfit": None} for day in ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    ]


def test_update_rejected_by_item_invariants_is_a_bad_request(client: TestClient) -> None:
    item = _add(client, "top", "Navy Tee", "#1b2a4a")
    response = client.put(f"/clothing/{item['item_id']}", json={"name": "   "})
    assert response.status_code == 400
    assert "non-empty name" in response.json()["error"]
    assert client.get("/clothing").json()[0]["name"] == "Navy Tee"
