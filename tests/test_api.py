"""Tests for the FastAPI application."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from reforma.api.app import create_app
from reforma.api.deps import Settings
from reforma.models.room import Room, RoomTasks
from reforma.project import RenovationProject

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app(settings=Settings()))


def _room_payload(**tasks: bool) -> dict[str, Any]:
    return {
        "id": "k1",
        "name": "Kitchen",
        "width": 4.0,
        "length": 3.0,
        "height": 2.6,
        "deduction_area": 2.0,
        "switch_count": 2,
        "socket_count": 3,
        "tasks": tasks,
    }


def _unit_prices_payload() -> list[dict[str, Any]]:
    return [
        {
            "id": "1", "category": "Demolition", "item": "Wall Stripping",
            "labor_rate": 30.0, "material_rate": 0.0, "apply_to": "demo_wall",
        },
        {
            "id": "8", "category": "Refinishing", "item": "Wall Paint",
            "labor_rate": 20.0, "material_rate": 20.0, "apply_to": "ref_wall_paint",
        },
    ]


def _point_costs_payload() -> list[dict[str, Any]]:
    return [
        {
            "id": "f10", "item": "Switch Point", "quantity": 0,
            "labor_rate_unit": 50.0, "material_rate_unit": 40.0,
            "counter": "switch_count",
        },
        {
            "id": "f11", "item": "Socket Point", "quantity": 0,
            "labor_rate_unit": 50.0, "material_rate_unit": 45.0,
            "counter": "socket_count",
        },
    ]


# ---------------------------------------------------------------------------
# GET /api/health
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": "0.1.0"}


# ---------------------------------------------------------------------------
# POST /api/estimate
# ---------------------------------------------------------------------------


class TestEstimate:
    def test_estimate(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json={
            "rooms": [_room_payload(demo_wall=True, ref_wall_paint=True)],
            "unit_prices": _unit_prices_payload(),
            "fixed_costs": _point_costs_payload(),
        })
        assert resp.status_code == 200
        data = resp.json()

        summary = data["summary"]
        assert summary["total_labor"] == pytest.approx(1970.0)
        assert summary["total_material"] == pytest.approx(903.0)
        assert summary["grand_total"] == pytest.approx(2873.0)
        assert summary["room_costs"][0]["total"] == pytest.approx(2873.0)
        assert summary["room_costs"][0]["demolition"] == pytest.approx(1032.0)
        assert summary["fixed_cost_total"] == pytest.approx(465.0)
        assert summary["quantity_totals"]["wall_area_net"] == pytest.approx(34.4)
        assert data["summary_dict"]["num_rooms"] == 1
        assert [fc["quantity"] for fc in data["fixed_costs"]] == [2.0, 3.0]

    def test_empty_body(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json={})
        assert resp.status_code == 200
        assert resp.json()["summary"]["grand_total"] == 0.0

    def test_invalid_room_rejected(self, client: TestClient) -> None:
        room = _room_payload()
        room["switch_count"] = -1
        resp = client.post("/api/estimate", json={"rooms": [room]})
        assert resp.status_code == 422

    def test_unknown_apply_to_is_accepted(self, client: TestClient) -> None:
        prices = [{
            "category": "Refinishing", "item": "Roof Tiles",
            "labor_rate": 10.0, "apply_to": "ref_roof_tiles",
        }]
        resp = client.post("/api/estimate", json={
            "rooms": [_room_payload(demo_wall=True)],
            "unit_prices": prices,
        })
        assert resp.status_code == 200
        assert resp.json()["summary"]["grand_total"] == 0.0


# ---------------------------------------------------------------------------
# POST /api/schedule
# ---------------------------------------------------------------------------


class TestSchedule:
    def test_schedule(self, client: TestClient) -> None:
        resp = client.post("/api/schedule", json={
            "rooms": [_room_payload(demo_wall=True, ref_wall_paint=True)],
        })
        assert resp.status_code == 200
        data = resp.json()

        assert data["quantities"]["demolition_area"] == pytest.approx(34.4)
        tasks = data["schedule"]["tasks"]
        assert [t["id"] for t in tasks] == ["demo", "painting"]
        assert [t["start_day"] for t in tasks] == [0, 0]
        assert data["schedule"]["total_days"] == 4
        assert data["working_days"] == 2
        assert data["weeks"] == 1
        assert data["gantt"][0]["width_percent"] == pytest.approx(50.0)

    def test_schedule_with_override(self, client: TestClient) -> None:
        resp = client.post("/api/schedule", json={
            "rooms": [_room_payload(demo_wall=True, ref_wall_paint=True)],
            "overrides": {"painting": {"dependency": "demo"}},
        })
        tasks = {t["id"]: t for t in resp.json()["schedule"]["tasks"]}
        assert tasks["painting"]["start_day"] == 2
        assert tasks["painting"]["is_overridden"] is True
        assert resp.json()["schedule"]["total_days"] == 6

    def test_unknown_override_phase_rejected(self, client: TestClient) -> None:
        resp = client.post("/api/schedule", json={
            "overrides": {"plastering": {"duration": 2}},
        })
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# POST /api/schedule/override
# ---------------------------------------------------------------------------


class TestOverrideEndpoints:
    def test_explicit_null_dependency_is_kept(self, client: TestClient) -> None:
        resp = client.post("/api/schedule/override", json={
            "phase_id": "roof",
            "dependency": None,
        })
        assert resp.status_code == 200
        assert resp.json() == {"overrides": {"roof": {"dependency": None}}}

    def test_merges_into_existing(self, client: TestClient) -> None:
        resp = client.post("/api/schedule/override", json={
            "overrides": {"roof": {"start_day": 3}, "demo": {"duration": 1}},
            "phase_id": "roof",
            "duration": 4,
        })
        assert resp.json()["overrides"] == {
            "roof": {"start_day": 3, "duration": 4},
            "demo": {"duration": 1},
        }

    def test_unknown_phase_is_404(self, client: TestClient) -> None:
        resp = client.post("/api/schedule/override", json={
            "phase_id": "plastering",
            "duration": 4,
        })
        assert resp.status_code == 404
        assert "plastering" in resp.json()["detail"]

    def test_negative_duration_is_422(self, client: TestClient) -> None:
        resp = client.post("/api/schedule/override", json={
            "phase_id": "roof",
            "duration": -2,
        })
        assert resp.status_code == 422

    def test_negative_stored_override_is_422(self, client: TestClient) -> None:
        resp = client.post("/api/schedule", json={
            "overrides": {"tiling": {"duration": -5}},
        })
        assert resp.status_code == 422

    def test_clear_field(self, client: TestClient) -> None:
        resp = client.post("/api/schedule/override/clear", json={
            "overrides": {"roof": {"start_day": 3, "dependency": None}},
            "phase_id": "roof",
            "fields": ["dependency"],
        })
        assert resp.status_code == 200
        assert resp.json() == {"overrides": {"roof": {"start_day": 3}}}

    def test_clear_whole_phase(self, client: TestClient) -> None:
        resp = client.post("/api/schedule/override/clear", json={
            "overrides": {"roof": {"start_day": 3}},
            "phase_id": "roof",
        })
        assert resp.json() == {"overrides": {}}

    def test_clear_unknown_phase_is_404(self, client: TestClient) -> None:
        resp = client.post("/api/schedule/override/clear", json={"phase_id": "bogus"})
        assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Sample project endpoints
# ---------------------------------------------------------------------------


class TestSampleEndpoints:
    def test_sample_project(self, client: TestClient) -> None:
        data = client.get("/api/sample-project").json()
        assert data["name"] == "Sample Townhouse"
        assert len(data["rooms"]) == 19
        switch = next(fc for fc in data["fixed_costs"] if fc["counter"] == "switch_count")
        assert switch["quantity"] == 11

    def test_sample_estimate(self, client: TestClient) -> None:
        resp = client.get("/api/sample-estimate")
        assert resp.status_code == 200
        data = resp.json()
        assert data["summary"]["grand_total"] > 0
        assert data["summary_dict"]["grand_total_formatted"].startswith("R$ ")
        assert len(data["summary"]["room_costs"]) == 19

    def test_sample_schedule(self, client: TestClient) -> None:
        resp = client.get("/api/sample-schedule")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["schedule"]["tasks"]) == 9
        assert data["schedule"]["tasks"][0]["id"] == "demo"
        assert len(data["gantt"]) == 9

    def test_injected_project(self) -> None:
        project = RenovationProject(name="Flat 12")
        project.add_room(Room(
            name="Bedroom", width=3, length=3, height=2.6,
            tasks=RoomTasks(ref_wall_paint=True),
        ))
        client = TestClient(create_app(settings=Settings(), project=project))

        assert client.get("/api/sample-project").json()["name"] == "Flat 12"
        tasks = client.get("/api/sample-schedule").json()["schedule"]["tasks"]
        assert [t["id"] for t in tasks] == ["painting"]


# ---------------------------------------------------------------------------
# App configuration
# ---------------------------------------------------------------------------


class TestAppConfig:
    def test_settings_on_app_state(self) -> None:
        settings = Settings(cors_origins=("https://reforma.example",))
        app = create_app(settings=settings)
        assert app.state.settings is settings

    def test_cors_allows_configured_origin(self) -> None:
        settings = Settings(cors_origins=("https://reforma.example",))
        client = TestClient(create_app(settings=settings))
        resp = client.get("/api/health", headers={"Origin": "https://reforma.example"})
        assert resp.headers["access-control-allow-origin"] == "https://reforma.example"

    def test_cors_ignores_other_origin(self) -> None:
        client = TestClient(create_app(settings=Settings()))
        resp = client.get("/api/health", headers={"Origin": "https://evil.example"})
        assert "access-control-allow-origin" not in resp.headers
