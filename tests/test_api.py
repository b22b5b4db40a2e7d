from datetime import date
import pytest
from fastapi.testclient import TestClient
from api.dependencies import get_resolver, get_store
from holiday_sources import InMemoryHolidayStore
from main import app
from schemas.holidays.holiday import Holiday

RULES = [
    {
        "kind": "weekday_shift",
        "id": "weekday",
        "name": "Turno Semana",
        "start": "07:00",
        "end": "15:20",
        "quotas": [{"role": "leader", "quantity": 1}, {"role": "stocker", "quantity": 2}],
        "hasLunch": True,
        "allowedStarts": ["07:00", "08:00", "10:00"],
    },
    {
        "kind": "sunday_holiday_shift",
        "id": "sunday",
        "name": "Domingo/Feriado",
        "start": "07:00",
        "end": "13:00",
        "quotas": [{"role": "stocker", "quantity": 2}],
    },
    {
        "kind": "lunch",
        "id": "lunch",
        "name": "Almoço",
        "durationMinutes": 60,
        "minOnFloor": 1,
        "windows": ["11:00-13:00", "12:00-14:00", "13:00-15:00"],
    },
    {"kind": "rest", "id": "rest", "name": "Descanso", "minRestHours": 11},
]

EMPLOYEES = [
    {"id": "l1", "name": "Eduardo", "role": "leader"},
    {"id": "l2", "name": "Fernanda", "role": "leader"},
] + [
    {"id": f"s{i}", "name": name, "role": "stocker", "worksSunday": True, "sundayPattern": "2x2"}
    for i, name in enumerate(["Ana", "Bruno", "Carla", "Diego"], start=1)
]


class FakeResolver:
    def __init__(self):
        self.calls = []

    def resolve(self, year):
        self.calls.append(year)
        return [
            Holiday(date=date(year, 1, 1), name="Confraternização Universal"),
            Holiday(date=date(year, 7, 9), name="Revolução Constitucionalista", scope="state"),
        ]


class BrokenStore(InMemoryHolidayStore):
    def replace_year(self, year):
        raise ConnectionError("database unavailable")


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def client(resolver):
    store = InMemoryHolidayStore()
    app.dependency_overrides[get_resolver] = lambda: resolver
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_healthcheck(client):
    resp = client.get("/api/health/check")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_generate_resolves_holidays_when_omitted(client, resolver):
    resp = client.post(
        "/api/schedule/generate",
        json={"month": 1, "year": 2026, "employees": EMPLOYEES, "rules": RULES},
    )

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert resolver.calls == [2026]
    first = body["assignments"][0]
    assert first["date"] == "2026-01-01"
    assert first["shiftType"] == "holiday"
    assert first["start"] == "07:00"
    assert {row["name"] for row in body["schedule"]} == {e["name"] for e in EMPLOYEES}
    assert len(body["summary"]) == len(EMPLOYEES)


def test_generate_uses_supplied_holidays(client, resolver):
    resp = client.post(
        "/api/schedule/generate",
        json={
            "month": 1,
            "year": 2026,
            "employees": EMPLOYEES,
            "rules": RULES,
            "holidays": [],
        },
    )

    assert resp.status_code == 200, resp.text
    assert resolver.calls == []
    assert all(a["shiftType"] != "holiday" for a in resp.json()["assignments"])


def test_generate_infeasible_returns_issues(client):
    resp = client.post(
        "/api/schedule/generate",
        json={"month": 1, "year": 2026, "employees": EMPLOYEES[:3], "rules": RULES, "holidays": []},
    )

    assert resp.status_code == 422
    body = resp.json()
    assert body["message"].startswith("❌ No feasible schedule")
    assert any(i.get("role") == "stocker" and i["required"] == 2 for i in body["issues"])


def test_generate_without_shift_rules_is_bad_request(client):
    resp = client.post(
        "/api/schedule/generate",
        json={"month": 1, "year": 2026, "employees": EMPLOYEES, "rules": RULES[2:]},
    )
    assert resp.status_code == 400


def test_generate_rejects_bad_month(client):
    resp = client.post(
        "/api/schedule/generate",
        json={"month": 13, "year": 2026, "employees": EMPLOYEES, "rules": RULES},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"][0]["loc"] == ["body", "month"]


def test_generate_rejects_unknown_rule_kind(client):
    rules = RULES + [{"kind": "overtime", "id": "ot", "name": "Hora Extra"}]
    resp = client.post(
        "/api/schedule/generate",
        json={"month": 1, "year": 2026, "employees": EMPLOYEES, "rules": rules},
    )
    assert resp.status_code == 400


def test_generate_rejects_malformed_time(client):
    rules = [dict(RULES[0], start="7h00")] + RULES[1:]
    resp = client.post(
        "/api/schedule/generate",
        json={"month": 1, "year": 2026, "employees": EMPLOYEES, "rules": rules},
    )
    assert resp.status_code == 400


def test_list_holidays_filters_by_month(client):
    resp = client.get("/api/holidays/2026", params={"month": 7})
    assert resp.status_code == 200
    holidays = resp.json()["holidays"]
    assert holidays == [
        {
            "date": "2026-07-09",
            "name": "Revolução Constitucionalista",
            "scope": "state",
            "level": "mandatory",
        }
    ]


def test_sync_then_list_stored(client):
    resp = client.post("/api/holidays/sync", json={"year": 2026})
    assert resp.status_code == 200
    assert resp.json() == {
        "message": "Holidays synchronized successfully",
        "count": 2,
        "errors": [],
    }

    stored = client.get("/api/holidays/2026", params={"stored": True}).json()["holidays"]
    assert [h["date"] for h in stored] == ["2026-01-01", "2026-07-09"]
    assert client.get("/api/health/check").json()["holidayYears"] == [2026]


def test_sync_failure_returns_500(client):
    app.dependency_overrides[get_store] = lambda: BrokenStore()
    resp = client.post("/api/holidays/sync", json={"year": 2026})

    assert resp.status_code == 500
    assert resp.json()["errors"] == ["General error: database unavailable"]
