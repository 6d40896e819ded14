from __future__ import annotations

import pytest

import raisin_tracker.payroll.service as payroll_service


def _add_employee(client, name: str) -> dict:
    res = client.post("/api/employees", json={"name": name})
    assert res.status_code == 200
    return res.get_json()


def _add_work(client, **body) -> dict:
    res = client.post("/api/daily-work", json=body)
    assert res.status_code == 200, res.get_json()
    return res.get_json()


def test_full_entry_lifecycle(client):
    asha = _add_employee(client, "Asha")
    assert asha["id"] == 1
    assert asha["created_at"]

    created = _add_work(client, employee_id=1, date="2024-06-03", kgs_cleaned=10, earnings=30)
    assert created["id"]
    assert created["employee_name"] == "Asha"

    listed = client.get("/api/daily-work?date=2024-06-03").get_json()
    assert len(listed) == 1
    assert listed[0]["employee_id"] == 1
    assert listed[0]["employee_name"] == "Asha"
    assert listed[0]["kgs_cleaned"] == 10
    assert listed[0]["earnings"] == 30
    assert listed[0]["date"] == "2024-06-03"

    res = client.put("/api/daily-work", json={"id": created["id"], "kgs_cleaned": 12, "earnings": 36})
    assert res.status_code == 200
    body = res.get_json()
    assert body["kgs_cleaned"] == 12
    assert body["earnings"] == 36
    assert body["updated_at"]

    res = client.delete("/api/daily-work", json={"id": created["id"]})
    assert res.status_code == 200
    assert res.get_json()["id"] == created["id"]
    assert res.get_json()["deleted_at"]

    assert client.get("/api/daily-work?date=2024-06-03").get_json() == []


def test_employee_list_sorted_by_name(client):
    for name in ["Deepa", "Asha", "Chetan"]:
        _add_employee(client, name)

    names = [e["name"] for e in client.get("/api/employees").get_json()]
    assert names == ["Asha", "Chetan", "Deepa"]


@pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": "   "}, {"name": None}])
def test_blank_employee_name_rejected(client, body):
    res = client.post("/api/employees", json=body)

    assert res.status_code == 400
    assert res.get_json()["error"] == "Name is required"
    assert res.get_json()["fields"]["name"]
    assert client.get("/api/employees").get_json() == []


def test_duplicate_entry_for_same_day_is_a_store_failure(client):
    _add_employee(client, "Asha")
    _add_work(client, employee_id=1, date="2024-06-03", kgs_cleaned=10, earnings=30)

    res = client.post("/api/daily-work", json={"employee_id": 1, "date": "2024-06-03", "kgs_cleaned": 5, "earnings": 15})

    assert res.status_code == 500
    assert res.get_json() == {"error": "Failed to create daily work entry"}
    rows = client.get("/api/daily-work?date=2024-06-03").get_json()
    assert len(rows) == 1
    assert rows[0]["kgs_cleaned"] == 10


def test_create_missing_field_rejected_with_field_errors(client):
    _add_employee(client, "Asha")

    res = client.post("/api/daily-work", json={"employee_id": 1, "kgs_cleaned": 5})

    assert res.status_code == 400
    assert "date" in res.get_json()["fields"]


def test_create_accepts_zero_quantity(client):
    _add_employee(client, "Asha")

    created = _add_work(client, employee_id=1, date="2024-06-03", kgs_cleaned=0, earnings=0)

    assert created["kgs_cleaned"] == 0
    assert created["earnings"] == 0


def test_create_without_earnings_uses_rate(client):
    _add_employee(client, "Asha")

    created = _add_work(client, employee_id=1, date="2024-06-03", kgs_cleaned=4.5)

    assert created["earnings"] == 13.5


def test_create_for_unknown_employee_rejected(client):
    res = client.post("/api/daily-work", json={"employee_id": 7, "date": "2024-06-03", "kgs_cleaned": 1})

    assert res.status_code == 400
    assert res.get_json()["error"] == "Employee does not exist"


def test_negative_quantity_rejected(client):
    _add_employee(client, "Asha")

    res = client.post("/api/daily-work", json={"employee_id": 1, "date": "2024-06-03", "kgs_cleaned": -1})

    assert res.status_code == 400
    assert "kgs_cleaned" in res.get_json()["fields"]


def test_update_unknown_id_is_404_and_changes_nothing(client):
    _add_employee(client, "Asha")
    _add_work(client, employee_id=1, date="2024-06-03", kgs_cleaned=10, earnings=30)

    res = client.put("/api/daily-work", json={"id": 999, "kgs_cleaned": 1, "earnings": 3})

    assert res.status_code == 404
    assert client.get("/api/daily-work?date=2024-06-03").get_json()[0]["kgs_cleaned"] == 10


def test_update_missing_quantity_is_400(client):
    res = client.put("/api/daily-work", json={"id": 1})
    assert res.status_code == 400


def test_delete_is_not_found_the_second_time(client):
    _add_employee(client, "Asha")
    created = _add_work(client, employee_id=1, date="2024-06-03", kgs_cleaned=10, earnings=30)

    assert client.delete("/api/daily-work", json={"id": created["id"]}).status_code == 200
    assert client.delete("/api/daily-work", json={"id": created["id"]}).status_code == 404


def test_delete_without_id_is_400(client):
    res = client.delete("/api/daily-work", json={})

    assert res.status_code == 400
    assert res.get_json()["error"] == "ID is required"


def test_list_daily_work_bad_date_is_400(client):
    assert client.get("/api/daily-work?date=June-3").status_code == 400


def test_list_daily_work_empty_day(client):
    res = client.get("/api/daily-work?date=2030-01-01")

    assert res.status_code == 200
    assert res.get_json() == []


def test_dashboard_weekly_totals_cover_sunday_through_today(client, monkeypatch, fixed_now):
    monkeypatch.setattr(payroll_service, "now_local", lambda: fixed_now)
    _add_employee(client, "Asha")
    _add_employee(client, "Bhavna")
    _add_work(client, employee_id=1, date="2024-06-01", kgs_cleaned=100, earnings=300)
    _add_work(client, employee_id=1, date="2024-06-02", kgs_cleaned=10, earnings=30)
    _add_work(client, employee_id=2, date="2024-06-05", kgs_cleaned=5, earnings=15)
    _add_work(client, employee_id=2, date="2024-06-06", kgs_cleaned=50, earnings=150)

    stats = client.get("/api/dashboard/stats").get_json()

    assert stats == {
        "totalEmployees": 2,
        "totalKgsToday": 5,
        "totalEarningsToday": 15,
        "weeklyStats": {"totalKgs": 15, "totalEarnings": 45},
    }


def test_demo_employees_seeded_on_startup(tmp_path, monkeypatch):
    from raisin_tracker.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"DATABASE_URL": f"sqlite:///{tmp_path / 'seeded.db'}", "AUTO_SEED_DB": True})
    try:
        names = [e["name"] for e in app.test_client().get("/api/employees").get_json()]
    finally:
        app.extensions["raisin_tracker"].close()

    assert names == ["Asha", "Bhavna", "Chetan", "Deepa"]


def test_all_timestamps_are_utc_with_offset(client):
    asha = _add_employee(client, "Asha")
    created = _add_work(client, employee_id=1, date="2024-06-03", kgs_cleaned=10, earnings=30)

    updated = client.put("/api/daily-work", json={"id": created["id"], "kgs_cleaned": 12}).get_json()
    deleted = client.delete("/api/daily-work", json={"id": created["id"]}).get_json()

    for stamp in [asha["created_at"], created["created_at"], updated["updated_at"], deleted["deleted_at"]]:
        assert stamp.endswith("+00:00")
        assert "." not in stamp


@pytest.mark.parametrize("kgs", [1e308, 100_000_000])
def test_quantity_beyond_column_range_rejected(client, kgs):
    _add_employee(client, "Asha")

    res = client.post("/api/daily-work", json={"employee_id": 1, "date": "2024-06-03", "kgs_cleaned": kgs})

    assert res.status_code == 400
    assert "kgs_cleaned" in res.get_json()["fields"]
    assert client.get("/api/daily-work?date=2024-06-03").get_json() == []


def test_computed_earnings_beyond_column_range_rejected(client):
    _add_employee(client, "Asha")

    res = client.post("/api/daily-work", json={"employee_id": 1, "date": "2024-06-03", "kgs_cleaned": 99_999_999.99})

    assert res.status_code == 400
    assert "earnings" in res.get_json()["error"]
    assert client.get("/api/daily-work?date=2024-06-03").get_json() == []


def test_update_beyond_column_range_rejected(client):
    _add_employee(client, "Asha")
    created = _add_work(client, employee_id=1, date="2024-06-03", kgs_cleaned=10, earnings=30)

    res = client.put("/api/daily-work", json={"id": created["id"], "kgs_cleaned": 1, "earnings": 1e308})

    assert res.status_code == 400
    assert client.get("/api/daily-work?date=2024-06-03").get_json()[0]["earnings"] == 30


@pytest.mark.parametrize(
    "override, field",
    [
        ({"employee_id": True}, "employee_id"),
        ({"employee_id": "1"}, "employee_id"),
        ({"date": 1717372800}, "date"),
        ({"date": "03/06/2024"}, "date"),
        ({"kgs_cleaned": "10"}, "kgs_cleaned"),
        ({"kgs_cleaned": True}, "kgs_cleaned"),
    ],
)
def test_create_rejects_coercible_values(client, override, field):
    _add_employee(client, "Asha")
    body = {"employee_id": 1, "date": "2024-06-03", "kgs_cleaned": 10, **override}

    res = client.post("/api/daily-work", json=body)

    assert res.status_code == 400
    assert field in res.get_json()["fields"]
    assert client.get("/api/daily-work?date=2024-06-03").get_json() == []


def test_update_and_delete_reject_boolean_id(client):
    _add_employee(client, "Asha")
    _add_work(client, employee_id=1, date="2024-06-03", kgs_cleaned=10, earnings=30)

    assert client.put("/api/daily-work", json={"id": True, "kgs_cleaned": 1}).status_code == 400
    assert client.delete("/api/daily-work", json={"id": True}).status_code == 400
    assert len(client.get("/api/daily-work?date=2024-06-03").get_json()) == 1
