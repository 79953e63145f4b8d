from __future__ import annotations

from time_tracker.core.enums import LogType

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def test_login_page_renders(client):
    resp = client.get("/?mode=admin")

    assert resp.status_code == 200
    assert b'name="password"' in resp.data


def test_protected_pages_redirect_to_login(client):
    for path in ("/tracker", "/admin/employees", "/admin/reports", "/api/changes"):
        resp = client.get(path)
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/")


def test_admin_login_wrong_password(client):
    resp = client.post(
        "/", data={"mode": "admin", "email": ADMIN_EMAIL, "password": "nope"}, follow_redirects=True
    )

    assert b"Invalid admin email or password" in resp.data
    with client.session_transaction() as sess:
        assert "identity" not in sess


def test_employee_login_unknown_email(client):
    resp = client.post("/", data={"mode": "employee", "email": "ghost@example.com"})

    assert b"Employee not found. Please check your email." in resp.data


def test_employee_login_lands_on_tracker(employee_client):
    resp = employee_client.get("/tracker")

    assert resp.status_code == 200
    assert b"Tracking time for:" in resp.data
    assert b"Alice" in resp.data


def test_employee_cannot_open_admin_pages(employee_client):
    assert employee_client.get("/admin/employees").status_code == 403
    assert employee_client.get("/admin/reports").status_code == 403
    assert employee_client.get("/admin/reports.csv").status_code == 403
    assert employee_client.post("/admin/employees/add", data={"name": "X", "email": "x@y.z"}).status_code == 403


def test_employee_logs_for_self(employee_client, time_logs_repo, alice, bob):
    resp = employee_client.post("/tracker/log", data={"type": "check-in", "employee_id": str(bob.id)})

    assert resp.status_code == 302
    [log] = time_logs_repo.list_all()
    assert log.employee_id == alice.id
    assert log.type == LogType.CHECK_IN


def test_unknown_log_type_is_rejected(employee_client, time_logs_repo):
    resp = employee_client.post("/tracker/log", data={"type": "lunch"}, follow_redirects=True)

    assert b"Unknown time log type" in resp.data
    assert time_logs_repo.list_all() == []


def test_admin_must_select_employee(admin_client, time_logs_repo):
    resp = admin_client.post("/tracker/log", data={"type": "check-in"}, follow_redirects=True)

    assert b"Please select an employee" in resp.data
    assert time_logs_repo.list_all() == []


def test_admin_logs_for_selected_employee(admin_client, time_logs_repo, bob):
    resp = admin_client.post("/tracker/log", data={"type": "break-start", "employee_id": str(bob.id)})

    assert resp.status_code == 302
    assert f"employee_id={bob.id}" in resp.headers["Location"]
    [log] = time_logs_repo.list_all()
    assert log.employee_name == "Bob"


def test_admin_adds_and_deletes_employee(admin_client, employees_repo):
    resp = admin_client.post(
        "/admin/employees/add",
        data={"name": "Carol", "email": "carol@example.com", "department": "Ops"},
        follow_redirects=True,
    )
    assert b"Added Carol." in resp.data
    carol = employees_repo.get_by_email("carol@example.com")
    assert carol is not None

    resp = admin_client.post(f"/admin/employees/delete/{carol.id}", follow_redirects=True)
    assert b"Employee deleted." in resp.data
    assert employees_repo.get_by_id(carol.id) is None


def test_admin_add_duplicate_email(admin_client, alice):
    resp = admin_client.post(
        "/admin/employees/add", data={"name": "Alice Two", "email": alice.email}, follow_redirects=True
    )

    assert b"already exists" in resp.data


def test_reports_page_and_csv_download(admin_client, alice):
    admin_client.post("/tracker/log", data={"type": "check-in", "employee_id": str(alice.id)})

    page = admin_client.get(f"/admin/reports?employee_id={alice.id}&period=today")
    assert page.status_code == 200

    resp = admin_client.get(f"/admin/reports.csv?employee_id={alice.id}&period=today")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment; filename=attendance-report-" in resp.headers["Content-Disposition"]

    text = resp.data.decode("utf-8-sig")
    lines = text.splitlines()
    assert lines[0] == "Date,Employee,Check In,Break Start,Break End,Check Out,Total Hours,Break Duration"
    assert len(lines) == 2
    assert lines[1].endswith(",-,-,-,-,-")


def test_change_feed_endpoint(employee_client, alice):
    employee_client.post("/tracker/log", data={"type": "check-in"})

    body = employee_client.get("/api/changes?since=0").get_json()
    assert body["success"] is True
    assert body["last_seq"] == 1
    [event] = body["events"]
    assert event["table"] == "time_logs"
    assert event["eventType"] == "INSERT"
    assert event["new"]["employeeId"] == alice.id

    assert employee_client.get("/api/changes?since=1").get_json()["events"] == []
    assert employee_client.get("/api/changes?table=payroll").status_code == 400
    assert employee_client.get("/api/changes?since=abc").status_code == 400


def test_logout_clears_session(employee_client):
    employee_client.get("/logout")

    assert employee_client.get("/tracker").status_code == 302


def test_admin_login_requires_exact_email(client):
    resp = client.post(
        "/", data={"mode": "admin", "email": f"  {ADMIN_EMAIL} ", "password": ADMIN_PASSWORD}
    )

    assert b"Invalid admin email or password" in resp.data
    with client.session_transaction() as sess:
        assert "identity" not in sess


def test_employee_login_requires_exact_email(client, alice):
    resp = client.post("/", data={"mode": "employee", "email": f" {alice.email}"})

    assert b"Employee not found. Please check your email." in resp.data


def test_reports_ignore_non_decimal_employee_id(admin_client):
    resp = admin_client.get("/admin/reports?employee_id=%C2%B2")

    assert resp.status_code == 200


def test_tracker_log_ignores_non_decimal_employee_id(admin_client, time_logs_repo):
    resp = admin_client.post(
        "/tracker/log", data={"type": "check-in", "employee_id": "²"}, follow_redirects=True
    )

    assert resp.status_code == 200
    assert b"Please select an employee" in resp.data
    assert time_logs_repo.list_all() == []
