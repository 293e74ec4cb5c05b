from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from config.settings import Settings


def create_task(client, **overrides) -> dict:
    payload = {"userId": 1, "title": "Prepare onboarding pack", **overrides}
    response = client.post("/api/tasks", json=payload)
    assert response.status_code == 201
    return response.json()


def create_leave(client) -> dict:
    response = client.post(
        "/api/leaves",
        json={
            "employeeId": 1,
            "startDate": "2024-07-01",
            "endDate": "2024-07-05",
            "type": "annual",
            "reason": "Vacation",
        },
    )
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestUsers:
    def test_create_and_fetch(self, client, user_payload):
        created = client.post("/api/users", json=user_payload)

        assert created.status_code == 201
        body = created.json()
        assert body["id"] == 1
        assert body["firstName"] == "Jane"
        assert body["role"] == "employee"
        assert "createdAt" in body and "updatedAt" in body

        fetched = client.get("/api/users/1")
        assert fetched.status_code == 200
        assert fetched.json() == body

    def test_free_text_role_is_accepted(self, client, user_payload):
        user_payload["role"] = "chief-happiness-officer"

        response = client.post("/api/users", json=user_payload)

        assert response.status_code == 201
        assert response.json()["role"] == "chief-happiness-officer"

    def test_missing_fields_rejected_with_aggregated_message(self, client):
        response = client.post("/api/users", json={"username": "jdoe"})

        assert response.status_code == 400
        message = response.json()["message"]
        assert 'at "password"' in message
        assert 'at "email"' in message
        assert 'at "firstName"' in message

    def test_partial_update(self, client, user_payload):
        client.post("/api/users", json=user_payload)

        response = client.put("/api/users/1", json={"lastName": "Smith"})

        assert response.status_code == 200
        body = response.json()
        assert body["lastName"] == "Smith"
        assert body["firstName"] == "Jane"
        assert body["email"] == "jdoe@company.com"

    def test_not_found(self, client):
        assert client.get("/api/users/5").json() == {"message": "User not found"}
        response = client.put("/api/users/5", json={"lastName": "Smith"})
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_list(self, client, user_payload):
        client.post("/api/users", json=user_payload)

        response = client.get("/api/users")

        assert [user["username"] for user in response.json()] == ["jdoe"]

    def test_user_employee_lookup(self, client, employee_payload):
        assert client.get("/api/users/1/employee").status_code == 404

        client.post("/api/employees", json=employee_payload)

        response = client.get("/api/users/1/employee")
        assert response.status_code == 200
        assert response.json()["employeeId"] == "EMP-100"


class TestEmployees:
    def test_create_echoes_department(self, client, employee_payload):
        response = client.post("/api/employees", json=employee_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["department"] == "hr"
        assert body["employmentType"] == "full_time"
        assert body["hireDate"] == "2024-01-01"
        assert body["manager"] is None

    def test_invalid_department_rejected(self, client, employee_payload):
        employee_payload["department"] = "legal"

        response = client.post("/api/employees", json=employee_payload)

        assert response.status_code == 400
        assert 'at "department"' in response.json()["message"]
        assert client.get("/api/employees").json() == []

    def test_update_salary(self, client, employee_payload):
        client.post("/api/employees", json=employee_payload)

        response = client.put("/api/employees/1", json={"salary": 72000.5})

        assert response.status_code == 200
        assert response.json()["salary"] == "72000.5"
        assert response.json()["position"] == "Recruiter"

    def test_update_missing_employee(self, client):
        response = client.put("/api/employees/3", json={"position": "Lead"})

        assert response.status_code == 404
        assert response.json() == {"message": "Employee not found"}

    def test_string_reference_rejected(self, client, employee_payload):
        employee_payload["userId"] = "1"

        response = client.post("/api/employees", json=employee_payload)

        assert response.status_code == 400
        assert 'at "userId"' in response.json()["message"]
        assert client.get("/api/employees").json() == []

    def test_update_without_body_changes_nothing(self, client, employee_payload):
        created = client.post("/api/employees", json=employee_payload).json()

        response = client.put("/api/employees/1")

        assert response.status_code == 200
        assert response.json()["position"] == created["position"]
        assert client.put("/api/employees/2").json() == {"message": "Employee not found"}

    def test_update_validation_precedes_lookup(self, client):
        response = client.put("/api/employees/3", json={"department": "legal"})

        assert response.status_code == 400

    def test_nested_collections(self, client):
        client.post("/api/documents", json={"employeeId": 1, "name": "CV", "type": "pdf", "path": "/cv.pdf"})
        client.post("/api/documents", json={"employeeId": 2, "name": "ID", "type": "png", "path": "/id.png"})
        client.post("/api/attendance", json={"employeeId": 1, "date": "2024-06-03"})
        client.post(
            "/api/payroll",
            json={
                "employeeId": 1,
                "period": "2024-05",
                "baseSalary": "5000",
                "netSalary": "4500",
                "paymentDate": "2024-05-31",
            },
        )
        client.post(
            "/api/performance",
            json={"employeeId": 1, "reviewerId": 2, "period": "2024-H1", "reviewDate": "2024-06-30"},
        )
        client.post("/api/activities", json={"employeeId": 1, "type": "onboarding", "description": "Day one"})
        create_leave(client)

        assert [d["name"] for d in client.get("/api/employees/1/documents").json()] == ["CV"]
        assert len(client.get("/api/employees/1/attendance").json()) == 1
        assert len(client.get("/api/employees/1/leaves").json()) == 1
        assert client.get("/api/employees/1/payroll").json()[0]["bonus"] == "0"
        assert len(client.get("/api/employees/1/performance").json()) == 1
        assert client.get("/api/employees/1/activities").json()[0]["status"] == "pending"
        assert client.get("/api/employees/2/leaves").json() == []


class TestDocuments:
    def test_delete(self, client):
        client.post("/api/documents", json={"employeeId": 1, "name": "CV", "type": "pdf", "path": "/cv.pdf"})

        response = client.delete("/api/documents/1")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/api/documents/1").status_code == 404

    def test_delete_missing(self, client):
        response = client.delete("/api/documents/1")

        assert response.status_code == 404
        assert response.json() == {"message": "Document not found"}


class TestAttendance:
    def test_check_out_update(self, client):
        client.post(
            "/api/attendance",
            json={"employeeId": 1, "date": "2024-06-03", "checkIn": "2024-06-03T09:00:00Z"},
        )

        response = client.put("/api/attendance/1", json={"checkOut": "2024-06-03T17:30:00Z"})

        assert response.status_code == 200
        body = response.json()
        assert body["checkOut"] is not None
        assert body["checkIn"] is not None
        assert body["status"] == "present"

    def test_filter_by_date(self, client):
        client.post("/api/attendance", json={"employeeId": 1, "date": "2024-06-03"})
        client.post("/api/attendance", json={"employeeId": 2, "date": "2024-06-04"})
        client.post("/api/attendance", json={"employeeId": 3, "date": "2024-06-03"})

        same_day = client.get("/api/attendance", params={"date": "2024-06-03"}).json()

        assert [record["employeeId"] for record in same_day] == [1, 3]
        assert len(client.get("/api/attendance").json()) == 3

    def test_missing_record(self, client):
        response = client.put("/api/attendance/9", json={"notes": "late"})

        assert response.status_code == 404
        assert response.json() == {"message": "Attendance record not found"}


class TestLeaves:
    def test_create_defaults_to_pending(self, client):
        body = create_leave(client)

        assert body["id"] == 1
        assert body["status"] == "pending"
        assert body["approvedBy"] is None
        assert body["createdAt"] == body["updatedAt"]

    def test_approve(self, client):
        create_leave(client)

        response = client.put("/api/leaves/1/status", json={"status": "approved", "approvedBy": 2})

        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        assert response.json()["approvedBy"] == 2
        assert client.get("/api/leaves/1").json()["status"] == "approved"

    def test_reopening_clears_approver(self, client):
        create_leave(client)
        client.put("/api/leaves/1/status", json={"status": "approved", "approvedBy": 2})

        response = client.put("/api/leaves/1/status", json={"status": "pending"})

        assert response.status_code == 200
        assert response.json()["status"] == "pending"
        assert response.json()["approvedBy"] is None

    def test_status_without_body(self, client):
        create_leave(client)

        response = client.put("/api/leaves/1/status")

        assert response.status_code == 400
        assert response.json() == {"message": 'Validation error: Field required at "body"'}

    def test_status_of_missing_leave(self, client):
        response = client.put("/api/leaves/99/status", json={"status": "approved"})

        assert response.status_code == 404
        assert response.json() == {"message": "Leave request not found"}

    @pytest.mark.parametrize(
        "body",
        [
            {"status": "cancelled"},
            {},
            {"status": "approved", "approvedBy": "someone"},
        ],
    )
    def test_invalid_status_body(self, client, body):
        create_leave(client)

        response = client.put("/api/leaves/1/status", json=body)

        assert response.status_code == 400
        assert response.json()["message"].startswith("Validation error")

    def test_list_all(self, client):
        create_leave(client)
        create_leave(client)

        assert [leave["id"] for leave in client.get("/api/leaves").json()] == [1, 2]


class TestPayrollAndPerformance:
    def test_payroll_update(self, client):
        client.post(
            "/api/payroll",
            json={
                "employeeId": 1,
                "period": "2024-05",
                "baseSalary": 5000,
                "bonus": 250,
                "netSalary": 4750,
                "paymentDate": "2024-05-31",
            },
        )

        response = client.put("/api/payroll/1", json={"status": "paid"})

        assert response.status_code == 200
        assert response.json()["status"] == "paid"
        assert response.json()["bonus"] == "250"
        assert len(client.get("/api/payroll").json()) == 1
        assert client.put("/api/payroll/2", json={}).json() == {"message": "Payroll record not found"}

    def test_performance_update(self, client):
        client.post(
            "/api/performance",
            json={"employeeId": 1, "reviewerId": 2, "period": "2024-H1", "reviewDate": "2024-06-30"},
        )

        response = client.put("/api/performance/1", json={"rating": 4, "comments": "Solid half"})

        assert response.status_code == 200
        assert response.json()["rating"] == "4"
        assert response.json()["period"] == "2024-H1"
        assert client.get("/api/performance/2").json() == {"message": "Performance record not found"}


class TestActivities:
    def test_recent_default_limit(self, client):
        for n in range(12):
            client.post("/api/activities", json={"employeeId": 1, "type": "training", "description": f"#{n}"})

        assert len(client.get("/api/activities/recent").json()) == 10
        assert len(client.get("/api/activities/recent", params={"limit": 3}).json()) == 3

    def test_invalid_limit(self, client):
        response = client.get("/api/activities/recent", params={"limit": "many"})

        assert response.status_code == 400
        assert 'at "limit"' in response.json()["message"]

    def test_status_update(self, client):
        client.post("/api/activities", json={"employeeId": 1, "type": "training", "description": "Course"})

        response = client.put("/api/activities/1/status", json={"status": "completed"})

        assert response.status_code == 200
        assert response.json()["status"] == "completed"
        assert client.put("/api/activities/1/status", json={"status": "done"}).status_code == 400
        assert client.put("/api/activities/7/status", json={"status": "completed"}).json() == {
            "message": "Activity not found"
        }

    def test_invalid_type_rejected(self, client):
        response = client.post("/api/activities", json={"employeeId": 1, "type": "party", "description": "x"})

        assert response.status_code == 400


class TestTasks:
    def test_toggle_twice(self, client):
        for n in range(5):
            create_task(client, title=f"task {n}")

        first = client.put("/api/tasks/5/toggle")
        second = client.put("/api/tasks/5/toggle")

        assert first.status_code == 200
        assert first.json()["completed"] is True
        assert second.json()["completed"] is False

    def test_string_completed_flag_rejected(self, client):
        response = client.post("/api/tasks", json={"userId": 1, "title": "x", "completed": "yes"})

        assert response.status_code == 400
        assert 'at "completed"' in response.json()["message"]
        assert client.get("/api/users/1/tasks").json() == []

    def test_toggle_missing(self, client):
        response = client.put("/api/tasks/1/toggle")

        assert response.status_code == 404
        assert response.json() == {"message": "Task not found"}

    def test_update_and_list_by_user(self, client):
        create_task(client)
        create_task(client, userId=2, priority="urgent")

        response = client.put("/api/tasks/1", json={"priority": "high", "dueDate": "2024-06-30"})

        assert response.json()["priority"] == "high"
        assert response.json()["dueDate"] == "2024-06-30"
        assert [task["id"] for task in client.get("/api/users/2/tasks").json()] == [2]
        assert client.post("/api/tasks", json={"userId": 1, "title": "x", "priority": "asap"}).status_code == 400


class TestAnnouncementsAndEvents:
    def test_recent_announcements(self, client):
        for n in range(7):
            client.post("/api/announcements", json={"createdBy": 1, "title": f"News {n}", "content": "..."})

        assert len(client.get("/api/announcements").json()) == 7
        assert len(client.get("/api/announcements/recent").json()) == 5
        assert client.get("/api/announcements/1").json()["title"] == "News 0"

    def test_upcoming_events_only_future(self, client):
        for title, start in (
            ("Past", "2000-01-01T10:00:00Z"),
            ("Later", "2999-02-01T10:00:00Z"),
            ("Sooner", "2999-01-01T10:00:00Z"),
        ):
            client.post(
                "/api/events",
                json={"title": title, "startDate": start, "endDate": start, "createdBy": 1},
            )

        upcoming = client.get("/api/events/upcoming").json()

        assert [event["title"] for event in upcoming] == ["Sooner", "Later"]
        assert len(client.get("/api/events").json()) == 3
        assert client.get("/api/events/9").json() == {"message": "Event not found"}


class TestErrorHandling:
    def test_malformed_json(self, client):
        response = client.post(
            "/api/users",
            content=b'{"username": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "message" in response.json()

    def test_non_integer_id(self, client):
        response = client.get("/api/users/abc")

        assert response.status_code == 400
        assert 'at "user_id"' in response.json()["message"]

    def test_unexpected_error_uses_status_code(self):
        class Teapot(Exception):
            status_code = 418

        app = create_app(Settings(seed_sample_data=False))

        @app.get("/api/boom")
        async def boom():
            raise Teapot("short and stout")

        @app.get("/api/crash")
        async def crash():
            raise RuntimeError("unexpected")

        with TestClient(app, raise_server_exceptions=False) as client:
            teapot = client.get("/api/boom")
            crashed = client.get("/api/crash")

        assert teapot.status_code == 418
        assert teapot.json() == {"message": "short and stout"}
        assert crashed.status_code == 500
        assert crashed.json() == {"message": "unexpected"}


def test_configured_timezone_stamps_records():
    app = create_app(Settings(seed_sample_data=False, timezone="Asia/Kolkata"))

    with TestClient(app) as client:
        task = create_task(client)

    assert task["createdAt"].endswith("+05:30")


def test_sample_users_seeded_when_enabled():
    app = create_app(Settings(seed_sample_data=True))

    with TestClient(app) as client:
        users = client.get("/api/users").json()

    assert [user["username"] for user in users] == ["admin", "hrmanager"]
