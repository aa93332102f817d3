"""Tests for the check-ins service."""

from conftest import FakeServer
from honeybadger_api import CheckIn, CheckInParams, HoneybadgerApi
from structlog.testing import capture_logs


def test_list(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(
        json_body={
            "results": [
                {
                    "id": 1,
                    "name": "Daily Backup",
                    "slug": "daily-backup",
                    "schedule_type": "simple",
                    "report_period": "1 day",
                },
                {
                    "id": "2",
                    "name": "Nightly",
                    "schedule_type": "cron",
                    "cron_schedule": "0 2 * * *",
                    "cron_timezone": "UTC",
                },
            ]
        }
    )

    page = api.check_ins.list(123)

    assert [c.schedule_type for c in page.results] == ["simple", "cron"]
    assert page.results[1].cron_schedule == "0 2 * * *"
    assert server.last_request.url.path == "/v2/projects/123/check_ins"


def test_get(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(json_body={"id": 1, "name": "Daily Backup"})
    assert api.check_ins.get(123, 1).name == "Daily Backup"
    assert server.last_request.url.path == "/v2/projects/123/check_ins/1"


def test_create(api: HoneybadgerApi, server: FakeServer) -> None:
    """Test the created check-in is decoded from the response."""
    server.respond(
        json_body={
            "id": 1,
            "name": "Daily Backup",
            "slug": "daily-backup",
            "schedule_type": "simple",
            "report_period": "1 day",
            "grace_period": "",
            "created_at": "2024-01-01T00:00:00Z",
        }
    )

    check_in = api.check_ins.create(
        123,
        CheckInParams(
            name="Daily Backup", schedule_type="simple", report_period="1 day"
        ),
    )

    assert isinstance(check_in, CheckIn)
    assert check_in.report_period == "1 day"
    assert server.last_request.method == "POST"
    assert server.last_request.url.path == "/v2/projects/123/check_ins"
    assert server.last_json() == {
        "check_in": {
            "name": "Daily Backup",
            "schedule_type": "simple",
            "report_period": "1 day",
        }
    }


def test_update(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(json_body={"id": 1, "grace_period": "5 minutes"})

    check_in = api.check_ins.update(
        123, 1, CheckInParams(grace_period="5 minutes")
    )

    assert check_in.grace_period == "5 minutes"
    assert server.last_request.method == "PUT"
    assert server.last_request.url.path == "/v2/projects/123/check_ins/1"
    assert server.last_json() == {"check_in": {"grace_period": "5 minutes"}}


def test_bulk_update(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(
        json_body={
            "create": [{"success": True, "id": "3", "slug": "new"}],
            "update": [{"success": True, "id": "1", "slug": "daily-backup"}],
            "delete": [{"success": False, "slug": "old", "error": "not found"}],
        }
    )

    result = api.check_ins.bulk_update(
        123,
        [
            CheckInParams(slug="daily-backup", name="Daily Backup"),
            CheckInParams(slug="new", name="New", report_period="1 hour"),
        ],
    )

    assert [r.slug for r in result.create] == ["new"]
    assert result.delete[0].error == "not found"
    assert server.last_request.method == "PUT"
    assert server.last_request.url.path == "/v2/projects/123/check_ins"
    assert server.last_json() == {
        "check_ins": [
            {"slug": "daily-backup", "name": "Daily Backup"},
            {"slug": "new", "name": "New", "report_period": "1 hour"},
        ]
    }


def test_bulk_update_empty(api: HoneybadgerApi, server: FakeServer) -> None:
    """Test an empty bulk update is sent and logged as destructive."""
    server.respond(json_body={"delete": [{"success": True, "id": "1"}]})

    with capture_logs() as logs:
        result = api.check_ins.bulk_update(123, [])

    assert server.last_json() == {"check_ins": []}
    assert len(result.delete) == 1
    warnings = [log for log in logs if log["log_level"] == "warning"]
    assert len(warnings) == 1
    assert warnings[0]["project_id"] == 123


def test_delete(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(204)
    assert api.check_ins.delete(123, 1) is None
    assert server.last_request.method == "DELETE"
    assert server.last_request.url.path == "/v2/projects/123/check_ins/1"
