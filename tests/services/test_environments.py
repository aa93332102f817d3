"""Tests for the environments service."""

from conftest import FakeServer
from honeybadger_api import EnvironmentParams, HoneybadgerApi


def test_list(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(
        json_body={
            "results": [
                {"id": 1, "name": "production", "notifications": True},
                {"id": 2, "name": "staging", "notifications": False},
            ]
        }
    )

    page = api.environments.list(7)

    assert [(e.name, e.notifications) for e in page.results] == [
        ("production", True),
        ("staging", False),
    ]
    assert server.last_request.url.path == "/v2/projects/7/environments"


def test_get(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(json_body={"id": 2, "name": "staging"})
    assert api.environments.get(7, 2).name == "staging"
    assert server.last_request.url.path == "/v2/projects/7/environments/2"


def test_create(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(json_body={"id": 3, "name": "qa", "notifications": False})

    environment = api.environments.create(
        7, EnvironmentParams(name="qa", notifications=False)
    )

    assert environment.id == 3
    assert server.last_request.method == "POST"
    assert server.last_json() == {
        "environment": {"name": "qa", "notifications": False}
    }


def test_update_no_content(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(204)

    assert api.environments.update(7, 3, EnvironmentParams(notifications=True)) is None

    assert server.last_request.method == "PUT"
    assert server.last_request.url.path == "/v2/projects/7/environments/3"
    assert server.last_json() == {"environment": {"notifications": True}}


def test_delete(api: HoneybadgerApi, server: FakeServer) -> None:
    server.respond(204)
    api.environments.delete(7, 3)
    assert server.last_request.method == "DELETE"
    assert server.last_request.url.path == "/v2/projects/7/environments/3"
