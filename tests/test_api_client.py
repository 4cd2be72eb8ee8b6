from unittest.mock import MagicMock

import pytest

from run import main, parse_bool, run_command
from todokeeper.utils.api_client import TodoApiClient, TodoApiError


def make_response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = text
    response.reason = "reason"
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return TodoApiClient("http://localhost:3000/", session=session)


def test_create_todo_posts_fields(client, session):
    """Test that create sends the full body and returns the id."""
    session.request.return_value = make_response(201, {"id": "1234567890"})

    assert client.create_todo("Buy groceries", "I should buy groceries") == "1234567890"
    session.request.assert_called_once_with(
        "POST",
        "http://localhost:3000/todos",
        headers={"Content-Type": "application/json"},
        json={"title": "Buy groceries", "description": "I should buy groceries", "completed": False},
        timeout=10.0,
    )


def test_update_todo_sends_only_given_fields(client, session):
    session.request.return_value = make_response(200, {"id": "1", "completed": True})

    client.update_todo("1", completed=True)
    args, kwargs = session.request.call_args
    assert args == ("PUT", "http://localhost:3000/todos/1")
    assert kwargs["json"] == {"completed": True}


def test_get_and_list(client, session):
    session.request.return_value = make_response(200, [{"id": "1"}])
    assert client.list_todos() == [{"id": "1"}]

    session.request.return_value = make_response(200, {"id": "1"})
    assert client.get_todo("1") == {"id": "1"}
    assert session.request.call_args[0] == ("GET", "http://localhost:3000/todos/1")


def test_error_status_raises(client, session):
    """Test that 4xx/5xx responses raise TodoApiError."""
    session.request.return_value = make_response(404, text="Route Not Found")
    with pytest.raises(TodoApiError) as excinfo:
        client.delete_todo("missing")
    assert excinfo.value.status_code == 404
    assert "Route Not Found" in str(excinfo.value)


def test_run_command_dispatch():
    api = MagicMock()
    api.create_todo.return_value = "1234567890"

    assert run_command(api, "create", ["Title", "Desc", "true"]) == {"id": "1234567890"}
    api.create_todo.assert_called_once_with("Title", "Desc", True)

    run_command(api, "update", ["1234567890", "New title"])
    api.update_todo.assert_called_once_with("1234567890", "New title", None, None)

    assert run_command(api, "delete", ["1234567890"]) == {"deleted": "1234567890"}
    api.delete_todo.assert_called_once_with("1234567890")


def test_run_command_missing_arguments():
    with pytest.raises(ValueError):
        run_command(MagicMock(), "create", ["Only title"])
    with pytest.raises(ValueError):
        run_command(MagicMock(), "get", [])


def test_parse_bool():
    assert parse_bool("true")
    assert parse_bool("YES")
    assert not parse_bool("false")
    assert not parse_bool("")


def test_main_exits_cleanly_on_bad_settings(monkeypatch, caplog):
    """Test that invalid configuration is logged and exits with status 1."""
    monkeypatch.setenv("TODO_LOAD_POLICY", "ignore")
    with pytest.raises(SystemExit) as excinfo:
        main(["cli", "--command", "list"])
    assert excinfo.value.code == 1
    assert "TODO_LOAD_POLICY" in caplog.text
