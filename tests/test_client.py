import json

import pytest
import requests

from todo_client import TodoAPI


def make_response(status_code, body=None, url="http://todo.test/"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


class FakeSession:
    """Records requests and replays queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def todo():
    return {"id": 1, "name": "x", "completed": False}


def test_list_todos(todo):
    session = FakeSession(make_response(200, [todo]))
    api = TodoAPI(base_url="http://todo.test/", session=session)

    assert api.list_todos() == ([todo], None)
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://todo.test/todos"


def test_create_todo_sends_json(todo):
    session = FakeSession(make_response(201))
    api = TodoAPI(base_url="http://todo.test", session=session)

    assert api.create_todo(todo) == (True, None)
    assert session.calls[0]["json"] == todo


def test_get_missing_todo_reports_detail():
    session = FakeSession(make_response(400, {"detail": "Todo 9 not found"}))
    api = TodoAPI(base_url="http://todo.test", session=session)

    data, error = api.get_todo(9)

    assert data is None
    assert error == {"status_code": 400, "message": "Todo 9 not found"}


def test_toggle_and_update_paths(todo):
    session = FakeSession(make_response(200), make_response(200))
    api = TodoAPI(base_url="http://todo.test", session=session)

    assert api.toggle_todo(1) == (True, None)
    assert api.update_todo(todo) == (True, None)
    assert [(c["method"], c["url"]) for c in session.calls] == [
        ("POST", "http://todo.test/toggle/1"),
        ("PUT", "http://todo.test/todos"),
    ]


def test_transport_errors_are_reported_not_raised():
    session = FakeSession(requests.ConnectionError("refused"))
    api = TodoAPI(base_url="http://todo.test", session=session)

    todos, error = api.list_todos()

    assert todos == []
    assert error["status_code"] is None
    assert "refused" in error["message"]
