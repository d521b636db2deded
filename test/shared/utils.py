from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import COURSE_CREATE, USER_CREATE, USER_LOGIN
from test.util_constant import DEFAULT_COURSE


def login_user(client: TestClient, email: str, password: str) -> Any:
    """Helper function to login a user and set cookies."""
    login_response = client.post(
        USER_LOGIN,
        json={'email': email, 'password': password},
    )
    assert login_response.status_code == 200, f'Login failed: {login_response.text}'
    if 'fastapiusersauth' in login_response.cookies:
        client.cookies.set('fastapiusersauth', login_response.cookies['fastapiusersauth'])
    return login_response


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(
    client: TestClient, email: str, password: str, name: str, role: str
) -> Dict[str, Any]:
    response = client.post(
        USER_CREATE,
        json={'email': email, 'password': password, 'name': name, 'role': role},
    )
    assert_response_status(response, 201, f'Failed to create {role} user')
    return response.json()['data']


def create_course(client: TestClient, **overrides: Any) -> Dict[str, Any]:
    """Create a course through the API; the client must be logged in as admin."""
    response = client.post(COURSE_CREATE, json=DEFAULT_COURSE | overrides)
    assert_response_status(response, 201, 'Failed to create course')
    return response.json()['data']
