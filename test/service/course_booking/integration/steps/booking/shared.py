from typing import Any

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import USER_CREATE
from test.shared.utils import login_user
from test.util_constant import DEFAULT_PASSWORD, STUDENT_EMAIL, STUDENT_NAME


def ensure_user(client: TestClient, email: str, name: str, role: str) -> None:
    """Register the user unless a previous step already did."""
    response = client.post(
        USER_CREATE,
        json={'email': email, 'password': DEFAULT_PASSWORD, 'name': name, 'role': role},
    )
    assert response.status_code in (201, 400), response.text


def login_as_student(client: TestClient, context: dict[str, Any]) -> None:
    ensure_user(client, STUDENT_EMAIL, STUDENT_NAME, 'student')
    context['user'] = login_user(client, STUDENT_EMAIL, DEFAULT_PASSWORD).json()['data']
