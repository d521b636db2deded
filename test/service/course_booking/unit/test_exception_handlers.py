"""
Error envelope mapping, exercised through a bare FastAPI app
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
import pytest

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    ForbiddenError,
    LoginError,
    NotFoundError,
    TransactionFailureError,
)


class _Payload(BaseModel):
    course_id: int


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    errors = {
        'not-found': NotFoundError('Course not found'),
        'conflict': ConflictError('Failed to book course'),
        'forbidden': ForbiddenError('Unauthorized to cancel this booking'),
        'transaction': TransactionFailureError(),
        'domain': DomainError('total_seats must be zero or greater'),
        'auth': AuthenticationError('Not authenticated'),
        'login': LoginError('LOGIN_BAD_CREDENTIALS'),
        'boom': RuntimeError('database exploded'),
    }

    @app.get('/raise/{kind}')
    async def raise_error(kind: str) -> None:
        raise errors[kind]

    @app.post('/validate')
    async def validate(payload: _Payload) -> dict:
        return payload.model_dump()

    return app


@pytest.fixture(scope='module')
def bare_client():
    with TestClient(_build_app(), raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.mark.parametrize(
        'kind, status_code, message',
        [
            ('not-found', 404, 'Course not found'),
            ('conflict', 400, 'Failed to book course'),
            ('forbidden', 403, 'Unauthorized to cancel this booking'),
            ('transaction', 400, 'Operation failed'),
            ('domain', 400, 'total_seats must be zero or greater'),
            ('auth', 401, 'Not authenticated'),
            ('login', 400, 'LOGIN_BAD_CREDENTIALS'),
        ],
    )
    def test_custom_errors_map_to_envelope(
        self, bare_client: TestClient, kind: str, status_code: int, message: str
    ) -> None:
        response = bare_client.get(f'/raise/{kind}')
        assert response.status_code == status_code
        assert response.json() == {'success': False, 'message': message, 'data': None}

    def test_unexpected_error_is_internal_server_error(self, bare_client: TestClient) -> None:
        response = bare_client.get('/raise/boom')
        assert response.status_code == 500
        body = response.json()
        assert body['success'] is False
        assert body['message'] == 'Internal server error'
        assert 'database exploded' not in response.text

    def test_validation_error_envelope(self, bare_client: TestClient) -> None:
        response = bare_client.post('/validate', json={'course_id': 'abc'})
        assert response.status_code == 422
        body = response.json()
        assert body['success'] is False
        assert body['message'] == 'Validation failed'
        assert body['data']

    def test_unknown_route_uses_envelope(self, bare_client: TestClient) -> None:
        response = bare_client.get('/nowhere')
        assert response.status_code == 404
        assert response.json()['success'] is False
