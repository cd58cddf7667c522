from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import AUTH_LOGIN, AUTH_ME, AUTH_SIGNUP
from test.shared.utils import assert_response_status
from test.util_constant import (
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    DEFAULT_PASSWORD,
    TEST_USERNAME,
)


pytestmark = pytest.mark.integration


class TestSignup:
    def test_signup_creates_regular_user(self, client: TestClient):
        response = client.post(
            AUTH_SIGNUP, json={'username': TEST_USERNAME, 'password': DEFAULT_PASSWORD}
        )

        assert_response_status(response, 201)
        body = response.json()
        assert body['username'] == TEST_USERNAME
        assert body['role'] == 'user'
        assert body['id'] > 0
        assert 'password' not in body

    def test_duplicate_username_conflicts(self, client: TestClient, test_user):
        response = client.post(
            AUTH_SIGNUP, json={'username': TEST_USERNAME, 'password': DEFAULT_PASSWORD}
        )
        assert_response_status(response, 409)

    def test_short_password_rejected(self, client: TestClient):
        response = client.post(AUTH_SIGNUP, json={'username': 'shorty', 'password': '123'})
        assert_response_status(response, 400)

    def test_missing_fields_rejected(self, client: TestClient):
        response = client.post(AUTH_SIGNUP, json={'username': 'nopass'})
        assert_response_status(response, 400)


class TestLogin:
    def test_login_returns_bearer_token(self, client: TestClient, test_user):
        response = client.post(
            AUTH_LOGIN, json={'username': TEST_USERNAME, 'password': DEFAULT_PASSWORD}
        )

        assert_response_status(response, 200)
        body = response.json()
        assert body['token']
        assert body['token_type'] == 'bearer'
        assert body['role'] == 'user'

    def test_seeded_admin_can_login(self, client: TestClient):
        response = client.post(
            AUTH_LOGIN, json={'username': ADMIN_USERNAME, 'password': ADMIN_PASSWORD}
        )
        assert_response_status(response, 200)
        assert response.json()['role'] == 'admin'

    def test_wrong_password(self, client: TestClient, test_user):
        response = client.post(
            AUTH_LOGIN, json={'username': TEST_USERNAME, 'password': 'wrong-password'}
        )
        assert_response_status(response, 401)

    def test_unknown_user(self, client: TestClient):
        response = client.post(
            AUTH_LOGIN, json={'username': 'ghost', 'password': DEFAULT_PASSWORD}
        )
        assert_response_status(response, 401)


class TestMe:
    def test_me_returns_token_identity(self, client: TestClient, test_user, user_headers):
        response = client.get(AUTH_ME, headers=user_headers)

        assert_response_status(response, 200)
        assert response.json() == {'id': test_user['id'], 'username': TEST_USERNAME, 'role': 'user'}

    def test_missing_token(self, client: TestClient):
        assert_response_status(client.get(AUTH_ME), 401)

    def test_malformed_token(self, client: TestClient):
        response = client.get(AUTH_ME, headers={'Authorization': 'Bearer not-a-jwt'})
        assert_response_status(response, 401)
