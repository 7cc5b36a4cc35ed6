"""
Tests for authentication: password hashing, JWTs and the user endpoints.
"""

import base64
import time

import jwt
import pytest

from reservation_api.main import app
from reservation_shared.config.settings import Settings, get_settings
from reservation_shared.security.auth import ALGORITHM, sign_jwt, verify_jwt
from reservation_shared.security.password import hash_password, verify_password
from reservation_shared.security.rate_limit import limiter
from reservation_shared.utils.exceptions import ConfigurationMissingError, UnauthorizedError

TEST_USERNAME = "host"
TEST_PASSWORD = "s3cret-pass"


def _settings(**overrides) -> Settings:
    values = {
        "secret_key": base64.b64encode(b"k" * 32).decode(),
        "issuer": "reservation-api-tests",
        "audience": "reservation-api-clients",
    }
    values.update(overrides)
    return Settings(**values)


class TestSettings:
    def test_config_declared_with_settings_config_dict(self):
        assert "Config" not in vars(Settings)
        assert Settings.model_config["env_file"] == ".env"

    def test_environment_names_are_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("login_rate_limit", "9/minute")
        assert Settings().login_rate_limit == "9/minute"


class TestPasswordHashing:
    """Test password hashing utilities."""

    def test_hash_password_returns_bcrypt_hash(self):
        hashed = hash_password("mypassword")
        assert hashed.startswith("$2b$12$")

    def test_verify_password_correct(self):
        hashed = hash_password("mypassword")
        assert verify_password("mypassword", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("mypassword")
        assert verify_password("wrongpassword", hashed) is False

    def test_plain_text_is_never_accepted(self):
        assert verify_password("plaintext", "plaintext") is False


class TestJwt:
    def test_round_trip(self):
        settings = _settings()
        token = sign_jwt({"sub": "1", "name": "host", "user_id": 1}, settings)
        payload = verify_jwt(token, settings)
        assert payload["sub"] == "1"
        assert payload["name"] == "host"
        assert payload["iss"] == "reservation-api-tests"
        assert payload["aud"] == "reservation-api-clients"
        assert payload["exp"] - payload["iat"] == 3600

    def test_expired_token_rejected(self):
        settings = _settings()
        token = sign_jwt({"sub": "1"}, settings, ttl_seconds=-1)
        with pytest.raises(UnauthorizedError) as exc_info:
            verify_jwt(token, settings)
        assert exc_info.value.detail == "Token has expired"

    def test_wrong_audience_rejected(self):
        token = sign_jwt({"sub": "1"}, _settings(audience="someone-else"))
        with pytest.raises(UnauthorizedError):
            verify_jwt(token, _settings())

    def test_wrong_issuer_rejected(self):
        token = sign_jwt({"sub": "1"}, _settings(issuer="someone-else"))
        with pytest.raises(UnauthorizedError):
            verify_jwt(token, _settings())

    def test_wrong_key_rejected(self):
        other_key = base64.b64encode(b"x" * 32).decode()
        token = sign_jwt({"sub": "1"}, _settings(secret_key=other_key))
        with pytest.raises(UnauthorizedError):
            verify_jwt(token, _settings())

    def test_missing_subject_rejected(self):
        settings = _settings()
        now = int(time.time())
        token = jwt.encode(
            {"iss": settings.issuer, "aud": settings.audience, "iat": now, "exp": now + 60},
            base64.b64decode(settings.secret_key),
            algorithm=ALGORITHM,
        )
        with pytest.raises(UnauthorizedError):
            verify_jwt(token, settings)

    @pytest.mark.parametrize(
        "overrides",
        [{"secret_key": None}, {"issuer": None}, {"audience": None}, {"secret_key": "not base64!"}],
    )
    def test_missing_configuration(self, overrides):
        with pytest.raises(ConfigurationMissingError) as exc_info:
            sign_jwt({"sub": "1"}, _settings(**overrides))
        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "JWT configuration is missing."


class TestUserEndpoints:
    """Test registration and login API endpoints."""

    def _credentials(self, username=TEST_USERNAME, password=TEST_PASSWORD):
        return {"username": username, "password": password}

    def test_register(self, client):
        response = client.post("/api/user/register", json=self._credentials())
        assert response.status_code == 200
        assert response.json() == "User created successfully."

    def test_register_duplicate(self, client):
        client.post("/api/user/register", json=self._credentials())
        response = client.post("/api/user/register", json=self._credentials())
        assert response.status_code == 409
        assert response.json()["detail"] == "User already exists."

    def test_register_requires_fields(self, client):
        response = client.post("/api/user/register", json={"username": "host"})
        assert response.status_code == 400

    def test_login_returns_token(self, client):
        client.post("/api/user/register", json=self._credentials())
        response = client.post("/api/user/login", json=self._credentials())
        assert response.status_code == 200

        token = response.json()
        payload = verify_jwt(token, get_settings())
        assert payload["name"] == TEST_USERNAME
        assert payload["user_id"] == int(payload["sub"])

    def test_login_wrong_password(self, client):
        client.post("/api/user/register", json=self._credentials())
        response = client.post("/api/user/login", json=self._credentials(password="nope"))
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid username or password."

    def test_login_unknown_user_same_message(self, client):
        response = client.post("/api/user/login", json=self._credentials(username="ghost"))
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid username or password."

    def test_password_is_stored_hashed(self, client, db_session):
        from reservation_api.models import User

        client.post("/api/user/register", json=self._credentials())
        user = db_session.query(User).filter_by(username=TEST_USERNAME).one()
        assert user.password_hash != TEST_PASSWORD
        assert user.password_hash.startswith("$2b$")

    def test_login_without_configuration(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(
            secret_key=None, issuer=None, audience=None
        )
        response = client.post("/api/user/login", json=self._credentials())
        assert response.status_code == 500
        assert response.json()["detail"] == "JWT configuration is missing."

    def test_login_rate_limited(self, client):
        limiter.enabled = True
        client.post("/api/user/register", json=self._credentials())

        statuses = [
            client.post("/api/user/login", json=self._credentials()).status_code
            for _ in range(6)
        ]

        assert statuses[:5] == [200] * 5
        assert statuses[5] == 429


class TestProtectedRoutes:
    def test_missing_token(self, client):
        response = client.get("/api/customers")
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_malformed_header(self, client):
        response = client.get("/api/customers", headers={"Authorization": "Token abc"})
        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/customers", headers={"Authorization": "Bearer abc.def.ghi"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"

    def test_expired_token(self, client):
        token = sign_jwt({"sub": "1"}, get_settings(), ttl_seconds=-1)
        response = client.get("/api/customers", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_valid_token(self, client, auth_headers):
        response = client.get("/api/customers", headers=auth_headers)
        assert response.status_code == 200

    def test_missing_configuration_is_server_error(self, client, auth_headers):
        app.dependency_overrides[get_settings] = lambda: Settings(
            secret_key=None, issuer=None, audience=None
        )
        response = client.get("/api/customers", headers=auth_headers)
        assert response.status_code == 500
        assert response.json()["detail"] == "JWT configuration is missing."

    def test_every_resource_is_protected(self, client):
        for path in [
            "/api/customers",
            "/api/restaurants",
            "/api/tables",
            "/api/employees",
            "/api/menu-items",
            "/api/orders",
            "/api/order-items",
            "/api/reservations",
        ]:
            assert client.get(path).status_code == 401, path
