from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from jose import jwt

from conftest import BrokenRedis, auth_headers, register
from folio.auth.tokens import (
    AUDIENCE,
    ISSUER,
    PASSWORD_RESET_TOKEN,
    create_access_token,
    decode_token,
)
from folio.main import create_app


def test_register_returns_user_and_token(client):
    user, token = register(client, email="Alice@Example.COM", password="secret", name="Alice")

    assert user["email"] == "alice@example.com"
    assert user["name"] == "Alice"
    assert user["user_id"]
    assert "password_hash" not in user
    assert token


def test_register_creates_profile_in_same_step(client):
    user, _ = register(client)

    response = client.get(f"/api/users/{user['user_id']}")

    assert response.status_code == 200
    profile = response.json()
    assert profile["user_id"] == user["user_id"]
    assert profile["name"] == "Alice"
    assert profile["bio"] is None
    assert profile["social_media_links"] is None


def test_register_accepts_password_field_alias(client):
    response = client.post("/api/auth/register", json={"email": "carol@example.com", "password": "pw"})

    assert response.status_code == 200
    assert response.json()["user"]["name"] is None


def test_register_duplicate_email_is_conflict(client, alice):
    response = client.post(
        "/api/auth/register",
        json={"email": "ALICE@example.com", "password_hash": "other"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "USER_ALREADY_EXISTS"
    assert "timestamp" in body


def test_register_rejects_invalid_email(client):
    response = client.post("/api/auth/register", json={"email": "not-an-email", "password_hash": "secret"})

    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert [d["field"] for d in body["details"]] == ["email"]
    assert "valid email address" in body["details"][0]["message"]


def test_register_missing_password_reports_field(client):
    response = client.post("/api/auth/register", json={"email": "dave@example.com"})

    assert response.status_code == 400
    assert {"field": "password_hash", "message": "required"} in response.json()["details"]


def test_registration_rate_limited_per_ip(client, alice):
    for _ in range(5):
        response = client.post("/api/auth/register", json={"email": "alice@example.com", "password_hash": "x"})
        assert response.status_code == 400

    response = client.post("/api/auth/register", json={"email": "new@example.com", "password_hash": "x"})

    assert response.status_code == 429
    assert response.json()["error_code"] == "TOO_MANY_ATTEMPTS"


def test_login_returns_fresh_token(client, alice):
    response = client.post("/api/auth/login", json={"email": "ALICE@example.com", "password": "secret"})

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["user_id"] == alice[0]["user_id"]
    assert body["token"]


def test_login_wrong_password_and_unknown_email_look_the_same(client, alice):
    wrong_password = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "nope"})

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json()["error_code"] == unknown_email.json()["error_code"] == "INVALID_CREDENTIALS"
    assert wrong_password.json()["message"] == unknown_email.json()["message"]


def test_login_rate_limited_after_repeated_failures(client, alice, fake_redis):
    for _ in range(5):
        client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})

    response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret"})

    assert response.status_code == 429
    assert fake_redis.ttls["login_attempts:alice@example.com"] == 3600


def test_successful_login_clears_failed_attempts(client, alice, fake_redis):
    client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})
    assert fake_redis.store["login_attempts:alice@example.com"] == "1"

    client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret"})

    assert "login_attempts:alice@example.com" not in fake_redis.store


def test_redis_failures_do_not_block_login(settings, notifier):
    app = create_app(settings, redis=BrokenRedis(), notifier=notifier)
    with TestClient(app) as client:
        register(client)
        response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret"})

    assert response.status_code == 200


def test_token_claims(settings, client, alice):
    user, token = alice

    payload = decode_token(settings, token)

    assert payload["sub"] == user["user_id"]
    assert payload["email"] == "alice@example.com"
    assert payload["type"] == "access"
    assert payload["iss"] == ISSUER
    assert payload["aud"] == AUDIENCE
    assert payload["jti"]


def test_protected_endpoint_without_token(client, alice):
    user, _ = alice

    response = client.get(f"/api/analytics/{user['user_id']}")

    assert response.status_code == 401
    assert response.json()["error_code"] == "AUTH_TOKEN_MISSING"


def test_non_bearer_scheme_is_missing_token(client, alice):
    user, token = alice

    response = client.get(f"/api/analytics/{user['user_id']}", headers={"Authorization": f"Basic {token}"})

    assert response.status_code == 401


def test_token_signed_with_other_secret_is_invalid(client, alice):
    user, _ = alice
    now = datetime.now(timezone.utc)
    forged = jwt.encode(
        {
            "sub": user["user_id"],
            "type": "access",
            "iss": ISSUER,
            "aud": AUDIENCE,
            "iat": now,
            "exp": now + timedelta(hours=1),
        },
        "not-the-secret",
        algorithm="HS256",
    )

    response = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers(forged))

    assert response.status_code == 403
    assert response.json()["error_code"] == "AUTH_TOKEN_INVALID"


def test_garbage_token_is_invalid(client, alice):
    user, _ = alice

    response = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers("not.a.jwt"))

    assert response.status_code == 403
    assert response.json()["error_code"] == "AUTH_TOKEN_INVALID"


def test_expired_token_is_invalid(settings, client, alice):
    user, _ = alice
    expired = create_access_token(settings, user["user_id"], user["email"], expires_delta=timedelta(seconds=-10))

    response = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers(expired))

    assert response.status_code == 403
    assert response.json()["error_code"] == "AUTH_TOKEN_INVALID"


def test_token_for_unknown_user_is_invalid(settings, client):
    token = create_access_token(settings, "00000000-0000-0000-0000-000000000000", "ghost@example.com")

    response = client.get(
        "/api/analytics/00000000-0000-0000-0000-000000000000",
        headers=auth_headers(token),
    )

    assert response.status_code == 403
    assert response.json()["error_code"] == "AUTH_TOKEN_INVALID"


def test_password_reset_notifies_only_existing_accounts(settings, client, alice, notifier):
    known = client.post("/api/auth/password-reset", json={"email": "Alice@example.com"})
    unknown = client.post("/api/auth/password-reset", json={"email": "nobody@example.com"})

    assert known.status_code == unknown.status_code == 200
    assert known.json() == unknown.json()
    assert len(notifier.sent) == 1

    email, reset_token = notifier.sent[0]
    assert email == "alice@example.com"
    assert decode_token(settings, reset_token, PASSWORD_RESET_TOKEN)["sub"] == alice[0]["user_id"]


def test_reset_token_is_not_an_access_token(client, alice, notifier):
    user, _ = alice
    client.post("/api/auth/password-reset", json={"email": "alice@example.com"})
    _, reset_token = notifier.sent[0]

    response = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers(reset_token))

    assert response.status_code == 403


def test_logout_revokes_token(client, alice, fake_redis):
    user, token = alice

    response = client.post("/api/auth/logout", headers=auth_headers(token))
    assert response.status_code == 204
    assert any(key.startswith("revoked_token:") for key in fake_redis.store)

    response = client.get(f"/api/analytics/{user['user_id']}", headers=auth_headers(token))
    assert response.status_code == 403
    assert response.json()["error_code"] == "AUTH_TOKEN_INVALID"


def test_logout_requires_token(client):
    response = client.post("/api/auth/logout")

    assert response.status_code == 401
