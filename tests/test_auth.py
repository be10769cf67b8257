from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from supabase import AuthError

from app import config
from app.dependencies import auth as auth_dependency
from app.main import app
from app.services.supabase import SupabaseConfigError, create_supabase_client


def _fake_supabase(user_id="user-1", email="ada@example.com", profile=None):
    supabase = MagicMock()
    supabase.auth.get_user.return_value = SimpleNamespace(user=SimpleNamespace(id=user_id, email=email))

    query = MagicMock()
    for name in ("select", "eq", "limit"):
        getattr(query, name).return_value = query
    query.execute.return_value = SimpleNamespace(data=[profile] if profile else [])
    supabase.table.return_value = query
    return supabase


@pytest.fixture
def fake_supabase(monkeypatch):
    supabase = _fake_supabase(profile={"id": "user-1", "email": "ada@example.com", "full_name": "Ada Lovelace"})
    monkeypatch.setattr(auth_dependency, "create_supabase_client", lambda token=None: supabase)
    return supabase


def test_valid_token_yields_user_context(fake_supabase):
    context = auth_dependency.user_supabase_client("Bearer good-token")

    assert context["user_id"] == "user-1"
    assert context["token"] == "good-token"
    assert context["supabase"] is fake_supabase
    fake_supabase.auth.get_user.assert_called_once_with("good-token")


def test_missing_header_is_unauthenticated():
    with pytest.raises(HTTPException) as exc:
        auth_dependency.user_supabase_client(None)
    assert exc.value.status_code == 401
    assert exc.value.headers["X-Redirect-To"] == config.SIGNIN_PATH


def test_rejected_token_is_unauthenticated(fake_supabase):
    fake_supabase.auth.get_user.side_effect = Exception("invalid JWT: token is expired")

    with pytest.raises(HTTPException) as exc:
        auth_dependency.user_supabase_client("Bearer stale")
    assert exc.value.status_code == 401


def test_auth_timeout_is_a_gateway_timeout(fake_supabase):
    fake_supabase.auth.get_user.side_effect = Exception("The read operation timed out")

    with pytest.raises(HTTPException) as exc:
        auth_dependency.user_supabase_client("Bearer slow")
    assert exc.value.status_code == 504


def test_token_without_user_is_unauthenticated(fake_supabase):
    fake_supabase.auth.get_user.return_value = SimpleNamespace(user=None)

    with pytest.raises(HTTPException) as exc:
        auth_dependency.user_supabase_client("Bearer orphan")
    assert exc.value.status_code == 401


def test_missing_supabase_config(monkeypatch):
    monkeypatch.setattr(config, "SUPABASE_URL", None)

    with pytest.raises(SupabaseConfigError):
        create_supabase_client()
    with pytest.raises(HTTPException) as exc:
        auth_dependency.user_supabase_client("Bearer token")
    assert exc.value.status_code == 500


def test_optional_context_is_none_for_bad_tokens(fake_supabase):
    fake_supabase.auth.get_user.side_effect = Exception("invalid JWT")

    assert auth_dependency.optional_user_context(None) is None
    assert auth_dependency.optional_user_context("Bearer bad") is None


def test_me_returns_profile(fake_supabase):
    response = TestClient(app).get("/auth/me", headers={"Authorization": "Bearer good-token"})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "user-1"
    assert body["display_name"] == "Ada Lovelace"
    assert body["profile"]["email"] == "ada@example.com"


def test_me_without_profile_is_anonymous(monkeypatch):
    monkeypatch.setattr(auth_dependency, "create_supabase_client", lambda token=None: _fake_supabase())

    body = TestClient(app).get("/auth/me", headers={"Authorization": "Bearer good-token"}).json()

    assert body["display_name"] == "Anonymous"
    assert body["profile"] is None


def test_sign_out_revokes_session(fake_supabase):
    response = TestClient(app).post("/auth/signout", headers={"Authorization": "Bearer good-token"})

    assert response.status_code == 200
    assert response.json()["redirect_to"] == "/"
    fake_supabase.auth.admin.sign_out.assert_called_once_with("good-token")


def test_navigation_for_anonymous_visitor():
    body = TestClient(app).get("/nav").json()

    assert body["signed_in"] is False
    assert [item["label"] for item in body["items"]] == ["Home", "Sign in", "Get started"]


def test_navigation_for_signed_in_user(fake_supabase):
    body = TestClient(app).get("/nav", headers={"Authorization": "Bearer good-token"}).json()

    assert body["signed_in"] is True
    assert body["avatar_initial"] == "A"
    assert [item["label"] for item in body["items"]] == ["Home", "Dashboard", "Write", "Sign out"]
    assert body["items"][-1]["method"] == "POST"


class SessionMissing(AuthError):
    def __init__(self):
        Exception.__init__(self, "session not found")


def test_sign_out_failure_is_a_generic_error(fake_supabase):
    fake_supabase.auth.admin.sign_out.side_effect = SessionMissing()

    response = TestClient(app).post("/auth/signout", headers={"Authorization": "Bearer good-token"})

    assert response.status_code == 503
    assert response.json() == {"detail": "Something went wrong. Please try again later."}
