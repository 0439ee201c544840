"""Tests for the bearer-token access guard."""

from datetime import timedelta

import jwt
import pytest

from app.api.deps import authenticate
from app.core.config import settings
from app.core.errors import AuthError
from app.core.security import create_access_token


class TestAuthenticate:

    def test_valid_header_returns_user_id(self):
        token = create_access_token("7")
        assert authenticate(f"Bearer {token}") == 7

    def test_scheme_is_case_insensitive(self):
        token = create_access_token("7")
        assert authenticate(f"bearer {token}") == 7

    @pytest.mark.parametrize("header", [None, "", "Bearer", "   "])
    def test_missing_token(self, header):
        with pytest.raises(AuthError) as excinfo:
            authenticate(header)
        assert excinfo.value.message == "No token provided"
        assert excinfo.value.status_code == 401

    def test_garbage_token(self):
        with pytest.raises(AuthError) as excinfo:
            authenticate("Bearer not-a-jwt")
        assert excinfo.value.message == "Invalid token"

    def test_wrong_scheme(self):
        token = create_access_token("7")
        with pytest.raises(AuthError) as excinfo:
            authenticate(f"Basic {token}")
        assert excinfo.value.message == "Invalid token"

    def test_expired_token(self):
        token = create_access_token("7", expires_delta=timedelta(minutes=-5))
        with pytest.raises(AuthError) as excinfo:
            authenticate(f"Bearer {token}")
        assert excinfo.value.message == "Invalid token"

    def test_non_numeric_subject(self):
        token = jwt.encode(
            {"sub": "not-an-id", "exp": 9999999999},
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )
        with pytest.raises(AuthError) as excinfo:
            authenticate(f"Bearer {token}")
        assert excinfo.value.message == "Invalid token"
