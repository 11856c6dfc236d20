# -*- coding: utf-8 -*-
from datetime import timedelta

import pytest
from fastapi import HTTPException

from app.modules.auth.dependencies import get_current_user_id, validate_jwt_token
from app.modules.auth.security import TokenDecodeError, create_access_token, decode_access_token


def test_token_roundtrip_keeps_subject_and_extra_claims():
    token = create_access_token(42, role="member")
    payload = decode_access_token(token)
    assert payload["sub"] == "42"
    assert payload["role"] == "member"


def test_expired_token_is_rejected():
    token = create_access_token(42, expires_delta=timedelta(seconds=-5))
    with pytest.raises(TokenDecodeError):
        decode_access_token(token)


def test_tampered_token_is_rejected():
    token = create_access_token(42)
    with pytest.raises(TokenDecodeError):
        decode_access_token(token[:-2] + ("AA" if not token.endswith("AA") else "BB"))


def test_validate_jwt_token_without_token():
    with pytest.raises(HTTPException) as info:
        validate_jwt_token(None)
    assert info.value.status_code == 401
    assert info.value.detail["message"] == "Not authenticated"


async def test_current_user_id_is_numeric():
    assert await get_current_user_id(create_access_token(7)) == 7


async def test_non_numeric_subject_is_401():
    with pytest.raises(HTTPException) as info:
        await get_current_user_id(create_access_token("ana@example.com"))
    assert info.value.status_code == 401
