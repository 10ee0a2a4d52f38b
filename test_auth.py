"""Unit tests for session tokens and configuration accessors."""
from datetime import timedelta

import pytest
from jose import jwt

from auth.services import create_access_token, decode_token
from common.exceptions import ConfigurationError, InvalidSessionError
from config import Config


def test_token_round_trip():
    token = create_access_token("user-42")
    assert decode_token(token).user_id == "user-42"


def test_expired_token_is_rejected():
    token = create_access_token("user-42", expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidSessionError):
        decode_token(token)


def test_token_without_subject_is_rejected():
    token = jwt.encode({"foo": "bar"}, Config.SECRET_KEY, algorithm=Config.ALGORITHM)
    with pytest.raises(InvalidSessionError):
        decode_token(token)


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "user-42"}, "someone-else", algorithm=Config.ALGORITHM)
    with pytest.raises(InvalidSessionError) as exc_info:
        decode_token(token)
    assert exc_info.value.status_code == 401


def test_api_key_accessors(monkeypatch, no_api_keys):
    with pytest.raises(ConfigurationError) as exc_info:
        Config.get_gemini_api_key()
    assert exc_info.value.public_message == "API key not configured"
    assert exc_info.value.status_code == 500
    with pytest.raises(ConfigurationError):
        Config.get_huggingface_api_key()

    monkeypatch.setenv("GEMINI_API_KEY", "g")
    monkeypatch.setenv("HUGGINGFACE_API_KEY", "h")
    assert Config.get_gemini_api_key() == "g"
    assert Config.get_huggingface_api_key() == "h"
