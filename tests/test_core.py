import time

from jose import jwt

from shared.core.auth import create_access_token
from shared.core.config import Settings, settings


def test_settings_ignore_unknown_values():
    configured = Settings(UNRELATED_SETTING="x", JWT_EXPIRE_MINUTES=5)

    assert configured.JWT_EXPIRE_MINUTES == 5
    assert not hasattr(configured, "UNRELATED_SETTING")


def test_access_token_expires_relative_to_utc_now():
    token = create_access_token({"user_id": 1, "session_id": 1, "email": "a@dfsp1.com", "role": "Maker"})

    claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])

    expected = time.time() + settings.JWT_EXPIRE_MINUTES * 60
    assert abs(claims["exp"] - expected) < 60
