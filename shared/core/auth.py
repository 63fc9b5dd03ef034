import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.orm import Session

from shared.models.portal_users import PortalUser
from shared.models.user_login_session import PortalUserLoginSession
from shared.core.config import settings
from shared.helpers.json_response_helper import error_response
from shared.core.schemas import UserToken
from shared.core.database import get_db
from shared.utils.enums import PortalUserRole, PortalUserStatus

logger = logging.getLogger(__name__)

# missing credentials are reported as 401 by validate_current_token
security = HTTPBearer(auto_error=False)


def create_access_token(data: dict):
    payload = data.copy()
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload['exp'] = expires

    token = jwt.encode(payload, settings.JWT_SECRET,
                       algorithm=settings.JWT_ALGORITHM)
    return token


def verify_token(db: Session, token: str) -> UserToken:
    """Verify and decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
        user = UserToken(**payload)
    except (JWTError, ValidationError) as e:
        logger.debug("Rejected bearer token: %s", e)
        return error_response(
            message="Invalid or expired token",
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    session = db.query(PortalUserLoginSession).filter(
        PortalUserLoginSession.id == user.session_id,
        PortalUserLoginSession.user_id == user.user_id
    ).first()

    if not session or not session.is_active:
        return error_response(
            message="Session has been logged out or is inactive",
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    return user


def validate_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
):
    if credentials is None or credentials.scheme.lower() != "bearer":
        return error_response(
            message="Unauthorized",
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    user_data = verify_token(db, credentials.credentials)

    user = db.query(PortalUser).filter(PortalUser.id == user_data.user_id).first()

    if not user:
        return error_response(
            message="Unauthorized",
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    if user.status.lower() != PortalUserStatus.ACTIVE.value:
        return error_response(
            message="User is not active. Access denied",
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    user_data.status = user.status
    user_data.role = user.role
    return user_data


def allow_admin(current_user: UserToken = Depends(validate_current_token)):
    if current_user.role != PortalUserRole.ADMIN.value:
        return error_response(
            message="Access forbidden: Admins only",
            http_status=status.HTTP_403_FORBIDDEN
        )

    return current_user
