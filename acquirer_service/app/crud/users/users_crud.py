import logging
from datetime import datetime, timezone
from typing import List

from fastapi import Request, status
from sqlalchemy.orm import Session

from shared.core import auth
from shared.core.schemas import JsonOutResult, UserToken
from shared.helpers.json_response_helper import error_response, success_response
from shared.models.portal_users import PortalUser
from shared.models.user_login_session import PortalUserLoginSession
from shared.utils.enums import PortalUserStatus
from ...schemas.users.users_schemas import LoginRequest, PortalUserCreate, PortalUserOut

logger = logging.getLogger(__name__)


def login(request: Request, db: Session, payload: LoginRequest):
    user = db.query(PortalUser).filter(
        PortalUser.email == payload.email).first()

    if not user or not user.verify_password(payload.password):
        logger.info("Failed login attempt for %s", payload.email)
        return error_response(
            message="Invalid credentials",
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    if user.status != PortalUserStatus.ACTIVE.value:
        return error_response(
            message="User is not active",
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    session = PortalUserLoginSession(
        user_id=user.id,
        ip_address=request.client.host if request.client else None,
        user_agent=(request.headers.get("user-agent") or "")[:255] or None,
        is_active=True
    )
    db.add(session)
    db.commit()
    db.refresh(session)

    token = auth.create_access_token({
        "user_id": user.id,
        "session_id": session.id,
        "email": user.email,
        "name": user.name,
        "role": user.role
    })

    return {"message": "Login Successful", "token": token}


def logout(db: Session, current_user: UserToken) -> JsonOutResult:
    session = db.query(PortalUserLoginSession).filter(
        PortalUserLoginSession.id == current_user.session_id,
        PortalUserLoginSession.user_id == current_user.user_id
    ).first()

    session.is_active = False
    session.logged_out_at = datetime.now(timezone.utc)
    db.commit()

    return success_response(None, message="Logged out successfully")


def get_profile(db: Session, current_user: UserToken) -> JsonOutResult:
    user = db.query(PortalUser).filter(
        PortalUser.id == current_user.user_id).first()
    return success_response(PortalUserOut.model_validate(user))


def get_users(db: Session) -> JsonOutResult:
    users: List[PortalUser] = db.query(PortalUser).order_by(PortalUser.id.asc()).all()
    return success_response([PortalUserOut.model_validate(u) for u in users])


def create_user(db: Session, new_user: PortalUserCreate) -> JsonOutResult:
    existing = db.query(PortalUser).filter(
        PortalUser.email == new_user.email).first()
    if existing:
        return error_response(
            message="Email is already registered",
            http_status=status.HTTP_400_BAD_REQUEST
        )

    user = PortalUser(
        name=new_user.name,
        email=new_user.email,
        phone_number=new_user.phone_number,
        role=new_user.role.value,
        status=PortalUserStatus.ACTIVE.value
    )
    user.set_password(new_user.password)
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("Portal user %s created with role %s", user.email, user.role)
    return success_response(PortalUserOut.model_validate(user), message="User created successfully")
