from typing import List

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from shared.core.auth import allow_admin, validate_current_token
from shared.core.database import get_db
from shared.core.schemas import JsonOutResult, UserToken
from ...crud.users import users_crud as crud
from ...schemas.users.users_schemas import LoginRequest, LoginResponse, PortalUserCreate, PortalUserOut

router = APIRouter(prefix="/users", tags=["Portal Users"])


@router.post("/login", response_model=LoginResponse)
def login(
        payload: LoginRequest,
        request: Request,
        db: Session = Depends(get_db)):
    return crud.login(request, db, payload)


@router.post("/logout", response_model=JsonOutResult[None])
def logout(
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return crud.logout(db, current_user)


@router.get("/profile", response_model=JsonOutResult[PortalUserOut])
def profile(
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return crud.get_profile(db, current_user)


@router.get("", response_model=JsonOutResult[List[PortalUserOut]])
def get_users(
        db: Session = Depends(get_db),
        _: UserToken = Depends(validate_current_token)):
    return crud.get_users(db)


@router.post("/add", response_model=JsonOutResult[PortalUserOut], status_code=status.HTTP_201_CREATED)
def create_user(
        new_user: PortalUserCreate,
        db: Session = Depends(get_db),
        _: UserToken = Depends(allow_admin)):
    return crud.create_user(db, new_user)
