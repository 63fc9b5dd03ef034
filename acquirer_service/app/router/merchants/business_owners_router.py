from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import JsonOutResult
from ...crud.merchants import business_owners_crud as crud
from ...crud.merchants.merchants_crud import parse_id
from ...schemas.merchants.business_owners_schemas import (
    BusinessOwnerCreate, BusinessOwnerOut, BusinessOwnerUpdate
)
from .merchants_router import merchant_path_id

router = APIRouter(prefix="/merchants/{merchant_id}/business-owners",
                   tags=["Merchant Business Owners"], dependencies=[Depends(validate_current_token)])


def owner_path_id(owner_id: str) -> int:
    return parse_id(owner_id, "business owner")


@router.post("", response_model=JsonOutResult[BusinessOwnerOut], status_code=status.HTTP_201_CREATED)
def create_business_owner(
    payload: BusinessOwnerCreate,
    merchant_id: int = Depends(merchant_path_id),
    db: Session = Depends(get_db)
):
    return crud.create_business_owner(db, merchant_id, payload)


@router.put("/{owner_id}", response_model=JsonOutResult[BusinessOwnerOut])
def update_business_owner(
    payload: BusinessOwnerUpdate,
    merchant_id: int = Depends(merchant_path_id),
    owner_id: int = Depends(owner_path_id),
    db: Session = Depends(get_db)
):
    return crud.update_business_owner(db, merchant_id, owner_id, payload)
