from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import JsonOutResult
from ...crud.merchants import locations_crud as crud
from ...crud.merchants.merchants_crud import parse_id
from ...schemas.merchants.locations_schemas import LocationCreate, LocationOut, LocationUpdate
from .merchants_router import merchant_path_id

router = APIRouter(prefix="/merchants/{merchant_id}/locations",
                   tags=["Merchant Locations"], dependencies=[Depends(validate_current_token)])


def location_path_id(location_id: str) -> int:
    return parse_id(location_id, "location")


@router.post("", response_model=JsonOutResult[LocationOut], status_code=status.HTTP_201_CREATED)
def create_location(
    payload: LocationCreate,
    merchant_id: int = Depends(merchant_path_id),
    db: Session = Depends(get_db)
):
    return crud.create_location(db, merchant_id, payload)


@router.put("/{location_id}", response_model=JsonOutResult[LocationOut])
def update_location(
    payload: LocationUpdate,
    merchant_id: int = Depends(merchant_path_id),
    location_id: int = Depends(location_path_id),
    db: Session = Depends(get_db)
):
    return crud.update_location(db, merchant_id, location_id, payload)
