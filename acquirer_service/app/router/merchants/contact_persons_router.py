from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import JsonOutResult
from ...crud.merchants import contact_persons_crud as crud
from ...crud.merchants.merchants_crud import parse_id
from ...schemas.merchants.contact_persons_schemas import (
    ContactPersonCreate, ContactPersonOut, ContactPersonUpdate
)
from .merchants_router import merchant_path_id

router = APIRouter(prefix="/merchants/{merchant_id}/contact-persons",
                   tags=["Merchant Contact Persons"], dependencies=[Depends(validate_current_token)])


def contact_person_path_id(contact_person_id: str) -> int:
    return parse_id(contact_person_id, "contact person")


@router.post("", response_model=JsonOutResult[ContactPersonOut], status_code=status.HTTP_201_CREATED)
def create_contact_person(
    payload: ContactPersonCreate,
    merchant_id: int = Depends(merchant_path_id),
    db: Session = Depends(get_db)
):
    return crud.create_contact_person(db, merchant_id, payload)


@router.put("/{contact_person_id}", response_model=JsonOutResult[ContactPersonOut])
def update_contact_person(
    payload: ContactPersonUpdate,
    merchant_id: int = Depends(merchant_path_id),
    contact_person_id: int = Depends(contact_person_path_id),
    db: Session = Depends(get_db)
):
    return crud.update_contact_person(db, merchant_id, contact_person_id, payload)
