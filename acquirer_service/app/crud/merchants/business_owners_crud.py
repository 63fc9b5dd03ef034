from fastapi import status
from sqlalchemy.orm import Session

from shared.core.schemas import JsonOutResult
from shared.helpers.json_response_helper import error_response, success_response
from ...models.merchants.business_owners import BusinessOwner
from ...schemas.merchants.business_owners_schemas import (
    BusinessOwnerCreate, BusinessOwnerOut, BusinessOwnerUpdate
)
from .merchants_crud import commit_or_500, get_merchant_or_404


def create_business_owner(db: Session, merchant_id: int, payload: BusinessOwnerCreate) -> JsonOutResult:
    merchant = get_merchant_or_404(db, merchant_id)

    owner = BusinessOwner(**payload.model_dump(mode="json"))
    merchant.business_owners.append(owner)

    commit_or_500(db, "save the business owner")
    db.refresh(owner)

    return success_response(BusinessOwnerOut.model_validate(owner), message="Business Owner Saved")


def update_business_owner(db: Session, merchant_id: int, owner_id: int, payload: BusinessOwnerUpdate) -> JsonOutResult:
    merchant = get_merchant_or_404(db, merchant_id)

    owner = next((o for o in merchant.business_owners if o.id == owner_id), None)
    if not owner:
        return error_response(message="Business Owner not found", http_status=status.HTTP_404_NOT_FOUND)

    for key, value in payload.model_dump(mode="json").items():
        setattr(owner, key, value)

    commit_or_500(db, "update the business owner")
    db.refresh(owner)

    return success_response(BusinessOwnerOut.model_validate(owner), message="Business Owner Updated")
