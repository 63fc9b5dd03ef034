from fastapi import status
from sqlalchemy.orm import Session

from shared.core.schemas import JsonOutResult
from shared.helpers.json_response_helper import error_response, success_response
from ...models.merchants.contact_persons import ContactPerson
from ...models.merchants.merchants import Merchant
from ...schemas.merchants.contact_persons_schemas import (
    ContactPersonBase, ContactPersonCreate, ContactPersonOut, ContactPersonUpdate
)
from .merchants_crud import commit_or_500, get_merchant_or_404


def _contact_values(merchant: Merchant, payload: ContactPersonBase) -> dict:
    if not payload.is_same_as_business_owner:
        return {
            "name": payload.name,
            "email": payload.email,
            "phone_number": payload.phone_number,
            "is_same_as_business_owner": False,
        }

    if not merchant.business_owners:
        return error_response(
            message="Business Owner not found for the merchant",
            http_status=status.HTTP_400_BAD_REQUEST
        )

    owner = merchant.business_owners[0]
    return {
        "name": owner.name,
        "email": owner.email,
        "phone_number": owner.phone_number,
        "is_same_as_business_owner": True,
    }


def create_contact_person(db: Session, merchant_id: int, payload: ContactPersonCreate) -> JsonOutResult:
    merchant = get_merchant_or_404(db, merchant_id)

    contact_person = ContactPerson(**_contact_values(merchant, payload))
    merchant.contact_persons.append(contact_person)

    commit_or_500(db, "save the contact person")
    db.refresh(contact_person)

    return success_response(ContactPersonOut.model_validate(contact_person), message="Contact Person Saved")


def update_contact_person(db: Session, merchant_id: int, contact_person_id: int, payload: ContactPersonUpdate) -> JsonOutResult:
    merchant = get_merchant_or_404(db, merchant_id)

    contact_person = next(
        (c for c in merchant.contact_persons if c.id == contact_person_id), None)
    if not contact_person:
        return error_response(message="Contact Person not found", http_status=status.HTTP_404_NOT_FOUND)

    for key, value in _contact_values(merchant, payload).items():
        setattr(contact_person, key, value)

    commit_or_500(db, "update the contact person")
    db.refresh(contact_person)

    return success_response(ContactPersonOut.model_validate(contact_person), message="Contact Person Updated")
