from typing import Optional

from fastapi import status
from sqlalchemy.orm import Session

from shared.core.schemas import JsonOutResult
from shared.helpers.json_response_helper import error_response, success_response
from ...models.merchants.checkout_counters import CheckoutCounter
from ...models.merchants.locations import MerchantLocation
from ...models.merchants.merchants import Merchant
from ...schemas.merchants.locations_schemas import LocationCreate, LocationOut, LocationUpdate
from .merchants_crud import commit_or_500, get_merchant_or_404


def _attach_checkout_counter(merchant: Merchant, location: MerchantLocation, description: Optional[str]):
    # the draft's first checkout counter sits at this location
    if merchant.checkout_counters:
        checkout_counter = merchant.checkout_counters[0]
    else:
        checkout_counter = CheckoutCounter()
        merchant.checkout_counters.append(checkout_counter)

    checkout_counter.checkout_location = location
    if description is not None:
        checkout_counter.description = description


def create_location(db: Session, merchant_id: int, payload: LocationCreate) -> JsonOutResult:
    merchant = get_merchant_or_404(db, merchant_id)

    location = MerchantLocation(
        **payload.model_dump(mode="json", exclude={"checkout_description"}))
    merchant.locations.append(location)
    _attach_checkout_counter(merchant, location, payload.checkout_description)

    commit_or_500(db, "save the merchant location")
    db.refresh(location)

    return success_response(LocationOut.model_validate(location), message="Location Saved")


def update_location(db: Session, merchant_id: int, location_id: int, payload: LocationUpdate) -> JsonOutResult:
    merchant = get_merchant_or_404(db, merchant_id)

    location = next((l for l in merchant.locations if l.id == location_id), None)
    if not location:
        return error_response(message="Location not found", http_status=status.HTTP_404_NOT_FOUND)

    update_data = payload.model_dump(mode="json", exclude={"checkout_description"})
    for key, value in update_data.items():
        setattr(location, key, value)
    _attach_checkout_counter(merchant, location, payload.checkout_description)

    commit_or_500(db, "update the merchant location")
    db.refresh(location)

    return success_response(LocationOut.model_validate(location), message="Location Updated")
