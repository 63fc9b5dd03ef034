from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.merchant_enum import MerchantLocationType


# ---------------- Base Location ----------------
class LocationBase(EmptyStringModel):
    location_type: MerchantLocationType
    web_url: Optional[str] = Field(None, max_length=255)
    address_type: Optional[str] = None
    department: Optional[str] = None
    sub_department: Optional[str] = None
    street_name: Optional[str] = None
    building_number: Optional[str] = None
    building_name: Optional[str] = None
    floor_number: Optional[str] = None
    room_number: Optional[str] = None
    post_box: Optional[str] = None
    postal_code: Optional[str] = None
    town_name: Optional[str] = None
    district_name: Optional[str] = None
    country_subdivision: Optional[str] = None
    country: Optional[str] = None
    address_line: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None


# ---------------- Location Create/Update ----------------
class LocationCreate(LocationBase):
    # description of the merchant's checkout counter at this location
    checkout_description: Optional[str] = Field(None, max_length=255)


class LocationUpdate(LocationCreate):
    pass


# ---------------- Location Output ----------------
class LocationOut(BaseModel):
    id: int
    merchant_id: int
    location_type: str
    web_url: Optional[str] = None
    address_type: Optional[str] = None
    department: Optional[str] = None
    sub_department: Optional[str] = None
    street_name: Optional[str] = None
    building_number: Optional[str] = None
    building_name: Optional[str] = None
    floor_number: Optional[str] = None
    room_number: Optional[str] = None
    post_box: Optional[str] = None
    postal_code: Optional[str] = None
    town_name: Optional[str] = None
    district_name: Optional[str] = None
    country_subdivision: Optional[str] = None
    country: Optional[str] = None
    address_line: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
