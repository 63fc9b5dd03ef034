from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.merchant_enum import BusinessOwnerIDType


class OwnerAddress(BaseModel):
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


class BusinessOwnerBase(EmptyStringModel):
    name: str = Field(..., max_length=255)
    identification_type: BusinessOwnerIDType
    identification_number: str = Field(..., max_length=128)
    phone_number: Optional[str] = Field(None, max_length=32)
    email: Optional[EmailStr] = None
    address: Optional[OwnerAddress] = None


class BusinessOwnerCreate(BusinessOwnerBase):
    pass


class BusinessOwnerUpdate(BusinessOwnerBase):
    pass


class BusinessOwnerOut(BaseModel):
    id: int
    merchant_id: int
    name: str
    identification_type: str
    identification_number: str
    phone_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[dict] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
