from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class ContactPersonBase(EmptyStringModel):
    is_same_as_business_owner: bool = False
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, max_length=32)

    # name is copied from the business owner when flagged
    @model_validator(mode="after")
    def require_name(self):
        if not self.is_same_as_business_owner and not self.name:
            raise ValueError("name is required unless the contact is the business owner")
        return self


class ContactPersonCreate(ContactPersonBase):
    pass


class ContactPersonUpdate(ContactPersonBase):
    pass


class ContactPersonOut(BaseModel):
    id: int
    merchant_id: int
    name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    is_same_as_business_owner: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
