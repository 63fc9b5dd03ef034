from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from shared.utils.enums import PortalUserRole


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)


class LoginResponse(BaseModel):
    message: str
    token: str


class PortalUserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=8)
    phone_number: Optional[str] = Field(None, max_length=20)
    role: PortalUserRole = PortalUserRole.MAKER


class PortalUserOut(BaseModel):
    id: int
    name: str
    email: str
    phone_number: Optional[str] = None
    role: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
