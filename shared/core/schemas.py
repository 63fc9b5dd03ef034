from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

# Shared properties
T = TypeVar("T")


class UserToken(BaseModel):
    user_id: int
    session_id: int
    email: str
    name: Optional[str] = None
    role: str
    status: Optional[str] = None
    exp: Optional[int] = None


class PortalUserBrief(BaseModel):
    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}


class JsonOutResult(BaseModel, Generic[T]):
    message: str
    data: Optional[T] = None
