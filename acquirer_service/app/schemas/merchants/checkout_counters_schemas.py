from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .locations_schemas import LocationOut


class CheckoutCounterOut(BaseModel):
    id: int
    description: Optional[str] = None
    alias_value: Optional[str] = None
    merchant_id: Optional[int] = None
    checkout_location: Optional[LocationOut] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
