from datetime import date, datetime
from typing import List, Literal, Optional, Union

from fastapi import Form
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field, ValidationError, field_validator

from shared.core.schemas import JsonOutResult, PortalUserBrief
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.merchant_enum import (
    MerchantRegistrationStatus, MerchantType, NumberOfEmployees
)
from .business_owners_schemas import BusinessOwnerOut
from .checkout_counters_schemas import CheckoutCounterOut
from .contact_persons_schemas import ContactPersonOut
from .locations_schemas import LocationOut


# ---------------- Merchant Draft (multipart form) ----------------
class MerchantDraftForm(EmptyStringModel):
    dba_trading_name: str = Field(..., max_length=255)
    registered_name: Optional[str] = Field(None, max_length=255)
    employees_num: NumberOfEmployees
    monthly_turnover: Optional[float] = Field(None, ge=0)
    currency_code: str = Field(..., pattern=r"^[A-Z]{3}$")
    category_code: str = Field(..., max_length=16)
    merchant_type: MerchantType
    payinto_alias: Optional[str] = Field(None, max_length=255)
    registration_status: MerchantRegistrationStatus = MerchantRegistrationStatus.DRAFT
    registration_status_reason: Optional[str] = Field("Drafted by Maker", max_length=500)
    license_number: str = Field(..., max_length=255)

    @field_validator("currency_code", mode="before")
    @classmethod
    def upper_currency(cls, value):
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def as_form(
        cls,
        dba_trading_name: Optional[str] = Form(None),
        registered_name: Optional[str] = Form(None),
        employees_num: Optional[str] = Form(None),
        monthly_turnover: Optional[str] = Form(None),
        currency_code: Optional[str] = Form(None),
        category_code: Optional[str] = Form(None),
        merchant_type: Optional[str] = Form(None),
        payinto_alias: Optional[str] = Form(None),
        registration_status: Optional[str] = Form(None),
        registration_status_reason: Optional[str] = Form(None),
        license_number: Optional[str] = Form(None),
    ):
        values = {
            "dba_trading_name": dba_trading_name,
            "registered_name": registered_name,
            "employees_num": employees_num,
            "monthly_turnover": monthly_turnover,
            "currency_code": currency_code,
            "category_code": category_code,
            "merchant_type": merchant_type,
            "payinto_alias": payinto_alias,
            "registration_status": registration_status,
            "registration_status_reason": registration_status_reason,
            "license_number": license_number,
        }
        # omitted fields fall back to the model defaults
        values = {k: v for k, v in values.items() if v is not None}
        try:
            return cls(**values)
        except ValidationError as e:
            raise RequestValidationError(e.errors())


# query strings send "" for cleared inputs; EmptyStringModel turns it into None.
# page and limit stay text so get_merchants can answer malformed values with 400
BlankableInt = Optional[Union[int, Literal[""]]]
BlankableDate = Optional[Union[date, Literal[""]]]


# ---------------- Merchant Filter ----------------
class MerchantFilterParams(EmptyStringModel):
    page: Optional[str] = None
    limit: Optional[str] = None
    merchantId: BlankableInt = None
    dbaName: Optional[str] = None
    registrationStatus: Optional[str] = None
    merchantType: Optional[str] = None
    payintoId: Optional[str] = None
    addedBy: BlankableInt = None
    approvedBy: BlankableInt = None
    addedTime: BlankableDate = None
    updatedTime: BlankableDate = None


# ---------------- Bulk Status Change ----------------
class BulkApproveRequest(BaseModel):
    ids: List[int] = Field(..., min_length=1)

    @field_validator("ids")
    @classmethod
    def positive_ids(cls, value: List[int]):
        if any(merchant_id < 1 for merchant_id in value):
            raise ValueError("merchant ids must be positive integers")
        return list(dict.fromkeys(value))


class BulkReasonRequest(BulkApproveRequest):
    reason: str = Field(..., min_length=1, max_length=500)

    @field_validator("reason")
    @classmethod
    def reason_not_blank(cls, value: str):
        if not value.strip():
            raise ValueError("reason must not be blank")
        return value.strip()


# ---------------- Merchant Output ----------------
class BusinessLicenseOut(BaseModel):
    id: int
    license_number: str
    license_document_link: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MerchantOut(BaseModel):
    id: int
    dba_trading_name: str
    registered_name: Optional[str] = None
    employees_num: str
    monthly_turnover: Optional[float] = None
    currency_code: str
    category_code: str
    merchant_type: str
    registration_status: str
    registration_status_reason: Optional[str] = None
    allow_block_status: str
    created_by: Optional[PortalUserBrief] = None
    checked_by: Optional[PortalUserBrief] = None
    checkout_counters: List[CheckoutCounterOut] = []
    business_licenses: List[BusinessLicenseOut] = []
    locations: List[LocationOut] = []
    business_owners: List[BusinessOwnerOut] = []
    contact_persons: List[ContactPersonOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MerchantListResponse(JsonOutResult[List[MerchantOut]]):
    totalPages: int


class BulkActionResponse(JsonOutResult[List[int]]):
    pass
