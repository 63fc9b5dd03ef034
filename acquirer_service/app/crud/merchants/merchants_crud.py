# app/crud/merchants.py
import logging
import math
from datetime import datetime, time, timedelta, timezone
from typing import List, Optional

from fastapi import UploadFile, status
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from shared.core.schemas import JsonOutResult, UserToken
from shared.exporthelper import export_to_excel
from shared.helpers.json_response_helper import error_response, success_response
from shared.utils.storage_client import upload_merchant_document
from ...enum.merchant_enum import MerchantAllowBlockStatus, MerchantRegistrationStatus
from ...models.merchants.business_licenses import BusinessLicense
from ...models.merchants.checkout_counters import CheckoutCounter
from ...models.merchants.merchants import Merchant
from ...schemas.merchants.checkout_counters_schemas import CheckoutCounterOut
from ...schemas.merchants.merchants_schemas import (
    MerchantDraftForm, MerchantFilterParams, MerchantListResponse, MerchantOut
)

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPES = {"application/pdf", "application/x-pdf"}


# ----------------- Id Helpers -----------------


def parse_id(raw_id: Optional[str], label: str = "merchant") -> int:
    """Path ids arrive as text so malformed values map to 400, not 422."""
    if raw_id is None or not str(raw_id).strip():
        return error_response(message=f"Missing {label} id", http_status=status.HTTP_400_BAD_REQUEST)

    try:
        parsed = int(str(raw_id).strip())
    except ValueError:
        return error_response(message=f"Invalid {label} id", http_status=status.HTTP_400_BAD_REQUEST)

    if parsed < 1:
        return error_response(message=f"Invalid {label} id", http_status=status.HTTP_400_BAD_REQUEST)

    return parsed


def merchant_load_options():
    return (
        joinedload(Merchant.created_by),
        joinedload(Merchant.checked_by),
        selectinload(Merchant.checkout_counters).joinedload(
            CheckoutCounter.checkout_location),
        selectinload(Merchant.business_licenses),
        selectinload(Merchant.locations),
        selectinload(Merchant.business_owners),
        selectinload(Merchant.contact_persons),
    )


def get_merchant_or_404(db: Session, merchant_id: int) -> Merchant:
    merchant = (
        db.query(Merchant)
        .options(*merchant_load_options())
        .filter(Merchant.id == merchant_id)
        .first()
    )
    if not merchant:
        return error_response(message="Merchant not found", http_status=status.HTTP_404_NOT_FOUND)
    return merchant


def commit_or_500(db: Session, action: str):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Query failed while trying to %s", action)
        return error_response(
            message=f"Failed to {action}",
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


# ----------------- Build Filters for Merchants -----------------


def _day_range(day):
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def build_merchant_filters(params: MerchantFilterParams):
    filters = []

    if params.merchantId is not None:
        filters.append(Merchant.id == params.merchantId)

    if params.dbaName:
        filters.append(Merchant.dba_trading_name.icontains(params.dbaName, autoescape=True))

    if params.registrationStatus:
        filters.append(Merchant.registration_status == params.registrationStatus)

    if params.merchantType:
        filters.append(Merchant.merchant_type == params.merchantType)

    if params.payintoId:
        filters.append(Merchant.checkout_counters.any(
            CheckoutCounter.alias_value == params.payintoId))

    if params.addedBy is not None:
        filters.append(Merchant.created_by_id == params.addedBy)

    if params.approvedBy is not None:
        filters.append(Merchant.checked_by_id == params.approvedBy)

    if params.addedTime:
        start, end = _day_range(params.addedTime)
        filters.append(Merchant.created_at >= start)
        filters.append(Merchant.created_at < end)

    if params.updatedTime:
        start, end = _day_range(params.updatedTime)
        filters.append(Merchant.updated_at >= start)
        filters.append(Merchant.updated_at < end)

    return filters


def get_merchant_query(db: Session, params: MerchantFilterParams):
    return (
        db.query(Merchant)
        .filter(*build_merchant_filters(params))
        .order_by(Merchant.created_at.desc(), Merchant.id.desc())
    )


# ----------------- Get All Merchants -----------------


def _parse_pagination(raw_value: Optional[str], default: int) -> int:
    if raw_value is None:
        return default

    try:
        parsed = int(raw_value)
    except ValueError:
        parsed = 0

    if parsed < 1:
        return error_response(
            message="Invalid pagination parameters",
            http_status=status.HTTP_400_BAD_REQUEST
        )
    return parsed


def get_merchants(db: Session, params: MerchantFilterParams) -> MerchantListResponse:
    page = _parse_pagination(params.page, 1)
    limit = _parse_pagination(params.limit, 10)

    base_query = get_merchant_query(db, params)

    total = base_query.order_by(None).with_entities(
        func.count(Merchant.id)).scalar()

    merchants = (
        base_query
        .options(*merchant_load_options())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return MerchantListResponse(
        message="OK",
        data=[MerchantOut.model_validate(m) for m in merchants],
        totalPages=math.ceil(total / limit)
    )


# ----------------- Export -----------------

EXPORT_COLUMN_MAP = {
    "id": "Merchant ID",
    "dba_trading_name": "Trading Name",
    "registered_name": "Registered Name",
    "merchant_type": "Merchant Type",
    "category_code": "Category Code",
    "employees_num": "Number of Employees",
    "monthly_turnover": "Monthly Turnover",
    "currency_code": "Currency",
    "payinto_alias": "PayInto Alias",
    "registration_status": "Registration Status",
    "registration_status_reason": "Status Reason",
    "allow_block_status": "Allow/Block Status",
    "created_by": "Maker",
    "checked_by": "Checker",
    "created_at": "Added Time",
    "updated_at": "Updated Time",
}


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else None


def export_merchants(db: Session, params: MerchantFilterParams):
    merchants: List[Merchant] = (
        get_merchant_query(db, params)
        .options(*merchant_load_options())
        .all()
    )

    rows = [
        {
            "id": m.id,
            "dba_trading_name": m.dba_trading_name,
            "registered_name": m.registered_name,
            "merchant_type": m.merchant_type,
            "category_code": m.category_code,
            "employees_num": m.employees_num,
            "monthly_turnover": m.monthly_turnover,
            "currency_code": m.currency_code,
            "payinto_alias": ", ".join(
                c.alias_value for c in m.checkout_counters if c.alias_value),
            "registration_status": m.registration_status,
            "registration_status_reason": m.registration_status_reason,
            "allow_block_status": m.allow_block_status,
            "created_by": m.created_by.name if m.created_by else None,
            "checked_by": m.checked_by.name if m.checked_by else None,
            "created_at": _format_timestamp(m.created_at),
            "updated_at": _format_timestamp(m.updated_at),
        }
        for m in merchants
    ]

    filename = f"merchants_export_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}.xlsx"
    return export_to_excel(rows, filename, EXPORT_COLUMN_MAP, sheet_name="Merchants")


# ----------------- Draft Counts -----------------


def get_draft_count(db: Session, current_user: UserToken) -> JsonOutResult:
    count = db.query(func.count(Merchant.id)).filter(
        Merchant.registration_status == MerchantRegistrationStatus.DRAFT.value,
        Merchant.created_by_id == current_user.user_id
    ).scalar()
    return success_response(count or 0)


# ----------------- Single Merchant -----------------


def get_merchant(db: Session, merchant_id: int) -> JsonOutResult:
    merchant = get_merchant_or_404(db, merchant_id)
    return success_response(MerchantOut.model_validate(merchant))


def get_merchant_checkout_counters(db: Session, merchant_id: int) -> JsonOutResult:
    merchant = get_merchant_or_404(db, merchant_id)
    return success_response(
        [CheckoutCounterOut.model_validate(c) for c in merchant.checkout_counters])


# ----------------- Draft Create / Update -----------------


def normalize_license_document(file: Optional[UploadFile]) -> Optional[UploadFile]:
    # browsers submit an empty part when no file is picked
    if file is None or not file.filename:
        return None

    is_pdf = (
        (file.content_type or "").lower() in PDF_CONTENT_TYPES
        or file.filename.lower().endswith(".pdf")
    )
    if not is_pdf:
        return error_response(
            message="License document must be a PDF file",
            http_status=status.HTTP_422_UNPROCESSABLE_ENTITY
        )
    return file


async def store_license_document(merchant_id: int, license_number: str, file: Optional[UploadFile]) -> Optional[str]:
    if file is None:
        logger.debug("No file uploaded")
        return None

    document_path = await upload_merchant_document(merchant_id, license_number, file)
    if document_path is None:
        logger.error("Failed to upload the PDF to Storage Server")
    else:
        logger.debug("Successfully uploaded the PDF '%s' to Storage", document_path)
    return document_path


async def create_merchant_draft(
    db: Session,
    current_user: UserToken,
    form: MerchantDraftForm,
    license_document: Optional[UploadFile]
) -> JsonOutResult:
    license_document = normalize_license_document(license_document)

    checkout_counter = CheckoutCounter(alias_value=form.payinto_alias)
    merchant = Merchant(
        dba_trading_name=form.dba_trading_name,
        registered_name=form.registered_name,
        employees_num=form.employees_num.value,
        monthly_turnover=form.monthly_turnover,
        currency_code=form.currency_code,
        category_code=form.category_code,
        merchant_type=form.merchant_type.value,
        registration_status=form.registration_status.value,
        registration_status_reason=form.registration_status_reason,
        allow_block_status=MerchantAllowBlockStatus.PENDING.value,
        created_by_id=current_user.user_id,
        checkout_counters=[checkout_counter],
    )

    # counter, merchant and license are written in one transaction so a
    # failure never leaves an orphaned checkout counter behind
    try:
        db.add(merchant)
        db.flush()

        document_path = await store_license_document(
            merchant.id, form.license_number, license_document)

        merchant.business_licenses.append(BusinessLicense(
            license_number=form.license_number,
            license_document_link=document_path or ""
        ))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Query failed while drafting merchant")
        return error_response(
            message="Failed to save the merchant draft",
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    logger.info("Merchant %s drafted by user %s", merchant.id, current_user.user_id)
    return success_response(
        MerchantOut.model_validate(get_merchant_or_404(db, merchant.id)),
        message="Drafting Merchant Successful"
    )


async def update_merchant_draft(
    db: Session,
    merchant_id: int,
    form: MerchantDraftForm,
    license_document: Optional[UploadFile]
) -> JsonOutResult:
    license_document = normalize_license_document(license_document)
    merchant = get_merchant_or_404(db, merchant_id)

    merchant.dba_trading_name = form.dba_trading_name
    merchant.registered_name = form.registered_name
    merchant.employees_num = form.employees_num.value
    merchant.monthly_turnover = form.monthly_turnover
    merchant.currency_code = form.currency_code
    merchant.category_code = form.category_code
    merchant.merchant_type = form.merchant_type.value
    merchant.registration_status = form.registration_status.value
    merchant.registration_status_reason = form.registration_status_reason

    if merchant.checkout_counters:
        checkout_counter = merchant.checkout_counters[0]
    else:
        checkout_counter = CheckoutCounter()
        merchant.checkout_counters.append(checkout_counter)
    if form.payinto_alias is not None:
        checkout_counter.alias_value = form.payinto_alias

    if merchant.business_licenses:
        business_license = merchant.business_licenses[0]
    else:
        business_license = BusinessLicense(license_document_link="")
        merchant.business_licenses.append(business_license)
    business_license.license_number = form.license_number

    document_path = await store_license_document(
        merchant.id, form.license_number, license_document)
    # a failed upload keeps the previously stored document
    if document_path:
        business_license.license_document_link = document_path

    commit_or_500(db, "update the merchant draft")

    return success_response(
        MerchantOut.model_validate(get_merchant_or_404(db, merchant.id)),
        message="Updating Merchant Draft Successful"
    )


# ----------------- Submit For Review -----------------


def ready_to_review(db: Session, merchant_id: int) -> JsonOutResult:
    merchant = get_merchant_or_404(db, merchant_id)

    merchant.registration_status = MerchantRegistrationStatus.REVIEW.value
    merchant.registration_status_reason = "Submitted for review by Maker"
    commit_or_500(db, "update the merchant status")

    return success_response(
        MerchantOut.model_validate(get_merchant_or_404(db, merchant.id)),
        message="Status Updated to Review"
    )
