# app/router/merchants/merchants_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import JsonOutResult, UserToken
from ...crud.merchants import merchants_crud as crud
from ...crud.merchants import merchant_status_crud as status_crud
from ...schemas.merchants.checkout_counters_schemas import CheckoutCounterOut
from ...schemas.merchants.merchants_schemas import (
    BulkActionResponse, BulkApproveRequest, BulkReasonRequest, MerchantDraftForm,
    MerchantFilterParams, MerchantListResponse, MerchantOut
)

router = APIRouter(prefix="/merchants",
                   tags=["Merchants"], dependencies=[Depends(validate_current_token)])


def merchant_path_id(merchant_id: str) -> int:
    return crud.parse_id(merchant_id)


# ---------------- List all merchants ----------------


@router.get("", response_model=MerchantListResponse)
def get_merchants(
    params: MerchantFilterParams = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_merchants(db, params)


@router.get("/export-with-filter")
def export_merchants(
    params: MerchantFilterParams = Depends(),
    db: Session = Depends(get_db)
):
    return crud.export_merchants(db, params)


@router.get("/draft-counts", response_model=JsonOutResult[int])
def get_draft_count(
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.get_draft_count(db, current_user)


# ---------------- Draft ----------------


@router.post("/draft", response_model=JsonOutResult[MerchantOut], status_code=status.HTTP_201_CREATED)
async def create_merchant_draft(
    form: MerchantDraftForm = Depends(MerchantDraftForm.as_form),
    license_document: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return await crud.create_merchant_draft(db, current_user, form, license_document)


# ---------------- Bulk status changes ----------------


@router.put("/bulk-approve", response_model=BulkActionResponse)
def bulk_approve(
    payload: BulkApproveRequest,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return status_crud.bulk_approve(db, current_user, payload.ids)


@router.put("/bulk-reject", response_model=BulkActionResponse)
def bulk_reject(
    payload: BulkReasonRequest,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return status_crud.bulk_reject(db, current_user, payload.ids, payload.reason)


@router.put("/bulk-revert", response_model=BulkActionResponse)
def bulk_revert(
    payload: BulkReasonRequest,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return status_crud.bulk_revert(db, current_user, payload.ids, payload.reason)


# ---------------- Single merchant ----------------


@router.get("/{merchant_id}", response_model=JsonOutResult[MerchantOut])
def get_merchant(
    merchant_id: int = Depends(merchant_path_id),
    db: Session = Depends(get_db)
):
    return crud.get_merchant(db, merchant_id)


@router.put("/{merchant_id}/draft", response_model=JsonOutResult[MerchantOut])
async def update_merchant_draft(
    merchant_id: int = Depends(merchant_path_id),
    form: MerchantDraftForm = Depends(MerchantDraftForm.as_form),
    license_document: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    return await crud.update_merchant_draft(db, merchant_id, form, license_document)


@router.get("/{merchant_id}/checkout-counters", response_model=JsonOutResult[List[CheckoutCounterOut]])
def get_checkout_counters(
    merchant_id: int = Depends(merchant_path_id),
    db: Session = Depends(get_db)
):
    return crud.get_merchant_checkout_counters(db, merchant_id)


@router.put("/{merchant_id}/ready-to-review", response_model=JsonOutResult[MerchantOut])
def ready_to_review(
    merchant_id: int = Depends(merchant_path_id),
    db: Session = Depends(get_db)
):
    return crud.ready_to_review(db, merchant_id)
