import logging
from typing import List

from fastapi import status
from sqlalchemy.orm import Session

from shared.core.schemas import UserToken
from shared.helpers.json_response_helper import error_response
from ...enum.merchant_enum import MerchantRegistrationStatus
from ...models.merchants.merchants import Merchant
from ...schemas.merchants.merchants_schemas import BulkActionResponse
from .merchants_crud import commit_or_500

logger = logging.getLogger(__name__)


def change_registration_status(
    db: Session,
    current_user: UserToken,
    ids: List[int],
    new_status: MerchantRegistrationStatus,
    reason: str,
) -> BulkActionResponse:
    """Set the registration status of every merchant in ``ids``.

    Every id must exist, otherwise nothing is updated. The current status of
    each merchant is not checked.
    """
    merchants = db.query(Merchant).filter(Merchant.id.in_(ids)).all()

    found_ids = {m.id for m in merchants}
    missing_ids = [merchant_id for merchant_id in ids if merchant_id not in found_ids]
    if missing_ids:
        return error_response(
            message=f"Merchant not found: {', '.join(str(i) for i in missing_ids)}",
            http_status=status.HTTP_404_NOT_FOUND
        )

    for merchant in merchants:
        merchant.registration_status = new_status.value
        merchant.registration_status_reason = reason
        merchant.checked_by_id = current_user.user_id

    commit_or_500(db, f"update the merchants to {new_status.value}")

    logger.info("User %s set merchants %s to %s",
                current_user.user_id, ids, new_status.value)
    return BulkActionResponse(
        message=f"Merchants Status Updated to {new_status.value}",
        data=ids
    )


def bulk_approve(db: Session, current_user: UserToken, ids: List[int]) -> BulkActionResponse:
    return change_registration_status(
        db, current_user, ids, MerchantRegistrationStatus.APPROVED, "Approved by Checker")


def bulk_reject(db: Session, current_user: UserToken, ids: List[int], reason: str) -> BulkActionResponse:
    return change_registration_status(
        db, current_user, ids, MerchantRegistrationStatus.REJECTED, reason)


def bulk_revert(db: Session, current_user: UserToken, ids: List[int], reason: str) -> BulkActionResponse:
    return change_registration_status(
        db, current_user, ids, MerchantRegistrationStatus.REVERTED, reason)
