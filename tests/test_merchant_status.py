from acquirer_service.app.models.merchants.merchants import Merchant
from conftest import API


def test_bulk_approve_sets_status_and_checker(client, checker_headers, make_merchant, db):
    first = make_merchant(registration_status="Review")
    second = make_merchant(registration_status="Review")

    response = client.put(
        f"{API}/merchants/bulk-approve", json={"ids": [first.id, second.id]}, headers=checker_headers)

    assert response.status_code == 200, response.text
    assert response.json()["data"] == [first.id, second.id]

    db.expire_all()
    for merchant in db.query(Merchant).filter(Merchant.id.in_([first.id, second.id])):
        assert merchant.registration_status == "Approved"
        assert merchant.registration_status_reason == "Approved by Checker"
        assert merchant.checked_by.email == "checker@dfsp1.com"


def test_bulk_reject_records_reason(client, checker_headers, make_merchant, db):
    merchant = make_merchant(registration_status="Review")

    response = client.put(
        f"{API}/merchants/bulk-reject",
        json={"ids": [merchant.id], "reason": "Missing tax documents"},
        headers=checker_headers,
    )

    assert response.status_code == 200
    db.expire_all()
    stored = db.get(Merchant, merchant.id)
    assert stored.registration_status == "Rejected"
    assert stored.registration_status_reason == "Missing tax documents"


def test_bulk_revert_records_reason(client, checker_headers, make_merchant, db):
    merchant = make_merchant(registration_status="Review")

    response = client.put(
        f"{API}/merchants/bulk-revert",
        json={"ids": [merchant.id], "reason": "Fix the trading name"},
        headers=checker_headers,
    )

    assert response.status_code == 200
    db.expire_all()
    assert db.get(Merchant, merchant.id).registration_status == "Reverted"


def test_bulk_action_with_unknown_id_updates_nothing(client, checker_headers, make_merchant, db):
    merchant = make_merchant(registration_status="Review")

    response = client.put(
        f"{API}/merchants/bulk-approve", json={"ids": [merchant.id, 999999]}, headers=checker_headers)

    assert response.status_code == 404
    assert "999999" in response.json()["message"]
    db.expire_all()
    assert db.get(Merchant, merchant.id).registration_status == "Review"


def test_bulk_action_rejects_empty_ids(client, checker_headers):
    response = client.put(f"{API}/merchants/bulk-approve", json={"ids": []}, headers=checker_headers)

    assert response.status_code == 422
    assert response.json()["message"] == "Validation error"


def test_bulk_reject_requires_reason(client, checker_headers, make_merchant):
    merchant = make_merchant()

    missing = client.put(f"{API}/merchants/bulk-reject", json={"ids": [merchant.id]}, headers=checker_headers)
    blank = client.put(
        f"{API}/merchants/bulk-revert", json={"ids": [merchant.id], "reason": "   "}, headers=checker_headers)

    assert missing.status_code == 422
    assert blank.status_code == 422
