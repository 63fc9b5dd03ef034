import os
import tempfile

# settings are read when shared.core.config is first imported
_db_dir = tempfile.mkdtemp(prefix="acquirer-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'acquirer.db')}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DEFAULT_USER_PASSWORD"] = "password"

import pytest
from fastapi.testclient import TestClient

from acquirer_service.app.main import app
from acquirer_service.app.enum.merchant_enum import (
    MerchantAllowBlockStatus, MerchantRegistrationStatus, MerchantType, NumberOfEmployees
)
from acquirer_service.app.models.merchants.business_licenses import BusinessLicense
from acquirer_service.app.models.merchants.checkout_counters import CheckoutCounter
from acquirer_service.app.models.merchants.merchants import Merchant
from shared.core.database import SessionLocal
from shared.models.portal_users import PortalUser

API = "/api/v1"
DEFAULT_PASSWORD = "password"


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


def login(client, email: str, password: str = DEFAULT_PASSWORD) -> str:
    response = client.post(f"{API}/users/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def maker_headers(client):
    return {"Authorization": f"Bearer {login(client, 'maker@dfsp1.com')}"}


@pytest.fixture
def checker_headers(client):
    return {"Authorization": f"Bearer {login(client, 'checker@dfsp1.com')}"}


@pytest.fixture
def admin_headers(client):
    return {"Authorization": f"Bearer {login(client, 'admin@dfsp1.com')}"}


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_merchant(db):
    """Insert merchants directly and delete them again after the test."""
    created_ids = []

    def _make(**overrides):
        maker = db.query(PortalUser).filter(PortalUser.email == "maker@dfsp1.com").first()
        alias = overrides.pop("payinto_alias", None)
        values = {
            "dba_trading_name": "Corner Shop",
            "registered_name": "Corner Shop Ltd",
            "employees_num": NumberOfEmployees.ONE_TO_FIVE.value,
            "monthly_turnover": 1500.0,
            "currency_code": "USD",
            "category_code": "5411",
            "merchant_type": MerchantType.SMALL_SHOP.value,
            "registration_status": MerchantRegistrationStatus.DRAFT.value,
            "registration_status_reason": "Drafted by Maker",
            "allow_block_status": MerchantAllowBlockStatus.PENDING.value,
            "created_by_id": maker.id,
        }
        values.update(overrides)
        merchant = Merchant(**values)
        merchant.checkout_counters.append(CheckoutCounter(alias_value=alias))
        merchant.business_licenses.append(
            BusinessLicense(license_number="LIC-1", license_document_link=""))
        db.add(merchant)
        db.commit()
        db.refresh(merchant)
        created_ids.append(merchant.id)
        return merchant

    yield _make

    db.expire_all()
    for merchant in db.query(Merchant).filter(Merchant.id.in_(created_ids)).all():
        db.delete(merchant)
    db.commit()


@pytest.fixture
def cleanup_merchants(db):
    """Collect ids of merchants created through the API and delete them afterwards."""
    created_ids = []
    yield created_ids

    db.expire_all()
    for merchant in db.query(Merchant).filter(Merchant.id.in_(created_ids)).all():
        db.delete(merchant)
    db.commit()
