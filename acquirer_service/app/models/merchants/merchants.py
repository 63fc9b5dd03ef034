# app/models/merchants.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import relationship
from shared.core.database import Base
from ...enum.merchant_enum import MerchantAllowBlockStatus, MerchantRegistrationStatus


class Merchant(Base):
    __tablename__ = "merchants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    dba_trading_name = Column(String(255), nullable=False, index=True)
    registered_name = Column(String(255), nullable=True)
    employees_num = Column(String(32), nullable=False)
    monthly_turnover = Column(Numeric(18, 2, asdecimal=False), nullable=True)
    currency_code = Column(String(3), nullable=False)
    category_code = Column(String(16), nullable=False)
    merchant_type = Column(String(32), nullable=False)
    registration_status = Column(
        String(32), nullable=False, default=MerchantRegistrationStatus.DRAFT.value, index=True)
    registration_status_reason = Column(String(500), nullable=True)
    allow_block_status = Column(
        String(16), nullable=False, default=MerchantAllowBlockStatus.PENDING.value)

    created_by_id = Column(Integer, ForeignKey("portal_users.id"), nullable=True)
    checked_by_id = Column(Integer, ForeignKey("portal_users.id"), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    created_by = relationship("PortalUser", foreign_keys=[created_by_id])
    checked_by = relationship("PortalUser", foreign_keys=[checked_by_id])

    checkout_counters = relationship(
        "CheckoutCounter", back_populates="merchant",
        cascade="all, delete-orphan", order_by="CheckoutCounter.id")
    business_licenses = relationship(
        "BusinessLicense", back_populates="merchant",
        cascade="all, delete-orphan", order_by="BusinessLicense.id")
    locations = relationship(
        "MerchantLocation", back_populates="merchant",
        cascade="all, delete-orphan", order_by="MerchantLocation.id")
    business_owners = relationship(
        "BusinessOwner", back_populates="merchant",
        cascade="all, delete-orphan", order_by="BusinessOwner.id")
    contact_persons = relationship(
        "ContactPerson", back_populates="merchant",
        cascade="all, delete-orphan", order_by="ContactPerson.id")
