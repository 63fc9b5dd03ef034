from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class CheckoutCounter(Base):
    __tablename__ = "checkout_counters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(255), nullable=True)
    alias_value = Column(String(255), nullable=True, index=True)
    merchant_id = Column(Integer, ForeignKey(
        "merchants.id", ondelete="CASCADE"), nullable=True)
    checkout_location_id = Column(Integer, ForeignKey(
        "merchant_locations.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    merchant = relationship("Merchant", back_populates="checkout_counters")
    checkout_location = relationship(
        "MerchantLocation", back_populates="checkout_counters")
