from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class BusinessOwner(Base):
    __tablename__ = "business_owners"

    id = Column(Integer, primary_key=True, autoincrement=True)
    merchant_id = Column(Integer, ForeignKey(
        "merchants.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    identification_type = Column(String(32), nullable=False)  # National ID|Passport
    identification_number = Column(String(128), nullable=False)
    phone_number = Column(String(32), nullable=True)
    email = Column(String(255), nullable=True)
    address = Column(JSON, nullable=True)  # {"street_name":..., "town_name":..., "country":...}
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    merchant = relationship("Merchant", back_populates="business_owners")
