from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class MerchantLocation(Base):
    __tablename__ = "merchant_locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    merchant_id = Column(Integer, ForeignKey(
        "merchants.id", ondelete="CASCADE"), nullable=False)
    location_type = Column(String(16), nullable=False)  # Physical|Virtual
    web_url = Column(String(255), nullable=True)
    address_type = Column(String(64), nullable=True)
    department = Column(String(255), nullable=True)
    sub_department = Column(String(255), nullable=True)
    street_name = Column(String(255), nullable=True)
    building_number = Column(String(64), nullable=True)
    building_name = Column(String(255), nullable=True)
    floor_number = Column(String(64), nullable=True)
    room_number = Column(String(64), nullable=True)
    post_box = Column(String(64), nullable=True)
    postal_code = Column(String(64), nullable=True)
    town_name = Column(String(255), nullable=True)
    district_name = Column(String(255), nullable=True)
    country_subdivision = Column(String(255), nullable=True)
    country = Column(String(128), nullable=True)
    address_line = Column(String(512), nullable=True)
    latitude = Column(String(32), nullable=True)
    longitude = Column(String(32), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    merchant = relationship("Merchant", back_populates="locations")
    checkout_counters = relationship(
        "CheckoutCounter", back_populates="checkout_location")
