from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class BusinessLicense(Base):
    __tablename__ = "business_licenses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    license_number = Column(String(255), nullable=False)
    # object storage path, "" when no document was stored
    license_document_link = Column(String(512), nullable=False, default="")
    merchant_id = Column(Integer, ForeignKey(
        "merchants.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    merchant = relationship("Merchant", back_populates="business_licenses")
