from sqlalchemy import (
    Column, Integer, String, Boolean, ForeignKey, TIMESTAMP, func
)
from sqlalchemy.orm import relationship
from ..core.database import Base


class PortalUserLoginSession(Base):
    __tablename__ = "portal_user_login_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey(
        "portal_users.id", ondelete="CASCADE"), nullable=False)
    ip_address = Column(String(50), nullable=True)
    user_agent = Column(String(255), nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    logged_out_at = Column(TIMESTAMP(timezone=True), nullable=True)

    user = relationship("PortalUser", back_populates="login_sessions")
