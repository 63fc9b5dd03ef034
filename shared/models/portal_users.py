from sqlalchemy import TIMESTAMP, Column, Integer, String, func
from sqlalchemy.orm import relationship
from passlib.context import CryptContext

from ..core.database import Base
from ..utils.enums import PortalUserRole, PortalUserStatus

bcrypt_context = CryptContext(schemes=['bcrypt'], deprecated='auto')


class PortalUser(Base):
    __tablename__ = "portal_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(200), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    phone_number = Column(String(20), nullable=True)
    role = Column(String(16), nullable=False, default=PortalUserRole.MAKER.value)
    status = Column(String(16), nullable=False, default=PortalUserStatus.ACTIVE.value)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    login_sessions = relationship(
        "PortalUserLoginSession",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    def set_password(self, password: str):
        self.password = bcrypt_context.hash(password)

    def verify_password(self, password: str) -> bool:
        return bcrypt_context.verify(password, self.password)
