import logging

from sqlalchemy.exc import SQLAlchemyError

from shared.core.config import settings
from shared.core.database import SessionLocal
from shared.models.portal_users import PortalUser
from shared.utils.enums import PortalUserRole, PortalUserStatus

logger = logging.getLogger(__name__)

DEFAULT_PORTAL_USERS = [
    {"name": "DFSP Admin", "email": "admin@dfsp1.com", "role": PortalUserRole.ADMIN},
    {"name": "DFSP Maker", "email": "maker@dfsp1.com", "role": PortalUserRole.MAKER},
    {"name": "DFSP Checker", "email": "checker@dfsp1.com", "role": PortalUserRole.CHECKER},
]


def seed_default_users():
    db = SessionLocal()

    try:
        for default_user in DEFAULT_PORTAL_USERS:
            existing_user = (
                db.query(PortalUser)
                .filter(PortalUser.email == default_user["email"])
                .first()
            )

            if existing_user:
                continue

            user = PortalUser(
                name=default_user["name"],
                email=default_user["email"],
                role=default_user["role"].value,
                status=PortalUserStatus.ACTIVE.value,
            )
            user.set_password(settings.DEFAULT_USER_PASSWORD)
            db.add(user)
            logger.info("Default portal user created: %s", user.email)

        db.commit()

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating default portal users")
        raise

    finally:
        db.close()
