# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, engine
from shared.data.default_users_insert import seed_default_users
from shared.helpers.exception_handler import setup_exception_handlers
from shared.models import portal_users, user_login_session
from .models.merchants import (
    business_licenses, business_owners, checkout_counters, contact_persons, locations, merchants
)
from .router.merchants import (
    business_owners_router, contact_persons_router, locations_router, merchants_router
)
from .router.users import users_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create all tables
Base.metadata.create_all(bind=engine)
seed_default_users()

# This MUST exist for uvicorn
app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(users_router.router, prefix=settings.API_V1_STR)
app.include_router(merchants_router.router, prefix=settings.API_V1_STR)
app.include_router(locations_router.router, prefix=settings.API_V1_STR)
app.include_router(business_owners_router.router, prefix=settings.API_V1_STR)
app.include_router(contact_persons_router.router, prefix=settings.API_V1_STR)

logger.info("%s started", settings.PROJECT_NAME)


@app.get(f"{settings.API_V1_STR}/health")
def health():
    return {"status": "healthy"}
