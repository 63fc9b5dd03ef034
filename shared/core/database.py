from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from shared.core.config import ACQUIRER_DATABASE_URL

Base = declarative_base()

POOL_SIZE = 5
MAX_OVERFLOW = 5

# sqlite connections are shared with the threadpool that runs sync routes
connect_args = {"check_same_thread": False} if ACQUIRER_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    ACQUIRER_DATABASE_URL,
    pool_pre_ping=True,
    pool_recycle=300,
    pool_size=POOL_SIZE,          # max idle connections
    max_overflow=MAX_OVERFLOW,    # max temporary extra connections
    pool_timeout=30,              # wait time before failing
    connect_args=connect_args
)
SessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=engine)


# Dependency


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
