import os
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    PROJECT_NAME: str = "Merchant Acquirer Backend"
    API_V1_STR: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:8080"]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    JWT_SECRET: str = os.getenv("JWT_SECRET", "change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MINUTES: int = int(os.getenv("JWT_EXPIRE_MINUTES", 60 * 24))

    DATABASE_URL: str | None = os.getenv("DATABASE_URL")
    DB_USER: str | None = os.getenv("DB_USER")
    DB_PASS: str | None = os.getenv("DB_PASS")
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: str = os.getenv("DB_PORT", "5432")
    DB_NAME: str = os.getenv("DB_NAME", "acquirer")

    # S3 compatible object storage (MinIO in development)
    STORAGE_ENDPOINT_URL: str | None = os.getenv("STORAGE_ENDPOINT_URL")
    STORAGE_ACCESS_KEY: str | None = os.getenv("STORAGE_ACCESS_KEY")
    STORAGE_SECRET_KEY: str | None = os.getenv("STORAGE_SECRET_KEY")
    STORAGE_BUCKET: str = os.getenv("STORAGE_BUCKET", "merchant-documents")
    STORAGE_REGION: str = os.getenv("STORAGE_REGION", "us-east-1")

    DEFAULT_USER_PASSWORD: str = os.getenv("DEFAULT_USER_PASSWORD", "password")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


settings = Settings()

ACQUIRER_DATABASE_URL = settings.DATABASE_URL or (
    f"postgresql+psycopg2://{settings.DB_USER}:{settings.DB_PASS}@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"
)
