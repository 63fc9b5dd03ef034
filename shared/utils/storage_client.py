"""
S3 compatible object storage for merchant documents.

Works against AWS S3 or a MinIO server (set STORAGE_ENDPOINT_URL).
"""
import logging
import os
import uuid
from functools import lru_cache
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from shared.core.config import settings

logger = logging.getLogger(__name__)


class ObjectStorageClient:
    """Thin wrapper over a boto3 S3 client bound to a single bucket."""

    def __init__(
        self,
        bucket_name: str,
        endpoint_url: Optional[str] = None,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        region: str = "us-east-1",
    ):
        self.bucket_name = bucket_name
        config = Config(
            region_name=region,
            retries={'max_attempts': 3, 'mode': 'standard'},
            s3={'addressing_style': 'path'}
        )
        self.s3_client = boto3.client(
            's3',
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            region_name=region,
            config=config
        )
        self._bucket_checked = False

    def _ensure_bucket(self):
        if self._bucket_checked:
            return
        try:
            self.s3_client.head_bucket(Bucket=self.bucket_name)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") not in ("404", "NoSuchBucket"):
                raise
            logger.info("Creating storage bucket '%s'", self.bucket_name)
            self.s3_client.create_bucket(Bucket=self.bucket_name)
        self._bucket_checked = True

    def put_object(self, key: str, body: bytes, content_type: str) -> str:
        self._ensure_bucket()
        self.s3_client.put_object(
            Bucket=self.bucket_name,
            Key=key,
            Body=body,
            ContentType=content_type
        )
        return key


@lru_cache
def get_storage_client() -> ObjectStorageClient:
    return ObjectStorageClient(
        bucket_name=settings.STORAGE_BUCKET,
        endpoint_url=settings.STORAGE_ENDPOINT_URL,
        access_key=settings.STORAGE_ACCESS_KEY,
        secret_key=settings.STORAGE_SECRET_KEY,
        region=settings.STORAGE_REGION,
    )


def build_document_key(merchant_id: int, license_number: str, filename: Optional[str]) -> str:
    """Format: merchants/{merchant_id}/licenses/{license_number}/{uuid}{ext}"""
    ext = os.path.splitext(filename or "")[1].lower() or ".pdf"
    return f"merchants/{merchant_id}/licenses/{license_number}/{uuid.uuid4().hex}{ext}"


async def upload_merchant_document(merchant_id: int, license_number: str, file: UploadFile) -> Optional[str]:
    """
    Upload a merchant's license document.

    Returns:
        The object path inside the bucket, or None when the upload failed.
    """
    key = build_document_key(merchant_id, license_number, file.filename)
    try:
        body = await file.read()
        # boto3 blocks, keep it off the event loop
        await run_in_threadpool(
            get_storage_client().put_object,
            key, body, file.content_type or "application/octet-stream")
    except (BotoCoreError, ClientError) as e:
        logger.error("Failed to upload '%s' to storage: %s", file.filename, e)
        return None

    return key
