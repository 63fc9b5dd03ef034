# app/utils/response_helper.py
from fastapi import HTTPException
from typing import Any

from shared.core.schemas import JsonOutResult


def success_response(data: Any, message: str = "OK"):
    return JsonOutResult(
        message=message,
        data=data
    )


def error_response(message: str, http_status: int = 400):
    raise HTTPException(
        status_code=http_status,
        detail=message
    )
