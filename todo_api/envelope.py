# todo_api/envelope.py
"""Uniform ``{success, message, data}`` JSON responses."""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope_response(
    status_code: int, success: bool, message: str, data: Any = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": success,
            "message": message,
            "data": jsonable_encoder(data),
        },
    )
