import logging
from typing import Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .header_util import create_failure_alert

logger = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"
PROBLEM_BASE_URL = "https://www.jhipster.tech/problem"

class InvalidArgument(BaseModel):
    """A rejected request, returned by services instead of raised"""
    message: str
    entity_name: str
    error_key: str

class MovieStoreError(Exception):
    """Raised when the persistence backend fails"""

def problem_response(status_code: int, title: str, body: Optional[Dict] = None,
                     headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    content = {"type": f"{PROBLEM_BASE_URL}/problem-with-message", "title": title, "status": status_code}
    content.update(body or {})
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers=headers,
        media_type=PROBLEM_CONTENT_TYPE
    )

def bad_request_response(error: InvalidArgument, application_name: str) -> JSONResponse:
    headers = create_failure_alert(application_name, error.entity_name, error.error_key, error.message)
    return problem_response(
        400,
        error.message,
        body={
            "message": f"error.{error.error_key}",
            "params": error.entity_name,
            "entityName": error.entity_name,
            "errorKey": error.error_key,
        },
        headers=headers
    )

async def movie_store_error_handler(request: Request, exc: MovieStoreError) -> JSONResponse:
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return problem_response(500, "Internal Server Error", body={"message": "error.store", "detail": str(exc)})
