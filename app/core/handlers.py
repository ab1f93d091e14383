# app/core/handlers.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import BaseAPIException, StorageError, StudentValidationException
from app.core.response import common_error, validation_error, write_json

logger = logging.getLogger(__name__)


# 1. Errors we raise ourselves (bad body, bad id)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return write_json(exc.status_code, common_error(exc))


# 2. Student field validation failures
async def student_validation_exception_handler(request: Request, exc: StudentValidationException):
    return write_json(exc.status_code, validation_error(exc.errors))


# 3. Storage failures, not-found included
async def storage_exception_handler(request: Request, exc: StorageError):
    logger.error("storage error: %s", exc)
    return write_json(status.HTTP_500_INTERNAL_SERVER_ERROR, common_error(exc))


# 4. Validation errors FastAPI raises while binding parameters
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return write_json(status.HTTP_400_BAD_REQUEST, validation_error(exc.errors()))


# 5. Standard HTTP errors (unknown route, wrong method)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return write_json(exc.status_code, common_error(exc.detail))


# 6. Anything else
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)
    return write_json(status.HTTP_500_INTERNAL_SERVER_ERROR, common_error(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StudentValidationException, student_validation_exception_handler)
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
