"""Exception handlers that translate domain errors at the HTTP boundary."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from record_service.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


async def storage_error_handler(request: Request, exc: StorageError) -> PlainTextResponse:
    logger.error(
        "%s %s failed: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc.__cause__,
    )
    return PlainTextResponse(
        "Internal Server Error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorageError, storage_error_handler)
