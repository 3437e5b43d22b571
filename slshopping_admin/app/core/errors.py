"""
Error types and handlers for the console.
"""

import logging
from typing import Union

from fastapi import FastAPI, Request, status

from .templating import render

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """Raised when an identifier has no matching record."""

    def __init__(self, resource: str, resource_id: Union[int, str]):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found: {resource_id}")


def setup_error_handlers(app: FastAPI) -> None:
    """Register the console's exception handlers on ``app``."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.warning("%s (path=%s)", exc, request.url.path)
        return render(
            request,
            "errors/not_found",
            {"resource": exc.resource, "resource_id": exc.resource_id},
            status_code=status.HTTP_404_NOT_FOUND,
        )
