import math

from fastapi import Header, Request

from review_service.core.context import CallContext
from review_service.core.errors import InvalidArgumentError
from review_service.services.reviews import ReviewService


def get_review_service(request: Request) -> ReviewService:
    return request.app.state.review_service


def get_call_context(
    x_request_timeout: float | None = Header(default=None, alias="X-Request-Timeout"),
) -> CallContext:
    if x_request_timeout is not None and not math.isfinite(x_request_timeout):
        raise InvalidArgumentError("X-Request-Timeout must be a finite number of seconds")
    return CallContext(timeout=x_request_timeout)
