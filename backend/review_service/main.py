import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from review_service.api.router import api_router
from review_service.core.config import settings
from review_service.core.errors import ErrorKind, ReviewServiceError
from review_service.core.logging import configure_logging
from review_service.db.session import create_db_engine, create_session_factory
from review_service.repositories.sqlalchemy_repository import SqlAlchemyReviewRepository
from review_service.schemas.review import ErrorResponse
from review_service.services.reviews import ReviewService

# 499 is the de facto "client closed request" status.
STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CANCELED: 499,
    ErrorKind.INTERNAL: 500,
}


def build_review_service(database_url: str) -> ReviewService:
    engine = create_db_engine(database_url)
    repository = SqlAlchemyReviewRepository(create_session_factory(engine))
    return ReviewService(repository, logging.getLogger("review_service.handler"))


async def review_error_handler(request: Request, exc: ReviewServiceError) -> JSONResponse:
    body = ErrorResponse(code=exc.kind.value, message=exc.message)
    return JSONResponse(status_code=STATUS_BY_KIND[exc.kind], content=body.model_dump())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed or out-of-range wire values are caller errors, not a separate kind.
    fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
    body = ErrorResponse(
        code=ErrorKind.INVALID_ARGUMENT.value,
        message=f"Invalid request: {', '.join(fields)}",
    )
    return JSONResponse(
        status_code=STATUS_BY_KIND[ErrorKind.INVALID_ARGUMENT], content=body.model_dump()
    )


def create_app(service: ReviewService | None = None) -> FastAPI:
    app = FastAPI(title="Review Service API")
    app.state.review_service = service or build_review_service(settings.sqlalchemy_url)
    app.add_exception_handler(ReviewServiceError, review_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(api_router)
    return app


def run() -> None:
    configure_logging(settings.log_level, settings.service_name)
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
