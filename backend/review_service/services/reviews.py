"""Request handling for reviews: validation, record translation, outcome mapping.

Every public operation checks its call context first, validates arguments
before touching storage, and ends in exactly one logged outcome: success or one
of the ``ReviewServiceError`` kinds. Storage failures other than a missing row
are reported as ``InternalError`` with the original exception kept as detail.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from review_service.core.context import CallContext
from review_service.core.errors import (
    CanceledError,
    ErrorKind,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
)
from review_service.models.review import Review
from review_service.repositories.base import ReviewNotFoundError, ReviewRepository
from review_service.schemas.review import ReviewOut

RATING_MIN = 1
RATING_MAX = 10

T = TypeVar("T")


class ReviewService:
    def __init__(self, repository: ReviewRepository, logger: logging.Logger | None = None):
        self._repo = repository
        self._logger = logger or logging.getLogger(__name__)

    def create(
        self, ctx: CallContext, media_id: int, user_id: int, content: str, rating: int = 0
    ) -> ReviewOut:
        op = "Create"
        self._check_context(ctx, op)
        self._check_rating(rating, op)

        review = Review(media_id=media_id, user_id=user_id, content=content, rating=rating)
        self._call(op, lambda: self._repo.create(review), "Failed to create review")

        self._log_success(
            op, "review created id=%s media_id=%s user_id=%s", review.id, media_id, user_id
        )
        return ReviewOut.from_record(review)

    def get_by_id(self, ctx: CallContext, review_id: int) -> ReviewOut:
        op = "GetByID"
        self._check_context(ctx, op)
        review = self._fetch(op, review_id)
        self._log_success(op, "review fetched id=%s", review_id)
        return ReviewOut.from_record(review)

    def update(
        self,
        ctx: CallContext,
        review_id: int,
        content: str | None = None,
        rating: int | None = None,
    ) -> ReviewOut:
        """Apply a partial update.

        Empty or missing ``content`` and zero or missing ``rating`` leave the
        stored value untouched.
        """
        op = "Update"
        self._check_context(ctx, op)
        review = self._fetch(op, review_id)

        if content:
            review.content = content
        if rating:
            self._check_rating(rating, op)
            review.rating = rating

        self._call(op, lambda: self._repo.update(review), "Failed to update review", review_id)

        self._log_success(op, "review updated id=%s", review_id)
        return ReviewOut.from_record(review)

    def delete(self, ctx: CallContext, review_id: int) -> bool:
        op = "Delete"
        self._check_context(ctx, op)
        self._fetch(op, review_id, "Failed to check review existence")
        self._call(op, lambda: self._repo.delete(review_id), "Failed to delete review", review_id)
        self._log_success(op, "review deleted id=%s", review_id)
        return True

    def list_all(self, ctx: CallContext) -> list[ReviewOut]:
        op = "GetAll"
        self._check_context(ctx, op)
        reviews = self._call(op, self._repo.get_all, "Failed to get reviews")
        self._log_success(op, "reviews fetched count=%d", len(reviews))
        return [ReviewOut.from_record(review) for review in reviews]

    def list_by_rating(self, ctx: CallContext, rating: int) -> list[ReviewOut]:
        op = "GetByRating"
        self._check_context(ctx, op)
        self._check_rating(rating, op)
        reviews = self._call(
            op, lambda: self._repo.get_by_rating(rating), "Failed to get reviews by rating"
        )
        self._log_success(op, "reviews fetched rating=%s count=%d", rating, len(reviews))
        return [ReviewOut.from_record(review) for review in reviews]

    def list_by_user(self, ctx: CallContext, user_id: int) -> list[ReviewOut]:
        op = "GetByUser"
        self._check_context(ctx, op)
        reviews = self._call(
            op, lambda: self._repo.get_by_user(user_id), "Failed to get reviews by user"
        )
        self._log_success(op, "reviews fetched user_id=%s count=%d", user_id, len(reviews))
        return [ReviewOut.from_record(review) for review in reviews]

    def list_by_media(self, ctx: CallContext, media_id: int) -> list[ReviewOut]:
        op = "GetByMedia"
        self._check_context(ctx, op)
        reviews = self._call(
            op, lambda: self._repo.get_by_media(media_id), "Failed to get reviews by media"
        )
        self._log_success(op, "reviews fetched media_id=%s count=%d", media_id, len(reviews))
        return [ReviewOut.from_record(review) for review in reviews]

    def _check_context(self, ctx: CallContext, op: str) -> None:
        reason = ctx.reason()
        if reason is None:
            return
        self._logger.error(
            "%s operation canceled: %s",
            op,
            reason,
            extra={"operation": op, "outcome": ErrorKind.CANCELED.value},
        )
        raise CanceledError(reason)

    def _check_rating(self, rating: int, op: str) -> None:
        if RATING_MIN <= rating <= RATING_MAX:
            return
        self._logger.warning(
            "invalid rating %s: must be between %d and %d",
            rating,
            RATING_MIN,
            RATING_MAX,
            extra={"operation": op, "outcome": ErrorKind.INVALID_ARGUMENT.value},
        )
        raise InvalidArgumentError(f"Rating must be between {RATING_MIN} and {RATING_MAX}")

    def _fetch(self, op: str, review_id: int, failure: str = "Failed to get review") -> Review:
        return self._call(op, lambda: self._repo.get_by_id(review_id), failure, review_id)

    def _call(
        self, op: str, fn: Callable[[], T], failure: str, review_id: int | None = None
    ) -> T:
        try:
            return fn()
        except ReviewNotFoundError as exc:
            self._logger.warning(
                "review not found id=%s",
                exc.review_id,
                extra={"operation": op, "outcome": ErrorKind.NOT_FOUND.value},
            )
            raise NotFoundError(f"Review not found: {exc.review_id}", detail=exc) from exc
        except Exception as exc:  # noqa: BLE001
            self._logger.error(
                "%s id=%s",
                failure,
                review_id,
                exc_info=exc,
                extra={"operation": op, "outcome": ErrorKind.INTERNAL.value},
            )
            raise InternalError(failure, detail=exc) from exc

    def _log_success(self, op: str, msg: str, *args) -> None:
        self._logger.info(msg, *args, extra={"operation": op, "outcome": "OK"})
