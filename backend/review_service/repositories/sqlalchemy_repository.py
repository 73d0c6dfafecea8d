import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from review_service.models.review import Review
from review_service.repositories.base import ReviewNotFoundError, ReviewRepository

logger = logging.getLogger(__name__)


class SqlAlchemyReviewRepository(ReviewRepository):
    """Single-table adapter over the ``review`` table.

    Each call runs in its own short-lived session. Returned records are detached
    and fully loaded, so callers may read and modify them freely.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create(self, review: Review) -> None:
        try:
            with self._session_factory() as db:
                db.add(review)
                db.commit()
                db.refresh(review)
        except SQLAlchemyError:
            logger.exception(
                "failed to create review media_id=%s user_id=%s", review.media_id, review.user_id
            )
            raise
        logger.info(
            "review created id=%s media_id=%s user_id=%s", review.id, review.media_id, review.user_id
        )

    def get_by_id(self, review_id: int) -> Review:
        try:
            with self._session_factory() as db:
                review = db.get(Review, review_id)
        except SQLAlchemyError:
            logger.exception("failed to get review id=%s", review_id)
            raise
        if review is None:
            logger.warning("review not found id=%s", review_id)
            raise ReviewNotFoundError(review_id)
        logger.info("review fetched id=%s", review_id)
        return review

    def update(self, review: Review) -> None:
        try:
            with self._session_factory() as db:
                result = db.execute(
                    update(Review)
                    .where(Review.id == review.id)
                    .values(
                        media_id=review.media_id,
                        user_id=review.user_id,
                        content=review.content,
                        rating=review.rating,
                    )
                )
                if result.rowcount == 0:
                    db.rollback()
                    logger.warning("review vanished before update id=%s", review.id)
                    raise ReviewNotFoundError(review.id)
                db.commit()
                stored = db.get(Review, review.id)
                review.created_at = stored.created_at
                review.updated_at = stored.updated_at
        except SQLAlchemyError:
            logger.exception("failed to update review id=%s", review.id)
            raise
        logger.info("review updated id=%s", review.id)

    def delete(self, review_id: int) -> None:
        try:
            with self._session_factory() as db:
                db.execute(delete(Review).where(Review.id == review_id))
                db.commit()
        except SQLAlchemyError:
            logger.exception("failed to delete review id=%s", review_id)
            raise
        logger.info("review deleted id=%s", review_id)

    def get_all(self) -> list[Review]:
        return self._scan("all")

    def get_by_rating(self, rating: int) -> list[Review]:
        return self._scan(f"rating={rating}", Review.rating == rating)

    def get_by_user(self, user_id: int) -> list[Review]:
        return self._scan(f"user_id={user_id}", Review.user_id == user_id)

    def get_by_media(self, media_id: int) -> list[Review]:
        return self._scan(f"media_id={media_id}", Review.media_id == media_id)

    def _scan(self, label: str, *criteria) -> list[Review]:
        stmt = select(Review).where(*criteria).order_by(Review.id)
        try:
            with self._session_factory() as db:
                reviews = list(db.scalars(stmt).all())
        except SQLAlchemyError:
            logger.exception("failed to list reviews %s", label)
            raise
        logger.info("reviews listed %s count=%d", label, len(reviews))
        return reviews
