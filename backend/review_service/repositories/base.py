"""Storage port for review records.

Handlers depend on this contract only, so any backend that honours it can be
swapped in. ``get_by_id`` is the only operation with a distinguished failure:
it raises ``ReviewNotFoundError`` when no row matches. Every other failure is
whatever the backend raises and is treated as opaque by callers.
"""

from abc import ABC, abstractmethod

from review_service.models.review import Review


class ReviewNotFoundError(LookupError):
    def __init__(self, review_id: int):
        super().__init__(f"review not found: {review_id}")
        self.review_id = review_id


class ReviewRepository(ABC):
    @abstractmethod
    def create(self, review: Review) -> None:
        """Persist a new record, filling in ``id`` and the timestamps."""

    @abstractmethod
    def get_by_id(self, review_id: int) -> Review:
        ...

    @abstractmethod
    def update(self, review: Review) -> None:
        """Overwrite the stored row with every field of ``review``."""

    @abstractmethod
    def delete(self, review_id: int) -> None:
        ...

    @abstractmethod
    def get_all(self) -> list[Review]:
        ...

    @abstractmethod
    def get_by_rating(self, rating: int) -> list[Review]:
        ...

    @abstractmethod
    def get_by_user(self, user_id: int) -> list[Review]:
        ...

    @abstractmethod
    def get_by_media(self, media_id: int) -> list[Review]:
        ...
