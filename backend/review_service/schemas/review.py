from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, Field

from review_service.models.review import Review

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


def format_rfc3339(value: datetime) -> str:
    # SQLite hands back naive values; the engine stores UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ReviewOut(BaseModel):
    id: int
    media_id: int
    user_id: int
    content: str
    rating: int
    created_at: str
    updated_at: str

    @classmethod
    def from_record(cls, review: Review) -> "ReviewOut":
        return cls(
            id=review.id,
            media_id=review.media_id,
            user_id=review.user_id,
            content=review.content,
            rating=review.rating,
            created_at=format_rfc3339(review.created_at),
            updated_at=format_rfc3339(review.updated_at),
        )


class CreateReviewRequest(BaseModel):
    media_id: Int64
    user_id: Int64
    content: str
    rating: Int32 = 0


class UpdateReviewRequest(BaseModel):
    content: str | None = None
    rating: Int32 | None = None


class DeleteReviewResponse(BaseModel):
    success: bool


class ErrorResponse(BaseModel):
    code: str
    message: str
