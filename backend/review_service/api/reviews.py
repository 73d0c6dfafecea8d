from typing import Annotated

from fastapi import APIRouter, Depends, Path

from review_service.api.dependencies import get_call_context, get_review_service
from review_service.core.context import CallContext
from review_service.schemas.review import (
    CreateReviewRequest,
    DeleteReviewResponse,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    ReviewOut,
    UpdateReviewRequest,
)
from review_service.services.reviews import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])

IdParam = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]
RatingParam = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


@router.post("", status_code=201, response_model=ReviewOut)
def create_review(
    payload: CreateReviewRequest,
    ctx: CallContext = Depends(get_call_context),
    service: ReviewService = Depends(get_review_service),
):
    return service.create(
        ctx,
        media_id=payload.media_id,
        user_id=payload.user_id,
        content=payload.content,
        rating=payload.rating,
    )


@router.get("", response_model=list[ReviewOut])
def list_reviews(
    ctx: CallContext = Depends(get_call_context),
    service: ReviewService = Depends(get_review_service),
):
    return service.list_all(ctx)


@router.get("/by-rating/{rating}", response_model=list[ReviewOut])
def list_reviews_by_rating(
    rating: RatingParam,
    ctx: CallContext = Depends(get_call_context),
    service: ReviewService = Depends(get_review_service),
):
    return service.list_by_rating(ctx, rating)


@router.get("/by-user/{user_id}", response_model=list[ReviewOut])
def list_reviews_by_user(
    user_id: IdParam,
    ctx: CallContext = Depends(get_call_context),
    service: ReviewService = Depends(get_review_service),
):
    return service.list_by_user(ctx, user_id)


@router.get("/by-media/{media_id}", response_model=list[ReviewOut])
def list_reviews_by_media(
    media_id: IdParam,
    ctx: CallContext = Depends(get_call_context),
    service: ReviewService = Depends(get_review_service),
):
    return service.list_by_media(ctx, media_id)


@router.get("/{review_id}", response_model=ReviewOut)
def get_review(
    review_id: IdParam,
    ctx: CallContext = Depends(get_call_context),
    service: ReviewService = Depends(get_review_service),
):
    return service.get_by_id(ctx, review_id)


@router.patch("/{review_id}", response_model=ReviewOut)
def update_review(
    review_id: IdParam,
    payload: UpdateReviewRequest,
    ctx: CallContext = Depends(get_call_context),
    service: ReviewService = Depends(get_review_service),
):
    return service.update(ctx, review_id, content=payload.content, rating=payload.rating)


@router.delete("/{review_id}", response_model=DeleteReviewResponse)
def delete_review(
    review_id: IdParam,
    ctx: CallContext = Depends(get_call_context),
    service: ReviewService = Depends(get_review_service),
):
    return DeleteReviewResponse(success=service.delete(ctx, review_id))
