"""
Review endpoints.

Customers rate a business after a booking; anyone can list the
reviews of a business.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from marketplace_api.app.api.dependencies import get_storage
from marketplace_api.app.core.storage import MemStorage
from marketplace_api.app.schemas.review import ReviewCreate, ReviewRead


router = APIRouter()


@router.post(
    "/reviews",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
)
async def create_review(
    data: ReviewCreate,
    storage: MemStorage = Depends(get_storage),
) -> ReviewRead:
    return storage.create_review(data)


@router.get(
    "/businesses/{business_id}/reviews",
    response_model=List[ReviewRead],
    summary="List reviews of a business",
)
async def list_business_reviews(
    business_id: int = Path(..., description="ID of the business"),
    storage: MemStorage = Depends(get_storage),
) -> List[ReviewRead]:
    return storage.get_business_reviews(business_id)
