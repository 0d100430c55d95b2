"""
Business (provider profile) endpoints.

Providers create profiles; anyone may list them, optionally filtered
by category, or fetch a single profile.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from marketplace_api.app.api.dependencies import get_storage
from marketplace_api.app.core.storage import MemStorage
from marketplace_api.app.schemas.business import BusinessCreate, BusinessRead


router = APIRouter()


@router.post("", response_model=BusinessRead, status_code=status.HTTP_201_CREATED)
async def create_business(
    business: BusinessCreate,
    storage: MemStorage = Depends(get_storage),
) -> BusinessRead:
    return storage.create_business(business)


@router.get("", response_model=List[BusinessRead])
async def list_businesses(
    category: Optional[str] = Query(None, description="Only return businesses in this category (case‑insensitive)"),
    storage: MemStorage = Depends(get_storage),
) -> List[BusinessRead]:
    """List businesses, optionally restricted to one category."""
    return storage.list_businesses(category)


@router.get("/{business_id}", response_model=BusinessRead)
async def get_business(
    business_id: int = Path(..., description="ID of the business"),
    storage: MemStorage = Depends(get_storage),
) -> BusinessRead:
    business = storage.get_business_by_id(business_id)
    if business is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Business not found")
    return business
