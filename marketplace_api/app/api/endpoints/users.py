"""
User endpoints.

Registration of customers and providers plus read access to a user's
profile, businesses and bookings.  Passwords are stored as given and
never returned: every response goes through ``UserRead``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from marketplace_api.app.api.dependencies import get_storage
from marketplace_api.app.core.errors import ConflictError
from marketplace_api.app.core.storage import MemStorage
from marketplace_api.app.schemas.business import BusinessRead
from marketplace_api.app.schemas.user import UserCreate, UserRead


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(
    user: UserCreate,
    storage: MemStorage = Depends(get_storage),
) -> UserRead:
    """Register a new user.

    Email and username must both be unused (case‑insensitive);
    otherwise HTTP 409 is returned with a message naming the clash.
    """
    try:
        return storage.create_user(user)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: int = Path(..., description="ID of the user"),
    storage: MemStorage = Depends(get_storage),
) -> UserRead:
    user = storage.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/{user_id}/businesses", response_model=List[BusinessRead])
async def list_user_businesses(
    user_id: int = Path(..., description="ID of the owning provider"),
    storage: MemStorage = Depends(get_storage),
) -> List[BusinessRead]:
    """List the business profiles owned by a user."""
    return storage.get_businesses_by_user_id(user_id)
