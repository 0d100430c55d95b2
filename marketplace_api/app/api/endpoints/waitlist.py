"""
Waitlist endpoint.

Lets visitors register interest before the marketplace launches.  An
email can only be on the waitlist once, regardless of casing.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.api.dependencies import get_storage
from marketplace_api.app.core.errors import ConflictError
from marketplace_api.app.core.storage import MemStorage
from marketplace_api.app.schemas.waitlist import WaitlistCreate, WaitlistRead


router = APIRouter()


@router.post("", response_model=WaitlistRead, status_code=status.HTTP_201_CREATED)
async def join_waitlist(
    entry: WaitlistCreate,
    storage: MemStorage = Depends(get_storage),
) -> WaitlistRead:
    """Add a person to the waitlist.

    Returns HTTP 409 if the email has already been registered.
    """
    try:
        return storage.add_to_waitlist(entry)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
