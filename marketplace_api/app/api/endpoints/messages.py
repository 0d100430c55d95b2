"""
Message endpoints.

Users send each other messages, optionally tied to a booking, and read
back the conversation with another user in chronological order.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from marketplace_api.app.api.dependencies import get_storage
from marketplace_api.app.core.storage import MemStorage
from marketplace_api.app.schemas.message import MessageCreate, MessageRead


router = APIRouter()


@router.post("", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def send_message(
    message: MessageCreate,
    storage: MemStorage = Depends(get_storage),
) -> MessageRead:
    return storage.create_message(message)


@router.get("/{user_id}/{other_user_id}", response_model=List[MessageRead])
async def get_conversation(
    user_id: int = Path(..., description="ID of one participant"),
    other_user_id: int = Path(..., description="ID of the other participant"),
    storage: MemStorage = Depends(get_storage),
) -> List[MessageRead]:
    """Return all messages between two users, oldest first."""
    return storage.get_conversation(user_id, other_user_id)
