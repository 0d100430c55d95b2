"""
Login endpoint.

Checks an email/password pair against the registered users and
returns the public user record.  No session or token is issued;
identity tokens come from the external identity provider, which is
not part of this service.
"""

import hmac
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.api.dependencies import get_storage
from marketplace_api.app.core.storage import MemStorage
from marketplace_api.app.schemas.user import LoginResponse, UserLogin, UserRead


router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
async def login_user(
    credentials: UserLogin,
    storage: MemStorage = Depends(get_storage),
) -> LoginResponse:
    """Authenticate a user by email (case‑insensitive) and password."""
    user = storage.get_user_by_email(credentials.email)
    if user is None or not hmac.compare_digest(
        user.password.encode("utf-8"), credentials.password.encode("utf-8")
    ):
        logger.info("Failed login attempt for %s", credentials.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return LoginResponse(success=True, user=UserRead.model_validate(user))
