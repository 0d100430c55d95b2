"""
Pydantic models for business (provider profile) data.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .user import EMAIL_PATTERN


class BusinessBase(BaseModel):
    user_id: int = Field(..., description="Identifier of the owning provider")
    name: str = Field(..., min_length=1, examples=["Foo Photos"])
    description: str
    category: str = Field(..., min_length=1, examples=["Photography"])
    location: str
    contact_email: str = Field(..., pattern=EMAIL_PATTERN)
    contact_phone: Optional[str] = None
    # Ordered list of image URLs or other portfolio references.
    portfolio: Optional[List[str]] = None
    pricing: Optional[str] = Field(None, description="Free‑text description of prices or packages")
    rating: Optional[int] = Field(None, ge=1, le=5)


class BusinessCreate(BusinessBase):
    """Schema for creating a business profile."""
    pass


class BusinessRead(BusinessBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
