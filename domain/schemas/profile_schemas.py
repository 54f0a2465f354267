from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID


class ProfileUpdateRequest(BaseModel):
    full_name: str = Field(..., max_length=200)
    bio: Optional[str] = Field(default=None, max_length=2000)
    avatar_url: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("full_name must not be blank")
        return v


class ProfileResponse(BaseModel):
    id: UUID
    full_name: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AuthorSummary(BaseModel):
    """Author fields embedded in recipe and review payloads"""

    id: Optional[UUID] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

    model_config = {"from_attributes": True}
