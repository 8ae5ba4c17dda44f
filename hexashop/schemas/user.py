"""HexaShop — User schemas."""
from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from hexashop.schemas.common import CamelModel


class UserCreate(CamelModel):
    username: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class UserResponse(CamelModel):
    id: UUID
    username: str
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
