"""HexaShop — Post domain."""
from datetime import datetime
from uuid import UUID

from hexashop.domain.base import DomainModel


class Post(DomainModel):
    uuid: UUID
    title: str
    body: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
