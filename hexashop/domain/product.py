"""HexaShop — Product domain."""
from datetime import datetime
from enum import Enum
from uuid import UUID

from hexashop.domain.base import DomainModel


class ProductStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Product(DomainModel):
    uuid: UUID
    name: str
    price: float
    description: str | None = None
    image: str | None = None
    status: ProductStatus = ProductStatus.ACTIVE
    created_at: datetime | None = None
    updated_at: datetime | None = None
