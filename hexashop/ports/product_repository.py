"""HexaShop — Product repository port."""
from abc import ABC, abstractmethod
from uuid import UUID

from pydantic import BaseModel

from hexashop.core.list_query import ListParams, ListResult
from hexashop.domain.product import Product, ProductStatus


class CreateProductCommand(BaseModel):
    name: str
    price: float
    description: str | None = None
    image: str | None = None


class UpdateProductCommand(BaseModel):
    """Only fields that were set are applied. description and image may be cleared with None."""

    name: str | None = None
    price: float | None = None
    description: str | None = None
    image: str | None = None
    status: ProductStatus | None = None


class ProductRepository(ABC):
    @abstractmethod
    async def create(self, product: CreateProductCommand) -> Product: ...

    @abstractmethod
    async def get_by_id(self, id: UUID) -> Product | None: ...

    @abstractmethod
    async def get_all(self, params: ListParams) -> ListResult[Product]: ...

    @abstractmethod
    async def update_by_id(self, id: UUID, product: UpdateProductCommand) -> Product: ...

    @abstractmethod
    async def delete_by_id(self, id: UUID) -> None: ...
