"""HexaShop — Product request schemas."""
from pydantic import Field

from hexashop.domain.product import ProductStatus
from hexashop.schemas.common import CamelModel


class ProductCreate(CamelModel):
    name: str = Field(min_length=1, examples=["Widget"])
    price: float = Field(examples=[100.75])
    image: str | None = Field(default=None, examples=["https://example.com/widget.jpg"])
    description: str | None = Field(default=None, examples=["This is a product description"])


class ProductUpdate(CamelModel):
    name: str | None = None
    price: float | None = None
    image: str | None = None
    description: str | None = None
    status: ProductStatus | None = None
