"""HexaShop — Post request schemas."""
from pydantic import Field

from hexashop.schemas.common import CamelModel


class PostCreate(CamelModel):
    title: str = Field(min_length=1, examples=["My First Blog Post"])
    body: str = Field(min_length=1, examples=["This is the content of my first blog post."])


class PostUpdate(CamelModel):
    title: str | None = None
    body: str | None = None
