"""HexaShop — SQLAlchemy models."""
from hexashop.models.post import PostEntity
from hexashop.models.product import ProductEntity
from hexashop.models.user import UserEntity

__all__ = [
    "PostEntity",
    "ProductEntity",
    "UserEntity",
]
