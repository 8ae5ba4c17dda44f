"""HexaShop — Domain models."""
from hexashop.domain.post import Post
from hexashop.domain.product import Product, ProductStatus
from hexashop.domain.user import User

__all__ = ["Post", "Product", "ProductStatus", "User"]
