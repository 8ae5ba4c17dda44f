"""HexaShop — Repository ports implemented by the outbound adapters in hexashop.repositories."""
from hexashop.ports.post_repository import CreatePostCommand, PostRepository, UpdatePostCommand
from hexashop.ports.product_repository import CreateProductCommand, ProductRepository, UpdateProductCommand
from hexashop.ports.user_repository import UserRepository

__all__ = [
    "PostRepository", "CreatePostCommand", "UpdatePostCommand",
    "ProductRepository", "CreateProductCommand", "UpdateProductCommand",
    "UserRepository",
]
