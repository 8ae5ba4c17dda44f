"""HexaShop — SQLAlchemy outbound adapters for the repository ports."""
from hexashop.repositories.post_repository import SqlAlchemyPostRepository
from hexashop.repositories.product_repository import SqlAlchemyProductRepository
from hexashop.repositories.user_repository import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyPostRepository", "SqlAlchemyProductRepository", "SqlAlchemyUserRepository"]
