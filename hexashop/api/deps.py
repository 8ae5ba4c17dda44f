"""HexaShop — FastAPI dependencies (DB session, auth, repositories, use cases)."""
from collections.abc import Callable
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from hexashop.db.session import get_db
from hexashop.ports.post_repository import PostRepository
from hexashop.ports.product_repository import ProductRepository
from hexashop.ports.user_repository import UserRepository
from hexashop.repositories.post_repository import SqlAlchemyPostRepository
from hexashop.repositories.product_repository import SqlAlchemyProductRepository
from hexashop.repositories.user_repository import SqlAlchemyUserRepository

DbSession = Annotated[AsyncSession, Depends(get_db)]


class CurrentUser:
    """User identity from the JWT, set on request.state by the auth middleware."""

    def __init__(self, id: UUID, username: str):
        self.id = id
        self.username = username


async def require_auth(request: Request) -> CurrentUser:
    """Require authenticated user. Raise 401 if not logged in."""
    user = getattr(request.state, "user", None)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


# ── Outbound adapters ────────────────────────────────────────────────────────

def get_post_repository(db: DbSession) -> PostRepository:
    return SqlAlchemyPostRepository(db)


def get_product_repository(db: DbSession) -> ProductRepository:
    return SqlAlchemyProductRepository(db)


def get_user_repository(db: DbSession) -> UserRepository:
    return SqlAlchemyUserRepository(db)


def use_case(factory: Callable[[Any], Any], repository_provider: Callable[..., Any]):
    """Dependency factory: build a use case around the repository the provider yields."""

    def _build(repository: Any = Depends(repository_provider)):
        return factory(repository)

    return _build
