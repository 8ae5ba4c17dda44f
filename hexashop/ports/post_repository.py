"""HexaShop — Post repository port."""
from abc import ABC, abstractmethod
from uuid import UUID

from pydantic import BaseModel

from hexashop.core.list_query import ListParams, ListResult
from hexashop.domain.post import Post


class CreatePostCommand(BaseModel):
    title: str
    body: str


class UpdatePostCommand(BaseModel):
    """Only fields that were set are applied."""

    title: str | None = None
    body: str | None = None


class PostRepository(ABC):
    @abstractmethod
    async def create(self, post: CreatePostCommand) -> Post: ...

    @abstractmethod
    async def get_by_id(self, id: UUID) -> Post | None: ...

    @abstractmethod
    async def get_all(self, params: ListParams) -> ListResult[Post]: ...

    @abstractmethod
    async def update_by_id(self, id: UUID, post: UpdatePostCommand) -> Post: ...

    @abstractmethod
    async def delete_by_id(self, id: UUID) -> None: ...
