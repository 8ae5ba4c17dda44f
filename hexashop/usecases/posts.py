"""HexaShop — Post use cases."""
import logging
from uuid import UUID

from hexashop.core.exceptions import NotFoundError
from hexashop.core.list_query import ListParams, ListResult
from hexashop.domain.post import Post
from hexashop.ports.post_repository import CreatePostCommand, PostRepository, UpdatePostCommand

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    async def execute(self, post: CreatePostCommand) -> Post:
        created = await self.post_repository.create(post)
        logger.info("Post created: %s", created.uuid)
        return created


class GetPostByIdUseCase:
    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    async def execute(self, id: UUID) -> Post | None:
        return await self.post_repository.get_by_id(id)


class GetAllPostsUseCase:
    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    async def execute(self, params: ListParams) -> ListResult[Post]:
        return await self.post_repository.get_all(
            ListParams(
                search=params.search,
                sort=params.sort,
                order=params.order,
                page=params.page,
                limit=params.limit,
            )
        )


class UpdatePostByIdUseCase:
    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    async def execute(self, id: UUID, post: UpdatePostCommand) -> Post:
        existing = await self.post_repository.get_by_id(id)
        if not existing:
            logger.info("Update rejected, post %s not found", id)
            raise NotFoundError("Post not found")
        return await self.post_repository.update_by_id(id, post)


class DeletePostByIdUseCase:
    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    async def execute(self, id: UUID) -> None:
        found = await self.post_repository.get_by_id(id)
        if not found:
            logger.info("Delete rejected, post %s not found", id)
            raise NotFoundError("Post not found")
        await self.post_repository.delete_by_id(id)
