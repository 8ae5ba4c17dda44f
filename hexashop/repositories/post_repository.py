"""HexaShop — PostRepository backed by SQLAlchemy."""
import logging
import uuid
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from hexashop.core.exceptions import NotFoundError
from hexashop.core.list_query import (
    ListParams,
    ListQueryConfig,
    ListResult,
    SqlAlchemyQueryStore,
    execute_list_query,
)
from hexashop.domain.post import Post
from hexashop.models.post import PostEntity
from hexashop.ports.post_repository import CreatePostCommand, PostRepository, UpdatePostCommand

logger = logging.getLogger(__name__)

POST_LIST_CONFIG = ListQueryConfig(
    searchable_fields=frozenset({"title", "body"}),
    sortable_fields=frozenset({"title", "body", "createdAt"}),
)
POST_COLUMNS = {"createdAt": "created_at", "updatedAt": "updated_at"}


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, post: CreatePostCommand) -> Post:
        entity = PostEntity(uuid=uuid.uuid4(), title=post.title, body=post.body)
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return self.to_domain(entity)

    async def get_by_id(self, id: UUID) -> Post | None:
        entity = await self._get_entity(id)
        return self.to_domain(entity) if entity else None

    async def get_all(self, params: ListParams) -> ListResult[Post]:
        store = SqlAlchemyQueryStore(self.db, PostEntity, columns=POST_COLUMNS)
        return await execute_list_query(store, params, POST_LIST_CONFIG, mapper=self.to_domain)

    async def update_by_id(self, id: UUID, post: UpdatePostCommand) -> Post:
        entity = await self._get_entity(id)
        if entity is None:
            raise NotFoundError("Post not found")
        # title and body are required, an explicit null leaves them as they are
        for field, value in post.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(entity, field, value)
        await self.db.flush()
        await self.db.refresh(entity)
        return self.to_domain(entity)

    async def delete_by_id(self, id: UUID) -> None:
        await self.db.execute(delete(PostEntity).where(PostEntity.uuid == id))
        logger.debug("Post deleted: %s", id)

    async def _get_entity(self, id: UUID) -> PostEntity | None:
        result = await self.db.execute(select(PostEntity).where(PostEntity.uuid == id))
        return result.scalar_one_or_none()

    @staticmethod
    def to_domain(entity: PostEntity) -> Post:
        return Post(
            uuid=entity.uuid,
            title=entity.title,
            body=entity.body,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
