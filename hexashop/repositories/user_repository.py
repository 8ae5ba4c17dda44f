"""HexaShop — UserRepository backed by SQLAlchemy."""
import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hexashop.core.exceptions import ConflictError
from hexashop.domain.user import User
from hexashop.models.user import UserEntity
from hexashop.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user: User) -> User:
        entity = UserEntity(
            uuid=uuid.uuid4(),
            username=user.username,
            email=user.email,
            password=user.password,
        )
        self.db.add(entity)
        try:
            await self.db.flush()
        except IntegrityError as exc:
            # unique index on username
            logger.info("Username %r taken at insert", user.username)
            raise ConflictError("Username already exists") from exc
        await self.db.refresh(entity)
        return self.to_domain(entity)

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(UserEntity).where(UserEntity.username == username))
        entity = result.scalar_one_or_none()
        return self.to_domain(entity) if entity else None

    @staticmethod
    def to_domain(entity: UserEntity) -> User:
        return User(
            id=entity.uuid,
            username=entity.username,
            email=entity.email,
            password=entity.password,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
