"""HexaShop — ProductRepository backed by SQLAlchemy."""
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
from hexashop.domain.product import Product
from hexashop.models.product import ProductEntity
from hexashop.ports.product_repository import CreateProductCommand, ProductRepository, UpdateProductCommand

logger = logging.getLogger(__name__)

PRODUCT_LIST_CONFIG = ListQueryConfig(
    searchable_fields=frozenset({"name"}),
    sortable_fields=frozenset({"name", "price", "createdAt"}),
)
PRODUCT_COLUMNS = {"createdAt": "created_at", "updatedAt": "updated_at"}
PRODUCT_NULLABLE_FIELDS = frozenset({"description", "image"})


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, product: CreateProductCommand) -> Product:
        entity = ProductEntity(
            uuid=uuid.uuid4(),
            name=product.name,
            price=product.price,
            description=product.description,
            image=product.image,
        )
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return self.to_domain(entity)

    async def get_by_id(self, id: UUID) -> Product | None:
        entity = await self._get_entity(id)
        return self.to_domain(entity) if entity else None

    async def get_all(self, params: ListParams) -> ListResult[Product]:
        store = SqlAlchemyQueryStore(self.db, ProductEntity, columns=PRODUCT_COLUMNS)
        return await execute_list_query(store, params, PRODUCT_LIST_CONFIG, mapper=self.to_domain)

    async def update_by_id(self, id: UUID, product: UpdateProductCommand) -> Product:
        entity = await self._get_entity(id)
        if entity is None:
            raise NotFoundError("Product not found")
        changes = product.model_dump(exclude_unset=True, mode="json")
        for field, value in changes.items():
            if value is None and field not in PRODUCT_NULLABLE_FIELDS:
                continue
            setattr(entity, field, value)
        await self.db.flush()
        await self.db.refresh(entity)
        return self.to_domain(entity)

    async def delete_by_id(self, id: UUID) -> None:
        await self.db.execute(delete(ProductEntity).where(ProductEntity.uuid == id))
        logger.debug("Product deleted: %s", id)

    async def _get_entity(self, id: UUID) -> ProductEntity | None:
        result = await self.db.execute(select(ProductEntity).where(ProductEntity.uuid == id))
        return result.scalar_one_or_none()

    @staticmethod
    def to_domain(entity: ProductEntity) -> Product:
        return Product(
            uuid=entity.uuid,
            name=entity.name,
            price=entity.price,
            description=entity.description,
            image=entity.image,
            status=entity.status,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
