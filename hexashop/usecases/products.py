"""HexaShop — Product use cases."""
import logging
from uuid import UUID

from hexashop.core.exceptions import NotFoundError
from hexashop.core.list_query import ListParams, ListResult
from hexashop.domain.product import Product
from hexashop.ports.product_repository import CreateProductCommand, ProductRepository, UpdateProductCommand

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, product: CreateProductCommand) -> Product:
        created = await self.product_repository.create(product)
        logger.info("Product created: %s", created.uuid)
        return created


class GetProductByIdUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, id: UUID) -> Product | None:
        return await self.product_repository.get_by_id(id)


class GetAllProductsUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, params: ListParams) -> ListResult[Product]:
        return await self.product_repository.get_all(
            ListParams(
                search=params.search,
                sort=params.sort,
                order=params.order,
                page=params.page,
                limit=params.limit,
            )
        )


class UpdateProductByIdUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, id: UUID, product: UpdateProductCommand) -> Product:
        existing = await self.product_repository.get_by_id(id)
        if not existing:
            logger.info("Update rejected, product %s not found", id)
            raise NotFoundError("Product not found")
        return await self.product_repository.update_by_id(id, product)


class DeleteProductByIdUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, id: UUID) -> None:
        found = await self.product_repository.get_by_id(id)
        if not found:
            logger.info("Delete rejected, product %s not found", id)
            raise NotFoundError("Product not found")
        await self.product_repository.delete_by_id(id)
