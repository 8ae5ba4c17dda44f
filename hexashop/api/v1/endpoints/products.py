"""HexaShop — Product endpoints. GET /products, POST, GET/{id}, PUT, DELETE."""
from uuid import UUID

from fastapi import APIRouter, Depends, status

from hexashop.api.deps import get_product_repository, use_case
from hexashop.core.exceptions import NotFoundError
from hexashop.core.list_query import ListParams, ListResult
from hexashop.domain.product import Product
from hexashop.ports.product_repository import CreateProductCommand, UpdateProductCommand
from hexashop.schemas.product import ProductCreate, ProductUpdate
from hexashop.usecases.products import (
    CreateProductUseCase,
    DeleteProductByIdUseCase,
    GetAllProductsUseCase,
    GetProductByIdUseCase,
    UpdateProductByIdUseCase,
)

router = APIRouter()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED, summary="Create a product")
async def create_product(
    body: ProductCreate,
    usecase: CreateProductUseCase = Depends(use_case(CreateProductUseCase, get_product_repository)),
) -> Product:
    command = CreateProductCommand(
        name=body.name,
        price=body.price,
        image=body.image,
        description=body.description,
    )
    return await usecase.execute(command)


@router.get("", response_model=ListResult[Product], summary="Get all products")
async def list_products(
    search: str | None = None,
    sort: str | None = None,
    order: str | None = None,
    page: int | None = None,
    limit: int | None = None,
    usecase: GetAllProductsUseCase = Depends(use_case(GetAllProductsUseCase, get_product_repository)),
):
    """List products. Search matches name; sort accepts name, price or createdAt; limit=-1 returns all."""
    return await usecase.execute(ListParams(search=search, sort=sort, order=order, page=page, limit=limit))


@router.get("/{id}", response_model=Product, summary="Get a product by id")
async def get_product(
    id: UUID,
    usecase: GetProductByIdUseCase = Depends(use_case(GetProductByIdUseCase, get_product_repository)),
) -> Product:
    product = await usecase.execute(id)
    if not product:
        raise NotFoundError("Product not found")
    return product


@router.put("/{id}", response_model=Product, summary="Update a product")
async def update_product(
    id: UUID,
    body: ProductUpdate,
    usecase: UpdateProductByIdUseCase = Depends(use_case(UpdateProductByIdUseCase, get_product_repository)),
) -> Product:
    return await usecase.execute(id, UpdateProductCommand(**body.model_dump(exclude_unset=True)))


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a product")
async def delete_product(
    id: UUID,
    usecase: DeleteProductByIdUseCase = Depends(use_case(DeleteProductByIdUseCase, get_product_repository)),
) -> None:
    await usecase.execute(id)
