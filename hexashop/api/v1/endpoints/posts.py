"""HexaShop — Post endpoints. GET /posts, POST, GET/{id}, PUT, DELETE. Bearer token required."""
from uuid import UUID

from fastapi import APIRouter, Depends, status

from hexashop.api.deps import get_post_repository, require_auth, use_case
from hexashop.core.exceptions import NotFoundError
from hexashop.core.list_query import ListParams, ListResult
from hexashop.domain.post import Post
from hexashop.ports.post_repository import CreatePostCommand, UpdatePostCommand
from hexashop.schemas.post import PostCreate, PostUpdate
from hexashop.usecases.posts import (
    CreatePostUseCase,
    DeletePostByIdUseCase,
    GetAllPostsUseCase,
    GetPostByIdUseCase,
    UpdatePostByIdUseCase,
)

router = APIRouter(dependencies=[Depends(require_auth)])


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED, summary="Create a post")
async def create_post(
    body: PostCreate,
    usecase: CreatePostUseCase = Depends(use_case(CreatePostUseCase, get_post_repository)),
) -> Post:
    return await usecase.execute(CreatePostCommand(title=body.title, body=body.body))


@router.get("", response_model=ListResult[Post], summary="Get all posts")
async def list_posts(
    search: str | None = None,
    sort: str | None = None,
    order: str | None = None,
    page: int | None = None,
    limit: int | None = None,
    usecase: GetAllPostsUseCase = Depends(use_case(GetAllPostsUseCase, get_post_repository)),
):
    """List posts. Search matches title or body; sort accepts title, body or createdAt; limit=-1 returns all."""
    return await usecase.execute(ListParams(search=search, sort=sort, order=order, page=page, limit=limit))


@router.get("/{id}", response_model=Post, summary="Get a post by id")
async def get_post(
    id: UUID,
    usecase: GetPostByIdUseCase = Depends(use_case(GetPostByIdUseCase, get_post_repository)),
) -> Post:
    post = await usecase.execute(id)
    if not post:
        raise NotFoundError("Post not found")
    return post


@router.put("/{id}", response_model=Post, summary="Update a post")
async def update_post(
    id: UUID,
    body: PostUpdate,
    usecase: UpdatePostByIdUseCase = Depends(use_case(UpdatePostByIdUseCase, get_post_repository)),
) -> Post:
    return await usecase.execute(id, UpdatePostCommand(**body.model_dump(exclude_unset=True)))


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a post")
async def delete_post(
    id: UUID,
    usecase: DeletePostByIdUseCase = Depends(use_case(DeletePostByIdUseCase, get_post_repository)),
) -> None:
    await usecase.execute(id)
