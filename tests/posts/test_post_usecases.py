"""Unit tests for the post use cases against a mocked repository."""
# ruff: noqa: S101

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from hexashop.core.exceptions import NotFoundError
from hexashop.core.list_query import ListMeta, ListParams, ListResult
from hexashop.domain.post import Post
from hexashop.ports.post_repository import CreatePostCommand, PostRepository, UpdatePostCommand
from hexashop.usecases.posts import (
    CreatePostUseCase,
    DeletePostByIdUseCase,
    GetAllPostsUseCase,
    GetPostByIdUseCase,
    UpdatePostByIdUseCase,
)


@pytest.fixture
def repository() -> AsyncMock:
    return AsyncMock(spec=PostRepository)


def _post(**overrides) -> Post:
    return Post(uuid=overrides.pop("uuid", uuid4()), title="Title", body="Body", **overrides)


async def test_get_all_forwards_every_param(repository: AsyncMock) -> None:
    expected = ListResult[Post](result=[_post()], meta=ListMeta(page=2, limit=5, total=6))
    repository.get_all.return_value = expected
    params = ListParams(search="foo", sort="title", order="ASC", page=2, limit=5)

    result = await GetAllPostsUseCase(repository).execute(params)

    assert result is expected
    repository.get_all.assert_awaited_once_with(params)


async def test_get_all_with_no_params(repository: AsyncMock) -> None:
    empty = ListResult[Post](result=[], meta=ListMeta(page=1, limit=10, total=0))
    repository.get_all.return_value = empty

    result = await GetAllPostsUseCase(repository).execute(ListParams())

    assert result.result == []
    repository.get_all.assert_awaited_once_with(ListParams())


async def test_get_all_propagates_repository_errors(repository: AsyncMock) -> None:
    repository.get_all.side_effect = RuntimeError("Database error")

    with pytest.raises(RuntimeError, match="Database error"):
        await GetAllPostsUseCase(repository).execute(ListParams())


async def test_create(repository: AsyncMock) -> None:
    created = _post()
    repository.create.return_value = created
    command = CreatePostCommand(title="Title", body="Body")

    assert await CreatePostUseCase(repository).execute(command) is created
    repository.create.assert_awaited_once_with(command)


async def test_get_by_id_missing(repository: AsyncMock) -> None:
    repository.get_by_id.return_value = None

    assert await GetPostByIdUseCase(repository).execute(uuid4()) is None


async def test_update_missing_post(repository: AsyncMock) -> None:
    repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError, match="Post not found"):
        await UpdatePostByIdUseCase(repository).execute(uuid4(), UpdatePostCommand(title="x"))
    repository.update_by_id.assert_not_awaited()


async def test_update_existing_post(repository: AsyncMock) -> None:
    post_id = uuid4()
    repository.get_by_id.return_value = _post(uuid=post_id)
    repository.update_by_id.return_value = _post(uuid=post_id)
    changes = UpdatePostCommand(body="new body")

    await UpdatePostByIdUseCase(repository).execute(post_id, changes)

    repository.update_by_id.assert_awaited_once_with(post_id, changes)


async def test_delete_missing_post(repository: AsyncMock) -> None:
    repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        await DeletePostByIdUseCase(repository).execute(uuid4())
    repository.delete_by_id.assert_not_awaited()


async def test_delete_existing_post(repository: AsyncMock) -> None:
    post_id = uuid4()
    repository.get_by_id.return_value = _post(uuid=post_id)

    await DeletePostByIdUseCase(repository).execute(post_id)

    repository.delete_by_id.assert_awaited_once_with(post_id)
