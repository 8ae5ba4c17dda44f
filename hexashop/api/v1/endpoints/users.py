"""HexaShop — Users endpoints. POST /users, GET /users?username=."""
from fastapi import APIRouter, Depends, Query, status

from hexashop.api.deps import get_user_repository, use_case
from hexashop.core.exceptions import NotFoundError
from hexashop.schemas.user import UserCreate, UserResponse
from hexashop.usecases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    GetUserByUsernameQuery,
    GetUserByUsernameUseCase,
)

router = APIRouter()


def _to_response(user) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate,
    usecase: CreateUserUseCase = Depends(use_case(CreateUserUseCase, get_user_repository)),
) -> UserResponse:
    """Register a user. The password is stored as a bcrypt hash and never returned."""
    user = await usecase.execute(
        CreateUserCommand(username=body.username, email=body.email, password=body.password)
    )
    return _to_response(user)


@router.get("", response_model=UserResponse)
async def get_user_by_username(
    username: str = Query(..., min_length=1),
    usecase: GetUserByUsernameUseCase = Depends(use_case(GetUserByUsernameUseCase, get_user_repository)),
) -> UserResponse:
    user = await usecase.execute(GetUserByUsernameQuery(username=username))
    if not user:
        raise NotFoundError("User not found")
    return _to_response(user)
