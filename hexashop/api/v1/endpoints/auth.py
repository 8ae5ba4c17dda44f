"""
HexaShop — Auth endpoints
POST /auth/login
"""
from fastapi import APIRouter, Depends, Response

from hexashop.api.deps import get_user_repository, use_case
from hexashop.config import get_settings
from hexashop.core.auth_middleware import ACCESS_TOKEN_COOKIE
from hexashop.schemas.auth import LoginRequest, TokenResponse
from hexashop.usecases.auth import LoginCommand, LoginUseCase

router = APIRouter()
settings = get_settings()

ACCESS_TOKEN_COOKIE_MAX_AGE = 24 * 3600


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    response: Response,
    usecase: LoginUseCase = Depends(use_case(LoginUseCase, get_user_repository)),
) -> TokenResponse:
    """Authenticate with username/password. Returns the access token and also sets it in an httpOnly cookie."""
    access_token = await usecase.execute(LoginCommand(username=body.username, password=body.password))

    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=access_token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        max_age=ACCESS_TOKEN_COOKIE_MAX_AGE,
    )
    return TokenResponse(access_token=access_token)
