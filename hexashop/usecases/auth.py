"""HexaShop — Login use case: verify credentials, sign an access token."""
import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from hexashop.core.exceptions import UnauthorizedError
from hexashop.core.security import create_access_token
from hexashop.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password."


class LoginCommand(BaseModel):
    username: str
    password: str


class LoginUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        sign_token: Callable[..., str] = create_access_token,
    ):
        self.user_repository = user_repository
        self.sign_token = sign_token

    async def execute(self, command: LoginCommand) -> str:
        user = await self.user_repository.get_by_username(command.username)
        if not user:
            logger.warning("Login failed, unknown username %r", command.username)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not user.compare_password(command.password):
            logger.warning("Login failed, wrong password for %r", command.username)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        claims: dict[str, Any] = {"username": user.username}
        return self.sign_token(str(user.id), claims)
