"""HexaShop — User use cases."""
import logging

from pydantic import BaseModel

from hexashop.core.exceptions import ConflictError
from hexashop.domain.user import User
from hexashop.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CreateUserCommand(BaseModel):
    username: str
    email: str
    password: str


class GetUserByUsernameQuery(BaseModel):
    username: str


class CreateUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, command: CreateUserCommand) -> User:
        if await self.user_repository.get_by_username(command.username):
            raise ConflictError("Username already exists")

        user = User(username=command.username, email=command.email)
        user.set_hash_password(command.password)

        created = await self.user_repository.create(user)
        created.hidden_password()
        logger.info("User created: %s", created.username)
        return created


class GetUserByUsernameUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, query: GetUserByUsernameQuery) -> User | None:
        user = await self.user_repository.get_by_username(query.username)
        if not user:
            return None
        user.hidden_password()
        return user
