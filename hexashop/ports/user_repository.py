"""HexaShop — User repository port."""
from abc import ABC, abstractmethod

from hexashop.domain.user import User


class UserRepository(ABC):
    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a user whose password is already hashed."""

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None: ...
