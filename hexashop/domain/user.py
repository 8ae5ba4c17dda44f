"""HexaShop — User domain with password behaviour."""
from datetime import datetime
from uuid import UUID

from hexashop.core.security import get_password_hash, verify_password
from hexashop.domain.base import DomainModel


class User(DomainModel):
    id: UUID | None = None
    username: str
    email: str
    password: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def set_hash_password(self, raw_password: str) -> None:
        self.password = get_password_hash(raw_password)

    def compare_password(self, raw_password: str) -> bool:
        if not self.password:
            return False
        return verify_password(raw_password, self.password)

    def hidden_password(self) -> None:
        """Blank the hash before the user leaves the application layer."""
        self.password = ""
