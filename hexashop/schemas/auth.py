"""HexaShop — Auth schemas."""
from hexashop.schemas.common import CamelModel


class LoginRequest(CamelModel):
    username: str
    password: str


class TokenResponse(CamelModel):
    access_token: str
