from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from .user_schemas import UserRead


class Token(BaseModel):
    access_token: str
    token_type: str


class LoginResponse(Token):
    message: str
    # Same value as access_token, under the key the web client reads
    token: str
    user: UserRead


class TokenData(BaseModel):
    # Identity carried by the token itself; no session store is consulted
    id: int
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6)
    phone: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
