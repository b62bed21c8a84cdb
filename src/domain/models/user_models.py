# schemas.py
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from domain.entities.user_classes import RoleType

class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=1, max_length=150)
    password: str = Field(min_length=6, max_length=100)
    full_name: str = Field(min_length=1, max_length=150)
    role: str | None = None

class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)

class AuthResponse(BaseModel):
    user_id: int
    username: str
    email: str
    full_name: str
    role: RoleType
    token: str
    token_type: str = "bearer"
    token_expiration: datetime

class TokenPayload(BaseModel):
    sub: str
    id: int
    username: str
    email: str
    role: RoleType
    full_name: str
    exp: int | None = None

class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    full_name: str
    role: RoleType
    is_active: bool
    created_at: datetime | None = None
    last_login_at: datetime | None = None

class UserStatusUpdate(BaseModel):
    is_active: bool
