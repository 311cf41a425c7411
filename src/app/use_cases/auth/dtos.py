from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from src.domain import User


class RegisterUserRequest(BaseModel):
    """Request DTO for registering an account"""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserDTO(BaseModel):
    id: str
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(id=user.id, name=user.name, email=user.email, created_at=user.created_at)


class AuthResponse(BaseModel):
    """Authenticated user with a bearer token"""

    user: UserDTO
    token: str
