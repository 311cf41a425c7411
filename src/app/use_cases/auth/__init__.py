from src.app.use_cases.auth.register_user_use_case import RegisterUserUseCase
from src.app.use_cases.auth.login_user_use_case import LoginUserUseCase
from src.app.use_cases.auth.dtos import (
    AuthResponse,
    LoginRequest,
    RegisterUserRequest,
    UserDTO,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "AuthResponse",
    "LoginRequest",
    "RegisterUserRequest",
    "UserDTO",
]
