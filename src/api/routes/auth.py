from fastapi import APIRouter, Depends, status
from src.api.error import raise_for_error
from src.api.schemas.response import ApiResponse
from src.app.services.security import PasswordHasher, TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_password_hasher, get_token_issuer, get_unit_of_work
from src.app.use_cases.auth import (
    AuthResponse,
    LoginRequest,
    LoginUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)

router = APIRouter()


@router.post(
    "/auth/register", response_model=ApiResponse[AuthResponse], status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    """Create an account and return a bearer token"""
    result = await RegisterUserUseCase(uow, hasher, tokens).execute(request)

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.post("/auth/login", response_model=ApiResponse[AuthResponse], status_code=status.HTTP_200_OK)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
):
    result = await LoginUserUseCase(uow, hasher, tokens).execute(request)

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)
