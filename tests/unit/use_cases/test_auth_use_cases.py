"""
Unit tests for registration and login
"""
import pytest
from unittest.mock import AsyncMock, MagicMock
from libs.result import ErrorCode
from src.app.use_cases.auth import (
    LoginRequest,
    LoginUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)


@pytest.fixture
def hasher():
    hasher = MagicMock()
    hasher.hash = MagicMock(side_effect=lambda password: f"hashed:{password}")
    hasher.verify = MagicMock(side_effect=lambda password, hashed: hashed == f"hashed:{password}")
    return hasher


@pytest.fixture
def tokens():
    tokens = MagicMock()
    tokens.issue = MagicMock(return_value="signed-token")
    return tokens


async def test_register_creates_user_and_issues_token(mock_uow, hasher, tokens):
    mock_uow.users.get_by_email = AsyncMock(return_value=None)
    mock_uow.users.create = AsyncMock(side_effect=lambda user: user)
    request = RegisterUserRequest(name="Grace", email="Grace@Example.com", password="s3cret!")

    result = await RegisterUserUseCase(mock_uow, hasher, tokens).execute(request)

    assert result.is_ok()
    assert result.value.token == "signed-token"
    assert result.value.user.email == "grace@example.com"
    created = mock_uow.users.create.call_args.args[0]
    assert created.password_hash == "hashed:s3cret!"
    mock_uow.commit.assert_called_once()


async def test_register_duplicate_email(mock_uow, hasher, tokens, owner):
    mock_uow.users.get_by_email = AsyncMock(return_value=owner)
    mock_uow.users.create = AsyncMock()

    result = await RegisterUserUseCase(mock_uow, hasher, tokens).execute(
        RegisterUserRequest(name="Ada", email="ada@example.com", password="another")
    )

    assert result.error.code == ErrorCode.CONFLICT
    mock_uow.users.create.assert_not_called()


async def test_login_with_valid_credentials(mock_uow, hasher, tokens, owner):
    owner.password_hash = "hashed:correct-horse"
    mock_uow.users.get_by_email = AsyncMock(return_value=owner)

    result = await LoginUserUseCase(mock_uow, hasher, tokens).execute(
        LoginRequest(email="ADA@example.com", password="correct-horse")
    )

    assert result.value.user.id == "user-1"
    mock_uow.users.get_by_email.assert_called_once_with("ada@example.com")
    tokens.issue.assert_called_once_with("user-1", "ada@example.com")


@pytest.mark.parametrize("user_exists", [True, False])
async def test_login_failures_share_one_error(mock_uow, hasher, tokens, owner, user_exists):
    owner.password_hash = "hashed:correct-horse"
    mock_uow.users.get_by_email = AsyncMock(return_value=owner if user_exists else None)

    result = await LoginUserUseCase(mock_uow, hasher, tokens).execute(
        LoginRequest(email="ada@example.com", password="wrong")
    )

    assert result.error.code == ErrorCode.AUTHENTICATION_ERROR
    assert result.error.message == "Invalid email or password"
    tokens.issue.assert_not_called()
