from libs.result import Result, Error, ErrorCode, Return
from src.app.services.security import PasswordHasher, TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuthResponse, LoginRequest, UserDTO


class LoginUserUseCase:
    """Use case for exchanging credentials for a bearer token"""

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenIssuer):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, request: LoginRequest) -> Result[AuthResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(request.email.lower())

            # Same error for unknown email and wrong password
            if user is None or not self.hasher.verify(request.password, user.password_hash):
                return Return.err(
                    Error(code=ErrorCode.AUTHENTICATION_ERROR, message="Invalid email or password")
                )

            user_dto = UserDTO.from_entity(user)

        return Return.ok(AuthResponse(
            user=user_dto,
            token=self.tokens.issue(user_dto.id, user_dto.email),
        ))
