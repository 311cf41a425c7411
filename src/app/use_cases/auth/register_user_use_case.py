import logging
from libs.result import Result, Error, ErrorCode, Return
from src.app.services.security import PasswordHasher, TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain import User
from .dtos import AuthResponse, RegisterUserRequest, UserDTO

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for creating an account and signing the user in"""

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenIssuer):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, request: RegisterUserRequest) -> Result[AuthResponse]:
        email = request.email.lower()

        async with self.uow:
            existing = await self.uow.users.get_by_email(email)
            if existing is not None:
                return Return.err(Error(code=ErrorCode.CONFLICT, message="Email already registered"))

            user = User(
                name=request.name.strip(),
                email=email,
                password_hash=self.hasher.hash(request.password),
            )
            user = await self.uow.users.create(user)
            await self.uow.commit()

        logger.info(f"User {user.id} registered")
        return Return.ok(AuthResponse(
            user=UserDTO.from_entity(user),
            token=self.tokens.issue(user.id, user.email),
        ))
