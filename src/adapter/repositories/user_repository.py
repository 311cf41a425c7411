from typing import Dict, Iterable, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import UserRepository
from src.domain import User


class SqlAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        statement = select(User).where(User.id == user_id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by unique email"""
        statement = select(User).where(User.email == email)
        result = await self.session.exec(statement)
        return result.first()

    async def get_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Get several users at once, keyed by ID"""
        ids = {user_id for user_id in user_ids if user_id}
        if not ids:
            return {}
        statement = select(User).where(User.id.in_(ids))
        result = await self.session.exec(statement)
        return {user.id: user for user in result.all()}
