from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional
from src.domain import User


class UserRepository(ABC):
    """Repository interface for User entity"""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by unique email"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Get several users at once, keyed by ID"""
        pass
