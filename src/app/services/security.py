from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass


class TokenIssuer(ABC):
    @abstractmethod
    def issue(self, user_id: str, email: str) -> str:
        """Create a signed access token for a user"""
        pass
