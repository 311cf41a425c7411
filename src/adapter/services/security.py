"""Password hashing and access token adapters"""
from datetime import datetime, timedelta
import bcrypt
from jose import jwt
from src.app.services.security import PasswordHasher, TokenIssuer


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False


class JoseTokenIssuer(TokenIssuer):
    def __init__(self, secret: str, algorithm: str = "HS256", expires_in_seconds: int = 7 * 24 * 3600):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in_seconds = expires_in_seconds

    def issue(self, user_id: str, email: str) -> str:
        now = datetime.utcnow()
        claims = {
            "sub": str(user_id),
            "user_id": str(user_id),
            "email": email,
            "iat": now,
            "exp": now + timedelta(seconds=self.expires_in_seconds),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)
