from jose import jwt
from src.adapter.services.security import BcryptPasswordHasher, JoseTokenIssuer


def test_hash_verifies_only_the_original_password():
    hasher = BcryptPasswordHasher(rounds=4)

    password_hash = hasher.hash("s3cret!")

    assert password_hash != "s3cret!"
    assert hasher.verify("s3cret!", password_hash)
    assert not hasher.verify("wrong", password_hash)


def test_malformed_hash_does_not_verify():
    assert not BcryptPasswordHasher(rounds=4).verify("s3cret!", "not-a-bcrypt-hash")


def test_token_carries_user_claims():
    issuer = JoseTokenIssuer(secret="test-secret", expires_in_seconds=60)

    token = issuer.issue("user-1", "ada@example.com")
    claims = jwt.decode(token, "test-secret", algorithms=["HS256"])

    assert claims["user_id"] == "user-1"
    assert claims["sub"] == "user-1"
    assert claims["email"] == "ada@example.com"
    assert claims["exp"] > claims["iat"]
