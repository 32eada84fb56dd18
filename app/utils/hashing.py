from passlib.context import CryptContext

from app.config import settings
from app.errors import ValidationError

BCRYPT_MAX_BYTES = 72

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def _too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > BCRYPT_MAX_BYTES


def hash_password(password: str) -> str:
    if _too_long(password):
        raise ValidationError("Password too long (bcrypt max 72 bytes)")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # an overlong password can never have been hashed, so it simply does not match
    if _too_long(plain_password):
        return False
    return pwd_context.verify(plain_password, hashed_password)


class PasswordHasher:
    """One-way hash + verify, the only password primitive the service sees."""

    def hash(self, password: str) -> str:
        return hash_password(password)

    def verify(self, password: str, hashed: str) -> bool:
        return verify_password(password, hashed)
