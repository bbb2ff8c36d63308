"""
Password hashing.

Thin wrapper over a passlib CryptContext so the hashing scheme lives in
one place.

Dependencies: passlib (bcrypt backend)
System role: Credential storage and verification
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password``."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """
    Check ``plain_password`` against a stored hash.

    Malformed or missing hashes verify as False instead of raising.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def dummy_verify() -> None:
    """Spend the same time as a real verification for unknown accounts."""
    pwd_context.dummy_verify()
