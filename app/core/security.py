# app/core/security.py
import hashlib
import hmac
import secrets
from typing import Optional

from app.core.config import settings

_ALGORITHM = "pbkdf2_sha256"

def hash_password(password: str, *, salt: Optional[str] = None, iterations: Optional[int] = None) -> str:
    """
    Hash a password with PBKDF2-SHA256.

    Returns a self-describing string: "<algorithm>$<iterations>$<salt>$<hex digest>",
    so the iteration count can be raised later without breaking stored hashes.
    """
    salt = salt or secrets.token_hex(16)
    iterations = iterations or settings.PASSWORD_HASH_ITERATIONS
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations).hex()
    return f"{_ALGORITHM}${iterations}${salt}${digest}"

def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against a value produced by hash_password."""
    try:
        algorithm, iterations_str, salt, expected_digest = password_hash.split("$")
        iterations = int(iterations_str)
    except ValueError:
        # Malformed hash in the DB
        return False

    if algorithm != _ALGORITHM:
        return False

    calculated_digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations).hex()
    return hmac.compare_digest(calculated_digest, expected_digest)
