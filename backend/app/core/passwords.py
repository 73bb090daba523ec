"""Password Hashing — salted PBKDF2 digests for stored credentials.

Invariants:
    - Plain passwords never leave this module in any stored form
    - Stored format: "pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>"
    - verify_password compares in constant time

Design Decisions:
    - hashlib.pbkdf2_hmac over a third-party hasher: no native build step,
      iteration count configurable via settings
"""

import hashlib
import secrets

_ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, iterations: int, salt: str | None = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations,
    )
    return f"{_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algorithm, iterations, salt, _ = stored.split("$")
    except ValueError:
        return False
    if algorithm != _ALGORITHM:
        return False
    candidate = hash_password(password, int(iterations), salt)
    return secrets.compare_digest(candidate, stored)
