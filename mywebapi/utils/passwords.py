import hashlib
import secrets

HASH_ITERATIONS = 600_000
_HASH_ALGORITHM = "sha256"
_SALT_BYTES = 32


def hash_password(
    password: str,
    salt: str | None = None,
    iterations: int = HASH_ITERATIONS,
) -> tuple[str, str]:
    """Hash a password with PBKDF2-HMAC-SHA256.

    Returns:
        Tuple of (hash_hex, salt_hex).
    """
    salt_bytes = bytes.fromhex(salt) if salt else secrets.token_bytes(_SALT_BYTES)
    dk = hashlib.pbkdf2_hmac(
        _HASH_ALGORITHM, password.encode(), salt_bytes, iterations
    )
    return dk.hex(), salt_bytes.hex()


def verify_password(
    password: str,
    password_hash: str,
    salt: str,
    iterations: int = HASH_ITERATIONS,
) -> bool:
    """Verify a password against its stored hash."""
    computed_hash, _ = hash_password(password, salt, iterations)
    return secrets.compare_digest(computed_hash, password_hash)
