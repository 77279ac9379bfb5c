"""
Password hashing helpers.

Hashes are bcrypt modular-crypt strings (``$2b$<rounds>$...``), the format
already stored for existing customer accounts, so those accounts keep
logging in. The cost factor is embedded in each hash and can be raised later
without invalidating old ones.
"""

from __future__ import annotations

import bcrypt

ROUNDS = 10
# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, *, rounds: int = ROUNDS) -> str:
    """Hash a plain-text password with a random bcrypt salt."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds)).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash.

    Malformed or foreign hashes never verify.
    """
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("ascii"))
    except (ValueError, TypeError, AttributeError, UnicodeEncodeError):
        return False
