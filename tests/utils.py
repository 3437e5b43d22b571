"""Helpers shared by the test modules."""

import hashlib
import hmac

from slshopping_admin.app.core.security import ITERATIONS


def password_matches(plain_password: str, hashed_password: str) -> bool:
    """Check ``plain_password`` against a stored ``salthex$hashhex`` value."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
