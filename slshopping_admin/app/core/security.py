"""
Password hashing helpers.

Passwords of console users are stored as PBKDF2-HMAC-SHA256 digests with
a per-password random salt.  The stored format is ``salthex$hashhex``,
which is also what ``reset_password.py`` writes.  The console only
ever writes hashes; it has no login screen and compares no passwords.
"""

import hashlib
import os

ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    A 16-byte random salt is generated for each password.  The result
    contains the salt and the digest, both hex encoded, separated by
    ``$``.

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        Salt and hash concatenated with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"

