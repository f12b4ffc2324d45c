"""
Password hashing

Salted PBKDF2 digests through werkzeug, at a fixed iteration count taken
from configuration.
"""

import logging

from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)

DEFAULT_METHOD = 'pbkdf2:sha256:600000'


class PasswordHasher:
    """One-way hash and verify for stored account passwords."""

    def __init__(self, method=DEFAULT_METHOD):
        self.method = method

    def hash(self, plaintext: str) -> str:
        if not plaintext:
            raise ValueError('Password cannot be empty')
        return generate_password_hash(plaintext, method=self.method)

    def verify(self, plaintext: str, digest: str) -> bool:
        """Check plaintext against a stored digest.

        A malformed or unsupported digest counts as a mismatch.
        """
        if not plaintext or not digest:
            return False
        try:
            return check_password_hash(digest, plaintext)
        except (ValueError, TypeError) as e:
            logger.warning('Password verification error: %s', e)
            return False
