"""bcrypt password hasher."""

import bcrypt

from newsboard.config import AuthSettings
from newsboard.domain.service import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """PasswordHasher backed by the bcrypt library.

    bcrypt only looks at the first 72 bytes of a password, longer input is
    truncated before hashing and verifying.
    """

    MAX_PASSWORD_BYTES = 72

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.rounds = auth_settings.bcrypt_rounds

    def _encode(self, password: str) -> bytes:
        return password.encode("utf-8")[: self.MAX_PASSWORD_BYTES]

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
