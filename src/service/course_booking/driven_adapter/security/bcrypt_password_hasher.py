import bcrypt
from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        hashed = bcrypt.hashpw(plain_password.get_secret_value().encode('utf-8'), bcrypt.gensalt())
        return hashed.decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        """Constant-time check; malformed hashes count as a mismatch"""
        try:
            return bcrypt.checkpw(
                plain_password.get_secret_value().encode('utf-8'),
                hashed_password.encode('utf-8'),
            )
        except ValueError:
            return False
