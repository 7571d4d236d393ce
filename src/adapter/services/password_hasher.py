import bcrypt

from src.app.services.password_hasher import IPasswordHasher, PasswordHashError


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt implementation of the credential hasher (cost factor 12)"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash_password(self, plain: str) -> str:
        try:
            hashed = bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(self.rounds))
        except (TypeError, ValueError) as e:
            raise PasswordHashError(str(e)) from e
        return hashed.decode("utf-8")

    def verify_password(self, plain: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False
