import bcrypt


# bcrypt only reads the first 72 bytes of its input
_BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """Salted bcrypt hashing with a configurable cost."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        password_bytes = password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        password_bytes = password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
        try:
            return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
        except ValueError:
            # stored value is not a bcrypt hash
            return False
