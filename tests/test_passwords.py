from bookflow.common.utils.passwords import PasswordHasher


class TestPasswordHasher:
    def setup_method(self):
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_differs_from_plaintext(self):
        hashed = self.hasher.hash("secret123")

        assert hashed != "secret123"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert self.hasher.hash("secret123") != self.hasher.hash("secret123")

    def test_verify(self):
        hashed = self.hasher.hash("secret123")

        assert self.hasher.verify("secret123", hashed) is True
        assert self.hasher.verify("secret124", hashed) is False

    def test_verify_rejects_empty_and_malformed_hashes(self):
        assert self.hasher.verify("secret123", "") is False
        assert self.hasher.verify("", self.hasher.hash("secret123")) is False
        assert self.hasher.verify("secret123", "not-a-bcrypt-hash") is False

    def test_long_passwords_are_truncated_to_72_bytes(self):
        long_password = "x" * 100
        hashed = self.hasher.hash(long_password)

        assert self.hasher.verify("x" * 72, hashed) is True
