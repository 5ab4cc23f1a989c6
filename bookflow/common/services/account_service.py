from typing import Dict, Optional

from sqlalchemy.exc import IntegrityError

from ..db.session import SessionFactory
from ..models.account import Account
from ..utils.dto import to_account_dto
from ..utils.passwords import PasswordHasher
from ..utils.validators import ensure_password, is_storable_id, normalize_email
from .logging import log_event


class DuplicateEmailError(ValueError):
    """Raised when registering an email that already has an account."""


class AccountService:
    """Account registration and credential checks."""

    def __init__(self, session_factory: SessionFactory, hasher: PasswordHasher):
        self._session_factory = session_factory
        self._hasher = hasher

    def register(self, *, email: Optional[str], password: Optional[str]) -> Dict:
        """Validate input, hash the password and persist a new account.

        Raises ValueError on invalid input and DuplicateEmailError when the
        email is taken. Nothing is written in either case.
        """
        try:
            normalized = normalize_email(email)
            plaintext = ensure_password(password)
        except ValueError as exc:
            log_event("info", "account.register_rejected", reason=str(exc))
            raise

        with self._session_factory() as session:
            if session.query(Account.id).filter(Account.email == normalized).first():
                log_event("info", "account.register_rejected", reason="duplicate email")
                raise DuplicateEmailError(f"an account for {normalized} already exists")

            account = Account(email=normalized, password_hash=self._hasher.hash(plaintext))
            session.add(account)
            try:
                session.flush()
            except IntegrityError as exc:
                # lost a race with a concurrent registration for the same email
                log_event("info", "account.register_rejected", reason="duplicate email")
                raise DuplicateEmailError(f"an account for {normalized} already exists") from exc
            log_event("info", "account.registered", account_id=account.id)
            return to_account_dto(account)

    def authenticate(self, *, email: Optional[str], password: Optional[str]) -> Optional[Dict]:
        """Return the account DTO when the credentials match, else None."""
        normalized = (email or "").strip().lower()
        if not normalized or not password:
            return None
        with self._session_factory() as session:
            account = session.query(Account).filter(Account.email == normalized).first()
            if account is None or not self._hasher.verify(password, account.password_hash):
                log_event("info", "account.login_failed")
                return None
            return to_account_dto(account)

    def exists(self, account_id) -> bool:
        if not is_storable_id(account_id):
            return False
        with self._session_factory() as session:
            return session.get(Account, account_id) is not None
