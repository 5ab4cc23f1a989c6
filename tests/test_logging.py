import json

import pytest

from bookflow.common.models import Account
from bookflow.common.services import AccountService, DuplicateEmailError
from bookflow.common.services.logging import log_event, set_log_level
from bookflow.common.utils.passwords import PasswordHasher


@pytest.fixture(autouse=True)
def reset_level():
    yield
    set_log_level("INFO")


def test_writes_json_line(capsys):
    set_log_level("INFO")

    log_event("info", "cart.item_added", account_id=1, catalog_item_id=42)

    payload = json.loads(capsys.readouterr().out.strip())
    assert payload["level"] == "info"
    assert payload["event"] == "cart.item_added"
    assert payload["catalog_item_id"] == 42
    assert payload["ts"].endswith("Z")


def test_below_threshold_is_dropped(capsys):
    set_log_level("WARNING")

    log_event("info", "account.registered", account_id=1)

    assert capsys.readouterr().out == ""


def test_registration_never_logs_password(capsys, components):
    set_log_level("DEBUG")

    components["account_service"].register(email="user@example.com", password="secret123")

    out = capsys.readouterr().out
    assert "account.registered" in out
    assert "secret123" not in out


class CompetingRegistrationHasher(PasswordHasher):
    """Inserts the same email from another session before the insert flushes."""

    def __init__(self, session_factory, email):
        super().__init__(rounds=4)
        self._session_factory = session_factory
        self._email = email

    def hash(self, password):
        with self._session_factory() as session:
            session.add(Account(email=self._email, password_hash="$2b$04$competing"))
        return super().hash(password)


def test_lost_registration_race_is_logged(capsys, session_factory, count_rows):
    accounts = AccountService(session_factory, CompetingRegistrationHasher(session_factory, "user@example.com"))
    set_log_level("INFO")

    with pytest.raises(DuplicateEmailError):
        accounts.register(email="user@example.com", password="secret123")

    events = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert {"event": "account.register_rejected", "reason": "duplicate email"}.items() <= events[-1].items()
    assert count_rows(Account) == 1
