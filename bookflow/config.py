"""BookFlow application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def validate_log_level(value: Optional[str]) -> str:
    level = (value or "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value!r}")
    return level


def validate_bcrypt_rounds(value) -> int:
    try:
        rounds = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid bcrypt rounds: {value!r}") from None
    # bcrypt.gensalt only accepts costs in this range
    if not 4 <= rounds <= 31:
        raise ValueError("bcrypt rounds must be between 4 and 31")
    return rounds


@dataclass
class BookFlowConfig:
    """Settings read once at process start."""

    secret_key: str
    database_url: str
    log_level: str = "INFO"
    bcrypt_rounds: int = 12

    @property
    def sqlite_path(self) -> Optional[Path]:
        if not self.database_url.startswith("sqlite:///"):
            return None
        db_path = self.database_url.split("sqlite:///", 1)[-1]
        if not db_path or ":memory:" in db_path:
            return None
        return Path(db_path).expanduser()

    @classmethod
    def load(cls) -> "BookFlowConfig":
        """Build settings from the environment, reading a local .env first."""

        load_dotenv(Path.cwd() / ".env")

        config = cls(
            secret_key=os.environ.get("BOOKFLOW_SECRET_KEY", "bookflow-dev-secret"),
            database_url=os.environ.get("BOOKFLOW_DATABASE_URL", "sqlite:///data/bookflow.db"),
            log_level=validate_log_level(os.environ.get("BOOKFLOW_LOG_LEVEL")),
            bcrypt_rounds=validate_bcrypt_rounds(os.environ.get("BOOKFLOW_BCRYPT_ROUNDS", "12")),
        )

        # avoid sqlite's "unable to open database file" on a fresh checkout
        if config.sqlite_path is not None:
            config.sqlite_path.resolve().parent.mkdir(parents=True, exist_ok=True)

        return config
