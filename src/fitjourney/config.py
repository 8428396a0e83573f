"""Application settings."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigurationError

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

DEFAULT_TOKEN_EXPIRE_MINUTES = 60 * 24 * 7


@dataclass(frozen=True)
class Settings:
    """Configuration built once at startup and passed to the components.

    Nothing in the package reads the environment after `from_env` returns.
    """

    data_dir: Path = DATA_DIR
    jwt_secret: str | None = field(default=None, repr=False)
    jwt_algorithm: str = "HS256"
    token_expire_minutes: int = DEFAULT_TOKEN_EXPIRE_MINUTES
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        """Get the database file path."""
        return self.data_dir / "fitjourney.db"

    def ensure_data_dir(self) -> Path:
        """Create the data directory if needed and return it."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir

    def require_jwt_secret(self) -> str:
        """Get the token signing secret, failing if none is configured."""
        if not self.jwt_secret:
            raise ConfigurationError(
                "No JWT signing secret configured. Set FITJOURNEY_JWT_SECRET."
            )
        return self.jwt_secret

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Settings":
        """Build settings from the process environment and an optional .env file."""
        load_dotenv(env_file)

        data_dir = os.getenv("FITJOURNEY_DATA_DIR")
        secret = os.getenv("FITJOURNEY_JWT_SECRET") or os.getenv("JWT")
        expire = os.getenv("FITJOURNEY_TOKEN_EXPIRE_MINUTES")

        return cls(
            data_dir=Path(data_dir) if data_dir else DATA_DIR,
            jwt_secret=secret or None,
            jwt_algorithm=os.getenv("FITJOURNEY_JWT_ALGORITHM", cls.jwt_algorithm),
            token_expire_minutes=int(expire) if expire else DEFAULT_TOKEN_EXPIRE_MINUTES,
            log_level=os.getenv("FITJOURNEY_LOG_LEVEL", cls.log_level).upper(),
        )
