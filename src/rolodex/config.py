"""Settings from environment (.env supported). Used by bootstrap."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Repo root: from src/rolodex/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    phone_region: str = "US"
    seed_path: Path | None = None


def load_env() -> None:
    """Load .env from repo root or current dir (first one found). Existing env vars win."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def load_settings() -> Settings:
    """Build Settings from ROLODEX_* environment variables."""
    load_env()
    log_level = os.environ.get("ROLODEX_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level: {log_level}")
    region = os.environ.get("ROLODEX_PHONE_REGION", "US").strip().upper() or "US"
    seed = os.environ.get("ROLODEX_SEED_PATH", "").strip()
    return Settings(
        log_level=log_level,
        phone_region=region,
        seed_path=Path(seed).resolve() if seed else None,
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)
