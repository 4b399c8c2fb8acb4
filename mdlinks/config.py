"""Centralised settings for mdlinks.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Link validation (HTTP probes)
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("MDLINKS_REQUEST_TIMEOUT", "10.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "MDLINKS_USER_AGENT", "Mozilla/5.0 (compatible; mdlinks/1.0)"
        )
    )
    max_connections: int = field(
        default_factory=lambda: int(os.environ.get("MDLINKS_MAX_CONNECTIONS", "100"))
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    verbose: bool = field(default_factory=lambda: _env_flag("MDLINKS_VERBOSE"))


# Module-level singleton; import this everywhere:
#   from mdlinks.config import settings
settings = Settings()
