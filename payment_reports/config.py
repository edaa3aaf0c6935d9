"""
Service Settings
Environment-driven configuration for the Payment Reports API
"""

import os
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load Environment Variables FIRST
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOGO_PATH = Path(__file__).resolve().parent / "assets" / "company-logo.png"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return items or [default]


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 9090
    log_level: str = "INFO"
    codespace_name: Optional[str] = None
    cors_origins: tuple = ("*",)
    logo_path: Path = DEFAULT_LOGO_PATH
    timezone: Optional[str] = None
    pdf_invariant: bool = False

    @property
    def server_url(self) -> Optional[str]:
        """Public Codespace URL for the API docs, when running inside a Codespace"""
        if not self.codespace_name:
            return None
        return f"https://{self.codespace_name}-{self.port}.app.github.dev"


def load_settings() -> Settings:
    """Build settings from the current environment"""
    try:
        port = int(os.getenv("PORT", 9090))
    except ValueError:
        logger.warning(f"Invalid PORT value '{os.getenv('PORT')}', using 9090")
        port = 9090

    logo_path = os.getenv("REPORT_LOGO_PATH", "").strip()

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        codespace_name=os.getenv("CODESPACE_NAME", "").strip() or None,
        cors_origins=tuple(_env_list("CORS_ORIGINS", "*")),
        logo_path=Path(logo_path) if logo_path else DEFAULT_LOGO_PATH,
        timezone=os.getenv("REPORT_TIMEZONE", "").strip() or None,
        pdf_invariant=_env_flag("REPORT_PDF_INVARIANT"),
    )


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings instance"""
    return load_settings()
