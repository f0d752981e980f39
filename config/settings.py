"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


def _env_bool(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class FilterConfig:
    """Filter engine configuration settings."""

    # Raise on section/facet mismatches instead of logging and ignoring them
    strict_sections: bool = field(
        default_factory=lambda: _env_bool("FILTER_STRICT_SECTIONS")
    )
    store_path: Path = field(
        default_factory=lambda: Path(
            os.getenv("FILTER_STORE_PATH", str(PROJECT_ROOT / "data" / "filters.json"))
        )
    )
    interim_utc_offset_minutes: int = field(
        default_factory=lambda: int(os.getenv("INTERIM_UTC_OFFSET_MINUTES", "330"))
    )
    due_soon_days: int = field(
        default_factory=lambda: int(os.getenv("DUE_SOON_DAYS", "7"))
    )
    due_upcoming_days: int = field(
        default_factory=lambda: int(os.getenv("DUE_UPCOMING_DAYS", "30"))
    )


@dataclass
class Config:
    """Main configuration container."""

    filters: FilterConfig = field(default_factory=FilterConfig)


# Global config instance
config = Config()
