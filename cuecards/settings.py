"""
Application settings and configuration.
Loads environment variables and provides typed config objects.
"""

import math
import os
from functools import lru_cache
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_COPY_RESET_SECONDS = 2.0


def parse_number(value: Optional[str], kind=float):
    """Parse a numeric env value. Returns None if it is not a number."""
    try:
        number = kind(value)
    except (TypeError, ValueError):
        return None
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number


class Settings:
    """Application settings loaded from environment variables."""
    
    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./cuecards.db")
    
    # Score band shown when a card is first opened
    DEFAULT_SCORE: str = os.getenv("DEFAULT_SCORE", "6.5")
    
    # How long a "copied" acknowledgment stays visible (None if unparseable)
    COPY_RESET_SECONDS: Optional[float] = parse_number(os.getenv("COPY_RESET_SECONDS", "2.0"))
    
    # View sessions kept in memory; the least recently used is evicted
    MAX_OPEN_VIEWS: Optional[int] = parse_number(os.getenv("MAX_OPEN_VIEWS", "500"), int)
    
    # Copied texts remembered per view
    CLIPBOARD_HISTORY: Optional[int] = parse_number(os.getenv("CLIPBOARD_HISTORY", "20"), int)
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    # CORS, comma separated
    ALLOWED_ORIGINS: str = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://localhost:8000",
    )
    
    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]
    
    @property
    def copy_reset_seconds(self) -> float:
        """Reset delay, falling back to the default when misconfigured."""
        if self.COPY_RESET_SECONDS is None or self.COPY_RESET_SECONDS <= 0:
            return DEFAULT_COPY_RESET_SECONDS
        return self.COPY_RESET_SECONDS
    
    def validate(self) -> list[str]:
        """Check for missing or unusable settings. Returns list of bad keys."""
        problems = []
        if not self.DATABASE_URL:
            problems.append("DATABASE_URL")
        if not self.DEFAULT_SCORE:
            problems.append("DEFAULT_SCORE")
        if self.COPY_RESET_SECONDS is None or self.COPY_RESET_SECONDS <= 0:
            problems.append("COPY_RESET_SECONDS")
        if self.MAX_OPEN_VIEWS is None or self.MAX_OPEN_VIEWS < 1:
            problems.append("MAX_OPEN_VIEWS")
        if self.CLIPBOARD_HISTORY is None or self.CLIPBOARD_HISTORY < 1:
            problems.append("CLIPBOARD_HISTORY")
        return problems


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
