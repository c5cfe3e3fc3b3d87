from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    """
    Configuration settings for the Glints scraper.
    """

    # Browser settings
    HEADLESS: bool = True
    # Remote browser automation endpoint (CDP over WebSocket). When unset a
    # local Chromium is launched instead.
    BROWSER_WS_ENDPOINT: Optional[str] = None
    BROWSER_TOKEN: Optional[str] = None
    CONNECT_TIMEOUT: int = 30000  # ms
    USER_AGENT: Optional[str] = None
    LOCALE: str = "id-ID"
    IGNORE_HTTPS_ERRORS: bool = True

    # Timeouts
    NAVIGATION_TIMEOUT: int = 30000  # ms
    SELECTOR_TIMEOUT: int = 15000  # ms
    SCRAPE_DEADLINE: float = 60.0  # seconds, whole pipeline

    # Auto-scroll
    SCROLL_DISTANCE: int = 500  # px
    SCROLL_INTERVAL: int = 300  # ms
    MAX_SCROLL_STEPS: int = 200
    MAX_SCROLL_SECONDS: float = 30.0

    # Results
    MAX_RESULTS: int = 8

    # Concurrency
    MAX_CONCURRENT_SESSIONS: int = 3

    # Retries (0 disables)
    MAX_RETRIES: int = 0
    RETRY_BASE_DELAY: float = 2.0  # seconds
    RETRY_MAX_DELAY: float = 10.0  # seconds


settings = Settings()
