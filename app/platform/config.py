from pathlib import Path
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "Accessibility Scanner API"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = True
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]

    # ── Logging ─────────────────────────────────
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # ── Scan provider ───────────────────────────
    SCAN_PROVIDER: Literal["pagespeed", "lighthouse"] = "pagespeed"

    # Optional, without it PageSpeed applies the anonymous quota
    GOOGLE_PAGESPEED_API_KEY: Optional[str] = None
    PAGESPEED_API_URL: str = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"
    PAGESPEED_TIMEOUT: float = 60.0

    LIGHTHOUSE_PATH: str = "lighthouse"
    LIGHTHOUSE_TIMEOUT: float = 60.0
    LIGHTHOUSE_CHROME_FLAGS: str = (
        "--headless --no-sandbox --disable-dev-shm-usage --disable-gpu --disable-software-rasterizer"
    )

    class Config:
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
