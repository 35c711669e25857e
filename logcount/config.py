"""Configuration for the application."""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Configuration for the log count extraction service."""

    # Browser settings
    headless: bool = os.environ.get("HEADLESS", "true").lower() == "true"
    chrome_executable_path: str = os.environ.get("CHROME_EXECUTABLE_PATH", "")
    stealth_enabled: bool = os.environ.get("STEALTH_ENABLED", "true").lower() == "true"

    # API settings
    api_host: str = os.environ.get("API_HOST", "0.0.0.0")
    api_port: int = int(os.environ.get("API_PORT", os.environ.get("PORT", "8080")))
    debug: bool = os.environ.get("DEBUG", "false").lower() == "true"
    log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    # CAPTCHA solver settings
    captcha_solver: str = os.environ.get("CAPTCHA_SOLVER", "2captcha")
    captcha_solve_timeout: int = int(os.environ.get("CAPTCHA_SOLVE_TIMEOUT", "120"))
    captcha_polling_interval: int = int(os.environ.get("CAPTCHA_POLLING_INTERVAL", "10"))

    # Timeouts (in milliseconds)
    navigation_timeout_ms: int = int(os.environ.get("NAVIGATION_TIMEOUT_MS", "30000"))
    challenge_capture_timeout_ms: int = int(
        os.environ.get("CHALLENGE_CAPTURE_TIMEOUT_MS", "15000")
    )
    navigation_settle_timeout_ms: int = int(
        os.environ.get("NAVIGATION_SETTLE_TIMEOUT_MS", "30000")
    )
    content_ready_timeout_ms: int = int(os.environ.get("CONTENT_READY_TIMEOUT_MS", "20000"))
    extraction_timeout_ms: int = int(os.environ.get("EXTRACTION_TIMEOUT_MS", "20000"))
    tab_activation_timeout_ms: int = int(os.environ.get("TAB_ACTIVATION_TIMEOUT_MS", "10000"))
    tab_settle_delay_ms: int = int(os.environ.get("TAB_SETTLE_DELAY_MS", "3000"))

    # Page matching
    logs_count_pattern: str = os.environ.get("LOGS_COUNT_PATTERN", r"(\d+)\s*логов")
    detail_tab_label: str = os.environ.get("DETAIL_TAB_LABEL", "Detail stats")
    statistic_target_label: str = os.environ.get("STATISTIC_TARGET_LABEL", "Total")
    turnstile_user_agent: str = os.environ.get(
        "TURNSTILE_USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/115.0.0.0 Safari/537.36",
    )


# Global settings instance
settings = Settings()

import logging
logger = logging.getLogger(__name__)
logger.info(f"CHROME_EXECUTABLE_PATH: {settings.chrome_executable_path or 'bundled Chromium'}")
logger.info(f"CAPTCHA_SOLVER: {settings.captcha_solver}")
