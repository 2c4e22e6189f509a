"""Suite settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Dict, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Storefront suite configuration from SAUCEDEMO_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SAUCEDEMO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application under test
    base_url: str = Field(default="https://www.saucedemo.com/", description="Login page URL")

    # Browser
    browser: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium", description="Playwright browser type"
    )
    headless: bool = Field(default=True, description="Run the browser without a window")
    viewport_width: int = Field(default=1920, ge=320)
    viewport_height: int = Field(default=1080, ge=240)

    # Waits (seconds)
    implicit_wait: float = Field(
        default=5, ge=0, description="How long presence checks wait for an element"
    )
    explicit_wait: float = Field(default=10, gt=0, description="Timeout for explicit waits and browser actions")

    # Checkout
    tax_rate: float = Field(default=0.08, ge=0, le=1, description="Sales tax applied at checkout")

    # External pages
    about_page_url: str = Field(default="https://saucelabs.com/")
    twitter_url: str = Field(default="https://x.com/saucelabs")
    facebook_url: str = Field(default="https://www.facebook.com/saucelabs")
    linkedin_url: str = Field(default="https://www.linkedin.com/company/sauce-labs/")

    # Test data and output
    test_data_path: Path = Field(default=Path("tests/data/test_data.json"))
    screenshot_path: Path = Field(default=Path("output/screenshots"))

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")

    # Harness
    retry_count: int = Field(default=1, ge=0, description="Reruns of a failed scenario")

    @field_validator(
        "base_url", "about_page_url", "twitter_url", "facebook_url", "linkedin_url"
    )
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v

    @property
    def social_urls(self) -> Dict[str, str]:
        """Expected landing URL for each footer social link"""
        return {
            "Twitter": self.twitter_url,
            "Facebook": self.facebook_url,
            "LinkedIn": self.linkedin_url,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
