"""
Application settings
Read from environment variables (and .env), one shared instance
"""
from typing import Optional
from fastapi import Request
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Hotel PMS"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"

    # Store
    SEED_SAMPLE_DATA: bool = True
    ENFORCE_UNIQUE_KEYS: bool = True

    # Payments (Stripe); the payment-intent route is disabled without a key
    STRIPE_SECRET_KEY: Optional[str] = None
    PAYMENT_CURRENCY: str = "aud"

    # Channel manager integration
    SYNC_INTERVAL_MINUTES: int = 5

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


settings = Settings()


def get_settings(request: Request) -> Settings:
    """Dependency: the settings the running application was built with"""
    return request.app.state.settings
