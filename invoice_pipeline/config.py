"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "invoice-pipeline"
    log_level: str = "INFO"

    # Demo invoice
    demo_invoice_id: str = "INV001"
    demo_invoice_amount: int | float = 1000

    # Strategy selection (names registered in infrastructure.factories)
    discount: str = "seasonal"
    payment_method: str = "credit_card"
    notifier: str = "sms"


settings = Settings()
