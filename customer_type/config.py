from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults match the keys a
    WooCommerce-style checkout uses, so the plugin works without a .env file.
    """
    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"

    # Checkout field and order metadata keys
    customer_type_field: str = "pronamic_customer_type"
    customer_type_meta_key: str = "_pronamic_customer_type"
    company_field: str = "billing_company"
    vat_number_field: str = "woocommerce_eu_vat_number"

    # Field definition
    default_customer_type: str = "business"
    field_priority: int = 0

    # Localization
    text_domain: str = "customer-type"
    locale_dir: Optional[str] = None
    locale_language: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @field_validator("customer_type_field", "customer_type_meta_key", "company_field")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("default_customer_type")
    @classmethod
    def _known_customer_type(cls, value: str) -> str:
        if value not in ("business", "private"):
            raise ValueError("must be 'business' or 'private'")
        return value

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
