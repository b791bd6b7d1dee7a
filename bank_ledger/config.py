"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerConfig(BaseSettings):
    """Bank ledger configuration"""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Bank configuration
    bank_name: str = "First National Bank"
    account_number_start: int = 1000  # First account gets start + 1

    # Product defaults
    default_savings_interest_rate: Decimal = Decimal("0.025")
    default_overdraft_limit: Decimal = Decimal("500")

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text

    # Console configuration
    seed_demo_accounts: bool = True


# Global configuration instance
config = LedgerConfig()


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerConfig()
    return config
