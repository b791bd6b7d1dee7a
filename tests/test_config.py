"""
Tests for configuration management
"""

from decimal import Decimal

from bank_ledger import config as config_module
from bank_ledger.config import LedgerConfig, get_config, reload_config


class TestLedgerConfig:
    """Test environment-driven configuration"""

    def test_defaults(self, monkeypatch):
        """Test built-in defaults"""
        for name in ["LEDGER_BANK_NAME", "LEDGER_ACCOUNT_NUMBER_START",
                     "LEDGER_DEFAULT_SAVINGS_INTEREST_RATE", "LEDGER_DEFAULT_OVERDRAFT_LIMIT",
                     "LEDGER_LOG_LEVEL", "LEDGER_LOG_FORMAT", "LEDGER_SEED_DEMO_ACCOUNTS"]:
            monkeypatch.delenv(name, raising=False)

        config = LedgerConfig(_env_file=None)

        assert config.bank_name == "First National Bank"
        assert config.account_number_start == 1000
        assert config.default_savings_interest_rate == Decimal('0.025')
        assert config.default_overdraft_limit == Decimal('500')
        assert config.log_level == "WARNING"
        assert config.log_format == "json"
        assert config.seed_demo_accounts is True

    def test_environment_overrides(self, monkeypatch):
        """Test LEDGER_ prefixed variables are picked up"""
        monkeypatch.setenv("LEDGER_BANK_NAME", "Env Bank")
        monkeypatch.setenv("LEDGER_DEFAULT_OVERDRAFT_LIMIT", "750")
        monkeypatch.setenv("LEDGER_SEED_DEMO_ACCOUNTS", "false")

        config = LedgerConfig()

        assert config.bank_name == "Env Bank"
        assert config.default_overdraft_limit == Decimal('750')
        assert config.seed_demo_accounts is False

    def test_reload_config(self, monkeypatch):
        """Test reloading replaces the global instance"""
        monkeypatch.setenv("LEDGER_BANK_NAME", "Reloaded Bank")
        try:
            reloaded = reload_config()

            assert reloaded.bank_name == "Reloaded Bank"
            assert get_config() is reloaded
            assert config_module.config is reloaded
        finally:
            monkeypatch.delenv("LEDGER_BANK_NAME")
            reload_config()
