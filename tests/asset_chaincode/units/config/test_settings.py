"""Unit tests for the configuration classes."""

import pytest
from pydantic import ValidationError

from asset_chaincode.config import (
    BaseCoreSettings,
    ChaincodeSettings,
    ObservabilityConfig,
    StorageConfig,
    get_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Runs every test away from any .env file and CHAINCODE_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("APP_NAME", "ENVIRONMENT", "DEBUG", "LOG_LEVEL", "STATE_BACKEND", "STATE_FILE"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"CHAINCODE_{name}", raising=False)
    reset_settings()


@pytest.mark.unit
class TestBaseCoreSettings:
    """Unit tests for BaseCoreSettings class."""

    def test_default_values(self) -> None:
        settings = BaseCoreSettings()

        assert settings.app_name == "asset-chaincode"
        assert settings.environment == "development"
        assert settings.debug is False

    @pytest.mark.parametrize("value, expected", [("Production", "production"), ("STAGING", "staging")])
    def test_environment_case_insensitive(self, value: str, expected: str) -> None:
        assert BaseCoreSettings(environment=value).environment == expected

    @pytest.mark.parametrize("value", ["test", "prod", ""])
    def test_environment_invalid(self, value: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            BaseCoreSettings(environment=value)

        assert "environment must be one of" in str(exc_info.value)


@pytest.mark.unit
class TestObservabilityConfig:
    """Unit tests for ObservabilityConfig class."""

    def test_defaults(self) -> None:
        config = ObservabilityConfig()

        assert config.log_level == "INFO"
        assert config.log_format == "pretty"
        assert config.log_file is None
        assert config.metrics_enabled is True
        assert config.metrics_namespace == "asset_chaincode"

    def test_log_level_normalized(self) -> None:
        assert ObservabilityConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            ObservabilityConfig(log_level="verbose")

    def test_invalid_log_format(self) -> None:
        with pytest.raises(ValidationError):
            ObservabilityConfig(log_format="xml")


@pytest.mark.unit
class TestStorageConfig:
    """Unit tests for StorageConfig class."""

    def test_defaults(self) -> None:
        config = StorageConfig()

        assert config.state_backend == "file"
        assert config.state_file == "data/ledger.json"

    def test_invalid_backend(self) -> None:
        with pytest.raises(ValidationError):
            StorageConfig(state_backend="redis")

    def test_empty_state_file_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StorageConfig(state_file="   ")


@pytest.mark.unit
class TestChaincodeSettings:
    """Unit tests for the unified settings."""

    def test_inherits_every_section(self) -> None:
        settings = ChaincodeSettings()

        assert settings.app_name == "asset-chaincode"
        assert settings.log_level == "INFO"
        assert settings.state_backend == "file"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHAINCODE_LOG_LEVEL", "warning")
        monkeypatch.setenv("CHAINCODE_STATE_BACKEND", "memory")
        monkeypatch.setenv("CHAINCODE_ENVIRONMENT", "staging")

        settings = ChaincodeSettings()

        assert settings.log_level == "WARNING"
        assert settings.state_backend == "memory"
        assert settings.environment == "staging"

    def test_ignores_unprefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert ChaincodeSettings().log_level == "INFO"

    def test_reads_env_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("CHAINCODE_STATE_FILE=ledger/state.json\nCHAINCODE_DEBUG=true\n")

        settings = ChaincodeSettings()

        assert settings.state_file == "ledger/state.json"
        assert settings.debug is True

    def test_constructor_overrides_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHAINCODE_LOG_LEVEL", "ERROR")
        assert ChaincodeSettings(log_level="DEBUG").log_level == "DEBUG"

    def test_get_settings_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("CHAINCODE_LOG_LEVEL", "ERROR")

        assert get_settings() is first

        reset_settings()
        assert get_settings().log_level == "ERROR"
