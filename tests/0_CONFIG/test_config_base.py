"""
Tests for configuration loading, credential resolution and error types.
"""

import json
import pytest

from config import (
    WapulseConfig,
    BookingConfig,
    ServerConfig,
    WapulseMCPError,
    ValidationError,
    ConfigurationError,
    APIError,
    ToolExecutionError,
    parse_date
)


class TestWapulseConfig:
    """Test cases for WaPulse credential handling."""

    @pytest.fixture
    def wapulse_config(self):
        return WapulseConfig(
            token="default-token",
            instance_id="default-instance",
            base_url="https://wapulse.test",
            timeout=30
        )

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("WAPULSE_TOKEN", "env-token")
        monkeypatch.setenv("WAPULSE_INSTANCE_ID", "env-instance")
        monkeypatch.setenv("WAPULSE_BASE_URL", "https://custom.test")
        monkeypatch.setenv("WAPULSE_API_TIMEOUT", "12")

        config = WapulseConfig.from_env()

        assert config.token == "env-token"
        assert config.instance_id == "env-instance"
        assert config.base_url == "https://custom.test"
        assert config.timeout == 12

    def test_from_env_defaults_to_empty_credentials(self, monkeypatch):
        monkeypatch.delenv("WAPULSE_TOKEN", raising=False)
        monkeypatch.delenv("WAPULSE_INSTANCE_ID", raising=False)
        monkeypatch.delenv("WAPULSE_BASE_URL", raising=False)

        config = WapulseConfig.from_env()

        assert config.token == ""
        assert config.instance_id == ""
        assert config.base_url == "https://wapulseserver.com:3003"
        assert not config.has_credentials()

    def test_resolve_uses_defaults(self, wapulse_config):
        assert wapulse_config.resolve_credentials() == ("default-token", "default-instance")

    def test_resolve_prefers_overrides(self, wapulse_config):
        token, instance_id = wapulse_config.resolve_credentials("custom-token", "custom-instance")

        assert token == "custom-token"
        assert instance_id == "custom-instance"

    def test_resolve_missing_token(self, wapulse_config):
        wapulse_config.token = ""

        with pytest.raises(ConfigurationError) as exc_info:
            wapulse_config.resolve_credentials()

        assert "WAPULSE_TOKEN" in exc_info.value.message
        assert "customToken" in exc_info.value.message
        assert exc_info.value.error_code == "INVALID_PARAMS"

    def test_resolve_missing_instance(self, wapulse_config):
        wapulse_config.instance_id = ""

        with pytest.raises(ConfigurationError) as exc_info:
            wapulse_config.resolve_credentials()

        assert "customInstanceID" in exc_info.value.message

    def test_resolve_without_instance_requirement(self, wapulse_config):
        wapulse_config.instance_id = ""

        token, instance_id = wapulse_config.resolve_credentials(require_instance=False)

        assert token == "default-token"
        assert instance_id is None


class TestBookingConfig:
    """Test cases for Medici configuration."""

    def test_resolve_token(self):
        config = BookingConfig(api_token="abc", base_url="https://medici.test", timeout=30)
        assert config.resolve_token() == "abc"

    def test_resolve_token_missing(self):
        config = BookingConfig(api_token="", base_url="https://medici.test", timeout=30)

        with pytest.raises(ConfigurationError) as exc_info:
            config.resolve_token()

        assert "MEDICI_API_TOKEN" in exc_info.value.message


class TestServerConfig:
    """Test cases for the process-wide configuration."""

    def test_from_env_without_api_keys(self, monkeypatch):
        monkeypatch.delenv("WAPULSE_MCP_API_KEY", raising=False)
        monkeypatch.delenv("WAPULSE_MCP_API_KEYS", raising=False)

        config = ServerConfig.from_env()

        assert config.api_key is None
        assert config.api_keys == {}

    def test_from_env_with_api_keys(self, monkeypatch):
        keys = {"key-1": {"id": "ops", "permissions": ["*"]}}
        monkeypatch.setenv("WAPULSE_MCP_API_KEY", "key-1")
        monkeypatch.setenv("WAPULSE_MCP_API_KEYS", json.dumps(keys))

        config = ServerConfig.from_env()

        assert config.api_key == "key-1"
        assert config.api_keys == keys

    def test_from_env_rejects_invalid_json(self, monkeypatch):
        monkeypatch.setenv("WAPULSE_MCP_API_KEYS", "{not json")

        with pytest.raises(ConfigurationError) as exc_info:
            ServerConfig.from_env()

        assert "not valid JSON" in exc_info.value.message

    def test_from_env_rejects_non_object(self, monkeypatch):
        monkeypatch.setenv("WAPULSE_MCP_API_KEYS", '["key-1"]')

        with pytest.raises(ConfigurationError):
            ServerConfig.from_env()


class TestErrors:
    """Test cases for the error hierarchy."""

    def test_default_codes(self):
        assert WapulseMCPError("x").error_code == "SERVER_ERROR"
        assert ValidationError("x").error_code == "INVALID_PARAMS"
        assert ConfigurationError("x").error_code == "INVALID_PARAMS"
        assert APIError("x").error_code == "API_ERROR"
        assert ToolExecutionError("x").error_code == "TOOL_EXECUTION_FAILED"

    def test_api_error_keeps_status(self):
        error = APIError("HTTP 404: Not Found", status_code=404, details={"endpoint": "/api/x"})

        assert error.status_code == 404
        assert error.details == {"endpoint": "/api/x"}
        assert str(error) == "HTTP 404: Not Found"
        assert isinstance(error, WapulseMCPError)


class TestParseDate:

    def test_valid_date(self):
        assert parse_date("2025-03-01") == "2025-03-01"

    @pytest.mark.parametrize("value", ["2025-13-01", "01/03/2025", "2025-02-30", ""])
    def test_invalid_date(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_date(value)

        assert "Expected YYYY-MM-DD" in exc_info.value.message
