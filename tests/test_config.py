"""
Unit tests for FCS API configuration.
"""
import pytest
import os
from unittest.mock import patch

from fcsapi.config import AuthMethod, FcsConfig


class TestFcsConfig:
    """Test FcsConfig class."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = FcsConfig()

        assert config.auth_method == AuthMethod.ACCESS_KEY
        assert config.access_key == ""
        assert config.public_key == ""
        assert config.token_expiry == 3600
        assert config.timeout == 30
        assert config.connect_timeout == 5

    def test_with_access_key(self) -> None:
        config = FcsConfig.with_access_key("K1")

        assert config.auth_method == AuthMethod.ACCESS_KEY
        assert config.access_key == "K1"

    def test_with_ip_whitelist(self) -> None:
        config = FcsConfig.with_ip_whitelist()

        assert config.auth_method == AuthMethod.IP_WHITELIST
        assert config.access_key == ""

    def test_with_token(self) -> None:
        config = FcsConfig.with_token("secret", "pub123", 300)

        assert config.auth_method == AuthMethod.TOKEN
        assert config.access_key == "secret"
        assert config.public_key == "pub123"
        assert config.token_expiry == 300

    def test_with_token_default_expiry(self) -> None:
        config = FcsConfig.with_token("secret", "pub123")

        assert config.token_expiry == 3600

    def test_auth_method_accepts_string_value(self) -> None:
        """Test auth method can be set by its string value."""
        config = FcsConfig()
        config.auth_method = "ip_whitelist"

        assert config.auth_method is AuthMethod.IP_WHITELIST

    def test_auth_method_rejects_unknown_value(self) -> None:
        """Test auth method cannot leave the supported set."""
        config = FcsConfig()

        with pytest.raises(ValueError, match="Invalid auth method"):
            config.auth_method = "oauth"

        # Previous value is kept
        assert config.auth_method == AuthMethod.ACCESS_KEY

    def test_constructor_rejects_unknown_auth_method(self) -> None:
        with pytest.raises(ValueError, match="Invalid auth method"):
            FcsConfig(auth_method="basic")

    def test_repr_hides_keys(self) -> None:
        """Test repr never exposes the access key."""
        config = FcsConfig.with_token("super-secret", "pub123")

        assert "super-secret" not in repr(config)
        assert "token" in repr(config)

    def test_get_auth_params_follows_method(self) -> None:
        """Test auth params are derived from the current method."""
        config = FcsConfig.with_access_key("K1")
        assert config.get_auth_params() == {"access_key": "K1"}

        config.auth_method = AuthMethod.IP_WHITELIST
        assert config.get_auth_params() == {}

    def test_generate_token(self) -> None:
        config = FcsConfig.with_token("secret", "pub123", 300)

        with patch('fcsapi.auth.time.time', return_value=1000.0):
            token_data = config.generate_token()

        assert token_data["_expiry"] == 1300
        assert token_data["_public_key"] == "pub123"
        assert len(token_data["_token"]) == 64


class TestFcsConfigFromEnv:
    """Test loading configuration from environment variables."""

    def test_from_env_defaults(self) -> None:
        """Test unset variables fall back to defaults."""
        with patch.dict(os.environ, {}, clear=True):
            config = FcsConfig.from_env()

        assert config.auth_method == AuthMethod.ACCESS_KEY
        assert config.access_key == ""
        assert config.token_expiry == 3600
        assert config.timeout == 30
        assert config.connect_timeout == 5

    def test_from_env_token(self) -> None:
        env = {
            "FCS_AUTH_METHOD": "Token",
            "FCS_ACCESS_KEY": "secret",
            "FCS_PUBLIC_KEY": "pub123",
            "FCS_TOKEN_EXPIRY": "900",
            "FCS_TIMEOUT": "10",
            "FCS_CONNECT_TIMEOUT": "2",
        }
        with patch.dict(os.environ, env, clear=True):
            config = FcsConfig.from_env()

        assert config.auth_method == AuthMethod.TOKEN
        assert config.access_key == "secret"
        assert config.public_key == "pub123"
        assert config.token_expiry == 900
        assert config.timeout == 10
        assert config.connect_timeout == 2

    def test_from_env_custom_prefix(self) -> None:
        with patch.dict(os.environ, {"MY_ACCESS_KEY": "abc"}, clear=True):
            config = FcsConfig.from_env(prefix="MY_")

        assert config.access_key == "abc"

    def test_from_env_invalid_integer(self) -> None:
        """Test error names the offending variable."""
        with patch.dict(os.environ, {"FCS_TIMEOUT": "thirty"}, clear=True):
            with pytest.raises(ValueError, match="FCS_TIMEOUT"):
                FcsConfig.from_env()

    def test_from_env_invalid_auth_method(self) -> None:
        with patch.dict(os.environ, {"FCS_AUTH_METHOD": "password"}, clear=True):
            with pytest.raises(ValueError, match="Invalid auth method"):
                FcsConfig.from_env()

    def test_from_env_missing_key_is_not_an_error(self) -> None:
        """Test missing keys are left for the API to reject."""
        with patch.dict(os.environ, {"FCS_AUTH_METHOD": "token"}, clear=True):
            config = FcsConfig.from_env()

        assert config.auth_method == AuthMethod.TOKEN
        assert config.access_key == ""
        assert config.public_key == ""
