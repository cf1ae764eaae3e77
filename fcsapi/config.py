"""
FCS API client configuration.

Authentication options:
    1. access_key   - Simple API key sent with every request
    2. ip_whitelist - No key needed if the server IP is whitelisted on the account
    3. token        - HMAC token derived from the access key (safe to hand to a frontend)
"""
from enum import Enum
from typing import Any, Dict, Union
import logging
import os


class AuthMethod(str, Enum):
    """Supported authentication methods."""

    ACCESS_KEY = "access_key"
    IP_WHITELIST = "ip_whitelist"
    TOKEN = "token"


DEFAULT_TOKEN_EXPIRY = 3600
DEFAULT_TIMEOUT = 30
DEFAULT_CONNECT_TIMEOUT = 5


class FcsConfig:
    """Connection and authentication settings, re-read on every request."""

    def __init__(
        self,
        auth_method: Union[AuthMethod, str] = AuthMethod.ACCESS_KEY,
        access_key: str = "",
        public_key: str = "",
        token_expiry: int = DEFAULT_TOKEN_EXPIRY,
        timeout: int = DEFAULT_TIMEOUT,
        connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    ):
        """
        Initialize configuration.

        Args:
            auth_method: One of AuthMethod (or its string value)
            access_key: Private API key (keep on the server)
            public_key: Public key, only used by token auth
            token_expiry: Token validity in seconds
            timeout: Whole-request timeout in seconds
            connect_timeout: Connection timeout in seconds

        Raises:
            ValueError: If auth_method is not a supported method
        """
        self.auth_method = auth_method
        self.access_key = access_key
        self.public_key = public_key
        self.token_expiry = token_expiry
        self.timeout = timeout
        self.connect_timeout = connect_timeout

    @property
    def auth_method(self) -> AuthMethod:
        return self._auth_method

    @auth_method.setter
    def auth_method(self, value: Union[AuthMethod, str]) -> None:
        try:
            self._auth_method = AuthMethod(value)
        except ValueError:
            allowed = ", ".join(m.value for m in AuthMethod)
            raise ValueError(f"Invalid auth method: {value!r}. Must be one of: {allowed}") from None

    @classmethod
    def with_access_key(cls, access_key: str) -> "FcsConfig":
        """Create config using access_key authentication."""
        return cls(auth_method=AuthMethod.ACCESS_KEY, access_key=access_key)

    @classmethod
    def with_ip_whitelist(cls) -> "FcsConfig":
        """Create config using IP whitelist authentication (no key needed)."""
        return cls(auth_method=AuthMethod.IP_WHITELIST)

    @classmethod
    def with_token(cls, access_key: str, public_key: str, token_expiry: int = DEFAULT_TOKEN_EXPIRY) -> "FcsConfig":
        """
        Create config using token-based authentication.

        Args:
            access_key: Private API key, used only to sign tokens
            public_key: Public key sent alongside each token
            token_expiry: Token validity in seconds
        """
        return cls(
            auth_method=AuthMethod.TOKEN,
            access_key=access_key,
            public_key=public_key,
            token_expiry=token_expiry,
        )

    @classmethod
    def from_env(cls, prefix: str = "FCS_") -> "FcsConfig":
        """
        Load configuration from environment variables.

        Reads {prefix}AUTH_METHOD, {prefix}ACCESS_KEY, {prefix}PUBLIC_KEY,
        {prefix}TOKEN_EXPIRY, {prefix}TIMEOUT and {prefix}CONNECT_TIMEOUT.
        Unset variables fall back to defaults. Missing keys are not an error;
        the API rejects the request instead.

        Args:
            prefix: Environment variable name prefix

        Returns:
            FcsConfig instance

        Raises:
            ValueError: If a numeric variable is not an integer or the auth method is unknown
        """
        config = cls(
            auth_method=os.getenv(f"{prefix}AUTH_METHOD", AuthMethod.ACCESS_KEY.value).strip().lower(),
            access_key=os.getenv(f"{prefix}ACCESS_KEY", ""),
            public_key=os.getenv(f"{prefix}PUBLIC_KEY", ""),
            token_expiry=_int_from_env(f"{prefix}TOKEN_EXPIRY", DEFAULT_TOKEN_EXPIRY),
            timeout=_int_from_env(f"{prefix}TIMEOUT", DEFAULT_TIMEOUT),
            connect_timeout=_int_from_env(f"{prefix}CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
        )
        logging.debug(f"Loaded FCS config from environment (auth_method={config.auth_method.value})")
        return config

    def get_auth_params(self) -> Dict[str, Any]:
        """Authentication parameters for the currently selected method."""
        from .auth import get_authenticator

        return get_authenticator(self).get_auth_params()

    def generate_token(self) -> Dict[str, Any]:
        """
        Generate a token for frontend use from the configured keys.

        Returns:
            {"_token": str, "_expiry": int, "_public_key": str}
        """
        from .auth import TokenAuthenticator

        return TokenAuthenticator(self.access_key, self.public_key, self.token_expiry).generate_token()

    def __repr__(self) -> str:
        # Keys are omitted so configs can be logged safely
        return (
            f"FcsConfig(auth_method={self.auth_method.value!r}, token_expiry={self.token_expiry}, "
            f"timeout={self.timeout}, connect_timeout={self.connect_timeout})"
        )


def _int_from_env(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable '{env_var}' must be an integer, got {raw!r}") from None
