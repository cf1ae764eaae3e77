"""
FCS API client package.

Forex, cryptocurrency and stock market data over an authenticated REST API.
"""
from typing import Protocol, Dict, Any


class Authenticator(Protocol):
    """Protocol defining the interface for request authenticators."""

    def get_auth_params(self) -> Dict[str, Any]:
        """
        Get parameters to merge into every API request.

        Returns:
            Dictionary of authentication parameters (may be empty)
        """
        ...


# Re-export the public API for easy imports
from .config import AuthMethod, FcsConfig
from .auth import (
    AccessKeyAuthenticator,
    IpWhitelistAuthenticator,
    TokenAuthenticator,
    compute_token_signature,
    get_authenticator,
    verify_token,
)
from .outcome import RequestOutcome
from .client import FcsApi, FcsApiError, build_form_fields
from .validate import validate_config, validate_proxy_payload

__all__ = [
    'Authenticator',
    'AuthMethod',
    'FcsConfig',
    'AccessKeyAuthenticator',
    'IpWhitelistAuthenticator',
    'TokenAuthenticator',
    'compute_token_signature',
    'get_authenticator',
    'verify_token',
    'RequestOutcome',
    'FcsApi',
    'FcsApiError',
    'build_form_fields',
    'validate_config',
    'validate_proxy_payload',
]
