"""
FCS API authentication strategies and token generation.
"""
from typing import Any, Dict, Mapping, Optional
import hashlib
import hmac
import logging
import time

from . import Authenticator
from .config import AuthMethod, DEFAULT_TOKEN_EXPIRY, FcsConfig


def compute_token_signature(access_key: str, public_key: str, expiry: int) -> str:
    """
    Sign public_key + expiry with the access key.

    The API recomputes the same HMAC to verify a token, so this must stay
    byte-compatible: hex HMAC-SHA256 of the public key immediately followed
    by the decimal expiry, keyed by the access key.

    Args:
        access_key: Private API key
        public_key: Public key
        expiry: Unix timestamp at which the token expires

    Returns:
        Lowercase hex digest
    """
    message = f"{public_key}{int(expiry)}"
    return hmac.new(access_key.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


class AccessKeyAuthenticator:
    """Send the access key with every request."""

    def __init__(self, access_key: str):
        self.access_key = access_key

    def get_auth_params(self) -> Dict[str, Any]:
        return {"access_key": self.access_key}


class IpWhitelistAuthenticator:
    """No credentials; the API authorizes by the caller's IP."""

    def get_auth_params(self) -> Dict[str, Any]:
        return {}


class TokenAuthenticator:
    """Generate short-lived HMAC tokens from an access key and public key."""

    def __init__(self, access_key: str, public_key: str, token_expiry: int = DEFAULT_TOKEN_EXPIRY):
        """
        Initialize token authenticator.

        Args:
            access_key: Private API key (never sent over the wire)
            public_key: Public key sent with each token
            token_expiry: Token validity in seconds
        """
        self.access_key = access_key
        self.public_key = public_key
        self.token_expiry = token_expiry

    def generate_token(self, now: Optional[int] = None) -> Dict[str, Any]:
        """
        Generate a fresh token.

        Tokens are never cached: every call signs a new expiry.

        Args:
            now: Unix timestamp to generate from (defaults to the current time)

        Returns:
            {"_token": str, "_expiry": int, "_public_key": str}
        """
        current_time = int(time.time()) if now is None else int(now)
        expiry = current_time + int(self.token_expiry)
        token = compute_token_signature(self.access_key, self.public_key, expiry)

        logging.debug(f"Generated FCS token (expires at {expiry})")
        return {
            "_token": token,
            "_expiry": expiry,
            "_public_key": self.public_key,
        }

    def get_auth_params(self) -> Dict[str, Any]:
        return self.generate_token()


def verify_token(access_key: str, token_data: Mapping[str, Any], now: Optional[int] = None) -> bool:
    """
    Check a token record the way the API does.

    Args:
        access_key: Private API key the token should have been signed with
        token_data: Record with _token, _expiry and _public_key
        now: Unix timestamp to check expiry against (defaults to the current time)

    Returns:
        True if the signature matches and the token has not expired
    """
    try:
        token = str(token_data["_token"])
        expiry = int(token_data["_expiry"])
        public_key = str(token_data["_public_key"])
    except (KeyError, TypeError, ValueError):
        return False

    current_time = int(time.time()) if now is None else int(now)
    if expiry < current_time:
        return False

    expected = compute_token_signature(access_key, public_key, expiry)
    return hmac.compare_digest(expected, token)


def get_authenticator(config: FcsConfig) -> Authenticator:
    """
    Build the authenticator for the config's current auth method.

    Called on every request so config changes take effect immediately.

    Args:
        config: FcsConfig instance

    Returns:
        Authenticator exposing get_auth_params()
    """
    method = config.auth_method
    if method == AuthMethod.IP_WHITELIST:
        return IpWhitelistAuthenticator()
    if method == AuthMethod.TOKEN:
        return TokenAuthenticator(config.access_key, config.public_key, config.token_expiry)
    return AccessKeyAuthenticator(config.access_key)
