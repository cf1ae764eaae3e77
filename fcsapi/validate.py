from typing import Any, Dict, Optional, Set
import logging

from .config import AuthMethod, FcsConfig

# Resource families a proxied request may target
ALLOWED_ENDPOINT_PREFIXES: Set[str] = {"forex/", "crypto/", "stock/"}

# Parameters only the client itself may set
RESERVED_PARAMS: Set[str] = {"access_key", "_token", "_expiry", "_public_key"}

SCALAR_TYPES = (str, int, float, bool)


def validate_config(config: FcsConfig) -> tuple[bool, Optional[str]]:
    """
    Check a configuration has what its auth method needs.

    The client never calls this itself; a missing key is normally reported
    by the API as a failed request. Call it to fail fast instead.

    Args:
        config: FcsConfig to check

    Returns:
        Tuple of (is_valid, error_message)
    """
    method = config.auth_method

    if method in (AuthMethod.ACCESS_KEY, AuthMethod.TOKEN) and not config.access_key:
        return False, f"access_key is required for auth method '{method.value}'"

    if method == AuthMethod.TOKEN:
        if not config.public_key:
            return False, "public_key is required for auth method 'token'"
        if not _is_positive_int(config.token_expiry):
            return False, "token_expiry must be a positive integer"

    for field in ("timeout", "connect_timeout"):
        if not _is_positive_int(getattr(config, field)):
            return False, f"{field} must be a positive integer"

    logging.debug(f"Config valid for auth method '{method.value}'")
    return True, None


def validate_proxy_payload(payload: Dict[str, Any]) -> tuple[bool, Optional[str]]:
    """
    Validate a proxied API request body.

    Expected shape: {"endpoint": "forex/latest", "params": {"symbol": "FX:EURUSD"}}

    Args:
        payload: The JSON body sent to the proxy

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(payload, dict):
        return False, "Request body must be a JSON object"

    endpoint = payload.get("endpoint")
    if not isinstance(endpoint, str) or not endpoint:
        return False, "Field 'endpoint' must be a non-empty string"

    if endpoint.startswith("/") or "://" in endpoint or ".." in endpoint:
        return False, "Field 'endpoint' must be a relative API path"

    if not any(endpoint.startswith(prefix) and len(endpoint) > len(prefix) for prefix in ALLOWED_ENDPOINT_PREFIXES):
        allowed = ", ".join(sorted(ALLOWED_ENDPOINT_PREFIXES))
        return False, f"Field 'endpoint' must start with one of: {allowed}"

    params = payload.get("params", {})
    if params is None:
        params = {}
    if not isinstance(params, dict):
        return False, "Field 'params' must be an object"

    reserved = RESERVED_PARAMS & params.keys()
    if reserved:
        return False, f"Reserved parameters not allowed: {', '.join(sorted(reserved))}"

    for key, value in params.items():
        if isinstance(value, list):
            if not all(isinstance(item, SCALAR_TYPES) for item in value):
                return False, f"Parameter '{key}' must be a scalar or a list of scalars"
        elif not isinstance(value, SCALAR_TYPES):
            return False, f"Parameter '{key}' must be a scalar or a list of scalars"

    return True, None


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
