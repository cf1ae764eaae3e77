import azure.functions as func
import json
import logging
import os
from typing import Any, Dict, Optional

from fcsapi import AuthMethod, FcsApi, FcsConfig, validate_config, validate_proxy_payload

app = func.FunctionApp()

# Get password from environment (if empty, no password check needed)
PROXY_PASSWORD = os.getenv("FCS_PROXY_PASSWORD", "")

# Shared client (loaded lazily from FCS_* environment variables)
_client: Optional[FcsApi] = None


def get_client() -> FcsApi:
    """
    Get or create the global FcsApi client.

    Returns:
        FcsApi instance

    Raises:
        ValueError: If the environment configuration is invalid
    """
    global _client

    if _client is None:
        config = FcsConfig.from_env()
        _client = FcsApi(config)
        logging.info(f"Initialized FCS API client: {config!r}")

    return _client


def check_password(req: func.HttpRequest) -> tuple[bool, Optional[str]]:
    """
    Check if the request has the correct password.

    Args:
        req: HTTP request object

    Returns:
        Tuple of (is_valid, error_message)
    """
    # If no password is configured, allow all requests
    if not PROXY_PASSWORD:
        return True, None

    auth_header = req.headers.get('Authorization')
    if auth_header and auth_header.startswith('Bearer '):
        if auth_header[7:] == PROXY_PASSWORD:
            return True, None

    if req.headers.get('X-Proxy-Password') == PROXY_PASSWORD:
        return True, None

    if req.params.get('password') == PROXY_PASSWORD:
        return True, None

    return False, "Unauthorized: Invalid or missing password"


def _json_response(body: Dict[str, Any], status_code: int) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(body), status_code=status_code, mimetype="application/json")


def handle_token_request(req: func.HttpRequest) -> func.HttpResponse:
    """Mint a token a browser can send to the API without holding the access key."""
    password_valid, password_error = check_password(req)
    if not password_valid:
        logging.warning(f"Password check failed: {password_error}")
        return _json_response({"error": password_error}, 401)

    try:
        client = get_client()
    except ValueError as e:
        logging.error(f"Invalid FCS configuration: {e}")
        return _json_response({"error": str(e)}, 500)

    config = client.get_config()
    if config.auth_method != AuthMethod.TOKEN:
        error = f"Token minting requires auth method 'token', configured: {config.auth_method.value}"
        logging.error(f"Cannot mint token: {error}")
        return _json_response({"error": error}, 400)

    config_valid, config_error = validate_config(config)
    if not config_valid:
        logging.error(f"Cannot mint token: {config_error}")
        return _json_response({"error": config_error}, 400)

    token_data = client.generate_token()
    logging.info(f"Issued frontend token (expires at {token_data['_expiry']})")
    return _json_response(token_data, 200)


def handle_proxy_request(req: func.HttpRequest) -> func.HttpResponse:
    """Forward {endpoint, params} to the API with server-side credentials."""
    password_valid, password_error = check_password(req)
    if not password_valid:
        logging.warning(f"Password check failed: {password_error}")
        return _json_response({"error": password_error}, 401)

    try:
        req_body: Dict[str, Any] = req.get_json()
    except ValueError as e:
        logging.error(f"Invalid JSON payload: {e}")
        return _json_response({"error": "Invalid JSON payload"}, 400)

    payload_valid, payload_error = validate_proxy_payload(req_body)
    if not payload_valid:
        logging.error(f"Payload validation failed: {payload_error}")
        return _json_response({"error": payload_error}, 400)

    try:
        client = get_client()
    except ValueError as e:
        logging.error(f"Invalid FCS configuration: {e}")
        return _json_response({"error": str(e)}, 500)

    endpoint = req_body["endpoint"]
    outcome = client.request(endpoint, req_body.get("params") or {})
    if not outcome.succeeded:
        logging.warning(f"Proxied request to {endpoint} failed: {outcome.error_message}")
        return _json_response(outcome.to_dict(), 502)

    return _json_response(outcome.to_dict(), 200)


@app.route(route="fcsToken", methods=["GET", "POST"], auth_level=func.AuthLevel.ANONYMOUS)
def fcsToken(req: func.HttpRequest) -> func.HttpResponse:
    logging.info('FCS token request received')
    return handle_token_request(req)


@app.route(route="fcsProxy", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
def fcsProxy(req: func.HttpRequest) -> func.HttpResponse:
    logging.info('FCS proxy request received')
    return handle_proxy_request(req)
