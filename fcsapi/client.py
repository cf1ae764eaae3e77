"""
FCS API REST client.

Sends authenticated form-encoded POST requests and classifies each result
into a RequestOutcome.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
import json
import logging
import os
import time

import requests
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from .auth import get_authenticator
from .config import FcsConfig
from .endpoints import Crypto, Forex, Stock
from .outcome import RequestOutcome

REQUEST_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
    "Accept": "application/json",
    "Accept-Encoding": "gzip, deflate",
}

# Largest body slice taken per socket read while streaming
READ_CHUNK_SIZE = 64 * 1024


class FcsApiError(Exception):
    """Raised for failed requests when the client is created with raise_errors=True."""

    def __init__(self, outcome: RequestOutcome):
        super().__init__(outcome.error_message)
        self.outcome = outcome


def build_form_fields(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten request parameters into form fields.

    Follows the encoding the API expects from PHP clients: None values are
    dropped, booleans become 1/0, lists become key[0], key[1], ... and
    nested mappings become key[sub].

    Args:
        params: Request parameters

    Returns:
        List of (name, value) pairs, in insertion order

    Examples:
        >>> build_form_fields({"url": ["a", "b"], "fallback": True})
        [('url[0]', 'a'), ('url[1]', 'b'), ('fallback', '1')]
    """
    fields: List[Tuple[str, str]] = []
    for key, value in params.items():
        _append_field(fields, str(key), value)
    return fields


def _append_field(fields: List[Tuple[str, str]], name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool):
        fields.append((name, "1" if value else "0"))
    elif isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _append_field(fields, f"{name}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _append_field(fields, f"{name}[{index}]", item)
    elif isinstance(value, float) and value.is_integer():
        fields.append((name, str(int(value))))
    else:
        fields.append((name, str(value)))


class FcsApi:
    """
    Client for the FCS forex, crypto and stock API.

    Every call returns its own RequestOutcome. The client also keeps the
    most recent outcome for the get_*/is_success accessors; that slot holds
    whichever call finished last, so share one client per caller rather
    than across threads if you rely on it.

    Usage:
        api = FcsApi("YOUR_ACCESS_KEY")
        outcome = api.forex.get_latest_price("FX:EURUSD")
        if outcome.succeeded:
            print(outcome.response_data)
    """

    BASE_URL = "https://api-v4.fcsapi.com/"

    def __init__(
        self,
        config: Union[FcsConfig, str, None] = None,
        raise_errors: bool = False,
        base_url: Optional[str] = None,
    ):
        """
        Initialize the client.

        Args:
            config: FcsConfig, an access key string, or None to load from environment
            raise_errors: Raise FcsApiError for failed requests instead of only returning them
            base_url: Override the API base URL (for testing)
        """
        if isinstance(config, FcsConfig):
            self.config = config
        elif isinstance(config, str):
            self.config = FcsConfig.with_access_key(config)
        else:
            self.config = FcsConfig.from_env()

        if base_url is None:
            base_url = os.getenv("FCS_API_BASE_URL", self.BASE_URL)
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.raise_errors = raise_errors
        self._last_outcome = RequestOutcome.no_request()

        self.forex = Forex(self)
        self.crypto = Crypto(self)
        self.stock = Stock(self)

    def set_timeout(self, seconds: int) -> "FcsApi":
        """Set the whole-request timeout in seconds (connect plus the full body read)."""
        self.config.timeout = seconds
        return self

    def get_config(self) -> FcsConfig:
        return self.config

    def generate_token(self) -> Dict[str, Any]:
        """
        Generate a token to hand to a frontend.

        The frontend sends _token, _expiry and _public_key as request
        parameters and never sees the access key.

        Returns:
            {"_token": str, "_expiry": int, "_public_key": str}
        """
        return self.config.generate_token()

    def request(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> RequestOutcome:
        """
        Make an authenticated API request.

        Auth parameters are merged over the caller's parameters, so they
        win on key collisions.

        Args:
            endpoint: Path relative to the base URL (e.g. "forex/latest")
            params: Request parameters

        Returns:
            RequestOutcome for this call

        Raises:
            ValueError: If endpoint is empty
            FcsApiError: If the request failed and raise_errors is enabled
        """
        path = endpoint.strip().lstrip("/") if endpoint else ""
        if not path:
            raise ValueError("endpoint must be a non-empty path")

        auth_params = get_authenticator(self.config).get_auth_params()
        merged: Dict[str, Any] = {**(params or {}), **auth_params}

        url = f"{self.base_url}{path}"
        logging.debug(f"FCS API request: POST {url} (auth_method={self.config.auth_method.value}, "
                      f"params={sorted(k for k in merged if k not in auth_params)})")

        timeout = self.config.timeout
        deadline = time.monotonic() + timeout
        try:
            response = requests.post(
                url,
                data=build_form_fields(merged),
                headers=REQUEST_HEADERS,
                timeout=(self.config.connect_timeout, timeout),
                allow_redirects=True,
                verify=True,
                stream=True,
            )
            try:
                content = self._read_body(response, deadline)
            finally:
                response.close()
        except (requests.RequestException, Urllib3HTTPError) as e:
            if time.monotonic() >= deadline:
                outcome = self._timed_out(path, timeout)
            else:
                logging.warning(f"FCS API transport error for {path}: {e}")
                outcome = RequestOutcome.transport_error(str(e))
        else:
            if content is None:
                outcome = self._timed_out(path, timeout)
            else:
                outcome = self._classify_response(path, response.status_code, content)

        self._last_outcome = outcome

        if self.raise_errors and not outcome.succeeded:
            raise FcsApiError(outcome)
        return outcome

    # Alias
    execute = request

    @staticmethod
    def _read_body(response: requests.Response, deadline: float) -> Optional[bytes]:
        """
        Read a streamed response body against a total deadline.

        Each socket read is capped at the time left, and read1 returns as
        soon as any bytes arrive, so a server dripping bytes cannot hold the
        call open past the deadline.

        Returns:
            The decoded body bytes, or None once the deadline has passed
        """
        chunks: List[bytes] = []
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return None

            connection = response.raw.connection
            if connection is not None and connection.sock is not None:
                connection.sock.settimeout(remaining)

            chunk = response.raw.read1(READ_CHUNK_SIZE, decode_content=True)
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    @staticmethod
    def _timed_out(path: str, timeout: int) -> RequestOutcome:
        logging.warning(f"FCS API request to {path} exceeded the {timeout}s timeout")
        return RequestOutcome.transport_error(f"Operation timed out after {timeout} seconds")

    def _classify_response(self, path: str, status_code: int, content: bytes) -> RequestOutcome:
        try:
            body = json.loads(content)
        except ValueError:
            logging.warning(f"FCS API returned non-JSON body for {path} (HTTP {status_code})")
            return RequestOutcome.invalid_json(status_code)

        if body is None:
            logging.warning(f"FCS API returned null body for {path} (HTTP {status_code})")
            return RequestOutcome.invalid_json(status_code)

        outcome = RequestOutcome.from_body(status_code, body)
        if outcome.succeeded:
            logging.info(f"FCS API {path} succeeded (HTTP {status_code})")
        else:
            logging.warning(f"FCS API {path} failed (HTTP {status_code}): {outcome.error_message}")
        return outcome

    def get_last_outcome(self) -> RequestOutcome:
        return self._last_outcome

    def get_last_response(self) -> Dict[str, Any]:
        """Last response in the API's own shape ({} before any request)."""
        if self._last_outcome == RequestOutcome.no_request():
            return {}
        return self._last_outcome.to_dict()

    def get_response_data(self) -> Any:
        return self._last_outcome.response_data

    def is_success(self) -> bool:
        return self._last_outcome.succeeded

    def get_error(self) -> Optional[str]:
        return self._last_outcome.error_message
