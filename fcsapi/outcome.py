"""
Normalized result of a single FCS API request.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

INVALID_JSON_MESSAGE = "Invalid JSON response"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


@dataclass(frozen=True)
class RequestOutcome:
    """
    Outcome of one request.

    Attributes:
        succeeded: True only if the transport worked, the body was JSON and
            the body's own "status" is true
        http_status_code: Observed HTTP status, 0 if the transport failed
        message: Status or error text ("msg" from the body when present)
        payload: Decoded JSON body, None on transport or decoding failure
    """

    succeeded: bool
    http_status_code: int
    message: str
    payload: Any = None

    @classmethod
    def no_request(cls) -> "RequestOutcome":
        """Placeholder held by a client before its first request."""
        return cls(succeeded=False, http_status_code=0, message="", payload=None)

    @classmethod
    def transport_error(cls, error: str) -> "RequestOutcome":
        return cls(succeeded=False, http_status_code=0, message=f"Request error: {error}", payload=None)

    @classmethod
    def invalid_json(cls, status_code: int) -> "RequestOutcome":
        return cls(succeeded=False, http_status_code=status_code, message=INVALID_JSON_MESSAGE, payload=None)

    @classmethod
    def from_body(cls, status_code: int, body: Any) -> "RequestOutcome":
        """
        Classify a decoded JSON body.

        Success is decided by the body, not the HTTP status: the API
        reports errors as {"status": false, "msg": ...} even with a 200.

        Args:
            status_code: Observed HTTP status code
            body: Decoded JSON value

        Returns:
            RequestOutcome adopting the body as payload
        """
        if not isinstance(body, dict):
            return cls(succeeded=False, http_status_code=status_code, message="", payload=body)

        msg = body.get("msg")
        return cls(
            succeeded=body.get("status") is True,
            http_status_code=status_code,
            message="" if msg is None else str(msg),
            payload=body,
        )

    @property
    def response_data(self) -> Any:
        """The nested "response" value of a successful call (or the whole payload if not nested)."""
        if not self.succeeded:
            return None
        if isinstance(self.payload, dict) and "response" in self.payload:
            return self.payload["response"]
        return self.payload

    @property
    def error_message(self) -> Optional[str]:
        if self.succeeded:
            return None
        return self.message or UNKNOWN_ERROR_MESSAGE

    def to_dict(self) -> Dict[str, Any]:
        """
        Render in the API's own response shape.

        A decoded JSON object is returned as-is; transport and decoding
        failures produce {"status": False, "code": ..., "msg": ..., "response": None}.
        """
        if isinstance(self.payload, dict):
            return dict(self.payload)
        return {
            "status": False,
            "code": self.http_status_code,
            "msg": self.error_message,
            "response": self.payload,
        }
