"""
Unit tests for RequestOutcome classification.
"""
from fcsapi.outcome import RequestOutcome


class TestFromBody:
    """Test classification of decoded JSON bodies."""

    def test_status_true_succeeds(self) -> None:
        outcome = RequestOutcome.from_body(200, {"status": True, "msg": "Successfully", "response": [1, 2]})

        assert outcome.succeeded is True
        assert outcome.http_status_code == 200
        assert outcome.message == "Successfully"
        assert outcome.response_data == [1, 2]
        assert outcome.error_message is None

    def test_status_false_fails(self) -> None:
        outcome = RequestOutcome.from_body(200, {"status": False, "msg": "bad key"})

        assert outcome.succeeded is False
        assert outcome.message == "bad key"
        assert outcome.error_message == "bad key"
        assert outcome.response_data is None

    def test_missing_status_fails(self) -> None:
        """Test absence of status means failure even with HTTP 200."""
        outcome = RequestOutcome.from_body(200, {"response": {"a": 1}})

        assert outcome.succeeded is False
        assert outcome.error_message == "Unknown error"

    def test_truthy_non_boolean_status_fails(self) -> None:
        """Test only JSON true counts as success."""
        assert RequestOutcome.from_body(200, {"status": 1}).succeeded is False
        assert RequestOutcome.from_body(200, {"status": "true"}).succeeded is False

    def test_body_decides_over_http_status(self) -> None:
        outcome = RequestOutcome.from_body(500, {"status": True, "response": "ok"})

        assert outcome.succeeded is True
        assert outcome.http_status_code == 500

    def test_non_object_body(self) -> None:
        """Test a JSON array is kept as payload but is not a success."""
        outcome = RequestOutcome.from_body(200, [1, 2, 3])

        assert outcome.succeeded is False
        assert outcome.payload == [1, 2, 3]
        assert outcome.error_message == "Unknown error"

    def test_response_data_without_nesting(self) -> None:
        """Test whole payload is returned when there is no response key."""
        outcome = RequestOutcome.from_body(200, {"status": True, "data": "x"})

        assert outcome.response_data == {"status": True, "data": "x"}


class TestFailureOutcomes:
    """Test transport and decoding failure outcomes."""

    def test_transport_error(self) -> None:
        outcome = RequestOutcome.transport_error("Connection refused")

        assert outcome.succeeded is False
        assert outcome.http_status_code == 0
        assert "Connection refused" in outcome.message
        assert outcome.payload is None

    def test_invalid_json(self) -> None:
        outcome = RequestOutcome.invalid_json(502)

        assert outcome.succeeded is False
        assert outcome.http_status_code == 502
        assert outcome.message == "Invalid JSON response"
        assert outcome.payload is None

    def test_no_request(self) -> None:
        outcome = RequestOutcome.no_request()

        assert outcome.succeeded is False
        assert outcome.http_status_code == 0
        assert outcome.error_message == "Unknown error"


class TestToDict:
    """Test rendering in the API's response shape."""

    def test_body_returned_as_is(self) -> None:
        body = {"status": True, "code": 200, "msg": "Successfully", "response": {"a": 1}}

        assert RequestOutcome.from_body(200, body).to_dict() == body

    def test_transport_error_shape(self) -> None:
        assert RequestOutcome.transport_error("timed out").to_dict() == {
            "status": False,
            "code": 0,
            "msg": "Request error: timed out",
            "response": None,
        }

    def test_invalid_json_shape(self) -> None:
        assert RequestOutcome.invalid_json(200).to_dict() == {
            "status": False,
            "code": 200,
            "msg": "Invalid JSON response",
            "response": None,
        }
