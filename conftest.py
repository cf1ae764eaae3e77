"""
Configuration file for pytest.
"""
import sys
import os
import itertools
import json
from typing import Any, Callable
from unittest.mock import MagicMock, Mock, patch

import pytest

# Add the project root to Python path so tests can import modules
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for fake streamed requests.Response objects."""
    def _make(status_code: int = 200, body: Any = None, json_error: bool = False) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        content = b"<html>Bad Gateway</html>" if json_error else json.dumps(body).encode()
        # Whole body on one read, then end of stream; repeats if the response is reused
        reads = itertools.cycle([content, b""])
        response.raw.read1.side_effect = lambda *args, **kwargs: next(reads)
        return response

    return _make


@pytest.fixture
def mock_post() -> Mock:
    """Mock the requests.post function."""
    with patch('requests.post') as mock:
        yield mock
