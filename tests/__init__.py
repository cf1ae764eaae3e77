"""
Test suite for the FCS API client.

Run all tests from project root:
    pytest
    pytest tests/
    pytest tests/test_endpoints/

Run specific test file:
    pytest tests/test_client.py
    pytest tests/test_auth.py

Run with coverage:
    pytest --cov=fcsapi --cov-report=html
"""
