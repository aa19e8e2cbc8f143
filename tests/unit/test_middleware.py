"""Unit tests for middleware components"""
import uuid
from unittest.mock import Mock

import pytest

from src.middlewares.correlation_id import CorrelationIdMiddleware
from src.utils.correlation_id import (
    extract_correlation_id_from_headers,
    get_correlation_id,
    set_correlation_id,
)


class MockRequest:
    def __init__(self, headers):
        self.headers = headers
        self.state = Mock()


class TestCorrelationIdMiddleware:
    """Test CorrelationIdMiddleware functionality"""

    @pytest.mark.asyncio
    async def test_correlation_id_from_header(self):
        """Test extracting correlation ID from request header"""
        middleware = CorrelationIdMiddleware(Mock())
        request = MockRequest({"X-Correlation-ID": "test-correlation-123"})
        captured_id = None

        async def call_next(req):
            nonlocal captured_id
            captured_id = get_correlation_id()
            response = Mock()
            response.headers = {}
            return response

        response = await middleware.dispatch(request, call_next)

        assert captured_id == "test-correlation-123"
        assert response.headers["x-correlation-id"] == "test-correlation-123"

    @pytest.mark.asyncio
    async def test_correlation_id_generated(self):
        """Test generating new correlation ID when not provided"""
        middleware = CorrelationIdMiddleware(Mock())
        generated_id = None

        async def call_next(req):
            nonlocal generated_id
            generated_id = get_correlation_id()
            response = Mock()
            response.headers = {}
            return response

        response = await middleware.dispatch(MockRequest({}), call_next)

        assert response.headers["x-correlation-id"] == generated_id
        assert uuid.UUID(generated_id)


class TestCorrelationIdUtils:
    def test_set_and_get_correlation_id(self):
        set_correlation_id("test-correlation-456")

        assert get_correlation_id() == "test-correlation-456"

    def test_get_generates_when_unset(self):
        set_correlation_id("")

        assert uuid.UUID(get_correlation_id())

    def test_header_lookup_is_case_insensitive(self):
        assert extract_correlation_id_from_headers({"X-CORRELATION-ID": "abc"}) == "abc"
