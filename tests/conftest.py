"""Shared fixtures for unit tests."""

import json

import pytest
from unittest.mock import Mock

from aiapi.transport import HttpTransport, TransportResponse


def _json_reply(payload, status_code=200):
    return TransportResponse(
        status_code=status_code,
        headers={"Content-Type": "application/json"},
        body=json.dumps(payload).encode("utf-8"),
    )


@pytest.fixture
def json_reply():
    """Factory building a TransportResponse that carries a JSON body."""
    return _json_reply


@pytest.fixture
def mock_transport():
    """Create a mock transport that answers with an OpenAI-style success."""
    transport = Mock(spec=HttpTransport)
    transport.post.return_value = _json_reply(
        {"choices": [{"message": {"content": "hi"}}], "model": "x"}
    )
    return transport
