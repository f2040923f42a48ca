"""Unit tests for transport.py - HttpTransport."""

import pytest
import requests
from unittest.mock import Mock, patch

from aiapi.transport import HttpTransport, TransportResponse


def _response(status_code=200, content=b'{"ok": true}'):
    response = Mock()
    response.status_code = status_code
    response.headers = {"Content-Type": "application/json"}
    response.content = content
    return response


class TestHttpTransport:
    """Test cases for HttpTransport.post."""

    @patch("aiapi.transport.requests.post")
    def test_post_success(self, mock_post):
        mock_post.return_value = _response()

        reply = HttpTransport(timeout=12).post(
            "https://api.example.com/v1/chat/completions",
            {"Content-Type": "application/json"},
            b'{"model": "gpt-4"}',
        )

        assert reply == TransportResponse(
            status_code=200,
            headers={"Content-Type": "application/json"},
            body=b'{"ok": true}',
        )
        assert reply.failed is False
        mock_post.assert_called_once_with(
            "https://api.example.com/v1/chat/completions",
            headers={"Content-Type": "application/json"},
            data=b'{"model": "gpt-4"}',
            params=None,
            timeout=12,
        )

    @patch("aiapi.transport.requests.post")
    def test_post_passes_query_params(self, mock_post):
        mock_post.return_value = _response()

        HttpTransport().post("https://x", {}, b"{}", {"key": "g-key"}, trace_id="t1")

        assert mock_post.call_args.kwargs["params"] == {"key": "g-key"}

    @patch("aiapi.transport.requests.post")
    def test_error_status_is_returned_not_raised(self, mock_post):
        mock_post.return_value = _response(401, b'{"error": {"message": "bad key"}}')

        reply = HttpTransport().post("https://x", {}, b"{}")

        assert reply.status_code == 401
        assert reply.error is None

    @pytest.mark.parametrize(
        "error",
        [
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.Timeout("slow"),
        ],
    )
    @patch("aiapi.transport.requests.post")
    def test_transport_failure_is_captured(self, mock_post, error):
        mock_post.side_effect = error

        reply = HttpTransport().post("https://x", {}, b"{}")

        assert reply.failed is True
        assert reply.error is error
        assert reply.status_code is None

    def test_uses_session_when_given(self):
        session = Mock(spec=requests.Session)
        session.post.return_value = _response()

        HttpTransport(session=session).post("https://x", {}, b"{}")

        session.post.assert_called_once()
