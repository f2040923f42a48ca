"""
Unit tests for logging_utils and http_logging modules.
"""

import json
import logging
import os

import pytest
from unittest.mock import Mock, patch

from aiapi.utils import http_logging, logging_utils


class TestLoggingUtils:
    """Test cases for logging utilities."""

    @pytest.fixture(autouse=True)
    def detach_handlers(self):
        yield
        for channel in logging_utils.LOG_CHANNELS:
            logger = logging.getLogger(f"{logging_utils.ROOT_LOGGER_NAME}.{channel}")
            for handler in list(logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    handler.close()
                    logger.removeHandler(handler)

    def test_logger_names(self):
        assert logging_utils.get_client_logger("x").name == "aiapi.client.x"
        assert logging_utils.get_transport_logger("y").name == "aiapi.transport.y"

    @patch("aiapi.utils.logging_utils._loggers_initialized", False)
    @patch("aiapi.utils.logging_utils._log_folder", None)
    @patch("aiapi.utils.logging_utils._log_timestamp", None)
    @patch("aiapi.utils.logging_utils._child_loggers_setup", set())
    def test_init_logging_attaches_channel_files(self, tmp_path):
        log_folder = str(tmp_path / "logs")

        with patch("aiapi.utils.logging_utils.logging.basicConfig"):
            logging_utils.init_logging(debug=True, log_folder=log_folder)

        assert os.path.isdir(log_folder)
        client_logger = logging.getLogger("aiapi.client")
        file_handlers = [h for h in client_logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        # Files open on the first record
        assert os.listdir(log_folder) == []

        logging_utils.get_client_logger("test").info("first record")
        file_handlers[0].flush()

        log_files = os.listdir(log_folder)
        assert len(log_files) == 1
        assert log_files[0].startswith("client_")

    @patch("aiapi.utils.logging_utils._loggers_initialized", False)
    @patch("aiapi.utils.logging_utils._log_folder", None)
    @patch("aiapi.utils.logging_utils._log_timestamp", None)
    @patch("aiapi.utils.logging_utils._child_loggers_setup", set())
    def test_init_logging_is_idempotent(self):
        with patch("aiapi.utils.logging_utils.logging.basicConfig") as mock_basic_config:
            logging_utils.init_logging()
            logging_utils.init_logging(debug=True)

        mock_basic_config.assert_called_once()
        assert logging.getLogger("aiapi").level == logging.INFO

    @patch("aiapi.utils.logging_utils._loggers_initialized", False)
    @patch("aiapi.utils.logging_utils._log_folder", None)
    @patch("aiapi.utils.logging_utils._log_timestamp", None)
    @patch("aiapi.utils.logging_utils._child_loggers_setup", set())
    def test_no_files_without_log_folder(self):
        with patch("aiapi.utils.logging_utils.logging.basicConfig"):
            logging_utils.init_logging()

        client_logger = logging.getLogger("aiapi.transport")
        assert not [h for h in client_logger.handlers if isinstance(h, logging.FileHandler)]


class TestHttpLogging:
    """Test cases for HTTP dumps."""

    def test_redact_headers(self):
        headers = {"Authorization": "Bearer sk-1", "X-API-Key": "sk-ant", "Content-Type": "application/json"}
        assert http_logging.redact_headers(headers) == {
            "Authorization": "***",
            "X-API-Key": "***",
            "Content-Type": "application/json",
        }

    def test_redact_params(self):
        assert http_logging.redact_params({"key": "g-key", "alt": "json"}) == {"key": "***", "alt": "json"}
        assert http_logging.redact_params(None) == {}

    def test_dump_request_hides_credentials(self):
        logger = Mock()
        http_logging.dump_http_request(
            logger,
            "trace-1",
            "post",
            "https://example.com/v1/models/gemini-pro:generateContent",
            {"x-api-key": "sk-secret"},
            b'{"contents": []}',
            {"key": "g-secret"},
        )

        message = logger.info.call_args.args[0]
        assert message.startswith("HTTP_REQUEST[trace-1]:")
        assert "sk-secret" not in message
        assert "g-secret" not in message
        data = json.loads(message.split(":\n", 1)[1])
        assert data["method"] == "POST"
        assert data["payload"] == {"contents": []}

    def test_dump_response_with_non_json_payload(self):
        logger = Mock()
        http_logging.dump_http_response(logger, "trace-2", 502, {}, b"<html>Bad Gateway</html>", "https://x")

        message = logger.info.call_args.args[0]
        assert message.startswith("HTTP_RESPONSE[trace-2]:")
        data = json.loads(message.split(":\n", 1)[1])
        assert data["status_code"] == 502
        assert data["payload"] == "<html>Bad Gateway</html>"
        assert data["url"] == "https://x"
