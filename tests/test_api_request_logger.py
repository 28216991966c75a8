"""Tests for API request logger."""

from unittest.mock import patch

import pytest

from njt_departures.adapters.api_request_logger import (
    log_api_request,
    should_log_requests,
)

BOARD_URL = "http://dv.njtransit.com/mobile/tid-mobile.aspx?SID=NP&SORT=A"


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given NJT_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("NJT_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_then_returns_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given NJT_LOG_REQUESTS=true, when checking, then returns True."""
        monkeypatch.setenv("NJT_LOG_REQUESTS", "true")

        assert should_log_requests() is True

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given NJT_LOG_REQUESTS=True (capitalized), when checking, then returns True."""
        monkeypatch.setenv("NJT_LOG_REQUESTS", "True")

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given NJT_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("NJT_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("njt_departures.adapters.api_request_logger.should_log_requests")
    @patch("njt_departures.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", BOARD_URL)

        mock_logger.info.assert_not_called()

    @patch("njt_departures.adapters.api_request_logger.should_log_requests")
    @patch("njt_departures.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_method_and_url(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled, when calling with method and URL, then logs them."""
        mock_should_log.return_value = True

        log_api_request("GET", BOARD_URL)

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args[0][0]
        assert f"GET {BOARD_URL}" in call_args
        assert "Headers:" not in call_args

    @patch("njt_departures.adapters.api_request_logger.should_log_requests")
    @patch("njt_departures.adapters.api_request_logger.logger")
    def test_when_logging_enabled_with_headers_then_logs_headers(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled with headers, when calling, then logs headers."""
        mock_should_log.return_value = True

        log_api_request("GET", BOARD_URL, headers={"User-Agent": "Mozilla/5.0"})

        call_args = mock_logger.info.call_args[0][0]
        assert "Headers:" in call_args
        assert "User-Agent" in call_args
        assert "Mozilla/5.0" in call_args

    @pytest.mark.parametrize(
        ("header", "value"),
        [("Authorization", "Bearer secret-token"), ("Cookie", "session=abc123")],
    )
    @patch("njt_departures.adapters.api_request_logger.should_log_requests")
    @patch("njt_departures.adapters.api_request_logger.logger")
    def test_when_logging_sensitive_header_then_redacts_it(
        self, mock_logger: object, mock_should_log: object, header: str, value: str
    ) -> None:
        """Given a sensitive header, when logging, then redacts the value."""
        mock_should_log.return_value = True

        log_api_request("GET", BOARD_URL, headers={header: value})

        call_args = mock_logger.info.call_args[0][0]
        assert header in call_args
        assert "***REDACTED***" in call_args
        assert value not in call_args
