"""Tests for API request logger."""

from unittest.mock import patch

import pytest

from zbiorkom_departures.adapters.api_request_logger import (
    log_api_request,
    should_log_requests,
)

URL = "https://api.zbiorkom.live/4.8/kielce/stops/getDepartures?id=dworzec-kolejowy102&limit=10"


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given ZBIORKOM_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("ZBIORKOM_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_set_to_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given ZBIORKOM_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("ZBIORKOM_LOG_REQUESTS", value)

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given ZBIORKOM_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("ZBIORKOM_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("zbiorkom_departures.adapters.api_request_logger.should_log_requests")
    @patch("zbiorkom_departures.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", URL)

        mock_logger.info.assert_not_called()

    @patch("zbiorkom_departures.adapters.api_request_logger.should_log_requests")
    @patch("zbiorkom_departures.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_method_url_and_params(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled, when calling, then logs the request line and its params."""
        mock_should_log.return_value = True

        log_api_request("GET", URL)

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args[0][0]
        assert f"GET {URL}" in call_args
        assert "Params:" in call_args
        assert '"limit": "10"' in call_args

    @patch("zbiorkom_departures.adapters.api_request_logger.should_log_requests")
    @patch("zbiorkom_departures.adapters.api_request_logger.logger")
    def test_when_url_has_no_query_then_omits_params(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given a URL without query string, when logging, then no params section is written."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api")

        call_args = mock_logger.info.call_args[0][0]
        assert "Params:" not in call_args

    @pytest.mark.parametrize(
        ("header", "secret"),
        [
            ("Authorization", "Bearer secret-token"),
            ("Cookie", "session=abc123"),
            ("X-API-Key", "secret-key"),
        ],
    )
    @patch("zbiorkom_departures.adapters.api_request_logger.should_log_requests")
    @patch("zbiorkom_departures.adapters.api_request_logger.logger")
    def test_when_logging_sensitive_header_then_redacts_it(
        self, mock_logger: object, mock_should_log: object, header: str, secret: str
    ) -> None:
        """Given a sensitive header, when logging, then its value is redacted."""
        mock_should_log.return_value = True

        log_api_request("GET", URL, headers={header: secret, "Accept": "application/json"})

        call_args = mock_logger.info.call_args[0][0]
        assert header in call_args
        assert "***REDACTED***" in call_args
        assert secret not in call_args
        assert "application/json" in call_args
