"""Unit tests for the store locator fetcher."""

from unittest.mock import Mock, patch

import pytest
import requests

from acestore.shared.constants import HTTP
from acestore.shared.errors import FetchError
from acestore.shared.http import HttpResult, fetch_url, get_headers, sanitize_url

URL = "http://www.acehardware.com/storeLocServ?heavy=true&token=ACE&operation=storeData&storeID=05784"


class TestSanitizeUrl:
    """Test URL redaction for logging."""

    def test_query_redacted(self):
        """Test query parameters are replaced."""
        assert sanitize_url(URL) == "http://www.acehardware.com/storeLocServ?[REDACTED]"

    def test_no_query_unchanged(self):
        """Test URLs without a query keep their path."""
        url = "http://www.acehardware.com/mystore/index.jsp"
        assert sanitize_url(url) == url


class TestFetchUrl:
    """Test fetch_url() with a mocked session."""

    def test_success(self, mock_response_factory):
        """Test status and body are returned."""
        session = Mock(spec=requests.Session)
        session.get.return_value = mock_response_factory(status_code=200, content=b'{"ok": 1}')

        result = fetch_url(URL, session=session, timeout=7)

        assert result == HttpResult(status_code=200, body=b'{"ok": 1}')
        session.get.assert_called_once()
        args, kwargs = session.get.call_args
        assert args == (URL,)
        assert kwargs['timeout'] == 7
        assert kwargs['headers']['User-Agent'] == HTTP.USER_AGENT
        session.close.assert_not_called()

    def test_error_status_returned_not_raised(self, mock_response_factory):
        """Test non-200 responses come back for the caller to judge."""
        session = Mock(spec=requests.Session)
        session.get.return_value = mock_response_factory(status_code=503, text="Unavailable")

        result = fetch_url(URL, session=session)

        assert result.status_code == 503
        assert result.body == b"Unavailable"

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("refused"),
        requests.exceptions.Timeout("slow"),
        requests.exceptions.InvalidURL("bad"),
    ])
    def test_transport_failure(self, error):
        """Test request exceptions become FetchError without a status."""
        session = Mock(spec=requests.Session)
        session.get.side_effect = error

        with pytest.raises(FetchError) as exc_info:
            fetch_url(URL, session=session)

        assert exc_info.value.status_code is None
        assert exc_info.value.__cause__ is error
        assert "token=ACE" not in str(exc_info.value)

    def test_temporary_session_closed(self, mock_response_factory):
        """Test a session created by fetch_url is closed afterwards."""
        session = Mock(spec=requests.Session)
        session.get.return_value = mock_response_factory(status_code=200, content=b'{}')

        with patch('acestore.shared.http.requests.Session', return_value=session):
            fetch_url(URL)

        session.close.assert_called_once()

    def test_temporary_session_closed_on_error(self):
        """Test the temporary session is closed when the request fails."""
        session = Mock(spec=requests.Session)
        session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with patch('acestore.shared.http.requests.Session', return_value=session):
            with pytest.raises(FetchError):
                fetch_url(URL)

        session.close.assert_called_once()


def test_get_headers_accepts_json():
    """Test default headers ask for JSON."""
    headers = get_headers()
    assert "application/json" in headers["Accept"]
    assert get_headers("custom-agent")["User-Agent"] == "custom-agent"
