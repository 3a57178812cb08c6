"""Tests for web page fetching and HTML cleaning."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from rfp_assistant.errors import FetchError, FetchFailure
from rfp_assistant.loaders.web_loader import WebPageLoader, clean_html


def _response(status: int, text: str | bytes = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.content = text.encode("utf-8") if isinstance(text, str) else text
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status} Error", response=response
        )
    return response


class TestCleanHtml:
    """Tests for clean_html."""

    def test_removes_non_content(self):
        """Test scripts, styles and page chrome are dropped."""
        markup = """
        <html><head><style>p { color: red }</style></head>
        <body>
          <header>Agency Logo</header>
          <nav>Home | About</nav>
          <main><h1>RFP 2024-017</h1>
          <p>Proposals due
             June 1.</p></main>
          <script>track();</script>
          <footer>Copyright</footer>
        </body></html>
        """

        assert clean_html(markup) == "RFP 2024-017 Proposals due June 1."


class TestWebPageLoader:
    """Tests for WebPageLoader."""

    @patch("rfp_assistant.loaders.web_loader.requests.get")
    def test_load_sends_user_agent_and_timeout(self, mock_get):
        """Test the request identifies as a browser and is time-bounded."""
        mock_get.return_value = _response(200, "<body><p>Scope</p></body>")
        loader = WebPageLoader(timeout=10, user_agent="TestBrowser/1.0")

        extracted = loader.load("https://example.gov/rfp")

        assert extracted.original_name == "https://example.gov/rfp"
        assert extracted.text == "Scope"
        mock_get.assert_called_once_with(
            "https://example.gov/rfp",
            headers={"User-Agent": "TestBrowser/1.0"},
            timeout=10,
        )

    @patch("rfp_assistant.loaders.web_loader.requests.get")
    def test_utf8_page_without_declared_charset(self, mock_get):
        """Test UTF-8 markup is decoded correctly when no charset is declared."""
        markup = "<html><body><p>Café renovation – Phase 2</p></body></html>".encode("utf-8")
        mock_get.return_value = _response(200, markup)

        extracted = WebPageLoader().load("https://example.gov/rfp")

        assert extracted.text == "Café renovation – Phase 2"

    @pytest.mark.parametrize("status", [403, 404])
    @patch("rfp_assistant.loaders.web_loader.requests.get")
    def test_restricted_status(self, mock_get, status):
        """Test forbidden and missing pages are restricted."""
        mock_get.return_value = _response(status)

        with pytest.raises(FetchError) as exc_info:
            WebPageLoader().load("https://example.gov/rfp")

        assert exc_info.value.kind == FetchFailure.RESTRICTED
        assert exc_info.value.status_code == status

    @patch("rfp_assistant.loaders.web_loader.requests.get")
    def test_other_status(self, mock_get):
        """Test server errors are not reported as restricted."""
        mock_get.return_value = _response(503)

        with pytest.raises(FetchError) as exc_info:
            WebPageLoader().load("https://example.gov/rfp")

        assert exc_info.value.kind == FetchFailure.HTTP_STATUS

    @patch("rfp_assistant.loaders.web_loader.requests.get")
    def test_timeout(self, mock_get):
        """Test timeouts have their own kind."""
        mock_get.side_effect = requests.exceptions.ConnectTimeout("timed out")

        with pytest.raises(FetchError) as exc_info:
            WebPageLoader().load("https://example.gov/rfp")

        assert exc_info.value.kind == FetchFailure.TIMEOUT

    @pytest.mark.parametrize("url", ["not a url", "ftp://example.gov/rfp"])
    def test_invalid_url_unreachable(self, url):
        """Test malformed URLs are unreachable."""
        with pytest.raises(FetchError) as exc_info:
            WebPageLoader().load(url)

        assert exc_info.value.kind == FetchFailure.UNREACHABLE

    def test_connection_refused(self, refused_url):
        """Test a closed port is unreachable."""
        with pytest.raises(FetchError) as exc_info:
            WebPageLoader(timeout=2).load(refused_url)

        assert exc_info.value.kind == FetchFailure.UNREACHABLE
