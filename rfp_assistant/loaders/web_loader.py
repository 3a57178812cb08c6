"""Web page and HTML loaders using requests and BeautifulSoup."""

import re

import requests
from bs4 import BeautifulSoup

from rfp_assistant.config import get_settings
from rfp_assistant.errors import FetchError, FetchFailure, ParseError
from rfp_assistant.loaders.base import BaseContentLoader
from rfp_assistant.models.documents import ExtractedDocument, UploadedDocument
from rfp_assistant.utils.logging import LoggerMixin


# Elements that never carry RFP content
NON_CONTENT_TAGS = ["script", "style", "nav", "header", "footer"]

RESTRICTED_STATUS_CODES = (403, 404)


def clean_html(markup: str | bytes) -> str:
    """Strip non-content elements and collapse whitespace.

    Args:
        markup: Raw HTML. Bytes are decoded using the encoding the
            document declares or, failing that, the one BeautifulSoup detects.

    Returns:
        Visible body text on a single line.
    """
    soup = BeautifulSoup(markup, "html.parser")

    for element in soup(NON_CONTENT_TAGS):
        element.decompose()

    root = soup.body or soup
    text = root.get_text(separator=" ")
    return re.sub(r"\s+", " ", text).strip()


class HTMLFileLoader(BaseContentLoader):
    """Loader for uploaded HTML files."""

    supported_extensions = (".html", ".htm")

    def extract_text(self, document: UploadedDocument) -> str:
        """Decode and clean the uploaded markup."""
        text = clean_html(document.content.decode("utf-8", errors="replace"))
        if not text:
            raise ParseError("HTML file has no visible text", filename=document.original_name)
        return text


class WebPageLoader(LoggerMixin):
    """Fetch an RFP published as a web page and reduce it to text."""

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
    ):
        """Initialize web page loader.

        Args:
            timeout: Seconds to wait for the server.
            user_agent: Browser-like identification sent with the request.
        """
        settings = get_settings()
        self.timeout = timeout or settings.fetch_timeout_seconds
        self.user_agent = user_agent or settings.fetch_user_agent

    def fetch(self, url: str) -> bytes:
        """Download the page markup as undecoded bytes.

        Raises:
            FetchError: If the page cannot be retrieved.
        """
        self.log_info("Fetching website content", url=url)

        try:
            response = requests.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            response.raise_for_status()

        # ConnectTimeout is also a ConnectionError, so this must come first
        except requests.exceptions.Timeout as e:
            raise FetchError(str(e), kind=FetchFailure.TIMEOUT, url=url) from e

        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            kind = (
                FetchFailure.RESTRICTED
                if status in RESTRICTED_STATUS_CODES
                else FetchFailure.HTTP_STATUS
            )
            raise FetchError(str(e), kind=kind, url=url, status_code=status) from e

        except requests.exceptions.RequestException as e:
            # DNS failures, refused connections and malformed URLs
            raise FetchError(str(e), kind=FetchFailure.UNREACHABLE, url=url) from e

        return response.content

    def load(self, url: str) -> ExtractedDocument:
        """Fetch a page and extract its visible text.

        Args:
            url: Address of the page.

        Returns:
            Extracted document named after the URL.
        """
        text = clean_html(self.fetch(url))

        if not text:
            self.log_warning("Web page has no visible text", url=url)

        self.log_info("Website content extracted", url=url, chars=len(text))
        return ExtractedDocument(original_name=url, text=text)
