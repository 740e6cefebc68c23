from urllib.parse import quote

import httpx

from legaldesk.forms.exceptions import FetchFailedError
from legaldesk.logging.logger import Log


class TemplateFetcher:
    """Downloads blank PDF templates, optionally through a URL-rewriting proxy.

    The proxy is used as a prefix: ``<proxy_url><url-encoded template URL>``.
    """

    def __init__(
        self,
        proxy_url: str = "",
        timeout_seconds: int = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._proxy_url = proxy_url
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def build_url(self, pdf_url: str) -> str:
        if not self._proxy_url:
            return pdf_url
        return f"{self._proxy_url}{quote(pdf_url, safe='')}"

    def fetch(self, pdf_url: str) -> bytes:
        """Return the template bytes.

        Raises:
            FetchFailedError: on transport errors, non-2xx responses, or a non-PDF body.
        """
        url = self.build_url(pdf_url)
        Log.info(f"Fetching form template {pdf_url}")
        try:
            with httpx.Client(
                timeout=self._timeout_seconds,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = client.get(url)
        except httpx.HTTPError as exc:
            raise FetchFailedError(f"Failed to fetch PDF from {pdf_url}: {exc}") from exc

        if not response.is_success:
            raise FetchFailedError(
                f"Failed to fetch PDF via proxy from {pdf_url}. Status: {response.status_code}. "
                "This may be a temporary proxy issue or the source file may be blocking access."
            )
        content = response.content
        if b"%PDF" not in content[:1024]:
            raise FetchFailedError(f"Template at {pdf_url} is not a PDF document")
        return content
