"""
HTTP Client for CLI.

Builds and sends the single GET request of an invocation:

    endpoint  base_url + "/" + "/".join(command segments)
    query     parameter map from the tokenizer
    headers   configured static headers, then the client's own
              x-anything-cli-* headers (configured ones with that prefix
              are dropped), then git context when available
"""

from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from anything_cli import __version__
from anything_cli.core.exceptions import ResponseDecodeError, TransportError
from anything_cli.core.logging import get_logger, log_with_source
from anything_cli.utils.git import GitContext

logger = get_logger(__name__)

RESERVED_HEADER_PREFIX = "x-anything-cli-"
REPO_URL = "https://github.com/suchlab/anything-cli"


def build_endpoint(base_url: str, commands: Sequence[str]) -> str:
    """Join positional command segments onto the base URL."""
    return f"{base_url}/{'/'.join(commands)}"


def build_headers(
    config_headers: Mapping[str, str] | None,
    executable_name: str,
    git_context: GitContext | None = None,
    version: str = __version__,
) -> httpx.Headers:
    """
    Assemble request headers.

    Configured headers whose name starts with ``x-anything-cli-``
    (case-insensitive, surrounding whitespace ignored) are dropped; that
    namespace is reserved for the headers added here.
    """
    headers = httpx.Headers()

    for key, value in (config_headers or {}).items():
        if not key.strip().lower().startswith(RESERVED_HEADER_PREFIX):
            headers[key] = value

    headers["User-Agent"] = (
        f"anything-cli/v{version} ({executable_name}; repo: {REPO_URL})"
    )
    headers["x-anything-cli-version"] = version
    headers["x-anything-cli-executable-name"] = executable_name

    if git_context is not None:
        headers["x-anything-cli-git"] = "true"
        headers["x-anything-cli-git-repo-url"] = git_context.remote_url
        headers["x-anything-cli-git-repo-name"] = git_context.repo_name
        headers["x-anything-cli-git-branch"] = git_context.branch_name

    return headers


def read_text(response: httpx.Response) -> str:
    """
    Decode the response body strictly.

    Raises:
        ResponseDecodeError: If the body is not valid in its declared
            charset (UTF-8 when none is declared).
    """
    encoding = response.charset_encoding or "utf-8"
    try:
        return response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        log_with_source(logger, "http", "debug", "Response decode failed", error=str(e))
        raise ResponseDecodeError() from e


class APIClient:
    """
    Synchronous HTTP client for the configured API.

    Usage:
        with APIClient("https://api.example.com") as client:
            url = client.endpoint(["users", "list"])
            response = client.get(url, params={"limit": "10"}, headers=headers)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: API base URL, used verbatim.
            timeout: Request timeout in seconds. None keeps the httpx default.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.Client(**kwargs)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def endpoint(self, commands: Sequence[str]) -> str:
        return build_endpoint(self.base_url, commands)

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Make an HTTP request.

        Raises:
            TransportError: On any httpx transport failure.
        """
        client = self._get_client()

        log_with_source(logger, "http", "debug", "API request", method=method, url=url)

        try:
            response = client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log_with_source(
                logger, "http", "debug", "API request failed",
                method=method, url=url, error=str(e),
            )
            raise TransportError(f"Request failed: {e}") from e

        log_with_source(
            logger, "http", "debug", "API response",
            method=method, url=url, status_code=response.status_code,
        )
        return response

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return self.request("GET", url, **kwargs)
