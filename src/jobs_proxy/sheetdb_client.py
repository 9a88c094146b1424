"""SheetDB API client for reading and writing job rows."""

from typing import Any, Optional

import httpx

from .config import DEFAULT_TIMEOUT


class SheetDBError(Exception):
    """SheetDB API error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SheetDBClient:
    """Async client for a single SheetDB spreadsheet endpoint."""

    def __init__(self, api_url: str, timeout: Optional[float] = None):
        """
        Initialize the SheetDB client.

        Args:
            api_url: Full SheetDB endpoint, e.g. https://sheetdb.io/api/v1/<id>
            timeout: Request timeout in seconds.
        """
        if not api_url:
            raise SheetDBError("SheetDB API URL not provided")
        self.api_url = api_url
        self.timeout = timeout or DEFAULT_TIMEOUT
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            await self._client.aclose()
            self._client = None

    def _require_client(self) -> httpx.AsyncClient:
        if not self._client:
            raise SheetDBError("Client not initialized. Use 'async with' context.")
        return self._client

    async def list_jobs(self) -> Any:
        """Fetch every job row from the sheet."""
        client = self._require_client()

        try:
            response = await client.get(self.api_url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SheetDBError(f"SheetDB request failed: {e}") from e

        if not response.is_success:
            raise SheetDBError(
                f"SheetDB responded with {response.status_code}",
                status_code=response.status_code,
            )
        return _parse_json(response)

    async def create_job(self, job: Any) -> Any:
        """
        Append one or more job rows to the sheet.

        Args:
            job: A job object or a list of them, forwarded untouched.

        Returns:
            SheetDB's creation response, typically {"created": <count>}
        """
        client = self._require_client()

        # SheetDB expects rows wrapped as {"data": {...}} or {"data": [...]}
        payload = {"data": job}

        try:
            response = await client.post(
                self.api_url,
                headers={"Content-Type": "application/json"},
                json=payload,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SheetDBError(f"SheetDB request failed: {e}") from e

        if not response.is_success:
            raise SheetDBError(
                f"SheetDB Save Error: {response.text}",
                status_code=response.status_code,
            )
        return _parse_json(response)


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise SheetDBError(
            f"Invalid JSON from SheetDB: {e}", status_code=response.status_code
        ) from e
