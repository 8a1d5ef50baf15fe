"""
PostgREST Client - Thin async wrapper over the Supabase REST endpoint.

Guidelines:
- One shared httpx.AsyncClient (app-scoped, created by the DI container)
- Every call is a single HTTP round trip, no retries
- Error bodies ({"message", "code", "details", "hint"}) become DataServiceError
  carrying the service's message verbatim
- Transport failures (timeouts, refused connections) become
  DataServiceUnavailableError
"""

import logging
from datetime import datetime
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from unimatch.config.settings import Config
from unimatch.domain.exceptions import DataServiceError, DataServiceUnavailableError

logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    """
    Create the shared async client for the data service.

    Returns:
        httpx.AsyncClient rooted at <SUPABASE_URL>/rest/v1 with service headers

    Note:
        Caller owns the client and must ``await client.aclose()`` on shutdown.
    """
    base_url = f"{Config.SUPABASE_URL.rstrip('/')}/rest/v1"
    client = httpx.AsyncClient(
        base_url=base_url,
        headers={
            "apikey": Config.SUPABASE_SERVICE_KEY,
            "Authorization": f"Bearer {Config.SUPABASE_SERVICE_KEY}",
            "Content-Type": "application/json",
        },
        timeout=Config.DATA_SERVICE_TIMEOUT,
    )
    logger.info(f"[DataService] HTTP client created for {base_url}")
    return client


_TIMESTAMP = TypeAdapter(datetime)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a Postgres/ISO-8601 timestamp; None/empty gives None.

    Postgres trims trailing zeros from fractional seconds (".12345"), and
    may use "Z" for UTC; both are accepted.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return _TIMESTAMP.validate_python(str(value).strip())
    except ValidationError as e:
        raise DataServiceError(f"Unexpected timestamp from data service: {value}") from e


class PostgrestClient:
    _http: httpx.AsyncClient

    def __init__(self, http_client: httpx.AsyncClient):
        self._http = http_client

    async def rpc(self, function: str, params: dict[str, Any]) -> Any:
        """Call a stored procedure and return its decoded JSON result."""
        response = await self._send("POST", f"/rpc/{function}", json=params)
        return self._decode(response)

    async def select(
        self,
        table: str,
        filters: dict[str, str],
        columns: str = "*",
        order: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """
        Read rows from a table.

        Args:
            table: Table name
            filters: PostgREST filters, e.g. {"status": "eq.pending"}
            columns: select= clause
            order: order= clause, e.g. "created_at.desc"
            limit: Max rows
        """
        params = {"select": columns, **filters}
        if order:
            params["order"] = order
        if limit is not None:
            params["limit"] = str(limit)
        response = await self._send("GET", f"/{table}", params=params)
        return self._decode(response) or []

    async def insert(self, table: str, row: dict[str, Any]) -> list[dict[str, Any]]:
        """Insert one row and return the stored representation."""
        response = await self._send(
            "POST",
            f"/{table}",
            json=row,
            headers={"Prefer": "return=representation"},
        )
        return self._decode(response) or []

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"[DataService] {method} {path} transport failure: {e!r}")
            raise DataServiceUnavailableError() from e

        if response.status_code >= 400:
            message = response.text or f"HTTP {response.status_code}"
            code = None
            try:
                body = response.json()
                if isinstance(body, dict):
                    message = body.get("message") or message
                    code = body.get("code")
            except ValueError:
                pass
            logger.warning(
                f"[DataService] {method} {path} rejected ({response.status_code}): {message}"
            )
            raise DataServiceError(message, code=code)

        return response

    def _decode(self, response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DataServiceError("Malformed response from data service") from e
