"""HTTP transport for the Vercel REST API.

Every call to Vercel goes through :class:`VercelTransport`, which attaches
the bearer token, adds the team scope, encodes JSON bodies and turns
HTTP failures into :class:`UpstreamError`.
"""

from typing import Any

import httpx

from vercel_deployer.config import settings
from vercel_deployer.core.exceptions import UpstreamError
from vercel_deployer.models.credentials import VercelCredentials
from vercel_deployer.utils.logging import get_logger

logger = get_logger(__name__)


class VercelTransport:
    """Authenticated JSON client for ``api.vercel.com``.

    Use as an async context manager, or call :meth:`aclose` when done.
    An externally supplied ``client`` is left open.
    """

    def __init__(
        self,
        credentials: VercelCredentials,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.credentials = credentials
        self.base_url = (base_url or settings.vercel_api_base_url).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.vercel_request_timeout,
        )

    @property
    def team_id(self) -> str | None:
        return self.credentials.team_id

    def _headers(self) -> dict[str, str]:
        token = self.credentials.access_token.get_secret_value()
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send one request and return the decoded JSON response.

        Raises:
            UpstreamError: Non-2xx response or network failure.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        if self.team_id:
            query["teamId"] = self.team_id

        logger.debug("transport.request", method=method, path=path, params=query)

        try:
            response = await self._client.request(
                method,
                f"{self.base_url}{path}",
                params=query,
                json=body,
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            logger.warning("transport.network_error", method=method, path=path, error=str(e))
            raise UpstreamError(method, path, None, str(e) or type(e).__name__) from e

        if response.is_error:
            payload = _decode(response)
            logger.warning(
                "transport.http_error",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise UpstreamError(method, path, response.status_code, payload)

        data = _decode(response)
        return data if isinstance(data, dict) else {"data": data}

    async def verify_credentials(self) -> dict[str, Any]:
        """Check the token against ``GET /v2/user`` and return the user."""
        data = await self.request("GET", "/v2/user")
        return data.get("user", data)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "VercelTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text
