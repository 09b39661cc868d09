"""Price source protocol and shared HTTP plumbing."""

from typing import Any, Optional, Protocol

import httpx

from wallet_gains.core.exceptions import SourceUnavailableError
from wallet_gains.domain.models import PriceSourceName


class PriceSource(Protocol):
    """
    Protocol for external USD price feeds.

    `fetch_price` returns 0.0 when the source has no price for the mint and
    raises SourceUnavailableError when the source itself failed.
    """

    name: PriceSourceName

    async def fetch_price(self, mint: str) -> float:
        ...


class HttpPriceSource:
    """Base for price sources that answer a single JSON GET."""

    name: PriceSourceName

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        api_key: Optional[str] = None,
        timeout_seconds: float = 5.0,
    ):
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout_seconds

    def _headers(self) -> dict[str, str]:
        return {"x-api-key": self._api_key} if self._api_key else {}

    async def _get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            response = await self._client.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self._timeout,
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise SourceUnavailableError(self.name.value, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise SourceUnavailableError(self.name.value, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise SourceUnavailableError(self.name.value, f"invalid JSON: {e}") from e


def to_price(value: Any) -> float:
    """Coerce a JSON price field to float; missing or malformed becomes 0.0."""
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0
