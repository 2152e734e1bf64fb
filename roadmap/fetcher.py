import logging
from typing import Optional

import httpx

from .errors import ConfigurationError, TransportError

log = logging.getLogger("fetcher")

CSV_HEADERS = {
    "Accept": "text/csv",
    "Content-Type": "text/csv",
}
DEFAULT_TIMEOUT = 10.0


async def fetch_csv_text(
    url: Optional[str],
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """GET one CSV document. No retry and no caching: every call hits the network."""
    if not url:
        raise ConfigurationError("CSV source URL is not set")

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                resp = await own_client.get(url, headers=CSV_HEADERS)
        else:
            resp = await client.get(url, headers=CSV_HEADERS, timeout=timeout)
    except httpx.InvalidURL as e:
        log.error(f"Invalid CSV source URL {url!r}: {e}")
        raise ConfigurationError(f"Invalid CSV source URL: {e}") from e
    except httpx.HTTPError as e:
        log.error(f"CSV data fetch error for {url}: {e!r}")
        raise TransportError(f"Failed to fetch CSV data: {e!r}") from e

    if not resp.is_success:
        log.error(f"CSV data fetch error for {url}: status {resp.status_code}")
        raise TransportError(f"HTTP error! status: {resp.status_code}", status_code=resp.status_code)

    resp.encoding = "utf-8"
    return resp.text
