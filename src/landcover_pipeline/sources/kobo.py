"""KoboToolbox client for pulling form submissions."""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class KoboClient:
    """
    Fetches an asset's submissions from the KoboToolbox v2 API.
    The API returns a `results`-wrapped page with a `next` link; pages are followed and
    merged into one payload for `normalize_payload`.
    """

    DEFAULT_URL = "https://kf.kobotoolbox.org"
    DEFAULT_HEADERS = {
        "User-Agent": "landcover-pipeline/0.1",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        token: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        page_size: int = 1000,
    ):
        headers = dict(self.DEFAULT_HEADERS)
        if token:
            headers["Authorization"] = f"Token {token}"
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self._client = client or httpx.Client(timeout=60.0, follow_redirects=True)
        self._headers = headers

    def submissions_url(self, asset_uid: str) -> str:
        return f"{self.base_url}/api/v2/assets/{asset_uid}/data/"

    def _get_page(self, url: str, params: Optional[dict] = None) -> dict[str, Any]:
        response = self._client.get(url, params=params, headers=self._headers)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected response from {url}: expected an object")
        return payload

    def fetch_submissions(self, asset_uid: str, max_pages: Optional[int] = None) -> dict[str, Any]:
        """
        Fetch all submissions of an asset. Returns {"count": n, "results": [...]}.
        """
        results: list[Any] = []
        url: Optional[str] = self.submissions_url(asset_uid)
        params: Optional[dict] = {"format": "json", "limit": self.page_size}
        pages = 0
        while url:
            page = self._get_page(url, params)
            batch = page.get("results") or []
            results.extend(batch)
            pages += 1
            logger.debug("Fetched page %d of %s (%d submissions)", pages, asset_uid, len(batch))
            if max_pages is not None and pages >= max_pages:
                break
            url = page.get("next")
            # `next` already carries the query string
            params = None
        logger.info("Fetched %d submissions for asset %s", len(results), asset_uid)
        return {"count": len(results), "results": results}
