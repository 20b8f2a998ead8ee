"""HTTP client for the Vade Mecum catalog API."""

import logging
from typing import Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import get_settings
from ..errors import CatalogFetchError
from ..utils.text import fold_text
from .models import CatalogEntry
from .normalize import normalize_collection

logger = logging.getLogger(__name__)


class CatalogClient:
    """Fetches catalog entries with retries and optional bearer auth."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: int = 3,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.token = token if token is not None else settings.api_token
        self.timeout = timeout or settings.http_timeout

        if session is None:
            session = requests.Session()
            # Configure retries
            retry_strategy = Retry(
                total=max_retries,
                backoff_factor=0.5,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    @property
    def codigos_url(self) -> str:
        return f"{self.base_url}/codigos"

    def _headers(self, with_token: bool = True) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if with_token and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def fetch_payload(self, params: Optional[Dict[str, str]] = None) -> Any:
        """
        GET the catalog and decode its JSON body.

        A request rejected with 401/403 while sending a token is repeated once
        without it, since the catalog is also served anonymously.

        Returns:
            Decoded body, or {} when the body is not valid JSON

        Raises:
            CatalogFetchError: On network errors and non-success statuses
        """
        url = self.codigos_url
        try:
            logger.info(f"Fetching: {url}")
            response = self.session.get(
                url, params=params, headers=self._headers(), timeout=self.timeout
            )
            if response.status_code in (401, 403) and self.token:
                logger.warning(f"Token rejected ({response.status_code}), retrying anonymously")
                response = self.session.get(
                    url, params=params, headers=self._headers(with_token=False), timeout=self.timeout
                )
        except requests.RequestException as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise CatalogFetchError(f"Falha ao carregar registros: {e}") from e

        if not response.ok:
            logger.warning(f"Catalog request failed with status {response.status_code}")
            raise CatalogFetchError(
                f"Falha ao carregar registros ({response.status_code})",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Response is not valid JSON: {e}")
            return {}

    def fetch_entries(self, nomecodigo: Optional[str] = None) -> List[CatalogEntry]:
        """Fetch and normalize catalog entries.

        Args:
            nomecodigo: Restrict to one code; matching ignores case and accents

        Returns:
            Normalized entries
        """
        name = (nomecodigo or "").strip()
        params = {"nomecodigo": name} if name else None
        entries = normalize_collection(self.fetch_payload(params))
        if name:
            wanted = fold_text(name)
            entries = [e for e in entries if fold_text(e.nomecodigo) == wanted]
        logger.info(f"Loaded {len(entries)} catalog entries")
        return entries
