"""Client for the MeteoSwiss app backend.

The API is the one used by the official MeteoSwiss mobile app. It is not a
documented public API and may change without notice.
"""

import logging

import httpx

from meteocli.config.schema import DEFAULT_USER_AGENT, METEOSWISS_BASE_URL
from meteocli.ingest.plz_parser import parse_plz_detail
from meteocli.models.plz import PLZDetail

logger = logging.getLogger(__name__)


class MeteoSwissError(Exception):
    """Raised when the backend cannot be reached or returns unusable data."""


def plz6(plz: int) -> int:
    """Convert a 4-digit postal code to the backend's 6-digit form (8000 -> 800000)."""
    return plz * 100


class MeteoSwissClient:
    def __init__(
        self,
        base_url: str = METEOSWISS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15.0,
        high_res_slot_minutes: int = 10,
        low_res_slot_minutes: int = 60,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.high_res_slot_minutes = high_res_slot_minutes
        self.low_res_slot_minutes = low_res_slot_minutes

    def get_plz_detail(self, plz: int) -> dict:
        """Fetch the raw plzDetail payload for a 4-digit postal code.

        Single attempt; any failure is raised as MeteoSwissError.
        """
        url = f"{self.base_url}/plzDetail"
        params = {"plz": plz6(plz)}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("MeteoSwiss API error for plz=%d: %s", plz, e)
            raise MeteoSwissError(
                f"fetching PLZ detail for {plz}: unexpected HTTP "
                f"{e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            logger.error("MeteoSwiss request failed for plz=%d: %s", plz, e)
            raise MeteoSwissError(f"fetching PLZ detail for {plz}: {e}") from e
        except ValueError as e:
            logger.error("MeteoSwiss returned invalid JSON for plz=%d: %s", plz, e)
            raise MeteoSwissError(
                f"fetching PLZ detail for {plz}: decoding response: {e}"
            ) from e

        if not isinstance(data, dict):
            raise MeteoSwissError(
                f"fetching PLZ detail for {plz}: expected a JSON object"
            )
        return data

    def fetch_plz_detail(self, plz: int) -> PLZDetail:
        raw = self.get_plz_detail(plz)
        try:
            return parse_plz_detail(
                raw,
                high_res_slot_minutes=self.high_res_slot_minutes,
                low_res_slot_minutes=self.low_res_slot_minutes,
            )
        except (TypeError, ValueError, AttributeError, OverflowError) as e:
            logger.error("MeteoSwiss payload for plz=%d is malformed: %s", plz, e)
            raise MeteoSwissError(
                f"fetching PLZ detail for {plz}: decoding response: {e}"
            ) from e
