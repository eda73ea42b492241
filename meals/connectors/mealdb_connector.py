"""
TheMealDB connector using the public JSON API.

This connector interfaces with TheMealDB (https://www.themealdb.com) over plain
HTTP GET requests to list meals by category and look up a meal by id.

The connector:
- Uses a requests.Session for connection reuse
- Calls GET {base_url}/filter.php?c={category} and GET {base_url}/lookup.php?i={id}
- Decodes payloads into MealsResponse / MealDetailResponse
- Maps every failure onto the typed errors in meals.errors

Base URL and timeout default to MealDBConfig (MEALDB_BASE_URL, MEALDB_TIMEOUT_SECONDS).
No API key is needed for the public test key "1" that the default base URL uses.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from meals.config import MealDBConfig
from meals.errors import DecodeError, InvalidRequestError, TransportError
from meals.models import MealDetailRecord, MealDetailResponse, MealSummary, MealsResponse

from .base import BaseConnector

logger = logging.getLogger(__name__)

FILTER_PATH = "filter.php"
LOOKUP_PATH = "lookup.php"


class MealDBConnector(BaseConnector):
    """
    Connector for TheMealDB JSON API.

    Can be used as a context manager; the underlying session is closed on exit.
    """
    source = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API base URL (optional, reads MEALDB_BASE_URL or uses the public default)
            timeout: Request timeout in seconds (optional, reads MEALDB_TIMEOUT_SECONDS;
                     None means requests waits indefinitely)
            session: Pre-built requests.Session (optional, mainly for tests)

        Raises:
            RuntimeError: If MEALDB_TIMEOUT_SECONDS is set to an invalid value
        """
        self.base_url = (base_url or MealDBConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout()
        self.session = session or requests.Session()

    def __enter__(self) -> "MealDBConnector":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def filter_by_category(self, category: str) -> List[MealSummary]:
        """
        List meals in a category via GET /filter.php?c={category}.

        Returns:
            MealSummary records in API order. Entries are not filtered here.
        """
        payload = self._get_json(FILTER_PATH, {"c": category})
        try:
            response = MealsResponse.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Unexpected filter.php payload for category {category!r}: {e}") from e
        logger.debug("MealDB connector: category %s returned %d meals", category, len(response.meals))
        return response.meals

    def lookup_meal(self, meal_id: str) -> List[MealDetailRecord]:
        """
        Look up a meal via GET /lookup.php?i={meal_id}.

        Returns:
            Raw MealDetailRecord list (empty if the id is unknown).
        """
        if not isinstance(meal_id, str) or not meal_id.strip():
            raise InvalidRequestError(f"Meal id must be a non-empty string, got {meal_id!r}")

        payload = self._get_json(LOOKUP_PATH, {"i": meal_id.strip()})
        try:
            response = MealDetailResponse.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Unexpected lookup.php payload for meal {meal_id!r}: {e}") from e
        logger.debug("MealDB connector: lookup %s returned %d meals", meal_id, len(response.meals))
        return response.meals

    def _get_json(self, path: str, params: Dict[str, str]) -> Dict[str, Any]:
        """
        Issue a GET request and return the decoded JSON object.

        Raises:
            InvalidRequestError: If the URL is malformed
            TransportError: On network errors, timeouts or non-2xx status
            DecodeError: If the body is not a JSON object
        """
        url = f"{self.base_url}/{path}"
        logger.debug("MealDB connector: GET %s params=%s", url, params)

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except (
            requests.exceptions.InvalidURL,
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.URLRequired,
        ) as e:
            raise InvalidRequestError(f"Cannot build request URL {url!r}: {e}") from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise TransportError(f"GET {url} returned HTTP {status_code}", status_code=status_code) from e
        except requests.exceptions.Timeout as e:
            raise TransportError(f"GET {url} timed out after {self.timeout}s") from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Could not connect to {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"GET {url} did not return valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise DecodeError(
                f"GET {url} returned JSON {type(payload).__name__}, expected an object"
            )
        return payload
