"""
Tests for the TheMealDB connector using a mocked requests session.

These tests never touch the network. They verify that:
- The connector reads base URL and timeout from the environment
- Requests hit the right endpoints with the right query parameters
- Payloads are decoded into meal records
- Every failure maps onto the typed errors in meals.errors
"""

import os
from unittest.mock import Mock, patch

import pytest
import requests

from meals.config import DEFAULT_MEALDB_BASE_URL
from meals.connectors.mealdb_connector import MealDBConnector
from meals.errors import DecodeError, InvalidRequestError, TransportError
from meals.models import MealDetailRecord, MealSummary


def _mock_response(payload=None, status_code=200, json_error=None):
    """Build a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Server Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def _connector_with(response=None, error=None, **kwargs):
    """Create a connector whose session.get returns `response` or raises `error`."""
    session = Mock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return MealDBConnector(session=session, **kwargs), session


class TestMealDBConnectorInit:
    """Configuration resolution."""

    @patch.dict(os.environ, {}, clear=True)
    @patch("meals.connectors.mealdb_connector.requests.Session")
    def test_defaults(self, mock_session_class):
        """Test connector uses the public base URL, no timeout and a fresh session."""
        connector = MealDBConnector()

        mock_session_class.assert_called_once_with()
        assert connector.base_url == DEFAULT_MEALDB_BASE_URL
        assert connector.timeout is None
        assert connector.source == "mealdb"

    @patch.dict(os.environ, {"MEALDB_BASE_URL": "http://mirror.local/api/", "MEALDB_TIMEOUT_SECONDS": "2.5"})
    def test_reads_environment(self):
        connector = MealDBConnector(session=Mock())
        assert connector.base_url == "http://mirror.local/api"
        assert connector.timeout == 2.5

    @patch.dict(os.environ, {"MEALDB_BASE_URL": "http://ignored"})
    def test_explicit_arguments_win(self):
        connector = MealDBConnector(base_url="http://explicit/", timeout=3, session=Mock())
        assert connector.base_url == "http://explicit"
        assert connector.timeout == 3

    @patch.dict(os.environ, {"MEALDB_TIMEOUT_SECONDS": "soon"})
    def test_invalid_timeout_raises(self):
        with pytest.raises(RuntimeError, match="MEALDB_TIMEOUT_SECONDS"):
            MealDBConnector(session=Mock())

    def test_context_manager_closes_session(self):
        session = Mock()
        with MealDBConnector(base_url="http://x", session=session) as connector:
            assert connector.session is session
        session.close.assert_called_once()


class TestFilterByCategory:
    """GET filter.php."""

    def test_requests_category_and_decodes(self):
        payload = {
            "meals": [
                {"idMeal": "53049", "strMeal": "Apam balik", "strMealThumb": "http://x/1.jpg"},
                {"idMeal": "52893", "strMeal": "", "strMealThumb": "http://x/2.jpg"},
            ]
        }
        connector, session = _connector_with(_mock_response(payload), base_url="http://api")

        meals = connector.filter_by_category("Dessert")

        session.get.assert_called_once_with(
            "http://api/filter.php", params={"c": "Dessert"}, timeout=None
        )
        # Connector does not filter; that is the service's job
        assert [m.id for m in meals] == ["53049", "52893"]
        assert all(isinstance(m, MealSummary) for m in meals)

    def test_null_meals_returns_empty(self):
        connector, _ = _connector_with(_mock_response({"meals": None}), base_url="http://api")
        assert connector.filter_by_category("Dessert") == []

    def test_passes_timeout(self):
        connector, session = _connector_with(_mock_response({"meals": []}), base_url="http://api", timeout=4.0)
        connector.filter_by_category("Dessert")
        assert session.get.call_args[1]["timeout"] == 4.0

    def test_http_error_raises_transport_error(self):
        connector, _ = _connector_with(_mock_response(status_code=503), base_url="http://api")
        with pytest.raises(TransportError) as exc_info:
            connector.filter_by_category("Dessert")
        assert exc_info.value.status_code == 503
        assert exc_info.value.kind == "transport"

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("DNS failure"),
        requests.exceptions.Timeout("read timed out"),
        requests.exceptions.RequestException("boom"),
    ])
    def test_network_errors_raise_transport_error(self, error):
        connector, _ = _connector_with(error=error, base_url="http://api")
        with pytest.raises(TransportError) as exc_info:
            connector.filter_by_category("Dessert")
        assert exc_info.value.status_code is None

    def test_invalid_json_raises_decode_error(self):
        response = _mock_response(json_error=ValueError("Expecting value: line 1 column 1"))
        connector, _ = _connector_with(response, base_url="http://api")
        with pytest.raises(DecodeError):
            connector.filter_by_category("Dessert")

    def test_non_object_payload_raises_decode_error(self):
        connector, _ = _connector_with(_mock_response([{"idMeal": "1"}]), base_url="http://api")
        with pytest.raises(DecodeError, match="expected an object"):
            connector.filter_by_category("Dessert")

    def test_unexpected_shape_raises_decode_error(self):
        payload = {"meals": [{"strMeal": "No id", "strMealThumb": "http://x"}]}
        connector, _ = _connector_with(_mock_response(payload), base_url="http://api")
        with pytest.raises(DecodeError):
            connector.filter_by_category("Dessert")

    def test_missing_meals_key_raises_decode_error(self):
        connector, _ = _connector_with(_mock_response({"error": "nope"}), base_url="http://api")
        with pytest.raises(DecodeError):
            connector.filter_by_category("Dessert")

    def test_malformed_base_url_raises_invalid_request(self):
        connector, _ = _connector_with(
            error=requests.exceptions.MissingSchema("No scheme supplied"), base_url="not-a-url"
        )
        with pytest.raises(InvalidRequestError):
            connector.filter_by_category("Dessert")


class TestLookupMeal:
    """GET lookup.php."""

    def test_requests_meal_id_and_decodes(self):
        payload = {
            "meals": [{
                "idMeal": "52893",
                "strMeal": "Apple & Blackberry Crumble",
                "strInstructions": "Heat oven.",
                "strMealThumb": "http://x/y.jpg",
                "strIngredient1": "Sugar",
                "strMeasure1": "100g",
            }]
        }
        connector, session = _connector_with(_mock_response(payload), base_url="http://api")

        records = connector.lookup_meal("52893")

        session.get.assert_called_once_with(
            "http://api/lookup.php", params={"i": "52893"}, timeout=None
        )
        assert len(records) == 1
        assert isinstance(records[0], MealDetailRecord)
        assert records[0].ingredient(1) == "Sugar"

    def test_strips_meal_id(self):
        connector, session = _connector_with(_mock_response({"meals": []}), base_url="http://api")
        connector.lookup_meal(" 52893 ")
        assert session.get.call_args[1]["params"] == {"i": "52893"}

    def test_unknown_id_returns_empty(self):
        connector, _ = _connector_with(_mock_response({"meals": None}), base_url="http://api")
        assert connector.lookup_meal("0") == []

    @pytest.mark.parametrize("meal_id", ["", "   ", None])
    def test_blank_id_raises_invalid_request_without_calling_api(self, meal_id):
        connector, session = _connector_with(_mock_response({"meals": []}), base_url="http://api")
        with pytest.raises(InvalidRequestError):
            connector.lookup_meal(meal_id)
        session.get.assert_not_called()

    def test_http_404_raises_transport_error(self):
        connector, _ = _connector_with(_mock_response(status_code=404), base_url="http://api")
        with pytest.raises(TransportError) as exc_info:
            connector.lookup_meal("52893")
        assert exc_info.value.status_code == 404
