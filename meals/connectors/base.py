"""
Base connector abstract class for meal data sources.

This module defines the interface MealDataService relies on. Implementations
fetch raw payloads, decode them into meal records and raise the typed errors
from meals.errors on failure; they never filter or hold state.
"""

from abc import ABC, abstractmethod
from typing import List

from meals.models import MealDetailRecord, MealSummary


class BaseConnector(ABC):
    """
    Abstract base class for all meal data connectors.

    Attributes:
        source: String identifier for the data source (e.g., "mealdb")
    """
    source: str

    @abstractmethod
    def filter_by_category(self, category: str) -> List[MealSummary]:
        """
        List meals in a category.

        Args:
            category: Category name (e.g., "Dessert")

        Returns:
            Decoded MealSummary records in source order, unfiltered.

        Raises:
            TransportError: On network failure or non-2xx status
            DecodeError: If the payload does not match the expected shape
            InvalidRequestError: If the request URL cannot be built
        """
        pass

    @abstractmethod
    def lookup_meal(self, meal_id: str) -> List[MealDetailRecord]:
        """
        Look up a single meal by id.

        Args:
            meal_id: Meal identifier (non-empty)

        Returns:
            Decoded raw records; empty when the id is unknown.

        Raises:
            TransportError: On network failure or non-2xx status
            DecodeError: If the payload does not match the expected shape
            InvalidRequestError: If meal_id is blank or the URL cannot be built
        """
        pass
