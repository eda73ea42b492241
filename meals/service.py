"""
Meal data service: the view-state holder behind the list and detail screens.

MealDataService owns two observable state slots:
- `meals`: ordered list of displayable MealSummary for the Dessert category
- `meal_detail`: the most recently loaded MealDetail, or None

and two operations that populate them:
- load_dessert_meals() -> GET filter.php?c=Dessert -> filter -> replace `meals`
- load_meal_detail(meal_id) -> GET lookup.php?i={id} -> first meal -> replace `meal_detail`

Failures never clear a slot. Each operation logs the error and returns a
FetchResult so the caller can decide whether to show it.

Flow: Streamlit page -> MealDataService.load_*() -> MealDBConnector -> models -> state slot -> listeners
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from meals.config import DESSERT_CATEGORY
from meals.connectors.base import BaseConnector
from meals.connectors.mealdb_connector import MealDBConnector
from meals.errors import MealServiceError, NotFoundError
from meals.models import MealDetail, MealSummary, filter_displayable

logger = logging.getLogger(__name__)

MEALS_SLOT = "meals"
MEAL_DETAIL_SLOT = "meal_detail"

# listener(slot_name, new_value)
StateListener = Callable[[str, Any], None]


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of a load operation.

    Attributes:
        ok: True when the state slot was replaced
        value: The new slot value on success
        error: The MealServiceError on failure
    """
    ok: bool
    value: Any = None
    error: Optional[MealServiceError] = None

    @property
    def kind(self) -> Optional[str]:
        """Error kind ("transport", "decode", "not_found", "invalid_request") or None on success."""
        return self.error.kind if self.error is not None else None

    @classmethod
    def success(cls, value: Any) -> "FetchResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: MealServiceError) -> "FetchResult":
        return cls(ok=False, error=error)


class MealDataService:
    """
    Holds meal list and meal detail state and loads it from a connector.

    The two operations write disjoint slots. Concurrent calls of the same
    operation are not serialized: whichever response completes last wins.
    """

    def __init__(
        self,
        connector: Optional[BaseConnector] = None,
        category: str = DESSERT_CATEGORY,
    ) -> None:
        """
        Args:
            connector: Data source (optional, defaults to MealDBConnector())
            category: Category listed by load_dessert_meals()
        """
        self.connector = connector or MealDBConnector()
        self.category = category
        self._meals: List[MealSummary] = []
        self._meal_detail: Optional[MealDetail] = None
        self._listeners: List[StateListener] = []

    @property
    def meals(self) -> List[MealSummary]:
        """Current meal list (a copy; mutate state only via load_dessert_meals)."""
        return list(self._meals)

    @property
    def meal_detail(self) -> Optional[MealDetail]:
        """Current meal detail, or None before the first successful lookup."""
        return self._meal_detail

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a callback invoked as listener(slot_name, value) on every slot write.

        Returns:
            A function that removes the listener when called.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load_dessert_meals(self) -> FetchResult:
        """
        Fetch meals for the configured category and replace `meals`.

        Meals with an empty name or missing thumbnail are dropped; API order is kept.
        On failure `meals` is left unchanged.

        Returns:
            FetchResult with the new meal list on success
        """
        try:
            fetched = self.connector.filter_by_category(self.category)
        except MealServiceError as e:
            logger.warning("Error fetching %s meals (%s): %s", self.category, e.kind, e)
            return FetchResult.failure(e)

        meals = filter_displayable(fetched)
        dropped = len(fetched) - len(meals)
        if dropped:
            logger.debug("Dropped %d %s meals without a name or thumbnail", dropped, self.category)

        self._meals = meals
        self._notify(MEALS_SLOT, self.meals)
        logger.info("Loaded %d %s meals", len(meals), self.category)
        return FetchResult.success(self.meals)

    def load_meal_detail(self, meal_id: str) -> FetchResult:
        """
        Fetch a meal by id and replace `meal_detail` with the first result.

        On failure, including an empty lookup result, `meal_detail` is left unchanged.

        Args:
            meal_id: Meal identifier (non-empty)

        Returns:
            FetchResult with the new MealDetail on success
        """
        try:
            records = self.connector.lookup_meal(meal_id)
            if not records:
                raise NotFoundError(f"Meal {meal_id!r} not found in lookup response")
        except MealServiceError as e:
            logger.warning("Error fetching meal details for %r (%s): %s", meal_id, e.kind, e)
            return FetchResult.failure(e)

        detail = MealDetail.from_record(records[0])
        self._meal_detail = detail
        self._notify(MEAL_DETAIL_SLOT, detail)
        logger.info("Loaded meal detail %s (%d ingredients)", detail.id, len(detail.ingredients))
        return FetchResult.success(detail)

    def _notify(self, slot: str, value: Any) -> None:
        for listener in list(self._listeners):
            try:
                listener(slot, value)
            except Exception:
                logger.exception("State listener failed for slot %s", slot)
