"""
Meal View State Module.

This module wraps Streamlit's session_state to hold one MealDataService per
browser session, plus the id of the meal selected on the list page.

# NOTE: session_state only lives for the current Streamlit session. A page refresh
    creates a new service, so both state slots start empty again and the list is
    re-fetched.
"""

from typing import Optional

import streamlit as st

from meals.service import FetchResult, MealDataService

SERVICE_KEY = "meal_data_service"
SELECTED_MEAL_KEY = "selected_meal_id"
MEALS_REQUESTED_KEY = "meals_requested"
MEALS_LAST_RESULT_KEY = "meals_last_result"


def get_meal_service() -> MealDataService:
    """
    Get the session's MealDataService, creating it on first use.

    Returns:
        MealDataService instance shared by all pages of this session
    """
    if SERVICE_KEY not in st.session_state:
        st.session_state[SERVICE_KEY] = MealDataService()
    return st.session_state[SERVICE_KEY]


def select_meal(meal_id: str) -> None:
    """Remember which meal the detail page should show."""
    st.session_state[SELECTED_MEAL_KEY] = meal_id


def get_selected_meal_id() -> Optional[str]:
    """Meal id chosen on the list page, or None."""
    return st.session_state.get(SELECTED_MEAL_KEY)


def meals_requested() -> bool:
    """Whether the list page already issued its initial fetch in this session."""
    return bool(st.session_state.get(MEALS_REQUESTED_KEY))


def mark_meals_requested() -> None:
    st.session_state[MEALS_REQUESTED_KEY] = True


def reset_meals_requested() -> None:
    """Forget the initial fetch so the list page fetches again (retry)."""
    st.session_state.pop(MEALS_REQUESTED_KEY, None)


def set_meals_last_result(result: FetchResult) -> None:
    """Store the outcome of the latest list fetch for the error banner."""
    st.session_state[MEALS_LAST_RESULT_KEY] = result


def get_meals_last_result() -> Optional[FetchResult]:
    """Outcome of the latest list fetch, or None if none was issued yet."""
    return st.session_state.get(MEALS_LAST_RESULT_KEY)
