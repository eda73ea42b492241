"""
Standardized feedback utilities for error, empty, and loading states.

Shared by the list and detail pages so failed fetches surface the same way.
"""

from contextlib import contextmanager
from typing import Optional

import streamlit as st

from meals.service import FetchResult

# User-facing wording per error kind
ERROR_MESSAGES = {
    "transport": "Could not reach TheMealDB. Check your connection and try again.",
    "decode": "TheMealDB returned data we could not read.",
    "not_found": "This recipe could not be found.",
    "invalid_request": "This recipe link is not valid.",
}


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Render a recipe loading failure as a red banner.

    Args:
        message: What went wrong, in words a cook would understand
        hint: Optional technical detail (the underlying error) shown below it
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_fetch_error(result: FetchResult, retry_key: str) -> bool:
    """
    Show the error banner for a failed FetchResult with a retry button.

    Args:
        result: Failed FetchResult
        retry_key: Unique Streamlit widget key for the retry button

    Returns:
        True if the user clicked retry
    """
    show_error(ERROR_MESSAGES.get(result.kind, "Something went wrong."), hint=str(result.error))
    return st.button("Try again", key=retry_key)


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Fetching recipes…"):
    """
    Show a spinner while a MealDataService fetch is in flight.

    The service has no loading state of its own, so pages wrap each load call.

    Usage:
        with working_spinner("Loading desserts…"):
            service.load_dessert_meals()
    """
    with st.spinner(label):
        yield
