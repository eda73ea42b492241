"""
UI helpers for the Dessert Meals Streamlit app.
"""

from ui.feedback import show_error, show_fetch_error, show_empty_state, working_spinner

__all__ = [
    "show_error",
    "show_fetch_error",
    "show_empty_state",
    "working_spinner",
]
