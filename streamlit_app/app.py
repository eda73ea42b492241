"""
Dessert Meals - Streamlit Frontend Main Entry Point (dessert list).

This page fetches the Dessert category once per session through MealDataService
and renders each meal with its thumbnail. Selecting a meal opens the detail page.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import the meals package
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from meals.config import configure_logging

import streamlit as st

from utils.state import (
    get_meal_service,
    select_meal,
    meals_requested,
    mark_meals_requested,
    reset_meals_requested,
    get_meals_last_result,
    set_meals_last_result,
)
from ui.feedback import show_fetch_error, show_empty_state, working_spinner

DETAIL_PAGE = "pages/01_🍮_Recipe_Detail.py"

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Desserts",
    page_icon="🍰",
    layout="centered",
)

service = get_meal_service()

st.title("Desserts")

# Fetch once per session; afterwards the list is served from the state slot
if not meals_requested():
    mark_meals_requested()
    with working_spinner("Loading desserts…"):
        result = service.load_dessert_meals()
    set_meals_last_result(result)

last_result = get_meals_last_result()
if last_result is not None and not last_result.ok:
    if show_fetch_error(last_result, retry_key="retry_meals"):
        reset_meals_requested()
        st.rerun()

meals = service.meals
if not meals:
    if last_result is not None and last_result.ok:
        show_empty_state("No desserts available", "TheMealDB returned no desserts with a name and picture.")
else:
    st.caption(f"{len(meals)} desserts")
    for meal in meals:
        image_col, name_col = st.columns([1, 3], vertical_alignment="center")
        with image_col:
            st.image(meal.thumbnail_url, width=100)
        with name_col:
            if st.button(meal.name, key=f"meal_{meal.id}", use_container_width=True):
                select_meal(meal.id)
                st.switch_page(DETAIL_PAGE)
