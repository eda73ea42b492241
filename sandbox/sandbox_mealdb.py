"""
Sandbox script for exercising MealDataService against the live TheMealDB API.

Prerequisites:
- Network access to www.themealdb.com (or MEALDB_BASE_URL pointing at a mirror)

Run:
    python -m sandbox.sandbox_mealdb [meal_id]
"""

import sys
from pprint import pprint

from meals.config import configure_logging
from meals.service import MealDataService


def main():
    """Load the dessert list, then the detail of one dessert."""
    configure_logging("DEBUG")
    service = MealDataService()

    print("Loading desserts...")
    result = service.load_dessert_meals()
    if not result.ok:
        print(f"\n❌ Dessert list failed ({result.kind}): {result.error}")
        return

    meals = service.meals
    print(f"Got {len(meals)} desserts ✅\n")
    for i, meal in enumerate(meals[:10], 1):
        print(f"{i}. {meal.name} ({meal.id})")

    meal_id = sys.argv[1] if len(sys.argv) > 1 else (meals[0].id if meals else "52893")
    print(f"\nLoading detail for {meal_id}...")
    result = service.load_meal_detail(meal_id)
    if not result.ok:
        print(f"\n❌ Detail failed ({result.kind}): {result.error}")
        return

    detail = service.meal_detail
    print(f"\n=== {detail.name} ===")
    for number, step in enumerate(detail.instruction_steps, 1):
        print(f"Step {number}: {step}")
    print("\n=== Ingredients ===")
    pprint([(i.name, i.measure) for i in detail.ingredients])

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
