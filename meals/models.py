"""
Meal models for the Dessert Meals app.

This module defines two layers of schemas:

- Raw records that mirror TheMealDB JSON payloads (MealsResponse, MealDetailResponse,
  MealDetailRecord). These only decode; they do not reshape anything.
- Normalized entities consumed by the rest of the app (MealSummary, MealDetail,
  Ingredient).

# NOTE: The lookup endpoint returns ingredients as 20 flat optional field pairs
    (strIngredient1..strIngredient20, strMeasure1..strMeasure20). MealDetailRecord
    keeps them as extra fields and normalize_ingredients() projects them into an
    ordered list in a single pass. Keep decoding and normalization separate.
"""

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from meals.instructions import split_instruction_steps

# Number of ingredient/measure slots in a lookup payload
INGREDIENT_SLOTS = 20


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _id_to_str(value: Any) -> Any:
    # The API sends ids as strings; tolerate numeric ids from fixtures and mirrors
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class MealSummary(BaseModel):
    """
    List-view projection of a meal, decoded from the filter endpoint.

    Identity is `id`. Instances are immutable once received.
    """
    id: str = Field(..., alias="idMeal", description="TheMealDB meal identifier")
    name: str = Field("", alias="strMeal", description="Meal name")
    thumbnail_url: Optional[str] = Field(None, alias="strMealThumb", description="URL to thumbnail image")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return _id_to_str(value)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Any:
        return _none_to_empty(value)

    @property
    def is_displayable(self) -> bool:
        """Whether the meal has both a name and a thumbnail to show in the list."""
        return bool(self.name) and bool(self.thumbnail_url)


def filter_displayable(meals: Iterable[MealSummary]) -> List[MealSummary]:
    """
    Drop meals with an empty name or a missing/empty thumbnail URL.

    Order of the remaining meals is preserved.
    """
    return [meal for meal in meals if meal.is_displayable]


class MealsResponse(BaseModel):
    """Payload of GET /filter.php. The `meals` key is required; null decodes as an empty list."""
    meals: List[MealSummary] = Field(...)

    @field_validator("meals", mode="before")
    @classmethod
    def _null_meals(cls, value: Any) -> Any:
        return [] if value is None else value


class MealDetailRecord(BaseModel):
    """
    Raw meal payload from GET /lookup.php.

    The 20 ingredient/measure slots are kept as extra fields; read them with
    ingredient(index) and measure(index) where index is 1-based.
    """
    id: str = Field(..., alias="idMeal")
    name: str = Field("", alias="strMeal")
    instructions: str = Field("", alias="strInstructions")
    thumbnail_url: Optional[str] = Field(None, alias="strMealThumb")
    category: Optional[str] = Field(None, alias="strCategory")
    area: Optional[str] = Field(None, alias="strArea")
    tags: Optional[str] = Field(None, alias="strTags")
    youtube_url: Optional[str] = Field(None, alias="strYoutube")
    source_url: Optional[str] = Field(None, alias="strSource")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return _id_to_str(value)

    @field_validator("name", "instructions", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _none_to_empty(value)

    def ingredient(self, index: int) -> Optional[str]:
        """Raw ingredient at 1-based slot `index`, or None if absent."""
        return self._slot("strIngredient", index)

    def measure(self, index: int) -> Optional[str]:
        """Raw measure at 1-based slot `index`, or None if absent."""
        return self._slot("strMeasure", index)

    def _slot(self, prefix: str, index: int) -> Optional[str]:
        if not 1 <= index <= INGREDIENT_SLOTS:
            raise IndexError(f"{prefix} slot must be between 1 and {INGREDIENT_SLOTS}, got {index}")
        value = (self.model_extra or {}).get(f"{prefix}{index}")
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)


class MealDetailResponse(BaseModel):
    """Payload of GET /lookup.php. Holds at most one meal in practice; null decodes as empty."""
    meals: List[MealDetailRecord] = Field(...)

    @field_validator("meals", mode="before")
    @classmethod
    def _null_meals(cls, value: Any) -> Any:
        return [] if value is None else value


class Ingredient(BaseModel):
    """One ingredient line of a recipe."""
    name: str
    measure: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def display_text(self) -> str:
        """Trimmed "measure name" line for rendering; empty when the name is blank."""
        name = self.name.strip()
        if not name:
            return ""
        measure = (self.measure or "").strip()
        return f"{measure} {name}" if measure else name


class MealDetail(BaseModel):
    """
    Full projection of a meal used by the detail view.

    Built from a MealDetailRecord via MealDetail.from_record().
    """
    id: str = Field(..., description="TheMealDB meal identifier")
    name: str = Field(..., description="Meal name")
    instructions: str = Field("", description="Free-text cooking instructions")
    ingredients: List[Ingredient] = Field(default_factory=list, max_length=INGREDIENT_SLOTS)
    thumbnail_url: Optional[str] = Field(None, description="URL to thumbnail image")
    category: Optional[str] = None
    area: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    youtube_url: Optional[str] = None
    source_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("thumbnail_url", "category", "area", "youtube_url", "source_url", mode="before")
    @classmethod
    def _blank_optionals(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @property
    def instruction_steps(self) -> List[str]:
        """Instructions split into display steps."""
        return split_instruction_steps(self.instructions)

    @classmethod
    def from_record(cls, record: MealDetailRecord) -> "MealDetail":
        """Normalize a raw lookup record into a MealDetail."""
        tags = [tag.strip() for tag in (record.tags or "").split(",") if tag.strip()]
        return cls(
            id=record.id,
            name=record.name,
            instructions=record.instructions,
            ingredients=normalize_ingredients(record),
            thumbnail_url=record.thumbnail_url,
            category=record.category,
            area=record.area,
            tags=tags,
            youtube_url=record.youtube_url,
            source_url=record.source_url,
        )


def normalize_ingredients(record: MealDetailRecord) -> List[Ingredient]:
    """
    Project the flat ingredient/measure slots into an ordered ingredient list.

    A slot is kept iff its ingredient is present and non-empty. Order follows
    ascending slot index. Names and measures are carried through unchanged;
    trimming is left to the view.

    Args:
        record: Raw lookup record

    Returns:
        List of Ingredient, at most INGREDIENT_SLOTS long
    """
    ingredients: List[Ingredient] = []
    for index in range(1, INGREDIENT_SLOTS + 1):
        name = record.ingredient(index)
        if not name:
            continue
        ingredients.append(Ingredient(name=name, measure=record.measure(index)))
    return ingredients
