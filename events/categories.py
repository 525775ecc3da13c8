"""Event category configuration.

BASE_CATEGORIES is the set new events may use. CATEGORY_MAPPING translates
legacy or frontend category names onto it.
"""

from collections.abc import Mapping

FALLBACK_CATEGORY = "Other"

BASE_CATEGORIES = (
    "Music",
    "Visual Arts",
    "Performing Arts",
    "Film",
    "Lectures",
    "Fashion",
    "Food",
    "Sports",
    "Technology",
    "Health",
    "Business",
    "Lifestyle",
    "Community",
    "Other",
)

CATEGORY_MAPPING = {
    "Music": "Music",
    "Technology": "Technology",
    "Business": "Business",
    "Sports": "Sports",
    "Other": "Other",
    "Arts": "Visual Arts",
    "Food & Drink": "Food",
    "Education": "Lectures",
    "Community": "Community",
    "Workshop": "Lifestyle",
    "Conference": "Business",
    "Festival": "Music",
    "Performance": "Performing Arts",
    "Exhibition": "Visual Arts",
    "Networking": "Business",
}


def is_base_category(category: str) -> bool:
    return category in BASE_CATEGORIES


def resolve_category(category: str, overrides: Mapping[str, str] | None = None) -> str:
    """Map a category onto BASE_CATEGORIES.

    Base categories are returned unchanged. Others resolve through
    `overrides`, then CATEGORY_MAPPING, then FALLBACK_CATEGORY.
    """
    if is_base_category(category):
        return category
    if overrides and overrides.get(category):
        return overrides[category]
    return CATEGORY_MAPPING.get(category) or FALLBACK_CATEGORY
