"""
Word categories used to pick the secret word for a round.
"""

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml


class ContentError(ValueError):
    """Raised when category data is unusable."""


@dataclass
class Category:
    """A named list of candidate secret words."""
    name: str
    words: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.name = str(self.name).strip()
        self.words = [str(w).strip() for w in self.words if str(w).strip()]
        if not self.name:
            raise ContentError("Category name must not be empty")
        if not self.words:
            raise ContentError(f"Category '{self.name}' has no words")


DEFAULT_CATEGORIES: Dict[str, List[str]] = {
    "Places": [
        "Airport", "Hospital", "School", "Beach", "Museum", "Library",
        "Restaurant", "Cinema", "Supermarket", "Stadium", "Bank", "Zoo",
    ],
    "Food": [
        "Pizza", "Falafel", "Sushi", "Hummus", "Burger", "Pancakes",
        "Kebab", "Couscous", "Ice cream", "Mansaf", "Shawarma", "Soup",
    ],
    "Animals": [
        "Camel", "Lion", "Elephant", "Penguin", "Dolphin", "Falcon",
        "Giraffe", "Horse", "Cat", "Octopus", "Owl", "Turtle",
    ],
    "Jobs": [
        "Doctor", "Teacher", "Pilot", "Chef", "Firefighter", "Engineer",
        "Farmer", "Police officer", "Dentist", "Barber", "Journalist", "Tailor",
    ],
    "Objects": [
        "Umbrella", "Mirror", "Clock", "Phone", "Key", "Lamp",
        "Guitar", "Backpack", "Camera", "Pillow", "Scissors", "Candle",
    ],
    "Sports": [
        "Football", "Basketball", "Tennis", "Swimming", "Boxing", "Chess",
        "Volleyball", "Cycling", "Skiing", "Karate", "Golf", "Running",
    ],
}


class CategorySource:
    """Read-only collection of categories, queried once per round start."""

    def __init__(self, categories: Optional[List[Category]] = None):
        if categories is None:
            categories = [Category(name, words) for name, words in DEFAULT_CATEGORIES.items()]
        if not categories:
            raise ContentError("At least one category is required")
        self._categories = list(categories)

    def __len__(self) -> int:
        return len(self._categories)

    @property
    def categories(self) -> List[Category]:
        """All categories, in load order."""
        return list(self._categories)

    def get(self, name: str) -> Optional[Category]:
        """Get category by name."""
        for category in self._categories:
            if category.name == name:
                return category
        return None

    def pick(self, rng: random.Random) -> Tuple[str, str]:
        """
        Pick a category uniformly, then a word uniformly within it.

        Returns:
            (category name, word)
        """
        category = self._categories[rng.randrange(len(self._categories))]
        word = category.words[rng.randrange(len(category.words))]
        return category.name, word


def load_categories_from_yaml(path: str) -> CategorySource:
    """
    Load categories from a YAML mapping of category name to word list.

    Args:
        path: Path to the YAML file

    Returns:
        CategorySource with the file's categories

    Raises:
        FileNotFoundError: If the file doesn't exist
        ContentError: If the file isn't a non-empty mapping of word lists
    """
    categories_file = Path(path)

    if not categories_file.exists():
        raise FileNotFoundError(f"Categories file not found: {path}")

    with open(categories_file, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not data:
        raise ContentError(f"Categories file must map category names to word lists: {path}")

    categories = []
    for name, words in data.items():
        if not isinstance(words, list):
            raise ContentError(f"Category '{name}' must be a list of words")
        categories.append(Category(name, words))

    return CategorySource(categories)
