from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List


class SortOption(str, Enum):
    rating = "rating"
    name = "name"
    reviews = "reviews"


def _number(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _sort_key(place: Dict[str, Any], option: SortOption):
    if not isinstance(place, dict):
        place = {}
    if option is SortOption.rating:
        return -_number(place.get("rating"))
    if option is SortOption.name:
        name = place.get("name")
        return name.casefold() if isinstance(name, str) else ""
    return -_number(place.get("user_ratings_total"))


def sort_places(results: List[Dict[str, Any]], option: SortOption) -> List[Dict[str, Any]]:
    """
    Reorder raw upstream results the way the card grid does.
    Only rating, name and user_ratings_total are read; anything else in a
    result is ignored and the dicts are returned unchanged. Ties keep upstream order.
    """
    keyed = [(_sort_key(r, option), i) for i, r in enumerate(results)]
    keyed.sort()
    return [results[i] for _, i in keyed]
