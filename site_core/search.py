from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence

from .models import Item, Category
from .constants import ALL_TYPES_ID


def same_label(a: str, b: str) -> bool:
    """Case-insensitive equality of two skill labels."""
    return (a or "").casefold() == (b or "").casefold()

def matches_type(item: Item, item_type: Optional[str]) -> bool:
    return not item_type or item_type == ALL_TYPES_ID or item.type == item_type

def in_category(item: Item, category: Optional[Category]) -> bool:
    """True if no category is set or the item has at least one of its skills."""
    if category is None:
        return True
    return any(category.contains(skill) for skill in item.skills)

def has_skill(item: Item, skill: Optional[str]) -> bool:
    """True if no skill is set or the item lists it, ignoring case."""
    if not skill:
        return True
    return any(same_label(own, skill) for own in item.skills)

def filter_items(
    items: Iterable[Item],
    item_type: Optional[str] = None,
    category: Optional[Category] = None,
    skill: Optional[str] = None,
) -> List[Item]:
    """
    Returns the items matching every active criterion, in input order.
    An empty list means nothing matched; it is not an error.
    """
    return [
        item for item in items
        if matches_type(item, item_type)
        and in_category(item, category)
        and has_skill(item, skill)
    ]

def collect_all_skills(items: Iterable[Item]) -> List[str]:
    """Gathers unique skill labels; the first spelling seen is the one kept."""
    seen: Dict[str, str] = {}
    for item in items:
        for skill in item.skills:
            seen.setdefault(skill.casefold(), skill)
    return sorted(seen.values(), key=str.casefold)

def count_by_category(items: Sequence[Item], categories: Iterable[Category]) -> Dict[str, int]:
    """Number of items falling into each category, keyed by category id."""
    return {
        category.id: sum(1 for item in items if in_category(item, category))
        for category in categories
    }
