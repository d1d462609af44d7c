# Translates /food-items query parameters into a Mongo query
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING

ALL_CATEGORIES = 'All'

SORT_DIRECTIONS = {
    'asc': ASCENDING,
    'ascending': ASCENDING,
    '1': ASCENDING,
    'desc': DESCENDING,
    'descending': DESCENDING,
    '-1': DESCENDING,
}


@dataclass
class FoodItemQuery:
    filter: Dict = field(default_factory=dict)
    sort: List[Tuple[str, int]] = field(default_factory=list)
    skip: int = 0
    limit: int = 0  # 0 means no limit

    def apply(self, cursor):
        if self.sort:
            cursor = cursor.sort(self.sort)
        if self.skip:
            cursor = cursor.skip(self.skip)
        if self.limit:
            cursor = cursor.limit(self.limit)
        return cursor


def _positive_int(value) -> Optional[int]:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def parse_sort_order(value) -> int:
    direction = SORT_DIRECTIONS.get(str(value).strip().lower())
    if direction is None:
        raise ValueError(f"Invalid sort order: {value}")
    return direction


def build_food_item_query(args) -> FoodItemQuery:
    """Build filter, sort and pagination from a request's query args.

    category="All" clears the category filter. search is a literal,
    case-insensitive substring match on food_name. A missing or invalid
    limit returns every match; a missing or invalid page means page 1.
    """
    query = FoodItemQuery()

    category = args.get('category')
    if category:
        query.filter = {'food_category': category}
    if category == ALL_CATEGORIES:
        query.filter = {}

    search = args.get('search')
    if search:
        query.filter['food_name'] = {'$regex': re.escape(search), '$options': 'i'}

    sort_field = args.get('sortField')
    sort_order = args.get('sortOrder')
    if sort_field and sort_order:
        query.sort = [(sort_field, parse_sort_order(sort_order))]

    limit = _positive_int(args.get('limit'))
    if limit:
        page = _positive_int(args.get('page')) or 1
        query.limit = limit
        query.skip = (page - 1) * limit

    return query
