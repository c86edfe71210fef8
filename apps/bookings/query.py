"""
Query-string parsing for the clinic bookings list.

Every parameter is optional and malformed values fall back to defaults
instead of raising. A bad `page` means page 1 and a bad `per_page` means
the default page size. Numbers whose slice would not fit the database's
64-bit LIMIT/OFFSET count as bad. An unknown sort column means newest
first, and dates that do not parse disable the date-range filter.
"""
from dataclasses import dataclass
from datetime import date
from typing import List, Mapping, Optional, Tuple

from django.conf import settings
from django.utils.dateparse import parse_date, parse_datetime

from apps.core.utils.constants import BOOKINGS_DEFAULT_PER_PAGE

DEFAULT_ORDERING = '-created_at'

# Largest LIMIT / OFFSET the database accepts (signed 64-bit)
MAX_SQL_INT = 2 ** 63 - 1

# Public (camelCase) column names accepted in `sort`, mapped to model fields
SORTABLE_COLUMNS = {
    'firstName': 'first_name',
    'lastName': 'last_name',
    'email': 'email',
    'phone': 'phone',
    'type': 'type',
    'date': 'date',
    'time': 'time',
    'slot': 'slot',
    'status': 'status',
    'createdAt': 'created_at',
    'updatedAt': 'updated_at',
}
SORTABLE_FIELDS = set(SORTABLE_COLUMNS.values())


def _get(params: Mapping, key: str) -> Optional[str]:
    """Last value for `key`, or None; lists count as repeated parameters."""
    value = params.get(key)
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else None
    if value is None:
        return None
    return str(value)


def _get_list(params: Mapping, key: str) -> List[str]:
    """Every value for `key`: QueryDict lists, plain lists, or a single value."""
    if hasattr(params, 'getlist'):
        return [str(value) for value in params.getlist(key)]
    value = params.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


def parse_positive_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        number = int(value.strip())
    except ValueError:
        return None
    return number if 0 < number <= MAX_SQL_INT else None


def parse_sort(value: Optional[str]) -> str:
    """
    Translate a `column.direction` token into a Django ordering expression.

    "lastName.asc" -> "last_name", "lastName.desc" -> "-last_name".
    Unknown columns fall back to newest first; a missing or unknown
    direction sorts descending.
    """
    if not value:
        return DEFAULT_ORDERING
    column, _, direction = value.partition('.')
    field = SORTABLE_COLUMNS.get(column)
    if field is None and column in SORTABLE_FIELDS:
        field = column
    if field is None:
        return DEFAULT_ORDERING
    return field if direction == 'asc' else f'-{field}'


def parse_types(values: List[str]) -> Tuple[str, ...]:
    """
    Dot-separated booking types; repeated parameters are merged.
    Values are kept as requested, so types no booking has match nothing.
    """
    types = []
    for item in '.'.join(values).split('.'):
        item = item.strip()
        if item and item not in types:
            types.append(item)
    return tuple(types)


def parse_day(value: Optional[str]) -> Optional[date]:
    """ISO date, or the date part of an ISO datetime; None when unparseable."""
    if not value:
        return None
    value = value.strip()
    try:
        parsed = parse_date(value)
    except ValueError:
        return None
    if parsed is not None:
        return parsed
    try:
        moment = parse_datetime(value)
    except ValueError:
        return None
    return moment.date() if moment is not None else None


def _text(value: Optional[str]) -> str:
    return value.strip() if value else ''


@dataclass(frozen=True)
class BookingListQuery:
    page: int = 1
    per_page: int = BOOKINGS_DEFAULT_PER_PAGE
    ordering: str = DEFAULT_ORDERING
    last_name: str = ''
    email: str = ''
    types: Tuple[str, ...] = ()
    created_from: Optional[date] = None
    created_to: Optional[date] = None

    @classmethod
    def from_query_params(cls, params: Mapping) -> 'BookingListQuery':
        """
        Build a query from request parameters (`request.GET` or a plain dict).

        Recognised keys: page, per_page, sort, from, to, lastName, type, email.
        """
        default_per_page = getattr(settings, 'BOOKINGS_DEFAULT_PER_PAGE', BOOKINGS_DEFAULT_PER_PAGE)
        per_page = parse_positive_int(_get(params, 'per_page')) or default_per_page
        page = parse_positive_int(_get(params, 'page')) or 1
        # offset + limit must stay in range; such a page is out of reach anyway
        if page * per_page > MAX_SQL_INT:
            page = 1
        return cls(
            page=page,
            per_page=per_page,
            ordering=parse_sort(_get(params, 'sort')),
            last_name=_text(_get(params, 'lastName')),
            email=_text(_get(params, 'email')),
            types=parse_types(_get_list(params, 'type')),
            created_from=parse_day(_get(params, 'from')),
            created_to=parse_day(_get(params, 'to')),
        )

    @property
    def limit(self) -> int:
        return self.per_page

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def has_date_range(self) -> bool:
        return self.created_from is not None and self.created_to is not None

    @property
    def sort_field(self) -> str:
        return self.ordering.lstrip('-')

    @property
    def sort_descending(self) -> bool:
        return self.ordering.startswith('-')
