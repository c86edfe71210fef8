"""Unit tests for clinic bookings query-string parsing."""

from __future__ import annotations

from datetime import date

from django.http import QueryDict
from django.test import SimpleTestCase, override_settings

from apps.bookings.query import BookingListQuery, parse_day, parse_sort, parse_types


class PaginationParsingTests(SimpleTestCase):
    def test_defaults_when_params_missing(self) -> None:
        query = BookingListQuery.from_query_params({})

        self.assertEqual(query.page, 1)
        self.assertEqual(query.limit, 10)
        self.assertEqual(query.offset, 0)

    def test_offset_from_one_based_page(self) -> None:
        query = BookingListQuery.from_query_params({"page": "3", "per_page": "20"})

        self.assertEqual(query.limit, 20)
        self.assertEqual(query.offset, 40)

    def test_offset_formula_holds_for_valid_pages(self) -> None:
        for page in (1, 2, 7):
            for per_page in (1, 10, 25):
                query = BookingListQuery.from_query_params({"page": str(page), "per_page": str(per_page)})
                self.assertEqual(query.offset, (page - 1) * per_page)

    def test_non_positive_page_is_first_page(self) -> None:
        for raw in ("0", "-4"):
            query = BookingListQuery.from_query_params({"page": raw})
            self.assertEqual(query.page, 1)
            self.assertEqual(query.offset, 0)

    def test_non_numeric_values_fall_back_to_defaults(self) -> None:
        query = BookingListQuery.from_query_params({"page": "abc", "per_page": "ten"})

        self.assertEqual(query.page, 1)
        self.assertEqual(query.limit, 10)
        self.assertEqual(query.offset, 0)

    def test_non_positive_per_page_uses_default(self) -> None:
        query = BookingListQuery.from_query_params({"per_page": "0"})

        self.assertEqual(query.limit, 10)

    def test_large_per_page_keeps_offset_formula(self) -> None:
        query = BookingListQuery.from_query_params({"page": "2", "per_page": "200"})

        self.assertEqual(query.limit, 200)
        self.assertEqual(query.offset, 200)

    def test_page_beyond_database_range_is_first_page(self) -> None:
        query = BookingListQuery.from_query_params({"page": "99999999999999999999"})

        self.assertEqual(query.page, 1)
        self.assertEqual(query.offset, 0)

    def test_slice_end_never_exceeds_database_range(self) -> None:
        query = BookingListQuery.from_query_params({"page": str(2 ** 62), "per_page": "4"})

        self.assertEqual(query.page, 1)

    def test_per_page_beyond_database_range_uses_default(self) -> None:
        query = BookingListQuery.from_query_params({"per_page": str(2 ** 64)})

        self.assertEqual(query.limit, 10)

    @override_settings(BOOKINGS_DEFAULT_PER_PAGE=25)
    def test_default_page_size_comes_from_settings(self) -> None:
        query = BookingListQuery.from_query_params({})

        self.assertEqual(query.limit, 25)

    def test_last_value_wins_for_repeated_parameters(self) -> None:
        query = BookingListQuery.from_query_params(QueryDict("page=2&page=4"))

        self.assertEqual(query.page, 4)

    def test_list_values_are_treated_as_repeated_parameters(self) -> None:
        query = BookingListQuery.from_query_params({"page": ["2", "5"]})

        self.assertEqual(query.page, 5)


class SortParsingTests(SimpleTestCase):
    def test_ascending_column(self) -> None:
        self.assertEqual(parse_sort("lastName.asc"), "last_name")

    def test_descending_column(self) -> None:
        self.assertEqual(parse_sort("lastName.desc"), "-last_name")

    def test_missing_direction_sorts_descending(self) -> None:
        self.assertEqual(parse_sort("email"), "-email")

    def test_snake_case_field_names_are_accepted(self) -> None:
        self.assertEqual(parse_sort("created_at.asc"), "created_at")

    def test_unknown_column_falls_back_to_newest_first(self) -> None:
        self.assertEqual(parse_sort("password.asc"), "-created_at")
        self.assertEqual(parse_sort("clinic.asc"), "-created_at")

    def test_missing_sort_is_newest_first(self) -> None:
        self.assertEqual(parse_sort(None), "-created_at")
        self.assertEqual(parse_sort(""), "-created_at")

    def test_query_exposes_sort_field_and_direction(self) -> None:
        query = BookingListQuery.from_query_params({"sort": "date.asc"})

        self.assertEqual(query.sort_field, "date")
        self.assertFalse(query.sort_descending)


class FilterParsingTests(SimpleTestCase):
    def test_types_are_dot_separated(self) -> None:
        self.assertEqual(parse_types(["consultation.checkup"]), ("consultation", "checkup"))

    def test_duplicate_types_are_dropped(self) -> None:
        self.assertEqual(parse_types(["checkup.checkup..surgery"]), ("checkup", "surgery"))

    def test_unknown_types_are_kept(self) -> None:
        self.assertEqual(parse_types(["checkup.massage"]), ("checkup", "massage"))

    def test_repeated_type_parameters_are_merged(self) -> None:
        query = BookingListQuery.from_query_params(QueryDict("type=surgery&type=checkup"))

        self.assertEqual(query.types, ("surgery", "checkup"))

    def test_empty_type_means_no_type_filter(self) -> None:
        self.assertEqual(parse_types([""]), ())
        self.assertEqual(parse_types([]), ())

    def test_text_filters_are_trimmed(self) -> None:
        query = BookingListQuery.from_query_params({"lastName": "  Kowal ", "email": " @clinic"})

        self.assertEqual(query.last_name, "Kowal")
        self.assertEqual(query.email, "@clinic")

    def test_dates_accept_iso_dates_and_datetimes(self) -> None:
        self.assertEqual(parse_day("2024-03-05"), date(2024, 3, 5))
        self.assertEqual(parse_day("2024-03-05T23:10:00+00:00"), date(2024, 3, 5))

    def test_malformed_dates_are_ignored(self) -> None:
        self.assertIsNone(parse_day("yesterday"))
        self.assertIsNone(parse_day("2024-02-30"))
        self.assertIsNone(parse_day(""))

    def test_date_range_requires_both_ends(self) -> None:
        only_from = BookingListQuery.from_query_params({"from": "2024-01-01"})
        both = BookingListQuery.from_query_params({"from": "2024-01-01", "to": "2024-01-31"})
        broken = BookingListQuery.from_query_params({"from": "2024-01-01", "to": "soon"})

        self.assertFalse(only_from.has_date_range)
        self.assertTrue(both.has_date_range)
        self.assertFalse(broken.has_date_range)

    def test_unused_parameters_are_ignored(self) -> None:
        query = BookingListQuery.from_query_params({"date": "2024-01-01", "time": "10:00", "slot": "A"})

        self.assertEqual(query, BookingListQuery())
