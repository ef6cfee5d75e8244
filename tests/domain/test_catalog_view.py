"""Unit tests for search, status filtering and sorting of listings."""

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.service.catalog_view import (
    SortDirection,
    SortField,
    SortState,
    StatusFilter,
    build_view,
    filter_by_status,
    parse_choice,
    search_products,
    sort_products,
)
from tests.fakes import make_product


def _catalog():
    return [
        make_product(id=1, name="Wireless Mouse", sku="WM-001", price="24.99", current_stock=45),
        make_product(id=2, name="USB-C Cable", sku="CBL-010", price="9.99", current_stock=4),
        make_product(id=3, name="keyboard", sku="KB-100", price="79.00", current_stock=0),
        make_product(id=4, name="Monitor Stand", sku="MS-200", price="39.50", current_stock=12),
    ]


def ids(products):
    return [p.id for p in products]


class TestSearch:

    def test_matches_name_case_insensitively(self):
        assert ids(search_products(_catalog(), "MOUSE")) == [1]

    def test_matches_sku(self):
        assert ids(search_products(_catalog(), "cbl")) == [2]

    def test_matches_substring_in_either_field(self):
        assert ids(search_products(_catalog(), "B")) == [2, 3]

    @pytest.mark.parametrize("term", [None, "", "   "])
    def test_blank_term_means_no_filter(self, term):
        assert ids(search_products(_catalog(), term)) == [1, 2, 3, 4]

    def test_term_is_trimmed(self):
        assert ids(search_products(_catalog(), "  stand ")) == [4]

    def test_no_match(self):
        assert search_products(_catalog(), "zzz") == []


class TestStatusFilter:

    def test_all(self):
        assert ids(filter_by_status(_catalog(), StatusFilter.ALL)) == [1, 2, 3, 4]

    def test_normal_is_above_threshold(self):
        assert ids(filter_by_status(_catalog(), StatusFilter.NORMAL)) == [1, 4]

    def test_low_excludes_out_of_stock(self):
        assert ids(filter_by_status(_catalog(), StatusFilter.LOW)) == [2]

    def test_out(self):
        assert ids(filter_by_status(_catalog(), StatusFilter.OUT)) == [3]

    def test_at_threshold_is_low_not_normal(self):
        products = [make_product(id=1, current_stock=10, low_stock_threshold=10)]
        assert filter_by_status(products, StatusFilter.NORMAL) == []
        assert ids(filter_by_status(products, StatusFilter.LOW)) == [1]


class TestSort:

    def test_name_ascending_ignores_case(self):
        result = sort_products(_catalog(), SortField.NAME, SortDirection.ASC)
        assert ids(result) == [3, 4, 2, 1]

    def test_name_descending_is_exact_reverse_for_distinct_names(self):
        asc = sort_products(_catalog(), SortField.NAME, SortDirection.ASC)
        desc = sort_products(_catalog(), SortField.NAME, SortDirection.DESC)
        assert ids(desc) == list(reversed(ids(asc)))

    def test_sku(self):
        assert ids(sort_products(_catalog(), SortField.SKU)) == [2, 3, 4, 1]

    def test_price_descending(self):
        result = sort_products(_catalog(), SortField.PRICE, SortDirection.DESC)
        assert ids(result) == [3, 4, 1, 2]

    def test_current_stock(self):
        assert ids(sort_products(_catalog(), SortField.CURRENT_STOCK)) == [3, 2, 4, 1]

    def test_stable_for_equal_keys_in_both_directions(self):
        products = [
            make_product(id=1, name="b", current_stock=5),
            make_product(id=2, name="a", current_stock=5),
            make_product(id=3, name="c", current_stock=1),
            make_product(id=4, name="d", current_stock=5),
        ]
        asc = sort_products(products, SortField.CURRENT_STOCK, SortDirection.ASC)
        desc = sort_products(products, SortField.CURRENT_STOCK, SortDirection.DESC)
        assert ids(asc) == [3, 1, 2, 4]
        assert ids(desc) == [1, 2, 4, 3]

    def test_source_is_not_modified(self):
        catalog = _catalog()
        sort_products(catalog, SortField.PRICE)
        assert ids(catalog) == [1, 2, 3, 4]


class TestSortState:

    def test_defaults_to_name_ascending(self):
        state = SortState()
        assert state.field is SortField.NAME
        assert state.direction is SortDirection.ASC

    def test_same_field_flips_direction(self):
        state = SortState().toggle(SortField.NAME)
        assert state == SortState(SortField.NAME, SortDirection.DESC)
        assert state.toggle(SortField.NAME) == SortState(SortField.NAME, SortDirection.ASC)

    def test_new_field_resets_to_ascending(self):
        state = SortState(SortField.NAME, SortDirection.DESC).toggle(SortField.PRICE)
        assert state == SortState(SortField.PRICE, SortDirection.ASC)


class TestBuildView:

    def test_filters_then_sorts(self):
        view = build_view(
            _catalog(),
            search="o",
            status=StatusFilter.NORMAL,
            sort=SortState(SortField.PRICE, SortDirection.DESC),
        )
        assert ids(view) == [4, 1]

    def test_defaults_to_full_catalog_by_name(self):
        assert ids(build_view(_catalog())) == [3, 4, 2, 1]


class TestParseChoice:

    def test_parses_value(self):
        assert parse_choice(StatusFilter, "LOW") is StatusFilter.LOW

    def test_rejects_unknown_value(self):
        with pytest.raises(ValidationError, match="expected one of: all, normal, low, out"):
            parse_choice(StatusFilter, "gone")
