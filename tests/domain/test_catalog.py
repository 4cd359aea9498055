"""Unit tests for catalog queries."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.product import Category
from storefront.domain.model.value_objects import Money
from tests.fakes import make_catalog, make_product


def _ids(products):
    return [p.id for p in products]


class TestCatalogBasics:

    def test_all_returns_every_product_in_order(self):
        assert _ids(make_catalog().all()) == ["p1", "p2", "p3", "p4"]

    def test_all_is_a_defensive_copy(self):
        catalog = make_catalog()
        products = catalog.all()
        products.clear()
        assert len(catalog.all()) == 4

    def test_by_id(self):
        assert make_catalog().by_id("p2").name == "Gadget"

    def test_by_id_unknown_returns_none(self):
        assert make_catalog().by_id("nope") is None

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate product id"):
            Catalog([make_product("p1"), make_product("p1", name="Other")])

    def test_contains_and_len(self):
        catalog = make_catalog()
        assert "p1" in catalog
        assert "zzz" not in catalog
        assert len(catalog) == 4


class TestSearch:

    def test_matches_name_case_insensitively(self):
        assert _ids(make_catalog().search("WIDG")) == ["p1"]

    def test_matches_description(self):
        assert _ids(make_catalog().search("programming")) == ["p3"]

    def test_empty_term_returns_all(self):
        assert len(make_catalog().search("")) == 4

    def test_blank_term_returns_all(self):
        assert len(make_catalog().search("   ")) == 4

    def test_no_match(self):
        assert make_catalog().search("submarine") == []


class TestFilters:

    def test_by_category(self):
        assert _ids(make_catalog().by_category(Category.HOME)) == ["p2"]

    def test_price_range_is_inclusive_on_both_ends(self):
        result = make_catalog().by_price_range(Money.of("10.00"), Money.of("79.90"))
        assert _ids(result) == ["p1", "p2", "p3"]

    def test_price_range_empty(self):
        assert make_catalog().by_price_range(Money.of("1"), Money.of("2")) == []

    def test_min_rating_is_inclusive(self):
        assert _ids(make_catalog().by_min_rating(4.8)) == ["p2", "p3"]

    def test_categories_present_in_enum_order(self):
        assert make_catalog().categories() == [
            Category.ELECTRONICS, Category.BOOKS, Category.HOME, Category.SPORTS,
        ]


class TestCompositeFilter:

    def test_no_criteria_returns_all(self):
        assert len(make_catalog().filter()) == 4

    def test_criteria_are_combined_with_and(self):
        catalog = make_catalog()
        result = catalog.filter(term="g", min_price=Money.of("20"), min_rating=4.5)
        # Widget is too cheap, Football has no 'g'
        assert _ids(result) == ["p2", "p3"]

    def test_matches_intersection_of_individual_queries(self):
        catalog = make_catalog()
        expected = (
            set(_ids(catalog.search("o")))
            & set(_ids(catalog.by_price_range(Money.of("0"), Money.of("100"))))
            & set(_ids(catalog.by_min_rating(4.0)))
        )
        result = catalog.filter(
            term="o", min_price=Money.of("0"), max_price=Money.of("100"), min_rating=4.0,
        )
        assert set(_ids(result)) == expected

    def test_category_and_price(self):
        result = make_catalog().filter(category=Category.SPORTS, max_price=Money.of("100"))
        assert result == []
