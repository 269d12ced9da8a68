"""Unit tests for the catalog query pipeline."""
from __future__ import annotations

import pytest

from catalog_query.application.search import (
    QueryOptions,
    SortBy,
    apply_query,
    filter_by_category,
    filter_by_price,
    filter_by_rating,
    get_suggestions,
    search_items,
    sort_items,
)
from catalog_query.kernel.catalog import CatalogItem, Rating
from catalog_query.kernel.text import truncate_string


def _item(id_: str, name: str = "", price: int = 0, stars: float | None = None, **kw) -> CatalogItem:
    rating = Rating(stars=stars, count=10) if stars is not None else None
    return CatalogItem(id=id_, name=name, price_cents=price, rating=rating, **kw)


SOCKS = _item("1", "Red Socks", 1090, 4.5, keywords=("socks", "apparel"))
BALL = _item("2", "Basketball", 2095, 4.0, keywords=("sports", "basketballs"))


def _catalog() -> list[CatalogItem]:
    return [
        _item("a", "Black and Gray Athletic Cotton Socks", 1090, 4.5, keywords=("socks", "sports", "apparel"), category="clothing"),
        _item("b", "Intermediate Size Basketball", 2095, 4.0, keywords=("sports", "basketballs")),
        _item("c", "Adults Plain Cotton T-Shirt", 799, 4.5, keywords=("tshirts", "apparel"), category="clothing"),
        _item("d", "2 Slot Toaster", 1899, 5.0, keywords=("toaster", "kitchen", "appliances"), category="kitchen"),
        _item("e", "Plain Hooded Fleece Sweatshirt", 2400, None, keywords=("hoodies", "apparel"), category="clothing"),
    ]


# ---------------------------------------------------------------------------
# Text search
# ---------------------------------------------------------------------------


class TestSearchItems:
    def test_name_substring_match(self) -> None:
        result = apply_query([SOCKS, BALL], QueryOptions(query="socks"))
        assert [i.id for i in result] == ["1"]

    def test_case_insensitive(self) -> None:
        assert [i.id for i in search_items([SOCKS, BALL], "SOCKS")] == ["1"]

    def test_keyword_match(self) -> None:
        result = search_items(_catalog(), "hoodies")
        assert [i.id for i in result] == ["e"]

    def test_keyword_substring_match(self) -> None:
        result = search_items(_catalog(), "basketball")
        assert [i.id for i in result] == ["b"]

    def test_query_is_trimmed(self) -> None:
        assert [i.id for i in search_items([SOCKS, BALL], "  socks  ")] == ["1"]

    def test_blank_query_keeps_everything(self) -> None:
        items = _catalog()
        assert search_items(items, "   ") == items

    def test_non_string_query_keeps_everything(self) -> None:
        items = _catalog()
        assert search_items(items, None) == items

    def test_query_is_html_escaped_before_matching(self) -> None:
        items = [_item("x", "Tom & Jerry Mug"), _item("y", "Tom &amp; Jerry Poster")]
        assert [i.id for i in search_items(items, "tom & jerry")] == ["y"]

    def test_no_match(self) -> None:
        assert search_items(_catalog(), "xyz_none") == []

    def test_no_tokenization(self) -> None:
        assert search_items([SOCKS], "socks red") == []


# ---------------------------------------------------------------------------
# Category / price / rating
# ---------------------------------------------------------------------------


class TestFilters:
    def test_category_exact_match_keeps_uncategorised(self) -> None:
        result = filter_by_category(_catalog(), "kitchen")
        assert [i.id for i in result] == ["b", "d"]

    def test_category_is_case_sensitive(self) -> None:
        result = filter_by_category(_catalog(), "Kitchen")
        assert [i.id for i in result] == ["b"]

    def test_empty_category_counts_as_uncategorised(self) -> None:
        blank = CatalogItem(id="1", name="x", category="")
        assert apply_query([blank], QueryOptions(category="clothing")) == [blank]

    def test_no_category_is_passthrough(self) -> None:
        items = _catalog()
        assert filter_by_category(items, None) == items

    def test_price_range(self) -> None:
        result = apply_query([SOCKS, BALL], QueryOptions(min_price=1500, max_price=3000))
        assert [i.id for i in result] == ["2"]

    def test_price_bounds_inclusive(self) -> None:
        result = filter_by_price([SOCKS, BALL], 1090, 1090)
        assert [i.id for i in result] == ["1"]

    def test_fractional_price_compared_as_is(self) -> None:
        item = CatalogItem.from_dict({"id": "f", "priceCents": 1500.9})
        assert filter_by_price([item], 1500.5, None) == [item]
        assert filter_by_price([item], 0, 1500) == []

    def test_price_unbounded_max(self) -> None:
        assert len(filter_by_price(_catalog(), 0, None)) == 5

    def test_missing_price_counts_as_zero(self) -> None:
        free = CatalogItem.from_dict({"id": "f", "name": "Sticker"})
        assert filter_by_price([free], 0, 0) == [free]
        assert filter_by_price([free], 1, None) == []

    def test_rating_threshold(self) -> None:
        result = filter_by_rating(_catalog(), 4.5)
        assert [i.id for i in result] == ["a", "c", "d"]

    def test_missing_rating_counts_as_zero(self) -> None:
        result = filter_by_rating(_catalog(), 0.5)
        assert "e" not in [i.id for i in result]

    def test_zero_min_rating_skips_filter(self) -> None:
        result = apply_query(_catalog(), QueryOptions(min_rating=0))
        assert len(result) == 5

    def test_stages_compose(self) -> None:
        opts = QueryOptions(query="cotton", category="clothing", max_price=1000)
        assert [i.id for i in apply_query(_catalog(), opts)] == ["c"]


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


class TestSortItems:
    def test_price_low_high(self) -> None:
        result = sort_items(_catalog(), SortBy.PRICE_LOW_HIGH)
        assert [i.price_cents for i in result] == [799, 1090, 1899, 2095, 2400]

    def test_price_high_low(self) -> None:
        result = sort_items(_catalog(), SortBy.PRICE_HIGH_LOW)
        assert [i.price_cents for i in result] == [2400, 2095, 1899, 1090, 799]

    def test_price_sort_is_stable(self) -> None:
        items = [_item("x", price=500), _item("y", price=100), _item("z", price=500)]
        assert [i.id for i in sort_items(items, SortBy.PRICE_LOW_HIGH)] == ["y", "x", "z"]
        assert [i.id for i in sort_items(items, SortBy.PRICE_HIGH_LOW)] == ["x", "z", "y"]

    def test_rating_descending_and_stable(self) -> None:
        result = sort_items(_catalog(), SortBy.RATING)
        assert [i.id for i in result] == ["d", "a", "c", "b", "e"]

    def test_newest_reverses(self) -> None:
        a, b, c = _item("a"), _item("b"), _item("c")
        assert sort_items([a, b, c], SortBy.NEWEST) == [c, b, a]

    def test_relevance_is_identity(self) -> None:
        items = _catalog()
        assert sort_items(items, SortBy.RELEVANCE) == items

    def test_unknown_sort_is_identity(self) -> None:
        items = _catalog()
        assert sort_items(items, "alphabetical") == items

    def test_accepts_plain_string(self) -> None:
        result = sort_items(_catalog(), "price_low_high")
        assert result[0].id == "c"

    def test_does_not_mutate_input(self) -> None:
        items = _catalog()
        snapshot = list(items)
        sort_items(items, SortBy.NEWEST)
        sort_items(items, SortBy.PRICE_HIGH_LOW)
        assert items == snapshot

    def test_sort_applies_to_filtered_result(self) -> None:
        opts = QueryOptions(category="clothing", sort_by=SortBy.NEWEST)
        assert [i.id for i in apply_query(_catalog(), opts)] == ["e", "c", "b", "a"]


# ---------------------------------------------------------------------------
# apply_query defaults
# ---------------------------------------------------------------------------


class TestApplyQuery:
    def test_no_options_returns_copy_in_order(self) -> None:
        items = _catalog()
        result = apply_query(items)
        assert result == items
        assert result is not items

    def test_malformed_options_fall_back(self) -> None:
        opts = QueryOptions(query=42, min_price="cheap", max_price="lots", min_rating=None, sort_by="bogus")  # type: ignore[arg-type]
        assert apply_query(_catalog(), opts) == _catalog()

    def test_repeatable(self) -> None:
        opts = QueryOptions(query="plain", sort_by=SortBy.PRICE_HIGH_LOW)
        assert apply_query(_catalog(), opts) == apply_query(_catalog(), opts)


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------


class TestGetSuggestions:
    def test_short_query_yields_nothing(self) -> None:
        assert get_suggestions(_catalog(), "b") == []
        assert get_suggestions(_catalog(), "") == []

    def test_non_string_query_yields_nothing(self) -> None:
        assert get_suggestions(_catalog(), None) == []

    def test_names_then_keywords_in_first_match_order(self) -> None:
        result = get_suggestions(_catalog(), "ba")
        assert result == ["Intermediate Size Basketball", "basketballs"]

    def test_every_suggestion_contains_query(self) -> None:
        result = get_suggestions(_catalog(), "PL", limit=5)
        assert len(result) <= 5
        assert all("pl" in s.lower() for s in result)

    def test_limit_respected(self) -> None:
        result = get_suggestions(_catalog(), "ap", limit=2)
        assert len(result) == 2

    def test_distinct(self) -> None:
        result = get_suggestions(_catalog(), "apparel", limit=10)
        assert result == ["apparel"]

    def test_long_names_truncated(self) -> None:
        item = _item("l", "Ultra Premium Extra Long Name Stainless Steel Kitchen Mixing Bowl Set")
        (suggestion,) = get_suggestions([item], "ultra")
        assert suggestion.endswith("...")
        assert len(suggestion) <= 53

    @pytest.mark.parametrize("limit", [None, "3", 2.5, True])
    def test_malformed_limit_falls_back_to_default(self, limit: object) -> None:
        items = [_item(str(n), f"Basket {n}") for n in range(8)]
        assert len(get_suggestions(items, "ba", limit=limit)) == 5  # type: ignore[arg-type]

    def test_malformed_max_length_falls_back_to_default(self) -> None:
        item = _item("l", "basket " * 10)
        (suggestion,) = get_suggestions([item], "ba", max_length=None)  # type: ignore[arg-type]
        assert suggestion == truncate_string(item.name, 50)

    def test_zero_limit(self) -> None:
        assert get_suggestions(_catalog(), "apparel", limit=0) == []

    @pytest.mark.parametrize("query", ["SO", "so", "So"])
    def test_case_insensitive_query(self, query: str) -> None:
        result = get_suggestions(_catalog(), query)
        assert result[0] == "Black and Gray Athletic Cotton Socks"
