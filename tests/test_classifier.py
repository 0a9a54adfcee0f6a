"""Tests for query classification."""

from decimal import Decimal

import pytest

from property_finder.models import (
    ByMinBedrooms,
    ByPriceRange,
    ByType,
    FreeText,
    PetFriendlyOnly,
)
from property_finder.query.classifier import RULES, classify, extract_price_range


class TestTypeRule:
    """Tests for property type detection."""

    @pytest.mark.parametrize("word", ["apartment", "condo", "house", "loft"])
    def test_each_type(self, word: str) -> None:
        assert classify(f"show me a {word}") == ByType(word)

    def test_case_insensitive(self) -> None:
        assert classify("Any CONDOS left?") == ByType("condo")

    def test_townhouse_resolves_to_house(self) -> None:
        """Types are scanned in declaration order and "house" comes first."""
        assert classify("a townhouse") == ByType("house")
        assert classify("penthouse suite") == ByType("house")

    def test_first_type_in_scan_order_wins(self) -> None:
        assert classify("house or apartment") == ByType("apartment")

    def test_type_beats_price(self) -> None:
        assert classify("houses under $500,000") == ByType("house")

    def test_type_beats_pet(self) -> None:
        assert classify("pet friendly apartment") == ByType("apartment")


class TestPriceRule:
    """Tests for price range detection."""

    def test_under(self) -> None:
        assert classify("under $500,000") == ByPriceRange(Decimal("0"), Decimal("500000"))

    def test_under_with_k(self) -> None:
        assert classify("something under 450k") == ByPriceRange(Decimal("0"), Decimal("450000"))

    def test_between(self) -> None:
        criterion = classify("between 400000 and 600000")
        assert criterion == ByPriceRange(Decimal("400000"), Decimal("600000"))

    def test_between_with_dollars(self) -> None:
        criterion = classify("between $400,000 and $600,000")
        assert criterion == ByPriceRange(Decimal("400000"), Decimal("600000"))

    def test_between_reversed_bounds_are_swapped(self) -> None:
        criterion = classify("between 600000 and 400000")
        assert criterion == ByPriceRange(Decimal("400000"), Decimal("600000"))

    def test_between_without_upper_is_unbounded(self) -> None:
        criterion = classify("between 400000 and whatever")
        assert criterion == ByPriceRange(Decimal("400000"), None)

    def test_single_amount_is_maximum(self) -> None:
        assert classify("budget 700000") == ByPriceRange(Decimal("0"), Decimal("700000"))

    def test_dollar_sign_triggers(self) -> None:
        assert classify("$350k") == ByPriceRange(Decimal("0"), Decimal("350000"))

    def test_price_word_without_number_falls_through(self) -> None:
        assert classify("what is the price") == FreeText("what is the price")

    def test_price_word_without_number_reaches_pet_rule(self) -> None:
        assert classify("cheap price for my dog") == PetFriendlyOnly()

    def test_under_without_number_falls_through_to_bedrooms(self) -> None:
        """The under branch only reads text after "under"."""
        assert classify("3 bedrooms under budget") == ByMinBedrooms(3)


class TestExtractPriceRange:
    """Tests for extract_price_range."""

    def test_nothing_found(self) -> None:
        assert extract_price_range("between friends and family") == (Decimal("0"), Decimal("0"))

    def test_and_before_between_only(self) -> None:
        assert extract_price_range("sand between 5") == (Decimal("0"), Decimal("0"))

    def test_under_takes_precedence_over_between(self) -> None:
        assert extract_price_range("between 1 and 2 under 300") == (Decimal("0"), Decimal("300"))


class TestBedroomRule:
    """Tests for bedroom detection."""

    def test_bedroom(self) -> None:
        assert classify("3 bedroom") == ByMinBedrooms(3)

    def test_bed(self) -> None:
        assert classify("need 2 beds") == ByMinBedrooms(2)

    def test_zero_falls_through(self) -> None:
        assert classify("a bed") == FreeText("a bed")

    def test_studio_falls_through(self) -> None:
        assert classify("studio bedroom") == FreeText("studio bedroom")

    def test_out_of_range_falls_through(self) -> None:
        assert classify("15 bed") == FreeText("15 bed")


class TestPetRule:
    """Tests for pet detection."""

    @pytest.mark.parametrize("query", ["pet friendly", "allows dogs", "my CAT"])
    def test_pet_words(self, query: str) -> None:
        assert classify(query) == PetFriendlyOnly()

    def test_bedrooms_beat_pet(self) -> None:
        assert classify("2 bedroom for my dog") == ByMinBedrooms(2)


class TestFallback:
    """Tests for free-text fallback."""

    def test_keeps_original_query(self) -> None:
        assert classify("Waterfront VIEWS") == FreeText("Waterfront VIEWS")

    def test_empty(self) -> None:
        assert classify("") == FreeText("")

    def test_rule_order(self) -> None:
        assert [rule.name for rule in RULES] == ["type", "price", "bedrooms", "pet_friendly"]
