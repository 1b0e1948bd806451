"""Unit tests for ingredient normalization."""

import pytest

from forked.normalize.ingredients import (
    PLACEHOLDER_UNIT,
    Ingredient,
    OtherInput,
    StructuredInput,
    TextInput,
    classify_raw_ingredient,
    normalize_ingredient,
    normalize_ingredients,
    parse_quantity_token,
)


class TestParseQuantityToken:
    """Tests for parse_quantity_token function."""

    def test_digits_with_unit(self):
        """Test splitting '200g'."""
        assert parse_quantity_token("200g") == (200, "g")
        assert parse_quantity_token("1kg") == (1, "kg")

    def test_digits_only(self):
        """Test that a bare number gets the placeholder unit."""
        assert parse_quantity_token("3") == (3, PLACEHOLDER_UNIT)

    def test_not_a_quantity(self):
        """Test tokens that are not fused quantity+unit tokens."""
        assert parse_quantity_token("pomodoro") is None
        assert parse_quantity_token("200g.") is None
        assert parse_quantity_token("1/2") is None
        assert parse_quantity_token("g200") is None


class TestClassifyRawIngredient:
    """Tests for raw input classification."""

    def test_structured(self):
        """Test mappings with a name are structured input."""
        assert isinstance(classify_raw_ingredient({"nome": "farina"}), StructuredInput)

    def test_mapping_without_name(self):
        """Test mappings with a missing or empty name fall to other input."""
        assert isinstance(classify_raw_ingredient({"quantita": 2}), OtherInput)
        assert isinstance(classify_raw_ingredient({"nome": ""}), OtherInput)

    def test_text(self):
        """Test strings are text input."""
        assert classify_raw_ingredient("sale") == TextInput("sale")

    def test_other(self):
        """Test numbers and None are other input."""
        assert isinstance(classify_raw_ingredient(42), OtherInput)
        assert isinstance(classify_raw_ingredient(None), OtherInput)


class TestNormalizeIngredient:
    """Tests for normalize_ingredient function."""

    def test_fused_quantity_and_unit(self):
        """Test '200g pomodoro'."""
        result = normalize_ingredient("200g pomodoro")
        assert result.to_document() == {"nome": "pomodoro", "quantita": 200, "unita": "g"}

    def test_name_only(self):
        """Test a single word becomes a name-only ingredient."""
        result = normalize_ingredient("sale")
        assert result.to_document() == {"nome": "sale", "quantita": 1, "unita": "pz"}

    def test_structured_passthrough(self):
        """Test structured input is passed through unchanged."""
        raw = {"nome": "farina", "quantita": 500, "unita": "g"}
        assert normalize_ingredient(raw).to_document() == raw

    def test_structured_not_revalidated(self):
        """Test structured quantity and unit values are kept verbatim."""
        raw = {"nome": "uova", "quantita": "due", "unita": "", "note": "fresche"}
        assert normalize_ingredient(raw).to_document() == raw

    def test_structured_missing_fields_get_defaults(self):
        """Test absent quantity and unit fall back to the defaults."""
        result = normalize_ingredient({"nome": "basilico"})
        assert result.quantity == 1
        assert result.unit == PLACEHOLDER_UNIT

    def test_number_is_stringified(self):
        """Test 42 becomes a name-only ingredient named '42'."""
        result = normalize_ingredient(42)
        assert result.to_document() == {"nome": "42", "quantita": 1, "unita": "pz"}

    def test_none_is_stringified(self):
        """Test None does not raise."""
        assert normalize_ingredient(None).name == "None"

    def test_bare_number_quantity(self):
        """Test '3 uova' gets the placeholder unit."""
        result = normalize_ingredient("3 uova")
        assert (result.name, result.quantity, result.unit) == ("uova", 3, "pz")

    def test_multi_word_name(self):
        """Test remaining words are joined by single spaces."""
        result = normalize_ingredient("  250ml   latte   intero ")
        assert (result.name, result.quantity, result.unit) == ("latte intero", 250, "ml")

    def test_trailing_punctuation_falls_back_to_name(self):
        """Test a digit-leading token that is not a quantity keeps the whole string."""
        result = normalize_ingredient("200g. pomodoro")
        assert (result.name, result.quantity, result.unit) == ("200g. pomodoro", 1, "pz")

    def test_lone_quantity_token(self):
        """Test a single digit-leading token is treated as a name."""
        result = normalize_ingredient(" 200g ")
        assert (result.name, result.quantity, result.unit) == ("200g", 1, "pz")

    def test_name_is_trimmed(self):
        """Test surrounding whitespace is removed from name-only input."""
        assert normalize_ingredient("  olio d'oliva  ").name == "olio d'oliva"

    @pytest.mark.parametrize("raw", ["", "   ", 3.5, True, ["a"], {"x": 1}])
    def test_never_raises(self, raw):
        """Test normalization is total."""
        assert isinstance(normalize_ingredient(raw), Ingredient)


class TestNormalizeIngredients:
    """Tests for normalize_ingredients function."""

    def test_keeps_order(self):
        """Test a mixed list is normalized in order."""
        result = normalize_ingredients(["200g pomodoro", {"nome": "farina"}, "sale"])
        assert [ing.name for ing in result] == ["pomodoro", "farina", "sale"]


class TestIngredientDocument:
    """Tests for Ingredient document conversion."""

    def test_key(self):
        """Test the merge key is (name, unit)."""
        assert Ingredient(name="tomato", quantity=2, unit="g").key == ("tomato", "g")

    def test_extra_keys_preserved(self):
        """Test unknown document keys survive a round trip."""
        doc = {"nome": "sale", "quantita": 1, "unita": "pz", "optional": True}
        assert Ingredient.from_document(doc).to_document() == doc
