"""
Tests for variant engine internals.

Tests cover:
- Variant classification and normalization
- Payload targeting
- Compound rule matching
- FIFO cache behavior
"""

import logging

from chuk_style_variants.variants import (
    ClassPayload,
    CompoundRule,
    FIFOCache,
    VariantKind,
    condition_matches,
    normalize_variants,
)
from chuk_style_variants.variants.normalizer import classify_variant, is_slot_object, make_payload


class TestClassifyVariant:
    """Tests for variant kind detection."""

    def test_string_is_shorthand(self):
        """Bare strings are boolean shorthands."""
        assert classify_variant("opacity-50", []) == VariantKind.SHORTHAND

    def test_list_is_shorthand(self):
        """Lists are boolean shorthands."""
        assert classify_variant(["a", "b"], []) == VariantKind.SHORTHAND

    def test_none_is_shorthand(self):
        """Non-mapping falsy values are boolean shorthands."""
        assert classify_variant(None, []) == VariantKind.SHORTHAND

    def test_slot_object(self):
        """Mappings keyed by slot names are slot shorthands."""
        assert classify_variant({"base": "a", "header": "b"}, ["header"]) == VariantKind.SLOT_SHORTHAND

    def test_slot_object_requires_slots(self):
        """Without named slots a {'base': ...} mapping is a regular record."""
        assert classify_variant({"base": "a"}, []) == VariantKind.REGULAR

    def test_boolean_record(self):
        """Mappings keyed by true/false are boolean records."""
        assert classify_variant({"true": "a", "false": "b"}, []) == VariantKind.BOOLEAN
        assert classify_variant({True: "a"}, []) == VariantKind.BOOLEAN

    def test_empty_mapping_is_boolean(self):
        """An empty mapping is a boolean record with no classes."""
        assert classify_variant({}, ["header"]) == VariantKind.BOOLEAN

    def test_regular_record(self):
        """Any other mapping is a regular record."""
        assert classify_variant({"sm": "a", "lg": "b"}, ["header"]) == VariantKind.REGULAR
        assert classify_variant({"true": "a", "maybe": "b"}, []) == VariantKind.REGULAR


class TestNormalizeVariants:
    """Tests for canonical variant records."""

    def test_preserves_order(self):
        """Variants keep declaration order."""
        normalized = normalize_variants({"b": "x", "a": "y", "c": {"sm": "z"}}, [])
        assert list(normalized) == ["b", "a", "c"]

    def test_shorthand_record(self):
        """Shorthands become false/true records."""
        variant = normalize_variants({"disabled": "opacity-50"}, [])["disabled"]
        assert variant.kind == VariantKind.SHORTHAND
        assert variant.record == {"false": "", "true": "opacity-50"}

    def test_boolean_record_fills_missing(self):
        """Boolean records get both labels."""
        variant = normalize_variants({"active": {False: "off"}}, [])["active"]
        assert variant.record == {"true": "", "false": "off"}

    def test_labels_are_strings(self):
        """Numeric keys become string labels."""
        variant = normalize_variants({"cols": {1: "a", 2: "b"}}, [])["cols"]
        assert variant.record == {"1": "a", "2": "b"}
        assert variant.payload_for(2).value == "b"
        assert variant.payload_for("1").value == "a"
        assert variant.payload_for(3) is None

    def test_slot_payloads_precomputed(self):
        """Slot-object payloads carry their targets."""
        variant = normalize_variants(
            {"size": {"sm": {"base": "p-2", "header": "text-sm"}, "lg": "p-6"}},
            ["header"],
        )["size"]
        assert variant.payloads["sm"].targets == (("base", "p-2"), ("header", "text-sm"))
        assert variant.payloads["lg"].targets is None


class TestPayloads:
    """Tests for payload targeting."""

    def test_is_slot_object(self):
        """Only mappings keyed by base/slot names are slot objects."""
        assert is_slot_object({"base": "a"}, []) is True
        assert is_slot_object({"header": "a"}, ["header"]) is True
        assert is_slot_object({"font-bold": True}, ["header"]) is False
        assert is_slot_object("base", ["header"]) is False

    def test_apply_to_base(self):
        """Plain payloads go to the base slot."""
        slot_classes = {"base": ["x"], "header": ["h"]}
        make_payload("a", ["header"]).apply(slot_classes)
        assert slot_classes == {"base": ["x", "a"], "header": ["h"]}

    def test_apply_to_slots(self):
        """Slot-object payloads are distributed."""
        slot_classes = {"base": ["x"], "header": ["h"]}
        make_payload({"header": "a", "base": "b"}, ["header"]).apply(slot_classes)
        assert slot_classes == {"base": ["x", "b"], "header": ["h", "a"]}

    def test_is_empty(self):
        """Falsy values and empty slot objects are empty."""
        assert ClassPayload(value="").is_empty is True
        assert ClassPayload(value={}, targets=()).is_empty is True
        assert ClassPayload(value="a").is_empty is False


class TestCompoundMatching:
    """Tests for compound conditions."""

    def test_scalar_condition(self):
        """Scalars compare by label."""
        assert condition_matches("lg", "lg") is True
        assert condition_matches(2, "2") is True
        assert condition_matches("lg", "sm") is False

    def test_list_condition(self):
        """Lists match any member."""
        assert condition_matches(["sm", "lg"], "lg") is True
        assert condition_matches([1, 2], "2") is True
        assert condition_matches(["sm", "lg"], "md") is False
        assert condition_matches([], "md") is False

    def test_none_condition_matches_unset(self):
        """A None condition matches an unset prop."""
        assert condition_matches(None, None) is True

    def test_rule_vacuous(self):
        """Rules without conditions always match."""
        rule = CompoundRule(conditions=(), payload=ClassPayload(value="x"))
        assert rule.matches({}) is True

    def test_rule_all_conditions(self):
        """Every condition must hold."""
        rule = CompoundRule(
            conditions=(("size", "lg"), ("intent", ["primary", "danger"])),
            payload=ClassPayload(value="x"),
        )
        assert rule.matches({"size": "lg", "intent": "danger"}) is True
        assert rule.matches({"size": "lg"}) is False
        assert rule.matches({"size": "sm", "intent": "primary"}) is False

    def test_explicit_slot_targets(self):
        """Explicit targets receive the raw payload, even a mapping."""
        rule = CompoundRule(
            conditions=(),
            payload=ClassPayload(value={"ring": True}),
            slots=("header", "missing"),
        )
        slot_classes = {"base": [], "header": []}
        rule.apply(slot_classes)
        assert slot_classes == {"base": [], "header": [{"ring": True}]}


class TestFIFOCache:
    """Tests for the bounded cache."""

    def test_put_and_get(self):
        """Stored values can be read back."""
        cache = FIFOCache(2)
        cache.put(("a",), "x")
        assert ("a",) in cache
        assert cache.get(("a",)) == "x"
        assert len(cache) == 1

    def test_evicts_oldest_inserted(self):
        """The first inserted key goes first, regardless of reads."""
        cache = FIFOCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.put("c", 3)
        assert cache.keys() == ["b", "c"]

    def test_overwrite_does_not_evict(self):
        """Re-storing an existing key keeps the other entries."""
        cache = FIFOCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("a", 3)
        assert cache.keys() == ["a", "b"]
        assert cache.get("a") == 3

    def test_zero_capacity(self):
        """Capacity 0 stores nothing."""
        cache = FIFOCache(0)
        cache.put("a", 1)
        assert len(cache) == 0

    def test_bound_holds(self):
        """The cache never exceeds its capacity."""
        cache = FIFOCache(3)
        for i in range(10):
            cache.put(i, i)
            assert len(cache) <= 3
        assert cache.keys() == [7, 8, 9]

    def test_clear(self):
        """clear removes every entry."""
        cache = FIFOCache(2)
        cache.put("a", 1)
        cache.clear()
        assert len(cache) == 0

    def test_eviction_logged(self, caplog):
        """Evictions are logged at debug level."""
        cache = FIFOCache(1)
        with caplog.at_level(logging.DEBUG, logger="chuk_style_variants.variants.cache"):
            cache.put("a", 1)
            cache.put("b", 2)
        assert "Evicted cache entry 'a'" in caplog.text
