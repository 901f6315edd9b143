"""
Decoder Tests

Tests the decode-or-default combinators used on LLM output.
"""

from __future__ import annotations

import pytest

from docdetector import decoders as dec


class TestNumber:

    def test_clamps_and_rounds(self):
        score = dec.number(0, 100)
        assert score(150) == 100
        assert score(-4) == 0
        assert score(42.5) == 43

    def test_float_mode(self):
        ratio = dec.number(0, 10, integer=False)
        assert ratio(1.234) == 1.23
        assert ratio(1.236) == 1.24
        assert ratio(12) == 10

    def test_huge_values(self):
        assert dec.number(0, 100)(1e307) == 100
        assert dec.number(0, 100)(10 ** 400) == 100
        assert dec.number(0, 1, integer=False, places=4)(1e307) == 1
        assert dec.number(0, float("inf"))(10 ** 400) == 10 ** 400

    def test_unscalable_float_rejected(self):
        with pytest.raises(dec.DecodeError):
            dec.number(0, float("inf"), integer=False)(1e307)

    @pytest.mark.parametrize("raw", [True, False, "42", None, [], float("nan"), float("inf")])
    def test_rejects_non_numbers(self, raw):
        with pytest.raises(dec.DecodeError):
            dec.number(0, 100)(raw)


class TestOneOf:

    def test_member(self):
        assert dec.one_of("Low", "High")("Low") == "Low"

    def test_non_member(self):
        with pytest.raises(dec.DecodeError):
            dec.one_of("Low", "High")("Extreme")

    def test_case_sensitive(self):
        with pytest.raises(dec.DecodeError):
            dec.one_of("Low", "High")("low")


class TestTextAndBoolean:

    def test_text_truncates(self):
        assert dec.text(5)("abcdefgh") == "abcde"
        assert dec.text()("abcdefgh") == "abcdefgh"

    def test_text_rejects_numbers(self):
        with pytest.raises(dec.DecodeError):
            dec.text()(12)

    def test_boolean_is_strict(self):
        assert dec.boolean(True) is True
        with pytest.raises(dec.DecodeError):
            dec.boolean("true")
        with pytest.raises(dec.DecodeError):
            dec.boolean(1)


class TestContainers:

    def test_list_drops_bad_items(self):
        strings = dec.list_of(dec.text())
        assert strings(["a", 1, None, "b"]) == ("a", "b")

    def test_list_rejects_non_list(self):
        with pytest.raises(dec.DecodeError):
            dec.list_of(dec.text())("a")

    def test_record_requires_object(self):
        build = dec.record(lambda raw: raw["x"])
        assert build({"x": 1}) == 1
        with pytest.raises(dec.DecodeError):
            build([1])


class TestDefaults:

    def test_none_gives_default(self):
        assert dec.decode_or_default(None, dec.text(), "d") == "d"

    def test_bad_value_gives_default(self):
        assert dec.decode_or_default(7, dec.text(), "d") == "d"

    def test_field_missing_key(self):
        assert dec.field({}, "score", dec.number(0, 100), 50) == 50

    def test_field_on_non_mapping(self):
        assert dec.field("oops", "score", dec.number(0, 100), 50) == 50
        assert dec.field(None, "score", dec.number(0, 100), 50) == 50

    def test_field_present(self):
        assert dec.field({"score": 72}, "score", dec.number(0, 100), 50) == 72
