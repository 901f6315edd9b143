"""
Bias Detector Tests

Tests the five rule checks and the compounding severity score.
"""

from __future__ import annotations

from docdetector.models import BiasInstance
from docdetector.modules.bias import SEVERITY_WEIGHTS, analyze_bias, bias_score


class TestConfirmation:

    def test_success_only_is_high(self):
        text = (
            "We achieved success. Growth increased. Revenue improved. "
            "Another success story. More growth achieved."
        )
        result = analyze_bias(text)
        assert [(b.type, b.severity) for b in result.biases] == [("Confirmation", "High")]
        assert result.overall_bias_score == 30

    def test_skewed_ratio_is_medium(self):
        text = (
            "Success came. Success grew. Success again. Success stayed. "
            "Success won. Success held. One pilot failed."
        )
        result = analyze_bias(text)
        assert len(result.biases) == 1
        bias = result.biases[0]
        assert (bias.type, bias.severity) == ("Confirmation", "Medium")
        assert bias.evidence.startswith("6:1")
        assert result.overall_bias_score == 15


class TestOtherRules:

    def test_recency(self):
        result = analyze_bias("In 2024, 2025, 2026, 2024, 2025 and 2026 we grew.")
        assert [(b.type, b.severity) for b in result.biases] == [("Recency", "Low")]
        assert result.overall_bias_score == 5

    def test_older_dates_suppress_recency(self):
        result = analyze_bias("In 2024, 2025, 2026, 2024, 2025 and 2026, unlike 2019, we grew.")
        assert result.biases == ()

    def test_authority(self):
        text = "Gartner says so. Gartner says more. Gartner says again. Gartner says it twice."
        result = analyze_bias(text)
        assert [b.type for b in result.biases] == ["Authority"]

    def test_survival(self):
        text = "Each case study, example and use case shows the same pattern."
        result = analyze_bias(text)
        assert [b.type for b in result.biases] == ["Survival"]

    def test_selection(self):
        text = (
            "For example, the best retailer doubled sales. "
            "One client, a leading bank, cut costs. "
            "A notable case is the top insurer in Europe."
        )
        result = analyze_bias(text)
        assert "Selection" in [b.type for b in result.biases]

    def test_neutral_text(self):
        result = analyze_bias("Plain neutral text about nothing much.")
        assert result.biases == ()
        assert result.overall_bias_score == 0


class TestScore:
    """Biases compound: the score is a sum, not a maximum."""

    def test_weights(self):
        assert SEVERITY_WEIGHTS == {"High": 30, "Medium": 15, "Low": 5}

    def test_three_lows_equal_one_medium(self):
        lows = [BiasInstance("Recency", "", "Low")] * 3
        assert bias_score(lows) == bias_score([BiasInstance("Survival", "", "Medium")])

    def test_sum_is_clamped(self):
        assert bias_score([BiasInstance("Confirmation", "", "High")] * 5) == 100

    def test_empty(self):
        assert bias_score([]) == 0
