"""
Content Forensics Tests

Tests the three linguistic checks:
  1. Deception markers and the manipulation index
  2. Sentence-level fallacy detection, caps and density
  3. Fluff scoring, data points and vocabulary counts
"""

from __future__ import annotations

import pytest

from docdetector.matcher import word_count
from docdetector.models import TermCount
from docdetector.modules.forensics import (
    EVIDENCE_CHARS,
    PASSIVE_SAMPLE_LIMIT,
    analyze_deception,
    analyze_fallacies,
    analyze_fluff,
    analyze_forensics,
)


# ============================================================
# DECEPTION
# ============================================================

class TestDeception:

    TEXT = "It might help. It could possibly work. It might not. Act now, time is running out!"

    def test_weasel_words_counted_and_sorted(self):
        result = analyze_deception(self.TEXT)
        assert result.weasel_words == (
            TermCount("might", 2), TermCount("could", 1), TermCount("possibly", 1),
        )

    def test_false_urgency(self):
        result = analyze_deception(self.TEXT)
        assert result.false_urgency == ("act now", "time is running out")

    def test_dense_markers_saturate_index(self):
        assert analyze_deception(self.TEXT).manipulation_index == 100

    def test_clean_text_scores_zero(self):
        text = "The system stores each record in a table and returns it on request."
        result = analyze_deception(text)
        assert result.manipulation_index == 0
        assert result.weasel_words == ()
        assert result.manipulation_rationale is None

    def test_percentage_puffery_needs_two_digits(self):
        text = "Customers saw 45% growth, 5% growth and a 300% improvement."
        assert analyze_deception(text).percentage_puffery == ("45% growth", "300% improvement")

    def test_passive_voice_sample_capped(self):
        verbs = [
            "paint", "test", "load", "print", "mark", "lift", "park", "fold",
            "melt", "pour", "rest", "spell", "wash", "kick", "cook",
        ]
        text = " ".join(f"It was {v}ed." for v in verbs)
        result = analyze_deception(text)
        assert len(result.passive_voice_instances) == PASSIVE_SAMPLE_LIMIT
        assert result.passive_voice_instances[0] == "was painted"

    def test_jargon_masking(self):
        text = "We will operationalize learnings and unlock value."
        assert analyze_deception(text).jargon_masking == (
            "operationalize", "learnings", "unlock value",
        )


# ============================================================
# FALLACIES
# ============================================================

class TestFallacies:

    def test_false_dichotomy(self):
        result = analyze_fallacies("Either you adopt our platform now or you fall behind forever.")
        assert [f.type for f in result.fallacies] == ["False Dichotomy"]
        assert result.fallacies[0].severity == "Medium"

    def test_false_dichotomy_with_otherwise(self):
        result = analyze_fallacies(
            "Either you modernize your stack, otherwise your competitors will win."
        )
        assert [f.type for f in result.fallacies] == ["False Dichotomy"]

    def test_false_dichotomy_if_you_dont(self):
        result = analyze_fallacies("If you don't migrate this year, you will pay double.")
        assert [f.type for f in result.fallacies] == ["False Dichotomy"]

    def test_single_or_else_not_flagged(self):
        result = analyze_fallacies("Adopt our platform today or else your teams will fall behind.")
        assert result.fallacies == ()

    def test_post_hoc(self):
        result = analyze_fallacies("After implementing the tool, revenue increased by a lot.")
        assert result.fallacies[0].type == "Post Hoc"
        assert result.fallacies[0].severity == "High"

    def test_sunk_cost(self):
        result = analyze_fallacies("We have already invested too much to change course now.")
        assert result.fallacies[0].type == "Sunk Cost"

    def test_straw_man(self):
        result = analyze_fallacies("Some critics say this approach is untested and slow.")
        assert result.fallacies[0].type == "Straw Man"
        assert result.fallacies[0].severity == "Medium"

    def test_appeal_to_authority(self):
        result = analyze_fallacies("As Gartner predicts, every firm will need this soon.")
        assert result.fallacies[0].type == "Appeal to Authority"
        assert result.fallacies[0].severity == "Low"

    def test_per_type_cap(self):
        text = " ".join(
            f"Either team {i} migrates this quarter or it pays more." for i in range(5)
        )
        result = analyze_fallacies(text)
        assert len(result.fallacies) == 3

    def test_evidence_truncated(self):
        sentence = "Either you act " + "very " * 40 + "quickly or you lose"
        result = analyze_fallacies(sentence + ".")
        assert len(result.fallacies[0].evidence) == EVIDENCE_CHARS

    def test_density_per_thousand_words(self):
        text = (
            "Either you adopt our platform now or you fall behind forever. "
            "After adopting the tool, margins improved across the board. "
            "The rest of this document is a neutral description of the product."
        )
        result = analyze_fallacies(text)
        expected = len(result.fallacies) / word_count(text) * 1000
        assert result.fallacy_density == pytest.approx(expected, abs=0.01)

    def test_no_fallacies(self):
        result = analyze_fallacies("The report describes three pilots in detail.")
        assert result.fallacies == ()
        assert result.fallacy_density == 0.0


# ============================================================
# FLUFF
# ============================================================

class TestFluff:

    DATA_TEXT = "Revenue rose 12% in 2023 to 4.5 million across 37 sites and 1,200 users."
    FLUFFY_TEXT = (
        "Our truly innovative, remarkably comprehensive and genuinely transformative "
        "approach is incredibly powerful and exceptionally effective."
    )

    def test_fluffy_text_scores_higher(self):
        assert analyze_fluff(self.FLUFFY_TEXT).fluff_score > analyze_fluff(self.DATA_TEXT).fluff_score

    def test_unique_data_points(self):
        assert analyze_fluff("5 apples, 5 pears and 10 figs.").unique_data_points == 2

    def test_score_in_range(self):
        for text in (self.DATA_TEXT, self.FLUFFY_TEXT, "x"):
            assert 0 <= analyze_fluff(text).fluff_score <= 100

    def test_buzzword_count(self):
        assert analyze_fluff("We leverage synergy to leverage scale.").buzzword_count == 3

    def test_action_verb_count(self):
        text = "Install the agent, configure the policy, then deploy and monitor."
        assert analyze_fluff(text).action_verb_count == 4

    def test_ratio_with_no_verbs(self):
        # Verb count floors at 1
        result = analyze_fluff("careful thoughtful useful")
        assert result.adjective_verb_ratio == 3.0


class TestForensicsBundle:

    def test_bundle_matches_parts(self):
        text = TestFluff.FLUFFY_TEXT
        result = analyze_forensics(text)
        assert result.deception == analyze_deception(text)
        assert result.fallacies == analyze_fallacies(text)
        assert result.fluff == analyze_fluff(text)
