"""
Heuristic analyzers. Pure functions of (text, dictionaries).
"""

from docdetector.modules.advanced import (
    analyze_data_intensity,
    analyze_hype,
    analyze_obsolescence,
    analyze_readiness,
    analyze_regulatory,
    analyze_visual_intensity,
)
from docdetector.modules.bias import analyze_bias
from docdetector.modules.classification import (
    analyze_audience_level,
    analyze_originator_scale,
    analyze_provider_consumer,
    analyze_rarity_index,
    analyze_target_scale,
)
from docdetector.modules.facts import extract_notable_facts
from docdetector.modules.forensics import (
    analyze_deception,
    analyze_fallacies,
    analyze_fluff,
    analyze_forensics,
)

__all__ = [
    "analyze_audience_level",
    "analyze_bias",
    "analyze_data_intensity",
    "analyze_deception",
    "analyze_fallacies",
    "analyze_fluff",
    "analyze_forensics",
    "analyze_hype",
    "analyze_obsolescence",
    "analyze_originator_scale",
    "analyze_provider_consumer",
    "analyze_rarity_index",
    "analyze_readiness",
    "analyze_regulatory",
    "analyze_target_scale",
    "analyze_visual_intensity",
    "extract_notable_facts",
]
