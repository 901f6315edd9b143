"""
Classification Modules

Five document classifiers, each built the same way:
  1. Count opposing term families (vendor vs. client, legacy vs.
     greenfield, strategic vs. tactical, ...)
  2. Turn the counts into five 1-10 driver scores with fixed tie-break
     rules (balanced evidence lands on the midpoint, 5)
  3. Compose the drivers with fixed weights (composite.compose)
  4. Band the composite into a label and derive a confidence

Every function is pure: same text and dictionaries, same result.
"""

from __future__ import annotations

from docdetector.composite import ConfidenceCurve, build_module
from docdetector.dictionaries import DEFAULT_DICTIONARIES, PatternDictionaries
from docdetector.matcher import clamp, count, round_half_up, word_count
from docdetector.models import ModuleResult, WeightedDriver


# ============================================================
# BANDS AND CONFIDENCE CURVES
# ============================================================

def classify_provider_consumer(composite: int) -> str:
    if composite >= 60:
        return "Consumer-Favored"
    if composite <= 40:
        return "Provider-Favored"
    return "Balanced"


def classify_originator(composite: int) -> str:
    if composite >= 65:
        return "Big 4/GSI"
    if composite >= 40:
        return "Mid-tier"
    return "Solo/Boutique"


def classify_target(composite: int) -> str:
    if composite >= 65:
        return "Enterprise"
    if composite >= 35:
        return "SME"
    return "Startup"


def classify_audience(composite: int) -> str:
    if composite >= 75:
        return "C-Suite"
    if composite >= 55:
        return "VP"
    if composite >= 35:
        return "Manager"
    return "Developer"


def classify_rarity(composite: int) -> str:
    if composite >= 70:
        return "Category-Defining"
    if composite >= 40:
        return "Differentiated"
    return "Commodity"


PROVIDER_CONFIDENCE = ConfidenceCurve(floor=30, ceiling=95, slope=2, base=0)
ORIGINATOR_CONFIDENCE = ConfidenceCurve(floor=40, ceiling=90)
TARGET_CONFIDENCE = ConfidenceCurve(floor=40, ceiling=90)
AUDIENCE_CONFIDENCE = ConfidenceCurve(floor=35, ceiling=90)
RARITY_CONFIDENCE = ConfidenceCurve(floor=35, ceiling=90)


def _per_10k(hits: int, words: int) -> float:
    return hits / words * 10000


# ============================================================
# MODULE 1: PROVIDER VS. CONSUMER
# ============================================================

def analyze_provider_consumer(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> ModuleResult:
    """Whose interests does the document serve: the vendor's or the reader's?"""
    vendor = count(text, d.vendor_terms)
    client = count(text, d.client_terms)
    upsell = count(text, d.upsell_terms)
    words = word_count(text)

    external = count(text, d.external_help_terms)
    internal = count(text, d.internal_build_terms)
    if internal > external:
        problem = 8
        problem_why = "Frames internal capability building"
    elif external > internal:
        problem = 3
        problem_why = "Frames external help requirement"
    else:
        problem = 5
        problem_why = "No clear internal vs. external framing"

    lock_in = count(text, d.lock_in_terms)
    open_ = count(text, d.open_terms)
    if open_ > lock_in:
        lock_score = 8
    elif lock_in > open_ * 2:
        lock_score = 2
    else:
        lock_score = 5

    if client == vendor:
        autonomy = 5
    else:
        autonomy = int(clamp(round_half_up(client / (vendor + client) * 10), 1, 10))

    density = _per_10k(upsell, words)
    if density > 20:
        upsell_score = 2
    elif density > 10:
        upsell_score = 4
    elif density > 3:
        upsell_score = 6
    else:
        upsell_score = 8

    client_risk = count(text, d.client_risk_terms)
    vendor_risk = count(text, d.vendor_risk_terms)
    risk_score = 7 if vendor_risk >= client_risk else 4

    drivers = (
        WeightedDriver("Problem Definition Clarity", 0.20, problem, problem_why),
        WeightedDriver(
            "Vendor Lock-in Potential", 0.20, lock_score,
            f"{lock_in} lock-in vs {open_} open terms detected",
        ),
        WeightedDriver(
            "Implementation Autonomy", 0.20, autonomy,
            f"{client} client-focus vs {vendor} vendor-focus references",
        ),
        WeightedDriver(
            "Upsell Visibility", 0.20, upsell_score,
            f"{upsell} upsell patterns detected (density: {density:.1f}/10k words)",
        ),
        WeightedDriver(
            "Risk Transfer", 0.20, risk_score,
            "Risk transferred to client" if client_risk > vendor_risk
            else "Vendor assumes appropriate risk",
        ),
    )
    return build_module(drivers, classify_provider_consumer, PROVIDER_CONFIDENCE)


# ============================================================
# MODULE 2: ORIGINATOR SCALE
# ============================================================

def analyze_originator_scale(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> ModuleResult:
    """How large is the firm that produced the document?"""
    proprietary = count(text, d.proprietary_framework_terms)
    generic = count(text, d.generic_framework_terms)
    if proprietary > 3:
        prop_score = 9
    elif proprietary > 1:
        prop_score = 6
    elif generic > 2:
        prop_score = 3
    else:
        prop_score = 5

    primary = count(text, d.primary_research_terms)
    secondary = count(text, d.secondary_research_terms)
    if primary > 3:
        data_score = 9
    elif primary > 0:
        data_score = 6
    elif secondary > 3:
        data_score = 4
    else:
        data_score = 3

    branding = count(text, d.branding_terms)
    design_score = 8 if branding > 3 else 6 if branding > 1 else 3

    breadth = count(text, d.breadth_terms)
    niche = count(text, d.niche_terms)
    if breadth > niche * 2:
        breadth_score = 8
    elif niche > breadth:
        breadth_score = 3
    else:
        breadth_score = 5

    legal = count(text, d.legal_terms)
    legal_score = 9 if legal > 3 else 6 if legal > 1 else 3

    drivers = (
        WeightedDriver(
            "Framework Proprietary Level", 0.30, prop_score,
            f"{proprietary} proprietary vs {generic} generic frameworks",
        ),
        WeightedDriver(
            "Data Scope & Depth", 0.20, data_score,
            f"{primary} primary research, {secondary} secondary citations",
        ),
        WeightedDriver(
            "Design Polish & Branding", 0.15, design_score,
            f"{branding} branding/legal markers detected",
        ),
        WeightedDriver(
            "Service Breadth", 0.15, breadth_score,
            f"{breadth} breadth vs {niche} niche indicators",
        ),
        WeightedDriver(
            "Legal/Compliance Density", 0.20, legal_score,
            f"{legal} legal/compliance terms found",
        ),
    )
    return build_module(drivers, classify_originator, ORIGINATOR_CONFIDENCE)


# ============================================================
# MODULE 3: TARGET SCALE
# ============================================================

def analyze_target_scale(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> ModuleResult:
    """What size of organization is the document written for?"""
    governance = count(text, d.governance_terms)
    gov_score = 9 if governance > 5 else 6 if governance > 2 else 3

    cross = count(text, d.cross_functional_terms)
    single = count(text, d.single_department_terms)
    if cross > single:
        cross_score = 8
    elif single > cross * 2:
        cross_score = 3
    else:
        cross_score = 5

    legacy = count(text, d.legacy_terms)
    greenfield = count(text, d.greenfield_terms)
    if legacy > greenfield * 2:
        legacy_score = 9
    elif greenfield > legacy:
        legacy_score = 3
    else:
        legacy_score = 5

    big = count(text, d.large_budget_terms)
    small = count(text, d.small_budget_terms)
    if big > small:
        budget_score = 8
    elif small > big:
        budget_score = 3
    else:
        budget_score = 5

    security = count(text, d.security_terms)
    sec_score = 9 if security > 5 else 6 if security > 2 else 3

    drivers = (
        WeightedDriver(
            "Governance Complexity", 0.25, gov_score,
            f"{governance} governance terms detected",
        ),
        WeightedDriver(
            "Cross-Functional Impact", 0.20, cross_score,
            f"{cross} cross-functional vs {single} single-dept references",
        ),
        WeightedDriver(
            "Legacy Integration Focus", 0.20, legacy_score,
            f"{legacy} legacy vs {greenfield} greenfield terms",
        ),
        WeightedDriver(
            "Budget/Resource Implication", 0.15, budget_score,
            f"{big} enterprise-budget vs {small} small-budget indicators",
        ),
        WeightedDriver(
            "Risk & Security Standards", 0.20, sec_score,
            f"{security} security/compliance terms found",
        ),
    )
    return build_module(drivers, classify_target, TARGET_CONFIDENCE)


# ============================================================
# MODULE 4: AUDIENCE LEVEL
# ============================================================

def analyze_audience_level(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> ModuleResult:
    """Who is expected to read it: developers, managers or executives?"""
    words = word_count(text)

    strategic = count(text, d.strategic_terms)
    tactical = count(text, d.tactical_terms)
    ratio = strategic / (strategic + tactical) if strategic + tactical else 0.5
    if strategic == tactical:
        strat_score = 5
    elif ratio > 0.7:
        strat_score = 9
    elif ratio > 0.5:
        strat_score = 7
    elif ratio > 0.3:
        strat_score = 4
    else:
        strat_score = 2

    financial = count(text, d.financial_metrics)
    fin_density = _per_10k(financial, words)
    if fin_density > 30:
        fin_score = 9
    elif fin_density > 15:
        fin_score = 7
    elif fin_density > 5:
        fin_score = 4
    else:
        fin_score = 2

    technical = count(text, d.developer_terms)
    tech_density = _per_10k(technical, words)
    if tech_density > 40:
        jargon_score = 2
    elif tech_density > 20:
        jargon_score = 4
    elif tech_density > 8:
        jargon_score = 6
    else:
        jargon_score = 8

    immediate = count(text, d.immediate_horizon_terms)
    long_term = count(text, d.long_horizon_terms)
    if long_term > immediate * 2:
        horizon_score = 9
    elif immediate > long_term * 2:
        horizon_score = 2
    else:
        horizon_score = 5

    business = count(text, d.business_decision_terms)
    tool = count(text, d.tool_decision_terms)
    if business > tool:
        scope_score = 9
    elif tool > business:
        scope_score = 3
    else:
        scope_score = 5

    drivers = (
        WeightedDriver(
            "Strategic vs. Tactical Ratio", 0.30, strat_score,
            f"{strategic} strategic vs {tactical} tactical terms "
            f"(ratio: {round_half_up(ratio * 100)}%)",
        ),
        WeightedDriver(
            "Financial Metric Density", 0.20, fin_score,
            f"{financial} financial metrics (density: {fin_density:.1f}/10k words)",
        ),
        WeightedDriver(
            "Technical Jargon Density", 0.20, jargon_score,
            f"{technical} technical terms (density: {tech_density:.1f}/10k words)",
        ),
        WeightedDriver(
            "Actionable Horizon", 0.15, horizon_score,
            f"{immediate} immediate vs {long_term} long-term references",
        ),
        WeightedDriver(
            "Decision Scope", 0.15, scope_score,
            f"{business} business-level vs {tool} tool-level decisions",
        ),
    )
    return build_module(drivers, classify_audience, AUDIENCE_CONFIDENCE)


# ============================================================
# MODULE 5: RARITY INDEX
# ============================================================

def analyze_rarity_index(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> ModuleResult:
    """Is the content original, or a rehash of what everyone already says?"""
    primary = count(text, d.primary_data_terms)
    secondary = count(text, d.secondary_data_terms)
    if primary > 5:
        data_score = 9
    elif primary > 2:
        data_score = 7
    elif secondary > primary * 3:
        data_score = 2
    else:
        data_score = 4

    contrarian = count(text, d.contrarian_terms)
    consensus = count(text, d.consensus_terms)
    if contrarian == consensus:
        contrarian_score = 5
    elif contrarian > consensus * 2:
        contrarian_score = 9
    elif contrarian > consensus:
        contrarian_score = 6
    else:
        contrarian_score = 3

    novel = count(text, d.novel_framework_terms)
    standard = count(text, d.standard_framework_terms)
    if novel == standard:
        novelty_score = 5
    elif novel > standard * 2:
        novelty_score = 9
    elif novel > standard:
        novelty_score = 6
    else:
        novelty_score = 3

    specific = count(text, d.specific_prediction_terms)
    vague = count(text, d.vague_prediction_terms)
    if specific > vague:
        predict_score = 8
    elif vague > specific * 2:
        predict_score = 2
    else:
        predict_score = 5

    named = count(text, d.named_case_terms)
    anonymous = count(text, d.anonymous_case_terms)
    if named > anonymous * 2:
        case_score = 8
    elif anonymous > named:
        case_score = 3
    else:
        case_score = 5

    drivers = (
        WeightedDriver(
            "Primary Data Source", 0.25, data_score,
            f"{primary} primary vs {secondary} secondary data references",
        ),
        WeightedDriver(
            "Contrarian Factor", 0.25, contrarian_score,
            f"{contrarian} contrarian vs {consensus} hype-aligned statements",
        ),
        WeightedDriver(
            "Framework Novelty", 0.20, novelty_score,
            f"{novel} novel vs {standard} standard frameworks",
        ),
        WeightedDriver(
            "Predictive Specificity", 0.15, predict_score,
            f"{specific} specific vs {vague} vague predictions",
        ),
        WeightedDriver(
            "Case Study Transparency", 0.15, case_score,
            f"{named} named vs {anonymous} anonymous case studies",
        ),
    )
    return build_module(drivers, classify_rarity, RARITY_CONFIDENCE)
