"""
Pattern Dictionaries - Immutable Lookup Tables

Curated term lists for every semantic category the heuristic
analyzers count: deception markers, buzzwords, urgency phrases,
vendor/client vocabulary, audience vocabulary, regulatory terms, etc.

These tables are data, not a model. They are:
  - Frozen (tuples inside a frozen dataclass)
  - Versioned (DICTIONARY_VERSION is stamped on every result)
  - Injected (analyzers take a PatternDictionaries argument, so a
    dictionary update is a data replacement, not a code change)

A pattern entry is either a literal phrase (str) or a precompiled
regular expression (re.Pattern) that carries its own flags.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from typing import Union

DICTIONARY_VERSION = "1.0.0"

Pattern = Union[str, re.Pattern]
Patterns = tuple  # tuple[Pattern, ...]

_I = re.IGNORECASE


def _rx(expr: str, flags: int = _I) -> re.Pattern:
    return re.compile(expr, flags)


@dataclass(frozen=True)
class PatternDictionaries:
    """One immutable, versioned set of lookup tables."""

    version: str

    # --- Forensics ---
    weasel_words: Patterns
    buzzwords: Patterns
    false_urgency: Patterns
    jargon_masking: Patterns
    action_verbs: Patterns
    percentage_puffery: Patterns
    passive_voice: Patterns

    # --- Provider vs. consumer ---
    vendor_terms: Patterns
    client_terms: Patterns
    upsell_terms: Patterns
    external_help_terms: Patterns
    internal_build_terms: Patterns
    lock_in_terms: Patterns
    open_terms: Patterns
    client_risk_terms: Patterns
    vendor_risk_terms: Patterns

    # --- Originator scale ---
    proprietary_framework_terms: Patterns
    generic_framework_terms: Patterns
    primary_research_terms: Patterns
    secondary_research_terms: Patterns
    branding_terms: Patterns
    breadth_terms: Patterns
    niche_terms: Patterns
    legal_terms: Patterns

    # --- Target scale ---
    governance_terms: Patterns
    cross_functional_terms: Patterns
    single_department_terms: Patterns
    legacy_terms: Patterns
    greenfield_terms: Patterns
    large_budget_terms: Patterns
    small_budget_terms: Patterns
    security_terms: Patterns

    # --- Audience level ---
    strategic_terms: Patterns
    tactical_terms: Patterns
    financial_metrics: Patterns
    developer_terms: Patterns
    immediate_horizon_terms: Patterns
    long_horizon_terms: Patterns
    tool_decision_terms: Patterns
    business_decision_terms: Patterns

    # --- Rarity index ---
    primary_data_terms: Patterns
    secondary_data_terms: Patterns
    contrarian_terms: Patterns
    consensus_terms: Patterns
    standard_framework_terms: Patterns
    novel_framework_terms: Patterns
    specific_prediction_terms: Patterns
    vague_prediction_terms: Patterns
    named_case_terms: Patterns
    anonymous_case_terms: Patterns

    # --- Implementation readiness ---
    artifact_checks: tuple  # tuple[tuple[str, re.Pattern], ...]
    resource_terms: Patterns
    timeline_specific_terms: Patterns
    timeline_vague_terms: Patterns
    prerequisite_terms: Patterns

    # --- Obsolescence ---
    outdated_tech: Patterns
    current_practices: Patterns
    critical_practices_watchlist: Patterns

    # --- Hype vs. reality ---
    positive_hype_terms: Patterns
    negative_reality_terms: Patterns
    failure_acknowledgment: re.Pattern

    # --- Regulatory / ethical safety ---
    regulatory_terms: Patterns
    ethical_terms: Patterns
    privacy_terms: Patterns

    # --- Visual / data intensity ---
    diagram_terms: Patterns
    formatting_terms: Patterns
    table_terms: Patterns
    citation_terms: Patterns
    statistic_terms: Patterns

    # --- Bias ---
    success_terms: Patterns
    failure_terms: Patterns
    case_study_terms: Patterns
    example_intro: re.Pattern
    best_case: re.Pattern
    recent_years: Patterns
    older_years: Patterns
    authority_appeal_terms: Patterns
    empirical_evidence_terms: Patterns

    # --- Notable facts ---
    numeric_token: re.Pattern
    superlative: re.Pattern
    contrarian_language: re.Pattern
    importance_vocabulary: re.Pattern

    def with_updates(self, **tables) -> "PatternDictionaries":
        """Return a new dictionary set with some tables replaced."""
        return replace(self, **tables)

    def categories(self) -> dict[str, int]:
        """Table name -> entry count, for introspection endpoints."""
        out: dict[str, int] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, tuple):
                out[f.name] = len(value)
        return out


# ============================================================
# DEFAULT TABLES
# ============================================================

DEFAULT_DICTIONARIES = PatternDictionaries(
    version=DICTIONARY_VERSION,

    weasel_words=(
        "arguably", "virtually", "up to", "helps to", "may contribute", "might",
        "could", "possibly", "generally", "typically", "in some cases",
        "it is believed", "it is thought", "some experts", "many believe",
        "often", "frequently", "in most cases", "tends to", "appears to",
        "seems to", "somewhat", "relatively", "fairly", "rather", "quite",
        "almost",
    ),
    buzzwords=(
        "synergy", "leverage", "best-in-class", "world-class", "cutting-edge",
        "next-generation", "paradigm shift", "holistic", "scalable", "turn-key",
        "robust", "seamless", "empower", "disrupt", "game-changing", "innovative",
        "transform", "revolutionize", "optimize", "streamline", "agile",
        "ecosystem", "end-to-end", "mission-critical", "bleeding-edge",
        "future-proof", "thought leadership", "deep dive", "low-hanging fruit",
        "move the needle", "circle back", "bandwidth", "drill down",
        "synergistic", "next-gen", "state-of-the-art", "best practices",
        "actionable insights", "digital transformation", "value proposition",
    ),
    false_urgency=(
        "window is closing", "immediate action required", "act now",
        "time is running out", "before it's too late", "urgent",
        "don't miss out", "limited time", "critical deadline",
        "must act immediately",
        _rx(r"can['’]t afford to wait"),
        _rx(r"falling behind"),
    ),
    jargon_masking=(
        "synergistic paradigm shift", "holistic approach", "scalable solution",
        "operationalize", "ideate", "solutioning", "productize", "platformize",
        "north star", "boil the ocean", "blue sky thinking", "net-net",
        "learnings", "value-add", "mindshare", "swim lane", "guardrails",
        "unlock value", "reimagine", "double-click on", "unpack",
    ),
    action_verbs=(
        "implement", "deploy", "configure", "install", "execute", "run",
        "create", "build", "test", "validate", "migrate", "patch",
        "update", "remove", "delete", "monitor", "scan", "audit",
        "develop", "integrate", "automate", "schedule", "provision",
        "launch", "compile", "debug", "refactor", "ship",
    ),
    percentage_puffery=(
        _rx(r"\b\d{2,}%\s*(?:growth|increase|improvement|reduction|faster|better)\b"),
    ),
    passive_voice=(
        _rx(r"\b(?:was|were|been|being|is|are)\s+(?:being\s+)?\w+ed\b"),
    ),

    vendor_terms=(
        "our solution", "our platform", "we provide", "our team", "our product",
        "we offer", "we deliver", "our approach", "our methodology", "we enable",
        "our experts", "our consultants", "our framework", "we recommend",
        "our proprietary", "our proven", "we have helped", "our clients",
        "our track record", "we bring",
    ),
    client_terms=(
        "your needs", "your team", "your business", "client requirements",
        "your infrastructure", "your organization", "your goals",
        "your challenges", "customer outcomes", "reader's", "your stakeholders",
        "your budget", "your timeline", "your existing", "internal capability",
    ),
    upsell_terms=(
        "phase 2", "phase 3", "premium tier", "enterprise edition",
        "additional modules", "upgrade", "expand", "advanced package",
        "contact us for", "schedule a demo", "speak with our",
        "full assessment", "comprehensive engagement", "extended support",
    ),
    external_help_terms=(
        "need external", "hire consultant", "engage vendor", "outsource",
        "partner with",
    ),
    internal_build_terms=(
        "build internally", "internal team", "in-house", "self-service",
        "upskill", "train your",
    ),
    lock_in_terms=(
        "proprietary", "only works with", "exclusive", "our platform only",
        "locked", "vendor-specific",
    ),
    open_terms=(
        "open source", "open-source", "interoperable", "vendor-neutral",
        "portable", "standard",
    ),
    client_risk_terms=(
        "client assumes", "customer responsibility", "at your own risk",
        "client-side",
    ),
    vendor_risk_terms=(
        "we guarantee", "our responsibility", "SLA", "we ensure",
        "vendor liability",
    ),

    proprietary_framework_terms=(
        "our framework", "proprietary methodology", "our model", "our scorecard",
        "branded", "our maturity model", "our assessment tool", "trademarked",
        # Capitalised product-style names ("Velocity Index"); case is the signal
        _rx(r"\b[A-Z][a-z]+\s+(?:360|Score|Index|Matrix|Meter|Engine|Suite)\b", 0),
    ),
    generic_framework_terms=(
        "SWOT", "Porter's Five Forces", "PESTEL", "BCG Matrix", "Ansoff",
    ),
    primary_research_terms=(
        "our survey", "our research", "primary research", "we surveyed",
        "our data shows", "benchmark data",
    ),
    secondary_research_terms=(
        "according to", "research shows", "studies indicate", "Gartner",
        "Forrester", "McKinsey",
    ),
    branding_terms=(
        "©", "®", "™", "all rights reserved", "confidential",
    ),
    breadth_terms=(
        "end-to-end", "full lifecycle", "comprehensive", "360",
        "complete solution", "transformation",
    ),
    niche_terms=(
        "specialized", "niche", "focused on", "expertise in", "boutique",
    ),
    legal_terms=(
        "disclaimer", "limitation of liability", "indemnification",
        "confidential", "NDA", "terms and conditions",
    ),

    governance_terms=(
        "steering committee", "board approval", "governance",
        "compliance framework", "change management", "enterprise architecture",
        "center of excellence", "cross-functional", "organizational change",
        "RACI",
    ),
    cross_functional_terms=(
        "cross-functional", "enterprise-wide", "organization-wide",
        "multiple departments", "stakeholders",
    ),
    single_department_terms=(
        "team", "department", "small group", "individual",
    ),
    legacy_terms=(
        "legacy", "modernization", "migration", "existing systems",
        "integration", "backward compatible",
    ),
    greenfield_terms=(
        "greenfield", "build new", "from scratch", "startup", "ground up",
    ),
    large_budget_terms=(
        "multi-year", "capital", "million", "enterprise license",
        "transformation budget",
    ),
    small_budget_terms=(
        "SaaS subscription", "free tier", "pay-as-you-go", "affordable",
        "cost-effective",
    ),
    security_terms=(
        "GDPR", "EU AI Act", "CCPA", "SOC2", "SOC 2", "HIPAA",
        "ISO 27001", "PCI DSS", "NIST", "FedRAMP", "data residency",
        "regulatory compliance", "regulatory framework",
        "penetration testing", "security audit", "zero trust",
    ),

    strategic_terms=(
        "strategy", "strategic", "vision", "roadmap", "market impact",
        "competitive", "transformation",
    ),
    tactical_terms=(
        "step-by-step", "how to", "tutorial", "configure", "install", "code",
        "implementation details",
    ),
    financial_metrics=(
        "ROI", "EBITDA", "NPV", "IRR", "TCO", "CapEx", "OpEx",
        "payback period", "break-even", "revenue", "margin", "profit",
        "cost savings", "cost reduction", "budget",
    ),
    developer_terms=(
        "API", "SDK", "endpoint", "repository", "CLI", "docker",
        "kubernetes", "terraform", "CI/CD", "pipeline", "microservice",
        "REST", "GraphQL", "npm", "pip", "git", "yaml", "json",
    ),
    immediate_horizon_terms=(
        "today", "this week", "immediately", "quick start", "get started",
    ),
    long_horizon_terms=(
        "multi-year", "roadmap", "3-5 years", "long-term", "strategic plan",
    ),
    tool_decision_terms=(
        "tool selection", "product comparison", "feature comparison",
        "which tool",
    ),
    business_decision_terms=(
        "business model", "market entry", "acquisition", "investment",
        "portfolio",
    ),

    primary_data_terms=(
        "our survey", "our research", "we conducted", "our experiment",
        "primary data", "we measured", "our findings",
    ),
    secondary_data_terms=(
        "according to", "research shows", "studies suggest",
        "analysts predict", "reports indicate",
    ),
    contrarian_terms=(
        "however", "contrary to", "despite common belief", "counterintuitively",
        "surprisingly", "unlike popular", "challenges the assumption",
    ),
    consensus_terms=(
        "as everyone knows", "it's well known", "the consensus is",
        "experts agree", "industry standard",
    ),
    standard_framework_terms=(
        "SWOT", "Porter", "PESTEL", "BCG", "Ansoff", "Kotter", "ADKAR",
    ),
    novel_framework_terms=(
        "new model", "novel approach", "our framework", "we propose",
        "new methodology", "original",
    ),
    specific_prediction_terms=(
        _rx(r"\bby 20\d{2}\b"),
        _rx(r"\bwithin \d+ (?:months|years)\b"),
        _rx(r"\b\d+%\s+(?:increase|decrease|growth|reduction)\b"),
    ),
    vague_prediction_terms=(
        "in the future", "someday", "eventually", "over time", "going forward",
    ),
    named_case_terms=(
        _rx(r"\b(?:Google|Amazon|Microsoft|Meta|Apple|Netflix|Tesla|Uber|Airbnb|Spotify)\b"),
    ),
    anonymous_case_terms=(
        "a large bank", "a major retailer", "a leading company",
        "a Fortune 500", "a global firm", "an enterprise client",
    ),

    artifact_checks=(
        ("Code Snippets", _rx(r"```[\s\S]*?```|<code>|\bfunction\s+\w+|\bimport\s+\w+", 0)),
        ("Configuration Files", _rx(r"\b(?:yaml|json|toml|config|settings)\b|\.env\b")),
        ("Checklists", _rx(r"\b(?:checklist|step \d|step-by-step)\b|\[[ x]\]|[☐☑✓]")),
        ("Architecture Diagrams", _rx(r"\b(?:diagram|architecture|flowchart|data flow|sequence diagram)\b")),
        ("Templates", _rx(r"\b(?:template|boilerplate|starter|scaffold)\b")),
        ("API Definitions", _rx(r"\b(?:endpoint|API|REST|GraphQL|swagger|OpenAPI)\b")),
    ),
    resource_terms=(
        "data engineer", "developer", "architect", "analyst", "team of", "FTE",
        "headcount", "role", "years experience",
    ),
    timeline_specific_terms=(
        _rx(r"\b\d+\s*(?:weeks?|months?|days?|sprints?)\b"),
        "Q1", "Q2", "Q3", "Q4", "phase 1", "milestone",
    ),
    timeline_vague_terms=(
        "future state", "in due time", "when ready", "eventually", "TBD",
    ),
    prerequisite_terms=(
        "prerequisite", "requires", "must have", "dependency",
        "before starting", "prior to", "assumes",
    ),

    outdated_tech=(
        "GPT-3", "GPT-3.5", "BERT", "traditional RPA", "rule-based automation",
        "batch processing only", "monolithic architecture",
        "waterfall methodology", "on-premise only", "manual ETL",
    ),
    current_practices=(
        "agentic AI", "agentic workflow", "vector database", "RAG",
        "retrieval augmented", "multi-modal", "LLM", "large language model",
        "fine-tuning", "prompt engineering", "embedding", "transformer",
        "generative AI", "foundation model",
    ),
    critical_practices_watchlist=(
        "agentic AI", "vector database", "RAG", "LLM", "generative AI",
    ),

    positive_hype_terms=(
        "revolutionary", "breakthrough", "game-changing", "incredible",
        "amazing", "unprecedented", "exceptional", "extraordinary",
        "outstanding", "remarkable", "massive opportunity", "enormous potential",
        "significant advantage", "will transform", "will revolutionize",
    ),
    negative_reality_terms=(
        "risk", "challenge", "limitation", "failure", "drawback", "concern",
        "caveat", "downside", "might fail", "key risks", "potential issues",
        "difficult", "complex", "costly",
    ),
    failure_acknowledgment=_rx(
        r"\b(?:fail|failure|why this might|what could go wrong|risk|challenge)\b"
    ),

    regulatory_terms=(
        "GDPR", "EU AI Act", "CCPA", "SOC2", "SOC 2", "HIPAA",
        "ISO 27001", "PCI DSS", "NIST", "FedRAMP", "data residency",
        "regulatory compliance", "regulatory framework",
    ),
    ethical_terms=(
        "bias mitigation", "fairness", "transparency", "explainability",
        "responsible AI", "ethical AI", "accountability", "algorithmic bias",
        "model interpretability", "human oversight",
    ),
    privacy_terms=(
        "PII", "data residency", "consent management", "data protection",
        "anonymization", "pseudonymization", "encryption", "access control",
        "data minimization", "right to be forgotten", "data subject",
    ),

    diagram_terms=(
        "diagram", "figure", "chart", "graph", "illustration", "infographic",
        "visual", "screenshot", "image",
    ),
    formatting_terms=(
        "table", "bullet", "numbered list", "heading", "sidebar", "callout",
        "highlight",
    ),
    table_terms=(
        "table",
        _rx(r"\|.*\|.*\|"),
    ),
    citation_terms=(
        _rx(r"\[\d+\]"),
        _rx(r"\(\d{4}\)"),
        _rx(r"\bet al\."),
        "ibid",
        "op. cit.",
    ),
    statistic_terms=(
        _rx(r"\b\d+(?:[.,]\d+)*%"),
        _rx(r"\$\d+(?:[.,]\d+)*[BMKk]?\b"),
        _rx(r"\b\d+x\b"),
    ),

    success_terms=(
        "success", "achieved", "improved", "increased", "growth",
    ),
    failure_terms=(
        "failed", "failure", "decreased", "lost", "unsuccessful",
    ),
    case_study_terms=(
        "case study", "example", "client story", "use case",
    ),
    example_intro=_rx(r"\b(?:for example|such as|one client|a notable)\b"),
    best_case=_rx(r"\b(?:best|top|leading|successful)\b"),
    recent_years=(
        _rx(r"\b202[4-6]\b"),
    ),
    older_years=(
        _rx(r"\b20[01]\d\b"),
        _rx(r"\b202[0-3]\b"),
    ),
    authority_appeal_terms=(
        "Gartner says", "according to Gartner", "Forrester predicts",
        "McKinsey reports", "experts agree",
    ),
    empirical_evidence_terms=(
        "our data shows", "we measured", "experiment results",
        "statistically significant", "our findings",
    ),

    numeric_token=_rx(r"\b\d+(?:[.,]\d+)*%?"),
    superlative=_rx(r"\b(?:first|only|unique|never|record|breakthrough|largest|fastest)\b"),
    contrarian_language=_rx(
        r"\b(?:however|contrary|surprisingly|counterintuitively|despite|unlike|dropped|decreased|failed)\b"
    ),
    importance_vocabulary=_rx(r"\b(?:key|critical|essential|important|significant)\b"),
)
