"""
Document Fitness Gate

A single cheap LLM call that decides whether a document is the kind
the analyzers are calibrated for (technology vendor and advisory
material) and pulls out display metadata. An unreadable answer lets
the document through: the gate should never block on its own failure.
"""

from __future__ import annotations

from dataclasses import dataclass

from docdetector import decoders as dec
from docdetector.llm import LLMProvider, LLMResponseError
from docdetector.logging import get_logger
from docdetector.models import Record

logger = get_logger("fitness")

SNIPPET_CHARS = 5000

FITNESS_SYSTEM_INSTRUCTION = (
    "You are a document classifier. Return only valid JSON. Be strict but fair on fitness."
)

FITNESS_PROMPT = """You are a document classifier and metadata extractor with two jobs.

JOB 1: CLASSIFICATION. Decide whether the document below suits a forensic engine that specializes in technology vendor and advisory documents.

SUITABLE document types: consulting proposals, vendor whitepapers, training brochures, advisory decks, RFP responses, product marketing documents.
SUITABLE domains: AI/ML, Data & Analytics, Cloud, DevOps, Digital Transformation, Cybersecurity, Governance, Enterprise Software.
NOT SUITABLE: legal contracts, financial reports, HR policies, academic papers, personal letters, news articles, medical records, fiction.

JOB 2: METADATA. Extract display_name (document title), author (organization or person) and summary (1-2 sentences).

=== DOCUMENT SNIPPET ===
{snippet}

Respond with ONLY valid JSON:
{{
  "fit": true,
  "document_type": "brief description",
  "document_domain": "the domain",
  "reason": "one sentence explaining why",
  "display_name": "the document title",
  "author": "organization or person",
  "summary": "1-2 sentence summary"
}}"""


@dataclass(frozen=True)
class FitnessResult(Record):
    fit: bool
    document_type: str
    document_domain: str
    reason: str
    display_name: str = ""
    author: str = ""
    summary: str = ""


INCONCLUSIVE = FitnessResult(
    fit=True,
    document_type="Unknown",
    document_domain="Unknown",
    reason="Fitness check inconclusive.",
)


async def check_fitness(text: str, llm: LLMProvider) -> FitnessResult:
    """Ask the LLM whether the document is in scope for analysis."""
    prompt = FITNESS_PROMPT.format(snippet=text[:SNIPPET_CHARS])
    try:
        raw = await llm.generate_json(
            prompt,
            system_instruction=FITNESS_SYSTEM_INSTRUCTION,
            temperature=0.05,
            max_output_tokens=800,
        )
    except LLMResponseError as e:
        logger.warning("Fitness check unparseable, allowing document: %s", e)
        return INCONCLUSIVE

    return FitnessResult(
        fit=dec.field(raw, "fit", dec.boolean, True),
        document_type=dec.field(raw, "document_type", dec.text(200), "Unknown"),
        document_domain=dec.field(raw, "document_domain", dec.text(200), "Unknown"),
        reason=dec.field(raw, "reason", dec.text(500), ""),
        display_name=dec.field(raw, "display_name", dec.text(300), ""),
        author=dec.field(raw, "author", dec.text(200), ""),
        summary=dec.field(raw, "summary", dec.text(1000), ""),
    )
