"""
Collaborator Interfaces

The analysis core does not read files or store results itself. These
protocols describe what it expects from the components that do.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from docdetector.models import AnalysisResult, PageImage


@runtime_checkable
class TextExtractor(Protocol):
    """Turns an uploaded document into plain text plus optional page images."""

    def extract(self, file: Any) -> tuple[str, Sequence[PageImage]]:
        ...


@runtime_checkable
class ResultStore(Protocol):
    """Persists a finished analysis and returns its identifier."""

    def save(self, result: AnalysisResult) -> str:
        ...
