"""
Composite Scorer

The single aggregation law shared by every classification module and
by the merger when it recomputes an externally supplied module:

    composite = clamp(round(sum(score_i * weight_i * 10)), 0, 100)

Driver scores are 1-10 and weights sum to 1.0, so the composite lands
in 10-100 for well-formed input and is monotone in every driver score.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from docdetector.matcher import clamp, round_half_up
from docdetector.models import ModuleResult, WeightedDriver

WEIGHT_TOLERANCE = 1e-6


def compose(drivers: Sequence[WeightedDriver]) -> int:
    """Weighted composite of driver scores, 0-100."""
    raw = sum(d.score * d.weight for d in drivers) * 10
    return int(clamp(round_half_up(raw), 0, 100))


def validate_weights(drivers: Sequence[WeightedDriver]) -> bool:
    """True when the driver weights sum to 1.0 (within tolerance)."""
    if not drivers:
        return False
    return abs(sum(d.weight for d in drivers) - 1.0) <= WEIGHT_TOLERANCE


@dataclass(frozen=True)
class ConfidenceCurve:
    """Confidence grows with distance of the composite from the midpoint.

    The curve starts at `base` (the floor when unset) and is clamped
    to [floor, ceiling].
    """
    floor: int
    ceiling: int
    slope: float = 1.0
    base: Optional[int] = None

    def __call__(self, composite: int) -> int:
        start = self.floor if self.base is None else self.base
        raw = start + self.slope * abs(composite - 50)
        return int(clamp(round_half_up(raw), self.floor, self.ceiling))


def build_module(
    drivers: Sequence[WeightedDriver],
    classify: Callable[[int], str],
    curve: ConfidenceCurve,
) -> ModuleResult:
    """Compose drivers into a ModuleResult with label and confidence."""
    composite = compose(drivers)
    return ModuleResult(
        drivers=tuple(drivers),
        composite_score=composite,
        confidence=curve(composite),
        classification=classify(composite),
    )
