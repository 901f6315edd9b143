"""
Decode-or-Default Combinators

Small typed decoders for untrusted JSON produced by the LLM layers.
A decoder either returns a well-typed, range-checked value or raises
DecodeError; decode_or_default()/field() turn that into the documented
default. Every field the merger reads goes through one of these, so
default substitution is uniform and testable on its own.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional, TypeVar

from docdetector.matcher import clamp, round_half_up

T = TypeVar("T")
Decoder = Callable[[Any], T]


class DecodeError(ValueError):
    """A raw value does not have the expected shape."""


def decode_or_default(raw: Any, decoder: Decoder[T], default: T) -> T:
    if raw is None:
        return default
    try:
        return decoder(raw)
    except DecodeError:
        return default


def field(mapping: Any, key: str, decoder: Decoder[T], default: T) -> T:
    """Decode mapping[key]; default when the mapping or key is missing or bad."""
    if not isinstance(mapping, dict):
        return default
    return decode_or_default(mapping.get(key), decoder, default)


# ============================================================
# PRIMITIVES
# ============================================================

def number(lo: float, hi: float, integer: bool = True, places: int = 2) -> Decoder:
    """Finite int/float, clamped to [lo, hi]; rounded half-up."""
    def decode(raw: Any):
        # bool is an int subclass; true/false is not a score
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise DecodeError(f"expected number, got {type(raw).__name__}")
        if isinstance(raw, float) and not math.isfinite(raw):
            raise DecodeError("non-finite number")
        raw = clamp(raw, lo, hi)
        if integer:
            if isinstance(raw, int):
                return raw
            return int(clamp(round_half_up(raw), lo, hi))
        scale = 10 ** places
        try:
            scaled = float(raw) * scale
        except OverflowError:
            raise DecodeError("number out of range") from None
        if not math.isfinite(scaled):
            raise DecodeError("number out of range")
        return clamp(round_half_up(scaled) / scale, lo, hi)
    return decode


def one_of(*members: str) -> Decoder[str]:
    allowed = frozenset(members)

    def decode(raw: Any) -> str:
        if not isinstance(raw, str) or raw not in allowed:
            raise DecodeError(f"{raw!r} is not one of {sorted(allowed)}")
        return raw
    return decode


def text(max_len: Optional[int] = None) -> Decoder[str]:
    def decode(raw: Any) -> str:
        if not isinstance(raw, str):
            raise DecodeError(f"expected string, got {type(raw).__name__}")
        return raw[:max_len] if max_len is not None else raw
    return decode


def boolean(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise DecodeError(f"expected boolean, got {type(raw).__name__}")
    return raw


def list_of(item: Decoder[T]) -> Decoder[tuple]:
    """A JSON array; items that fail to decode are dropped."""
    def decode(raw: Any) -> tuple:
        if not isinstance(raw, list):
            raise DecodeError(f"expected list, got {type(raw).__name__}")
        out = []
        for element in raw:
            try:
                out.append(item(element))
            except DecodeError:
                continue
        return tuple(out)
    return decode


def record(build: Callable[[dict], T]) -> Decoder[T]:
    """A JSON object handed to build(); build may raise DecodeError to drop it."""
    def decode(raw: Any) -> T:
        if not isinstance(raw, dict):
            raise DecodeError(f"expected object, got {type(raw).__name__}")
        return build(raw)
    return decode
