"""
Decoder for the packed zone format::

    name|abbrev abbrev ...|offset offset ...|indexchars|diff diff ...

Offsets are base-60 minutes, index characters are single base-60 digits
selecting an (abbreviation, offset) pair, and diffs are base-60 minutes
between consecutive transitions.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

import numpy as np

from ._exceptions import ZoneParseError
from .base60 import decode_base60, digit_value
from .zone import Span, Zone

logger = logging.getLogger(__name__)

MS_PER_MINUTE: int = 60_000

_ABBREVIATIONS = re.compile(r"(?:[A-Z]+(?: [A-Z]+)*)?")
_INDICES = re.compile(r"[0-9a-zA-Z]+")

ERR_LENGTHS = "abbrevs and offsets have different lengths"
ERR_INDEX = "highest index is longer than both abbrevs and offsets"
ERR_DIFFS = "diffs is empty"


@dataclass(frozen=True, slots=True)
class PackedZoneRaw:
    """
    Parallel arrays as read from the wire.

    ``abbreviations[i]`` and ``offsets[i]`` describe state ``i``;
    ``indices[k]`` is the state of the k-th span and ``diffs[k]`` the
    millisecond delta to its closing transition.
    """

    name: str
    abbreviations: tuple[str, ...]
    offsets: tuple[int, ...]
    indices: tuple[int, ...]
    diffs: tuple[float, ...]


# ── grammar ──────────────────────────────────────────────────────────────────

def _numbers(segment: str, label: str, errors: list[str]) -> list[float]:
    if not segment:
        return []
    values = []
    for token in segment.split(" "):
        try:
            values.append(decode_base60(token))
        except ZoneParseError:
            errors.append(f"{label}: invalid base-60 number {token!r}")
    return values


def parse(packed: str) -> PackedZoneRaw:
    """Split and decode a packed string without cross-checking its parts."""
    segments = packed.split("|")
    if len(segments) != 5:
        raise ZoneParseError(
            [f"expected 5 '|'-separated segments, got {len(segments)}"]
        )
    name, abbrevs, offsets, indices, diffs = segments

    errors: list[str] = []
    if _ABBREVIATIONS.fullmatch(abbrevs) is None:
        errors.append(f"abbrevs: expected space-separated uppercase tokens, got {abbrevs!r}")
    if _INDICES.fullmatch(indices) is None:
        errors.append(f"indices: expected base-60 digits, got {indices!r}")
    offset_values = _numbers(offsets, "offsets", errors)
    diff_values = _numbers(diffs, "diffs", errors)
    if errors:
        raise ZoneParseError(errors)

    return PackedZoneRaw(
        name=name,
        abbreviations=tuple(abbrevs.split(" ")) if abbrevs else (),
        offsets=tuple(math.floor(v) for v in offset_values),
        indices=tuple(digit_value(ch) for ch in indices),
        diffs=tuple(v * MS_PER_MINUTE for v in diff_values),
    )


# ── validation ───────────────────────────────────────────────────────────────

def validate(raw: PackedZoneRaw) -> list[str]:
    """Return every validation message that applies to ``raw``."""
    errors: list[str] = []
    if len(raw.abbreviations) != len(raw.offsets):
        errors.append(ERR_LENGTHS)
    if raw.indices and max(raw.indices) >= len(raw.abbreviations):
        errors.append(ERR_INDEX)
    if not raw.diffs:
        errors.append(ERR_DIFFS)
    return errors


# ── span construction ────────────────────────────────────────────────────────

def _span(raw: PackedZoneRaw, state: int, start: float, end: float) -> Span:
    assert 0 <= state < min(len(raw.abbreviations), len(raw.offsets)), (
        f"state index {state} out of range in zone {raw.name!r}"
    )
    return Span(start, end, raw.abbreviations[state], raw.offsets[state])


def build_zone(raw: PackedZoneRaw) -> Zone:
    """
    Turn validated parallel arrays into a Zone.

    Transition instants are the running sum of the diffs.  Span k runs from
    the (k-1)-th transition (0 for the first span) to the k-th; the run is
    then widened to -inf and +inf using the states of its outermost spans.
    """
    instants = np.cumsum(np.asarray(raw.diffs, dtype=np.float64))
    bounds = np.concatenate(([0.0], instants, [np.inf]))

    spans: list[Span] = [
        _span(raw, state, float(bounds[i]), float(bounds[i + 1]))
        for i, state in enumerate(raw.indices[: len(bounds) - 1])
    ]

    if spans:
        first, last = spans[0], spans[-1]
        spans.insert(0, Span(-math.inf, first.start, first.abbreviation, first.offset))
        if last.end < math.inf:
            spans.append(Span(last.end, math.inf, last.abbreviation, last.offset))

    return Zone(raw.name, spans)


# ── public entry point ───────────────────────────────────────────────────────

def unpack(packed: str) -> Zone:
    """
    Decode a packed zone string into a Zone.

    Raises ZoneParseError, carrying every applicable message in ``errors``,
    when the string does not follow the grammar or fails validation.
    """
    try:
        raw = parse(packed)
    except ZoneParseError as exc:
        logger.debug("Rejected packed zone: %s", exc.errors)
        raise

    errors = validate(raw)
    if errors:
        logger.debug("Rejected packed zone %r: %s", raw.name, errors)
        raise ZoneParseError(errors)

    zone = build_zone(raw)
    logger.debug(
        "Unpacked zone %r: %d states, %d spans", zone.name, len(raw.offsets), len(zone.spans)
    )
    return zone
