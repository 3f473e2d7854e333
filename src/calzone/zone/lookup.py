from __future__ import annotations

from typing import Optional, Union

import numpy as np

from .zone import Instant, Span, Zone

ArrayLike = Union[float, "np.ndarray"]


def span_at(instant: Instant, zone: Zone) -> Optional[Span]:
    """First span of ``zone`` with ``start <= instant < end``, or None."""
    for span in zone.spans:
        if span.contains(instant):
            return span
    return None


def _match(instants: np.ndarray, zone: Zone) -> tuple[np.ndarray, np.ndarray]:
    """Index of the first matching span per instant, plus a found mask."""
    starts = np.array([s.start for s in zone.spans], dtype=np.float64)
    ends = np.array([s.end for s in zone.spans], dtype=np.float64)
    x = instants.reshape(-1, 1)
    hits = (starts <= x) & (x < ends)
    return np.argmax(hits, axis=1), hits.any(axis=1)


def offset_at(instant: ArrayLike, zone: Zone) -> Union[Optional[int], np.ndarray]:
    """
    UTC offset in minutes in effect at ``instant``.

    A NumPy array of instants gives a float array of the same shape, with
    ``nan`` where no span applies.
    """
    if np.ndim(instant) == 0:
        span = span_at(float(instant), zone)
        return None if span is None else span.offset

    x = np.asarray(instant, dtype=np.float64)
    result = np.full(x.size, np.nan)
    if zone.spans:
        idx, found = _match(x.ravel(), zone)
        offsets = np.array([s.offset for s in zone.spans], dtype=np.float64)
        result[found] = offsets[idx[found]]
    return result.reshape(x.shape)


def abbreviation_at(instant: ArrayLike, zone: Zone) -> Union[Optional[str], np.ndarray]:
    """
    Abbreviation in effect at ``instant``.

    A NumPy array of instants gives an object array of the same shape, with
    ``None`` where no span applies.
    """
    if np.ndim(instant) == 0:
        span = span_at(float(instant), zone)
        return None if span is None else span.abbreviation

    x = np.asarray(instant, dtype=np.float64)
    result = np.full(x.size, None, dtype=object)
    if zone.spans:
        idx, found = _match(x.ravel(), zone)
        abbreviations = np.array([s.abbreviation for s in zone.spans], dtype=object)
        result[found] = abbreviations[idx[found]]
    return result.reshape(x.shape)
