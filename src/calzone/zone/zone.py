from __future__ import annotations

import dataclasses
from dataclasses import dataclass

# Instants are minutes or milliseconds since an external epoch.
Instant = float


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open interval ``[start, end)`` with a constant offset and abbreviation."""

    start: Instant
    end: Instant
    abbreviation: str
    offset: int

    def contains(self, instant: Instant) -> bool:
        return self.start <= instant < self.end


@dataclass(frozen=True, slots=True)
class Zone:
    """
    A named, ordered run of spans.

    Zones built by ``unpack`` are contiguous and cover every instant from
    -inf to +inf.  A Zone owns its spans; they are kept as a tuple.
    """

    name: str
    spans: tuple[Span, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "spans", tuple(self.spans))

    def with_name(self, name: str) -> Zone:
        return dataclasses.replace(self, name=name)

    def is_contiguous(self) -> bool:
        return all(a.end == b.start for a, b in zip(self.spans, self.spans[1:]))

    def __repr__(self) -> str:
        return f"Zone(name={self.name!r}, spans={len(self.spans)})"
