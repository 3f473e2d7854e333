"""
calzone.zone
~~~~~~~~~~~~

Decoding and querying of packed timezone data.  A packed string carries a
zone's abbreviation/offset table and its transition history in base-60; it
decodes to a Zone, an ordered run of half-open spans covering the whole time
line.

Basic usage::

    from calzone.zone import unpack, offset_at, abbreviation_at

    zone = unpack("Europe/Example|CET CEST|-10 -20|0101|1 1 1")
    offset_at(30_000.0, zone)           # → -60
    abbreviation_at(90_000.0, zone)     # → 'CEST'

NumPy arrays of instants are accepted by the lookups::

    import numpy as np
    offset_at(np.array([0.0, 90_000.0]), zone)   # → array([-60., -120.])

Public API
----------
unpack           Packed string → Zone.
offset_at        Offset (minutes) at an instant.
abbreviation_at  Abbreviation at an instant.
Zone, Span       The decoded values.
ZoneError        Base exception for all zone-related errors.
ZoneParseError   Raised with a list of messages when unpacking fails.
"""

from __future__ import annotations

from calzone.zone._exceptions import ZoneError, ZoneParseError
from calzone.zone.base60 import decode_base60, digit_value
from calzone.zone.lookup import abbreviation_at, offset_at, span_at
from calzone.zone.packed import PackedZoneRaw, build_zone, parse, unpack, validate
from calzone.zone.zone import Span, Zone

__all__ = [
    "unpack",
    "parse",
    "validate",
    "build_zone",
    "PackedZoneRaw",
    "offset_at",
    "abbreviation_at",
    "span_at",
    "decode_base60",
    "digit_value",
    "Zone",
    "Span",
    "ZoneError",
    "ZoneParseError",
]
