"""Parsing and formatting of race times and paces.

Race times are ``m:ss`` or ``h:mm:ss``; paces are ``m:ss`` per kilometre.
Parsers never raise: anything that does not match returns 0 seconds.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def _int_parts(text: str) -> list[int] | None:
    try:
        return [int(part) for part in str(text or "").strip().split(":")]
    except ValueError:
        return None


def parse_time(text: str) -> int:
    """Parse ``m:ss`` or ``h:mm:ss`` into seconds; 0 when malformed."""
    parts = _int_parts(text)
    if parts is None:
        return 0
    if len(parts) == 2:
        return parts[0] * 60 + parts[1]
    if len(parts) == 3:
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    return 0


def parse_pace(text: str) -> int:
    """Parse ``m:ss`` pace into seconds per km; 0 when malformed."""
    parts = _int_parts(text)
    if parts is None or len(parts) != 2:
        return 0
    return parts[0] * 60 + parts[1]


def format_pace(sec_per_km: float) -> str:
    """Format seconds-per-km as ``m:ss``."""
    total = round_half_up(sec_per_km)
    return f"{total // 60}:{total % 60:02d}"


def format_time(seconds: float) -> str:
    """Format seconds as ``h:mm:ss``, or ``m:ss`` under an hour."""
    total = round_half_up(seconds)
    h, rem = divmod(total, 3600)
    m, s = divmod(rem, 60)
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"
