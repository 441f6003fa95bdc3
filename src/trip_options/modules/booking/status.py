"""Booking status mutations sent back to the trip service."""

from __future__ import annotations

from datetime import date
from typing import Optional

from trip_options.core.errors import ValidationError
from trip_options.core.models import BookingUpdate, OptionKind
from trip_options.core.normalization import format_booked_date, today


def build_booking_update(
    kind: OptionKind,
    index: int,
    reference: str,
    booked_on: Optional[date] = None,
    *,
    timezone: Optional[str] = None,
) -> BookingUpdate:
    if index < 0:
        raise ValidationError(f"booking index must be non-negative, got {index}")
    reference = (reference or "").strip()
    if not reference:
        raise ValidationError("booking reference is required")
    booked_on = booked_on or today(timezone)
    return BookingUpdate(
        kind=kind,
        index=index,
        booking_reference=reference,
        booked_date=format_booked_date(booked_on),
    )
