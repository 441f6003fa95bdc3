"""Booking module."""

from trip_options.modules.booking.status import build_booking_update

__all__ = ["build_booking_update"]
