"""Normalization helpers for currencies, timezones, and booking dates."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Optional

from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = os.getenv("TRIP_OPTIONS_TIMEZONE", "UTC")
DEFAULT_CURRENCY = os.getenv("TRIP_OPTIONS_CURRENCY", "USD")

BOOKED_DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class NormalizationConfig:
    timezone: str
    currency: str


def normalize_currency(value: Optional[str]) -> str:
    if not value:
        return DEFAULT_CURRENCY
    return value.strip().upper()


def normalize_timezone(value: Optional[str]) -> str:
    if not value:
        value = DEFAULT_TIMEZONE
    try:
        ZoneInfo(value)
    except Exception:
        return "UTC"
    return value


def load_normalization(currency: Optional[str] = None) -> NormalizationConfig:
    return NormalizationConfig(
        timezone=normalize_timezone(DEFAULT_TIMEZONE),
        currency=normalize_currency(currency),
    )


def today(timezone: Optional[str] = None) -> date:
    return datetime.now(ZoneInfo(normalize_timezone(timezone))).date()


def format_booked_date(value: date) -> str:
    return value.strftime(BOOKED_DATE_FORMAT)


def build_meta(currency: Optional[str] = None) -> Dict[str, str]:
    config = load_normalization(currency)
    return {
        "timezone": config.timezone,
        "currency": config.currency,
        "date_format": "YYYY-MM-DD",
    }
