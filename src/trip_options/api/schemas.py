"""Request schemas for the trip options API."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field


class ViewPayload(BaseModel):
    # validated by parse_recommendation so schema errors share the 400 path
    recommendation: Dict[str, Any]
    mode: Literal["sequential", "grouped"] = "sequential"
    show_all_options: bool = False
    currency: str = "USD"


class SelectionPayload(BaseModel):
    option_id: str = Field(..., min_length=1)


class BookingPayload(BaseModel):
    kind: Literal["transport", "accommodation"]
    index: int = Field(..., ge=0)
    booking_reference: str = Field(..., min_length=1)
    booked_date: Optional[date] = None
