"""Shared domain models for trip option selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from trip_options.core.errors import ValidationError


class PaymentType(Enum):
    CASH = "cash"
    POINTS = "points"
    HYBRID = "hybrid"


class OptionKind(Enum):
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"


class ViewMode(Enum):
    SEQUENTIAL = "sequential"
    GROUPED = "grouped"


class TimelineKind(Enum):
    FLIGHT = "flight"
    LOCAL_TRANSPORTATION = "local_transportation"


@dataclass(frozen=True)
class FlexibleCost:
    """Cost of an option in cash, points, or both.

    ``cash_amount`` of ``None`` means the payload did not carry a cash
    figure; ``0.0`` is a real, known cost. ``payment_type`` is derived from
    the amounts when not given explicitly.
    """

    cash_amount: Optional[float] = None
    points_amount: Optional[int] = None
    points_program: Optional[str] = None
    payment_type: Optional[PaymentType] = None
    total_cash_value: Optional[float] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        if self.cash_amount is not None and self.cash_amount < 0:
            raise ValidationError(f"cash amount must be non-negative, got {self.cash_amount}")
        if self.points_amount is not None:
            if self.points_amount < 0:
                raise ValidationError(f"points amount must be non-negative, got {self.points_amount}")
            if not self.points_program:
                raise ValidationError("points program is required when a points amount is set")
        if self.payment_type is None:
            object.__setattr__(self, "payment_type", self._derive_payment_type())
        if self.payment_type is not PaymentType.CASH and self.points_amount is None:
            raise ValidationError(f"{self.payment_type.value} payment requires a points amount and a points program")

    def _derive_payment_type(self) -> PaymentType:
        if self.points_amount is None:
            return PaymentType.CASH
        if self.cash_amount:
            return PaymentType.HYBRID
        return PaymentType.POINTS

    @property
    def cash(self) -> float:
        return self.cash_amount or 0.0

    @property
    def points(self) -> int:
        return self.points_amount or 0

    @property
    def display_text(self) -> str:
        cash_text = f"${int(self.cash)}"
        if self.payment_type is PaymentType.CASH:
            return cash_text
        if self.payment_type is PaymentType.POINTS:
            return f"{self.points_amount:,} {self.points_program} points"
        return f"{cash_text} + {self.points_amount:,} {self.points_program}"

    @property
    def short_display_text(self) -> str:
        cash_text = f"${int(self.cash)}"
        if self.payment_type is PaymentType.CASH:
            return cash_text
        if self.payment_type is PaymentType.POINTS:
            return f"{self.points_amount:,}pts"
        return f"{cash_text}+{self.points_amount:,}pts"


@dataclass(frozen=True)
class NightlyRate:
    price_per_night: float = 0.0
    points_per_night: Optional[int] = None
    loyalty_program: Optional[str] = None


@dataclass(frozen=True)
class Option:
    id: str
    priority: int
    cost: FlexibleCost = field(default_factory=FlexibleCost)
    recommended_selection: Optional[bool] = None
    group_id: Optional[str] = None
    is_round_trip: Optional[bool] = None
    kind: OptionKind = OptionKind.TRANSPORT
    name: Optional[str] = None
    details: Optional[str] = None
    nightly_rate: Optional[NightlyRate] = None


@dataclass(frozen=True)
class Segment:
    """One bookable unit of travel or lodging with its candidate options."""

    id: str
    options: List[Option] = field(default_factory=list)
    date: str = ""
    display_sequence: Optional[int] = None
    selected_option_id: Optional[str] = None
    group_id: Optional[str] = None
    kind: OptionKind = OptionKind.TRANSPORT
    label: Optional[str] = None
    nights: Optional[int] = None

    def option(self, option_id: str) -> Optional[Option]:
        return next((o for o in self.options if o.id == option_id), None)

    @property
    def has_round_trip_option(self) -> bool:
        return any(o.is_round_trip is True for o in self.options)


@dataclass(frozen=True)
class BookingGroup:
    group_id: str
    segments: List[Segment]

    @property
    def is_round_trip(self) -> bool:
        return any(segment.has_round_trip_option for segment in self.segments)

    @property
    def title(self) -> str:
        return "Round Trip Booking" if self.is_round_trip else "Multi-Segment Booking"

    @property
    def subtitle(self) -> str:
        if self.is_round_trip:
            return "Book outbound and return flights together for best rates"
        return f"Book these {len(self.segments)} segments together for best rates"


@dataclass
class GroupedSegments:
    booking_groups: List[BookingGroup] = field(default_factory=list)
    individual_segments: List[Segment] = field(default_factory=list)


SegmentBlock = Union[BookingGroup, Segment]


@dataclass
class CostTotals:
    cash: float = 0.0
    points: int = 0
    points_by_program: Dict[Optional[str], int] = field(default_factory=dict)


@dataclass(frozen=True)
class TravelSummary:
    total_segments: int
    round_trip_segments: int
    totals: CostTotals


@dataclass(frozen=True)
class FlightItem:
    flight_number: str
    airline: str
    date: str
    time: str
    origin: Optional[str] = None
    destination: Optional[str] = None
    cost: FlexibleCost = field(default_factory=FlexibleCost)


@dataclass(frozen=True)
class LocalTransportItem:
    id: str
    time: str
    method: str
    origin: Optional[str] = None
    destination: Optional[str] = None
    date: Optional[str] = None
    cost: FlexibleCost = field(default_factory=FlexibleCost)


@dataclass(frozen=True)
class TimelineEntry:
    kind: TimelineKind
    item: Union[FlightItem, LocalTransportItem]
    time: str
    when: Optional[datetime] = None
    title: Optional[str] = None


@dataclass(frozen=True)
class BookingUpdate:
    kind: OptionKind
    index: int
    booking_reference: str
    booked_date: str
    is_booked: bool = True


@dataclass(frozen=True)
class Recommendation:
    transport_segments: List[Segment] = field(default_factory=list)
    destinations: List[Segment] = field(default_factory=list)
    flights: List[FlightItem] = field(default_factory=list)
    local_transportation: List[LocalTransportItem] = field(default_factory=list)


@dataclass
class RecommendationView:
    mode: ViewMode
    visible_options: Dict[str, List[Option]]
    effective_selections: Dict[str, Optional[str]]
    transport_layout: List[SegmentBlock]
    grouped: GroupedSegments
    timeline: List[TimelineEntry]
    transport_summary: TravelSummary
    accommodation_totals: CostTotals
