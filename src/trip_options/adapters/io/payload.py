"""Validation and conversion of recommendation payloads from the trip service."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import pydantic
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from trip_options.core.errors import PayloadError, ValidationError
from trip_options.core.models import (
    FlexibleCost,
    FlightItem,
    LocalTransportItem,
    NightlyRate,
    Option,
    OptionKind,
    PaymentType,
    Recommendation,
    Segment,
)

LOG = logging.getLogger(__name__)


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CostPayload(_Payload):
    cash_amount: Optional[float] = None
    points_amount: Optional[int] = None
    points_program: Optional[str] = None
    payment_type: Optional[PaymentType] = None
    total_cash_value: Optional[float] = None
    notes: Optional[str] = None


class HotelPayload(_Payload):
    name: Optional[str] = None
    price_per_night: float = Field(0.0, ge=0)
    points_per_night: Optional[int] = Field(None, ge=0)
    loyalty_program: Optional[str] = None


class OptionPayload(_Payload):
    id: str
    priority: int = 0
    recommended_selection: Optional[bool] = None
    is_round_trip: Optional[bool] = None
    group_id: Optional[str] = None
    cost: CostPayload = Field(default_factory=CostPayload)
    name: Optional[str] = Field(None, validation_alias=AliasChoices("name", "transportType", "type"))
    details: Optional[str] = None
    hotel: Optional[HotelPayload] = None


class TransportSegmentPayload(_Payload):
    id: str
    date: str = ""
    route: Optional[str] = None
    display_sequence: Optional[int] = None
    group_id: Optional[str] = Field(None, validation_alias=AliasChoices("bookingGroupId", "groupId"))
    selected_option_id: Optional[str] = None
    transport_options: List[OptionPayload] = Field(default_factory=list)


class DestinationPayload(_Payload):
    id: str
    name: Optional[str] = Field(None, validation_alias=AliasChoices("name", "cityName"))
    arrival_date: str = ""
    number_of_nights: Optional[int] = Field(None, ge=0)
    display_sequence: Optional[int] = None
    selected_accommodation_id: Optional[str] = None
    accommodation_options: List[OptionPayload] = Field(default_factory=list)


class FlightEndpointPayload(_Payload):
    airport_code: Optional[str] = None
    date: str = ""
    time: str = ""


class FlightPayload(_Payload):
    flight_number: str = ""
    airline: str = ""
    departure: FlightEndpointPayload = Field(default_factory=FlightEndpointPayload)
    arrival: FlightEndpointPayload = Field(default_factory=FlightEndpointPayload)
    cost: CostPayload = Field(default_factory=CostPayload)


class FlightsPayload(_Payload):
    outbound: Optional[FlightPayload] = None
    return_flight: Optional[FlightPayload] = None
    additional_flights: List[FlightPayload] = Field(default_factory=list)

    def all_flights(self) -> List[FlightPayload]:
        flights = [f for f in (self.outbound, self.return_flight) if f is not None]
        flights.extend(self.additional_flights)
        return flights


class LocalTransportPayload(_Payload):
    id: str
    time: str = ""
    method: str = ""
    origin: Optional[str] = Field(None, validation_alias=AliasChoices("from", "origin"))
    destination: Optional[str] = Field(None, validation_alias=AliasChoices("to", "destination"))
    date: Optional[str] = None
    cost: CostPayload = Field(default_factory=CostPayload)


class RecommendationPayload(_Payload):
    transport_segments: List[TransportSegmentPayload] = Field(default_factory=list)
    destinations: List[DestinationPayload] = Field(default_factory=list)
    flights: Optional[FlightsPayload] = None
    major_transportation: List[LocalTransportPayload] = Field(default_factory=list)


def _cost(payload: CostPayload) -> FlexibleCost:
    return FlexibleCost(
        cash_amount=payload.cash_amount,
        points_amount=payload.points_amount,
        points_program=payload.points_program,
        payment_type=payload.payment_type,
        total_cash_value=payload.total_cash_value,
        notes=payload.notes,
    )


def _option(payload: OptionPayload, kind: OptionKind) -> Option:
    rate = None
    name = payload.name
    if payload.hotel is not None:
        rate = NightlyRate(
            price_per_night=payload.hotel.price_per_night,
            points_per_night=payload.hotel.points_per_night,
            loyalty_program=payload.hotel.loyalty_program,
        )
        name = name or payload.hotel.name
    return Option(
        id=payload.id,
        priority=payload.priority,
        cost=_cost(payload.cost),
        recommended_selection=payload.recommended_selection,
        group_id=payload.group_id,
        is_round_trip=payload.is_round_trip,
        kind=kind,
        name=name,
        details=payload.details,
        nightly_rate=rate,
    )


def _transport_segment(payload: TransportSegmentPayload) -> Segment:
    return Segment(
        id=payload.id,
        options=[_option(o, OptionKind.TRANSPORT) for o in payload.transport_options],
        date=payload.date,
        display_sequence=payload.display_sequence,
        selected_option_id=payload.selected_option_id,
        group_id=payload.group_id,
        kind=OptionKind.TRANSPORT,
        label=payload.route,
    )


def _destination(payload: DestinationPayload) -> Segment:
    return Segment(
        id=payload.id,
        options=[_option(o, OptionKind.ACCOMMODATION) for o in payload.accommodation_options],
        date=payload.arrival_date,
        display_sequence=payload.display_sequence,
        selected_option_id=payload.selected_accommodation_id,
        kind=OptionKind.ACCOMMODATION,
        label=payload.name,
        nights=payload.number_of_nights,
    )


def _flight(payload: FlightPayload) -> FlightItem:
    return FlightItem(
        flight_number=payload.flight_number,
        airline=payload.airline,
        date=payload.departure.date,
        time=payload.departure.time,
        origin=payload.departure.airport_code,
        destination=payload.arrival.airport_code,
        cost=_cost(payload.cost),
    )


def _local_transport(payload: LocalTransportPayload) -> LocalTransportItem:
    return LocalTransportItem(
        id=payload.id,
        time=payload.time,
        method=payload.method,
        origin=payload.origin,
        destination=payload.destination,
        date=payload.date,
        cost=_cost(payload.cost),
    )


def to_recommendation(payload: RecommendationPayload) -> Recommendation:
    try:
        return Recommendation(
            transport_segments=[_transport_segment(s) for s in payload.transport_segments],
            destinations=[_destination(d) for d in payload.destinations],
            flights=[_flight(f) for f in payload.flights.all_flights()] if payload.flights else [],
            local_transportation=[_local_transport(t) for t in payload.major_transportation],
        )
    except ValidationError as exc:
        raise PayloadError(f"invalid cost in recommendation: {exc}") from exc


def parse_recommendation(data: Dict[str, Any]) -> Recommendation:
    try:
        payload = RecommendationPayload.model_validate(data)
    except pydantic.ValidationError as exc:
        LOG.warning("Rejected recommendation payload: %s", exc.error_count())
        raise PayloadError(str(exc)) from exc
    return to_recommendation(payload)
