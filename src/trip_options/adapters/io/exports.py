"""Export helpers for derived recommendation views."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from trip_options.core.models import (
    BookingGroup,
    BookingUpdate,
    CostTotals,
    FlexibleCost,
    FlightItem,
    LocalTransportItem,
    NightlyRate,
    Option,
    RecommendationView,
    Segment,
    SegmentBlock,
    TimelineEntry,
    TravelSummary,
)


def serialize_cost(cost: FlexibleCost) -> Dict[str, Any]:
    return {
        "paymentType": cost.payment_type.value if cost.payment_type else None,
        "cashAmount": cost.cash_amount,
        "pointsAmount": cost.points_amount,
        "pointsProgram": cost.points_program,
        "totalCashValue": cost.total_cash_value,
        "notes": cost.notes,
        "displayText": cost.display_text,
        "shortDisplayText": cost.short_display_text,
    }


def _serialize_rate(rate: Optional[NightlyRate]) -> Optional[Dict[str, Any]]:
    if rate is None:
        return None
    return {
        "pricePerNight": rate.price_per_night,
        "pointsPerNight": rate.points_per_night,
        "loyaltyProgram": rate.loyalty_program,
    }


def serialize_option(option: Option) -> Dict[str, Any]:
    return {
        "id": option.id,
        "priority": option.priority,
        "recommendedSelection": option.recommended_selection,
        "isRoundTrip": option.is_round_trip,
        "groupId": option.group_id,
        "name": option.name,
        "cost": serialize_cost(option.cost),
        "nightlyRate": _serialize_rate(option.nightly_rate),
    }


def _serialize_segment(segment: Segment) -> Dict[str, Any]:
    return {
        "type": "segment",
        "id": segment.id,
        "kind": segment.kind.value,
        "label": segment.label,
        "date": segment.date,
        "displaySequence": segment.display_sequence,
        "groupId": segment.group_id,
        "nights": segment.nights,
    }


def _serialize_group(group: BookingGroup) -> Dict[str, Any]:
    return {
        "type": "booking_group",
        "groupId": group.group_id,
        "title": group.title,
        "subtitle": group.subtitle,
        "isRoundTrip": group.is_round_trip,
        "segments": [_serialize_segment(s) for s in group.segments],
    }


def _serialize_block(block: SegmentBlock) -> Dict[str, Any]:
    if isinstance(block, BookingGroup):
        return _serialize_group(block)
    return _serialize_segment(block)


def serialize_totals(totals: CostTotals) -> Dict[str, Any]:
    return {
        "cash": round(totals.cash, 2),
        "points": totals.points,
        "pointsByProgram": [
            {"program": program, "points": points} for program, points in totals.points_by_program.items()
        ],
    }


def _serialize_summary(summary: TravelSummary) -> Dict[str, Any]:
    return {
        "totalSegments": summary.total_segments,
        "roundTripSegments": summary.round_trip_segments,
        "totals": serialize_totals(summary.totals),
    }


def _serialize_timeline_entry(entry: TimelineEntry) -> Dict[str, Any]:
    item = entry.item
    payload: Dict[str, Any] = {
        "kind": entry.kind.value,
        "title": entry.title,
        "time": entry.time,
        "date": entry.when.isoformat() if entry.when else None,
    }
    if isinstance(item, FlightItem):
        payload.update(
            {
                "flightNumber": item.flight_number,
                "airline": item.airline,
                "from": item.origin,
                "to": item.destination,
                "cost": serialize_cost(item.cost),
            }
        )
    elif isinstance(item, LocalTransportItem):
        payload.update(
            {
                "id": item.id,
                "method": item.method,
                "from": item.origin,
                "to": item.destination,
                "cost": serialize_cost(item.cost),
            }
        )
    return payload


def serialize_booking_update(update: BookingUpdate) -> Dict[str, Any]:
    return {
        "kind": update.kind.value,
        "index": update.index,
        "isBooked": update.is_booked,
        "bookingReference": update.booking_reference,
        "bookedDate": update.booked_date,
    }


def serialize_view(view: RecommendationView) -> Dict[str, Any]:
    options: Dict[str, List[Dict[str, Any]]] = {
        entity_id: [serialize_option(o) for o in visible] for entity_id, visible in view.visible_options.items()
    }
    return {
        "mode": view.mode.value,
        "options": options,
        "selections": dict(view.effective_selections),
        "layout": [_serialize_block(b) for b in view.transport_layout],
        "bookingGroups": [_serialize_group(g) for g in view.grouped.booking_groups],
        "individualSegments": [_serialize_segment(s) for s in view.grouped.individual_segments],
        "timeline": [_serialize_timeline_entry(e) for e in view.timeline],
        "transportSummary": _serialize_summary(view.transport_summary),
        "accommodationTotals": serialize_totals(view.accommodation_totals),
    }
