import pytest

from trip_options.core.errors import ValidationError
from trip_options.core.models import BookingGroup, FlexibleCost, Option, PaymentType, Segment


def test_payment_type_is_derived_from_amounts():
    assert FlexibleCost(cash_amount=120.0).payment_type is PaymentType.CASH
    assert FlexibleCost(points_amount=25000, points_program="Chase").payment_type is PaymentType.POINTS
    assert FlexibleCost(cash_amount=0, points_amount=25000, points_program="Chase").payment_type is PaymentType.POINTS
    assert FlexibleCost(cash_amount=50, points_amount=10000, points_program="Amex").payment_type is PaymentType.HYBRID


def test_zero_cash_is_distinct_from_unset():
    zero = FlexibleCost(cash_amount=0.0)
    unset = FlexibleCost()
    assert zero.cash_amount == 0.0
    assert unset.cash_amount is None
    assert zero.cash == unset.cash == 0.0


def test_points_without_program_is_rejected():
    with pytest.raises(ValidationError):
        FlexibleCost(points_amount=1000)


def test_points_payment_type_requires_points_data():
    with pytest.raises(ValidationError):
        FlexibleCost(cash_amount=10, payment_type=PaymentType.POINTS)


def test_hybrid_payment_type_requires_points_data():
    with pytest.raises(ValidationError):
        FlexibleCost(cash_amount=10, payment_type=PaymentType.HYBRID)


def test_negative_amounts_are_rejected():
    with pytest.raises(ValidationError):
        FlexibleCost(cash_amount=-1)
    with pytest.raises(ValidationError):
        FlexibleCost(points_amount=-5, points_program="Chase")


def test_display_text_variants():
    assert FlexibleCost(cash_amount=120.9).display_text == "$120"
    assert FlexibleCost(points_amount=25000, points_program="Chase").display_text == "25,000 Chase points"
    hybrid = FlexibleCost(cash_amount=50, points_amount=10000, points_program="Amex")
    assert hybrid.display_text == "$50 + 10,000 Amex"
    assert hybrid.short_display_text == "$50+10,000pts"
    assert FlexibleCost(points_amount=25000, points_program="Chase").short_display_text == "25,000pts"


def test_booking_group_labels():
    plain = Segment(id="a", options=[Option(id="o1", priority=1)])
    round_trip = Segment(id="b", options=[Option(id="o2", priority=1, is_round_trip=True)])

    multi = BookingGroup(group_id="g", segments=[plain, plain])
    assert multi.title == "Multi-Segment Booking"
    assert multi.subtitle == "Book these 2 segments together for best rates"

    rt = BookingGroup(group_id="g", segments=[plain, round_trip])
    assert rt.is_round_trip
    assert rt.title == "Round Trip Booking"
    assert rt.subtitle == "Book outbound and return flights together for best rates"
