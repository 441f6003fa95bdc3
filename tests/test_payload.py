import pytest

from trip_options.adapters.io.files import load_recommendation
from trip_options.adapters.io.payload import parse_recommendation
from trip_options.core.errors import PayloadError
from trip_options.core.models import OptionKind, PaymentType


def test_parse_recommendation_maps_camel_case_fields(sample_payload):
    recommendation = parse_recommendation(sample_payload)

    outbound = recommendation.transport_segments[0]
    assert outbound.id == "seg-out"
    assert outbound.group_id == "rt-1"
    assert outbound.display_sequence == 1
    assert outbound.label == "JFK-CDG"
    assert outbound.kind is OptionKind.TRANSPORT

    points_option = outbound.option("ua-points")
    assert points_option.recommended_selection is True
    assert points_option.cost.payment_type is PaymentType.POINTS
    assert points_option.cost.points_program == "United"

    assert recommendation.transport_segments[2].selected_option_id == "tgv-first"


def test_parse_recommendation_maps_destinations(sample_payload):
    destination = parse_recommendation(sample_payload).destinations[0]
    assert destination.kind is OptionKind.ACCOMMODATION
    assert destination.label == "Paris"
    assert destination.date == "2025-03-01"
    assert destination.options[0].cost.payment_type is PaymentType.HYBRID
    assert all(o.kind is OptionKind.ACCOMMODATION for o in destination.options)


def test_parse_recommendation_collects_flights_in_order(sample_payload):
    recommendation = parse_recommendation(sample_payload)
    assert [f.flight_number for f in recommendation.flights] == ["AF23", "AF22"]
    assert recommendation.flights[0].date == "2025-03-01"
    assert recommendation.flights[0].origin == "JFK"
    transport = recommendation.local_transportation[0]
    assert (transport.origin, transport.destination) == ("Paris", "Lyon")


def test_group_id_alias_is_accepted():
    recommendation = parse_recommendation({"transportSegments": [{"id": "s1", "groupId": "g1"}]})
    assert recommendation.transport_segments[0].group_id == "g1"


def test_empty_payload_is_valid():
    recommendation = parse_recommendation({})
    assert recommendation.transport_segments == []
    assert recommendation.flights == []


def test_schema_errors_raise_payload_error():
    with pytest.raises(PayloadError):
        parse_recommendation({"transportSegments": [{"date": "2025-03-01"}]})


def test_invalid_cost_raises_payload_error():
    payload = {
        "transportSegments": [
            {"id": "s1", "transportOptions": [{"id": "o1", "priority": 1, "cost": {"pointsAmount": 100}}]}
        ]
    }
    with pytest.raises(PayloadError):
        parse_recommendation(payload)


def test_load_recommendation_rejects_non_object(tmp_path):
    path = tmp_path / "payload.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(PayloadError):
        load_recommendation(path)


def test_hotel_nightly_rate_and_nights_are_parsed():
    recommendation = parse_recommendation(
        {
            "destinations": [
                {
                    "id": "d1",
                    "numberOfNights": 3,
                    "accommodationOptions": [
                        {"id": "h1", "priority": 1, "hotel": {"name": "Le Marais", "pricePerNight": 200, "pointsPerNight": 10000}}
                    ],
                }
            ]
        }
    )
    destination = recommendation.destinations[0]
    assert destination.nights == 3
    option = destination.options[0]
    assert option.name == "Le Marais"
    assert option.nightly_rate.price_per_night == 200
    assert option.nightly_rate.points_per_night == 10000
