import pytest


@pytest.fixture
def sample_payload():
    return {
        "transportSegments": [
            {
                "id": "seg-out",
                "date": "2025-03-01",
                "route": "JFK-CDG",
                "displaySequence": 1,
                "bookingGroupId": "rt-1",
                "transportOptions": [
                    {
                        "id": "af-rt",
                        "priority": 2,
                        "isRoundTrip": True,
                        "cost": {"cashAmount": 900.0},
                    },
                    {
                        "id": "ua-points",
                        "priority": 1,
                        "recommendedSelection": True,
                        "cost": {"cashAmount": 0, "pointsAmount": 60000, "pointsProgram": "United"},
                    },
                ],
            },
            {
                "id": "seg-back",
                "date": "2025-03-10",
                "route": "CDG-JFK",
                "displaySequence": 3,
                "bookingGroupId": "rt-1",
                "transportOptions": [
                    {"id": "af-rt-return", "priority": 1, "isRoundTrip": True, "cost": {"cashAmount": 0}},
                ],
            },
            {
                "id": "seg-train",
                "date": "2025-03-05",
                "route": "Paris-Lyon",
                "displaySequence": 2,
                "selectedOptionId": "tgv-first",
                "transportOptions": [
                    {"id": "tgv-second", "priority": 1, "cost": {"cashAmount": 45.5}},
                    {"id": "tgv-first", "priority": 2, "cost": {"cashAmount": 80.0}},
                ],
            },
        ],
        "destinations": [
            {
                "id": "dest-paris",
                "cityName": "Paris",
                "arrivalDate": "2025-03-01",
                "accommodationOptions": [
                    {
                        "id": "hyatt",
                        "priority": 1,
                        "cost": {"cashAmount": 50, "pointsAmount": 20000, "pointsProgram": "Hyatt"},
                    },
                    {"id": "airbnb", "priority": 2, "cost": {"cashAmount": 600}},
                ],
            }
        ],
        "flights": {
            "outbound": {
                "flightNumber": "AF23",
                "airline": "Air France",
                "departure": {"airportCode": "JFK", "date": "2025-03-01", "time": "18:30"},
                "arrival": {"airportCode": "CDG", "date": "2025-03-02", "time": "07:45"},
                "cost": {"cashAmount": 900},
            },
            "returnFlight": {
                "flightNumber": "AF22",
                "airline": "Air France",
                "departure": {"airportCode": "CDG", "date": "2025-03-10", "time": "11:00"},
                "arrival": {"airportCode": "JFK", "date": "2025-03-10", "time": "13:30"},
                "cost": {"cashAmount": 0},
            },
        },
        "majorTransportation": [
            {
                "id": "train-1",
                "time": "2025-03-05 09:15",
                "method": "train",
                "from": "Paris",
                "to": "Lyon",
                "cost": {"cashAmount": 45.5},
            }
        ],
    }
