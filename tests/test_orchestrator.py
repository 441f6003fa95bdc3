import pytest

from trip_options.adapters.io.exports import serialize_view
from trip_options.adapters.io.payload import parse_recommendation
from trip_options.core.errors import StepFailedError
from trip_options.core.models import BookingGroup, OptionKind, Recommendation, ViewMode
from trip_options.modules.selection import OptionStore
from trip_options.pipeline import orchestrator as orchestrator_module
from trip_options.pipeline.orchestrator import Orchestrator


def test_run_builds_sequential_view(sample_payload):
    runner = Orchestrator()
    view = runner.run(parse_recommendation(sample_payload))

    assert [r.name for r in runner.reports] == ["rank", "group", "timeline", "costs"]
    assert all(r.ok for r in runner.reports)

    assert [o.id for o in view.visible_options["seg-out"]] == ["ua-points", "af-rt"]
    assert [o.id for o in view.visible_options["seg-train"]] == ["tgv-first"]
    assert view.effective_selections["seg-train"] == "tgv-first"
    assert view.effective_selections["seg-out"] is None

    assert [s.id for s in view.transport_layout] == ["seg-out", "seg-train", "seg-back"]
    assert [g.group_id for g in view.grouped.booking_groups] == ["rt-1"]
    assert [s.id for s in view.grouped.individual_segments] == ["seg-train"]

    assert [e.title for e in view.timeline] == ["Outbound", None, "Return"]

    summary = view.transport_summary
    assert summary.total_segments == 3
    assert summary.round_trip_segments == 2
    assert summary.totals.cash == 80.0
    assert summary.totals.points == 60000

    assert view.accommodation_totals.cash == 50.0
    assert view.accommodation_totals.points == 20000


def test_run_applies_overrides(sample_payload):
    store = OptionStore()
    store.set("seg-out", "af-rt")
    store.for_kind(OptionKind.ACCOMMODATION).set("dest-paris", "airbnb")

    view = Orchestrator(store=store).run(parse_recommendation(sample_payload), mode=ViewMode.GROUPED)

    assert [o.id for o in view.visible_options["seg-out"]] == ["af-rt"]
    assert view.transport_summary.totals.cash == 980.0
    assert view.transport_summary.totals.points == 0
    assert view.accommodation_totals.cash == 600.0
    assert isinstance(view.transport_layout[0], BookingGroup)
    assert view.transport_layout[0].title == "Round Trip Booking"


def test_serialized_view_is_json_ready(sample_payload):
    payload = serialize_view(Orchestrator().run(parse_recommendation(sample_payload), mode=ViewMode.GROUPED))
    assert payload["mode"] == "grouped"
    assert payload["layout"][0]["type"] == "booking_group"
    assert payload["layout"][1]["id"] == "seg-train"
    assert payload["transportSummary"]["totals"]["pointsByProgram"] == [{"program": "United", "points": 60000}]
    assert payload["timeline"][1]["kind"] == "local_transportation"
    assert payload["options"]["dest-paris"][0]["cost"]["displayText"] == "$50 + 20,000 Hyatt"


def test_failed_step_is_reported(monkeypatch):
    def boom(*_args, **_kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(orchestrator_module, "run_timeline", boom)
    runner = Orchestrator()
    with pytest.raises(StepFailedError):
        runner.run(Recommendation())
    assert runner.reports[-1].name == "timeline"
    assert runner.reports[-1].ok is False
