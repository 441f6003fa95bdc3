"""Pipeline orchestrator for recommendation views."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from trip_options.core.errors import StepFailedError
from trip_options.core.models import Recommendation, RecommendationView, ViewMode
from trip_options.modules.selection.store import OptionStore
from trip_options.pipeline.steps import run_costs, run_group, run_rank, run_timeline

LOG = logging.getLogger(__name__)


@dataclass
class StepReport:
    name: str
    ok: bool
    message: Optional[str] = None
    items: Optional[int] = None


class Orchestrator:
    def __init__(self, store: OptionStore | None = None) -> None:
        self.store = store or OptionStore()
        self.reports: List[StepReport] = []

    def _fail(self, name: str, exc: Exception) -> StepFailedError:
        self.reports.append(StepReport(name=name, ok=False, message=str(exc)))
        LOG.error("%s step failed: %s", name, exc)
        return StepFailedError(f"{name} step failed")

    def run(
        self,
        recommendation: Recommendation,
        mode: ViewMode = ViewMode.SEQUENTIAL,
        show_all_options: bool = False,
    ) -> RecommendationView:
        self.reports.clear()
        try:
            visible, selections = run_rank(recommendation, self.store, show_all_options)
            self.reports.append(StepReport(name="rank", ok=True))
        except Exception as exc:
            raise self._fail("rank", exc) from exc

        try:
            layout, grouped = run_group(recommendation, mode)
            self.reports.append(StepReport(name="group", ok=True, items=len(grouped.booking_groups)))
        except Exception as exc:
            raise self._fail("group", exc) from exc

        try:
            timeline = run_timeline(recommendation)
            self.reports.append(StepReport(name="timeline", ok=True, items=len(timeline)))
        except Exception as exc:
            raise self._fail("timeline", exc) from exc

        try:
            transport_summary, accommodation_totals = run_costs(recommendation, self.store)
            self.reports.append(StepReport(name="costs", ok=True))
        except Exception as exc:
            raise self._fail("costs", exc) from exc

        return RecommendationView(
            mode=mode,
            visible_options=visible,
            effective_selections=selections,
            transport_layout=layout,
            grouped=grouped,
            timeline=timeline,
            transport_summary=transport_summary,
            accommodation_totals=accommodation_totals,
        )
