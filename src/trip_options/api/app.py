"""FastAPI entrypoint for option selection views."""

from __future__ import annotations

from typing import Dict

from fastapi import FastAPI, HTTPException

from trip_options.adapters.io.exports import serialize_booking_update, serialize_view
from trip_options.adapters.io.payload import parse_recommendation
from trip_options.adapters.storage.kv import FileStore, KeyValueStore, MemoryStore
from trip_options.api.schemas import BookingPayload, SelectionPayload, ViewPayload
from trip_options.core.config import load_paths, store_backend
from trip_options.core.errors import PayloadError, ValidationError
from trip_options.core.models import OptionKind, ViewMode
from trip_options.core.normalization import build_meta, normalize_currency
from trip_options.modules.booking.status import build_booking_update
from trip_options.modules.selection.store import OptionStore
from trip_options.pipeline.orchestrator import Orchestrator

app = FastAPI(title="Trip Options API")


def _build_backend() -> KeyValueStore:
    if store_backend() == "file":
        return FileStore(load_paths().overrides_dir)
    return MemoryStore()


STORE_BACKEND = _build_backend()


def _store(kind: OptionKind = OptionKind.TRANSPORT) -> OptionStore:
    return OptionStore(STORE_BACKEND, kind)


def _kind(value: str) -> OptionKind:
    try:
        return OptionKind(value)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown option kind: {value}") from exc


@app.get("/api/health")
def health() -> Dict[str, object]:
    return {"status": "ok", "meta": build_meta()}


@app.post("/api/view")
def build_view(payload: ViewPayload) -> Dict[str, object]:
    currency = normalize_currency(payload.currency)
    try:
        recommendation = parse_recommendation(payload.recommendation)
        view = Orchestrator(store=_store()).run(
            recommendation,
            mode=ViewMode(payload.mode),
            show_all_options=payload.show_all_options,
        )
    except PayloadError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"view failed: {exc}") from exc
    response = serialize_view(view)
    response["meta"] = build_meta(currency)
    return response


@app.get("/api/selections/{kind}/{entity_id}")
def get_selection(kind: str, entity_id: str) -> Dict[str, object]:
    option_id = _store(_kind(kind)).get(entity_id)
    return {"kind": kind, "entityId": entity_id, "optionId": option_id}


@app.put("/api/selections/{kind}/{entity_id}")
def set_selection(kind: str, entity_id: str, payload: SelectionPayload) -> Dict[str, object]:
    _store(_kind(kind)).set(entity_id, payload.option_id)
    return {"kind": kind, "entityId": entity_id, "optionId": payload.option_id}


@app.post("/api/bookings")
def mark_booked(payload: BookingPayload) -> Dict[str, object]:
    try:
        update = build_booking_update(
            OptionKind(payload.kind),
            payload.index,
            payload.booking_reference,
            payload.booked_date,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return serialize_booking_update(update)
