"""CLI entry point for building recommendation views."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from trip_options.adapters.io.exports import serialize_view
from trip_options.adapters.io.files import load_recommendation, write_view
from trip_options.adapters.storage.kv import FileStore, KeyValueStore, MemoryStore
from trip_options.core.config import load_paths, store_backend
from trip_options.core.errors import PayloadError
from trip_options.core.models import OptionKind, ViewMode
from trip_options.core.normalization import build_meta, normalize_currency
from trip_options.modules.selection.store import OptionStore
from trip_options.pipeline.orchestrator import Orchestrator

LOG = logging.getLogger(__name__)


def _parse_selection(value: str) -> Tuple[str, str]:
    entity_id, sep, option_id = value.partition("=")
    if not sep or not entity_id or not option_id:
        raise argparse.ArgumentTypeError(f"expected ENTITY=OPTION, got {value!r}")
    return entity_id, option_id


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Trip Options CLI")
    parser.add_argument("payload", type=str, help="Recommendation payload JSON path")
    parser.add_argument("--mode", choices=[m.value for m in ViewMode], default=ViewMode.SEQUENTIAL.value, help="Segment layout")
    parser.add_argument("--show-all", action="store_true", help="List every option even when one is selected")
    parser.add_argument("--select", type=_parse_selection, action="append", default=[], help="Transport override ENTITY=OPTION")
    parser.add_argument(
        "--select-stay",
        type=_parse_selection,
        action="append",
        default=[],
        help="Accommodation override ENTITY=OPTION",
    )
    parser.add_argument("--store", choices=["memory", "file"], default=None, help="Override store backend")
    parser.add_argument("--currency", type=str, default=None, help="Currency code for output metadata")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON path (default: outputs/reports/view.json under the repo root)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    backend: KeyValueStore = MemoryStore()
    if store_backend(args.store) == "file":
        backend = FileStore(load_paths().overrides_dir)
    store = OptionStore(backend, OptionKind.TRANSPORT)
    for entity_id, option_id in args.select:
        store.set(entity_id, option_id)
    for entity_id, option_id in args.select_stay:
        store.for_kind(OptionKind.ACCOMMODATION).set(entity_id, option_id)

    try:
        recommendation = load_recommendation(Path(args.payload))
    except PayloadError as exc:
        LOG.error("%s", exc)
        return 1
    view = Orchestrator(store=store).run(recommendation, mode=ViewMode(args.mode), show_all_options=args.show_all)

    payload = serialize_view(view)
    payload["meta"] = build_meta(normalize_currency(args.currency))
    output = Path(args.output) if args.output else load_paths().outputs_dir / "reports" / "view.json"
    write_view(output, payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
