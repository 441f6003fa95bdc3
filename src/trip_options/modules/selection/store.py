"""Option overrides scoped by entity kind."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from trip_options.adapters.storage.kv import KeyValueStore, MemoryStore
from trip_options.core.models import OptionKind

LOG = logging.getLogger(__name__)

KEY_PREFIXES: Dict[OptionKind, str] = {
    OptionKind.TRANSPORT: "selected_transport_option_",
    OptionKind.ACCOMMODATION: "selected_accommodation_",
}


def override_key(kind: OptionKind, entity_id: str) -> str:
    return f"{KEY_PREFIXES[kind]}{entity_id}"


class OptionStore:
    """Client-side selections keyed by segment or destination id.

    Writes are visible to every later read on the same backend. Entries are
    never deleted; a newer choice simply replaces the old one.
    """

    def __init__(self, backend: Optional[KeyValueStore] = None, kind: OptionKind = OptionKind.TRANSPORT) -> None:
        self.backend = backend if backend is not None else MemoryStore()
        self.kind = kind

    def get(self, entity_id: str) -> Optional[str]:
        return self.backend.get(override_key(self.kind, entity_id))

    def set(self, entity_id: str, option_id: str) -> None:
        LOG.debug("Override %s %s -> %s", self.kind.value, entity_id, option_id)
        self.backend.set(override_key(self.kind, entity_id), option_id)

    def for_kind(self, kind: OptionKind) -> "OptionStore":
        if kind is self.kind:
            return self
        return OptionStore(self.backend, kind)
