"""Configuration helpers for filesystem layout and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STORE_BACKEND = os.getenv("TRIP_OPTIONS_STORE_BACKEND", "memory")


@dataclass(frozen=True)
class PathsConfig:
    root: Path
    data_dir: Path
    outputs_dir: Path
    overrides_dir: Path

    @staticmethod
    def from_root(root: Path) -> "PathsConfig":
        root = root.resolve()
        data_dir = root / "data"
        outputs_dir = root / "outputs"
        overrides_dir = data_dir / "overrides"
        return PathsConfig(root=root, data_dir=data_dir, outputs_dir=outputs_dir, overrides_dir=overrides_dir)


def resolve_repo_root() -> Path:
    env_root = Path.cwd()
    for parent in [env_root] + list(env_root.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    return env_root


def load_paths() -> PathsConfig:
    return PathsConfig.from_root(resolve_repo_root())


def store_backend(value: str | None = None) -> str:
    backend = (value or DEFAULT_STORE_BACKEND).strip().lower()
    if backend not in {"memory", "file"}:
        return "memory"
    return backend
