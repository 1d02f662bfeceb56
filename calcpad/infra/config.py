"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Resolved settings for the standalone calculator window."""

    initial_value: float | None
    result_icon: str | None
    frontend: str
    debug_input: bool


def load_app_config(env: Mapping[str, str] | None = None) -> AppConfig:
    """Build app settings from environment variables.

    Raises ``ValueError`` when ``CALCPAD_INITIAL_VALUE`` is not a number.
    """
    source = os.environ if env is None else env
    raw_initial = source.get("CALCPAD_INITIAL_VALUE", "").strip()
    initial_value: float | None = None
    if raw_initial:
        try:
            initial_value = float(raw_initial)
        except ValueError as exc:
            raise ValueError(f"CALCPAD_INITIAL_VALUE must be numeric, got {raw_initial!r}.") from exc
    result_icon = source.get("CALCPAD_RESULT_ICON", "").strip() or None
    return AppConfig(
        initial_value=initial_value,
        result_icon=result_icon,
        frontend=source.get("CALCPAD_FRONTEND", "qt").strip().lower() or "qt",
        debug_input=source.get("CALCPAD_DEBUG_INPUT", "0").strip() == "1",
    )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        pair = _parse_env_line(raw_line)
        if pair is None:
            continue
        key, value = pair
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load ``.env.app`` then its ``.local`` override; later files win."""
    to_load = tuple(paths) if paths is not None else (".env.app", ".env.app.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _parse_env_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        value = value[1:-1]
    return key, value


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    project_root = Path(__file__).resolve().parents[2]
    return project_root / path
